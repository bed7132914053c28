"""Application configuration."""

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Database
    database_url: str = Field(
        default="sqlite+aiosqlite:///./videoboard.db",
        description="Database connection URL"
    )

    # CORS
    cors_origins: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        description="Comma-separated list of allowed CORS origins"
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    # Security
    secret_key: str = Field(
        default="change-this-to-a-random-secret-key-in-production",
        description="Secret key for admin session token signing"
    )
    admin_password: str = Field(
        default="admin",
        description="Admin password for management endpoints"
    )
    jwt_algorithm: str = Field(default="HS256", description="JWT algorithm")
    jwt_expiration_hours: int = Field(default=12, description="Admin session lifetime in hours")
    admin_login_path: str = Field(
        default="/admin",
        description="Login surface unauthenticated admin callers are sent to"
    )

    # YouTube Data API (video catalog import)
    youtube_api_key: str | None = Field(default=None, description="YouTube Data API v3 key")
    youtube_api_base_url: str = Field(
        default="https://www.googleapis.com/youtube/v3",
        description="YouTube Data API base URL"
    )
    youtube_timeout: float = Field(default=30.0, description="Catalog request timeout in seconds")
    youtube_max_retries: int = Field(
        default=3,
        description="Attempts for read-only catalog requests"
    )
    youtube_retry_delay: float = Field(
        default=1.0,
        description="Initial backoff delay between catalog retries in seconds"
    )
    channel_handles: dict[str, str] = Field(
        default={"cbb": "OfficialChatbotBuilder", "pmgpt": "PAYMEGPT"},
        description="YouTube handle per suggestion channel"
    )
    import_requester_email: str = Field(
        default="import@videotutorhub.com",
        description="Requester email recorded on imported suggestions"
    )

    # Voting
    vote_mode: str = Field(
        default="ledger",
        description="'ledger' (one vote per email, server enforced) or 'client' (caller tracks votes)"
    )

    # Duplicate detection
    similarity_min_score: int = Field(
        default=10,
        description="Minimum keyword score for a suggestion to count as similar"
    )
    similarity_max_results: int = Field(
        default=5,
        description="Maximum number of similar suggestions returned"
    )

    # Admin link reveal (cosmetic UI affordance)
    admin_reveal_clicks: int = Field(default=5, description="Clicks needed to reveal the admin link")
    admin_reveal_window_seconds: float = Field(
        default=3.0,
        description="Time window in which the reveal clicks must land"
    )

    # Development Settings
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Log level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper

    @field_validator("vote_mode")
    @classmethod
    def validate_vote_mode(cls, v: str) -> str:
        """Validate vote mode is a supported ledger design."""
        v_lower = v.lower()
        if v_lower not in ("ledger", "client"):
            raise ValueError("vote_mode must be 'ledger' or 'client'")
        return v_lower

    @field_validator(
        "jwt_expiration_hours",
        "youtube_max_retries",
        "similarity_min_score",
        "admin_reveal_clicks",
    )
    @classmethod
    def validate_positive_int(cls, v: int) -> int:
        """Validate integer is positive."""
        if v <= 0:
            raise ValueError(f"Value must be positive, got {v}")
        return v

    @field_validator("youtube_timeout", "admin_reveal_window_seconds")
    @classmethod
    def validate_positive_float(cls, v: float) -> float:
        """Validate duration is positive."""
        if v <= 0:
            raise ValueError(f"Duration must be positive, got {v}")
        return v

    @model_validator(mode="after")
    def validate_limits(self) -> "Settings":
        """Validate result limits and retry timings are usable."""
        if self.similarity_max_results < 1:
            raise ValueError("similarity_max_results must be at least 1")
        if self.youtube_retry_delay < 0:
            raise ValueError("youtube_retry_delay must not be negative")
        return self


# Global settings instance
settings = Settings()
