"""Unit tests for configuration validation."""

import pytest
from pydantic import ValidationError
from videoboard.app.core.config import Settings


class TestSettingsValidation:
    """Test cases for Settings validation."""

    def test_default_settings(self):
        """Test that default settings are valid."""
        settings = Settings()

        assert settings.log_level == "INFO"
        assert settings.vote_mode == "ledger"
        assert settings.similarity_min_score == 10
        assert settings.similarity_max_results == 5
        assert set(settings.channel_handles) == {"cbb", "pmgpt"}

    def test_log_level_validation_case_insensitive(self):
        """Test log level is case-insensitive."""
        settings = Settings(log_level="info")
        assert settings.log_level == "INFO"

        settings = Settings(log_level="DeBuG")
        assert settings.log_level == "DEBUG"

    def test_log_level_validation_invalid(self):
        """Test log level rejects invalid values."""
        with pytest.raises(ValidationError, match="log_level must be one of"):
            Settings(log_level="INVALID")

    def test_vote_mode_accepts_both_designs(self):
        """Test vote mode accepts ledger and client, case-insensitively."""
        assert Settings(vote_mode="LEDGER").vote_mode == "ledger"
        assert Settings(vote_mode="client").vote_mode == "client"

    def test_vote_mode_invalid(self):
        """Test vote mode rejects unknown designs."""
        with pytest.raises(ValidationError, match="vote_mode must be"):
            Settings(vote_mode="localstorage")

    def test_positive_ints(self):
        """Test counters must be positive."""
        with pytest.raises(ValidationError, match="Value must be positive"):
            Settings(similarity_min_score=0)

        with pytest.raises(ValidationError, match="Value must be positive"):
            Settings(youtube_max_retries=0)

        with pytest.raises(ValidationError, match="Value must be positive"):
            Settings(admin_reveal_clicks=-1)

    def test_positive_durations(self):
        """Test timeouts and windows must be positive."""
        with pytest.raises(ValidationError, match="Duration must be positive"):
            Settings(youtube_timeout=0)

        with pytest.raises(ValidationError, match="Duration must be positive"):
            Settings(admin_reveal_window_seconds=-2.5)

    def test_similarity_max_results_minimum(self):
        """Test at least one similar suggestion can be returned."""
        with pytest.raises(ValidationError, match="similarity_max_results must be at least 1"):
            Settings(similarity_max_results=0)

    def test_negative_retry_delay(self):
        """Test retry delay cannot be negative."""
        with pytest.raises(ValidationError, match="youtube_retry_delay must not be negative"):
            Settings(youtube_retry_delay=-1)

    def test_cors_origins_list(self):
        """Test CORS origins are split and stripped."""
        settings = Settings(cors_origins="http://a.test, http://b.test")
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]
