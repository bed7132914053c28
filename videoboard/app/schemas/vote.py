"""Vote-related schemas."""

from pydantic import BaseModel, Field


class VoteCreate(BaseModel):
    """Schema for casting a vote."""

    voter_email: str | None = Field(
        None,
        max_length=255,
        description="Voter's email (required when votes are tracked per email)"
    )
