"""Suggestion-related schemas."""

from datetime import datetime
from uuid import UUID
from pydantic import BaseModel, Field

from videoboard.app.models.suggestion import Channel, SuggestionStatus


class SuggestionCreate(BaseModel):
    """Schema for submitting a new suggestion."""

    title: str = Field(..., min_length=1, max_length=255, description="Requested video title")
    description: str = Field(..., min_length=1, description="What the video should cover")
    requester_name: str = Field(..., min_length=1, max_length=255, description="Requester's name")
    requester_email: str = Field(..., min_length=1, max_length=255, description="Requester's email")
    channel: Channel = Field(..., description="Channel the video is requested for")


class SuggestionResponse(BaseModel):
    """Schema for suggestion data in responses."""

    id: UUID = Field(..., description="Suggestion ID")
    title: str = Field(..., description="Requested video title")
    description: str = Field(..., description="Request description")
    requester_name: str = Field(..., description="Requester's name")
    channel: Channel = Field(..., description="Channel")
    status: SuggestionStatus = Field(..., description="Lifecycle status")
    status_label: str = Field(..., description="Human readable status")
    video_url: str | None = Field(None, description="Published video link")
    embed_url: str | None = Field(None, description="Embeddable player URL for published videos")
    votes_count: int = Field(..., description="Number of votes")
    created_at: datetime = Field(..., description="Creation timestamp")


class AdminSuggestionResponse(SuggestionResponse):
    """Suggestion as seen on the admin dashboard."""

    requester_email: str = Field(..., description="Requester's email")
    allowed_transitions: list[SuggestionStatus] = Field(
        default_factory=list,
        description="Statuses this suggestion can move to next"
    )


class SuggestionStats(BaseModel):
    """Counts of visible suggestions per status."""

    total: int = Field(0, description="All visible suggestions")
    voting: int = Field(0, description="Open for voting")
    in_progress: int = Field(0, description="In progress")
    published: int = Field(0, description="Published")


class SuggestionListResponse(BaseModel):
    """Schema for public suggestion list."""

    suggestions: list[SuggestionResponse] = Field(..., description="List of suggestions")
    total: int = Field(..., description="Number of suggestions returned")
    stats: SuggestionStats = Field(default_factory=SuggestionStats, description="Visible counts")


class AdminSuggestionListResponse(BaseModel):
    """Schema for admin suggestion list."""

    suggestions: list[AdminSuggestionResponse] = Field(..., description="List of suggestions")
    total: int = Field(..., description="Number of suggestions returned")


class SimilarSuggestionsResponse(BaseModel):
    """Likely duplicates of a title being typed."""

    suggestions: list[SuggestionResponse] = Field(..., description="Most similar first")


class StatusTransition(BaseModel):
    """Schema for an admin status change."""

    status: SuggestionStatus = Field(..., description="Target status")
    video_url: str | None = Field(
        None,
        max_length=500,
        description="Video link, required when publishing"
    )


class SuggestionDeleteResponse(BaseModel):
    """Result of deleting a suggestion."""

    message: str
    suggestion_id: UUID
    deleted_votes: int
