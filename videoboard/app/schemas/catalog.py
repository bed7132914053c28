"""Video catalog import schemas."""

from datetime import datetime
from enum import Enum
from uuid import UUID
from pydantic import BaseModel, ConfigDict, Field

from videoboard.app.models.suggestion import Channel


class VideoType(str, Enum):
    """Kind of uploaded item."""
    SHORT = "short"
    VIDEO = "video"
    LIVE = "live"


class CatalogVideo(BaseModel):
    """One uploaded item of a channel."""

    id: str = Field(..., description="YouTube video ID")
    title: str = Field(..., description="Video title")
    description: str = Field("", description="Video description (truncated)")
    published_at: datetime | None = Field(None, description="Publish timestamp")
    thumbnail: str | None = Field(None, description="Thumbnail URL")
    duration: str = Field("PT0S", description="ISO-8601 duration")
    duration_seconds: int = Field(0, description="Duration in seconds")
    video_type: VideoType = Field(VideoType.VIDEO, description="short, video or live")


class CatalogVideoEntry(CatalogVideo):
    """Catalog video annotated for the import screen."""

    already_imported: bool = Field(False, description="Referenced by an existing suggestion")


class CatalogListResponse(BaseModel):
    """Videos of a channel."""

    channel: Channel
    channel_id: str
    videos: list[CatalogVideoEntry]
    new_count: int = Field(..., description="Videos not imported yet")


class CatalogImportRequest(BaseModel):
    """Schema for importing catalog videos as published suggestions."""

    model_config = ConfigDict(populate_by_name=True)

    channel: Channel = Field(..., description="Channel to import from")
    video_ids: list[str] = Field(
        default_factory=list,
        description="Videos to import; all new videos when empty"
    )
    max_results: int = Field(
        100,
        alias="max",
        ge=1,
        le=500,
        description="Maximum videos fetched from the channel"
    )


class CatalogImportResponse(BaseModel):
    """Result of a catalog import."""

    imported: int
    skipped: int
    suggestion_ids: list[UUID]
