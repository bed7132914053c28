"""Suggestion model."""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING
from sqlalchemy import String, Text, Integer, DateTime, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from videoboard.app.db.base import Base

if TYPE_CHECKING:
    from videoboard.app.models.vote import Vote


def utcnow() -> datetime:
    """Timezone-naive UTC timestamp (SQLite drops tzinfo anyway)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class SuggestionStatus(str, Enum):
    """Lifecycle states of a suggestion."""
    HIDDEN = "hidden"
    PENDING_REVIEW = "pending_review"
    OPEN_FOR_VOTING = "open_for_voting"
    IN_PROGRESS = "in_progress"
    PUBLISHED = "published"


class Channel(str, Enum):
    """Channel a video is requested for."""
    CBB = "cbb"
    PMGPT = "pmgpt"


class Suggestion(Base):
    """
    Suggestion model representing a requested video.

    Attributes:
        id: Unique suggestion identifier (UUID)
        title: Requested video title
        description: What the video should cover
        requester_name: Name supplied by the requester
        requester_email: Email supplied by the requester (not verified)
        channel: Channel the request belongs to
        status: Current lifecycle state
        video_url: Link to the published video (only once published)
        votes_count: Denormalized number of votes
        created_at: Creation timestamp
    """

    __tablename__ = "suggestions"
    __table_args__ = (
        CheckConstraint("votes_count >= 0", name="ck_suggestions_votes_non_negative"),
    )

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
        index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    requester_name: Mapped[str] = mapped_column(String(255), nullable=False)
    requester_email: Mapped[str] = mapped_column(String(255), nullable=False)
    channel: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=SuggestionStatus.HIDDEN.value,
        index=True,
    )
    video_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    votes_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=utcnow,
        index=True,
    )

    # Relationships
    votes: Mapped[list["Vote"]] = relationship(
        "Vote",
        back_populates="suggestion",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Suggestion(id={self.id}, title={self.title[:50]}, status={self.status})>"
