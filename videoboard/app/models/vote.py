"""Vote model."""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING
from sqlalchemy import String, DateTime, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from videoboard.app.db.base import Base
from videoboard.app.models.suggestion import utcnow

if TYPE_CHECKING:
    from videoboard.app.models.suggestion import Suggestion


class Vote(Base):
    """
    Vote model representing one voter's endorsement of a suggestion.

    Attributes:
        id: Unique vote identifier (UUID)
        suggestion_id: Associated suggestion ID
        voter_email: Normalized email identifying the voter
        created_at: Creation timestamp
    """

    __tablename__ = "votes"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
        index=True,
    )
    suggestion_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("suggestions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    voter_email: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=utcnow,
    )

    # Relationships
    suggestion: Mapped["Suggestion"] = relationship("Suggestion", back_populates="votes")

    # Unique constraint: one vote per voter per suggestion
    __table_args__ = (
        Index("idx_vote_unique", "suggestion_id", "voter_email", unique=True),
    )

    def __repr__(self) -> str:
        return f"<Vote(id={self.id}, suggestion_id={self.suggestion_id}, voter_email={self.voter_email})>"
