"""
Vote ledger.

Two deployment modes exist:

* ``ledger``: one vote per (suggestion, voter email), enforced by the
  ``votes`` table's unique index. The vote row and the counter increment are
  written in one transaction.
* ``client``: no identity is sent. The caller remembers which suggestions it
  voted for (see ``VoteTracker``) and the server only increments the counter.
  Clearing that local record or switching device allows repeat votes; this
  mode only offers cosmetic protection.
"""

import logging
from typing import Protocol

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from videoboard.app.core.exceptions import (
    DuplicateVoteError,
    MissingFieldError,
    SuggestionNotFoundError,
    SuggestionNotVotableError,
)
from videoboard.app.models.suggestion import Suggestion, SuggestionStatus
from videoboard.app.models.vote import Vote

logger = logging.getLogger(__name__)


def normalize_email(email: str | None) -> str:
    """Canonical form of a voter email used for de-duplication."""
    return (email or "").strip().lower()


async def _get_votable_suggestion(db: AsyncSession, suggestion_id: str) -> Suggestion:
    result = await db.execute(select(Suggestion).where(Suggestion.id == suggestion_id))
    suggestion = result.scalar_one_or_none()

    if not suggestion:
        raise SuggestionNotFoundError(suggestion_id)
    if suggestion.status != SuggestionStatus.OPEN_FOR_VOTING.value:
        raise SuggestionNotVotableError(suggestion_id, suggestion.status)

    return suggestion


async def _has_voted(db: AsyncSession, suggestion_id: str, email: str) -> bool:
    """Whether a ledger row already exists; the unique index still decides races."""
    existing = await db.execute(
        select(Vote.id).where(
            Vote.suggestion_id == suggestion_id,
            Vote.voter_email == email,
        )
    )
    return existing.scalar_one_or_none() is not None


async def _increment_votes(db: AsyncSession, suggestion_id: str) -> bool:
    """Add one vote to the counter while the suggestion is still votable."""
    result = await db.execute(
        update(Suggestion)
        .where(
            Suggestion.id == suggestion_id,
            Suggestion.status == SuggestionStatus.OPEN_FOR_VOTING.value,
        )
        .values(votes_count=Suggestion.votes_count + 1)
        .execution_options(synchronize_session=False)
    )
    return result.rowcount == 1


async def cast_vote(db: AsyncSession, suggestion_id: str, voter_email: str | None) -> Suggestion:
    """
    Record one vote from ``voter_email`` and bump the suggestion's counter.

    Args:
        db: Database session
        suggestion_id: Suggestion being voted for
        voter_email: Identity of the voter

    Returns:
        The suggestion with its updated ``votes_count``

    Raises:
        MissingFieldError: If no voter email is given
        SuggestionNotFoundError: If the suggestion does not exist
        SuggestionNotVotableError: If the suggestion is not open for voting
        DuplicateVoteError: If this voter already voted for the suggestion
    """
    email = normalize_email(voter_email)
    if not email:
        raise MissingFieldError(["voter_email"])

    suggestion = await _get_votable_suggestion(db, suggestion_id)

    if await _has_voted(db, suggestion_id, email):
        raise DuplicateVoteError(suggestion_id, email)

    try:
        db.add(Vote(suggestion_id=suggestion_id, voter_email=email))
        await db.flush()

        if not await _increment_votes(db, suggestion_id):
            # Status changed between the check and the write
            await db.rollback()
            await db.refresh(suggestion)
            raise SuggestionNotVotableError(suggestion_id, suggestion.status)

        await db.commit()
    except IntegrityError:
        # A concurrent request from the same voter won the unique index
        await db.rollback()
        raise DuplicateVoteError(suggestion_id, email)

    await db.refresh(suggestion)

    logger.info(f"[VOTE] {email} voted for suggestion {suggestion_id} (votes: {suggestion.votes_count})")
    return suggestion


async def cast_anonymous_vote(db: AsyncSession, suggestion_id: str) -> Suggestion:
    """
    Increment a suggestion's counter without recording who voted.

    Duplicate protection is the caller's responsibility.
    """
    suggestion = await _get_votable_suggestion(db, suggestion_id)

    if not await _increment_votes(db, suggestion_id):
        await db.rollback()
        await db.refresh(suggestion)
        raise SuggestionNotVotableError(suggestion_id, suggestion.status)

    await db.commit()
    await db.refresh(suggestion)

    logger.info(f"[VOTE] Anonymous vote for suggestion {suggestion_id} (votes: {suggestion.votes_count})")
    return suggestion


class VoteTracker(Protocol):
    """Caller-side record of suggestions already voted for."""

    def has_voted(self, suggestion_id: str) -> bool:
        ...

    def record_vote(self, suggestion_id: str) -> None:
        ...


class InMemoryVoteTracker:
    """VoteTracker kept in a set, e.g. for one client process or tests."""

    def __init__(self, voted: set[str] | None = None):
        self.voted: set[str] = set(voted or ())

    def has_voted(self, suggestion_id: str) -> bool:
        return str(suggestion_id) in self.voted

    def record_vote(self, suggestion_id: str) -> None:
        self.voted.add(str(suggestion_id))


async def cast_tracked_vote(
    db: AsyncSession,
    suggestion_id: str,
    tracker: VoteTracker,
) -> Suggestion:
    """
    Cast an anonymous vote guarded by the caller's ``tracker``.

    Raises:
        DuplicateVoteError: If the tracker already holds this suggestion
    """
    if tracker.has_voted(suggestion_id):
        raise DuplicateVoteError(suggestion_id)

    suggestion = await cast_anonymous_vote(db, suggestion_id)
    tracker.record_vote(suggestion_id)
    return suggestion


async def count_votes(db: AsyncSession, suggestion_id: str) -> int:
    """Number of vote rows referencing a suggestion."""
    result = await db.execute(
        select(func.count(Vote.id)).where(Vote.suggestion_id == suggestion_id)
    )
    return result.scalar_one()
