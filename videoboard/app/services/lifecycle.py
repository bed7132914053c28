"""
Suggestion lifecycle: creation, status workflow, listing and deletion.

Workflow::

    hidden -> pending_review -> open_for_voting -> in_progress -> published

with reverse edges pending_review -> hidden (reject),
open_for_voting -> pending_review and in_progress -> open_for_voting.
Published is terminal.
"""

import logging
from dataclasses import dataclass
from typing import Iterable

from sqlalchemy import delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from videoboard.app.core.exceptions import (
    InvalidTransitionError,
    MissingFieldError,
    MissingVideoUrlError,
    SuggestionNotFoundError,
)
from videoboard.app.models.suggestion import Suggestion, SuggestionStatus
from videoboard.app.models.vote import Vote
from videoboard.app.schemas.suggestion import SuggestionCreate

logger = logging.getLogger(__name__)


TRANSITIONS: dict[SuggestionStatus, frozenset[SuggestionStatus]] = {
    SuggestionStatus.HIDDEN: frozenset({SuggestionStatus.PENDING_REVIEW}),
    SuggestionStatus.PENDING_REVIEW: frozenset({
        SuggestionStatus.OPEN_FOR_VOTING,
        SuggestionStatus.HIDDEN,
    }),
    SuggestionStatus.OPEN_FOR_VOTING: frozenset({
        SuggestionStatus.IN_PROGRESS,
        SuggestionStatus.PENDING_REVIEW,
    }),
    SuggestionStatus.IN_PROGRESS: frozenset({
        SuggestionStatus.PUBLISHED,
        SuggestionStatus.OPEN_FOR_VOTING,
    }),
    SuggestionStatus.PUBLISHED: frozenset(),
}

VISIBLE_STATUSES: frozenset[SuggestionStatus] = frozenset({
    SuggestionStatus.OPEN_FOR_VOTING,
    SuggestionStatus.IN_PROGRESS,
    SuggestionStatus.PUBLISHED,
})

REQUIRED_FIELDS = ("title", "description", "requester_name", "requester_email", "channel")


@dataclass(frozen=True)
class StatusDisplay:
    """How a status is presented to users."""

    label: str
    color: str
    public: bool


STATUS_DISPLAY: dict[SuggestionStatus, StatusDisplay] = {
    SuggestionStatus.HIDDEN: StatusDisplay("Hidden", "gray", public=False),
    SuggestionStatus.PENDING_REVIEW: StatusDisplay("Pending Review", "orange", public=False),
    SuggestionStatus.OPEN_FOR_VOTING: StatusDisplay("Open for Voting", "teal", public=True),
    SuggestionStatus.IN_PROGRESS: StatusDisplay("In Progress", "yellow", public=True),
    SuggestionStatus.PUBLISHED: StatusDisplay("Published", "green", public=True),
}

# Every status needs a transition row and a display descriptor
_missing = [s.value for s in SuggestionStatus if s not in TRANSITIONS or s not in STATUS_DISPLAY]
if _missing:
    raise RuntimeError(f"Lifecycle tables incomplete for status(es): {_missing}")
if {s for s, d in STATUS_DISPLAY.items() if d.public} != VISIBLE_STATUSES:
    raise RuntimeError("STATUS_DISPLAY public flags disagree with VISIBLE_STATUSES")
del _missing


def allowed_transitions(status: SuggestionStatus | str) -> list[SuggestionStatus]:
    """Return the legal next states, in workflow order."""
    current = SuggestionStatus(status)
    return [s for s in SuggestionStatus if s in TRANSITIONS[current]]


def can_transition(current: SuggestionStatus | str, target: SuggestionStatus | str) -> bool:
    """Whether ``current -> target`` is an edge of the workflow."""
    return SuggestionStatus(target) in TRANSITIONS[SuggestionStatus(current)]


def is_visible(status: SuggestionStatus | str) -> bool:
    """Whether a suggestion in this state appears on the public listing."""
    return SuggestionStatus(status) in VISIBLE_STATUSES


async def create_suggestion(db: AsyncSession, data: SuggestionCreate) -> Suggestion:
    """
    Create a suggestion in the ``hidden`` state.

    Args:
        db: Database session
        data: Requester-supplied fields

    Returns:
        The persisted suggestion

    Raises:
        MissingFieldError: If any requester field is blank
    """
    values = {name: getattr(data, name) for name in REQUIRED_FIELDS}
    missing = [
        name for name, value in values.items()
        if value is None or not str(getattr(value, "value", value)).strip()
    ]
    if missing:
        raise MissingFieldError(missing)

    suggestion = Suggestion(
        title=data.title.strip(),
        description=data.description.strip(),
        requester_name=data.requester_name.strip(),
        requester_email=data.requester_email.strip(),
        channel=data.channel.value,
        status=SuggestionStatus.HIDDEN.value,
        video_url=None,
        votes_count=0,
    )
    db.add(suggestion)
    await db.commit()
    await db.refresh(suggestion)

    logger.info(f"[SUGGESTION-CREATE] Created suggestion {suggestion.id} for channel {suggestion.channel}")
    return suggestion


async def get_suggestion(
    db: AsyncSession,
    suggestion_id: str,
    visible_only: bool = False,
) -> Suggestion:
    """
    Fetch a suggestion by ID.

    Suggestions not visible to the public are reported as missing when
    ``visible_only`` is set.
    """
    result = await db.execute(select(Suggestion).where(Suggestion.id == suggestion_id))
    suggestion = result.scalar_one_or_none()

    if not suggestion or (visible_only and not is_visible(suggestion.status)):
        raise SuggestionNotFoundError(suggestion_id)

    return suggestion


async def list_suggestions(
    db: AsyncSession,
    statuses: Iterable[SuggestionStatus] | None = None,
    channel: str | None = None,
    search: str | None = None,
    sort: str = "votes",
    limit: int | None = None,
) -> list[Suggestion]:
    """
    List suggestions with optional filters.

    Args:
        db: Database session
        statuses: Restrict to these states (all states when None)
        channel: Restrict to one channel
        search: Case-insensitive substring matched against title and description
        sort: "votes" (most voted first) or "recent" (newest first)
        limit: Maximum number of rows

    Returns:
        Matching suggestions
    """
    query = select(Suggestion)

    if statuses is not None:
        query = query.where(Suggestion.status.in_([SuggestionStatus(s).value for s in statuses]))
    if channel:
        query = query.where(Suggestion.channel == channel)
    if search and search.strip():
        # autoescape makes % and _ match literally
        text = search.strip()
        query = query.where(or_(
            Suggestion.title.icontains(text, autoescape=True),
            Suggestion.description.icontains(text, autoescape=True),
        ))

    if sort == "recent":
        query = query.order_by(Suggestion.created_at.desc())
    else:
        query = query.order_by(Suggestion.votes_count.desc(), Suggestion.created_at.desc())

    if limit is not None:
        query = query.limit(limit)

    result = await db.execute(query)
    return list(result.scalars().all())


async def transition_suggestion(
    db: AsyncSession,
    suggestion_id: str,
    target: SuggestionStatus | str,
    video_url: str | None = None,
) -> Suggestion:
    """
    Move a suggestion to another lifecycle state.

    Args:
        db: Database session
        suggestion_id: Suggestion to update
        target: Requested state
        video_url: Link to the finished video, required when publishing

    Returns:
        The updated suggestion

    Raises:
        SuggestionNotFoundError: If the suggestion does not exist
        InvalidTransitionError: If ``target`` is not a successor of the current state
        MissingVideoUrlError: If publishing without a video URL
    """
    target = SuggestionStatus(target)
    suggestion = await get_suggestion(db, suggestion_id)
    current = SuggestionStatus(suggestion.status)

    if not can_transition(current, target):
        raise InvalidTransitionError(suggestion_id, current.value, target.value)

    if target == SuggestionStatus.PUBLISHED:
        if not video_url or not video_url.strip():
            raise MissingVideoUrlError(suggestion_id)
        suggestion.video_url = video_url.strip()

    suggestion.status = target.value
    await db.commit()
    await db.refresh(suggestion)

    logger.info(f"[TRANSITION] Suggestion {suggestion_id}: {current.value} -> {target.value}")
    return suggestion


async def delete_suggestion(db: AsyncSession, suggestion_id: str) -> int:
    """
    Delete a suggestion and all of its votes.

    Votes are removed first, then the suggestion, in one transaction.

    Returns:
        Number of votes deleted

    Raises:
        SuggestionNotFoundError: If the suggestion does not exist
    """
    suggestion = await get_suggestion(db, suggestion_id)

    try:
        result = await db.execute(delete(Vote).where(Vote.suggestion_id == suggestion_id))
        deleted_votes = result.rowcount or 0
        await db.delete(suggestion)
        await db.commit()
    except Exception:
        await db.rollback()
        raise

    logger.info(f"[DELETE-SUGGESTION] Deleted suggestion {suggestion_id} and {deleted_votes} vote(s)")
    return deleted_votes
