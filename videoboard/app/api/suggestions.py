"""Public suggestion API endpoints."""

import logging
from typing import Literal
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from videoboard.app.core.exceptions import InvalidStateError
from videoboard.app.db.base import get_db
from videoboard.app.models.suggestion import Channel, Suggestion, SuggestionStatus
from videoboard.app.schemas.suggestion import (
    AdminSuggestionResponse,
    SimilarSuggestionsResponse,
    SuggestionCreate,
    SuggestionListResponse,
    SuggestionResponse,
    SuggestionStats,
)
from videoboard.app.services.lifecycle import (
    STATUS_DISPLAY,
    VISIBLE_STATUSES,
    allowed_transitions,
    create_suggestion,
    get_suggestion,
    list_suggestions,
)
from videoboard.app.services.similarity import find_similar
from videoboard.app.services.youtube import embed_url

router = APIRouter(prefix="/suggestions", tags=["suggestions"])

# Logger
logger = logging.getLogger(__name__)


def to_suggestion_response(suggestion: Suggestion) -> SuggestionResponse:
    """
    Convert Suggestion model to its public representation.

    Args:
        suggestion: Suggestion model

    Returns:
        SuggestionResponse object
    """
    current = SuggestionStatus(suggestion.status)
    return SuggestionResponse(
        id=suggestion.id,
        title=suggestion.title,
        description=suggestion.description,
        requester_name=suggestion.requester_name,
        channel=suggestion.channel,
        status=current,
        status_label=STATUS_DISPLAY[current].label,
        video_url=suggestion.video_url,
        embed_url=embed_url(suggestion.video_url) if current == SuggestionStatus.PUBLISHED else None,
        votes_count=suggestion.votes_count,
        created_at=suggestion.created_at,
    )


def to_admin_response(suggestion: Suggestion) -> AdminSuggestionResponse:
    """Convert Suggestion model to the admin dashboard representation."""
    return AdminSuggestionResponse(
        **to_suggestion_response(suggestion).model_dump(),
        requester_email=suggestion.requester_email,
        allowed_transitions=allowed_transitions(suggestion.status),
    )


async def _visible_stats(db: AsyncSession) -> SuggestionStats:
    """Count visible suggestions per status."""
    result = await db.execute(
        select(Suggestion.status, func.count(Suggestion.id))
        .where(Suggestion.status.in_([s.value for s in VISIBLE_STATUSES]))
        .group_by(Suggestion.status)
    )
    counts = dict(result.all())
    return SuggestionStats(
        total=sum(counts.values()),
        voting=counts.get(SuggestionStatus.OPEN_FOR_VOTING.value, 0),
        in_progress=counts.get(SuggestionStatus.IN_PROGRESS.value, 0),
        published=counts.get(SuggestionStatus.PUBLISHED.value, 0),
    )


@router.get("/", response_model=SuggestionListResponse)
async def list_visible_suggestions(
    status_filter: SuggestionStatus | None = Query(None, alias="status"),
    channel: Channel | None = None,
    q: str | None = None,
    sort: Literal["votes", "recent"] = "votes",
    db: AsyncSession = Depends(get_db),
) -> SuggestionListResponse:
    """
    List suggestions visible to the public.

    Hidden and pending-review suggestions never appear here.
    """
    if status_filter is not None and status_filter not in VISIBLE_STATUSES:
        raise InvalidStateError(
            message=f"Status {status_filter.value} is not publicly listed",
            details="Filter by open_for_voting, in_progress or published"
        )

    statuses = [status_filter] if status_filter else VISIBLE_STATUSES
    suggestions = await list_suggestions(
        db,
        statuses=statuses,
        channel=channel.value if channel else None,
        search=q,
        sort=sort,
    )

    responses = [to_suggestion_response(s) for s in suggestions]
    return SuggestionListResponse(
        suggestions=responses,
        total=len(responses),
        stats=await _visible_stats(db),
    )


@router.get("/similar", response_model=SimilarSuggestionsResponse)
async def similar_suggestions(
    title: str = "",
    db: AsyncSession = Depends(get_db),
) -> SimilarSuggestionsResponse:
    """
    Suggest existing requests that look like ``title``.

    Advisory: a failed lookup yields an empty list instead of an error.
    """
    try:
        matches = await find_similar(db, title)
    except Exception as e:
        logger.warning(f"[SIMILAR] Similarity lookup failed: {e}", exc_info=True)
        matches = []

    return SimilarSuggestionsResponse(suggestions=[to_suggestion_response(s) for s in matches])


@router.get("/{suggestion_id}", response_model=SuggestionResponse)
async def get_visible_suggestion(
    suggestion_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> SuggestionResponse:
    """Get a publicly visible suggestion."""
    suggestion = await get_suggestion(db, str(suggestion_id), visible_only=True)
    return to_suggestion_response(suggestion)


@router.post("/", response_model=SuggestionResponse, status_code=status.HTTP_201_CREATED)
async def submit_suggestion(
    suggestion_data: SuggestionCreate,
    db: AsyncSession = Depends(get_db),
) -> SuggestionResponse:
    """
    Submit a new video request.

    The suggestion starts hidden and only becomes public once an admin
    opens it for voting.
    """
    suggestion = await create_suggestion(db, suggestion_data)
    return to_suggestion_response(suggestion)
