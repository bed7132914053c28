"""Vote API endpoints."""

import logging
from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from videoboard.app.api.suggestions import to_suggestion_response
from videoboard.app.core.config import settings
from videoboard.app.core.exceptions import VideoBoardException
from videoboard.app.db.base import get_db
from videoboard.app.schemas.suggestion import SuggestionResponse
from videoboard.app.schemas.vote import VoteCreate
from videoboard.app.services.vote_ledger import cast_anonymous_vote, cast_vote

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/suggestions", tags=["votes"])


@router.post(
    "/{suggestion_id}/vote",
    response_model=SuggestionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def vote_suggestion(
    suggestion_id: UUID,
    vote: VoteCreate | None = None,
    db: AsyncSession = Depends(get_db),
) -> SuggestionResponse:
    """
    Vote for a suggestion that is open for voting.

    In ``ledger`` mode each email can vote once per suggestion. In ``client``
    mode the body is ignored and the caller must remember its own votes.
    """
    try:
        if settings.vote_mode == "client":
            suggestion = await cast_anonymous_vote(db, str(suggestion_id))
        else:
            suggestion = await cast_vote(
                db,
                str(suggestion_id),
                vote.voter_email if vote else None,
            )
    except VideoBoardException:
        raise
    except Exception as e:
        logger.error(f"[VOTE] Error voting for suggestion {suggestion_id}: {e}", exc_info=True)
        await db.rollback()
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to vote for suggestion"
        )

    return to_suggestion_response(suggestion)
