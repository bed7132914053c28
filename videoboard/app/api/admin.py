"""Admin API endpoints: review workflow, deletion and catalog import."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from videoboard.app.api.suggestions import to_admin_response
from videoboard.app.core.exceptions import VideoBoardException
from videoboard.app.core.security import require_admin
from videoboard.app.db.base import get_db
from videoboard.app.models.suggestion import Channel, SuggestionStatus
from videoboard.app.schemas.catalog import (
    CatalogImportRequest,
    CatalogImportResponse,
    CatalogListResponse,
    CatalogVideoEntry,
)
from videoboard.app.schemas.suggestion import (
    AdminSuggestionListResponse,
    AdminSuggestionResponse,
    StatusTransition,
    SuggestionDeleteResponse,
)
from videoboard.app.services.catalog_import import (
    existing_video_ids,
    fetch_channel_videos,
    import_catalog_videos,
)
from videoboard.app.services.lifecycle import (
    delete_suggestion,
    list_suggestions,
    transition_suggestion,
)
from videoboard.app.services.youtube import get_youtube_client

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])

logger = logging.getLogger(__name__)


@router.get("/suggestions", response_model=AdminSuggestionListResponse)
async def list_all_suggestions(
    status_filter: SuggestionStatus | None = Query(None, alias="status"),
    channel: Channel | None = None,
    db: AsyncSession = Depends(get_db),
) -> AdminSuggestionListResponse:
    """List suggestions in any status, newest first."""
    suggestions = await list_suggestions(
        db,
        statuses=[status_filter] if status_filter else None,
        channel=channel.value if channel else None,
        sort="recent",
    )
    responses = [to_admin_response(s) for s in suggestions]
    return AdminSuggestionListResponse(suggestions=responses, total=len(responses))


@router.post("/suggestions/{suggestion_id}/transition", response_model=AdminSuggestionResponse)
async def change_status(
    suggestion_id: UUID,
    transition: StatusTransition,
    db: AsyncSession = Depends(get_db),
) -> AdminSuggestionResponse:
    """
    Move a suggestion along the review workflow.

    Publishing requires ``video_url`` in the same request.
    """
    suggestion = await transition_suggestion(
        db,
        str(suggestion_id),
        transition.status,
        video_url=transition.video_url,
    )
    return to_admin_response(suggestion)


@router.delete("/suggestions/{suggestion_id}", response_model=SuggestionDeleteResponse)
async def remove_suggestion(
    suggestion_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> SuggestionDeleteResponse:
    """Delete a suggestion together with its votes. Irreversible."""
    try:
        deleted_votes = await delete_suggestion(db, str(suggestion_id))
    except VideoBoardException:
        raise
    except Exception as e:
        logger.error(f"[DELETE-SUGGESTION] Error deleting {suggestion_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete suggestion"
        )

    return SuggestionDeleteResponse(
        message="Suggestion deleted successfully",
        suggestion_id=suggestion_id,
        deleted_votes=deleted_votes,
    )


@router.get("/catalog/{channel}/videos", response_model=CatalogListResponse)
async def list_catalog_videos(
    channel: Channel,
    max_results: int = Query(50, alias="max", ge=1, le=500),
    db: AsyncSession = Depends(get_db),
) -> CatalogListResponse:
    """List a channel's uploads, flagging those already imported."""
    client = get_youtube_client()
    channel_id, videos = await fetch_channel_videos(client, channel, max_results=max_results)
    known_ids = await existing_video_ids(db)

    entries = [
        CatalogVideoEntry(**video.model_dump(), already_imported=video.id in known_ids)
        for video in videos
    ]
    return CatalogListResponse(
        channel=channel,
        channel_id=channel_id,
        videos=entries,
        new_count=sum(1 for entry in entries if not entry.already_imported),
    )


@router.post("/catalog/import", response_model=CatalogImportResponse)
async def import_catalog(
    request: CatalogImportRequest,
    db: AsyncSession = Depends(get_db),
) -> CatalogImportResponse:
    """
    Import channel videos as published suggestions.

    Only the requested ``video_ids`` are imported, or every new video when
    none are given. Videos already linked from a suggestion are skipped.
    """
    client = get_youtube_client()
    _, videos = await fetch_channel_videos(client, request.channel, max_results=request.max_results)

    if request.video_ids:
        wanted = set(request.video_ids)
        videos = [video for video in videos if video.id in wanted]

    created, skipped = await import_catalog_videos(db, request.channel, videos)
    return CatalogImportResponse(
        imported=len(created),
        skipped=skipped,
        suggestion_ids=[s.id for s in created],
    )
