"""Import a channel's existing videos as published suggestions."""

import logging
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from videoboard.app.core.config import settings
from videoboard.app.core.exceptions import VideoCatalogError
from videoboard.app.models.suggestion import Channel, Suggestion, SuggestionStatus
from videoboard.app.schemas.catalog import CatalogVideo
from videoboard.app.services.youtube import YouTubeClient, extract_video_id, watch_url

logger = logging.getLogger(__name__)

IMPORT_REQUESTER_NAME = "YouTube Import"
NO_DESCRIPTION = "No description"


async def existing_video_ids(db: AsyncSession, strict: bool = False) -> set[str]:
    """
    IDs of all videos already referenced by a suggestion.

    Args:
        db: Database session
        strict: Re-raise lookup failures instead of treating them as
            "nothing imported yet". Writers must pass True.

    Returns:
        Set of YouTube video IDs
    """
    try:
        result = await db.execute(
            select(Suggestion.video_url).where(Suggestion.video_url.is_not(None))
        )
        urls = result.scalars().all()
    except Exception as e:
        if strict:
            logger.error(f"[IMPORT] Could not load existing video URLs: {e}")
            raise
        logger.warning(f"[IMPORT] Could not load existing video URLs: {e}")
        return set()

    return {video_id for video_id in map(extract_video_id, urls) if video_id}


async def fetch_channel_videos(
    client: YouTubeClient,
    channel: Channel,
    max_results: int = 50,
) -> tuple[str, list[CatalogVideo]]:
    """
    Resolve a channel's handle and list its uploads.

    Returns:
        Tuple of (channel_id, videos)

    Raises:
        VideoCatalogError: If the channel cannot be found or the API fails
    """
    handle = settings.channel_handles.get(channel.value)
    if not handle:
        raise VideoCatalogError(f"channel lookup for {channel.value}", ValueError("no handle configured"))

    channel_id = await client.resolve_channel_id(handle)
    if not channel_id:
        raise VideoCatalogError(f"channel lookup for @{handle}", ValueError("channel not found"))

    videos = await client.list_channel_videos(channel_id, max_results=max_results)
    return channel_id, videos


async def import_catalog_videos(
    db: AsyncSession,
    channel: Channel,
    videos: Sequence[CatalogVideo],
) -> tuple[list[Suggestion], int]:
    """
    Create a published suggestion for every video not referenced yet.

    Args:
        db: Database session
        channel: Channel the videos belong to
        videos: Videos to import

    Returns:
        Tuple of (created suggestions, number of skipped videos)

    Raises:
        SQLAlchemyError: If the already-imported lookup fails; nothing is written
    """
    known_ids = await existing_video_ids(db, strict=True)
    created: list[Suggestion] = []
    skipped = 0

    for video in videos:
        if video.id in known_ids:
            skipped += 1
            continue

        suggestion = Suggestion(
            title=video.title[:255] or video.id,
            description=video.description or NO_DESCRIPTION,
            requester_name=IMPORT_REQUESTER_NAME,
            requester_email=settings.import_requester_email,
            channel=channel.value,
            status=SuggestionStatus.PUBLISHED.value,
            video_url=watch_url(video.id),
            votes_count=0,
        )
        db.add(suggestion)
        created.append(suggestion)
        known_ids.add(video.id)

    if created:
        try:
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        for suggestion in created:
            await db.refresh(suggestion)

    logger.info(f"[IMPORT] Imported {len(created)} video(s) for {channel.value}, skipped {skipped}")
    return created, skipped
