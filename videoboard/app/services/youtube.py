"""
YouTube Data API client used to import a channel's uploads.

Read-only: resolves a channel handle, walks the uploads playlist and
classifies every video as short, regular video or live.
"""

import asyncio
import logging
import re
from typing import Any

import httpx

from videoboard.app.core.config import settings
from videoboard.app.core.exceptions import VideoCatalogError, VideoCatalogNotConfiguredError
from videoboard.app.schemas.catalog import CatalogVideo, VideoType

logger = logging.getLogger(__name__)

PAGE_SIZE = 50
DESCRIPTION_LIMIT = 500
SHORT_MAX_SECONDS = 60

_DURATION_RE = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?")
_VIDEO_ID_RE = re.compile(
    r"(?:youtube\.com/(?:watch\?v=|embed/)|youtu\.be/)([a-zA-Z0-9_-]{11})"
)


def parse_duration(duration: str | None) -> int:
    """Convert an ISO-8601 ``PT#H#M#S`` duration to seconds (0 if unparseable)."""
    match = _DURATION_RE.match(duration or "")
    if not match:
        return 0
    hours, minutes, seconds = (int(part or 0) for part in match.groups())
    return hours * 3600 + minutes * 60 + seconds


def classify_video(duration_seconds: int, is_live: bool) -> VideoType:
    """Live streams are live; anything up to a minute is a short."""
    if is_live:
        return VideoType.LIVE
    if duration_seconds <= SHORT_MAX_SECONDS:
        return VideoType.SHORT
    return VideoType.VIDEO


def extract_video_id(url: str | None) -> str | None:
    """Pull the 11-character video ID out of a YouTube watch, embed or short link."""
    if not url:
        return None
    match = _VIDEO_ID_RE.search(url)
    return match.group(1) if match else None


def embed_url(url: str | None) -> str | None:
    """Embeddable player URL for a YouTube link."""
    video_id = extract_video_id(url)
    return f"https://www.youtube.com/embed/{video_id}" if video_id else None


def watch_url(video_id: str) -> str:
    """Canonical watch URL for a video ID."""
    return f"https://www.youtube.com/watch?v={video_id}"


class YouTubeClient:
    """Async client for the parts of the YouTube Data API v3 the importer needs."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://www.googleapis.com/youtube/v3",
        timeout: float = 30.0,
        max_retries: int = 3,
        retry_delay: float = 1.0,
    ):
        """
        Initialize YouTube client.

        Args:
            api_key: YouTube Data API key
            base_url: API base URL
            timeout: Request timeout in seconds
            max_retries: Attempts per request before giving up
            retry_delay: Initial delay between attempts, doubled each retry
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_delay = retry_delay

    async def _get(self, endpoint: str, params: dict[str, Any]) -> dict[str, Any]:
        """GET an API endpoint, retrying transport errors and 5xx responses."""
        url = f"{self.base_url}/{endpoint}"
        query = {**params, "key": self.api_key}
        last_error: Exception | None = None

        for attempt in range(1, self.max_retries + 1):
            try:
                async with httpx.AsyncClient() as client:
                    response = await client.get(url, params=query, timeout=self.timeout)
                    response.raise_for_status()
                    return response.json()
            except httpx.HTTPStatusError as e:
                last_error = e
                if e.response.status_code < 500:
                    break
            except httpx.HTTPError as e:
                last_error = e

            if attempt < self.max_retries:
                delay = self.retry_delay * (2 ** (attempt - 1))
                logger.warning(
                    f"[YOUTUBE] {endpoint} failed (attempt {attempt}/{self.max_retries}): "
                    f"{last_error}; retrying in {delay:.1f}s"
                )
                await asyncio.sleep(delay)

        logger.error(f"[YOUTUBE] {endpoint} failed: {last_error}")
        raise VideoCatalogError(endpoint, last_error)

    async def resolve_channel_id(self, handle: str) -> str | None:
        """Look up a channel ID from its @handle."""
        data = await self._get("channels", {"part": "id", "forHandle": handle.lstrip("@")})
        items = data.get("items") or []
        return items[0].get("id") if items else None

    async def get_uploads_playlist_id(self, channel_id: str) -> str | None:
        """Return the playlist holding a channel's uploads."""
        data = await self._get("channels", {"part": "contentDetails", "id": channel_id})
        items = data.get("items") or []
        if not items:
            return None
        return items[0].get("contentDetails", {}).get("relatedPlaylists", {}).get("uploads")

    async def list_channel_videos(self, channel_id: str, max_results: int = 50) -> list[CatalogVideo]:
        """
        List a channel's uploads, newest first.

        Args:
            channel_id: Channel to list
            max_results: Maximum number of videos

        Returns:
            Videos with duration and type details
        """
        playlist_id = await self.get_uploads_playlist_id(channel_id)
        if not playlist_id:
            return []

        basic_info: dict[str, dict[str, Any]] = {}
        page_token = ""

        while len(basic_info) < max_results:
            params = {
                "part": "snippet",
                "playlistId": playlist_id,
                "maxResults": PAGE_SIZE,
            }
            if page_token:
                params["pageToken"] = page_token
            data = await self._get("playlistItems", params)

            items = data.get("items")
            if not items:
                break

            for item in items:
                if len(basic_info) >= max_results:
                    break
                snippet = item.get("snippet", {})
                video_id = snippet.get("resourceId", {}).get("videoId")
                if not video_id:
                    continue
                thumbnails = snippet.get("thumbnails") or {}
                thumbnail = (thumbnails.get("high") or thumbnails.get("default") or {}).get("url")
                basic_info[video_id] = {
                    "title": snippet.get("title", ""),
                    "description": (snippet.get("description") or "")[:DESCRIPTION_LIMIT],
                    "published_at": snippet.get("publishedAt"),
                    "thumbnail": thumbnail,
                }

            page_token = data.get("nextPageToken") or ""
            if not page_token:
                break

        video_ids = list(basic_info)
        videos: list[CatalogVideo] = []

        # Durations and live status come from the videos endpoint, 50 IDs at a time
        for start in range(0, len(video_ids), PAGE_SIZE):
            batch = video_ids[start:start + PAGE_SIZE]
            data = await self._get(
                "videos",
                {"part": "contentDetails,liveStreamingDetails", "id": ",".join(batch)},
            )
            for item in data.get("items") or []:
                info = basic_info.get(item.get("id"))
                if not info:
                    continue
                duration = item.get("contentDetails", {}).get("duration") or "PT0S"
                seconds = parse_duration(duration)
                videos.append(CatalogVideo(
                    id=item["id"],
                    duration=duration,
                    duration_seconds=seconds,
                    video_type=classify_video(seconds, bool(item.get("liveStreamingDetails"))),
                    **info,
                ))

        logger.info(f"[YOUTUBE] Listed {len(videos)} video(s) for channel {channel_id}")
        return videos


_youtube_client: YouTubeClient | None = None


def get_youtube_client() -> YouTubeClient:
    """
    Get singleton YouTube client.

    Raises:
        VideoCatalogNotConfiguredError: If no API key is configured
    """
    global _youtube_client
    if not settings.youtube_api_key:
        raise VideoCatalogNotConfiguredError()
    if _youtube_client is None:
        _youtube_client = YouTubeClient(
            api_key=settings.youtube_api_key,
            base_url=settings.youtube_api_base_url,
            timeout=settings.youtube_timeout,
            max_retries=settings.youtube_max_retries,
            retry_delay=settings.youtube_retry_delay,
        )
    return _youtube_client
