"""
yt-dlp YouTube Client

Infrastructure implementation of IYouTubeClient using yt-dlp. Needs no
API key, so it is the default transport.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from yt_dlp import YoutubeDL
from yt_dlp import utils as ytdlp_utils

from catalog_import.domain.errors import ContentFetchError, ContentNotFoundError

from .client import ChannelPage, IYouTubeClient, YouTubeVideoResource

logger = logging.getLogger(__name__)

NOT_FOUND_MARKERS = ("video unavailable", "not available", "does not exist", "404")


def _release_date(info: Dict[str, Any]) -> Optional[datetime]:
    """Best release date yt-dlp reports: timestamp first, then upload_date."""
    timestamp = info.get("release_timestamp") or info.get("timestamp")
    if isinstance(timestamp, (int, float)):
        return datetime.fromtimestamp(timestamp, tz=timezone.utc)

    upload_date = info.get("upload_date")
    if upload_date:
        try:
            return datetime.strptime(upload_date, "%Y%m%d").replace(tzinfo=timezone.utc)
        except ValueError:
            logger.debug(f"Unparseable upload_date: {upload_date}")
    return None


class YtDlpClient(IYouTubeClient):
    """
    yt-dlp based YouTube transport.

    Channel pages are read from the channel's uploads tab with flat
    extraction; the continuation token is the 1-based playlist index of
    the next page.
    """

    METADATA_OPTS = {
        "quiet": True,
        "no_warnings": True,
        "skip_download": True,
    }

    WATCH_URL = "https://www.youtube.com/watch?v={video_id}"
    CHANNEL_URL = "https://www.youtube.com/channel/{channel_id}/videos"

    def __init__(self, extra_opts: Optional[Dict[str, Any]] = None):
        self.extra_opts = dict(extra_opts or {})

    def _extract(self, url: str, opts: Dict[str, Any]) -> Dict[str, Any]:
        options = {**self.METADATA_OPTS, **self.extra_opts, **opts}
        try:
            with YoutubeDL(options) as ydl:
                info = ydl.extract_info(url, download=False)
        except ytdlp_utils.DownloadError as e:
            message = str(e)
            if any(marker in message.lower() for marker in NOT_FOUND_MARKERS):
                raise ContentNotFoundError(f"Video not found: {message}", original_error=e)
            raise ContentFetchError(f"Failed to extract metadata: {message}", original_error=e)
        except Exception as e:
            raise ContentFetchError(
                f"Unexpected error during metadata extraction: {e}", original_error=e
            )

        if not info:
            raise ContentNotFoundError(f"No metadata returned for {url}")
        return info

    def _to_resource(self, info: Dict[str, Any]) -> YouTubeVideoResource:
        return YouTubeVideoResource(
            id=info["id"],
            title=info.get("title") or "Untitled",
            description=info.get("description"),
            published_at=_release_date(info),
            duration=info.get("duration"),
            default_language=info.get("language"),
            media_hint=info.get("media_type"),
        )

    def fetch_video(self, video_id: str) -> YouTubeVideoResource:
        info = self._extract(self.WATCH_URL.format(video_id=video_id), {})
        return self._to_resource(info)

    def list_channel_videos(
        self, channel_id: str, max_results: int, page_token: Optional[str] = None
    ) -> ChannelPage:
        try:
            start = int(page_token) if page_token else 1
        except ValueError:
            raise ContentFetchError(f"Invalid continuation token: {page_token}")

        end = start + max_results - 1
        info = self._extract(
            self.CHANNEL_URL.format(channel_id=channel_id),
            {
                "extract_flat": "in_playlist",
                "playliststart": start,
                "playlistend": end,
            },
        )

        entries = [entry for entry in info.get("entries") or [] if entry and entry.get("id")]
        items = [self._to_resource(entry) for entry in entries]

        # A full page means the channel may have more uploads
        next_page_token = str(end + 1) if len(entries) >= max_results else None
        return ChannelPage(items=items, next_page_token=next_page_token)
