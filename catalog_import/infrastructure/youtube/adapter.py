"""
YouTube Content Adapter

ContentAdapter implementation for YouTube. Extracts video IDs from URLs,
pulls metadata through an IYouTubeClient and normalizes it.
"""

import logging
import re
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from catalog_import.domain.content_import import (
    ChannelImportRequest,
    NormalizedContent,
    SourceType,
    VideoImportRequest,
    map_language,
    map_media_type,
    parse_duration,
)
from catalog_import.domain.errors import (
    ChannelFetchError,
    ContentFetchError,
    InvalidUrlError,
)

from .client import IYouTubeClient, YouTubeVideoResource

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 50

# Consecutive pages without usable videos before a channel import gives up
MAX_EMPTY_PAGES = 5

VIDEO_ID_PATTERNS = [
    re.compile(r"(?:youtube\.com/watch\?(?:.*&)?v=|youtu\.be/|youtube\.com/embed/)([A-Za-z0-9_-]+)"),
    re.compile(r"youtube\.com/(?:v|shorts)/([A-Za-z0-9_-]+)"),
]


class YouTubeAdapter:
    """
    Content adapter for YouTube videos and channels.

    Satisfies the ContentAdapter protocol; all network access goes
    through the injected client.
    """

    source_type = SourceType.YOUTUBE
    supported_domains: Tuple[str, ...] = ("youtube.com", "youtu.be", "m.youtube.com")

    WATCH_URL = "https://www.youtube.com/watch?v={video_id}"

    def __init__(self, client: IYouTubeClient):
        """
        Initialize the adapter.

        Args:
            client: YouTube transport (Data API or yt-dlp)
        """
        self.client = client

    def extract_id(self, url: str) -> Optional[str]:
        """
        Extract the video ID from a YouTube URL.

        Supports watch, youtu.be, embed, /v/ and shorts URLs. Channel and
        playlist URLs yield None.
        """
        if not isinstance(url, str):
            return None
        for pattern in VIDEO_ID_PATTERNS:
            match = pattern.search(url)
            if match:
                return match.group(1)
        return None

    def validate_url(self, url: str) -> bool:
        if not isinstance(url, str):
            return False
        return (
            any(domain in url for domain in self.supported_domains)
            and self.extract_id(url) is not None
        )

    def import_video(self, request: VideoImportRequest) -> NormalizedContent:
        """
        Import a single video.

        Args:
            request: Video import request

        Returns:
            NormalizedContent for the video

        Raises:
            InvalidUrlError: If no video ID can be extracted
            ContentNotFoundError: If the video does not exist
            ContentFetchError: If YouTube cannot be reached
        """
        video_id = self.extract_id(request.url)
        if not video_id:
            raise InvalidUrlError("Invalid YouTube URL")

        try:
            video = self.client.fetch_video(video_id)
        except ContentFetchError as e:
            raise type(e)(f"Failed to import video: {e}", original_error=e)

        logger.debug(f"Fetched YouTube video {video_id}")
        return self._normalize(video, request.url)

    def import_channel(self, request: ChannelImportRequest) -> List[NormalizedContent]:
        """
        Import up to ``request.limit`` of a channel's latest videos.

        Pages through the channel until the limit is reached or YouTube
        reports no further page. Pages can come back empty while still
        carrying a token (private or deleted uploads); paging stops after
        MAX_EMPTY_PAGES of those in a row.

        Raises:
            ChannelFetchError: If a page fetch fails; carries the videos
                normalized before the failure
        """
        videos: List[NormalizedContent] = []
        page_token: Optional[str] = None
        limit = request.limit
        empty_pages = 0

        while True:
            page_size = min(MAX_PAGE_SIZE, limit - len(videos))
            try:
                page = self.client.list_channel_videos(
                    request.channel_id, page_size, page_token
                )
            except ContentFetchError as e:
                raise ChannelFetchError(
                    f"Failed to import channel: {e}",
                    partial_items=videos,
                    original_error=e,
                )

            for video in page.items:
                if len(videos) >= limit:
                    break
                videos.append(
                    self._normalize(video, self.WATCH_URL.format(video_id=video.id))
                )

            empty_pages = 0 if page.items else empty_pages + 1
            page_token = page.next_page_token
            if not page_token or len(videos) >= limit:
                break
            if empty_pages >= MAX_EMPTY_PAGES:
                logger.warning(
                    f"Stopped paging channel {request.channel_id} after "
                    f"{empty_pages} empty pages"
                )
                break

        logger.info(f"Fetched {len(videos)} videos from channel {request.channel_id}")
        return videos

    def _normalize(self, video: YouTubeVideoResource, source_url: str) -> NormalizedContent:
        return NormalizedContent(
            name=video.title,
            description=video.description,
            language=map_language(video.default_language or "en"),
            duration_sec=parse_duration(video.duration),
            release_date=video.published_at or datetime.now(timezone.utc),
            media_url=self.WATCH_URL.format(video_id=video.id),
            media_type=map_media_type(video.media_hint or "video"),
            source_type=self.source_type,
            source_url=source_url,
            external_id=video.id,
        )
