"""
YouTube Transport Interface

Abstracts how raw video metadata is fetched from YouTube so the adapter
can run on the Data API or on yt-dlp interchangeably.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional


@dataclass(frozen=True)
class YouTubeVideoResource:
    """Raw, not yet normalized metadata for one YouTube video."""

    id: str
    title: str
    description: Optional[str] = None
    published_at: Optional[datetime] = None
    duration: Any = None  # ISO-8601 token from the Data API, seconds from yt-dlp
    default_language: Optional[str] = None
    media_hint: Optional[str] = None


@dataclass(frozen=True)
class ChannelPage:
    """One page of a channel listing plus the opaque continuation token."""

    items: List[YouTubeVideoResource] = field(default_factory=list)
    next_page_token: Optional[str] = None


class IYouTubeClient(ABC):
    """
    Abstract YouTube metadata transport.

    Implementations translate library-specific failures into
    ContentFetchError / ContentNotFoundError.
    """

    @abstractmethod
    def fetch_video(self, video_id: str) -> YouTubeVideoResource:
        """
        Fetch metadata for one video.

        Raises:
            ContentNotFoundError: If the video does not exist
            ContentFetchError: If YouTube cannot be reached
        """
        pass  # pragma: no cover

    @abstractmethod
    def list_channel_videos(
        self, channel_id: str, max_results: int, page_token: Optional[str] = None
    ) -> ChannelPage:
        """
        Fetch one page of a channel's videos, newest first.

        Args:
            channel_id: YouTube channel ID
            max_results: Page size requested from YouTube (1-50)
            page_token: Continuation token from the previous page

        Raises:
            ContentFetchError: If YouTube cannot be reached
        """
        pass  # pragma: no cover
