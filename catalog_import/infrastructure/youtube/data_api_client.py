"""
YouTube Data API v3 Client

httpx-based implementation of IYouTubeClient. Used when an API key
is configured.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

import httpx

from catalog_import.domain.errors import ContentFetchError, ContentNotFoundError

from .client import ChannelPage, IYouTubeClient, YouTubeVideoResource

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.googleapis.com/youtube/v3"


def _parse_published_at(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        logger.debug(f"Unparseable publishedAt value: {value}")
        return None


class YouTubeDataApiClient(IYouTubeClient):
    """
    YouTube Data API v3 transport.

    Single videos come from ``videos?part=snippet,contentDetails``.
    Channel listings use ``search`` (ordered by date) for IDs and the
    continuation token, then one ``videos`` call for durations.
    """

    VIDEO_PARTS = "snippet,contentDetails"

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        http_client: Optional[httpx.Client] = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: YouTube Data API key
            base_url: API root, overridable for tests
            timeout: Per-request timeout in seconds
            http_client: Optional preconfigured httpx.Client
        """
        if not api_key:
            raise ValueError("YouTube API key is required")
        self.api_key = api_key
        self._client = http_client or httpx.Client(
            base_url=base_url.rstrip("/"), timeout=timeout
        )

    def _get(self, path: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        Issue a GET request and return the decoded JSON body.

        Raises:
            ContentFetchError: On transport errors, non-2xx responses or bad JSON
        """
        request_params = dict(params)
        request_params["key"] = self.api_key
        try:
            response = self._client.get(path, params=request_params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise ContentFetchError(
                f"YouTube API returned HTTP {e.response.status_code} for {path}",
                original_error=e,
            )
        except httpx.HTTPError as e:
            raise ContentFetchError(f"YouTube API request failed: {e}", original_error=e)
        except ValueError as e:
            raise ContentFetchError(
                f"YouTube API returned invalid JSON for {path}", original_error=e
            )

    def _to_resource(self, item: Dict[str, Any]) -> YouTubeVideoResource:
        snippet = item.get("snippet") or {}
        content_details = item.get("contentDetails") or {}
        return YouTubeVideoResource(
            id=item["id"],
            title=snippet.get("title") or "Untitled",
            description=snippet.get("description"),
            published_at=_parse_published_at(snippet.get("publishedAt")),
            duration=content_details.get("duration"),
            default_language=snippet.get("defaultLanguage")
            or snippet.get("defaultAudioLanguage"),
        )

    def _fetch_videos(self, video_ids: List[str]) -> List[YouTubeVideoResource]:
        data = self._get(
            "/videos", {"id": ",".join(video_ids), "part": self.VIDEO_PARTS}
        )
        return [self._to_resource(item) for item in data.get("items") or []]

    def fetch_video(self, video_id: str) -> YouTubeVideoResource:
        videos = self._fetch_videos([video_id])
        if not videos:
            raise ContentNotFoundError(f"Video not found: {video_id}")
        return videos[0]

    def list_channel_videos(
        self, channel_id: str, max_results: int, page_token: Optional[str] = None
    ) -> ChannelPage:
        params = {
            "channelId": channel_id,
            "part": "snippet",
            "order": "date",
            "type": "video",
            "maxResults": max_results,
        }
        if page_token:
            params["pageToken"] = page_token

        search_data = self._get("/search", params)
        video_ids = [
            item["id"]["videoId"]
            for item in search_data.get("items") or []
            if isinstance(item.get("id"), dict) and item["id"].get("videoId")
        ]
        next_page_token = search_data.get("nextPageToken")

        if not video_ids:
            return ChannelPage(items=[], next_page_token=next_page_token)

        # videos endpoint does not preserve the search order
        details = {video.id: video for video in self._fetch_videos(video_ids)}
        items = [details[video_id] for video_id in video_ids if video_id in details]

        logger.debug(
            f"Fetched {len(items)} videos for channel {channel_id} "
            f"(next page: {bool(next_page_token)})"
        )
        return ChannelPage(items=items, next_page_token=next_page_token)

    def close(self) -> None:
        self._client.close()
