"""
YouTube Infrastructure

YouTube content adapter and its metadata transports.
"""

from .adapter import YouTubeAdapter
from .client import ChannelPage, IYouTubeClient, YouTubeVideoResource
from .data_api_client import YouTubeDataApiClient
from .ytdlp_client import YtDlpClient

__all__ = [
    "ChannelPage",
    "IYouTubeClient",
    "YouTubeAdapter",
    "YouTubeDataApiClient",
    "YouTubeVideoResource",
    "YtDlpClient",
]
