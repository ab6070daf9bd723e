"""
Import Configuration

Environment-driven settings for the import pipeline and the factories
that turn them into a YouTube transport and a catalog store.
"""

import logging
import os
from typing import Optional

from catalog_import.infrastructure.youtube import (
    IYouTubeClient,
    YouTubeDataApiClient,
    YtDlpClient,
)
from catalog_import.infrastructure.youtube.data_api_client import DEFAULT_BASE_URL

logger = logging.getLogger(__name__)

CATALOG_STORES = ("redis", "memory")


class ImportConfig:
    """Import pipeline configuration settings."""

    def __init__(self):
        self.youtube_api_key = os.getenv("YOUTUBE_API_KEY", "").strip()
        self.youtube_api_base_url = os.getenv("YOUTUBE_API_BASE_URL", DEFAULT_BASE_URL)
        self.youtube_http_timeout = float(os.getenv("YOUTUBE_HTTP_TIMEOUT", 10))
        self.catalog_store = os.getenv("CATALOG_STORE", "redis").lower()
        self.catalog_key_prefix = os.getenv("CATALOG_KEY_PREFIX", "catalog")
        self.max_workers = int(os.getenv("IMPORT_MAX_WORKERS", 1))

        if self.catalog_store not in CATALOG_STORES:
            raise ValueError(
                f"CATALOG_STORE must be one of {', '.join(CATALOG_STORES)}, "
                f"got {self.catalog_store!r}"
            )
        if self.max_workers < 1:
            raise ValueError("IMPORT_MAX_WORKERS must be at least 1")


def create_youtube_client(config: Optional[ImportConfig] = None) -> IYouTubeClient:
    """
    Build the YouTube transport for the configuration.

    The Data API is used when an API key is set, yt-dlp otherwise.
    """
    if config is None:
        config = ImportConfig()

    if config.youtube_api_key:
        logger.info("Using YouTube Data API transport")
        return YouTubeDataApiClient(
            api_key=config.youtube_api_key,
            base_url=config.youtube_api_base_url,
            timeout=config.youtube_http_timeout,
        )

    logger.info("YOUTUBE_API_KEY not set, using yt-dlp transport")
    return YtDlpClient()
