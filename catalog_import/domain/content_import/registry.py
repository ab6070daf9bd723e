"""
Adapter Registry

Holds the registered content adapters and resolves one by declared
source type or by inspecting a URL.
"""

import logging
import threading
from typing import Any, Dict, List

from catalog_import.domain.errors import AdapterNotFoundError, UnsupportedUrlError

from .adapters import ContentAdapter
from .value_objects import SourceType

logger = logging.getLogger(__name__)


class AdapterRegistry:
    """
    Registry of content adapters keyed by source type.

    Adapters are kept in registration order; registering a second adapter
    for the same source type replaces the first in its original position.
    Registration and lookups share a lock, so adapters may be registered
    after resolution has started.

    Example:
        registry = AdapterRegistry(YouTubeAdapter(client))
        adapter = registry.resolve_by_url("https://youtu.be/dQw4w9WgXcQ")
    """

    def __init__(self, *adapters: ContentAdapter):
        self._adapters: Dict[SourceType, ContentAdapter] = {}
        self._lock = threading.RLock()
        for adapter in adapters:
            self.register(adapter)

    def register(self, adapter: ContentAdapter) -> None:
        """
        Register an adapter under its declared source type.

        Args:
            adapter: Adapter to register
        """
        with self._lock:
            if adapter.source_type in self._adapters:
                logger.warning(
                    f"Replacing adapter for source type {adapter.source_type.value}"
                )
            self._adapters[adapter.source_type] = adapter
        logger.debug(f"Registered adapter: {adapter.source_type.value}")

    def resolve(self, source_type: SourceType) -> ContentAdapter:
        """
        Get the adapter for a source type.

        Args:
            source_type: The source type to look up

        Returns:
            The registered adapter

        Raises:
            AdapterNotFoundError: If no adapter serves the source type
        """
        with self._lock:
            adapter = self._adapters.get(source_type)
        if adapter is None:
            name = getattr(source_type, "value", source_type)
            raise AdapterNotFoundError(f"Adapter for source type '{name}' not found")
        return adapter

    def resolve_by_url(self, url: Any) -> ContentAdapter:
        """
        Get the first adapter, in registration order, that accepts the URL.

        Args:
            url: URL to inspect

        Returns:
            The matching adapter

        Raises:
            UnsupportedUrlError: If no adapter accepts the URL
        """
        if isinstance(url, str) and url:
            with self._lock:
                adapters = list(self._adapters.values())
            for adapter in adapters:
                if adapter.validate_url(url):
                    return adapter
        raise UnsupportedUrlError(f"No adapter found for URL: {url}")

    def supported_source_types(self) -> List[SourceType]:
        """Return the registered source types as a new list."""
        with self._lock:
            return list(self._adapters.keys())

    def is_url_supported(self, url: Any) -> bool:
        """True iff ``resolve_by_url`` would succeed; never raises."""
        try:
            self.resolve_by_url(url)
            return True
        except UnsupportedUrlError:
            return False

    def __len__(self) -> int:
        with self._lock:
            return len(self._adapters)
