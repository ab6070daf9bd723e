"""
Content Adapter Contract

One adapter per external platform. Adapters fetch metadata and return
NormalizedContent; they never persist anything.
"""

from typing import List, Optional, Protocol, Sequence, runtime_checkable

from .entities import NormalizedContent
from .value_objects import ChannelImportRequest, SourceType, VideoImportRequest


@runtime_checkable
class ContentAdapter(Protocol):
    """
    Capability set every platform adapter provides.

    Rules:
    - ``validate_url`` and ``extract_id`` must not raise on any input.
    - ``import_video`` raises InvalidUrlError for URLs it cannot map to an
      item and ContentFetchError (or a subclass) for transport failures.
    - ``import_channel`` never returns more than ``request.limit`` items and
      raises ChannelFetchError carrying already-normalized items when a
      later page fails.
    """

    @property
    def source_type(self) -> SourceType:
        """Platform identifier this adapter serves."""
        ...

    @property
    def supported_domains(self) -> Sequence[str]:
        """Hostnames or fragments this adapter recognizes in a URL."""
        ...

    def validate_url(self, url: str) -> bool:
        """True iff a stable external ID can be extracted from the URL."""
        ...

    def extract_id(self, url: str) -> Optional[str]:
        """Return the single-item ID in the URL, or None."""
        ...

    def import_video(self, request: VideoImportRequest) -> NormalizedContent:
        """Fetch and normalize one item."""
        ...

    def import_channel(self, request: ChannelImportRequest) -> List[NormalizedContent]:
        """Fetch and normalize up to ``request.limit`` items of a channel."""
        ...
