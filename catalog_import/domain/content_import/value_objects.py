"""
Content Import Value Objects

Immutable value objects and enumerations shared by adapters,
the registry and the import orchestrator.
"""

import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from catalog_import.domain.errors import InvalidRequestError

DEFAULT_CHANNEL_LIMIT = 10
MAX_CHANNEL_LIMIT = 50


def _check_category_id(category_id: Optional[str]) -> None:
    """Category IDs are canonical hyphenated UUID strings."""
    if category_id is None:
        return
    try:
        valid = str(uuid.UUID(category_id)) == category_id.lower()
    except (TypeError, ValueError, AttributeError):
        valid = False
    if not valid:
        raise InvalidRequestError(f"categoryId must be a UUID, got {category_id!r}")


class SourceType(Enum):
    """Platform a piece of content (or an adapter) belongs to."""

    MANUAL = "MANUAL"
    YOUTUBE = "YOUTUBE"
    VIMEO = "VIMEO"
    RSS = "RSS"
    API = "API"

    @classmethod
    def parse(cls, value: Any) -> "SourceType":
        """
        Parse a source type from an enum member or a case-insensitive string.

        Raises:
            InvalidRequestError: If the value names no known source type
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        available = ", ".join(member.value for member in cls)
        raise InvalidRequestError(
            f"Unknown source type: {value!r}. Available: {available}"
        )


class Language(Enum):
    """Catalog content language."""

    ENGLISH = "ENGLISH"
    ARABIC = "ARABIC"


class MediaType(Enum):
    """Catalog content media type."""

    VIDEO = "VIDEO"
    AUDIO = "AUDIO"


class ContentStatus(Enum):
    """Editorial status of a catalog record."""

    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    ARCHIVED = "ARCHIVED"


@dataclass(frozen=True)
class VideoImportRequest:
    """Request to import a single item by URL."""

    url: str
    category_id: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.url, str) or not self.url.strip():
            raise InvalidRequestError("url is required")
        _check_category_id(self.category_id)


@dataclass(frozen=True)
class ChannelImportRequest:
    """
    Request to import the latest items of a channel.

    ``limit`` bounds both the pages requested from the platform and
    the number of items persisted.
    """

    channel_id: str
    limit: int = DEFAULT_CHANNEL_LIMIT
    category_id: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.channel_id, str) or not self.channel_id.strip():
            raise InvalidRequestError("channel_id is required")
        # bool is an int subclass
        if isinstance(self.limit, bool) or not isinstance(self.limit, int):
            raise InvalidRequestError("limit must be an integer")
        if not 1 <= self.limit <= MAX_CHANNEL_LIMIT:
            raise InvalidRequestError(
                f"limit must be between 1 and {MAX_CHANNEL_LIMIT}, got {self.limit}"
            )
        _check_category_id(self.category_id)


@dataclass(frozen=True)
class ImportBySourceTypeRequest:
    """Request to import a URL through an explicitly named source type."""

    source_type: SourceType
    url: str
    category_id: Optional[str] = None
    limit: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, "source_type", SourceType.parse(self.source_type))
        if not isinstance(self.url, str) or not self.url.strip():
            raise InvalidRequestError("url is required")
        if self.limit is not None and (
            isinstance(self.limit, bool)
            or not isinstance(self.limit, int)
            or not 1 <= self.limit <= MAX_CHANNEL_LIMIT
        ):
            raise InvalidRequestError(
                f"limit must be between 1 and {MAX_CHANNEL_LIMIT}, got {self.limit}"
            )
        _check_category_id(self.category_id)

    def to_video_request(self) -> VideoImportRequest:
        return VideoImportRequest(url=self.url, category_id=self.category_id)
