"""
Content Import Entities

Normalized content produced by adapters and the catalog records
created from it.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

from .value_objects import ContentStatus, Language, MediaType, SourceType


def _parse_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


@dataclass(frozen=True)
class NormalizedContent:
    """
    Platform-independent content record produced by an adapter.

    Transport format between adapters and the orchestrator; never
    persisted as-is. ``(external_id, source_type)`` is the natural key
    used for deduplication.
    """

    name: str
    language: Language
    duration_sec: int
    release_date: datetime
    media_url: str
    media_type: MediaType
    source_type: SourceType
    source_url: str
    external_id: str
    description: Optional[str] = None

    def __post_init__(self):
        """Validate required fields."""
        if not self.external_id:
            raise ValueError("External ID is required")
        if self.duration_sec < 0:
            raise ValueError("Duration must be non-negative")

    @property
    def natural_key(self) -> Tuple[str, SourceType]:
        return self.external_id, self.source_type

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "language": self.language.value,
            "durationSec": self.duration_sec,
            "releaseDate": self.release_date.isoformat(),
            "mediaUrl": self.media_url,
            "mediaType": self.media_type.value,
            "sourceType": self.source_type.value,
            "sourceUrl": self.source_url,
            "externalId": self.external_id,
        }


@dataclass
class CatalogRecord:
    """
    Entity representing a persisted catalog program.

    Created exactly once per unique (external_id, source_type).
    """

    id: int
    name: str
    language: Language
    duration_sec: int
    release_date: datetime
    media_url: str
    media_type: MediaType
    source_type: SourceType
    source_url: str
    external_id: str
    description: Optional[str] = None
    category_id: Optional[str] = None
    status: ContentStatus = ContentStatus.DRAFT
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_content(
        cls,
        record_id: int,
        content: NormalizedContent,
        category_id: Optional[str] = None,
    ) -> "CatalogRecord":
        """Build a new draft record from normalized content."""
        return cls(
            id=record_id,
            name=content.name,
            description=content.description,
            language=content.language,
            duration_sec=content.duration_sec,
            release_date=content.release_date,
            media_url=content.media_url,
            media_type=content.media_type,
            source_type=content.source_type,
            source_url=content.source_url,
            external_id=content.external_id,
            category_id=category_id,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the record for JSON storage and API responses."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "language": self.language.value,
            "durationSec": self.duration_sec,
            "releaseDate": self.release_date.isoformat(),
            "mediaUrl": self.media_url,
            "mediaType": self.media_type.value,
            "sourceType": self.source_type.value,
            "sourceUrl": self.source_url,
            "externalId": self.external_id,
            "categoryId": self.category_id,
            "status": self.status.value,
            "createdAt": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CatalogRecord":
        """Rebuild a record from its ``to_dict`` form."""
        return cls(
            id=int(data["id"]),
            name=data["name"],
            description=data.get("description"),
            language=Language(data["language"]),
            duration_sec=int(data["durationSec"]),
            release_date=_parse_datetime(data["releaseDate"]),
            media_url=data["mediaUrl"],
            media_type=MediaType(data["mediaType"]),
            source_type=SourceType(data["sourceType"]),
            source_url=data["sourceUrl"],
            external_id=data["externalId"],
            category_id=data.get("categoryId"),
            status=ContentStatus(data.get("status", ContentStatus.DRAFT.value)),
            created_at=_parse_datetime(data["createdAt"]),
        )
