"""
Content Import Domain

Adapter contract, normalization helpers, adapter registry and the
outcome/result model of the import pipeline.
"""

from .adapters import ContentAdapter
from .entities import CatalogRecord, NormalizedContent
from .normalization import map_language, map_media_type, parse_duration
from .registry import AdapterRegistry
from .repositories import ICatalogRepository
from .results import DUPLICATE_REASON, ImportBatchResult, ImportOutcome, OutcomeKind
from .value_objects import (
    DEFAULT_CHANNEL_LIMIT,
    MAX_CHANNEL_LIMIT,
    ChannelImportRequest,
    ContentStatus,
    ImportBySourceTypeRequest,
    Language,
    MediaType,
    SourceType,
    VideoImportRequest,
)

__all__ = [
    "AdapterRegistry",
    "CatalogRecord",
    "ChannelImportRequest",
    "ContentAdapter",
    "ContentStatus",
    "DEFAULT_CHANNEL_LIMIT",
    "DUPLICATE_REASON",
    "ICatalogRepository",
    "ImportBatchResult",
    "ImportBySourceTypeRequest",
    "ImportOutcome",
    "Language",
    "MAX_CHANNEL_LIMIT",
    "MediaType",
    "NormalizedContent",
    "OutcomeKind",
    "SourceType",
    "VideoImportRequest",
    "map_language",
    "map_media_type",
    "parse_duration",
]
