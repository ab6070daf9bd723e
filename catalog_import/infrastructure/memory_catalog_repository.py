"""
In-Memory Catalog Repository

Process-local ICatalogRepository with the same natural-key uniqueness
as the Redis implementation. Used for local runs (CATALOG_STORE=memory).
"""

import itertools
import threading
from typing import Dict, Optional, Tuple

from catalog_import.domain.content_import import (
    CatalogRecord,
    ICatalogRepository,
    NormalizedContent,
    SourceType,
)
from catalog_import.domain.errors import DuplicateContentError


class InMemoryCatalogRepository(ICatalogRepository):
    """Lock-guarded dictionary catalog store."""

    def __init__(self):
        self._records: Dict[int, CatalogRecord] = {}
        self._natural_index: Dict[Tuple[str, SourceType], int] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def exists(self, external_id: str, source_type: SourceType) -> bool:
        with self._lock:
            return (external_id, source_type) in self._natural_index

    def create(
        self, content: NormalizedContent, category_id: Optional[str] = None
    ) -> CatalogRecord:
        with self._lock:
            if content.natural_key in self._natural_index:
                raise DuplicateContentError(
                    f"Content {content.external_id} from {content.source_type.value} already exists"
                )
            record = CatalogRecord.from_content(next(self._ids), content, category_id)
            self._records[record.id] = record
            self._natural_index[content.natural_key] = record.id
            return record

    def get(self, record_id: int) -> Optional[CatalogRecord]:
        with self._lock:
            return self._records.get(record_id)
