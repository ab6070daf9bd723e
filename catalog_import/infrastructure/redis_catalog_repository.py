"""
Redis Catalog Repository

Redis-backed implementation of ICatalogRepository.

Key layout (under the repository prefix):
- ``record:seq``                          id counter
- ``record:{id}``                         record JSON
- ``natural:{source_type}:{external_id}`` id of the record owning the natural key

The natural-key entry is claimed with SET NX before the record is written,
which gives ``create`` unique-constraint semantics across processes.
"""

import logging
from typing import Optional

from redis.exceptions import RedisError

from catalog_import.domain.content_import import (
    CatalogRecord,
    ICatalogRepository,
    NormalizedContent,
    SourceType,
)
from catalog_import.domain.errors import CatalogStoreError, DuplicateContentError

from .redis_repository import RedisRepository

logger = logging.getLogger(__name__)


class RedisCatalogRepository(ICatalogRepository):
    """Catalog store on Redis with natural-key uniqueness."""

    SEQUENCE_KEY = "record:seq"

    def __init__(self, redis_repo: RedisRepository):
        """
        Initialize the repository.

        Args:
            redis_repo: Base repository (already prefixed)
        """
        self.redis_repo = redis_repo

    @staticmethod
    def _record_key(record_id: int) -> str:
        return f"record:{record_id}"

    @staticmethod
    def _natural_key(external_id: str, source_type: SourceType) -> str:
        return f"natural:{source_type.value}:{external_id}"

    def exists(self, external_id: str, source_type: SourceType) -> bool:
        try:
            return self.redis_repo.exists(self._natural_key(external_id, source_type))
        except RedisError as e:
            raise CatalogStoreError(
                f"Failed to check catalog for {external_id}: {e}", original_error=e
            )

    def create(
        self, content: NormalizedContent, category_id: Optional[str] = None
    ) -> CatalogRecord:
        natural_key = self._natural_key(content.external_id, content.source_type)

        try:
            record_id = self.redis_repo.increment(self.SEQUENCE_KEY)
            if not self.redis_repo.set_if_absent(natural_key, str(record_id)):
                raise DuplicateContentError(
                    f"Content {content.external_id} from {content.source_type.value} already exists"
                )
        except RedisError as e:
            raise CatalogStoreError(
                f"Failed to create catalog record for {content.external_id}: {e}",
                original_error=e,
            )

        record = CatalogRecord.from_content(record_id, content, category_id)
        try:
            self.redis_repo.set_json(self._record_key(record_id), record.to_dict())
        except RedisError as e:
            # Release the natural key so a retry can claim it
            try:
                self.redis_repo.delete(natural_key)
            except RedisError:
                logger.error(f"Could not release natural key {natural_key}")
            raise CatalogStoreError(
                f"Failed to write catalog record {record_id}: {e}", original_error=e
            )

        logger.debug(f"Created catalog record {record_id} for {content.external_id}")
        return record

    def get(self, record_id: int) -> Optional[CatalogRecord]:
        try:
            data = self.redis_repo.get_json(self._record_key(record_id))
        except RedisError as e:
            raise CatalogStoreError(
                f"Failed to read catalog record {record_id}: {e}", original_error=e
            )
        return CatalogRecord.from_dict(data) if data else None
