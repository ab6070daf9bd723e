"""
Content Import Repositories

Repository interface for the catalog store consumed by the import
orchestrator. Concrete implementations are in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from typing import Optional

from .entities import CatalogRecord, NormalizedContent
from .value_objects import SourceType


class ICatalogRepository(ABC):
    """
    Abstract repository interface for catalog records.

    Records are keyed by the natural key (external_id, source_type).
    ``create`` must reject a second record for the same natural key with
    DuplicateContentError so that concurrent imports cannot both succeed.
    """

    @abstractmethod
    def exists(self, external_id: str, source_type: SourceType) -> bool:
        """
        Check whether a record with this natural key exists.

        Args:
            external_id: Platform-native identifier
            source_type: Platform the identifier belongs to

        Returns:
            True if a record exists, False otherwise

        Raises:
            CatalogStoreError: If the store cannot be queried
        """
        pass  # pragma: no cover

    @abstractmethod
    def create(
        self, content: NormalizedContent, category_id: Optional[str] = None
    ) -> CatalogRecord:
        """
        Persist a new draft record built from normalized content.

        Args:
            content: Normalized content from an adapter
            category_id: Optional category to file the record under

        Returns:
            The created CatalogRecord

        Raises:
            DuplicateContentError: If the natural key is already taken
            CatalogStoreError: If the store cannot be written
        """
        pass  # pragma: no cover

    @abstractmethod
    def get(self, record_id: int) -> Optional[CatalogRecord]:
        """
        Retrieve a record by ID.

        Args:
            record_id: Catalog record identifier

        Returns:
            CatalogRecord if found, None otherwise

        Raises:
            CatalogStoreError: If the store cannot be queried
        """
        pass  # pragma: no cover
