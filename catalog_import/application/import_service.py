"""
Import Application Service

Orchestrates single-item, channel and by-source-type imports: resolves
the adapter, fetches normalized content, runs the duplicate check and
persistence flow per item, and aggregates the outcomes.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence, Union

from catalog_import.domain.content_import import (
    AdapterRegistry,
    ChannelImportRequest,
    ICatalogRepository,
    ImportBatchResult,
    ImportBySourceTypeRequest,
    ImportOutcome,
    NormalizedContent,
    SourceType,
    VideoImportRequest,
)
from catalog_import.domain.errors import (
    CatalogStoreError,
    ChannelFetchError,
    ChannelImportNotSupportedError,
    DomainError,
    DuplicateContentError,
)

logger = logging.getLogger(__name__)

CHANNEL_NOT_SUPPORTED_MESSAGE = (
    "Channel import not yet supported via this endpoint. "
    "Use the specific channel import endpoint."
)


class ImportService:
    """
    Application service for content imports.

    Every import operation returns an ImportBatchResult; failures are
    reported as data, never raised. Items of a batch are independent:
    one item's failure does not stop the others.
    """

    def __init__(
        self,
        registry: AdapterRegistry,
        catalog_repository: ICatalogRepository,
        max_workers: int = 1,
    ):
        """
        Initialize ImportService.

        Args:
            registry: Adapter registry used to resolve platforms
            catalog_repository: Catalog store for duplicate checks and creates
            max_workers: Items persisted concurrently in a batch (1 = sequential)
        """
        self.registry = registry
        self.catalog_repository = catalog_repository
        self.max_workers = max(1, max_workers)

    def import_video(self, request: VideoImportRequest) -> ImportBatchResult:
        """
        Import a single item by URL, resolving the adapter from the URL.

        Args:
            request: Video import request

        Returns:
            Batch result of at most one item; success=False if the adapter
            could not be resolved or the item could not be fetched
        """
        logger.info(f"Starting video import from URL: {request.url}")

        try:
            adapter = self.registry.resolve_by_url(request.url)
            content = adapter.import_video(request)
        except DomainError as e:
            logger.error(f"Failed to import video: {e}")
            return ImportBatchResult.failure("Failed to import video", str(e))
        except Exception as e:
            logger.exception(f"Unexpected error importing video {request.url}")
            return ImportBatchResult.failure("Failed to import video", str(e))

        outcome = self._import_single_content(content, request.category_id)
        return ImportBatchResult.from_single(outcome, subject="Video")

    def import_channel(
        self,
        source_type: Union[SourceType, str],
        request: ChannelImportRequest,
    ) -> ImportBatchResult:
        """
        Import up to ``request.limit`` items of a channel.

        Items already fetched when a later page fails are still persisted;
        the page error is appended to the result's errors.

        Args:
            source_type: Platform of the channel
            request: Channel import request

        Returns:
            Aggregated batch result
        """
        logger.info(f"Starting channel import from {source_type}: {request.channel_id}")

        fetch_errors: List[str] = []
        try:
            adapter = self.registry.resolve(SourceType.parse(source_type))
            contents = adapter.import_channel(request)
        except ChannelFetchError as e:
            if not e.partial_items:
                logger.error(f"Failed to import channel: {e}")
                return ImportBatchResult.failure("Failed to import channel", str(e))
            logger.warning(
                f"Channel {request.channel_id} fetch stopped after "
                f"{len(e.partial_items)} items: {e}"
            )
            contents = e.partial_items
            fetch_errors.append(str(e))
        except DomainError as e:
            logger.error(f"Failed to import channel: {e}")
            return ImportBatchResult.failure("Failed to import channel", str(e))
        except Exception as e:
            logger.exception(f"Unexpected error importing channel {request.channel_id}")
            return ImportBatchResult.failure("Failed to import channel", str(e))

        outcomes = self._import_multiple_content(contents, request.category_id)
        result = ImportBatchResult.from_outcomes(outcomes, trailing_errors=fetch_errors)
        logger.info(result.message)
        return result

    def import_by_source_type(self, request: ImportBySourceTypeRequest) -> ImportBatchResult:
        """
        Import a URL through an explicitly named source type.

        Only single-item URLs are accepted; collection URLs are refused
        and must go through ``import_channel``.
        """
        logger.info(f"Starting import from {request.source_type.value}: {request.url}")

        try:
            adapter = self.registry.resolve(request.source_type)
            if not adapter.extract_id(request.url):
                raise ChannelImportNotSupportedError(CHANNEL_NOT_SUPPORTED_MESSAGE)
            content = adapter.import_video(request.to_video_request())
        except DomainError as e:
            logger.error(f"Failed to import content: {e}")
            return ImportBatchResult.failure("Failed to import content", str(e))
        except Exception as e:
            logger.exception(f"Unexpected error importing {request.url}")
            return ImportBatchResult.failure("Failed to import content", str(e))

        outcome = self._import_single_content(content, request.category_id)
        return ImportBatchResult.from_single(outcome, subject="Content")

    def check_duplicate(self, external_id: str, source_type: Union[SourceType, str]) -> bool:
        """
        Check whether content with this natural key is already in the catalog.

        Raises:
            InvalidRequestError: If the source type is unknown
            CatalogStoreError: If the store cannot be queried
        """
        return self.catalog_repository.exists(external_id, SourceType.parse(source_type))

    def get_supported_source_types(self) -> List[SourceType]:
        return self.registry.supported_source_types()

    def _import_single_content(
        self, content: NormalizedContent, category_id: Optional[str] = None
    ) -> ImportOutcome:
        """
        Run the duplicate check and create for one item.

        Never raises: every store failure becomes a FAILED outcome.
        """
        try:
            if self.catalog_repository.exists(content.external_id, content.source_type):
                logger.warning(
                    f"Skipping duplicate content: {content.external_id} "
                    f"from {content.source_type.value}"
                )
                return ImportOutcome.duplicate()

            record = self.catalog_repository.create(content, category_id)
        except DuplicateContentError:
            # Created concurrently between the existence check and the create
            logger.warning(
                f"Skipping duplicate content: {content.external_id} "
                f"from {content.source_type.value} (rejected by store)"
            )
            return ImportOutcome.duplicate()
        except CatalogStoreError as e:
            logger.error(f"Failed to save content {content.external_id}: {e}")
            return ImportOutcome.failed(str(e))
        except Exception as e:
            logger.exception(f"Unexpected error saving content {content.external_id}")
            return ImportOutcome.failed(str(e))

        logger.info(f"Successfully imported content: {content.name} ({content.external_id})")
        return ImportOutcome.imported(record)

    def _import_multiple_content(
        self, contents: Sequence[NormalizedContent], category_id: Optional[str] = None
    ) -> List[ImportOutcome]:
        """Persist items sequentially or on a bounded pool; keeps fetch order."""
        if self.max_workers == 1 or len(contents) <= 1:
            return [self._import_single_content(c, category_id) for c in contents]

        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(contents))) as executor:
            return list(
                executor.map(lambda c: self._import_single_content(c, category_id), contents)
            )
