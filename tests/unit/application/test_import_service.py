"""
Unit tests for ImportService

Tests single-item, channel and by-source-type imports against a fake
adapter and a fake catalog store: duplicate handling, per-item failure
isolation, aggregation and whole-call failures.
"""

from unittest.mock import Mock

import pytest

from catalog_import.application.import_service import (
    CHANNEL_NOT_SUPPORTED_MESSAGE,
    ImportService,
)
from catalog_import.domain.content_import import (
    AdapterRegistry,
    ChannelImportRequest,
    ImportBySourceTypeRequest,
    SourceType,
    VideoImportRequest,
)
from catalog_import.domain.errors import (
    CatalogStoreError,
    ChannelFetchError,
    ContentFetchError,
    InvalidRequestError,
)

from tests.fixtures.domain_fixtures import CATEGORY_ID, create_normalized_content
from tests.fixtures.mock_repositories import FakeContentAdapter


def item_url(external_id: str) -> str:
    return f"https://youtube.com/item/{external_id}"


class TestImportVideo:
    """Tests for ImportService.import_video."""

    def test_imports_new_video(self, import_service, fake_adapter, catalog_repository):
        # Arrange
        fake_adapter.videos["abc"] = create_normalized_content(external_id="abc")

        # Act
        result = import_service.import_video(
            VideoImportRequest(url=item_url("abc"), category_id=CATEGORY_ID)
        )

        # Assert
        assert result.success is True
        assert result.imported_count == 1
        assert result.duplicates_skipped == 0
        assert result.errors == []
        assert result.message == "Video imported successfully"
        assert result.imported[0].external_id == "abc"
        assert result.imported[0].category_id == CATEGORY_ID
        assert len(catalog_repository.records) == 1

    def test_second_import_is_skipped_as_duplicate(
        self, import_service, fake_adapter, catalog_repository
    ):
        """Importing the same video twice creates exactly one record."""
        fake_adapter.videos["abc"] = create_normalized_content(external_id="abc")
        request = VideoImportRequest(url=item_url("abc"))

        first = import_service.import_video(request)
        second = import_service.import_video(request)

        assert first.imported_count == 1
        assert second.success is True
        assert second.imported_count == 0
        assert second.duplicates_skipped == 1
        assert second.errors == ["Content already exists"]
        assert second.message == "Video was skipped (duplicate or error)"
        assert len(catalog_repository.records) == 1
        assert len(catalog_repository.calls_to("create")) == 1

    def test_unsupported_url(self, import_service, catalog_repository):
        result = import_service.import_video(
            VideoImportRequest(url="https://unsupported.example/x")
        )

        assert result.success is False
        assert result.imported_count == 0
        assert result.duplicates_skipped == 0
        assert result.errors == ["No adapter found for URL: https://unsupported.example/x"]
        assert result.message == "Failed to import video"
        assert catalog_repository.get_call_history() == []

    def test_fetch_failure(self, import_service, fake_adapter):
        fake_adapter.videos["abc"] = ContentFetchError("Failed to import video: quota exceeded")

        result = import_service.import_video(VideoImportRequest(url=item_url("abc")))

        assert result.success is False
        assert result.errors == ["Failed to import video: quota exceeded"]

    def test_unexpected_adapter_error(self, import_service, fake_adapter):
        fake_adapter.videos["abc"] = RuntimeError("adapter bug")

        result = import_service.import_video(VideoImportRequest(url=item_url("abc")))

        assert result.success is False
        assert result.errors == ["adapter bug"]

    def test_store_race_is_reported_as_duplicate(
        self, import_service, fake_adapter, catalog_repository
    ):
        """A record created between the check and the create counts as a duplicate."""
        fake_adapter.videos["abc"] = create_normalized_content(external_id="abc")
        catalog_repository.raced_ids.add("abc")

        result = import_service.import_video(VideoImportRequest(url=item_url("abc")))

        assert result.success is True
        assert result.duplicates_skipped == 1
        assert result.errors == ["Content already exists"]

    def test_store_failure_is_per_item(self, import_service, fake_adapter, catalog_repository):
        fake_adapter.videos["abc"] = create_normalized_content(external_id="abc")
        catalog_repository.fail_exists = CatalogStoreError("Redis connection refused")

        result = import_service.import_video(VideoImportRequest(url=item_url("abc")))

        assert result.success is True
        assert result.imported_count == 0
        assert result.duplicates_skipped == 1
        assert result.errors == ["Redis connection refused"]


class TestImportChannel:
    """Tests for ImportService.import_channel."""

    def test_mixed_batch(self, import_service, fake_adapter, catalog_repository):
        """Existing items are skipped, store failures do not stop the batch."""
        # Arrange
        contents = [create_normalized_content(external_id=i) for i in ("a", "b", "c", "d")]
        catalog_repository.seed(contents[1])
        catalog_repository.fail_create["d"] = CatalogStoreError("Write failed")
        fake_adapter.channel_result = contents

        # Act
        result = import_service.import_channel(
            SourceType.YOUTUBE, ChannelImportRequest(channel_id="UC1", limit=4)
        )

        # Assert
        assert result.success is True
        assert result.imported_count == 2
        assert result.duplicates_skipped == 2
        assert [record.external_id for record in result.imported] == ["a", "c"]
        assert result.errors == ["Content already exists", "Write failed"]
        assert result.message == (
            "Successfully imported 2 videos, skipped 2 duplicates, encountered 2 errors"
        )

    def test_new_item_then_existing_item(self, import_service, fake_adapter, catalog_repository):
        first = create_normalized_content(external_id="item1")
        second = create_normalized_content(external_id="item2")
        catalog_repository.seed(second)
        fake_adapter.channel_result = [first, second]

        result = import_service.import_channel(
            SourceType.YOUTUBE, ChannelImportRequest(channel_id="UC1", limit=2)
        )

        assert result.imported_count == 1
        assert result.duplicates_skipped == 1
        assert [record.external_id for record in result.imported] == ["item1"]
        assert result.errors == ["Content already exists"]

    def test_all_new(self, import_service, fake_adapter):
        fake_adapter.channel_result = [
            create_normalized_content(external_id=i) for i in ("a", "b")
        ]

        result = import_service.import_channel(
            "youtube", ChannelImportRequest(channel_id="UC1", limit=10)
        )

        assert result.imported_count == 2
        assert result.message == "Successfully imported 2 videos, skipped 0 duplicates"

    def test_category_applies_to_every_record(self, import_service, fake_adapter):
        fake_adapter.channel_result = [
            create_normalized_content(external_id=i) for i in ("a", "b")
        ]

        result = import_service.import_channel(
            SourceType.YOUTUBE, ChannelImportRequest(channel_id="UC1", category_id=CATEGORY_ID)
        )

        assert {record.category_id for record in result.imported} == {CATEGORY_ID}

    def test_unregistered_source_type(self, import_service):
        result = import_service.import_channel(
            SourceType.VIMEO, ChannelImportRequest(channel_id="UC1")
        )

        assert result.success is False
        assert result.errors == ["Adapter for source type 'VIMEO' not found"]
        assert result.message == "Failed to import channel"

    def test_unknown_source_type_name(self, import_service):
        result = import_service.import_channel(
            "myspace", ChannelImportRequest(channel_id="UC1")
        )

        assert result.success is False
        assert "Unknown source type" in result.errors[0]

    def test_fetch_failure_without_items(self, import_service, fake_adapter):
        fake_adapter.channel_result = ChannelFetchError("Failed to import channel: not found")

        result = import_service.import_channel(
            SourceType.YOUTUBE, ChannelImportRequest(channel_id="UC1")
        )

        assert result.success is False
        assert result.errors == ["Failed to import channel: not found"]

    def test_partial_fetch_failure_keeps_fetched_items(
        self, import_service, fake_adapter, catalog_repository
    ):
        fake_adapter.channel_result = ChannelFetchError(
            "Failed to import channel: page 2 timed out",
            partial_items=[create_normalized_content(external_id=i) for i in ("a", "b")],
        )

        result = import_service.import_channel(
            SourceType.YOUTUBE, ChannelImportRequest(channel_id="UC1", limit=20)
        )

        assert result.success is True
        assert result.imported_count == 2
        assert result.duplicates_skipped == 0
        assert result.errors == ["Failed to import channel: page 2 timed out"]
        assert len(catalog_repository.records) == 2

    def test_parallel_persistence_keeps_order(self, fake_adapter, catalog_repository):
        service = ImportService(AdapterRegistry(fake_adapter), catalog_repository, max_workers=4)
        ids = [f"id{i:02d}" for i in range(12)]
        catalog_repository.seed(create_normalized_content(external_id="id03"))
        fake_adapter.channel_result = [create_normalized_content(external_id=i) for i in ids]

        result = service.import_channel(
            SourceType.YOUTUBE, ChannelImportRequest(channel_id="UC1", limit=12)
        )

        assert [record.external_id for record in result.imported] == [
            i for i in ids if i != "id03"
        ]
        assert result.duplicates_skipped == 1
        assert len(catalog_repository.records) == 12


class TestImportBySourceType:
    """Tests for ImportService.import_by_source_type."""

    def test_imports_single_item(self, import_service, fake_adapter):
        fake_adapter.videos["abc"] = create_normalized_content(external_id="abc")

        result = import_service.import_by_source_type(
            ImportBySourceTypeRequest(source_type="YOUTUBE", url=item_url("abc"))
        )

        assert result.success is True
        assert result.imported_count == 1
        assert result.message == "Content imported successfully"

    def test_refuses_collection_url(self, import_service, fake_adapter):
        result = import_service.import_by_source_type(
            ImportBySourceTypeRequest(
                source_type=SourceType.YOUTUBE, url="https://youtube.com/channel/UC1"
            )
        )

        assert result.success is False
        assert result.errors == [CHANNEL_NOT_SUPPORTED_MESSAGE]
        assert result.message == "Failed to import content"
        assert fake_adapter.video_requests == []

    def test_unregistered_source_type(self, import_service):
        result = import_service.import_by_source_type(
            ImportBySourceTypeRequest(source_type="RSS", url="https://feed.example/item/1")
        )

        assert result.success is False
        assert result.errors == ["Adapter for source type 'RSS' not found"]

    def test_duplicate(self, import_service, fake_adapter, catalog_repository):
        content = create_normalized_content(external_id="abc")
        catalog_repository.seed(content)
        fake_adapter.videos["abc"] = content

        result = import_service.import_by_source_type(
            ImportBySourceTypeRequest(source_type="youtube", url=item_url("abc"))
        )

        assert result.success is True
        assert result.duplicates_skipped == 1
        assert result.message == "Content was skipped (duplicate or error)"


class TestCheckDuplicate:
    """Tests for ImportService.check_duplicate."""

    def test_reports_existing_content(self, import_service, catalog_repository):
        catalog_repository.seed(create_normalized_content(external_id="abc"))

        assert import_service.check_duplicate("abc", SourceType.YOUTUBE) is True
        assert import_service.check_duplicate("abc", "youtube") is True
        assert import_service.check_duplicate("abc", SourceType.VIMEO) is False
        assert import_service.check_duplicate("xyz", SourceType.YOUTUBE) is False

    def test_store_failure_propagates(self, import_service, catalog_repository):
        catalog_repository.fail_exists = CatalogStoreError("Redis connection refused")

        with pytest.raises(CatalogStoreError):
            import_service.check_duplicate("abc", SourceType.YOUTUBE)

    def test_unknown_source_type(self, import_service):
        with pytest.raises(InvalidRequestError):
            import_service.check_duplicate("abc", "myspace")


class TestSupportedSourceTypes:
    """Tests for ImportService.get_supported_source_types."""

    def test_lists_registered_adapters(self, catalog_repository):
        registry = AdapterRegistry(
            FakeContentAdapter(SourceType.YOUTUBE), FakeContentAdapter(SourceType.RSS)
        )
        service = ImportService(registry, catalog_repository)

        assert service.get_supported_source_types() == [SourceType.YOUTUBE, SourceType.RSS]

    def test_uses_mock_repository_interface(self, fake_adapter, mock_catalog_repository):
        """The service only relies on the repository interface."""
        fake_adapter.videos["abc"] = create_normalized_content(external_id="abc")
        mock_catalog_repository.create.return_value = Mock(external_id="abc")
        service = ImportService(AdapterRegistry(fake_adapter), mock_catalog_repository)

        result = service.import_video(VideoImportRequest(url=item_url("abc")))

        assert result.imported_count == 1
        mock_catalog_repository.exists.assert_called_once_with("abc", SourceType.YOUTUBE)
        mock_catalog_repository.create.assert_called_once()
