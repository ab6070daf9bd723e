"""
Shared fixtures for the catalog import test suite.

Hypothesis runs the "dev" profile unless HYPOTHESIS_PROFILE names
another one ("ci" for the pipeline).
"""

import os
from unittest.mock import Mock

import pytest
from hypothesis import HealthCheck, settings

from catalog_import.application.import_service import ImportService
from catalog_import.domain.content_import import AdapterRegistry

from tests.fixtures.mock_repositories import (
    FakeContentAdapter,
    FakeYouTubeClient,
    MockCatalogRepository,
)

for _name, _examples in (("dev", 25), ("ci", 300)):
    settings.register_profile(
        _name,
        max_examples=_examples,
        deadline=None,
        suppress_health_check=[HealthCheck.too_slow],
    )
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))

SUITE_MARKERS = ("unit", "integration", "property")


# =============================================================================
# Fake Collaborator Fixtures
# =============================================================================

@pytest.fixture
def catalog_repository() -> MockCatalogRepository:
    """Provide an in-memory catalog store with call history."""
    return MockCatalogRepository()


@pytest.fixture
def fake_adapter() -> FakeContentAdapter:
    """Provide a YouTube-typed fake adapter with no content loaded."""
    return FakeContentAdapter()


@pytest.fixture
def fake_youtube_client() -> FakeYouTubeClient:
    """Provide a scripted YouTube transport."""
    return FakeYouTubeClient()


@pytest.fixture
def import_service(fake_adapter, catalog_repository) -> ImportService:
    """ImportService wired to the fake adapter and fake store."""
    return ImportService(AdapterRegistry(fake_adapter), catalog_repository)


@pytest.fixture
def mock_catalog_repository():
    """
    Provide a Mock catalog repository for unit testing.

    Returns a Mock object with all ICatalogRepository interface methods.
    """
    mock = Mock()
    mock.exists.return_value = False
    mock.get.return_value = None
    return mock


# =============================================================================
# Suite markers
# =============================================================================

def pytest_collection_modifyitems(config, items):
    """Mark each test with the suite directory it lives in."""
    for item in items:
        directory = next((part for part in item.path.parts if part in SUITE_MARKERS), None)
        if directory:
            item.add_marker(getattr(pytest.mark, directory))
