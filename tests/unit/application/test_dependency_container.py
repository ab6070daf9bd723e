"""
Unit Tests for Dependency Container

Tests the DependencyContainer for service registration and resolution.
"""

import threading

import pytest

from catalog_import.application.dependency_container import (
    DependencyContainer,
    DependencyNotFoundError,
)
from catalog_import.application.import_service import ImportService
from catalog_import.domain.content_import import AdapterRegistry, ICatalogRepository
from catalog_import.infrastructure.memory_catalog_repository import InMemoryCatalogRepository


class TestDependencyContainer:
    """Tests for DependencyContainer."""

    def test_singleton_returns_same_instance(self):
        container = DependencyContainer()
        repository = InMemoryCatalogRepository()

        container.register_singleton(ICatalogRepository, repository)

        assert container.resolve(ICatalogRepository) is repository
        assert container.resolve(ICatalogRepository) is repository

    def test_transient_creates_new_instances(self):
        container = DependencyContainer()
        container.register_transient(ICatalogRepository, InMemoryCatalogRepository)

        first = container.resolve(ICatalogRepository)
        second = container.resolve(ICatalogRepository)

        assert isinstance(first, InMemoryCatalogRepository)
        assert first is not second

    def test_transient_factory_can_resolve_dependencies(self):
        """Factories run outside the lock, so nested resolution works."""
        container = DependencyContainer()
        container.register_singleton(AdapterRegistry, AdapterRegistry())
        container.register_singleton(ICatalogRepository, InMemoryCatalogRepository())
        container.register_transient(
            ImportService,
            lambda: ImportService(
                container.resolve(AdapterRegistry), container.resolve(ICatalogRepository)
            ),
        )

        service = container.resolve(ImportService)

        assert service.registry is container.resolve(AdapterRegistry)

    def test_unregistered_raises(self):
        container = DependencyContainer()

        with pytest.raises(DependencyNotFoundError) as exc_info:
            container.resolve(ImportService)

        assert "ImportService" in str(exc_info.value)

    def test_override_takes_precedence_until_cleared(self):
        container = DependencyContainer()
        original = InMemoryCatalogRepository()
        replacement = InMemoryCatalogRepository()
        container.register_singleton(ICatalogRepository, original)

        container.override(ICatalogRepository, replacement)
        assert container.resolve(ICatalogRepository) is replacement

        container.clear_overrides()
        assert container.resolve(ICatalogRepository) is original

    def test_is_registered(self):
        container = DependencyContainer()

        assert container.is_registered(ImportService) is False
        container.override(ImportService, object())
        assert container.is_registered(ImportService) is True

    def test_concurrent_resolution(self):
        container = DependencyContainer()
        repository = InMemoryCatalogRepository()
        container.register_singleton(ICatalogRepository, repository)
        resolved = []

        def worker():
            for _ in range(50):
                resolved.append(container.resolve(ICatalogRepository))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(resolved) == 400
        assert all(instance is repository for instance in resolved)

    def test_factory_singleton_is_built_once_on_first_resolve(self):
        container = DependencyContainer()
        built = []

        def factory():
            built.append(InMemoryCatalogRepository())
            return built[-1]

        container.register_factory(ICatalogRepository, factory)
        assert built == []

        first = container.resolve(ICatalogRepository)
        second = container.resolve(ICatalogRepository)

        assert first is second
        assert len(built) == 1
