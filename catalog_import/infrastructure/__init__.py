"""
Infrastructure Layer

Concrete implementations of domain repositories and platform adapters.
"""

from .memory_catalog_repository import InMemoryCatalogRepository
from .redis_catalog_repository import RedisCatalogRepository
from .redis_repository import RedisConnectionManager, RedisRepository

__all__ = [
    "InMemoryCatalogRepository",
    "RedisCatalogRepository",
    "RedisConnectionManager",
    "RedisRepository",
]
