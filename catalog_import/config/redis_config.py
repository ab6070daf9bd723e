"""
Redis Configuration

Connection settings for the Redis catalog store and the process-wide
connection manager that the app factory initializes.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

import redis

from catalog_import.infrastructure.redis_repository import (
    RedisConnectionManager,
    RedisRepository,
)

logger = logging.getLogger(__name__)


@dataclass
class RedisConfig:
    """Redis connection settings."""

    host: str = "localhost"
    port: int = 6379
    db: int = 0
    password: Optional[str] = None
    max_connections: int = 20

    @classmethod
    def from_env(cls) -> "RedisConfig":
        """
        Read REDIS_HOST, REDIS_PORT, REDIS_DB, REDIS_PASSWORD and
        REDIS_MAX_CONNECTIONS. REDIS_URL (redis://[:password@]host:port/db)
        takes precedence for the parts it specifies.
        """
        config = cls(
            host=os.getenv("REDIS_HOST", cls.host),
            port=int(os.getenv("REDIS_PORT", cls.port)),
            db=int(os.getenv("REDIS_DB", cls.db)),
            password=os.getenv("REDIS_PASSWORD") or None,
            max_connections=int(os.getenv("REDIS_MAX_CONNECTIONS", cls.max_connections)),
        )

        url = os.getenv("REDIS_URL")
        if url:
            parsed = redis.connection.parse_url(url)
            config.host = parsed.get("host", config.host)
            config.port = int(parsed.get("port", config.port))
            config.db = int(parsed.get("db", config.db))
            config.password = parsed.get("password", config.password)
        return config


_manager: Optional[RedisConnectionManager] = None


def init_redis(config: Optional[RedisConfig] = None) -> RedisConnectionManager:
    """
    Create the process-wide connection manager, replacing any previous one.

    No connection is opened until the first command.
    """
    global _manager

    if config is None:
        config = RedisConfig.from_env()
    if _manager is not None:
        _manager.close()

    _manager = RedisConnectionManager(
        host=config.host,
        port=config.port,
        db=config.db,
        max_connections=config.max_connections,
        password=config.password,
    )
    logger.info(f"Redis configured at {config.host}:{config.port}/{config.db}")
    return _manager


def get_redis_client() -> redis.Redis:
    """
    Raises:
        RuntimeError: If init_redis has not been called
    """
    if _manager is None:
        raise RuntimeError("Redis not initialized. Call init_redis() first.")
    return _manager.client


def get_redis_repository(key_prefix: str = "") -> RedisRepository:
    return RedisRepository(get_redis_client(), key_prefix)


def redis_health_check() -> bool:
    """False when Redis is unreachable or was never initialized."""
    return _manager is not None and _manager.health_check()
