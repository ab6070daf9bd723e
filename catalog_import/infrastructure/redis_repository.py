"""
Redis Repository Base Class

Key-prefixed JSON helpers and connection pooling shared by the
Redis-backed repositories. Redis errors propagate to the caller so
repositories can translate them into domain errors.
"""

import json
import logging
from typing import Any, Dict, Optional

import redis
from redis.exceptions import RedisError

logger = logging.getLogger(__name__)


class RedisRepository:
    """Base Redis repository with prefixed keys and JSON values."""

    def __init__(self, redis_client: redis.Redis, key_prefix: str = ""):
        self.redis = redis_client
        self.key_prefix = key_prefix

    def _make_key(self, key: str) -> str:
        """Create a prefixed key for Redis storage."""
        return f"{self.key_prefix}:{key}" if self.key_prefix else key

    def set_json(self, key: str, data: Dict[str, Any], ttl: Optional[int] = None) -> bool:
        """
        Set JSON data with optional TTL.

        Args:
            key: Redis key (without prefix)
            data: Dictionary to store as JSON
            ttl: Time to live in seconds

        Returns:
            True if Redis acknowledged the write
        """
        redis_key = self._make_key(key)
        json_data = json.dumps(data)
        if ttl:
            return bool(self.redis.setex(redis_key, ttl, json_data))
        return bool(self.redis.set(redis_key, json_data))

    def get_json(self, key: str) -> Optional[Dict[str, Any]]:
        """
        Get JSON data from Redis.

        Returns:
            Dictionary if found and valid JSON, None otherwise
        """
        data = self.redis.get(self._make_key(key))
        if data is None:
            return None
        if isinstance(data, bytes):
            data = data.decode("utf-8")
        try:
            return json.loads(data)
        except json.JSONDecodeError:
            logger.error(f"Corrupt JSON stored under key {key}")
            return None

    def set_if_absent(self, key: str, value: str) -> bool:
        """
        Set a plain value only if the key does not exist yet (SET NX).

        Returns:
            True if this call created the key, False if it already existed
        """
        return bool(self.redis.set(self._make_key(key), value, nx=True))

    def increment(self, key: str) -> int:
        """Atomically increment a counter and return the new value."""
        return int(self.redis.incr(self._make_key(key)))

    def delete(self, key: str) -> bool:
        return self.redis.delete(self._make_key(key)) > 0

    def exists(self, key: str) -> bool:
        return self.redis.exists(self._make_key(key)) > 0


class RedisConnectionManager:
    """Manages Redis connection with connection pooling."""

    def __init__(
        self,
        host: str = "localhost",
        port: int = 6379,
        db: int = 0,
        max_connections: int = 20,
        password: Optional[str] = None,
        decode_responses: bool = False,
    ):
        self.connection_pool = redis.ConnectionPool(
            host=host,
            port=port,
            db=db,
            password=password,
            max_connections=max_connections,
            decode_responses=decode_responses,
            retry_on_timeout=True,
            socket_keepalive=True,
        )
        self._client = None

    @property
    def client(self) -> redis.Redis:
        """Get Redis client instance with connection pooling."""
        if self._client is None:
            self._client = redis.Redis(connection_pool=self.connection_pool)
        return self._client

    def health_check(self) -> bool:
        """False when the ping fails for any Redis reason, timeouts included."""
        try:
            return bool(self.client.ping())
        except RedisError as e:
            logger.warning(f"Redis health check failed: {e}")
            return False

    def close(self):
        """Close the connection pool."""
        if self.connection_pool:
            self.connection_pool.disconnect()
