import os

import pytest
import redis

from catalog_import.config.redis_config import RedisConfig


@pytest.fixture(scope="session")
def redis_settings() -> RedisConfig:
    """Connection settings from the environment, on the dedicated test DB."""
    settings = RedisConfig.from_env()
    settings.db = int(os.getenv("REDIS_TEST_DB", 15))
    return settings


@pytest.fixture
def redis_client(redis_settings):
    """Empty Redis database; the test is skipped when no server answers."""
    client = redis.Redis(
        host=redis_settings.host,
        port=redis_settings.port,
        db=redis_settings.db,
        password=redis_settings.password,
    )
    try:
        client.ping()
    except redis.ConnectionError:
        client.close()
        pytest.skip(f"No Redis at {redis_settings.host}:{redis_settings.port}")

    client.flushdb()
    yield client
    client.flushdb()
    client.close()
