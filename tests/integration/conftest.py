import os

import pytest
import redis

from files_manager.infrastructure import (
    LocalContentStore,
    RedisFileRepository,
    RedisRepository,
    RedisSessionStore,
    RedisUserRepository,
)


@pytest.fixture
def redis_client():
    """
    Yields a clean Redis client for integration testing.
    Skips when no Redis server answers at REDIS_HOST:REDIS_PORT.
    """
    host = os.getenv("REDIS_HOST", "localhost")
    port = int(os.getenv("REDIS_PORT", 6379))
    db = int(os.getenv("REDIS_TEST_DB", 15))

    client = redis.Redis(host=host, port=port, db=db, decode_responses=False)

    try:
        client.ping()
    except redis.exceptions.RedisError:
        pytest.skip("Redis service not available. Skipping integration tests.")

    client.flushdb()

    yield client

    client.flushdb()
    client.close()


@pytest.fixture
def redis_repo(redis_client):
    return RedisRepository(redis_client)


@pytest.fixture
def redis_session_store(redis_repo):
    return RedisSessionStore(redis_repo)


@pytest.fixture
def redis_user_repository(redis_repo):
    return RedisUserRepository(redis_repo)


@pytest.fixture
def redis_file_repository(redis_repo):
    return RedisFileRepository(redis_repo)


@pytest.fixture
def local_content_store(tmp_path):
    return LocalContentStore(str(tmp_path / "files"))
