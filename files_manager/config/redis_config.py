"""
Redis Configuration

Reads connection settings from the environment and owns the
process-wide connection manager used by the Redis stores.

Environment Variables:
    REDIS_URL: Full connection URL; when set, the other variables are ignored
    REDIS_HOST / REDIS_PORT / REDIS_DB / REDIS_PASSWORD: Discrete settings
    REDIS_MAX_CONNECTIONS: Pool size (default: 20)
"""

import logging
import os
from typing import Optional

from files_manager.infrastructure.redis_repository import RedisConnectionManager, RedisRepository

logger = logging.getLogger(__name__)


class RedisConfig:
    """Redis connection settings."""

    def __init__(self):
        self.url = os.getenv("REDIS_URL") or None
        self.host = os.getenv("REDIS_HOST", "localhost")
        self.port = int(os.getenv("REDIS_PORT", 6379))
        self.db = int(os.getenv("REDIS_DB", 0))
        self.password = os.getenv("REDIS_PASSWORD") or None
        self.max_connections = int(os.getenv("REDIS_MAX_CONNECTIONS", 20))

    def create_manager(self) -> RedisConnectionManager:
        if self.url:
            return RedisConnectionManager.from_url(self.url, max_connections=self.max_connections)
        return RedisConnectionManager.from_settings(
            host=self.host,
            port=self.port,
            db=self.db,
            password=self.password,
            max_connections=self.max_connections,
        )

    def describe(self) -> str:
        """Connection target for logs, without credentials."""
        if self.url:
            return self.url.split("@")[-1]
        return f"{self.host}:{self.port}/{self.db}"


_redis_manager: Optional[RedisConnectionManager] = None


def init_redis(config: Optional[RedisConfig] = None) -> RedisConnectionManager:
    """
    Create the process-wide connection manager.

    No connection is opened until the first command.
    """
    global _redis_manager

    config = config or RedisConfig()
    _redis_manager = config.create_manager()
    logger.info(f"Redis pool configured for {config.describe()}")
    return _redis_manager


def get_redis_repository(key_prefix: str = "") -> RedisRepository:
    """
    RedisRepository over the shared pool.

    Raises:
        RuntimeError: If init_redis() has not run
    """
    if _redis_manager is None:
        raise RuntimeError("Redis not initialized. Call init_redis() first.")
    return RedisRepository(_redis_manager.client, key_prefix)


def redis_health_check() -> bool:
    """False when Redis is uninitialized or not answering."""
    return _redis_manager is not None and _redis_manager.health_check()
