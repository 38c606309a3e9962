"""
Redis Session Store Implementation

Concrete Redis-based implementation of ISessionStore.
Expiry is delegated to Redis TTL, so expired sessions are never returned.
"""

import logging
from typing import Optional

from files_manager.domain.auth.repositories import ISessionStore

logger = logging.getLogger(__name__)


class RedisSessionStore(ISessionStore):
    """Session store backed by SETEX / GET / DEL."""

    def __init__(self, redis_repository):
        """
        Initialize with Redis repository.

        Args:
            redis_repository: RedisRepository instance from infrastructure layer
        """
        self.redis_repo = redis_repository

    def put(self, key: str, value: str, ttl_seconds: int) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self.redis_repo.set_value(key, value, ttl=ttl_seconds)
        logger.debug(f"Stored session key (TTL: {ttl_seconds}s)")

    def get(self, key: str) -> Optional[str]:
        return self.redis_repo.get_value(key)

    def delete(self, key: str) -> bool:
        return self.redis_repo.delete(key)
