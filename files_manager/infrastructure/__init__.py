"""
Infrastructure layer

Redis and filesystem implementations of the domain repository interfaces.
"""

from .content_store_factory import ContentStoreFactory
from .local_content_store import LocalContentStore
from .redis_file_repository import RedisFileRepository
from .redis_repository import RedisConnectionManager, RedisRepository
from .redis_session_store import RedisSessionStore
from .redis_user_repository import RedisUserRepository

__all__ = [
    "ContentStoreFactory",
    "LocalContentStore",
    "RedisFileRepository",
    "RedisConnectionManager",
    "RedisRepository",
    "RedisSessionStore",
    "RedisUserRepository",
]
