"""
Redis Repository Base Class

Provides JSON documents, counters, list indexes and atomic field updates
on top of a redis-py client. Connection failures surface as
StoreUnavailableError; nothing is retried here.
"""

import json
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

import redis
from redis.exceptions import RedisError

from files_manager.domain.errors import StoreUnavailableError

logger = logging.getLogger(__name__)


class RedisRepository:
    """Base Redis repository with atomic operations."""

    # Reads the document, sets one field and writes it back in a single
    # server-side step so readers never see a partial update.
    UPDATE_FIELD_SCRIPT = """
    local key = KEYS[1]
    local field = ARGV[1]
    local value = ARGV[2]

    local data = redis.call('GET', key)
    if not data then
        return false
    end

    local json_data = cjson.decode(data)
    json_data[field] = cjson.decode(value)

    local updated_data = cjson.encode(json_data)
    redis.call('SET', key, updated_data, 'KEEPTTL')
    return updated_data
    """

    def __init__(self, redis_client: redis.Redis, key_prefix: str = ""):
        self.redis = redis_client
        self.key_prefix = key_prefix

    def _make_key(self, key: str) -> str:
        """Create a prefixed key for Redis storage."""
        return f"{self.key_prefix}:{key}" if self.key_prefix else key

    @contextmanager
    def _store_errors(self, operation: str, key: str) -> Iterator[None]:
        """Translate redis-py failures into StoreUnavailableError."""
        try:
            yield
        except RedisError as e:
            logger.error(f"Redis {operation} failed for key {key}: {e}")
            raise StoreUnavailableError(
                f"Redis {operation} failed for key {key}: {e}", original_error=e
            ) from e

    @staticmethod
    def _decode(data: Any) -> Optional[str]:
        if data is None:
            return None
        if isinstance(data, bytes):
            return data.decode("utf-8")
        return str(data)

    def set_value(self, key: str, value: str, ttl: Optional[int] = None) -> None:
        """
        Set a plain string value with optional TTL.

        Args:
            key: Redis key
            value: String to store
            ttl: Time to live in seconds
        """
        redis_key = self._make_key(key)
        with self._store_errors("set", redis_key):
            if ttl:
                self.redis.setex(redis_key, ttl, value)
            else:
                self.redis.set(redis_key, value)

    def set_value_if_absent(self, key: str, value: str) -> bool:
        """
        Set a plain string value only if the key does not exist.

        Returns:
            True if the value was set, False if the key already existed
        """
        redis_key = self._make_key(key)
        with self._store_errors("setnx", redis_key):
            return bool(self.redis.set(redis_key, value, nx=True))

    def get_value(self, key: str) -> Optional[str]:
        """
        Get a plain string value.

        Returns:
            The value if present, None otherwise
        """
        redis_key = self._make_key(key)
        with self._store_errors("get", redis_key):
            data = self.redis.get(redis_key)
        return self._decode(data)

    def get_json(self, key: str) -> Optional[Dict[str, Any]]:
        """
        Get JSON data from Redis.

        Args:
            key: Redis key

        Returns:
            Dictionary if found, None otherwise
        """
        data = self.get_value(key)
        if data is None:
            return None
        return json.loads(data)

    def get_many_json(self, keys: List[str]) -> List[Optional[Dict[str, Any]]]:
        """
        Get several JSON documents in one round trip.

        Returns:
            One entry per key, None where the key is missing
        """
        if not keys:
            return []

        redis_keys = [self._make_key(key) for key in keys]
        with self._store_errors("mget", ",".join(redis_keys)):
            pipeline = self.redis.pipeline()
            for redis_key in redis_keys:
                pipeline.get(redis_key)
            results = pipeline.execute()

        documents = []
        for data in results:
            text = self._decode(data)
            documents.append(json.loads(text) if text is not None else None)
        return documents

    def update_json_field(self, key: str, field: str, value: Any) -> Optional[Dict[str, Any]]:
        """
        Atomically update a single field in a JSON object using Lua script.

        Args:
            key: Redis key
            field: Field name to update
            value: New value for the field

        Returns:
            The updated document, or None if the key does not exist
        """
        redis_key = self._make_key(key)
        with self._store_errors("update", redis_key):
            result = self.redis.eval(
                self.UPDATE_FIELD_SCRIPT, 1, redis_key, field, json.dumps(value)
            )

        text = self._decode(result)
        if not text:
            return None
        return json.loads(text)

    def increment(self, key: str) -> int:
        """
        Atomically increment a counter.

        Returns:
            The counter value after the increment
        """
        redis_key = self._make_key(key)
        with self._store_errors("incr", redis_key):
            return int(self.redis.incr(redis_key))

    def get_counter(self, key: str) -> int:
        """Current value of a counter, 0 if it was never incremented."""
        value = self.get_value(key)
        return int(value) if value else 0

    def list_range(self, key: str, start: int, stop: int) -> List[str]:
        """
        Read a slice of a list.

        Args:
            key: Redis key
            start: First index (inclusive)
            stop: Last index (inclusive)

        Returns:
            The list elements as strings
        """
        redis_key = self._make_key(key)
        with self._store_errors("lrange", redis_key):
            items = self.redis.lrange(redis_key, start, stop)
        return [self._decode(item) for item in items]

    def execute_transaction(self, commands: List[tuple]) -> List[Any]:
        """
        Run several write commands in one MULTI/EXEC block.

        Args:
            commands: (method_name, key, *args) tuples, keys unprefixed

        Returns:
            The raw command results
        """
        keys = ",".join(self._make_key(command[1]) for command in commands)
        with self._store_errors("transaction", keys):
            pipeline = self.redis.pipeline(transaction=True)
            for method, key, *args in commands:
                getattr(pipeline, method)(self._make_key(key), *args)
            return pipeline.execute()

    def delete(self, key: str) -> bool:
        """
        Delete a key from Redis.

        Args:
            key: Redis key to delete

        Returns:
            True if key was deleted, False if it did not exist
        """
        redis_key = self._make_key(key)
        with self._store_errors("delete", redis_key):
            return self.redis.delete(redis_key) > 0


class RedisConnectionManager:
    """
    Owns the connection pool shared by every repository.

    Build it with from_url() for REDIS_URL style settings (including
    rediss:// and query options) or from_settings() for host and port.
    """

    def __init__(self, connection_pool: redis.ConnectionPool):
        self.connection_pool = connection_pool
        self._client: Optional[redis.Redis] = None

    @classmethod
    def from_url(cls, url: str, max_connections: int = 20) -> 'RedisConnectionManager':
        return cls(redis.ConnectionPool.from_url(url, max_connections=max_connections))

    @classmethod
    def from_settings(cls, host: str = 'localhost', port: int = 6379, db: int = 0,
                      max_connections: int = 20,
                      password: Optional[str] = None) -> 'RedisConnectionManager':
        return cls(redis.ConnectionPool(
            host=host,
            port=port,
            db=db,
            password=password,
            max_connections=max_connections,
            socket_keepalive=True,
        ))

    @property
    def client(self) -> redis.Redis:
        """Client bound to the shared pool, created on first use."""
        if self._client is None:
            self._client = redis.Redis(connection_pool=self.connection_pool)
        return self._client

    def health_check(self) -> bool:
        """True while the server answers PING."""
        try:
            return bool(self.client.ping())
        except RedisError:
            return False
