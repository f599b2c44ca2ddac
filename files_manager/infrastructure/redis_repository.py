"""
Redis Repository Base Class

Provides fail-soft JSON, list and set operations on top of redis-py.
Implements the repository pattern for Redis-based data storage.
"""

import json
import logging
from typing import Any, Dict, List, Optional

import redis
from redis.exceptions import RedisError

logger = logging.getLogger(__name__)


class RedisRepository:
    """
    Base Redis repository.

    Read helpers return None/empty on store errors, write helpers return
    False, so an outage degrades callers instead of crashing them.
    """

    def __init__(self, redis_client: redis.Redis, key_prefix: str = ""):
        self.redis = redis_client
        self.key_prefix = key_prefix

    def _make_key(self, key: str) -> str:
        """Create a prefixed key for Redis storage."""
        return f"{self.key_prefix}:{key}" if self.key_prefix else key

    def set_value(self, key: str, value: str, ttl: Optional[int] = None) -> bool:
        """
        Set a plain string value with optional TTL (resets any previous TTL).

        Returns:
            True if successful, False otherwise
        """
        try:
            redis_key = self._make_key(key)
            if ttl:
                return bool(self.redis.setex(redis_key, ttl, value))
            return bool(self.redis.set(redis_key, value))
        except RedisError as e:
            logger.error(f"Error setting value for key {key}: {e}")
            return False

    def get_value(self, key: str) -> Optional[str]:
        """Get a plain string value, None if missing or on error."""
        try:
            data = self.redis.get(self._make_key(key))
            if data is None:
                return None
            return data.decode('utf-8') if isinstance(data, bytes) else data
        except RedisError as e:
            logger.error(f"Error getting value for key {key}: {e}")
            return None

    def set_if_absent(self, key: str, value: str) -> Optional[bool]:
        """
        Atomically claim a key.

        Returns:
            True if claimed, False if the key already existed,
            None if the store was unavailable
        """
        try:
            return bool(self.redis.set(self._make_key(key), value, nx=True))
        except RedisError as e:
            logger.error(f"Error claiming key {key}: {e}")
            return None

    def set_json(self, key: str, data: Dict[str, Any], ttl: Optional[int] = None) -> bool:
        """
        Atomically set JSON data with optional TTL.

        Args:
            key: Redis key
            data: Dictionary to store as JSON
            ttl: Time to live in seconds

        Returns:
            True if successful, False otherwise
        """
        try:
            return self.set_value(key, json.dumps(data), ttl)
        except TypeError as e:
            logger.error(f"Error serializing JSON data for key {key}: {e}")
            return False

    def get_json(self, key: str) -> Optional[Dict[str, Any]]:
        """
        Get JSON data from Redis.

        Returns:
            Dictionary if found and valid JSON, None otherwise
        """
        data = self.get_value(key)
        if data is None:
            return None

        try:
            return json.loads(data)
        except json.JSONDecodeError as e:
            logger.error(f"Error decoding JSON data for key {key}: {e}")
            return None

    def get_many_json(self, keys: List[str]) -> List[Optional[Dict[str, Any]]]:
        """
        Get several JSON documents in one round trip, preserving order.

        Missing or undecodable documents come back as None.
        """
        if not keys:
            return []

        try:
            raw_values = self.redis.mget([self._make_key(key) for key in keys])
        except RedisError as e:
            logger.error(f"Error getting {len(keys)} JSON documents: {e}")
            return [None] * len(keys)

        documents = []
        for key, raw in zip(keys, raw_values):
            if raw is None:
                documents.append(None)
                continue
            try:
                documents.append(json.loads(raw))
            except json.JSONDecodeError as e:
                logger.error(f"Error decoding JSON data for key {key}: {e}")
                documents.append(None)
        return documents

    def update_json_field(self, key: str, field: str, value: Any) -> Optional[Dict[str, Any]]:
        """
        Atomically update a single field in a JSON object using Lua script.

        Args:
            key: Redis key
            field: Field name to update
            value: New value for the field

        Returns:
            The updated document, None if the key is missing or on error
        """
        lua_script = """
        local key = KEYS[1]
        local field = ARGV[1]
        local value = ARGV[2]

        local data = redis.call('GET', key)
        if not data then
            return nil
        end

        local json_data = cjson.decode(data)
        json_data[field] = cjson.decode(value)

        local updated_data = cjson.encode(json_data)
        redis.call('SET', key, updated_data)
        return updated_data
        """

        try:
            redis_key = self._make_key(key)
            result = self.redis.eval(lua_script, 1, redis_key, field, json.dumps(value))
        except RedisError as e:
            logger.error(f"Error updating JSON field {field} for key {key}: {e}")
            return None

        if result is None:
            return None
        return json.loads(result)

    def ping(self) -> bool:
        """Check whether the connection is currently usable."""
        try:
            return bool(self.redis.ping())
        except RedisError:
            return False

    def delete(self, key: str) -> bool:
        """
        Delete a key from Redis.

        Returns:
            True if key was deleted, False otherwise
        """
        try:
            return self.redis.delete(self._make_key(key)) > 0
        except RedisError as e:
            logger.error(f"Error deleting key {key}: {e}")
            return False

    def append_to_list(self, key: str, value: str) -> bool:
        """Append value to the tail of a list, keeping insertion order."""
        try:
            self.redis.rpush(self._make_key(key), value)
            return True
        except RedisError as e:
            logger.error(f"Error appending to list {key}: {e}")
            return False

    def get_list_range(self, key: str, offset: int, limit: int) -> List[str]:
        """
        Get up to limit list items starting at offset.

        Returns:
            Items in list order, empty on error
        """
        if limit <= 0:
            return []

        try:
            items = self.redis.lrange(self._make_key(key), offset, offset + limit - 1)
        except RedisError as e:
            logger.error(f"Error reading list {key}: {e}")
            return []
        return [item.decode('utf-8') if isinstance(item, bytes) else item for item in items]

    def add_to_set(self, key: str, member: str) -> bool:
        """Add a member to a set."""
        try:
            self.redis.sadd(self._make_key(key), member)
            return True
        except RedisError as e:
            logger.error(f"Error adding to set {key}: {e}")
            return False

    def set_size(self, key: str) -> int:
        """
        Number of members in a set.

        Raises:
            RedisError: Counting has no meaningful fallback value
        """
        return int(self.redis.scard(self._make_key(key)))


class RedisConnectionManager:
    """Manages Redis connection with connection pooling."""

    def __init__(self, host: str = 'localhost', port: int = 6379, db: int = 0,
                 password: Optional[str] = None, max_connections: int = 20,
                 socket_timeout: Optional[float] = 5.0, decode_responses: bool = False):
        self.connection_pool = redis.ConnectionPool(
            host=host,
            port=port,
            db=db,
            password=password,
            max_connections=max_connections,
            decode_responses=decode_responses,
            socket_timeout=socket_timeout,
            socket_connect_timeout=socket_timeout,
            retry_on_timeout=True,
            socket_keepalive=True,
            socket_keepalive_options={}
        )
        self._client = None

    @property
    def client(self) -> redis.Redis:
        """Get Redis client instance with connection pooling."""
        if self._client is None:
            self._client = redis.Redis(connection_pool=self.connection_pool)
        return self._client

    def close(self):
        """Close the connection pool."""
        if self.connection_pool:
            self.connection_pool.disconnect()
