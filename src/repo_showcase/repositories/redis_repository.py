"""Redis implementation of CacheStore.

Values are stored as JSON strings with a per-key expiry (``SET ... EX``).
Every backend failure is raised as CacheStoreError.
"""

import json
from typing import Any

import redis.asyncio as redis
from redis.exceptions import RedisError

from repo_showcase.config import get_redis_client
from repo_showcase.errors import CacheStoreError


class RedisCacheRepository:
    """Redis implementation of the JSON key-value cache.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(self, redis_client: redis.Redis | None = None) -> None:
        """Initialize the Redis cache repository.

        Args:
            redis_client: Asyncio Redis client. If None, creates default.
        """
        self._client = redis_client or get_redis_client()

    @classmethod
    def create(cls, redis_client: redis.Redis | None = None) -> "RedisCacheRepository":
        """Factory method to create RedisCacheRepository with defaults.

        Args:
            redis_client: Asyncio Redis client. If None, built from settings.

        Returns:
            Configured RedisCacheRepository
        """
        return cls(redis_client=redis_client)

    async def get_json(self, key: str) -> Any | None:
        """Read a JSON value.

        Args:
            key: The cache key

        Returns:
            The deserialized value, or None if the key does not exist

        Raises:
            CacheStoreError: If Redis fails or the value is not valid JSON
        """
        try:
            raw = await self._client.get(key)
        except (RedisError, OSError) as e:
            raise CacheStoreError(f"Redis GET {key} failed: {e}") from e

        if raw is None:
            return None

        try:
            return json.loads(raw)
        except (json.JSONDecodeError, TypeError) as e:
            raise CacheStoreError(f"Value at {key} is not valid JSON: {e}") from e

    async def put_json(self, key: str, value: Any, ttl: int) -> None:
        """Store a JSON value with an expiry.

        Args:
            key: The cache key
            value: JSON-serializable value
            ttl: Time-to-live in seconds

        Raises:
            CacheStoreError: If the value cannot be encoded or Redis fails
        """
        try:
            payload = json.dumps(value, separators=(",", ":"))
        except (TypeError, ValueError) as e:
            raise CacheStoreError(f"Value for {key} is not JSON serializable: {e}") from e

        try:
            await self._client.set(key, payload, ex=ttl)
        except (RedisError, OSError) as e:
            raise CacheStoreError(f"Redis SET {key} failed: {e}") from e

    async def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(await self._client.ping())
        except (RedisError, OSError):
            return False

    async def close(self) -> None:
        """Close the Redis connection pool."""
        await self._client.aclose()

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
