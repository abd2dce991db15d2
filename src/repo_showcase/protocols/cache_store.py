"""Cache storage protocol.

Defines the interface for the key-value store shared by both cache tiers.
Values are JSON-compatible Python objects; expiry is owned by the store.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CacheStore(Protocol):
    """Protocol for JSON key-value stores with TTL.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.

    Both methods may raise CacheStoreError; callers decide whether a
    failure matters.
    """

    async def get_json(self, key: str) -> Any | None:
        """Read and deserialize a value.

        Args:
            key: The cache key

        Returns:
            The deserialized value, or None if the key is absent or expired
        """
        ...

    async def put_json(self, key: str, value: Any, ttl: int) -> None:
        """Serialize and store a value.

        Args:
            key: The cache key
            value: JSON-serializable value
            ttl: Time-to-live in seconds
        """
        ...
