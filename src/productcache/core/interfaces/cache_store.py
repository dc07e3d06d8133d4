"""Cache store interface."""

from typing import Any, Protocol

from productcache.core.entities.expiration_policy import ExpirationPolicy


class ICacheStore(Protocol):
    """Contract for process-local cache stores.

    Stores map opaque string keys to arbitrary values, each entry with
    its own expiration policy. Every method must be safe to call from
    concurrent threads and tasks.
    """

    async def get(self, key: str, value_type: type | None = None) -> Any | None:
        """Retrieve a live value by key.

        A successful read restarts the entry's sliding window.

        Args:
            key: The cache key to retrieve.
            value_type: If given, values that are not instances of this
                type are reported as absent.

        Returns:
            The cached value, or None if not found, expired, or of the
            wrong type.
        """
        ...

    async def set(
        self,
        key: str,
        value: Any,
        policy: ExpirationPolicy | None = None,
    ) -> None:
        """Store or overwrite a value, restarting both timers.

        Args:
            key: The cache key.
            value: The value to store.
            policy: Expiration policy. If None, uses the store default.

        Raises:
            CacheStoreError: If the store cannot accept the value.
        """
        ...

    async def delete(self, key: str) -> bool:
        """Delete a cached value.

        Args:
            key: The cache key to delete.

        Returns:
            True if a live entry was deleted, False otherwise.
        """
        ...

    async def exists(self, key: str) -> bool:
        """Check if a live entry exists without refreshing it.

        Args:
            key: The cache key to check.

        Returns:
            True if the key exists and has not expired.
        """
        ...

    async def clear(self) -> None:
        """Clear all cached values."""
        ...
