"""In-memory cache store implementation."""

import threading
import time
from collections.abc import Callable
from typing import Any

from cachetools import TLRUCache  # type: ignore[import-untyped]

from productcache.core.entities.cache_config import CacheConfig
from productcache.core.entities.cache_entry import CacheEntry
from productcache.core.entities.expiration_policy import ExpirationPolicy
from productcache.core.exceptions import CacheStoreError


def _absolute_deadline(key: str, entry: CacheEntry, now: float) -> float:
    """Time-to-use function for TLRUCache: the entry's absolute ceiling."""
    return entry.absolute_deadline


def _entry_sizer(getsizeof: Callable[[Any], int]) -> Callable[[CacheEntry], int]:
    """Adapt a size function over cached values to one over entries."""

    def sizer(entry: CacheEntry) -> int:
        return getsizeof(entry.value)

    return sizer


class _Stripe:
    """One lock-protected partition of the key space."""

    __slots__ = ("lock", "cache", "hits", "misses")

    def __init__(
        self,
        maxsize: int,
        timer: Callable[[], float],
        getsizeof: Callable[[Any], int] | None = None,
    ) -> None:
        self.lock = threading.Lock()
        self.cache: TLRUCache[str, CacheEntry] = TLRUCache(
            maxsize=maxsize,
            ttu=_absolute_deadline,
            timer=timer,
            getsizeof=_entry_sizer(getsizeof) if getsizeof else None,
        )
        self.hits = 0
        self.misses = 0


class InMemoryCacheStore:
    """Thread-safe in-memory cache store with sliding and absolute expiry.

    Keys are spread over a fixed number of stripes, each guarded by its
    own lock, so unrelated keys never contend on a single global lock.
    Each stripe is a cachetools TLRUCache whose time-to-use is the
    entry's absolute ceiling; the sliding window is checked on read.
    Expired entries are dropped lazily, and ``purge_expired`` sweeps
    them eagerly when called.

    The clock is injectable and is read once per operation.
    """

    def __init__(
        self,
        maxsize: int = 10_000,
        stripes: int = 16,
        default_policy: ExpirationPolicy | None = None,
        timer: Callable[[], float] = time.monotonic,
        getsizeof: Callable[[Any], int] | None = None,
    ) -> None:
        """Initialize the in-memory cache store.

        Args:
            maxsize: Maximum total size across all stripes. Counts
                entries unless ``getsizeof`` is given.
            stripes: Number of independently locked partitions.
            default_policy: Policy used when ``set`` is given none.
            timer: Monotonic clock returning seconds.
            getsizeof: Optional function returning the size of a cached
                value. A value larger than one stripe can hold is
                rejected by ``set``.
        """
        if maxsize < 1:
            raise ValueError(f"maxsize must be at least 1, got {maxsize}")
        if stripes < 1:
            raise ValueError(f"stripes must be at least 1, got {stripes}")

        self._maxsize = maxsize
        self._default_policy = default_policy or ExpirationPolicy.default()
        per_stripe = -(-maxsize // stripes)
        self._stripes = tuple(
            _Stripe(per_stripe, timer, getsizeof) for _ in range(stripes)
        )

    @classmethod
    def from_config(
        cls,
        config: CacheConfig,
        timer: Callable[[], float] = time.monotonic,
        getsizeof: Callable[[Any], int] | None = None,
    ) -> "InMemoryCacheStore":
        """Create a store sized and timed from a CacheConfig."""
        return cls(
            maxsize=config.max_size,
            stripes=config.stripes,
            default_policy=config.policy,
            timer=timer,
            getsizeof=getsizeof,
        )

    async def get(self, key: str, value_type: type | None = None) -> Any | None:
        """Retrieve a live value by key, restarting its sliding window.

        Args:
            key: The cache key to retrieve.
            value_type: If given, values of any other type read as absent.

        Returns:
            The cached value, or None if not found, expired, or of the
            wrong type.
        """
        stripe = self._stripe_for(key)
        with stripe.lock, stripe.cache.timer as now:
            entry = self._live_entry(stripe, key, now)
            if entry is None or (
                value_type is not None and not isinstance(entry.value, value_type)
            ):
                stripe.misses += 1
                return None

            stripe.cache[key] = entry.touch(now)
            stripe.hits += 1
            return entry.value

    async def set(
        self,
        key: str,
        value: Any,
        policy: ExpirationPolicy | None = None,
    ) -> None:
        """Store or overwrite a value with fresh timers.

        Args:
            key: The cache key.
            value: The value to store.
            policy: Expiration policy. If None, uses the store default.

        Raises:
            CacheStoreError: If the underlying cache rejects the value.
        """
        effective_policy = policy or self._default_policy
        stripe = self._stripe_for(key)
        with stripe.lock, stripe.cache.timer as now:
            entry = CacheEntry.create(key, value, effective_policy, now)
            try:
                stripe.cache[key] = entry
            except ValueError as e:
                raise CacheStoreError(f"Failed to store key {key!r}: {e}") from e

    async def delete(self, key: str) -> bool:
        """Delete a cached value.

        Args:
            key: The cache key to delete.

        Returns:
            True if a live entry was deleted, False otherwise.
        """
        stripe = self._stripe_for(key)
        with stripe.lock, stripe.cache.timer as now:
            entry = stripe.cache.pop(key, None)
            return entry is not None and not entry.is_expired(now)

    async def exists(self, key: str) -> bool:
        """Check if a live entry exists without refreshing it.

        Args:
            key: The cache key to check.

        Returns:
            True if the key exists and has not expired.
        """
        stripe = self._stripe_for(key)
        with stripe.lock, stripe.cache.timer as now:
            return self._live_entry(stripe, key, now) is not None

    async def clear(self) -> None:
        """Clear all cached values and reset statistics."""
        for stripe in self._stripes:
            with stripe.lock:
                stripe.cache.clear()
                stripe.hits = 0
                stripe.misses = 0

    async def purge_expired(self) -> int:
        """Eagerly remove every entry whose sliding or absolute timer elapsed.

        Returns:
            Number of entries removed.
        """
        removed = 0
        for stripe in self._stripes:
            with stripe.lock, stripe.cache.timer as now:
                removed += len(stripe.cache.expire(now))

                for key in list(stripe.cache):
                    entry = stripe.cache.get(key)
                    if entry is not None and entry.is_expired(now):
                        stripe.cache.pop(key, None)
                        removed += 1
        return removed

    @property
    def stats(self) -> dict[str, int]:
        """Get cache statistics.

        Returns:
            Dictionary with hits, misses, total requests and live entries.
        """
        hits = 0
        misses = 0
        for stripe in self._stripes:
            with stripe.lock:
                hits += stripe.hits
                misses += stripe.misses
        return {
            "hits": hits,
            "misses": misses,
            "total": hits + misses,
            "entries": len(self),
        }

    @property
    def maxsize(self) -> int:
        """Return the maximum size of the cache."""
        return self._maxsize

    @property
    def default_policy(self) -> ExpirationPolicy:
        """Return the policy applied when ``set`` is given none."""
        return self._default_policy

    def __len__(self) -> int:
        """Return the number of live entries in the cache."""
        count = 0
        for stripe in self._stripes:
            with stripe.lock, stripe.cache.timer as now:
                for key in list(stripe.cache):
                    entry = stripe.cache.get(key)
                    if entry is not None and not entry.is_expired(now):
                        count += 1
        return count

    def _stripe_for(self, key: str) -> _Stripe:
        return self._stripes[hash(key) % len(self._stripes)]

    @staticmethod
    def _live_entry(stripe: _Stripe, key: str, now: float) -> CacheEntry | None:
        """Return the entry for key if live, dropping it if it has expired.

        Must be called with the stripe lock held and its timer frozen.
        """
        entry = stripe.cache.get(key)
        if entry is None:
            return None
        if entry.is_expired(now):
            stripe.cache.pop(key, None)
            return None
        return entry
