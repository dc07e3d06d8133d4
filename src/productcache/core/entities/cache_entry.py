"""Cache entry entity."""

import math
from dataclasses import dataclass, replace
from typing import Any

from productcache.core.entities.expiration_policy import ExpirationPolicy


@dataclass(frozen=True)
class CacheEntry:
    """Immutable cache entry value object.

    Holds a cached value together with its expiration policy and the
    store-clock timestamps both timers are measured from. Timestamps are
    seconds on whatever clock the owning store uses.
    """

    key: str
    value: Any
    policy: ExpirationPolicy
    created_at: float
    last_accessed: float

    @property
    def absolute_deadline(self) -> float:
        """Time at which the absolute ceiling fires.

        Returns:
            The deadline in store-clock seconds, or infinity if the
            policy has no absolute ceiling.
        """
        absolute = self.policy.absolute_seconds
        if absolute is None:
            return math.inf
        return self.created_at + absolute

    def is_expired(self, now: float) -> bool:
        """Check whether either timer has elapsed at ``now``.

        Args:
            now: Current store-clock time.

        Returns:
            True if the entry must be treated as absent.
        """
        if now >= self.absolute_deadline:
            return True
        sliding = self.policy.sliding_seconds
        return sliding is not None and now - self.last_accessed >= sliding

    def touch(self, now: float) -> "CacheEntry":
        """Return a copy whose sliding window restarts at ``now``."""
        return replace(self, last_accessed=now)

    @classmethod
    def create(
        cls,
        key: str,
        value: Any,
        policy: ExpirationPolicy,
        now: float,
    ) -> "CacheEntry":
        """Factory method to create a fresh entry with both timers at ``now``.

        Args:
            key: The cache key.
            value: The value to cache.
            policy: Expiration policy for the entry.
            now: Current store-clock time.

        Returns:
            A new CacheEntry instance.
        """
        return cls(
            key=key,
            value=value,
            policy=policy,
            created_at=now,
            last_accessed=now,
        )
