"""Cache configuration entity."""

from dataclasses import dataclass
from datetime import timedelta

from productcache.core.entities.expiration_policy import ExpirationPolicy


@dataclass
class CacheConfig:
    """Cache configuration.

    Provides the expiration timers applied to every entry the lookup
    service creates, the size bound and lock striping of the in-memory
    store, and a switch to bypass caching entirely.
    """

    enabled: bool = True
    sliding_expiration: timedelta | None = timedelta(minutes=5)
    absolute_expiration: timedelta | None = timedelta(hours=1)
    max_size: int = 10_000
    stripes: int = 16

    def __post_init__(self) -> None:
        """Validate sizes and timers."""
        if self.max_size < 1:
            raise ValueError(f"max_size must be at least 1, got {self.max_size}")
        if self.stripes < 1:
            raise ValueError(f"stripes must be at least 1, got {self.stripes}")
        # Raises ValueError on non-positive durations
        _ = self.policy

    @property
    def policy(self) -> ExpirationPolicy:
        """Expiration policy built from the configured timers."""
        return ExpirationPolicy(
            sliding=self.sliding_expiration,
            absolute=self.absolute_expiration,
        )
