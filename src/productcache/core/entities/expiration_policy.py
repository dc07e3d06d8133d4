"""Expiration policy value object."""

from dataclasses import dataclass
from datetime import timedelta


@dataclass(frozen=True)
class ExpirationPolicy:
    """Sliding and absolute expiration timers for a cache entry.

    An entry governed by this policy expires as soon as either timer
    elapses: the sliding window when the entry goes unread for
    ``sliding``, the absolute ceiling when ``absolute`` has passed since
    the entry was stored. ``None`` disables the corresponding timer.
    """

    sliding: timedelta | None = None
    absolute: timedelta | None = None

    def __post_init__(self) -> None:
        """Reject zero or negative durations."""
        for name in ("sliding", "absolute"):
            value = getattr(self, name)
            if value is not None and value <= timedelta(0):
                raise ValueError(f"{name} expiration must be positive, got {value}")

    @property
    def sliding_seconds(self) -> float | None:
        """Sliding window in seconds, or None when disabled."""
        return None if self.sliding is None else self.sliding.total_seconds()

    @property
    def absolute_seconds(self) -> float | None:
        """Absolute ceiling in seconds, or None when disabled."""
        return None if self.absolute is None else self.absolute.total_seconds()

    @classmethod
    def default(cls) -> "ExpirationPolicy":
        """Five minute sliding window with a one hour absolute ceiling."""
        return cls(sliding=timedelta(minutes=5), absolute=timedelta(hours=1))
