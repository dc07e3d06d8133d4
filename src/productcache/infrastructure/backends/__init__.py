"""Cache store backends."""

from productcache.infrastructure.backends.memory import InMemoryCacheStore

__all__ = ["InMemoryCacheStore"]
