"""Product repository implementations."""

from productcache.infrastructure.repositories.memory import InMemoryProductRepository

__all__ = ["InMemoryProductRepository"]
