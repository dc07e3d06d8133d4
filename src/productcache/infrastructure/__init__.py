"""Infrastructure layer implementations for productcache."""

from productcache.infrastructure.backends import InMemoryCacheStore
from productcache.infrastructure.key_builders import DefaultKeyBuilder
from productcache.infrastructure.repositories import InMemoryProductRepository

__all__ = [
    "InMemoryCacheStore",
    "DefaultKeyBuilder",
    "InMemoryProductRepository",
]
