"""Core interfaces (Protocol classes) for productcache."""

from productcache.core.interfaces.cache_store import ICacheStore
from productcache.core.interfaces.key_builder import IKeyBuilder
from productcache.core.interfaces.product_repository import IProductRepository

__all__ = [
    "ICacheStore",
    "IKeyBuilder",
    "IProductRepository",
]
