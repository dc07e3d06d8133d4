"""Core domain layer for productcache."""

from productcache.core.entities import (
    CacheConfig,
    CacheEntry,
    CacheKey,
    ExpirationPolicy,
    FilterSpec,
    Product,
)
from productcache.core.exceptions import CacheStoreError, ProductCacheError
from productcache.core.interfaces import (
    ICacheStore,
    IKeyBuilder,
    IProductRepository,
)
from productcache.core.services import ProductService

__all__ = [
    # Entities
    "CacheConfig",
    "CacheEntry",
    "CacheKey",
    "ExpirationPolicy",
    "FilterSpec",
    "Product",
    # Exceptions
    "ProductCacheError",
    "CacheStoreError",
    # Interfaces
    "ICacheStore",
    "IKeyBuilder",
    "IProductRepository",
    # Services
    "ProductService",
]
