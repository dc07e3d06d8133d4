"""Domain entities for productcache."""

from productcache.core.entities.cache_config import CacheConfig
from productcache.core.entities.cache_entry import CacheEntry
from productcache.core.entities.cache_key import CacheKey
from productcache.core.entities.expiration_policy import ExpirationPolicy
from productcache.core.entities.product import FilterSpec, Product

__all__ = [
    "CacheConfig",
    "CacheEntry",
    "CacheKey",
    "ExpirationPolicy",
    "FilterSpec",
    "Product",
]
