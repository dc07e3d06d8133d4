"""productcache - Cache-aside product lookups over an in-process cache.

Serves repeated product reads from a thread-safe in-memory cache, falls
back to a product repository on a miss, and caches the result with a
sliding window and an absolute ceiling. Callers evict a single product
after writing it.

Example:
    from productcache import (
        CacheConfig,
        DefaultKeyBuilder,
        InMemoryCacheStore,
        ProductService,
    )

    config = CacheConfig()  # 5 min sliding, 1 h absolute
    cache = InMemoryCacheStore.from_config(config)

    # repository is anything implementing IProductRepository
    service = ProductService(
        cache=cache,
        repository=repository,
        key_builder=DefaultKeyBuilder(),
        config=config,
    )

    product = await service.get_product_by_id(42)        # miss, then cached
    product = await service.get_product_by_id(42)        # hit
    cheap = await service.get_products_by_filter(category_id=1, max_price=100)

    # after updating product 42 in the store
    await service.invalidate_product(42)
"""

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
from productcache.infrastructure import (
    DefaultKeyBuilder,
    InMemoryCacheStore,
    InMemoryProductRepository,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "CacheConfig",
    "CacheEntry",
    "CacheKey",
    "ExpirationPolicy",
    "FilterSpec",
    "Product",
    # Exceptions
    "ProductCacheError",
    "CacheStoreError",
    # Core interfaces
    "ICacheStore",
    "IKeyBuilder",
    "IProductRepository",
    # Core services
    "ProductService",
    # Infrastructure implementations
    "InMemoryCacheStore",
    "DefaultKeyBuilder",
    "InMemoryProductRepository",
]
