"""Product service - cache-aside lookups over a product repository."""

import logging
from decimal import Decimal
from typing import Any

from productcache.core.entities.cache_config import CacheConfig
from productcache.core.entities.expiration_policy import ExpirationPolicy
from productcache.core.entities.product import Product
from productcache.core.exceptions import CacheStoreError
from productcache.core.interfaces.cache_store import ICacheStore
from productcache.core.interfaces.key_builder import IKeyBuilder
from productcache.core.interfaces.product_repository import IProductRepository

logger = logging.getLogger(__name__)


class ProductService:
    """Domain service implementing cache-aside reads for products.

    Reads check the cache first and fall back to the repository on a
    miss, caching what it returns under the configured expiration
    policy. The service keeps no state of its own beyond references to
    its collaborators, so a single instance can be shared by any number
    of concurrent callers.

    Invalidating a product only evicts its single-product entry. Cached
    filter results that include the product stay until they expire.

    Concurrent misses on the same key are not coalesced: each one
    queries the repository and the last write to the cache wins.
    """

    def __init__(
        self,
        cache: ICacheStore,
        repository: IProductRepository,
        key_builder: IKeyBuilder,
        config: CacheConfig | None = None,
    ) -> None:
        """Initialize the product service.

        Args:
            cache: The cache store shared across requests.
            repository: The data store to read through to on a miss.
            key_builder: The key builder for deriving cache keys.
            config: Optional cache configuration. Uses defaults if not provided.
        """
        self._cache = cache
        self._repository = repository
        self._key_builder = key_builder
        self._config = config or CacheConfig()

    @property
    def config(self) -> CacheConfig:
        """Get the cache configuration."""
        return self._config

    @property
    def policy(self) -> ExpirationPolicy:
        """Get the expiration policy applied to every entry this service writes."""
        return self._config.policy

    def key_for_product(self, product_id: int) -> str:
        """Return the cache key used for a single product."""
        return self._key_builder.build_product_key(product_id)

    def key_for_filter(
        self,
        category_id: int | None = None,
        max_price: Decimal | None = None,
    ) -> str:
        """Return the cache key used for a filtered search."""
        return self._key_builder.build_filter_key(category_id, max_price)

    async def get_product_by_id(self, product_id: int) -> Product | None:
        """Get a single product, using the cache first.

        A product that does not exist is never cached, so later calls
        keep asking the repository until it appears.

        Args:
            product_id: The product identifier.

        Returns:
            The product, or None if the repository has no such product.
        """
        key = self.key_for_product(product_id)
        if not self._config.enabled:
            return await self._repository.get_product_by_id(product_id)

        cached = await self._cache.get(key, Product)
        if cached is not None:
            logger.info("Cache HIT for key: %s", key)
            return cached

        logger.warning("Cache MISS for key: %s. Fetching from repository.", key)
        product = await self._repository.get_product_by_id(product_id)

        if product is not None:
            await self._store(key, product)

        return product

    async def get_products_by_filter(
        self,
        category_id: int | None = None,
        max_price: Decimal | None = None,
    ) -> tuple[Product, ...]:
        """Get the products matching a filter, using the cache first.

        Each present/absent combination of the two filters has its own
        cache entry. Empty results are cached like any other.

        Args:
            category_id: Optional category to filter on.
            max_price: Optional inclusive upper price bound.

        Returns:
            Matching products in repository order, possibly empty.
        """
        key = self.key_for_filter(category_id, max_price)
        if not self._config.enabled:
            return tuple(
                await self._repository.get_products_by_filter(category_id, max_price)
            )

        cached = await self._cache.get(key, tuple)
        if cached is not None:
            logger.info("Cache HIT for key: %s", key)
            return cached

        logger.warning("Cache MISS for key: %s. Fetching from repository.", key)
        products = tuple(
            await self._repository.get_products_by_filter(category_id, max_price)
        )

        await self._store(key, products)

        return products

    async def invalidate_product(self, product_id: int) -> None:
        """Remove a single product from the cache.

        Call after the product is updated or deleted in the store.
        Removing a product that is not cached is a no-op.

        Args:
            product_id: The product identifier.
        """
        key = self.key_for_product(product_id)
        await self._cache.delete(key)
        logger.info("Invalidated cache for key: %s", key)

    async def _store(self, key: str, value: Any) -> None:
        """Write a fetched value to the cache.

        The cache is not the source of truth, so a store that refuses
        the value is logged and otherwise ignored.
        """
        try:
            await self._cache.set(key, value, self.policy)
        except CacheStoreError as e:
            logger.warning("Failed to cache key %s: %s", key, e)
