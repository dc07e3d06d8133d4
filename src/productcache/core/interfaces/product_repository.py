"""Product repository interface."""

from collections.abc import Sequence
from decimal import Decimal
from typing import Protocol

from productcache.core.entities.product import Product


class IProductRepository(Protocol):
    """Contract for the data store that backs the cache.

    Implementations own connectivity, retries and timeouts. Any
    exception they raise is propagated to callers of the lookup service.
    """

    async def get_product_by_id(self, product_id: int) -> Product | None:
        """Fetch a product by id.

        Args:
            product_id: The product identifier.

        Returns:
            The product, or None if no such product exists.
        """
        ...

    async def get_products_by_filter(
        self,
        category_id: int | None,
        max_price: Decimal | None,
    ) -> Sequence[Product]:
        """Fetch products matching every given filter.

        Args:
            category_id: Optional category to filter on.
            max_price: Optional inclusive upper price bound.

        Returns:
            Matching products in store order. Empty when nothing matches.
        """
        ...
