"""Default key builder implementation."""

from decimal import Decimal

from productcache.core.entities.cache_key import CacheKey
from productcache.core.entities.product import to_decimal

PRODUCT_TAG = "product"
FILTER_TAG = "products-filter"


class DefaultKeyBuilder:
    """Default key builder producing human-readable keys.

    Single products map to ``product-{id}``. Filtered searches map to
    ``products-filter-cat:{category}-price:{max_price}``, with ``any``
    standing in for an absent field. Fields always appear in the same
    order, so every present/absent combination has its own key.
    """

    def build_product_key(self, product_id: int) -> str:
        """Build the key for a single product lookup.

        Args:
            product_id: The product identifier.

        Returns:
            The cache key, e.g. ``product-42``.

        Raises:
            TypeError: If product_id is not an integer.
        """
        _require_int("product_id", product_id)
        return str(CacheKey(PRODUCT_TAG, (str(product_id),)))

    def build_filter_key(
        self,
        category_id: int | None,
        max_price: Decimal | None,
    ) -> str:
        """Build the key for a filtered product search.

        Args:
            category_id: Optional category to filter on.
            max_price: Optional inclusive upper price bound.

        Returns:
            The cache key, e.g. ``products-filter-cat:2-price:any``.
        """
        if category_id is not None:
            _require_int("category_id", category_id)
        price = None if max_price is None else to_decimal(max_price)

        parts = (
            f"cat:{CacheKey.render(category_id)}",
            f"price:{CacheKey.render(price)}",
        )
        return str(CacheKey(FILTER_TAG, parts))


def _require_int(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
