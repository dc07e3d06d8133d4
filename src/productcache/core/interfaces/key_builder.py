"""Key builder interface."""

from decimal import Decimal
from typing import Protocol


class IKeyBuilder(Protocol):
    """Contract for deriving cache keys from lookup arguments.

    Keys must be deterministic: equal arguments always produce the same
    key, and different arguments never do.
    """

    def build_product_key(self, product_id: int) -> str:
        """Build the key for a single product lookup.

        Args:
            product_id: The product identifier.

        Returns:
            The cache key for that product.
        """
        ...

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
            The cache key for that filter combination.
        """
        ...
