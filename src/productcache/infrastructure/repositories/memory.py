"""In-memory product repository implementation."""

from collections import Counter
from collections.abc import Iterable
from decimal import Decimal

from productcache.core.entities.product import FilterSpec, Product


class InMemoryProductRepository:
    """Product repository backed by an ordered in-process list.

    Useful as a stand-in for a real data store in tests and local
    development. Results keep insertion order, and every read is
    counted in ``calls`` so callers can observe cache effectiveness.
    """

    def __init__(self, products: Iterable[Product] = ()) -> None:
        """Initialize the repository.

        Args:
            products: Initial products, in store order.
        """
        self._products: dict[int, Product] = {}
        self.calls: Counter[str] = Counter()
        for product in products:
            self.add(product)

    async def get_product_by_id(self, product_id: int) -> Product | None:
        """Fetch a product by id.

        Args:
            product_id: The product identifier.

        Returns:
            The product, or None if no such product exists.
        """
        self.calls["get_product_by_id"] += 1
        return self._products.get(product_id)

    async def get_products_by_filter(
        self,
        category_id: int | None,
        max_price: Decimal | None,
    ) -> list[Product]:
        """Fetch products matching every given filter.

        Args:
            category_id: Optional category to filter on.
            max_price: Optional inclusive upper price bound.

        Returns:
            Matching products in insertion order.
        """
        self.calls["get_products_by_filter"] += 1
        criteria = FilterSpec(category_id=category_id, max_price=max_price)
        return [p for p in self._products.values() if criteria.matches(p)]

    def add(self, product: Product) -> None:
        """Insert a new product.

        Raises:
            ValueError: If a product with the same id already exists.
        """
        if product.id in self._products:
            raise ValueError(f"Product {product.id} already exists")
        self._products[product.id] = product

    def update(self, product: Product) -> None:
        """Replace an existing product in place, keeping its position.

        Raises:
            KeyError: If no product with that id exists.
        """
        if product.id not in self._products:
            raise KeyError(product.id)
        self._products[product.id] = product

    def remove(self, product_id: int) -> bool:
        """Remove a product.

        Returns:
            True if the product existed, False otherwise.
        """
        return self._products.pop(product_id, None) is not None

    def __len__(self) -> int:
        return len(self._products)
