"""Product record and filter entities."""

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any


def to_decimal(value: Any) -> Decimal:
    """Coerce a price-like value to Decimal.

    Floats go through ``str`` first so ``9.99`` becomes ``Decimal("9.99")``
    rather than its binary expansion.

    Raises:
        ValueError: If the value is not a finite number.
    """
    if isinstance(value, Decimal):
        result = value
    else:
        if isinstance(value, bool):
            raise ValueError(f"Invalid price: {value!r}")
        try:
            result = Decimal(str(value))
        except InvalidOperation as e:
            raise ValueError(f"Invalid price: {value!r}") from e
    if not result.is_finite():
        raise ValueError(f"Invalid price: {value!r}")
    return result


@dataclass(frozen=True)
class Product:
    """A product record as returned by the data store.

    Instances are immutable, so a cached product can be handed to any
    number of callers without copying.
    """

    id: int
    category_id: int
    price: Decimal
    name: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "price", to_decimal(self.price))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Product":
        """Build a product from a raw record mapping.

        Accepts both ``categoryId`` and ``category_id`` spellings.

        Args:
            data: Mapping with ``id``, category, ``price`` and optional ``name``.

        Returns:
            A new Product instance.
        """
        category_id = data["categoryId"] if "categoryId" in data else data["category_id"]
        return cls(
            id=int(data["id"]),
            category_id=int(category_id),
            price=data["price"],
            name=str(data.get("name", "")),
        )


@dataclass(frozen=True)
class FilterSpec:
    """Optional category and maximum price bound for a product search."""

    category_id: int | None = None
    max_price: Decimal | None = None

    def __post_init__(self) -> None:
        if self.max_price is not None:
            object.__setattr__(self, "max_price", to_decimal(self.max_price))

    def matches(self, product: Product) -> bool:
        """Check whether a product satisfies every present filter field."""
        if self.category_id is not None and product.category_id != self.category_id:
            return False
        if self.max_price is not None and product.price > self.max_price:
            return False
        return True
