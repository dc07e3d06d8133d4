"""Pytest configuration for productcache tests."""

from decimal import Decimal

import pytest

from productcache import InMemoryProductRepository, Product


class FakeClock:
    """Manually advanced clock usable as a cache store timer."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(
        self,
        seconds: float = 0.0,
        minutes: float = 0.0,
        hours: float = 0.0,
    ) -> None:
        self.now += seconds + minutes * 60 + hours * 3600


@pytest.fixture
def clock() -> FakeClock:
    """Create a fake clock for expiration tests."""
    return FakeClock()


@pytest.fixture
def products() -> list[Product]:
    """Sample catalogue in store order."""
    return [
        Product(id=1, category_id=1, price=Decimal("9.99"), name="Pen"),
        Product(id=2, category_id=2, price=Decimal("150.00"), name="Chair"),
        Product(id=3, category_id=2, price=Decimal("75.50"), name="Lamp"),
        Product(id=42, category_id=1, price=Decimal("9.99"), name="Notebook"),
    ]


@pytest.fixture
def repository(products: list[Product]) -> InMemoryProductRepository:
    """Create a repository seeded with the sample catalogue."""
    return InMemoryProductRepository(products)
