"""Pytest configuration and fixtures."""

import pytest

from kata.catalog import get_pantry_products, get_products, get_stream_products
from kata.models import Product


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def products() -> list[Product]:
    """Full fixture catalog."""
    return get_products()


@pytest.fixture
def stream_products() -> list[Product]:
    """Catalog subset used by the stream exercises."""
    return get_stream_products()


@pytest.fixture
def pantry_products() -> list[Product]:
    """Catalog subset used by the functional interface exercises."""
    return get_pantry_products()
