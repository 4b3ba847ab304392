"""Optional value exercises: searches that may find nothing.

Every lookup returns ``None`` instead of raising when no product
qualifies.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from kata.exercises.functional import ProductPredicate, require_callable
from kata.models import Category, Product


def find_first(products: Iterable[Product], predicate: ProductPredicate) -> Product | None:
    """Return the first product accepted by ``predicate``, if any."""
    require_callable(predicate, "predicate")
    return next((product for product in products if predicate(product)), None)


def find_by_name(products: Iterable[Product], name: str) -> Product | None:
    return find_first(products, lambda product: product.name == name)


def find_cheapest(
    products: Iterable[Product],
    category: Category | None = None,
) -> Product | None:
    """Return the lowest-priced product, optionally within ``category``.

    Ties go to the product that appears first.
    """
    candidates = [
        product for product in products if category is None or product.category == category
    ]
    if not candidates:
        return None
    return min(candidates, key=lambda product: product.price)


def price_of(
    products: Iterable[Product],
    name: str,
    default: Decimal | None = None,
) -> Decimal | None:
    """Return the price of the product called ``name``, or ``default``."""
    product = find_by_name(products, name)
    return product.price if product is not None else default
