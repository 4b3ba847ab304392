"""Functional interface exercises: predicates and functions as values."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Callable, Iterable, TypeVar

from kata.exceptions import InvalidInputError
from kata.models import Category, Product

logger = logging.getLogger(__name__)

T = TypeVar("T")

ProductPredicate = Callable[[Product], bool]


def require_callable(function: object, role: str) -> None:
    if not callable(function):
        raise InvalidInputError(f"{role} must be callable, got {type(function).__name__}")


def filter_products(products: Iterable[Product], predicate: ProductPredicate) -> list[Product]:
    """Keep the products accepted by ``predicate``.

    Parameters
    ----------
    products : Iterable[Product]
        Products to filter. Never modified.
    predicate : ProductPredicate
        Test applied to each product.

    Returns
    -------
    list[Product]
        Matching products in their original relative order.
    """
    require_callable(predicate, "predicate")
    result = [product for product in products if predicate(product)]
    logger.debug("filter_products kept %d products", len(result))
    return result


def partition_products(
    products: Iterable[Product],
    predicate: ProductPredicate,
) -> tuple[list[Product], list[Product]]:
    """Split products into ``(matching, rest)``, both in input order."""
    require_callable(predicate, "predicate")
    matching: list[Product] = []
    rest: list[Product] = []
    for product in products:
        (matching if predicate(product) else rest).append(product)
    return matching, rest


def map_products(products: Iterable[Product], function: Callable[[Product], T]) -> list[T]:
    """Apply ``function`` to every product, preserving order."""
    require_callable(function, "function")
    return [function(product) for product in products]


def in_category(category: Category) -> ProductPredicate:
    """Predicate accepting products of ``category``."""
    return lambda product: product.category == category


def priced_below(limit: Decimal) -> ProductPredicate:
    """Predicate accepting products strictly cheaper than ``limit``."""
    return lambda product: product.price < limit


def negate(predicate: ProductPredicate) -> ProductPredicate:
    require_callable(predicate, "predicate")
    return lambda product: not predicate(product)


def all_of(*predicates: ProductPredicate) -> ProductPredicate:
    """Predicate accepting products every given predicate accepts.

    With no predicates every product is accepted.
    """
    for predicate in predicates:
        require_callable(predicate, "predicate")
    return lambda product: all(predicate(product) for predicate in predicates)


def any_of(*predicates: ProductPredicate) -> ProductPredicate:
    """Predicate accepting products at least one given predicate accepts.

    With no predicates no product is accepted.
    """
    for predicate in predicates:
        require_callable(predicate, "predicate")
    return lambda product: any(predicate(product) for predicate in predicates)
