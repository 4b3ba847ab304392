"""Read-only fixture data shared across exercises."""

from kata.catalog.passengers import CELSO, JOAO, MARTA, get_passengers
from kata.catalog.products import (
    APPLES,
    COFFEE,
    DETERGENT,
    FORKS,
    KNIVES,
    PENCILS,
    PLATES,
    SPAGHETTI,
    find_product,
    get_pantry_products,
    get_products,
    get_stream_products,
)

__all__ = [
    "APPLES",
    "CELSO",
    "COFFEE",
    "DETERGENT",
    "FORKS",
    "JOAO",
    "KNIVES",
    "MARTA",
    "PENCILS",
    "PLATES",
    "SPAGHETTI",
    "find_product",
    "get_pantry_products",
    "get_passengers",
    "get_products",
    "get_stream_products",
]
