"""Product model for the exercise catalog."""

from dataclasses import dataclass
from decimal import Decimal

from kata.models.enums import Category


@dataclass(frozen=True, order=True)
class Product:
    """Shop product.

    Frozen so fixture instances can be shared between exercises;
    equality, hashing and ordering compare ``(name, category, price)``.
    """

    name: str
    category: Category
    price: Decimal  # exact amount, never float
