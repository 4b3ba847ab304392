"""Fixed product fixture shared by every exercise."""

from decimal import Decimal

from kata.models import Category, Product

PENCILS = Product("Pencils", Category.OFFICE, Decimal("5.79"))
APPLES = Product("Apples", Category.FOOD, Decimal("1.29"))
PLATES = Product("Plates", Category.UTENSILS, Decimal("12.95"))
SPAGHETTI = Product("Spaghetti", Category.FOOD, Decimal("2.79"))
FORKS = Product("Forks", Category.UTENSILS, Decimal("7.89"))
KNIVES = Product("Knives", Category.UTENSILS, Decimal("9.45"))
COFFEE = Product("Coffee", Category.FOOD, Decimal("7.49"))
DETERGENT = Product("Detergent", Category.CLEANING, Decimal("6.15"))

_PRODUCTS: tuple[Product, ...] = (
    PENCILS,
    APPLES,
    PLATES,
    SPAGHETTI,
    FORKS,
    KNIVES,
    COFFEE,
    DETERGENT,
)

_STREAM_PRODUCTS: tuple[Product, ...] = (PENCILS, APPLES, PLATES, SPAGHETTI, FORKS, KNIVES)

_PANTRY_PRODUCTS: tuple[Product, ...] = (PENCILS, APPLES, PLATES, SPAGHETTI, COFFEE, DETERGENT)

_BY_NAME: dict[str, Product] = {product.name: product for product in _PRODUCTS}


def get_products() -> list[Product]:
    """Return the full catalog as a new list.

    Returns
    -------
    list[Product]
        Every fixture product in catalog order. The list is a copy, so
        callers may sort or extend it freely.
    """
    return list(_PRODUCTS)


def get_stream_products() -> list[Product]:
    """Return the subset used by the basic stream exercises."""
    return list(_STREAM_PRODUCTS)


def get_pantry_products() -> list[Product]:
    """Return the subset used by the functional interface exercises."""
    return list(_PANTRY_PRODUCTS)


def find_product(name: str) -> Product | None:
    """Look up a catalog product by exact name."""
    return _BY_NAME.get(name)
