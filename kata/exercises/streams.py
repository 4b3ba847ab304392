"""Basic stream exercises: filter, sort, map, reduce and group."""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from kata.config import ProductListLayout
from kata.models import Category, Product

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


def find_utensils_sorted_by_name(products: Iterable[Product]) -> list[Product]:
    """Return the UTENSILS products sorted by name.

    Names compare case-sensitively; products with equal names keep their
    input order.
    """
    return sorted(
        (product for product in products if product.category == Category.UTENSILS),
        key=lambda product: product.name,
    )


def format_price(price: Decimal, layout: ProductListLayout | None = None) -> str:
    """Render ``price`` as a currency column, rounding half-up to cents.

    Examples
    --------
    >>> format_price(Decimal("12.95"))
    '$  12.95'
    >>> format_price(Decimal("2.345"))
    '$   2.35'
    """
    layout = layout or ProductListLayout()
    rounded = price.quantize(CENT, rounding=ROUND_HALF_UP)
    return f"{layout.currency_symbol}{rounded:>{layout.price_width}.2f}"


def format_product_line(product: Product, layout: ProductListLayout | None = None) -> str:
    """Render one product as fixed-width columns.

    The category is padded and truncated to its column; the name is
    padded but may overflow.
    """
    layout = layout or ProductListLayout()
    width = layout.category_width
    category = f"{product.category.display_name:<{width}.{width}}"
    name = f"{product.name:<{layout.name_width}}"
    return f"{category} {name} {format_price(product.price, layout)}"


def format_product_list(
    products: Iterable[Product],
    layout: ProductListLayout | None = None,
) -> str:
    """Render products as a text table, one line per product.

    Parameters
    ----------
    products : Iterable[Product]
        Products in display order.
    layout : ProductListLayout | None
        Column widths and currency symbol. Defaults to
        ``ProductListLayout()``.

    Returns
    -------
    str
        Lines joined by ``"\\n"`` with no trailing newline; an empty
        string for no products.
    """
    layout = layout or ProductListLayout()
    lines = [format_product_line(product, layout) for product in products]
    logger.debug("Formatted %d product lines", len(lines))
    return "\n".join(lines)


def product_names(products: Iterable[Product]) -> list[str]:
    return [product.name for product in products]


def sort_by_price(products: Iterable[Product], descending: bool = False) -> list[Product]:
    """Return products ordered by price; equal prices keep input order."""
    return sorted(products, key=lambda product: product.price, reverse=descending)


def total_price(products: Iterable[Product]) -> Decimal:
    """Sum of prices, rounded half-up to cents."""
    total = sum((product.price for product in products), Decimal("0"))
    return total.quantize(CENT, rounding=ROUND_HALF_UP)


def group_by_category(products: Iterable[Product]) -> dict[Category, list[Product]]:
    """Group products by category.

    Categories appear in order of first occurrence; each group keeps the
    input order of its products.
    """
    groups: dict[Category, list[Product]] = {}
    for product in products:
        groups.setdefault(product.category, []).append(product)
    return groups


def count_by_category(products: Iterable[Product]) -> dict[Category, int]:
    return {
        category: len(members) for category, members in group_by_category(products).items()
    }
