#!/usr/bin/env python3
"""Print the product catalog.

Shows the fixture catalog as a fixed-width table (or JSON), optionally
restricted to one category or to the utensils exercise, or prints a
seeded random sample instead of the fixture.

Examples::

    python scripts/show_catalog.py
    python scripts/show_catalog.py --category FOOD
    python scripts/show_catalog.py --utensils --json
    python scripts/show_catalog.py --random 5 --seed 42
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from kata.catalog import get_products
from kata.config import KataConfig
from kata.exceptions import KataError
from kata.exercises import filter_products, find_utensils_sorted_by_name, format_product_list, in_category
from kata.generators import ProductGenerator
from kata.logging import get_logger, setup_logging
from kata.models import Category, Product
from kata.serialization import to_dict

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print the exercise product catalog")
    parser.add_argument(
        "--category",
        choices=[category.value for category in Category],
        help="Only show products of this category",
    )
    parser.add_argument(
        "--utensils",
        action="store_true",
        help="Show utensils sorted by name",
    )
    parser.add_argument("--json", action="store_true", help="Emit JSON instead of a table")
    parser.add_argument(
        "--random",
        type=int,
        metavar="N",
        help="Print N generated products instead of the fixture",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for --random")
    return parser


def select_products(args: argparse.Namespace, config: KataConfig) -> list[Product]:
    """Pick the products to display from parsed arguments."""
    if args.random is not None:
        seed = args.seed if args.seed is not None else config.generator.seed
        generator = ProductGenerator(seed=seed, locale=config.generator.locale)
        products = list(generator.generate_batch(args.random))
    else:
        products = get_products()

    if args.category:
        products = filter_products(products, in_category(Category(args.category)))
    if args.utensils:
        products = find_utensils_sorted_by_name(products)
    return products


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = KataConfig.from_env()
        setup_logging(config.log_level, config.log_format)
        products = select_products(args, config)
    except KataError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    logger.info("Showing %d products", len(products))

    if args.json:
        print(json.dumps([to_dict(product) for product in products], indent=2))
    elif products:
        print(format_product_list(products, config.layout))
    return 0


if __name__ == "__main__":
    sys.exit(main())
