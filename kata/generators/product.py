"""Product and passenger generators for property-style checks."""

from __future__ import annotations

import logging
import random
from decimal import Decimal
from typing import Iterator

from kata.generators.base import BaseGenerator
from kata.models import Category, Passenger, Product

logger = logging.getLogger(__name__)


class ProductGenerator(BaseGenerator):
    """Generate random but well-formed products."""

    CATEGORIES = list(Category)
    CATEGORY_WEIGHTS = [0.40, 0.20, 0.30, 0.10]

    # Price ranges by category (USD)
    PRICE_RANGES = {
        Category.FOOD: (0.5, 20.0),
        Category.OFFICE: (1.0, 40.0),
        Category.UTENSILS: (3.0, 60.0),
        Category.CLEANING: (2.0, 25.0),
    }

    def generate(self) -> Product:
        """Generate a single product.

        Returns
        -------
        Product
            Generated product.
        """
        return self._generate_one()

    def generate_batch(self, count: int) -> Iterator[Product]:
        """Generate multiple products.

        Parameters
        ----------
        count : int
            Number of products to generate.

        Yields
        ------
        Product
            Generated products.
        """
        self._check_count(count)
        logger.debug("Generating %d products", count)
        for _ in range(count):
            yield self._generate_one()

    def _generate_one(self) -> Product:
        category = random.choices(self.CATEGORIES, weights=self.CATEGORY_WEIGHTS, k=1)[0]
        low, high = self.PRICE_RANGES[category]
        price = Decimal(str(round(random.uniform(low, high), 2)))
        return Product(
            name=self.fake.word().capitalize(),
            category=category,
            price=price,
        )


class PassengerGenerator(BaseGenerator):
    """Generate passengers with random names and seats."""

    MAX_SEAT = 240

    def generate(self) -> Passenger:
        return Passenger(name=self.fake.first_name(), seat=random.randint(1, self.MAX_SEAT))

    def generate_batch(self, count: int) -> Iterator[Passenger]:
        self._check_count(count)
        for _ in range(count):
            yield self.generate()
