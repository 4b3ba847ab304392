"""Base generator class for synthetic exercise inputs."""

from __future__ import annotations

import random
from abc import ABC

from faker import Faker

from kata.exceptions import InvalidInputError


class BaseGenerator(ABC):
    """Base class for all data generators.

    Provides common initialization: Faker instance creation and
    seed-based reproducibility.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_US``).
    """

    def __init__(self, seed: int | None = None, locale: str = "en_US") -> None:
        self.fake = Faker(locale)
        if seed is not None:
            self.fake.seed_instance(seed)
            random.seed(seed)

    @staticmethod
    def _check_count(count: int) -> None:
        if count < 0:
            raise InvalidInputError(f"count must be non-negative, got {count}")
