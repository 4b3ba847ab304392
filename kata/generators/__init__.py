"""Synthetic input generators."""

from kata.generators.product import PassengerGenerator, ProductGenerator

__all__ = ["PassengerGenerator", "ProductGenerator"]
