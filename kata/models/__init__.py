"""Domain models for the exercise catalog."""

from kata.models.enums import Category
from kata.models.passenger import Passenger
from kata.models.product import Product

__all__ = ["Category", "Passenger", "Product"]
