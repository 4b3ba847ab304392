"""Enumeration types for catalog entities."""

from enum import Enum


class Category(str, Enum):
    FOOD = "FOOD"
    OFFICE = "OFFICE"
    UTENSILS = "UTENSILS"
    CLEANING = "CLEANING"

    @property
    def display_name(self) -> str:
        return self.value
