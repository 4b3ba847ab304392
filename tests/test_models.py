"""Tests for domain models."""

import dataclasses
from decimal import Decimal

import pytest

from kata.models import Category, Passenger, Product


class TestCategory:
    """Tests for Category enum."""

    def test_members(self) -> None:
        assert [c.value for c in Category] == ["FOOD", "OFFICE", "UTENSILS", "CLEANING"]

    def test_display_name(self) -> None:
        assert Category.UTENSILS.display_name == "UTENSILS"

    def test_str_comparison(self) -> None:
        assert Category.FOOD == "FOOD"
        assert Category("OFFICE") is Category.OFFICE


class TestProduct:
    """Tests for Product model."""

    def test_product_creation(self) -> None:
        product = Product("Pencils", Category.OFFICE, Decimal("5.79"))

        assert product.name == "Pencils"
        assert product.category == Category.OFFICE
        assert product.price == Decimal("5.79")

    def test_structural_equality(self) -> None:
        first = Product("Apples", Category.FOOD, Decimal("1.29"))
        second = Product("Apples", Category.FOOD, Decimal("1.29"))

        assert first == second
        assert first is not second
        assert hash(first) == hash(second)

    def test_different_price_not_equal(self) -> None:
        assert Product("Apples", Category.FOOD, Decimal("1.29")) != Product(
            "Apples", Category.FOOD, Decimal("1.30")
        )

    def test_ordering_by_fields(self) -> None:
        apples = Product("Apples", Category.FOOD, Decimal("1.29"))
        forks = Product("Forks", Category.UTENSILS, Decimal("7.89"))
        cheap_forks = Product("Forks", Category.UTENSILS, Decimal("1.00"))

        assert sorted([forks, apples, cheap_forks]) == [apples, cheap_forks, forks]

    def test_immutable(self) -> None:
        product = Product("Apples", Category.FOOD, Decimal("1.29"))

        with pytest.raises(dataclasses.FrozenInstanceError):
            product.price = Decimal("0.99")  # type: ignore[misc]


class TestPassenger:
    """Tests for Passenger model."""

    def test_same_attributes_are_equal(self) -> None:
        passenger1 = Passenger("Celso", 2)
        passenger2 = Passenger("Celso", 2)

        assert passenger1 == passenger2

    def test_different_seat_not_equal(self) -> None:
        assert Passenger("Celso", 2) != Passenger("Celso", 3)

    def test_hashable(self) -> None:
        assert len({Passenger("Celso", 2), Passenger("Celso", 2)}) == 1

    def test_with_seat_returns_copy(self) -> None:
        passenger = Passenger("Celso", 2)

        moved = passenger.with_seat(9)

        assert moved == Passenger("Celso", 9)
        assert passenger.seat == 2

    def test_immutable(self) -> None:
        passenger = Passenger("Celso", 2)

        with pytest.raises(dataclasses.FrozenInstanceError):
            passenger.seat = 3  # type: ignore[misc]
