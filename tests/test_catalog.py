"""Tests for the fixture catalog."""

from decimal import Decimal

from kata.catalog import (
    APPLES,
    CELSO,
    COFFEE,
    DETERGENT,
    FORKS,
    KNIVES,
    PENCILS,
    PLATES,
    SPAGHETTI,
    find_product,
    get_pantry_products,
    get_passengers,
    get_products,
    get_stream_products,
)
from kata.models import Category, Passenger


class TestProducts:
    """Tests for product fixtures."""

    def test_catalog_order(self) -> None:
        assert get_products() == [
            PENCILS,
            APPLES,
            PLATES,
            SPAGHETTI,
            FORKS,
            KNIVES,
            COFFEE,
            DETERGENT,
        ]

    def test_known_values(self) -> None:
        assert PENCILS.category == Category.OFFICE
        assert PENCILS.price == Decimal("5.79")
        assert APPLES.price == Decimal("1.29")
        assert PLATES.price == Decimal("12.95")
        assert SPAGHETTI.price == Decimal("2.79")
        assert DETERGENT.category != Category.FOOD

    def test_returned_list_is_a_copy(self) -> None:
        products = get_products()
        products.clear()

        assert len(get_products()) == 8

    def test_stream_subset(self) -> None:
        assert get_stream_products() == [PENCILS, APPLES, PLATES, SPAGHETTI, FORKS, KNIVES]

    def test_pantry_subset(self) -> None:
        assert get_pantry_products() == [PENCILS, APPLES, PLATES, SPAGHETTI, COFFEE, DETERGENT]

    def test_constants_are_shared_instances(self) -> None:
        assert get_products()[0] is PENCILS
        assert get_stream_products()[2] is PLATES


class TestFindProduct:
    """Tests for find_product."""

    def test_found(self) -> None:
        assert find_product("Knives") is KNIVES

    def test_missing_returns_none(self) -> None:
        assert find_product("Bread") is None

    def test_case_sensitive(self) -> None:
        assert find_product("knives") is None


class TestPassengers:
    """Tests for passenger fixtures."""

    def test_celso(self) -> None:
        assert CELSO == Passenger("Celso", 2)

    def test_get_passengers_copy(self) -> None:
        passengers = get_passengers()
        passengers.append(Passenger("Extra", 1))

        assert len(get_passengers()) == 3
