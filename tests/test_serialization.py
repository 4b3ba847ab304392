"""Tests for serialization utilities."""

import json
from decimal import Decimal

from kata.catalog import PLATES
from kata.models import Category, Passenger
from kata.serialization import serialize_value, to_dict


class TestToDict:
    """Tests for to_dict function."""

    def test_product(self) -> None:
        assert to_dict(PLATES) == {"name": "Plates", "category": "UTENSILS", "price": "12.95"}

    def test_passenger(self) -> None:
        assert to_dict(Passenger("Celso", 2)) == {"name": "Celso", "seat": 2}

    def test_dict_passthrough(self) -> None:
        d = {"key": "value"}
        assert to_dict(d) == d

    def test_other_type(self) -> None:
        assert to_dict(42) == {"value": "42"}

    def test_json_dumpable(self) -> None:
        assert json.loads(json.dumps(to_dict(PLATES)))["price"] == "12.95"


class TestSerializeValue:
    """Tests for serialize_value function."""

    def test_decimal(self) -> None:
        assert serialize_value(Decimal("99.99")) == "99.99"

    def test_enum(self) -> None:
        assert serialize_value(Category.FOOD) == "FOOD"

    def test_grouped_products(self) -> None:
        result = serialize_value({Category.UTENSILS: [PLATES]})

        assert result == {"UTENSILS": [{"name": "Plates", "category": "UTENSILS", "price": "12.95"}]}

    def test_tuple_becomes_list(self) -> None:
        assert serialize_value((Decimal("1.00"), 2)) == ["1.00", 2]

    def test_plain_values_unchanged(self) -> None:
        assert serialize_value("text") == "text"
        assert serialize_value(3) == 3
        assert serialize_value(None) is None
