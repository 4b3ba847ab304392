"""Pure transformation exercises over the fixture catalog."""

from kata.exercises.functional import (
    all_of,
    any_of,
    filter_products,
    in_category,
    map_products,
    negate,
    partition_products,
    priced_below,
)
from kata.exercises.optional import find_by_name, find_cheapest, find_first, price_of
from kata.exercises.records import reseat, same_passenger, unique_passengers
from kata.exercises.streams import (
    count_by_category,
    find_utensils_sorted_by_name,
    format_product_list,
    group_by_category,
    product_names,
    sort_by_price,
    total_price,
)

__all__ = [
    "all_of",
    "any_of",
    "count_by_category",
    "filter_products",
    "find_by_name",
    "find_cheapest",
    "find_first",
    "find_utensils_sorted_by_name",
    "format_product_list",
    "group_by_category",
    "in_category",
    "map_products",
    "negate",
    "partition_products",
    "price_of",
    "priced_below",
    "product_names",
    "reseat",
    "same_passenger",
    "sort_by_price",
    "total_price",
    "unique_passengers",
]
