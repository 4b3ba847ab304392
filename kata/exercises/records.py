"""Record exercises: immutable passengers compared by value."""

from __future__ import annotations

import logging
from typing import Iterable

from kata.models import Passenger

logger = logging.getLogger(__name__)


def same_passenger(first: Passenger, second: Passenger) -> bool:
    """True when both passengers have identical fields."""
    return first == second


def reseat(passengers: Iterable[Passenger], name: str, seat: int) -> list[Passenger]:
    """Return a new list where every passenger called ``name`` sits in ``seat``.

    Input instances are never modified; moved passengers are replaced by
    new ``Passenger`` values.
    """
    result = [
        passenger.with_seat(seat) if passenger.name == name else passenger
        for passenger in passengers
    ]
    logger.debug("Reseated %r to seat %d", name, seat)
    return result


def unique_passengers(passengers: Iterable[Passenger]) -> list[Passenger]:
    """Drop value-equal duplicates, keeping the first occurrence."""
    return list(dict.fromkeys(passengers))
