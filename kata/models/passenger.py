"""Passenger model used by the records exercises."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Passenger:
    """Airline passenger compared by value."""

    name: str
    seat: int

    def with_seat(self, seat: int) -> "Passenger":
        """Return a copy of this passenger sitting in ``seat``."""
        return replace(self, seat=seat)
