"""Passenger fixtures for the records exercises."""

from kata.models import Passenger

CELSO = Passenger("Celso", 2)
MARTA = Passenger("Marta", 14)
JOAO = Passenger("Joao", 7)

_PASSENGERS: tuple[Passenger, ...] = (CELSO, MARTA, JOAO)


def get_passengers() -> list[Passenger]:
    """Return the passenger fixture as a new list."""
    return list(_PASSENGERS)
