"""Fixture catalog and pure transformation exercises."""

__version__ = "0.1.0"
