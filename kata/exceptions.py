"""Custom exception hierarchy for kata."""


class KataError(Exception):
    """Base exception for all kata errors."""


class ConfigurationError(KataError):
    """Raised when configuration is invalid or missing."""


class InvalidInputError(KataError):
    """Raised when an exercise receives input it cannot work with."""
