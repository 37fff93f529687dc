"""Validation-related exceptions."""

from .base import LatinDrillException


class ValidationError(LatinDrillException):
    """Raised when session or configuration input is invalid."""

    pass


class SetupError(LatinDrillException):
    """Raised when a required resource (vocabulary file, URL) cannot be loaded."""

    pass
