"""Custom exceptions for Latin Drill."""

from .base import LatinDrillException
from .session import DrillStateError, SessionEndedError
from .validation import SetupError, ValidationError

__all__ = [
    "LatinDrillException",
    "ValidationError",
    "SetupError",
    "SessionEndedError",
    "DrillStateError",
]
