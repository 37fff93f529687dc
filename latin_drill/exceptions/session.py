"""Drill session state exceptions."""

from .base import LatinDrillException


class SessionEndedError(LatinDrillException):
    """Raised when a drill operation is attempted on an ended session."""

    pass


class DrillStateError(LatinDrillException):
    """Raised when a drill operation is called out of order.

    For example, advancing to the next drill before the current one was
    answered or skipped.
    """

    pass
