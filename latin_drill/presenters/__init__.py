"""Presenter implementations for output handling."""

from .console_presenter import ConsolePresenter, ConsoleSessionListener
from .null_presenter import NullPresenter, NullSessionListener

__all__ = [
    "ConsolePresenter",
    "ConsoleSessionListener",
    "NullPresenter",
    "NullSessionListener",
]
