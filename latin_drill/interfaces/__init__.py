"""Interface protocols for Latin Drill."""

from .presenter import PresenterProtocol
from .random_source import RandomSource
from .session_listener import SessionListener
from .ticker import Ticker

__all__ = ["PresenterProtocol", "RandomSource", "SessionListener", "Ticker"]
