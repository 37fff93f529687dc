"""Protocol for repeating timer sources."""

from collections.abc import Callable
from typing import Protocol


class Ticker(Protocol):
    """A repeating timer owned by a single session clock.

    Implementations deliver callbacks on the caller's event loop (a Qt
    QTimer, a console loop, or manual firing in tests).
    """

    @property
    def is_active(self) -> bool:
        """True between start() and stop()."""
        ...

    def start(self, callback: Callable[[], None]) -> None:
        """Begin invoking callback once per interval."""
        ...

    def stop(self) -> None:
        """Stop invoking the callback. Safe to call more than once."""
        ...
