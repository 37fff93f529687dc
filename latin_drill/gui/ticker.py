"""Session clock ticker backed by a Qt timer."""

from collections.abc import Callable

from PyQt6.QtCore import QObject, QTimer

from latin_drill.config import LatinDrillConfig


class QtTicker(QObject):
    """Repeating ticker driven by the Qt event loop.

    Implements the Ticker protocol through structural subtyping. Ticks are
    delivered on the thread that owns the timer, so the session engine never
    needs locking.
    """

    def __init__(self, interval_ms: int = 1000, parent=None):
        """Initialize the ticker.

        Args:
            interval_ms: Milliseconds between ticks
            parent: Optional parent QObject
        """
        super().__init__(parent)
        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._on_timeout)
        self._callback: Callable[[], None] | None = None

    @property
    def is_active(self) -> bool:
        return self._timer.isActive()

    @property
    def interval_ms(self) -> int:
        return self._timer.interval()

    def start(self, callback: Callable[[], None]) -> None:
        """Start calling callback once per interval."""
        self._callback = callback
        self._timer.start()

    def stop(self) -> None:
        """Stop the timer. A tick already queued is dropped."""
        self._timer.stop()
        self._callback = None

    def _on_timeout(self) -> None:
        if self._callback is not None:
            self._callback()

    @classmethod
    def from_config(cls, config: LatinDrillConfig, parent=None) -> "QtTicker":
        """Create a ticker using the configured tick interval."""
        return cls(interval_ms=config.tick_interval_ms, parent=parent)
