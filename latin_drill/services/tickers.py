"""Ticker implementations that do not need a GUI event loop."""

from collections.abc import Callable


class ManualTicker:
    """Ticker fired explicitly by its owner.

    Used by tests to simulate the passage of time and by the console loop,
    which fires one tick per wall-clock second elapsed between inputs.
    """

    def __init__(self):
        self._callback: Callable[[], None] | None = None
        self.start_count = 0
        self.stop_count = 0

    @property
    def is_active(self) -> bool:
        return self._callback is not None

    def start(self, callback: Callable[[], None]) -> None:
        self._callback = callback
        self.start_count += 1

    def stop(self) -> None:
        if self._callback is not None:
            self.stop_count += 1
        self._callback = None

    def fire(self, count: int = 1) -> int:
        """Deliver up to count ticks, stopping early if the ticker is stopped.

        Args:
            count: Number of ticks to deliver

        Returns:
            Number of ticks actually delivered
        """
        delivered = 0
        for _ in range(count):
            if self._callback is None:
                break
            self._callback()
            delivered += 1
        return delivered
