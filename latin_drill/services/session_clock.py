"""One-second countdown that drives session expiry."""

import logging
from collections.abc import Callable

from latin_drill.exceptions import ValidationError
from latin_drill.interfaces import Ticker

logger = logging.getLogger(__name__)


class SessionClock:
    """Count a session down one second per tick.

    Every tick removes exactly one second, whatever wall time actually
    passed; a congested event loop makes the session run long, never short.
    When the count reaches zero the clock stops its ticker and calls
    on_expire once.
    """

    def __init__(
        self,
        total_seconds: int,
        ticker: Ticker,
        on_tick: Callable[[int], None] | None = None,
        on_expire: Callable[[], None] | None = None,
    ):
        """Initialize the clock.

        Args:
            total_seconds: Session length in seconds (must be positive)
            ticker: Repeating timer owned by this clock
            on_tick: Called with the remaining seconds after each tick
            on_expire: Called once when the remaining time reaches zero

        Raises:
            ValidationError: If total_seconds is not positive
        """
        if total_seconds <= 0:
            raise ValidationError(f"Session length must be positive, got {total_seconds}s")
        self._total_seconds = total_seconds
        self._remaining = total_seconds
        self._ticker = ticker
        self._on_tick = on_tick
        self._on_expire = on_expire
        self._running = False

    @property
    def total_seconds(self) -> int:
        return self._total_seconds

    @property
    def remaining_seconds(self) -> int:
        return self._remaining

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def expired(self) -> bool:
        return self._remaining == 0

    def start(self) -> None:
        """Start ticking. Does nothing if running or already expired."""
        if self._running or self.expired:
            return
        self._running = True
        self._ticker.start(self._tick)

    def stop(self) -> None:
        """Stop ticking and release the ticker. Safe to call repeatedly."""
        self._running = False
        self._ticker.stop()

    def _tick(self) -> None:
        # A tick queued before stop() may still arrive; drop it
        if not self._running:
            return

        self._remaining = max(0, self._remaining - 1)
        if self._on_tick is not None:
            self._on_tick(self._remaining)

        if self._remaining == 0 and self._running:
            logger.debug("Session clock expired")
            self.stop()
            if self._on_expire is not None:
                self._on_expire()
