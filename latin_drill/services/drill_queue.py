"""Bounded lookahead queue of upcoming drills."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from latin_drill.exceptions import DrillStateError, ValidationError
from latin_drill.models import DrillConfig, DrillResult

from .drill_generator import DrillGeneratorService

if TYPE_CHECKING:
    from .answer_tracker import AnswerTracker


class DrillQueue:
    """Hold the current drill plus a fixed-length buffer of upcoming ones.

    With a queue size of K, the buffer always holds K-1 drills after
    initialize() and after every advance().
    """

    def __init__(self, generator: DrillGeneratorService, size: int = 5):
        """Initialize the queue.

        Args:
            generator: Source of new drills
            size: K, the number of drills kept ready including the current one

        Raises:
            ValidationError: If size is less than 2
        """
        if size < 2:
            raise ValidationError(f"Queue size must be at least 2, got {size}")
        self._generator = generator
        self._size = size
        self._current: DrillConfig | None = None
        self._pending: deque[DrillConfig] = deque()

    @property
    def current(self) -> DrillConfig | None:
        """The drill on screen, or None before initialize()."""
        return self._current

    @property
    def pending(self) -> tuple[DrillConfig, ...]:
        """Upcoming drills in the order they will be shown."""
        return tuple(self._pending)

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        """Number of upcoming drills (the current one excluded)."""
        return len(self._pending)

    def initialize(self) -> tuple[DrillConfig, tuple[DrillConfig, ...]]:
        """Generate K drills: the first becomes current, the rest are queued.

        Returns:
            (current drill, upcoming drills)
        """
        drills = [self._generator.generate() for _ in range(self._size)]
        self._current = drills[0]
        self._pending = deque(drills[1:])
        return self._current, self.pending

    def advance(self) -> DrillConfig:
        """Promote the head of the queue to current and refill the tail.

        Returns:
            The new current drill

        Raises:
            DrillStateError: If the queue was never initialized
        """
        if self._current is None:
            raise DrillStateError("Drill queue has not been initialized")
        self._current = self._pending.popleft()
        self._pending.append(self._generator.generate())
        return self._current

    def skip(self, tracker: AnswerTracker) -> DrillResult:
        """Record the current drill as a forced miss, then advance.

        Args:
            tracker: Tracker that receives the forced-incorrect result

        Returns:
            The recorded result for the skipped drill

        Raises:
            DrillStateError: If the queue was never initialized
        """
        if self._current is None:
            raise DrillStateError("Drill queue has not been initialized")
        result = tracker.record(self._current, is_correct=False, elapsed_seconds=0)
        self.advance()
        return result
