"""Append-only log of drill results with live statistics."""

import logging
from collections.abc import Callable
from datetime import datetime

from latin_drill.models import DrillConfig, DrillResult, SessionStats

logger = logging.getLogger(__name__)

ProgressHandler = Callable[[int, int], None]


class AnswerTracker:
    """Record drill results and derive statistics on demand.

    After every record() the progress handler receives
    (completed, completed + pending drills + 1). Sessions end on time, not
    on a drill count, so that total is only an estimate.
    """

    def __init__(
        self,
        pending_count: Callable[[], int] = lambda: 0,
        on_progress: ProgressHandler | None = None,
        now: Callable[[], datetime] = datetime.now,
    ):
        """Initialize the tracker.

        Args:
            pending_count: Returns the number of queued drills right now
            on_progress: Optional handler called after every record
            now: Clock used for completion timestamps
        """
        self._pending_count = pending_count
        self._on_progress = on_progress
        self._now = now
        self._results: list[DrillResult] = []

    @property
    def results(self) -> tuple[DrillResult, ...]:
        """Snapshot of the log in completion order."""
        return tuple(self._results)

    def __len__(self) -> int:
        return len(self._results)

    def record(self, drill: DrillConfig, is_correct: bool, elapsed_seconds: float) -> DrillResult:
        """Append one result and notify the progress handler.

        Args:
            drill: The drill that was answered or skipped
            is_correct: Whether the answer was right
            elapsed_seconds: Time the drill was current before this call

        Returns:
            The appended DrillResult
        """
        result = DrillResult(
            drill_id=drill.id,
            word=drill.word,
            drill_type=drill.type,
            is_correct=is_correct,
            elapsed_seconds=max(0.0, float(elapsed_seconds)),
            completed_at=self._now(),
        )
        self._results.append(result)
        logger.debug(f"Recorded {result}")

        if self._on_progress is not None:
            completed = len(self._results)
            self._on_progress(completed, completed + self._pending_count() + 1)

        return result

    def stats(self) -> SessionStats:
        """Derive aggregate statistics from the log."""
        correct = sum(1 for r in self._results if r.is_correct)
        return SessionStats(total=len(self._results), correct=correct)
