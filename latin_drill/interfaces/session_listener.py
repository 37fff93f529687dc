"""Listener protocol for drill session events."""

from collections.abc import Sequence
from typing import Protocol

from latin_drill.models import DrillResult


class SessionListener(Protocol):
    """Interface for observing a running drill session.

    This protocol lets the session engine report progress without knowing
    how it will be displayed (console, Qt widgets, tests, etc).
    """

    def on_progress(self, completed: int, estimated_total: int) -> None:
        """Called after every recorded result.

        Args:
            completed: Number of results recorded so far
            estimated_total: completed + pending drills + 1. Sessions are
                time-bounded, so this is an estimate and may never be reached.
        """
        ...

    def on_tick(self, remaining_seconds: int) -> None:
        """Called after every clock tick.

        Args:
            remaining_seconds: Seconds left in the session (never negative)
        """
        ...

    def on_session_end(self, results: Sequence[DrillResult]) -> None:
        """Called exactly once when the session ends.

        Args:
            results: The complete result log, in completion order
        """
        ...
