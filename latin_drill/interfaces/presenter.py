"""Presenter protocol for output abstraction."""

from collections.abc import Sequence
from typing import Protocol

from latin_drill.models import AnswerOption, DrillConfig, DrillResult, SessionStats


class PresenterProtocol(Protocol):
    """Interface for presenting a drill session to the user (CLI, GUI, etc).

    The same session loop can then drive different presentation layers.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        ...

    def show_success(self, message: str) -> None:
        """Display a success message."""
        ...

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        ...

    def show_error(self, message: str) -> None:
        """Display an error message."""
        ...

    def show_drill(
        self, drill: DrillConfig, options: Sequence[AnswerOption], remaining_seconds: int
    ) -> None:
        """Display the current drill.

        Args:
            drill: Drill to display
            options: Selectable options (empty for type-in drills)
            remaining_seconds: Session time left, for the timer display
        """
        ...

    def show_feedback(self, result: DrillResult, correct_answer: str) -> None:
        """Display whether the last answer was right.

        Args:
            result: The recorded result
            correct_answer: Text of the expected answer
        """
        ...

    def show_session_summary(self, stats: SessionStats, results: Sequence[DrillResult]) -> None:
        """Display the end-of-session summary.

        Args:
            stats: Aggregate statistics
            results: The complete result log
        """
        ...
