"""Null presenter for testing (no output)."""

from collections.abc import Sequence

from latin_drill.models import AnswerOption, DrillConfig, DrillResult, SessionStats


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message (no-op)."""
        pass

    def show_success(self, message: str) -> None:
        """Display a success message (no-op)."""
        pass

    def show_warning(self, message: str) -> None:
        """Display a warning message (no-op)."""
        pass

    def show_error(self, message: str) -> None:
        """Display an error message (no-op)."""
        pass

    def show_drill(
        self, drill: DrillConfig, options: Sequence[AnswerOption], remaining_seconds: int
    ) -> None:
        """Display the current drill (no-op)."""
        pass

    def show_feedback(self, result: DrillResult, correct_answer: str) -> None:
        """Display answer feedback (no-op)."""
        pass

    def show_session_summary(self, stats: SessionStats, results: Sequence[DrillResult]) -> None:
        """Display the session summary (no-op)."""
        pass


class NullSessionListener:
    """Null implementation of session listener (testing)."""

    def on_progress(self, completed: int, estimated_total: int) -> None:
        """Called after every recorded result (no-op)."""
        pass

    def on_tick(self, remaining_seconds: int) -> None:
        """Called after every clock tick (no-op)."""
        pass

    def on_session_end(self, results: Sequence[DrillResult]) -> None:
        """Called once when the session ends (no-op)."""
        pass
