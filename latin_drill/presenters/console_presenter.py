"""Console presenter for CLI output."""

from collections.abc import Sequence

from latin_drill.models import AnswerOption, DrillConfig, DrillResult, SessionStats
from latin_drill.services.drill_text import prompt_text
from latin_drill.utils.text_utils import format_time


class ConsolePresenter:
    """Present output to console (CLI implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_success(self, message: str) -> None:
        """Display a success message."""
        print(f"[OK] {message}")

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}")

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}")

    def show_drill(
        self, drill: DrillConfig, options: Sequence[AnswerOption], remaining_seconds: int
    ) -> None:
        """Display the current drill with its numbered options."""
        print(f"\n[{format_time(remaining_seconds)}] {prompt_text(drill)}")
        if drill.word.example_sentence and not options:
            print(f"  e.g. {drill.word.example_sentence}")
        for i, option in enumerate(options, 1):
            print(f"  {i}. {option.text}")

    def show_feedback(self, result: DrillResult, correct_answer: str) -> None:
        """Display whether the last answer was right."""
        if result.is_correct:
            print("[OK] Correct!")
        else:
            print(f"[MISS] The answer was: {correct_answer}")

    def show_session_summary(self, stats: SessionStats, results: Sequence[DrillResult]) -> None:
        """Display the end-of-session summary."""
        print("\nSession Complete:")
        print(f"  Drills: {stats.total}")
        print(f"  Correct: {stats.correct}")
        print(f"  Incorrect: {stats.incorrect}")
        print(f"  Accuracy: {stats.accuracy_percent}%")

        missed = [r for r in results if not r.is_correct]
        if missed:
            print("\nReview these words:")
            seen: set[str] = set()
            for result in missed:
                if result.word.id in seen:
                    continue
                seen.add(result.word.id)
                print(f"  {result.word.headword} = {result.word.translation}")


class ConsoleSessionListener:
    """Console implementation of session listener."""

    def __init__(self, low_time_warning_seconds: int = 60):
        """Initialize the listener.

        Args:
            low_time_warning_seconds: Warn once when this much time is left
        """
        self.low_time_warning_seconds = low_time_warning_seconds
        self.completed = 0
        self.estimated_total = 0
        self.remaining_seconds: int | None = None

    def on_progress(self, completed: int, estimated_total: int) -> None:
        """Called after every recorded result."""
        self.completed = completed
        self.estimated_total = estimated_total

    def on_tick(self, remaining_seconds: int) -> None:
        """Called after every clock tick."""
        self.remaining_seconds = remaining_seconds
        if remaining_seconds == self.low_time_warning_seconds:
            print(f"[WARN] {format_time(remaining_seconds)} left")

    def on_session_end(self, results: Sequence[DrillResult]) -> None:
        """Called once when the session ends."""
        if self.remaining_seconds == 0:
            print("\nTime's up!")
        print(f"Session over after {len(results)} drills")
