"""GUI presenter implementation using Qt signals."""

from collections.abc import Sequence

from PyQt6.QtCore import QObject, pyqtSignal

from latin_drill.models import AnswerOption, DrillConfig, DrillResult, SessionStats


class GUIPresenter(QObject):
    """Presenter using Qt signals.

    Implements PresenterProtocol through structural subtyping (duck typing).
    This avoids metaclass conflicts between QObject and Protocol metaclasses.
    """

    info_signal = pyqtSignal(str)
    success_signal = pyqtSignal(str)
    warning_signal = pyqtSignal(str)
    error_signal = pyqtSignal(str)
    drill_signal = pyqtSignal(object, list, int)  # DrillConfig, List[AnswerOption], remaining
    feedback_signal = pyqtSignal(object, str)  # DrillResult, correct answer
    summary_signal = pyqtSignal(object, list)  # SessionStats, List[DrillResult]

    def __init__(self, parent=None):
        """Initialize the GUI presenter.

        Args:
            parent: Optional parent QObject
        """
        super().__init__(parent)

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        self.info_signal.emit(message)

    def show_success(self, message: str) -> None:
        """Display a success message."""
        self.success_signal.emit(message)

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        self.warning_signal.emit(message)

    def show_error(self, message: str) -> None:
        """Display an error message."""
        self.error_signal.emit(message)

    def show_drill(
        self, drill: DrillConfig, options: Sequence[AnswerOption], remaining_seconds: int
    ) -> None:
        """Display the current drill.

        Args:
            drill: Drill to display
            options: Selectable options (empty for type-in drills)
            remaining_seconds: Session time left
        """
        self.drill_signal.emit(drill, list(options), remaining_seconds)

    def show_feedback(self, result: DrillResult, correct_answer: str) -> None:
        """Display answer feedback.

        Args:
            result: The recorded result
            correct_answer: Text of the expected answer
        """
        self.feedback_signal.emit(result, correct_answer)

    def show_session_summary(self, stats: SessionStats, results: Sequence[DrillResult]) -> None:
        """Display the end-of-session summary.

        Args:
            stats: Aggregate statistics
            results: The complete result log
        """
        self.summary_signal.emit(stats, list(results))
