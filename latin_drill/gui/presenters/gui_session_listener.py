"""GUI session listener implementation using Qt signals."""

from collections.abc import Sequence

from PyQt6.QtCore import QObject, pyqtSignal

from latin_drill.models import DrillResult
from latin_drill.utils.text_utils import format_time


class GUISessionListener(QObject):
    """Session listener that re-emits engine events as Qt signals.

    Implements SessionListener protocol through structural subtyping (duck typing).
    This avoids metaclass conflicts between QObject and Protocol metaclasses.

    Widgets connect to the signals to update the progress bar, the timer label
    and the end-of-session screen.
    """

    progress_signal = pyqtSignal(int, int)  # completed, estimated_total
    tick_signal = pyqtSignal(int)  # remaining_seconds
    time_text_signal = pyqtSignal(str)  # remaining time as M:SS
    low_time_signal = pyqtSignal(bool)  # True while below the warning threshold
    session_end_signal = pyqtSignal(list)  # List[DrillResult]

    def __init__(self, low_time_warning_seconds: int = 60, parent=None):
        """Initialize the GUI session listener.

        Args:
            low_time_warning_seconds: Threshold for the low-time signal
            parent: Optional parent QObject
        """
        super().__init__(parent)
        self.low_time_warning_seconds = low_time_warning_seconds

    def on_progress(self, completed: int, estimated_total: int) -> None:
        """Called after every recorded result.

        Args:
            completed: Number of results recorded so far
            estimated_total: Estimated total, for a progress bar maximum
        """
        self.progress_signal.emit(completed, estimated_total)

    def on_tick(self, remaining_seconds: int) -> None:
        """Called after every clock tick.

        Args:
            remaining_seconds: Seconds left in the session
        """
        self.tick_signal.emit(remaining_seconds)
        self.time_text_signal.emit(format_time(remaining_seconds))
        self.low_time_signal.emit(remaining_seconds <= self.low_time_warning_seconds)

    def on_session_end(self, results: Sequence[DrillResult]) -> None:
        """Called once when the session ends.

        Args:
            results: The complete result log
        """
        self.session_end_signal.emit(list(results))
