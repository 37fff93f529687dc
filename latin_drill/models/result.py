"""Data models for drill results and session statistics."""

from dataclasses import dataclass, field
from datetime import datetime

from .drill import DrillType
from .word import WordItem


@dataclass(frozen=True)
class DrillResult:
    """Outcome of one answered or skipped drill."""

    drill_id: str
    word: WordItem
    drill_type: DrillType
    is_correct: bool
    elapsed_seconds: float  # Time the drill was current before answering
    completed_at: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        mark = "OK" if self.is_correct else "MISS"
        return f"[{mark}] {self.word.headword} ({self.drill_type.value}, {self.elapsed_seconds:.1f}s)"


@dataclass
class SessionStats:
    """Aggregate statistics over a session's result log."""

    total: int = 0
    correct: int = 0

    @property
    def incorrect(self) -> int:
        return self.total - self.correct

    @property
    def accuracy_percent(self) -> int:
        """Rounded percentage of correct answers, 0 when nothing was answered."""
        if self.total == 0:
            return 0
        # Half-up rounding; round() would send 12.5 to 12
        return int(self.correct * 100 / self.total + 0.5)

    def __str__(self) -> str:
        return f"SessionStats(total={self.total}, correct={self.correct}, accuracy={self.accuracy_percent}%)"
