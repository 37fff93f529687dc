"""Configuration classes for Latin Drill."""

from dataclasses import dataclass, field
from pathlib import Path

from latin_drill.exceptions import ValidationError
from latin_drill.models import DrillType


@dataclass(frozen=True)
class LatinDrillConfig:
    """Immutable configuration for drill sessions.

    Frozen so a running session can never observe a configuration change.
    """

    # Session settings
    queue_size: int = 5  # Drills generated ahead, including the current one
    options_per_question: int = 4
    default_duration_minutes: int = 10
    allowed_durations: tuple[int, ...] = (5, 10, 15)
    default_drill_types: tuple[DrillType, ...] = (
        DrillType.MULTIPLE_CHOICE,
        DrillType.MULTIPLE_CHOICE_DECLENSION,
        DrillType.TYPE_LATIN_WORD,
        DrillType.FILL_IN_BLANK,
    )
    random_seed: int | None = None  # None = nondeterministic sessions

    # Clock settings
    tick_interval_ms: int = 1000
    low_time_warning_seconds: int = 60  # Timer display turns to warning below this

    # Vocabulary settings
    vocabulary_path: Path = field(
        default_factory=lambda: Path.home() / ".latin_drill" / "vocabulary.json"
    )
    vocabulary_url: str | None = None  # Optional http(s) source, wins over the path
    request_timeout: float = 10.0  # Seconds

    # Logging settings
    log_file: Path | None = None

    def __post_init__(self):
        """Coerce loosely typed values and reject nonsensical ones."""
        if isinstance(self.vocabulary_path, str):
            object.__setattr__(self, "vocabulary_path", Path(self.vocabulary_path))
        if isinstance(self.log_file, str):
            object.__setattr__(self, "log_file", Path(self.log_file) if self.log_file else None)
        if not isinstance(self.allowed_durations, tuple):
            object.__setattr__(self, "allowed_durations", tuple(self.allowed_durations))
        try:
            drill_types = tuple(DrillType(t) for t in self.default_drill_types)
        except ValueError:
            raise ValidationError(
                f"Unknown drill type in default_drill_types: {self.default_drill_types!r}"
            ) from None
        object.__setattr__(self, "default_drill_types", drill_types)

        if self.queue_size < 2:
            raise ValidationError(f"queue_size must be at least 2, got {self.queue_size}")
        if self.options_per_question < 2:
            raise ValidationError(
                f"options_per_question must be at least 2, got {self.options_per_question}"
            )
        if self.tick_interval_ms <= 0:
            raise ValidationError(
                f"tick_interval_ms must be positive, got {self.tick_interval_ms}"
            )
        if self.default_duration_minutes <= 0:
            raise ValidationError(
                f"default_duration_minutes must be positive, got {self.default_duration_minutes}"
            )
