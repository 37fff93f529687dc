"""Session state machine models."""

from dataclasses import dataclass

from .result import DrillResult


@dataclass(frozen=True)
class ActiveState:
    """Session is running; the clock counts down remaining_seconds."""

    remaining_seconds: int
    total_seconds: int

    @property
    def elapsed_seconds(self) -> int:
        return self.total_seconds - self.remaining_seconds


@dataclass(frozen=True)
class EndedState:
    """Session is over; results is the final, complete log."""

    results: tuple[DrillResult, ...]


SessionState = ActiveState | EndedState
