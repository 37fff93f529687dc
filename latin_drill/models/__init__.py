"""Data models for Latin Drill."""

from .drill import (
    MULTIPLE_CHOICE_QUESTION_TYPES,
    AnswerOption,
    DrillConfig,
    DrillType,
    QuestionType,
)
from .result import DrillResult, SessionStats
from .state import ActiveState, EndedState, SessionState
from .word import Declension, Gender, VocabularyStats, WordItem

__all__ = [
    "WordItem",
    "VocabularyStats",
    "Declension",
    "Gender",
    "DrillType",
    "QuestionType",
    "MULTIPLE_CHOICE_QUESTION_TYPES",
    "DrillConfig",
    "AnswerOption",
    "DrillResult",
    "SessionStats",
    "ActiveState",
    "EndedState",
    "SessionState",
]
