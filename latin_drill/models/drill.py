"""Data models for generated drills and their answer options."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from .word import WordItem


class DrillType(str, Enum):
    """Kinds of exercise a session can produce."""

    MULTIPLE_CHOICE = "multipleChoice"
    MULTIPLE_CHOICE_DECLENSION = "multipleChoiceDeclension"
    TYPE_LATIN_WORD = "typeLatinWord"
    FILL_IN_BLANK = "fillInBlank"

    @property
    def is_selection(self) -> bool:
        """True for drills answered by picking one of several options."""
        return self in (DrillType.MULTIPLE_CHOICE, DrillType.MULTIPLE_CHOICE_DECLENSION)


class QuestionType(str, Enum):
    """What a selection-style question asks for."""

    LATIN_TO_TRANSLATION = "latinToTranslation"
    TRANSLATION_TO_LATIN = "translationToLatin"
    IDENTIFY_GENDER = "identifyGender"
    IDENTIFY_DECLENSION = "identifyDeclension"

    @property
    def is_categorical(self) -> bool:
        """True when the answer comes from a small fixed set of categories."""
        return self in (QuestionType.IDENTIFY_GENDER, QuestionType.IDENTIFY_DECLENSION)


# Subtypes a multiple-choice drill can take. Declension has its own drill type.
MULTIPLE_CHOICE_QUESTION_TYPES = (
    QuestionType.LATIN_TO_TRANSLATION,
    QuestionType.TRANSLATION_TO_LATIN,
    QuestionType.IDENTIFY_GENDER,
)


@dataclass(frozen=True)
class DrillConfig:
    """A single generated exercise, consumed once by the presentation layer."""

    id: str
    type: DrillType
    word: WordItem
    question_type: QuestionType | None = None  # Only set for multiple choice
    created_at: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        subtype = f"/{self.question_type.value}" if self.question_type else ""
        return f"{self.type.value}{subtype}: {self.word.headword}"


@dataclass(frozen=True)
class AnswerOption:
    """One selectable option in a multiple-choice question."""

    text: str
    is_correct: bool
    is_placeholder: bool = False  # Synthetic filler when the pool runs dry
