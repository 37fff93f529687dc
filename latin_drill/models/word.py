"""Data models for Latin vocabulary words."""

from dataclasses import dataclass
from enum import Enum


class Declension(str, Enum):
    """The five Latin noun declensions."""

    FIRST = "1st"
    SECOND = "2nd"
    THIRD = "3rd"
    FOURTH = "4th"
    FIFTH = "5th"

    @property
    def label(self) -> str:
        return f"{self.value} declension"


class Gender(str, Enum):
    """Grammatical gender of a Latin noun."""

    MASCULINE = "masculine"
    FEMININE = "feminine"
    NEUTER = "neuter"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class WordItem:
    """A Latin noun with its dictionary forms and translation."""

    id: str  # Unique identifier, e.g. "word_rosa_0001"
    nominative: str  # Nominative singular ("rosa")
    genitive: str  # Genitive singular ("rosae")
    declension: Declension
    gender: Gender
    translation: str  # Primary translation
    additional_meanings: tuple[str, ...] = ()
    example_sentence: str | None = None

    def __post_init__(self):
        """Coerce tag strings and lists to their immutable forms."""
        if not isinstance(self.declension, Declension):
            object.__setattr__(self, "declension", Declension(self.declension))
        if not isinstance(self.gender, Gender):
            object.__setattr__(self, "gender", Gender(self.gender))
        if not isinstance(self.additional_meanings, tuple):
            object.__setattr__(self, "additional_meanings", tuple(self.additional_meanings))

    @property
    def headword(self) -> str:
        """Dictionary headword pair, e.g. 'rosa, rosae'."""
        return f"{self.nominative}, {self.genitive}"

    @property
    def all_meanings(self) -> tuple[str, ...]:
        """Primary translation followed by any secondary meanings."""
        return (self.translation, *self.additional_meanings)

    def __str__(self) -> str:
        return f"{self.headword} ({self.translation})"


@dataclass(frozen=True)
class VocabularyStats:
    """Summary counts over a loaded vocabulary."""

    total_words: int
    by_declension: dict[Declension, int]
    by_gender: dict[Gender, int]
    with_additional_meanings: int
