"""Correctness checks for typed (non-selection) drill answers."""

from latin_drill.models import Declension, Gender, WordItem
from latin_drill.utils.text_utils import compare_strings


class AnswerCheckerService:
    """Judge typed answers, ignoring case, accents and macrons."""

    @staticmethod
    def check_latin_word(
        word: WordItem,
        nominative: str,
        genitive: str,
        gender: Gender | str,
        declension: Declension | str,
    ) -> bool:
        """Check a full "type the Latin word" answer.

        All four parts must be right: both forms (accent-insensitive) and
        the exact gender and declension.

        Args:
            word: Expected word
            nominative: Typed nominative
            genitive: Typed genitive
            gender: Selected gender (enum or its tag, e.g. "feminine")
            declension: Selected declension (enum or its tag, e.g. "1st")

        Returns:
            True if every part matches
        """
        return (
            compare_strings(nominative, word.nominative)
            and compare_strings(genitive, word.genitive)
            and _same_tag(gender, word.gender)
            and _same_tag(declension, word.declension)
        )

    @staticmethod
    def check_translation(word: WordItem, typed: str) -> bool:
        """Check a typed translation against every meaning of the word.

        Args:
            word: Expected word
            typed: What the user typed

        Returns:
            True if typed matches the primary or any secondary meaning
        """
        if not typed or not typed.strip():
            return False
        return any(compare_strings(typed, meaning) for meaning in word.all_meanings)


def _same_tag(selected: Gender | Declension | str, expected: Gender | Declension) -> bool:
    value = selected.value if isinstance(selected, (Gender, Declension)) else selected
    return value == expected.value
