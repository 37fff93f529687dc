"""Service for building multiple-choice option sets."""

import logging
from collections.abc import Sequence

from latin_drill.exceptions import ValidationError
from latin_drill.interfaces import RandomSource
from latin_drill.models import AnswerOption, Declension, Gender, QuestionType, WordItem

logger = logging.getLogger(__name__)


def answer_text(word: WordItem, question_type: QuestionType) -> str:
    """Return the text a question of this type expects for the given word.

    Args:
        word: The word being asked about
        question_type: What the question asks for

    Returns:
        Translation, headword pair, or category label
    """
    if question_type == QuestionType.LATIN_TO_TRANSLATION:
        return word.translation
    if question_type == QuestionType.TRANSLATION_TO_LATIN:
        return word.headword
    if question_type == QuestionType.IDENTIFY_GENDER:
        return word.gender.label
    if question_type == QuestionType.IDENTIFY_DECLENSION:
        return word.declension.label
    raise ValueError(f"Unknown question type: {question_type}")


def placeholder_text(question_type: QuestionType, number: int) -> str:
    """Return a numbered filler option that cannot be mistaken for vocabulary."""
    if question_type == QuestionType.TRANSLATION_TO_LATIN:
        return f"Verbum{number}, verbi{number}"
    return f"Option {number}"


class DistractorGeneratorService:
    """Build option sets: the correct answer plus distinct wrong answers.

    Free-text questions draw distractors from other words in the pool;
    gender and declension questions use the remaining category values.
    When the pool is too small, numbered placeholders fill the gap.
    """

    def __init__(self, random_source: RandomSource):
        """Initialize the distractor generator.

        Args:
            random_source: Source of randomness for sampling and shuffling
        """
        self._random = random_source

    def options(
        self,
        correct_word: WordItem,
        pool: Sequence[WordItem],
        question_type: QuestionType,
        count: int,
    ) -> list[AnswerOption]:
        """Build a shuffled option set.

        Args:
            correct_word: Word the question is about
            pool: Candidate words for distractors (may include correct_word)
            question_type: What the question asks for
            count: Total number of options wanted, correct one included

        Returns:
            Options in uniformly random order; exactly one is correct

        Raises:
            ValidationError: If count is less than 2
        """
        if count < 2:
            raise ValidationError(f"An option set needs at least 2 options, got {count}")

        correct = answer_text(correct_word, question_type)

        if question_type.is_categorical:
            distractors = self._category_distractors(correct_word, question_type, count - 1)
        else:
            distractors = self._sampled_distractors(
                correct_word, pool, question_type, correct, count - 1
            )

        options = [AnswerOption(text=correct, is_correct=True), *distractors]
        self._random.shuffle(options)
        return options

    def _category_distractors(
        self, word: WordItem, question_type: QuestionType, wanted: int
    ) -> list[AnswerOption]:
        """Remaining fixed category labels, in declaration order."""
        if question_type == QuestionType.IDENTIFY_GENDER:
            others = [g.label for g in Gender if g != word.gender]
        else:
            others = [d.label for d in Declension if d != word.declension]
        return [AnswerOption(text=label, is_correct=False) for label in others[:wanted]]

    def _sampled_distractors(
        self,
        correct_word: WordItem,
        pool: Sequence[WordItem],
        question_type: QuestionType,
        correct: str,
        wanted: int,
    ) -> list[AnswerOption]:
        """Sample distinct distractor texts from other words in the pool."""
        available = [w for w in pool if w.id != correct_word.id]
        seen = {correct}
        distractors: list[AnswerOption] = []

        max_attempts = 2 * len(available)
        attempts = 0
        while len(distractors) < wanted and attempts < max_attempts and available:
            attempts += 1
            # A sampled word never comes back, whether accepted or a duplicate
            candidate = available.pop(self._random.randrange(len(available)))
            value = answer_text(candidate, question_type)
            if value in seen:
                continue
            seen.add(value)
            distractors.append(AnswerOption(text=value, is_correct=False))

        if len(distractors) < wanted:
            logger.warning(
                f"Only {len(distractors)} distinct distractors for '{correct_word.headword}' "
                f"({question_type.value}); filling {wanted - len(distractors)} with placeholders"
            )
        while len(distractors) < wanted:
            text = placeholder_text(question_type, len(distractors) + 2)
            # Keep placeholders distinct from real values too
            while text in seen:
                text = f"{text}*"
            seen.add(text)
            distractors.append(AnswerOption(text=text, is_correct=False, is_placeholder=True))

        return distractors
