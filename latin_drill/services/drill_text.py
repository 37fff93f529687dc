"""Display text for drills: prompts and expected answers."""

from latin_drill.models import DrillConfig, DrillType, QuestionType

from .distractor_generator import answer_text


def question_type_for(drill: DrillConfig) -> QuestionType | None:
    """Question asked by a selection drill, or None for type-in drills."""
    if drill.type == DrillType.MULTIPLE_CHOICE:
        return drill.question_type or QuestionType.LATIN_TO_TRANSLATION
    if drill.type == DrillType.MULTIPLE_CHOICE_DECLENSION:
        return QuestionType.IDENTIFY_DECLENSION
    return None


def prompt_text(drill: DrillConfig) -> str:
    """Build the question shown to the user for a drill.

    Args:
        drill: Drill to describe

    Returns:
        One-line prompt
    """
    word = drill.word
    question_type = question_type_for(drill)

    if question_type == QuestionType.LATIN_TO_TRANSLATION:
        return f"What does '{word.headword}' mean?"
    if question_type == QuestionType.TRANSLATION_TO_LATIN:
        return f"Which Latin word means '{word.translation}'?"
    if question_type == QuestionType.IDENTIFY_GENDER:
        return f"What is the gender of '{word.headword}'?"
    if question_type == QuestionType.IDENTIFY_DECLENSION:
        return f"Which declension does '{word.headword}' belong to?"
    if drill.type == DrillType.TYPE_LATIN_WORD:
        return f"Give the Latin noun for '{word.translation}': nominative, genitive, gender, declension"
    return f"{word.headword} = ____"


def expected_answer(drill: DrillConfig) -> str:
    """Human-readable correct answer for any drill, for feedback displays."""
    word = drill.word
    question_type = question_type_for(drill)
    if question_type is not None:
        return answer_text(word, question_type)
    if drill.type == DrillType.TYPE_LATIN_WORD:
        return f"{word.headword} ({word.gender.label}, {word.declension.label})"
    return word.translation
