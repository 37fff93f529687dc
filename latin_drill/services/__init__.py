"""Business logic services for Latin Drill."""

from .answer_checker import AnswerCheckerService
from .answer_tracker import AnswerTracker
from .distractor_generator import DistractorGeneratorService, answer_text
from .drill_generator import DrillGeneratorService
from .drill_queue import DrillQueue
from .drill_text import expected_answer, prompt_text, question_type_for
from .random_source import SeededRandomSource
from .session_clock import SessionClock
from .tickers import ManualTicker
from .vocabulary_service import VocabularyService

__all__ = [
    "AnswerCheckerService",
    "AnswerTracker",
    "DistractorGeneratorService",
    "answer_text",
    "DrillGeneratorService",
    "DrillQueue",
    "expected_answer",
    "prompt_text",
    "question_type_for",
    "SeededRandomSource",
    "SessionClock",
    "ManualTicker",
    "VocabularyService",
]
