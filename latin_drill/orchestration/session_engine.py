"""Drill session engine: the Active -> Ended state machine."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable, Sequence
from datetime import datetime

from latin_drill.config import LatinDrillConfig, create_default_config
from latin_drill.exceptions import DrillStateError, SessionEndedError, ValidationError
from latin_drill.interfaces import RandomSource, SessionListener, Ticker
from latin_drill.models import (
    ActiveState,
    AnswerOption,
    Declension,
    DrillConfig,
    DrillResult,
    DrillType,
    EndedState,
    Gender,
    SessionState,
    SessionStats,
    WordItem,
)
from latin_drill.presenters import NullSessionListener
from latin_drill.services import (
    AnswerCheckerService,
    AnswerTracker,
    DistractorGeneratorService,
    DrillGeneratorService,
    DrillQueue,
    ManualTicker,
    SeededRandomSource,
    SessionClock,
    question_type_for,
)

logger = logging.getLogger(__name__)


class SessionEngine:
    """Run one time-bounded drill session.

    The engine owns the drill queue, the answer tracker and the session
    clock. While Active there is always exactly one current drill. The
    session ends either when the clock reaches zero or on end_now(); both
    paths stop the ticker and call the listener's on_session_end exactly once.

    Typical flow per drill: show current_drill (with options_for_current()
    for selection drills), call answer() once, then advance(). skip()
    replaces both for an unanswered drill.

    Usage:
        with SessionEngine(words, [DrillType.MULTIPLE_CHOICE], 5, ticker=ticker) as engine:
            ...
    """

    def __init__(
        self,
        word_pool: Sequence[WordItem],
        enabled_drill_types: Iterable[DrillType | str],
        session_duration_minutes: int,
        config: LatinDrillConfig | None = None,
        listener: SessionListener | None = None,
        random_source: RandomSource | None = None,
        ticker: Ticker | None = None,
        monotonic: Callable[[], float] = time.monotonic,
        now: Callable[[], datetime] = datetime.now,
    ):
        """Initialize the engine and generate the first drills.

        Args:
            word_pool: Words to drill (non-empty)
            enabled_drill_types: Drill types to mix (non-empty; enums or tags)
            session_duration_minutes: Session length (positive integer)
            config: Configuration; defaults to create_default_config()
            listener: Receives progress, tick and end events
            random_source: Randomness; defaults to a SeededRandomSource
                using config.random_seed
            ticker: One-second repeating timer; defaults to a ManualTicker
            monotonic: Clock for per-drill elapsed time
            now: Clock for timestamps

        Raises:
            ValidationError: If any input is empty or out of range
        """
        self.config = config or create_default_config()
        self._word_pool = _validate_word_pool(word_pool)
        self._drill_types = _validate_drill_types(enabled_drill_types)
        total_seconds = _validate_duration(session_duration_minutes) * 60

        self._listener = listener or NullSessionListener()
        self._random = random_source or SeededRandomSource(self.config.random_seed)
        self.ticker = ticker or ManualTicker()
        self._monotonic = monotonic

        self._distractors = DistractorGeneratorService(self._random)
        self._queue = DrillQueue(
            DrillGeneratorService(self._word_pool, self._drill_types, self._random, now=now),
            size=self.config.queue_size,
        )
        self._tracker = AnswerTracker(
            pending_count=lambda: len(self._queue),
            on_progress=self._listener.on_progress,
            now=now,
        )
        self._clock = SessionClock(
            total_seconds,
            self.ticker,
            on_tick=self._listener.on_tick,
            on_expire=self._finish,
        )

        self._queue.initialize()
        self._drill_started_at = self._monotonic()
        self._answered = False
        self._started = False
        self._ended: EndedState | None = None

    # ------------------------------------------------------------------
    # Lifecycle

    def start(self) -> None:
        """Start the session clock. Calling it again has no effect.

        Raises:
            SessionEndedError: If the session already ended
        """
        self._require_active()
        if self._started:
            return
        self._started = True
        self._drill_started_at = self._monotonic()
        self._clock.start()
        logger.info(
            f"Session started: {len(self._word_pool)} words, "
            f"{', '.join(t.value for t in self._drill_types)}, {self._clock.total_seconds}s"
        )

    def end_now(self) -> None:
        """End the session immediately. Safe to call more than once."""
        if self._ended is None:
            self._finish()

    def __enter__(self) -> SessionEngine:
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.end_now()

    # ------------------------------------------------------------------
    # State

    @property
    def state(self) -> SessionState:
        if self._ended is not None:
            return self._ended
        return ActiveState(
            remaining_seconds=self._clock.remaining_seconds,
            total_seconds=self._clock.total_seconds,
        )

    @property
    def is_active(self) -> bool:
        return self._ended is None

    @property
    def remaining_seconds(self) -> int:
        return self._clock.remaining_seconds

    @property
    def total_seconds(self) -> int:
        return self._clock.total_seconds

    @property
    def current_drill(self) -> DrillConfig | None:
        """The drill on screen; None once the session has ended."""
        return self._queue.current if self._ended is None else None

    @property
    def queue(self) -> tuple[DrillConfig, ...]:
        """Upcoming drills, next one first."""
        return self._queue.pending

    @property
    def current_answered(self) -> bool:
        return self._answered

    @property
    def results(self) -> tuple[DrillResult, ...]:
        return self._tracker.results

    @property
    def word_pool(self) -> tuple[WordItem, ...]:
        return self._word_pool

    @property
    def enabled_drill_types(self) -> tuple[DrillType, ...]:
        return self._drill_types

    def stats(self) -> SessionStats:
        return self._tracker.stats()

    # ------------------------------------------------------------------
    # Drill flow

    def answer(self, is_correct: bool) -> DrillResult | None:
        """Record the outcome of the current drill.

        Only the first call per drill counts; later calls are ignored so a
        misbehaving widget cannot inflate the result log.

        Args:
            is_correct: Whether the user answered correctly

        Returns:
            The recorded result, or None for a repeated call

        Raises:
            SessionEndedError: If the session already ended
        """
        drill = self._require_current()
        if self._answered:
            logger.warning(f"Ignoring repeated answer for drill {drill.id}")
            return None

        elapsed = self._monotonic() - self._drill_started_at
        result = self._tracker.record(drill, is_correct=bool(is_correct), elapsed_seconds=elapsed)
        self._answered = True
        return result

    def advance(self) -> DrillConfig:
        """Move to the next drill after the current one was answered.

        Returns:
            The new current drill

        Raises:
            SessionEndedError: If the session already ended
            DrillStateError: If the current drill has not been answered
        """
        drill = self._require_current()
        if not self._answered:
            raise DrillStateError(f"Drill {drill.id} has not been answered; use skip() instead")
        return self._next_drill()

    def skip(self) -> DrillResult:
        """Record the current drill as missed (zero time) and move on.

        Returns:
            The forced-incorrect result

        Raises:
            SessionEndedError: If the session already ended
            DrillStateError: If the current drill was already answered
        """
        drill = self._require_current()
        if self._answered:
            raise DrillStateError(f"Drill {drill.id} was already answered; use advance()")

        result = self._queue.skip(self._tracker)
        self._reset_current()
        return result

    # ------------------------------------------------------------------
    # Presentation helpers

    def options_for_current(self, count: int | None = None) -> list[AnswerOption]:
        """Build the option set for the current selection-style drill.

        Multiple-choice drills get config.options_per_question options;
        declension drills offer every declension.

        Args:
            count: Override the number of options

        Returns:
            Shuffled options, or an empty list for type-in drills
        """
        drill = self._require_current()
        question_type = question_type_for(drill)
        if question_type is None:
            return []

        if count is None:
            if drill.type == DrillType.MULTIPLE_CHOICE_DECLENSION:
                count = len(Declension)
            else:
                count = self.config.options_per_question

        return self._distractors.options(drill.word, self._word_pool, question_type, count)

    def answer_option(self, option: AnswerOption) -> DrillResult | None:
        """Record the current drill using a chosen option."""
        return self.answer(option.is_correct)

    def check_typed_answer(
        self,
        typed: str = "",
        nominative: str = "",
        genitive: str = "",
        gender: Gender | str = "",
        declension: Declension | str = "",
    ) -> bool:
        """Check a typed answer against the current drill without recording it.

        Fill-in-blank drills use typed; type-Latin-word drills use the four
        form fields.

        Raises:
            DrillStateError: If the current drill is a selection drill
        """
        drill = self._require_current()
        if drill.type == DrillType.TYPE_LATIN_WORD:
            return AnswerCheckerService.check_latin_word(
                drill.word, nominative, genitive, gender, declension
            )
        if drill.type == DrillType.FILL_IN_BLANK:
            return AnswerCheckerService.check_translation(drill.word, typed)
        raise DrillStateError(f"{drill.type.value} drills are answered by choosing an option")

    def answer_latin_word(
        self,
        nominative: str,
        genitive: str,
        gender: Gender | str,
        declension: Declension | str,
    ) -> DrillResult | None:
        """Check and record a typed answer for a type-Latin-word drill.

        Raises:
            DrillStateError: If the current drill is of another type
        """
        self._require_type(DrillType.TYPE_LATIN_WORD)
        correct = self.check_typed_answer(
            nominative=nominative, genitive=genitive, gender=gender, declension=declension
        )
        return self.answer(correct)

    def answer_translation(self, typed: str) -> DrillResult | None:
        """Check and record a typed translation for a fill-in-blank drill.

        Raises:
            DrillStateError: If the current drill is of another type
        """
        self._require_type(DrillType.FILL_IN_BLANK)
        return self.answer(self.check_typed_answer(typed=typed))

    # ------------------------------------------------------------------
    # Internals

    def _next_drill(self) -> DrillConfig:
        drill = self._queue.advance()
        self._reset_current()
        return drill

    def _reset_current(self) -> None:
        self._answered = False
        self._drill_started_at = self._monotonic()

    def _finish(self) -> None:
        """Transition to Ended, release the ticker and notify once."""
        if self._ended is not None:
            return
        self._clock.stop()
        self._ended = EndedState(results=self._tracker.results)

        stats = self._tracker.stats()
        logger.info(
            f"Session ended with {self._clock.remaining_seconds}s left: "
            f"{stats.correct}/{stats.total} correct ({stats.accuracy_percent}%)"
        )
        self._listener.on_session_end(self._ended.results)

    def _require_active(self) -> None:
        if self._ended is not None:
            raise SessionEndedError("The drill session has already ended")

    def _require_current(self) -> DrillConfig:
        self._require_active()
        drill = self._queue.current
        if drill is None:
            raise DrillStateError("No current drill")
        return drill

    def _require_type(self, drill_type: DrillType) -> DrillConfig:
        drill = self._require_current()
        if drill.type != drill_type:
            raise DrillStateError(
                f"Current drill is {drill.type.value}, not {drill_type.value}"
            )
        return drill


def _validate_word_pool(word_pool: Iterable[WordItem]) -> tuple[WordItem, ...]:
    words = tuple(word_pool) if word_pool is not None else ()
    if not words:
        raise ValidationError("Word pool must contain at least one word")
    for word in words:
        if not isinstance(word, WordItem):
            raise ValidationError(f"Word pool entries must be WordItem, got {type(word).__name__}")
    return words


def _validate_drill_types(drill_types: Iterable[DrillType | str]) -> tuple[DrillType, ...]:
    if drill_types is None:
        raise ValidationError("At least one drill type must be enabled")
    if isinstance(drill_types, (str, DrillType)):
        raise ValidationError(
            f"enabled_drill_types must be a collection of drill types, not a single {drill_types!r}"
        )

    validated: list[DrillType] = []
    for tag in drill_types:
        try:
            drill_type = DrillType(tag)
        except ValueError:
            raise ValidationError(f"Unknown drill type: {tag!r}") from None
        if drill_type not in validated:
            validated.append(drill_type)

    if not validated:
        raise ValidationError("At least one drill type must be enabled")
    return tuple(validated)


def _validate_duration(minutes: int) -> int:
    if isinstance(minutes, bool) or not isinstance(minutes, int) or minutes <= 0:
        raise ValidationError(
            f"Session duration must be a positive whole number of minutes, got {minutes!r}"
        )
    return minutes
