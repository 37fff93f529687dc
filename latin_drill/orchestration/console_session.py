"""Interactive drill loop for the terminal."""

import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from latin_drill.exceptions import SessionEndedError, ValidationError
from latin_drill.interfaces import PresenterProtocol
from latin_drill.models import (
    AnswerOption,
    Declension,
    DrillConfig,
    DrillResult,
    DrillType,
    Gender,
    SessionStats,
)
from latin_drill.services import ManualTicker, expected_answer

from .session_engine import SessionEngine

logger = logging.getLogger(__name__)

SKIP_COMMANDS = ("s", "skip")
QUIT_COMMANDS = ("q", "quit")

_GENDER_SHORTCUTS = {g.value[0]: g.value for g in Gender}
_DECLENSION_SHORTCUTS = {d.value[0]: d.value for d in Declension}


@dataclass
class _Reply:
    """What the user asked for at a prompt."""

    action: str  # "answer", "skip" or "quit"
    submit: Callable[[], DrillResult | None] | None = None


class ConsoleSessionRunner:
    """Drive a SessionEngine from blocking console input.

    The terminal has no event loop, so the engine's ManualTicker is fired
    once for every whole wall-clock second that passed while waiting for
    input. A reply typed after the clock ran out is not recorded.
    """

    def __init__(
        self,
        engine: SessionEngine,
        presenter: PresenterProtocol,
        input_func: Callable[[str], str] | None = None,
        monotonic: Callable[[], float] = time.monotonic,
    ):
        """Initialize the runner.

        Args:
            engine: Engine to drive; its ticker must be a ManualTicker
            presenter: Output presenter
            input_func: Reads one line of input given a prompt; defaults to input()
            monotonic: Wall clock used to catch the session clock up

        Raises:
            ValidationError: If the engine is driven by another kind of ticker
        """
        if not isinstance(engine.ticker, ManualTicker):
            raise ValidationError("Console sessions need an engine built with a ManualTicker")
        self.engine = engine
        self.presenter = presenter
        self._input = input_func or input
        self._monotonic = monotonic
        self._last_tick_at = 0.0

    def run(self) -> SessionStats:
        """Run the session until time runs out or the user quits.

        Returns:
            Final session statistics
        """
        engine = self.engine
        engine.start()
        self._last_tick_at = self._monotonic()

        try:
            while engine.is_active:
                drill = engine.current_drill
                options = engine.options_for_current()
                self.presenter.show_drill(drill, options, engine.remaining_seconds)

                reply = self._read_reply(drill, options)
                self._catch_up()
                if not engine.is_active:
                    self.presenter.show_warning("Time's up! The last answer was not counted.")
                    break

                self._apply(reply, drill)
        except (EOFError, KeyboardInterrupt):
            logger.info("Console session interrupted")
        finally:
            engine.end_now()

        stats = engine.stats()
        self.presenter.show_session_summary(stats, engine.results)
        return stats

    def _apply(self, reply: _Reply, drill: DrillConfig) -> None:
        engine = self.engine
        if reply.action == "quit":
            engine.end_now()
            return
        if reply.action == "skip":
            result = engine.skip()
            self.presenter.show_feedback(result, expected_answer(drill))
            return

        try:
            result = reply.submit()
        except SessionEndedError:
            return
        if result is not None:
            self.presenter.show_feedback(result, expected_answer(drill))
        engine.advance()

    def _catch_up(self) -> None:
        """Fire one tick per whole second elapsed since the last catch-up."""
        elapsed = self._monotonic() - self._last_tick_at
        ticks = int(elapsed)
        if ticks <= 0:
            return
        self._last_tick_at += ticks
        self.engine.ticker.fire(ticks)

    def _read_reply(self, drill: DrillConfig, options: Sequence[AnswerOption]) -> _Reply:
        if drill.type.is_selection:
            return self._read_choice(options)
        if drill.type == DrillType.TYPE_LATIN_WORD:
            return self._read_latin_word()
        return self._read_translation()

    def _read_choice(self, options: Sequence[AnswerOption]) -> _Reply:
        while True:
            text = self._input(f"Your choice (1-{len(options)}, s=skip, q=quit): ").strip().lower()
            command = _command(text)
            if command is not None:
                return command
            if text.isdigit() and 1 <= int(text) <= len(options):
                option = options[int(text) - 1]
                return _Reply("answer", lambda: self.engine.answer_option(option))
            self.presenter.show_warning(f"Please enter a number between 1 and {len(options)}")

    def _read_latin_word(self) -> _Reply:
        nominative = self._input("Nominative (s=skip, q=quit): ").strip()
        command = _command(nominative.lower())
        if command is not None:
            return command
        genitive = self._input("Genitive: ").strip()
        gender = _expand(self._input("Gender (m/f/n): "), _GENDER_SHORTCUTS)
        declension = _expand(self._input("Declension (1-5): "), _DECLENSION_SHORTCUTS)
        return _Reply(
            "answer",
            lambda: self.engine.answer_latin_word(nominative, genitive, gender, declension),
        )

    def _read_translation(self) -> _Reply:
        typed = self._input("Meaning (s=skip, q=quit): ").strip()
        command = _command(typed.lower())
        if command is not None:
            return command
        return _Reply("answer", lambda: self.engine.answer_translation(typed))


def _command(text: str) -> _Reply | None:
    if text in SKIP_COMMANDS:
        return _Reply("skip")
    if text in QUIT_COMMANDS:
        return _Reply("quit")
    return None


def _expand(text: str, shortcuts: dict[str, str]) -> str:
    """Map a one-letter or one-digit shortcut onto its tag, e.g. 'f' -> 'feminine'."""
    text = text.strip().lower()
    if not text:
        return text
    return shortcuts.get(text[0], text) if len(text) == 1 else text
