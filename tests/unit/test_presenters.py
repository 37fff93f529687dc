"""Tests for console and null presenters."""

from latin_drill.models import (
    AnswerOption,
    DrillConfig,
    DrillResult,
    DrillType,
    QuestionType,
    SessionStats,
)
from latin_drill.presenters import (
    ConsolePresenter,
    ConsoleSessionListener,
    NullPresenter,
    NullSessionListener,
)


def _result(word, is_correct):
    return DrillResult(
        drill_id="d1",
        word=word,
        drill_type=DrillType.MULTIPLE_CHOICE,
        is_correct=is_correct,
        elapsed_seconds=1.0,
    )


class TestConsolePresenter:
    """Tests for ConsolePresenter output."""

    def test_message_prefixes(self, capsys):
        presenter = ConsolePresenter()
        presenter.show_success("saved")
        presenter.show_warning("careful")
        presenter.show_error("broken")

        out = capsys.readouterr().out
        assert "[OK] saved" in out
        assert "[WARN] careful" in out
        assert "[ERROR] broken" in out

    def test_show_drill_numbers_options(self, capsys, make_word):
        drill = DrillConfig(
            id="d1",
            type=DrillType.MULTIPLE_CHOICE,
            word=make_word(),
            question_type=QuestionType.LATIN_TO_TRANSLATION,
        )
        options = [AnswerOption("war", False), AnswerOption("rose", True)]

        ConsolePresenter().show_drill(drill, options, 75)

        out = capsys.readouterr().out
        assert "[1:15] What does 'rosa, rosae' mean?" in out
        assert "  1. war" in out
        assert "  2. rose" in out

    def test_type_in_drill_shows_example_sentence(self, capsys, make_word):
        drill = DrillConfig(
            id="d1",
            type=DrillType.FILL_IN_BLANK,
            word=make_word(example_sentence="Rosa pulchra est."),
        )
        ConsolePresenter().show_drill(drill, [], 30)

        out = capsys.readouterr().out
        assert "rosa, rosae = ____" in out
        assert "Rosa pulchra est." in out

    def test_feedback(self, capsys, make_word):
        presenter = ConsolePresenter()
        presenter.show_feedback(_result(make_word(), True), "rose")
        presenter.show_feedback(_result(make_word(), False), "rose")

        out = capsys.readouterr().out
        assert "[OK] Correct!" in out
        assert "[MISS] The answer was: rose" in out

    def test_summary_lists_missed_words_once(self, capsys, make_word):
        word = make_word()
        results = [_result(word, False), _result(word, False), _result(make_word(id="w2"), True)]

        ConsolePresenter().show_session_summary(SessionStats(total=3, correct=1), results)

        out = capsys.readouterr().out
        assert "Accuracy: 33%" in out
        assert out.count("rosa, rosae = rose") == 1


class TestConsoleSessionListener:
    """Tests for ConsoleSessionListener."""

    def test_warns_at_low_time_threshold(self, capsys):
        listener = ConsoleSessionListener(low_time_warning_seconds=60)
        listener.on_tick(61)
        listener.on_tick(60)
        listener.on_tick(59)

        out = capsys.readouterr().out
        assert out.count("[WARN]") == 1
        assert "1:00 left" in out

    def test_tracks_progress(self):
        listener = ConsoleSessionListener()
        listener.on_progress(3, 8)
        assert (listener.completed, listener.estimated_total) == (3, 8)

    def test_session_end_after_expiry(self, capsys):
        listener = ConsoleSessionListener()
        listener.on_tick(0)
        listener.on_session_end([])

        out = capsys.readouterr().out
        assert "Time's up!" in out
        assert "Session over after 0 drills" in out


class TestNullImplementations:
    """Tests that null implementations stay silent."""

    def test_null_presenter_prints_nothing(self, capsys, make_word):
        presenter = NullPresenter()
        presenter.show_info("hello")
        presenter.show_session_summary(SessionStats(), [])
        presenter.show_feedback(_result(make_word(), True), "rose")
        assert capsys.readouterr().out == ""

    def test_null_listener_prints_nothing(self, capsys):
        listener = NullSessionListener()
        listener.on_progress(1, 5)
        listener.on_tick(10)
        listener.on_session_end([])
        assert capsys.readouterr().out == ""
