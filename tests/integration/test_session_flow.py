"""Integration tests for complete drill sessions over the fixture vocabulary."""

from pathlib import Path

import pytest

from latin_drill.config import create_default_config
from latin_drill.models import DrillType, EndedState
from latin_drill.orchestration import SessionEngine
from latin_drill.services import SeededRandomSource, VocabularyService

VOCABULARY_FIXTURE = Path(__file__).parent.parent / "fixtures" / "vocabulary.json"


@pytest.fixture
def vocabulary():
    """Real VocabularyService loaded from the fixture file."""
    service = VocabularyService(vocabulary_path=VOCABULARY_FIXTURE)
    service.load()
    return service


class TestTimedSession:
    """Sessions driven to expiry by the clock."""

    def test_one_minute_multiple_choice_session(
        self, word_pool, recording_listener, manual_ticker
    ):
        """Nine words, one minute: after 60 ticks the log holds every answered or skipped drill."""
        engine = SessionEngine(
            word_pool,
            [DrillType.MULTIPLE_CHOICE],
            1,
            listener=recording_listener,
            random_source=SeededRandomSource(seed=17),
            ticker=manual_ticker,
        )
        engine.start()

        handled = 0
        for second in range(60):
            if second % 4 == 3:
                engine.skip()
                handled += 1
            elif second % 2 == 0:
                options = engine.options_for_current()
                assert sum(o.is_correct for o in options) == 1
                assert len({o.text for o in options}) == len(options)
                choice = options[second % len(options)]
                engine.answer_option(choice)
                engine.advance()
                handled += 1
            manual_ticker.fire()

        assert isinstance(engine.state, EndedState)
        assert len(recording_listener.session_ends) == 1
        assert len(recording_listener.session_ends[0]) == handled
        assert recording_listener.ticks == list(range(59, -1, -1))
        assert [c for c, _ in recording_listener.progress] == list(range(1, handled + 1))

    def test_every_drill_type_can_be_answered(self, vocabulary, recording_listener, manual_ticker):
        engine = SessionEngine(
            vocabulary.get_all_words(),
            list(DrillType),
            5,
            config=create_default_config(queue_size=3),
            listener=recording_listener,
            random_source=SeededRandomSource(seed=4),
            ticker=manual_ticker,
        )

        with engine:
            for _ in range(40):
                drill = engine.current_drill
                word = drill.word
                if drill.type == DrillType.TYPE_LATIN_WORD:
                    # Macrons are optional when typing
                    result = engine.answer_latin_word(
                        word.nominative.replace("ē", "e").replace("ū", "u"),
                        word.genitive,
                        word.gender,
                        word.declension.value,
                    )
                elif drill.type == DrillType.FILL_IN_BLANK:
                    result = engine.answer_translation(word.all_meanings[-1].upper())
                else:
                    correct = next(o for o in engine.options_for_current() if o.is_correct)
                    result = engine.answer_option(correct)
                assert result.is_correct, drill
                engine.advance()
                assert len(engine.queue) == 2
                manual_ticker.fire()

        stats = engine.stats()
        assert stats.total == 40
        assert stats.accuracy_percent == 100
        assert engine.remaining_seconds == 260
        assert {r.drill_type for r in engine.results} == set(DrillType)


class TestFilteredVocabulary:
    """Sessions over a filtered vocabulary."""

    def test_small_filtered_pool_uses_placeholders(self, vocabulary, manual_ticker):
        words = vocabulary.filter_words(declensions=["5th"])
        assert [w.id for w in words] == ["word_dies_0009", "word_res_0010"]

        engine = SessionEngine(
            words,
            [DrillType.MULTIPLE_CHOICE],
            1,
            config=create_default_config(options_per_question=4),
            random_source=SeededRandomSource(seed=9),
            ticker=manual_ticker,
        )

        placeholder_seen = False
        for _ in range(20):
            options = engine.options_for_current()
            assert sum(o.is_correct for o in options) == 1
            placeholder_seen = placeholder_seen or any(o.is_placeholder for o in options)
            engine.skip()

        assert placeholder_seen
        engine.end_now()
        assert engine.stats().total == 20
