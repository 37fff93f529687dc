"""Tests for AnswerTracker."""

from datetime import datetime

import pytest

from latin_drill.models import DrillConfig, DrillType
from latin_drill.services import AnswerTracker


@pytest.fixture
def drill(make_word):
    return DrillConfig(id="drill_1", type=DrillType.FILL_IN_BLANK, word=make_word())


class TestRecord:
    """Tests for record()."""

    def test_appends_result(self, drill):
        tracker = AnswerTracker()
        result = tracker.record(drill, is_correct=True, elapsed_seconds=3.5)

        assert result.drill_id == "drill_1"
        assert result.word == drill.word
        assert result.drill_type == DrillType.FILL_IN_BLANK
        assert result.is_correct is True
        assert result.elapsed_seconds == 3.5
        assert tracker.results == (result,)
        assert len(tracker) == 1

    def test_results_are_in_completion_order(self, drill):
        tracker = AnswerTracker()
        outcomes = [True, False, False, True]
        for outcome in outcomes:
            tracker.record(drill, is_correct=outcome, elapsed_seconds=1)

        assert [r.is_correct for r in tracker.results] == outcomes

    def test_negative_elapsed_clamped(self, drill):
        result = AnswerTracker().record(drill, is_correct=False, elapsed_seconds=-2)
        assert result.elapsed_seconds == 0.0

    def test_uses_injected_clock(self, drill):
        moment = datetime(2024, 5, 1, 9, 30)
        result = AnswerTracker(now=lambda: moment).record(drill, True, 1)
        assert result.completed_at == moment


class TestProgress:
    """Tests for progress notifications."""

    def test_progress_includes_pending_estimate(self, drill):
        calls = []
        tracker = AnswerTracker(pending_count=lambda: 4, on_progress=lambda c, t: calls.append((c, t)))
        tracker.record(drill, True, 1)
        tracker.record(drill, False, 1)

        assert calls == [(1, 6), (2, 7)]


class TestStats:
    """Tests for stats()."""

    def test_empty_stats(self):
        stats = AnswerTracker().stats()
        assert stats.total == 0
        assert stats.accuracy_percent == 0

    def test_counts_correct(self, drill):
        tracker = AnswerTracker()
        for outcome in (True, True, False):
            tracker.record(drill, outcome, 1)

        stats = tracker.stats()
        assert stats.total == 3
        assert stats.correct == 2
        assert stats.incorrect == 1
        assert stats.accuracy_percent == 67
