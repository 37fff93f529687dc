"""Tests for DrillQueue."""

import pytest

from latin_drill.exceptions import DrillStateError, ValidationError
from latin_drill.models import DrillType
from latin_drill.services import AnswerTracker, DrillGeneratorService, DrillQueue


@pytest.fixture
def generator(word_pool, seeded_random):
    return DrillGeneratorService(word_pool, list(DrillType), seeded_random)


class TestInitialize:
    """Tests for initialize()."""

    def test_generates_current_plus_k_minus_one(self, generator):
        queue = DrillQueue(generator, size=5)
        current, pending = queue.initialize()

        assert current is queue.current
        assert len(pending) == 4
        assert len(queue) == 4
        assert current not in pending

    def test_uninitialized_queue_is_empty(self, generator):
        queue = DrillQueue(generator)
        assert queue.current is None
        assert queue.pending == ()

    def test_size_below_two_rejected(self, generator):
        with pytest.raises(ValidationError):
            DrillQueue(generator, size=1)


class TestAdvance:
    """Tests for advance()."""

    def test_promotes_head_and_refills(self, generator):
        queue = DrillQueue(generator, size=3)
        queue.initialize()
        expected_next = queue.pending[0]
        tail_before = queue.pending[-1]

        current = queue.advance()

        assert current is expected_next
        assert queue.current is expected_next
        assert len(queue) == 2
        assert queue.pending[0] is tail_before

    def test_length_stays_constant(self, generator):
        queue = DrillQueue(generator, size=5)
        queue.initialize()
        for _ in range(25):
            queue.advance()
            assert queue.current is not None
            assert len(queue) == 4

    def test_advance_before_initialize_raises(self, generator):
        with pytest.raises(DrillStateError):
            DrillQueue(generator).advance()


class TestSkip:
    """Tests for skip()."""

    def test_records_forced_miss_then_advances(self, generator):
        queue = DrillQueue(generator)
        queue.initialize()
        tracker = AnswerTracker()
        skipped = queue.current

        result = queue.skip(tracker)

        assert result.drill_id == skipped.id
        assert result.is_correct is False
        assert result.elapsed_seconds == 0
        assert tracker.results == (result,)
        assert queue.current is not skipped
        assert len(queue) == 4

    def test_skip_before_initialize_raises(self, generator):
        with pytest.raises(DrillStateError):
            DrillQueue(generator).skip(AnswerTracker())
