"""Pytest configuration and shared fixtures."""

import pytest

from latin_drill.config import LatinDrillConfig
from latin_drill.models import Declension, Gender, WordItem
from latin_drill.presenters import NullPresenter
from latin_drill.services import ManualTicker, SeededRandomSource


class RecordingListener:
    """Session listener that remembers every call."""

    def __init__(self):
        self.progress: list[tuple[int, int]] = []
        self.ticks: list[int] = []
        self.session_ends: list[list] = []

    def on_progress(self, completed, estimated_total):
        self.progress.append((completed, estimated_total))

    def on_tick(self, remaining_seconds):
        self.ticks.append(remaining_seconds)

    def on_session_end(self, results):
        self.session_ends.append(list(results))


class FakeClock:
    """Monotonic clock advanced by hand."""

    def __init__(self, start=100.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def test_config(tmp_path):
    """Provide a test configuration with temporary paths and a fixed seed."""
    return LatinDrillConfig(
        random_seed=1234,
        vocabulary_path=tmp_path / "vocabulary.json",
    )


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


@pytest.fixture
def recording_listener():
    """Provide a listener that records every session event."""
    return RecordingListener()


@pytest.fixture
def manual_ticker():
    """Provide a ticker fired explicitly by the test."""
    return ManualTicker()


@pytest.fixture
def seeded_random():
    """Provide a reproducible random source."""
    return SeededRandomSource(seed=42)


@pytest.fixture
def fake_clock():
    """Provide a hand-advanced monotonic clock."""
    return FakeClock()


@pytest.fixture
def make_word():
    """Factory fixture for creating WordItem instances with sensible defaults."""

    def _make(
        id="word_rosa_0001",
        nominative="rosa",
        genitive="rosae",
        declension=Declension.FIRST,
        gender=Gender.FEMININE,
        translation="rose",
        additional_meanings=(),
        example_sentence=None,
    ):
        return WordItem(
            id=id,
            nominative=nominative,
            genitive=genitive,
            declension=declension,
            gender=gender,
            translation=translation,
            additional_meanings=additional_meanings,
            example_sentence=example_sentence,
        )

    return _make


@pytest.fixture
def word_pool(make_word):
    """Provide nine distinct words covering every declension and gender."""
    return [
        make_word("word_rosa_0001", "rosa", "rosae", "1st", "feminine", "rose"),
        make_word("word_nauta_0002", "nauta", "nautae", "1st", "masculine", "sailor"),
        make_word("word_dominus_0003", "dominus", "domini", "2nd", "masculine", "master", ("lord",)),
        make_word("word_bellum_0004", "bellum", "belli", "2nd", "neuter", "war"),
        make_word("word_rex_0005", "rex", "regis", "3rd", "masculine", "king"),
        make_word("word_corpus_0006", "corpus", "corporis", "3rd", "neuter", "body"),
        make_word("word_manus_0007", "manus", "manus", "4th", "feminine", "hand"),
        make_word("word_cornu_0008", "cornu", "cornus", "4th", "neuter", "horn"),
        make_word("word_dies_0009", "dies", "diei", "5th", "masculine", "day"),
    ]


@pytest.fixture
def vocabulary_records():
    """Provide raw vocabulary JSON records."""
    return [
        {
            "id": "word_rosa_0001",
            "nominative": "rosa",
            "genitive": "rosae",
            "declension": "1st",
            "gender": "feminine",
            "translation": "rose",
            "additionalMeanings": [],
            "exampleSentence": "Rosa pulchra est.",
        },
        {
            "id": "word_dominus_0003",
            "nominative": "dominus",
            "genitive": "domini",
            "declension": "2nd",
            "gender": "masculine",
            "translation": "master",
            "additionalMeanings": ["lord"],
            "exampleSentence": None,
        },
        {
            "id": "word_rex_0005",
            "nominative": "rēx",
            "genitive": "rēgis",
            "declension": "3rd",
            "gender": "masculine",
            "spanishTranslation": "king",
        },
    ]
