"""Service for loading, filtering and searching the Latin vocabulary."""

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import requests

from latin_drill.exceptions import SetupError
from latin_drill.interfaces import RandomSource
from latin_drill.models import Declension, Gender, VocabularyStats, WordItem
from latin_drill.utils.text_utils import fuzzy_search_score, string_includes

from .random_source import SeededRandomSource

logger = logging.getLogger(__name__)

# Accepted spellings of the translation field, in order of preference
TRANSLATION_KEYS = ("translation", "spanishTranslation")


class VocabularyService:
    """Load WordItems from a JSON array and answer queries over them.

    The source is either a local file or an http(s) URL. Each record looks like:

        {"id": "word_rosa_0001", "nominative": "rosa", "genitive": "rosae",
         "declension": "1st", "gender": "feminine", "translation": "rosa",
         "additionalMeanings": [], "exampleSentence": null}

    Records that do not fit the model are skipped with a warning.
    """

    def __init__(
        self,
        vocabulary_path: Path | None = None,
        vocabulary_url: str | None = None,
        timeout: float = 10.0,
        random_source: RandomSource | None = None,
    ):
        """Initialize with a vocabulary source.

        Args:
            vocabulary_path: Local JSON file
            vocabulary_url: Remote JSON document; takes precedence over the path
            timeout: Seconds to wait for the remote source
            random_source: Randomness for get_random_words
        """
        self._path = vocabulary_path
        self._url = vocabulary_url
        self._timeout = timeout
        self._random = random_source or SeededRandomSource()
        self._words: list[WordItem] | None = None

    def load(self) -> int:
        """Load the vocabulary from its source.

        Returns:
            Number of words loaded

        Raises:
            SetupError: If the source is missing, unreachable or not a JSON array
        """
        if self._url:
            raw = self._fetch_remote(self._url)
            source = self._url
        elif self._path is not None:
            raw = self._read_local(self._path)
            source = str(self._path)
        else:
            raise SetupError("No vocabulary source configured")

        if not isinstance(raw, list):
            raise SetupError(f"Vocabulary at {source} must be a JSON array of words")

        self._words = self.parse_records(raw)
        logger.info(f"Loaded {len(self._words)} words from {source}")
        return len(self._words)

    def load_words(self, words: Iterable[WordItem]) -> None:
        """Use an already-resolved word list instead of a file."""
        self._words = list(words)

    def is_available(self) -> bool:
        """Check if a vocabulary has been loaded."""
        return self._words is not None

    def get_all_words(self) -> list[WordItem]:
        """Return a copy of every loaded word."""
        return list(self._require_words())

    def get_word_by_id(self, word_id: str) -> WordItem | None:
        """Look up a single word by id."""
        return next((w for w in self._require_words() if w.id == word_id), None)

    def get_words_by_ids(self, word_ids: Iterable[str]) -> list[WordItem]:
        """Return the words whose ids are given, in vocabulary order."""
        wanted = set(word_ids)
        return [w for w in self._require_words() if w.id in wanted]

    def filter_words(
        self,
        declensions: Iterable[Declension | str] | None = None,
        genders: Iterable[Gender | str] | None = None,
        search_text: str | None = None,
    ) -> list[WordItem]:
        """Filter the vocabulary.

        Empty or None criteria are ignored. Search text matches forms,
        translation and secondary meanings, ignoring case and accents.

        Args:
            declensions: Keep only these declensions
            genders: Keep only these genders
            search_text: Keep only words containing this text

        Returns:
            Matching words in vocabulary order
        """
        words = self._require_words()

        if declensions:
            declension_set = {Declension(d) for d in declensions}
            words = [w for w in words if w.declension in declension_set]

        if genders:
            gender_set = {_normalize_gender(g) for g in genders}
            words = [w for w in words if w.gender in gender_set]

        if search_text and search_text.strip():
            words = [
                w
                for w in words
                if any(string_includes(field, search_text) for field in _searchable_fields(w))
            ]

        return list(words)

    def get_random_words(
        self,
        count: int,
        declensions: Iterable[Declension | str] | None = None,
        genders: Iterable[Gender | str] | None = None,
        search_text: str | None = None,
    ) -> list[WordItem]:
        """Draw distinct words at random, optionally from a filtered pool.

        Args:
            count: Number of words wanted; capped at the pool size
            declensions: Same as filter_words
            genders: Same as filter_words
            search_text: Same as filter_words

        Returns:
            Up to count words in random order
        """
        pool = self.filter_words(declensions, genders, search_text)
        self._random.shuffle(pool)
        return pool[: max(0, min(count, len(pool)))]

    def get_words_by_declension(self) -> dict[Declension, list[WordItem]]:
        """Group the vocabulary by declension; every declension has a key."""
        groups: dict[Declension, list[WordItem]] = {d: [] for d in Declension}
        for word in self._require_words():
            groups[word.declension].append(word)
        return groups

    def get_statistics(self) -> VocabularyStats:
        """Count the vocabulary by declension and gender."""
        words = self._require_words()
        by_declension = {d: 0 for d in Declension}
        by_gender = {g: 0 for g in Gender}
        for word in words:
            by_declension[word.declension] += 1
            by_gender[word.gender] += 1

        return VocabularyStats(
            total_words=len(words),
            by_declension=by_declension,
            by_gender=by_gender,
            with_additional_meanings=sum(1 for w in words if w.additional_meanings),
        )

    def search_words(self, search_text: str, limit: int | None = None) -> list[WordItem]:
        """Search the vocabulary ranked by relevance.

        Each word scores the best fuzzy_search_score over its fields; the
        nominative breaks ties between equal scores.

        Args:
            search_text: Text to look for
            limit: Maximum number of results, or None for all

        Returns:
            Matching words, best match first
        """
        if not search_text or not search_text.strip():
            return []

        scored = []
        for word in self._require_words():
            score = max(fuzzy_search_score(search_text, f) for f in _searchable_fields(word))
            if score > 0:
                scored.append((score, word))

        scored.sort(key=lambda pair: (-pair[0], pair[1].nominative.lower()))
        results = [word for _, word in scored]
        return results[:limit] if limit is not None else results

    @staticmethod
    def parse_records(records: Iterable[Any]) -> list[WordItem]:
        """Convert raw JSON records into WordItems, skipping invalid ones.

        Args:
            records: Decoded JSON objects

        Returns:
            Valid words; duplicate ids keep their first occurrence
        """
        words: list[WordItem] = []
        seen_ids: set[str] = set()

        for index, record in enumerate(records):
            try:
                word = _word_from_record(record)
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Skipping vocabulary record {index}: {e}")
                continue

            if word.id in seen_ids:
                logger.warning(f"Skipping duplicate vocabulary id {word.id}")
                continue
            seen_ids.add(word.id)
            words.append(word)

        return words

    def _require_words(self) -> list[WordItem]:
        if self._words is None:
            raise SetupError("Vocabulary has not been loaded")
        return self._words

    @staticmethod
    def _read_local(path: Path) -> Any:
        if not path.exists():
            raise SetupError(f"Vocabulary file not found: {path}")
        try:
            with path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise SetupError(f"Error reading vocabulary file {path}: {e}") from e

    def _fetch_remote(self, url: str) -> Any:
        try:
            response = requests.get(url, timeout=self._timeout)
            response.raise_for_status()
            return response.json()
        except requests.exceptions.Timeout as e:
            raise SetupError(f"Timed out fetching vocabulary from {url}") from e
        except (requests.RequestException, ValueError) as e:
            raise SetupError(f"Error fetching vocabulary from {url}: {e}") from e


def _word_from_record(record: Any) -> WordItem:
    if not isinstance(record, dict):
        raise TypeError("record is not an object")

    translation = next((record[k] for k in TRANSLATION_KEYS if record.get(k)), None)
    if not translation:
        raise KeyError("translation")

    for key in ("id", "nominative", "genitive"):
        if not isinstance(record.get(key), str) or not record[key].strip():
            raise KeyError(key)

    meanings = record.get("additionalMeanings") or []
    if not isinstance(meanings, list):
        raise TypeError("additionalMeanings is not a list")

    return WordItem(
        id=record["id"],
        nominative=record["nominative"].strip(),
        genitive=record["genitive"].strip(),
        declension=Declension(record.get("declension")),
        gender=_normalize_gender(record.get("gender")),
        translation=str(translation).strip(),
        additional_meanings=tuple(str(m).strip() for m in meanings if str(m).strip()),
        example_sentence=record.get("exampleSentence") or None,
    )


def _normalize_gender(value: Any) -> Gender:
    """Map a recorded gender onto the three standard genders.

    Spanish names and compound values such as "masculine/feminine" are
    accepted; any other non-empty value (e.g. "common") counts as masculine.

    Raises:
        TypeError: If value is not a string
        ValueError: If value is blank
    """
    if isinstance(value, Gender):
        return value
    if not isinstance(value, str):
        raise TypeError("gender is not a string")

    text = value.strip().lower()
    if not text:
        raise ValueError("gender is empty")
    if "masculine" in text or text == "masculino":
        return Gender.MASCULINE
    if "feminine" in text or text == "femenino":
        return Gender.FEMININE
    if "neuter" in text or text == "neutro":
        return Gender.NEUTER
    logger.debug(f"Treating gender {value!r} as masculine")
    return Gender.MASCULINE


def _searchable_fields(word: WordItem) -> tuple[str, ...]:
    return (word.nominative, word.genitive, *word.all_meanings)
