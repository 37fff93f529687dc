"""Service for generating random drills from a word pool."""

import uuid
from collections.abc import Callable, Sequence
from datetime import datetime

from latin_drill.exceptions import ValidationError
from latin_drill.interfaces import RandomSource
from latin_drill.models import (
    MULTIPLE_CHOICE_QUESTION_TYPES,
    DrillConfig,
    DrillType,
    WordItem,
)


class DrillGeneratorService:
    """Produce one DrillConfig at a time from a fixed pool and drill-type set.

    Word, drill type and (for multiple choice) question subtype are each
    chosen uniformly at random from the injected random source.
    """

    def __init__(
        self,
        word_pool: Sequence[WordItem],
        drill_types: Sequence[DrillType],
        random_source: RandomSource,
        now: Callable[[], datetime] = datetime.now,
    ):
        """Initialize the drill generator.

        Args:
            word_pool: Words to drill (must be non-empty)
            drill_types: Enabled drill types (must be non-empty)
            random_source: Source of randomness
            now: Clock used for creation timestamps

        Raises:
            ValidationError: If the pool or the drill-type set is empty
        """
        if not word_pool:
            raise ValidationError("Cannot generate drills from an empty word pool")
        if not drill_types:
            raise ValidationError("At least one drill type must be enabled")

        self._word_pool = list(word_pool)
        self._drill_types = list(drill_types)
        self._random = random_source
        self._now = now

    def generate(self) -> DrillConfig:
        """Generate one drill.

        Returns:
            A new DrillConfig with a fresh unique id
        """
        word = self._random.choice(self._word_pool)
        drill_type = self._random.choice(self._drill_types)

        question_type = None
        if drill_type == DrillType.MULTIPLE_CHOICE:
            question_type = self._random.choice(MULTIPLE_CHOICE_QUESTION_TYPES)

        return DrillConfig(
            id=f"drill_{uuid.uuid4().hex}",
            type=drill_type,
            word=word,
            question_type=question_type,
            created_at=self._now(),
        )
