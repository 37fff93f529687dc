"""Seedable random source backed by the standard library generator."""

import random
from collections.abc import MutableSequence, Sequence
from typing import TypeVar

T = TypeVar("T")


class SeededRandomSource:
    """RandomSource implementation wrapping a private random.Random.

    Each instance owns its generator, so seeding one session never affects
    another or the global random module.
    """

    def __init__(self, seed: int | None = None):
        """Initialize the random source.

        Args:
            seed: Seed for reproducible sequences, or None for OS entropy
        """
        self.seed = seed
        self._rng = random.Random(seed)

    def choice(self, items: Sequence[T]) -> T:
        """Return one element of a non-empty sequence, uniformly.

        Raises:
            IndexError: If items is empty
        """
        return self._rng.choice(items)

    def randrange(self, stop: int) -> int:
        """Return a uniform integer in [0, stop)."""
        return self._rng.randrange(stop)

    def shuffle(self, items: MutableSequence) -> None:
        """Shuffle items in place with Fisher-Yates (uniform over permutations)."""
        self._rng.shuffle(items)
