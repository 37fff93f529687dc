"""Protocol for injectable randomness."""

from collections.abc import MutableSequence, Sequence
from typing import Protocol, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Source of randomness used by drill and distractor generation.

    Injecting this instead of calling the random module directly makes
    generation reproducible under a fixed seed.
    """

    def choice(self, items: Sequence[T]) -> T:
        """Return one element of a non-empty sequence, uniformly."""
        ...

    def randrange(self, stop: int) -> int:
        """Return a uniform integer in [0, stop)."""
        ...

    def shuffle(self, items: MutableSequence) -> None:
        """Permute items in place; every permutation equally likely."""
        ...
