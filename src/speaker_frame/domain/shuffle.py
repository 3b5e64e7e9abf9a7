"""Random permutation helper."""

import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def shuffle(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """Return a uniformly shuffled copy of ``items``.

    Fisher-Yates over a copy; the argument is never mutated.

    Args:
        items: Sequence to permute
        rng: Optional random generator, the module-level one by default

    Returns
    -------
        A new list holding the same elements in random order
    """
    randint = (rng or random).randint
    shuffled = list(items)

    for i in range(len(shuffled) - 1, 0, -1):
        j = randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]

    return shuffled
