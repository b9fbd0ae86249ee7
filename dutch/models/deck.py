"""Deck shuffling."""

import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def shuffle(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """Return a shuffled copy of ``items``.

    Fisher-Yates: walking from the last index down to 1, each position is
    swapped with a uniformly chosen index in ``[0, i]``. The input is left
    untouched.

    Args:
        items: Any sequence
        rng: Optional random generator, for reproducible deals

    Returns:
        New list holding a permutation of ``items``

    """
    source = rng if rng is not None else random
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = source.randint(0, i)
        result[i], result[j] = result[j], result[i]
    return result
