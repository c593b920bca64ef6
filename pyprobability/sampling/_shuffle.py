"""
Fisher-Yates shuffle driven by a RandomSource.

Every sampling routine that needs distinct draws goes through shuffle():
build the full candidate list, shuffle it completely, then truncate.
"""

from __future__ import annotations

from typing import MutableSequence, TypeVar

from pyprobability.core.protocols import RandomSource

T = TypeVar('T')


def shuffle(items: MutableSequence[T], rng: RandomSource) -> None:
    """
    Shuffle items in place into a uniformly random order.

    For each position i from the last down to the second, draw j
    uniformly from [0, i] and swap items[i] with items[j]. Each of the
    m! orderings is equally likely when rng is uniform. Consumes exactly
    m - 1 draws from rng.

    Args:
        items: Sequence to permute in place
        rng: Source of uniform integers
    """
    for i in range(len(items) - 1, 0, -1):
        j = rng.next_int(0, i + 1)
        items[i], items[j] = items[j], items[i]
