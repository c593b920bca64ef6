"""
RandomSource adapters.

Wrap the generators people already have so they satisfy the RandomSource
protocol:

    NumpyRandomSource: numpy.random.Generator (PCG64 by default)
    PythonRandomSource: random.Random (Mersenne Twister)

Usage:
    from pyprobability.core.random_source import NumpyRandomSource

    rng = NumpyRandomSource(42)        # seeded, reproducible
    rng.next_int(6)                    # uniform in [0, 6)
    rng.next_int(1, 7)                 # uniform in [1, 7)
"""

from __future__ import annotations

import random
from typing import Any

import numpy as np

from pyprobability.core.exceptions import InvalidReferenceError, ValidationError
from pyprobability.core.protocols import RandomSource
from pyprobability.core.validation import check_integer


def _resolve_range(origin_or_bound: int, bound: int | None) -> tuple[int, int]:
    """Normalize next_int arguments to a half-open [low, high) pair."""
    if bound is None:
        low, high = 0, check_integer(origin_or_bound, "bound")
    else:
        low = check_integer(origin_or_bound, "origin")
        high = check_integer(bound, "bound")
    if high <= low:
        raise ValidationError(
            f"bound must be greater than origin, got origin={low}, bound={high}"
        )
    return low, high


class NumpyRandomSource:
    """
    RandomSource backed by numpy.random.Generator.

    Args:
        seed: None for fresh OS entropy, an int seed, or an existing
            numpy.random.Generator to share.
    """

    def __init__(self, seed: int | np.random.Generator | None = None):
        if isinstance(seed, np.random.Generator):
            self._generator = seed
            self._seed = None
        else:
            self._generator = np.random.default_rng(seed)
            self._seed = seed

    @property
    def seed(self) -> int | None:
        return self._seed

    @property
    def generator(self) -> np.random.Generator:
        return self._generator

    def next_int(self, origin_or_bound: int, bound: int | None = None) -> int:
        low, high = _resolve_range(origin_or_bound, bound)
        return int(self._generator.integers(low, high))

    def __repr__(self) -> str:
        return f"NumpyRandomSource(seed={self._seed!r})"


class PythonRandomSource:
    """
    RandomSource backed by the standard library's random.Random.

    Args:
        seed: None for fresh OS entropy, an int seed, or an existing
            random.Random to share.
    """

    def __init__(self, seed: int | random.Random | None = None):
        if isinstance(seed, random.Random):
            self._random = seed
            self._seed = None
        else:
            self._random = random.Random(seed)
            self._seed = seed

    @property
    def seed(self) -> int | None:
        return self._seed

    def next_int(self, origin_or_bound: int, bound: int | None = None) -> int:
        low, high = _resolve_range(origin_or_bound, bound)
        return self._random.randrange(low, high)

    def __repr__(self) -> str:
        return f"PythonRandomSource(seed={self._seed!r})"


def as_random_source(rng: Any) -> RandomSource:
    """
    Coerce a generator-like object to a RandomSource.

    Accepts anything already implementing next_int, a
    numpy.random.Generator, or a random.Random instance.

    Raises:
        InvalidReferenceError: If rng is None
        ValidationError: If rng is not a supported generator
    """
    if rng is None:
        raise InvalidReferenceError("rng cannot be None")
    if isinstance(rng, RandomSource):
        return rng
    if isinstance(rng, np.random.Generator):
        return NumpyRandomSource(rng)
    if isinstance(rng, random.Random):
        return PythonRandomSource(rng)
    raise ValidationError(
        f"rng must provide next_int() or be a numpy.random.Generator "
        f"or random.Random, got {type(rng).__name__}"
    )
