"""
Random sampling and permutations.

Sampler wraps one RandomSource and implements R's sample() family:

    sample_with_replacement(n, k)        k draws from 1..n, repeats allowed
    sample_with_replacement(xs, k)       k draws from the elements of xs
    sample_without_replacement(n, k)     k distinct values from 1..n
    sample_without_replacement(xs, k)    k distinct positions of xs
    permutation(n)                       1..n in random order

As in R, an int population n stands for the range 1..n and any other
collection is sampled by position.

Distinct draws shuffle the complete candidate list and keep the first k.
That costs O(n) even when k is small, but the output order is a uniformly
random prefix of a full permutation.

A Sampler is not thread-safe: concurrent calls race on the shared
RandomSource. Use one Sampler per thread.
"""

from __future__ import annotations

import string
from collections.abc import Collection
from numbers import Integral
from typing import Any, TypeVar, overload

from pyprobability.core.exceptions import ValidationError
from pyprobability.core.protocols import RandomSource
from pyprobability.core.random_source import as_random_source
from pyprobability.core.validation import (
    check_non_negative,
    check_not_none,
    check_positive,
)
from pyprobability.sampling._shuffle import shuffle

T = TypeVar('T')

# R's `letters`
LETTERS: tuple[str, ...] = tuple(string.ascii_lowercase)


class Sampler:
    """
    Sampling engine bound to a single RandomSource.

    Args:
        rng: A RandomSource, numpy.random.Generator, or random.Random.
            The generator is shared, not copied: draws made here advance
            it for every other user as well.

    Raises:
        InvalidReferenceError: If rng is None
        ValidationError: If rng is not a supported generator
    """

    LETTERS = LETTERS

    def __init__(self, rng: Any):
        self._rng: RandomSource = as_random_source(rng)

    @property
    def rng(self) -> RandomSource:
        """The RandomSource driving this sampler."""
        return self._rng

    # --- With replacement ---

    @overload
    def sample_with_replacement(self, population: int, k: int) -> list[int]: ...

    @overload
    def sample_with_replacement(self, population: Collection[T], k: int) -> list[T]: ...

    def sample_with_replacement(self, population, k):
        """
        Draw k values independently and uniformly, repeats allowed.

        Args:
            population: int n for the range [1, n], or a collection
            k: Number of draws; may exceed the population size

        Returns:
            List of k draws

        Raises:
            InvalidReferenceError: If population is None
            ValidationError: If n <= 0, k < 0, or the collection is empty
                while k > 0
        """
        if _is_range(population):
            n = check_positive(population, "n")
            k = check_non_negative(k, "k")
            return [self._rng.next_int(1, n + 1) for _ in range(k)]

        xs = _as_list(population)
        k = check_non_negative(k, "k")
        if k == 0:
            return []
        if not xs:
            raise ValidationError("xs must not be empty when k is positive")
        size = len(xs)
        return [xs[self._rng.next_int(size)] for _ in range(k)]

    # --- Without replacement ---

    @overload
    def sample_without_replacement(self, population: int, k: int) -> list[int]: ...

    @overload
    def sample_without_replacement(self, population: Collection[T], k: int) -> list[T]: ...

    def sample_without_replacement(self, population, k):
        """
        Draw k distinct positions in uniformly random order.

        Shuffles the whole population and keeps the first k.

        Args:
            population: int n for the range [1, n], or a collection
            k: Number of draws, at most the population size

        Returns:
            List of k draws

        Raises:
            InvalidReferenceError: If population is None
            ValidationError: If n <= 0, k < 0, k exceeds the population
                size, or the collection is empty while k > 0
        """
        if _is_range(population):
            n = check_positive(population, "n")
            k = check_non_negative(k, "k")
            if k > n:
                raise ValidationError(
                    f"k cannot be greater than n, got k={k}, n={n}"
                )
            return self._shuffled_range(n)[:k]

        xs = _as_list(population)
        k = check_non_negative(k, "k")
        if k == 0:
            return []
        if not xs:
            raise ValidationError("xs must not be empty when k is positive")
        if k > len(xs):
            raise ValidationError(
                f"k cannot be greater than xs size, got k={k}, size={len(xs)}"
            )
        shuffle(xs, self._rng)
        return xs[:k]

    # --- Permutations ---

    def permutation(self, n: int) -> list[int]:
        """
        The integers 1..n in uniformly random order.

        Raises:
            ValidationError: If n <= 0
        """
        n = check_positive(n, "n")
        return self._shuffled_range(n)

    def sample(self, population, size: int, replace: bool = False) -> list:
        """R-style sample(x, size, replace) dispatching to the methods above."""
        if replace:
            return self.sample_with_replacement(population, size)
        return self.sample_without_replacement(population, size)

    def _shuffled_range(self, n: int) -> list[int]:
        values = list(range(1, n + 1))
        shuffle(values, self._rng)
        return values

    def __repr__(self) -> str:
        return f"Sampler(rng={self._rng!r})"


def _is_range(population: Any) -> bool:
    """True for an integer population (bool excluded)."""
    return isinstance(population, Integral) and not isinstance(population, bool)


def _as_list(population: Any) -> list:
    """Copy a collection population into a fresh, shuffleable list."""
    check_not_none(population, "xs")
    if isinstance(population, bool) or not isinstance(population, Collection):
        raise ValidationError(
            f"population must be an int or a collection, "
            f"got {type(population).__name__}: {population!r}"
        )
    return list(population)
