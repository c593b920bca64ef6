"""
Design classes for simulations.

MatchingDesign encapsulates all inputs needed by backends to run the
matching problem. Immutable, validated at construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pyprobability.core.protocols import RandomSource
from pyprobability.core.random_source import as_random_source
from pyprobability.core.validation import check_non_negative, check_positive

DEFAULT_N = 100
DEFAULT_TRIALS = 10_000


@dataclass(frozen=True)
class MatchingDesign:
    """
    Frozen design for the matching (hat-check) problem.

    Attributes:
        n: Number of items in each permutation.
        trials: Number of simulated permutations.
        seed: Seed for a fresh NumpyRandomSource, used when rng is None.
        rng: Explicit RandomSource; takes precedence over seed.
    """
    n: int
    trials: int
    seed: int | None
    rng: RandomSource | None

    @classmethod
    def for_matching_problem(
        cls,
        n: int = DEFAULT_N,
        trials: int = DEFAULT_TRIALS,
        *,
        seed: int | None = None,
        rng: Any = None,
    ) -> MatchingDesign:
        """
        Create a matching-problem design with validation.

        Args:
            n: Items per permutation. Must be >= 1.
            trials: Number of permutations to draw. Must be >= 1.
            seed: Random seed.
            rng: RandomSource, numpy.random.Generator or random.Random
                to draw from instead of a seeded generator.

        Returns:
            Validated MatchingDesign.

        Raises:
            ValidationError: If inputs are invalid.
        """
        n = check_positive(n, "n")
        trials = check_positive(trials, "trials")
        if seed is not None:
            seed = check_non_negative(seed, "seed")
        if rng is not None:
            rng = as_random_source(rng)

        return cls(n=n, trials=trials, seed=seed, rng=rng)
