"""
Solver dispatch for simulations.

Provides matching_problem() as the entry point for the hat-check
simulation.
"""

from __future__ import annotations

from typing import Any, Literal

from pyprobability.core.exceptions import ValidationError
from pyprobability.core.protocols import Backend
from pyprobability.simulation._common import MatchingParams
from pyprobability.simulation.backends.cpu import CPUMatchingBackend
from pyprobability.simulation.design import (
    DEFAULT_N,
    DEFAULT_TRIALS,
    MatchingDesign,
)
from pyprobability.simulation.solution import MatchingSolution

BackendChoice = Literal['auto', 'cpu']


def _get_backend(backend: BackendChoice) -> Backend[MatchingDesign, MatchingParams]:
    """Select backend based on preference."""
    if backend in ('auto', 'cpu'):
        return CPUMatchingBackend()
    raise ValidationError(f"Unknown backend: {backend!r}")


def matching_problem(
    n: int = DEFAULT_N,
    trials: int = DEFAULT_TRIALS,
    *,
    seed: int | None = None,
    rng: Any = None,
    backend: BackendChoice = 'auto',
) -> MatchingSolution:
    """
    Estimate the probability that a random permutation has a fixed point.

    Shuffle n cards numbered 1..n; a match is card i landing in position
    i. The probability of at least one match tends to 1 - 1/e ~ 0.632.

    Parameters
    ----------
    n : int
        Items per permutation.
    trials : int
        Number of simulated permutations.
    seed : int, optional
        Seed for reproducibility. Ignored when rng is given.
    rng : RandomSource, numpy.random.Generator or random.Random, optional
        Generator to draw from.
    backend : str
        'auto' or 'cpu'.

    Returns
    -------
    MatchingSolution
    """
    design = MatchingDesign.for_matching_problem(n, trials, seed=seed, rng=rng)
    be = _get_backend(backend)
    result = be.solve(design)
    return MatchingSolution(_result=result, _design=design)
