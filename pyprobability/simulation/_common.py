"""
Common data structures for simulations.

MatchingParams is the parameter payload wrapped by Result[P] and exposed
through MatchingSolution.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

# Limit of the matching probability as n grows: 1 - 1/e
MATCHING_LIMIT = 1.0 - math.exp(-1.0)


@dataclass(frozen=True)
class MatchingParams:
    """
    Parameter payload for the matching problem.

    - estimate: fraction of trials whose permutation had a fixed point
    - expected: exact probability for this n (inclusion-exclusion)
    - n_matches: number of trials with at least one fixed point
    """
    estimate: float
    expected: float
    n_matches: int
    trials: int
    n: int


def matching_probability(n: int) -> float:
    """
    Exact probability that a uniform permutation of n items has a fixed point.

    By inclusion-exclusion, 1 - sum_{j=0..n} (-1)^j / j!. Each term is
    derived from the previous one and the sum stops once a term underflows
    to zero, which happens before j = 200 whatever n is.
    """
    total = 1.0
    term = 1.0
    for j in range(1, n + 1):
        term /= -j
        if term == 0.0:
            break
        total += term
    return 1.0 - total
