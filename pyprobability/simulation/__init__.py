"""
PyProbability simulations.

Monte Carlo drivers built on the sampling API.

Usage:
    from pyprobability.simulation import matching_problem

    result = matching_problem(n=100, trials=10_000, seed=42)
    result.estimate        # ~0.632
    print(result.summary())
"""

from pyprobability.simulation.solvers import matching_problem
from pyprobability.simulation.design import MatchingDesign
from pyprobability.simulation.solution import MatchingSolution
from pyprobability.simulation._common import MATCHING_LIMIT, matching_probability

__all__ = [
    "matching_problem",
    "MatchingDesign",
    "MatchingSolution",
    "MATCHING_LIMIT",
    "matching_probability",
]
