"""
PyProbability: R-flavoured probability utilities for Python.

Sampling, permutations, combinatorics, sequence generation and an
immutable numeric vector with R-style recycling.

Submodules:
    vector: Vector with 1-based indexing and recycling arithmetic
    sampling: Sampler (R's sample() family) over any RandomSource
    combinatorics: factorial, choose, lfactorial, lchoose
    sequence: seq_*, rep*, concat
    simulation: Monte Carlo drivers (matching problem)
"""

__version__ = "0.1.0"

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

from pyprobability import combinatorics
from pyprobability import sequence
from pyprobability.vector import Vector
from pyprobability.sampling import Sampler, LETTERS
from pyprobability.core.random_source import NumpyRandomSource, PythonRandomSource
from pyprobability.simulation import matching_problem

__all__ = [
    "__version__",
    "combinatorics",
    "sequence",
    "Vector",
    "Sampler",
    "LETTERS",
    "NumpyRandomSource",
    "PythonRandomSource",
    "matching_problem",
]
