"""
Core infrastructure for PyProbability.

This module provides shared abstractions and utilities used by all
domain-specific submodules (vector, sampling, simulation, etc.).

Key components:
    protocols: RandomSource, Backend protocols
    random_source: RandomSource adapters for numpy and the random module
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerance tiers
"""

from pyprobability.core.protocols import RandomSource, Backend
from pyprobability.core.random_source import (
    NumpyRandomSource,
    PythonRandomSource,
    as_random_source,
)
from pyprobability.core.result import Result
from pyprobability.core.exceptions import (
    PyProbabilityError,
    ValidationError,
    InvalidReferenceError,
    DimensionError,
    IndexOutOfRangeError,
)

__all__ = [
    # Protocols
    "RandomSource",
    "Backend",
    # Random sources
    "NumpyRandomSource",
    "PythonRandomSource",
    "as_random_source",
    # Result
    "Result",
    # Exceptions
    "PyProbabilityError",
    "ValidationError",
    "InvalidReferenceError",
    "DimensionError",
    "IndexOutOfRangeError",
]
