"""
Generic result container for PyProbability simulations.

The Result class provides a standardized envelope that simulation results
use. This enables shared tooling for timing, logging and reproducibility
while allowing each simulation to define its own parameter structure.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (seed, counts, diagnostics)
    - timing is optional (don't burden unit tests)
    - provenance records library versions for reproducibility
    - Immutable (frozen=True) for reproducibility
"""

from __future__ import annotations

import platform
from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Versions of the software stack that produced a result."""
    from pyprobability import __version__

    return {
        'pyprobability_version': __version__,
        'numpy_version': np.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for simulations.

    Type Parameters:
        P: The simulation-specific parameter payload type

    Attributes:
        params: Simulation-specific payload (estimates, counts, etc.)
        info: Structured metadata (seed, trial counts, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions used to compute the result

    Examples:
        >>> Result(
        ...     params=MatchingParams(estimate=0.63, ...),
        ...     info={'seed': 42, 'n': 100, 'trials': 10000},
        ...     timing={'total_seconds': 0.8, 'permutations': 0.79},
        ...     backend_name='cpu_matching'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
