"""
Shared compute infrastructure for PyProbability.

IMPORTANT: This is NOT where simulation backends live. Those go in
simulation/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers for closed-form and Monte Carlo values
"""

from pyprobability.core.compute.timing import Timer
from pyprobability.core.compute.tolerances import (
    ToleranceTier,
    EXACT_FP64,
    MONTE_CARLO,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "EXACT_FP64",
    "MONTE_CARLO",
]
