"""
Tolerance tiers for numerical validation.

Defines precision expectations for the two kinds of numbers this library
produces:
- closed-form values (log-factorials, exact finite-n probabilities):
  machine precision
- Monte Carlo estimates: sampling error of a few thousand trials

Used by the test suite and by MatchingSolution.within_tolerance().
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str

    def accepts(self, actual: float, expected: float) -> bool:
        """True if actual matches expected within this tier."""
        return bool(np.isclose(actual, expected, rtol=self.rtol, atol=self.atol))


# Closed-form computations in double precision
EXACT_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='exact_fp64',
    description='Double precision closed form, matches R to machine precision',
)

# Simulated proportions from ~10^4 trials. The binomial standard error at
# p = 0.632 is about 0.0048, so 0.02 is roughly four standard errors.
MONTE_CARLO = ToleranceTier(
    rtol=0.0,
    atol=0.02,
    name='monte_carlo',
    description='Monte Carlo estimate within the sampling error of 10^4 trials',
)
