"""
Solution wrapper for simulation results.

MatchingSolution wraps Result[MatchingParams] and provides convenient
accessors and a printable summary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pyprobability.core.compute.tolerances import MONTE_CARLO, ToleranceTier
from pyprobability.core.result import Result
from pyprobability.simulation._common import MATCHING_LIMIT, MatchingParams

if TYPE_CHECKING:
    from pyprobability.simulation.design import MatchingDesign


@dataclass
class MatchingSolution:
    """
    User-facing matching-problem results.

    Provides the simulated probability of at least one fixed point, the
    exact value for this n, and the n -> infinity limit 1 - 1/e.
    """
    _result: Result[MatchingParams]
    _design: 'MatchingDesign'

    # --- Core fields ---

    @property
    def estimate(self) -> float:
        """Fraction of trials with at least one fixed point."""
        return self._result.params.estimate

    @property
    def expected(self) -> float:
        """Exact probability of at least one fixed point for this n."""
        return self._result.params.expected

    @property
    def limit(self) -> float:
        """Large-n limit, 1 - 1/e."""
        return MATCHING_LIMIT

    @property
    def n_matches(self) -> int:
        return self._result.params.n_matches

    @property
    def trials(self) -> int:
        return self._result.params.trials

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def abs_error(self) -> float:
        """|estimate - expected|."""
        return abs(self.estimate - self.expected)

    def within_tolerance(self, tier: ToleranceTier = MONTE_CARLO) -> bool:
        """True if the estimate agrees with the exact value within tier."""
        return tier.accepts(self.estimate, self.expected)

    # --- Metadata ---

    @property
    def seed(self) -> int | None:
        """Random seed used."""
        return self._design.seed

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # --- Display ---

    def summary(self) -> str:
        """Matching problem summary."""
        lines = [
            "\nMATCHING PROBLEM",
            "",
            f"Items per permutation: {self.n}",
            f"Number of trials: {self.trials}",
            f"Trials with a fixed point: {self.n_matches}",
            f"Estimated probability: {self.estimate:.6g}",
            f"Exact probability: {self.expected:.6g}",
            f"Expected (1 - 1/e): {self.limit:.6g}",
            "",
        ]
        for warning in self.warnings:
            lines.insert(-1, f"Warning: {warning}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"MatchingSolution(n={self.n}, trials={self.trials}, "
            f"estimate={self.estimate:.4g}, expected={self.expected:.4g})"
        )
