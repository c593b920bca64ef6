"""
CPU backend for the matching problem.

CPUMatchingBackend: draws permutations with Sampler and counts those with
at least one fixed point.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from pyprobability.core.result import Result
from pyprobability.core.compute.timing import Timer
from pyprobability.core.random_source import NumpyRandomSource
from pyprobability.sampling import Sampler
from pyprobability.simulation._common import MatchingParams, matching_probability
from pyprobability.simulation.design import MatchingDesign

logger = logging.getLogger(__name__)

# Below this many trials the estimate is too noisy to compare with 1 - 1/e
MIN_RELIABLE_TRIALS = 1000


class CPUMatchingBackend:
    """
    CPU backend for the matching problem.

    Each trial draws permutation(n) from a Sampler and checks whether any
    position i holds the value i.
    """

    @property
    def name(self) -> str:
        return 'cpu_matching'

    def solve(self, design: MatchingDesign) -> Result[MatchingParams]:
        """Run the simulation and return Result[MatchingParams]."""
        timer = Timer()
        timer.start()

        n = design.n
        trials = design.trials
        rng = design.rng if design.rng is not None else NumpyRandomSource(design.seed)
        sampler = Sampler(rng)

        logger.debug(
            "matching problem: n=%d trials=%d seed=%r rng=%r",
            n, trials, design.seed, rng,
        )

        with timer.section('permutations'):
            positions = np.arange(1, n + 1)
            n_matches = 0
            for _ in range(trials):
                perm = np.asarray(sampler.permutation(n))
                if np.any(perm == positions):
                    n_matches += 1

        with timer.section('expected_value'):
            expected = matching_probability(n)

        estimate = n_matches / trials

        warnings_list: list[str] = []
        if trials < MIN_RELIABLE_TRIALS:
            se = math.sqrt(expected * (1.0 - expected) / trials)
            warnings_list.append(
                f"only {trials} trials: estimate has standard error ~{se:.3f}"
            )

        timer.stop()

        logger.debug(
            "matching problem finished: %d/%d trials matched (%.4f), expected %.4f",
            n_matches, trials, estimate, expected,
        )

        params = MatchingParams(
            estimate=estimate,
            expected=expected,
            n_matches=n_matches,
            trials=trials,
            n=n,
        )

        return Result(
            params=params,
            info={
                'n': n,
                'trials': trials,
                'seed': design.seed,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
