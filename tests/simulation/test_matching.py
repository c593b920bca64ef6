"""
Tests for the matching (hat-check) simulation.

Validates:
    - Exact probabilities and the 1 - 1/e limit
    - Design validation
    - Estimate accuracy and reproducibility
    - Warnings, metadata and summary output
"""

import math
import random
import time

import numpy as np
import pytest
from numpy.testing import assert_allclose

from pyprobability.core.compute.tolerances import EXACT_FP64
from pyprobability.core.exceptions import ValidationError
from pyprobability.core.protocols import Backend
from pyprobability.core.random_source import NumpyRandomSource
from pyprobability.simulation import (
    MATCHING_LIMIT,
    MatchingDesign,
    MatchingSolution,
    matching_problem,
    matching_probability,
)
from pyprobability.simulation.backends import CPUMatchingBackend
from pyprobability.simulation.solvers import _get_backend


# ═══════════════════════════════════════════════════════════════════════
# Exact values
# ═══════════════════════════════════════════════════════════════════════


class TestMatchingProbability:

    @pytest.mark.parametrize("n, expected", [
        (1, 1.0),
        (2, 0.5),
        (3, 2.0 / 3.0),
        (4, 15.0 / 24.0),
    ])
    def test_small_n(self, n, expected):
        assert EXACT_FP64.accepts(matching_probability(n), expected)

    def test_converges_to_limit(self):
        assert_allclose(matching_probability(100), MATCHING_LIMIT, rtol=1e-12)

    def test_limit_value(self):
        assert_allclose(MATCHING_LIMIT, 1 - 1 / math.e)

    def test_huge_n_returns_limit_quickly(self):
        started = time.perf_counter()
        value = matching_probability(10**6)
        assert time.perf_counter() - started < 0.5
        assert EXACT_FP64.accepts(value, MATCHING_LIMIT)

    def test_large_simulation_not_dominated_by_exact_value(self):
        solution = matching_problem(n=20_000, trials=1, seed=1)
        assert solution.timing["expected_value"] < 0.5
        assert EXACT_FP64.accepts(solution.expected, MATCHING_LIMIT)


# ═══════════════════════════════════════════════════════════════════════
# Design
# ═══════════════════════════════════════════════════════════════════════


class TestMatchingDesign:

    def test_defaults(self):
        design = MatchingDesign.for_matching_problem()
        assert design.n == 100
        assert design.trials == 10_000
        assert design.seed is None
        assert design.rng is None

    def test_rng_coerced(self):
        design = MatchingDesign.for_matching_problem(5, 10, rng=np.random.default_rng(0))
        assert isinstance(design.rng, NumpyRandomSource)

    @pytest.mark.parametrize("kwargs", [
        {"n": 0, "trials": 10},
        {"n": 5, "trials": 0},
        {"n": -1, "trials": 10},
        {"n": 5, "trials": 10, "seed": -1},
        {"n": 5.0, "trials": 10},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ValidationError):
            MatchingDesign.for_matching_problem(**kwargs)

    def test_frozen(self):
        design = MatchingDesign.for_matching_problem(5, 10)
        with pytest.raises(AttributeError):
            design.n = 6


# ═══════════════════════════════════════════════════════════════════════
# Simulation
# ═══════════════════════════════════════════════════════════════════════


class TestMatchingProblem:

    def test_estimate_near_limit(self):
        solution = matching_problem(n=100, trials=10_000, seed=42)
        assert isinstance(solution, MatchingSolution)
        assert abs(solution.estimate - MATCHING_LIMIT) < 0.02
        assert solution.within_tolerance()
        assert solution.warnings == ()

    def test_counts_consistent(self):
        solution = matching_problem(n=10, trials=500, seed=3)
        assert 0 <= solution.n_matches <= 500
        assert solution.estimate == solution.n_matches / 500
        assert solution.abs_error == abs(solution.estimate - solution.expected)

    def test_same_seed_reproducible(self):
        a = matching_problem(n=20, trials=300, seed=11)
        b = matching_problem(n=20, trials=300, seed=11)
        assert a.n_matches == b.n_matches

    def test_single_item_always_matches(self):
        solution = matching_problem(n=1, trials=50, seed=0)
        assert solution.estimate == 1.0
        assert solution.expected == 1.0

    def test_scripted_permutations(self, scripted):
        # n=2: a draw of 1 keeps [1, 2] (match), a draw of 0 swaps (no match)
        source = scripted([1, 0, 1, 1])
        solution = matching_problem(n=2, trials=4, rng=source)
        assert solution.n_matches == 3
        assert solution.estimate == 0.75
        assert source.calls == [(0, 2)] * 4

    def test_python_random_source(self):
        solution = matching_problem(n=8, trials=2000, rng=random.Random(5))
        assert abs(solution.estimate - matching_probability(8)) < 0.05

    def test_rng_overrides_seed(self):
        a = matching_problem(n=15, trials=200, seed=1, rng=np.random.default_rng(9))
        b = matching_problem(n=15, trials=200, seed=2, rng=np.random.default_rng(9))
        assert a.n_matches == b.n_matches

    def test_unknown_backend(self):
        with pytest.raises(ValidationError, match="Unknown backend"):
            matching_problem(n=5, trials=10, backend='gpu')

    def test_explicit_cpu_backend(self):
        solution = matching_problem(n=5, trials=10, seed=0, backend='cpu')
        assert solution.backend_name == 'cpu_matching'


class TestMatchingSolution:

    @pytest.fixture
    def solution(self):
        return matching_problem(n=12, trials=200, seed=7)

    def test_few_trials_warning(self, solution):
        assert len(solution.warnings) == 1
        assert "only 200 trials" in solution.warnings[0]

    def test_metadata(self, solution):
        assert solution.seed == 7
        assert solution.info == {'n': 12, 'trials': 200, 'seed': 7}
        assert solution.n == 12
        assert solution.trials == 200
        assert solution.limit == MATCHING_LIMIT
        assert 'permutations' in solution.timing
        assert 'total_seconds' in solution.timing

    def test_summary(self, solution):
        text = solution.summary()
        assert "MATCHING PROBLEM" in text
        assert "Estimated probability:" in text
        assert "Expected (1 - 1/e):" in text
        assert "Warning: only 200 trials" in text

    def test_repr(self, solution):
        assert repr(solution).startswith("MatchingSolution(n=12, trials=200")


class TestCPUMatchingBackend:

    def test_satisfies_backend_protocol(self):
        assert isinstance(CPUMatchingBackend(), Backend)

    @pytest.mark.parametrize("choice", ["auto", "cpu"])
    def test_backend_selection(self, choice):
        backend = _get_backend(choice)
        assert isinstance(backend, Backend)
        assert backend.name == "cpu_matching"

    def test_result_fields(self):
        design = MatchingDesign.for_matching_problem(6, 1500, seed=4)
        result = CPUMatchingBackend().solve(design)
        assert result.backend_name == 'cpu_matching'
        assert result.params.trials == 1500
        assert result.params.n == 6
        assert_allclose(result.params.expected, matching_probability(6))
        assert not result.has_warning("trials")
