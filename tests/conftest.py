"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pyprobability.core.random_source import NumpyRandomSource
from pyprobability.sampling import Sampler


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def sampler():
    """Sampler over a seeded NumpyRandomSource."""
    return Sampler(NumpyRandomSource(42))


class ScriptedRandomSource:
    """
    RandomSource that replays a fixed list of draws.

    Records every (low, high) range it was asked for so tests can check
    exactly how an algorithm consumes randomness.
    """

    def __init__(self, draws):
        self._draws = list(draws)
        self.calls = []

    def next_int(self, origin_or_bound, bound=None):
        if bound is None:
            low, high = 0, origin_or_bound
        else:
            low, high = origin_or_bound, bound
        self.calls.append((low, high))
        value = self._draws.pop(0)
        assert low <= value < high, f"scripted draw {value} outside [{low}, {high})"
        return value


@pytest.fixture
def scripted():
    """Factory for ScriptedRandomSource."""
    return ScriptedRandomSource
