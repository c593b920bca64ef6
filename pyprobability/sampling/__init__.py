"""
PyProbability random sampling.

Provides R's sample() family and random permutations on top of any
RandomSource.

Usage:
    from pyprobability.sampling import Sampler

    sampler = Sampler(np.random.default_rng(42))
    sampler.sample_with_replacement(6, 10)           # ten die rolls
    sampler.sample_without_replacement(LETTERS, 3)   # three distinct letters
    sampler.permutation(52)                          # shuffled deck
"""

from pyprobability.sampling.sampler import Sampler, LETTERS
from pyprobability.sampling._shuffle import shuffle

__all__ = [
    "Sampler",
    "LETTERS",
    "shuffle",
]
