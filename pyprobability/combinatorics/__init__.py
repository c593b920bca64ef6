"""
PyProbability combinatorics.

R-compatible factorials and binomial coefficients, exact and logarithmic.

Usage:
    from pyprobability.combinatorics import choose, lchoose

    choose(52, 5)      # 2598960 poker hands
    lchoose(1000, 500) # 689.467...
"""

from pyprobability.combinatorics._functions import (
    factorial,
    choose,
    lfactorial,
    lchoose,
)

__all__ = [
    "factorial",
    "choose",
    "lfactorial",
    "lchoose",
]
