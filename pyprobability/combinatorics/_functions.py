"""
Factorials and binomial coefficients matching R's factorial(), choose(),
lfactorial() and lchoose().

factorial() and choose() return exact Python ints, so there is no
overflow limit. The log forms go through the log-gamma function and stay
finite far beyond the range where the exact values are practical.
"""

from __future__ import annotations

import math

from scipy import special

from pyprobability.core.validation import check_integer, check_non_negative


def factorial(n: int) -> int:
    """
    n! as an exact integer. Matches R's factorial(n) for n >= 0.

    Raises:
        ValidationError: If n is negative or not an integer
    """
    n = check_non_negative(n, "n")
    return int(special.factorial(n, exact=True))


def choose(n: int, k: int) -> int:
    """
    Binomial coefficient C(n, k) as an exact integer. Matches R's choose().

    Returns 0 when k > n.

    Raises:
        ValidationError: If k is negative or either argument is not an integer
    """
    n = check_integer(n, "n")
    k = check_non_negative(k, "k")
    if k > n:
        return 0
    if k == 0 or k == n:
        return 1
    return int(special.comb(n, min(k, n - k), exact=True))


def lfactorial(n: int) -> float:
    """
    Natural log of n!. Matches R's lfactorial(n).

    Raises:
        ValidationError: If n is negative or not an integer
    """
    n = check_non_negative(n, "n")
    return float(special.gammaln(n + 1))


def lchoose(n: int, k: int) -> float:
    """
    Natural log of C(n, k). Matches R's lchoose() for 0 <= k.

    Returns -inf when k > n (log of zero) and 0.0 when k is 0 or n.

    Raises:
        ValidationError: If k is negative or either argument is not an integer
    """
    n = check_integer(n, "n")
    k = check_non_negative(k, "k")
    if k > n:
        return -math.inf
    if k == 0 or k == n:
        return 0.0
    return lfactorial(n) - lfactorial(k) - lfactorial(n - k)
