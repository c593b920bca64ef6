"""
Sequence generators modelled on R's `:`, seq(), seq_len(), seq_along(),
rep() and c().

All functions return new lists and validate eagerly.
"""

from __future__ import annotations

import math
from typing import Collection, Iterable, TypeVar

from pyprobability.core.exceptions import ValidationError
from pyprobability.core.validation import (
    check_integer,
    check_non_negative,
    check_not_none,
)

T = TypeVar('T')


def seq_range(from_: int, to: int) -> list[int]:
    """
    Inclusive integer range, counting down when from_ > to. R's from:to.

    >>> seq_range(3, 1)
    [3, 2, 1]
    """
    from_ = check_integer(from_, "from_")
    to = check_integer(to, "to")
    if from_ <= to:
        return list(range(from_, to + 1))
    return list(range(from_, to - 1, -1))


def seq_by(from_: float, to: float, by: float) -> list[float]:
    """
    Arithmetic progression from from_ towards to. R's seq(from, to, by).

    to is included only when a step lands on it exactly. A step pointing
    away from to yields an empty list.

    Raises:
        ValidationError: If by is zero or any argument is not finite
    """
    if by == 0:
        raise ValidationError("step must be non-zero")
    if not all(math.isfinite(x) for x in (from_, to, by)):
        raise ValidationError(
            f"from_, to and by must be finite, got: {from_}, {to}, {by}"
        )
    if from_ == to:
        return [float(from_)]
    if (to > from_) != (by > 0):
        return []

    values = []
    i = 0
    while True:
        value = from_ + i * by
        if (by > 0 and value > to) or (by < 0 and value < to):
            break
        values.append(float(value))
        i += 1
    return values


def seq_length(from_: float, to: float, length_out: int) -> list[float]:
    """
    length_out evenly spaced values from from_ to to, both ends included.
    R's seq(from, to, length.out).

    Raises:
        ValidationError: If length_out is negative
    """
    length_out = check_non_negative(length_out, "length")
    if length_out == 0:
        return []
    if length_out == 1:
        return [float(from_)]
    step = (to - from_) / (length_out - 1)
    return [float(from_ + i * step) for i in range(length_out)]


def seq_len(n: int) -> list[int]:
    """
    The integers 1..n; empty for n == 0. R's seq_len(n).

    Raises:
        ValidationError: If n is negative
    """
    n = check_non_negative(n, "n")
    return list(range(1, n + 1))


def seq_along(xs: Collection) -> list[int]:
    """
    1-based positions of xs. R's seq_along(xs).

    Raises:
        InvalidReferenceError: If xs is None
    """
    check_not_none(xs, "collection")
    return seq_len(len(xs))


def rep(value: T, times: int) -> list[T]:
    """
    value repeated times times. R's rep(x, times) for a scalar x.

    Raises:
        ValidationError: If times is negative
    """
    times = check_non_negative(times, "times")
    return [value] * times


def rep_each(xs: Iterable[T], each: int) -> list[T]:
    """
    Each element of xs repeated each times in place. R's rep(xs, each=).

    >>> rep_each([1, 2], 2)
    [1, 1, 2, 2]

    Raises:
        InvalidReferenceError: If xs is None
        ValidationError: If each is negative
    """
    check_not_none(xs, "collection")
    each = check_non_negative(each, "each")
    return [x for x in xs for _ in range(each)]


def rep_times(xs: Iterable[T], times: int) -> list[T]:
    """
    The whole of xs repeated times times. R's rep(xs, times=).

    >>> rep_times([1, 2], 2)
    [1, 2, 1, 2]

    Raises:
        InvalidReferenceError: If xs is None
        ValidationError: If times is negative
    """
    check_not_none(xs, "collection")
    times = check_non_negative(times, "times")
    return list(xs) * times


def concat(*collections: Iterable[T] | None) -> list[T]:
    """
    Elements of every collection in order, skipping None. R's c(...).
    """
    result: list[T] = []
    for xs in collections:
        if xs is not None:
            result.extend(xs)
    return result
