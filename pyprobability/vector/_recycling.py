"""
R-style recycling rules.

Elementwise operations on operands of unequal length repeat (tile) the
shorter operand until it matches the longer one. Unlike R, which only
warns, a target length that is not an exact multiple of every operand
length is an error here.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyprobability.core.exceptions import DimensionError


def recycled_length(*lengths: int) -> int:
    """
    Length of the result of recycling operands of the given lengths.

    Args:
        *lengths: Operand lengths, all positive

    Returns:
        max(lengths)

    Raises:
        DimensionError: If max(lengths) is not a multiple of every length
    """
    target = max(lengths)
    if any(target % length != 0 for length in lengths):
        raise DimensionError(
            f"Lengths are not compatible for recycling: {list(lengths)} "
            f"(longest length {target} must be a multiple of each)",
            lengths=tuple(lengths),
            target_length=target,
        )
    return target


def recycle_array(
    values: NDArray[np.float64],
    target_length: int,
) -> NDArray[np.float64]:
    """
    Tile values cyclically to exactly target_length elements.

    Caller guarantees values is non-empty.

    Raises:
        DimensionError: If target_length is not a multiple of len(values)
    """
    n = values.shape[0]
    if target_length % n != 0:
        raise DimensionError(
            f"target_length must be a multiple of vector length {n}, "
            f"got: {target_length}",
            lengths=(n,),
            target_length=target_length,
        )
    return np.tile(values, target_length // n)


def combine(
    left: NDArray[np.float64],
    right: NDArray[np.float64],
    op: Any,
) -> NDArray[np.float64]:
    """
    Apply a binary ufunc elementwise after recycling both operands.

    result[i] = op(left[i % len(left)], right[i % len(right)])

    IEEE-754 special values (division by zero, inf - inf) propagate
    without warnings.
    """
    target = recycled_length(left.shape[0], right.shape[0])
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        return op(recycle_array(left, target), recycle_array(right, target))
