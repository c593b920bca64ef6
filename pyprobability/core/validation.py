"""
Input validation utilities for PyProbability.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on numeric iterables)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

from typing import Any, Iterable, TypeVar

import numpy as np
from numpy.typing import NDArray

from pyprobability.core.exceptions import (
    IndexOutOfRangeError,
    InvalidReferenceError,
    ValidationError,
)

T = TypeVar('T')


def check_not_none(value: T | None, name: str) -> T:
    """
    Verify a required reference is present.

    Args:
        value: Input to validate
        name: Parameter name for error messages

    Returns:
        The value, unchanged

    Raises:
        InvalidReferenceError: If value is None
    """
    if value is None:
        raise InvalidReferenceError(f"{name} cannot be None")
    return value


def check_array(values: Iterable[Any], name: str) -> NDArray[np.float64]:
    """
    Materialize an iterable of numbers into a read-only float64 array.

    Lazy iterables (generators, maps) are consumed completely. The
    returned array owns its data and has its writeable flag cleared.

    Args:
        values: Finite iterable of real numbers
        name: Parameter name for error messages

    Returns:
        1D numpy.ndarray of dtype float64, not writeable

    Raises:
        InvalidReferenceError: If values is None
        ValidationError: If any element is None, or the elements are
            not real numbers
    """
    check_not_none(values, name)

    if isinstance(values, (str, bytes, bytearray)):
        raise ValidationError(
            f"{name}: expected an iterable of numbers, got {type(values).__name__}"
        )

    if isinstance(values, np.ndarray) and values.dtype != object:
        items = values
    else:
        try:
            items = list(values)
        except TypeError as e:
            raise ValidationError(f"{name}: expected an iterable of numbers: {e}") from e
        if any(x is None for x in items):
            raise ValidationError(f"{name} must not contain None values")

    try:
        result = np.array(items)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.size == 0:
        result = np.empty(0, dtype=np.float64)

    if result.ndim != 1:
        raise ValidationError(
            f"{name}: expected a flat sequence of numbers, got shape {result.shape}"
        )

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Complex numbers are np.number but have no ordering
    if not (np.issubdtype(result.dtype, np.number) or result.dtype == np.bool_) \
            or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numbers"
        )

    result = result.astype(np.float64, copy=True)
    result.flags.writeable = False
    return result


def check_integer(value: Any, name: str) -> int:
    """
    Verify value is an integer and return it as a Python int.

    bool is rejected even though it subclasses int.

    Raises:
        ValidationError: If value is not an integer
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name} must be an integer, got {type(value).__name__}: {value!r}"
        )
    return int(value)


def check_positive(value: Any, name: str) -> int:
    """
    Verify value is an integer greater than zero.

    Raises:
        ValidationError: If value is not a positive integer
    """
    value = check_integer(value, name)
    if value <= 0:
        raise ValidationError(f"{name} must be positive, got: {value}")
    return value


def check_non_negative(value: Any, name: str) -> int:
    """
    Verify value is an integer greater than or equal to zero.

    Raises:
        ValidationError: If value is negative
    """
    value = check_integer(value, name)
    if value < 0:
        raise ValidationError(f"{name} must be non-negative, got: {value}")
    return value


def check_index(index: Any, length: int, name: str = "index") -> int:
    """
    Verify a 1-based index lies in [1, length].

    Args:
        index: 1-based position
        length: Length of the indexed sequence
        name: Parameter name for error messages

    Returns:
        The index as a Python int

    Raises:
        InvalidReferenceError: If index is None
        IndexOutOfRangeError: If index < 1 or index > length
    """
    check_not_none(index, name)
    index = check_integer(index, name)
    if index < 1 or index > length:
        raise IndexOutOfRangeError(
            f"{name} must be in [1, {length}], got: {index}",
            index=index,
            length=length,
        )
    return index


def check_slice(from_: Any, to: Any, length: int) -> tuple[int, int]:
    """
    Verify 1-based inclusive slice bounds.

    Raises:
        IndexOutOfRangeError: If from_ < 1, to < 1, from_ > to, or to > length
    """
    from_ = check_integer(from_, "from_")
    to = check_integer(to, "to")
    if from_ < 1 or to < 1 or from_ > to or to > length:
        raise IndexOutOfRangeError(
            f"slice bounds must be within [1, {length}] and from_ <= to, "
            f"got: from_={from_}, to={to}",
            index=from_ if from_ < 1 or from_ > to else to,
            length=length,
        )
    return from_, to
