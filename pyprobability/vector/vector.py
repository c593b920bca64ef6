"""
Immutable numeric vector with 1-based indexing and R-style recycling.

Vector mirrors the semantics of an R numeric vector: positions start at 1,
elementwise arithmetic recycles the shorter operand, and tabulate() counts
positive integer values like R's tabulate(). Every operation returns a new
Vector; the backing array is read-only.

Usage:
    from pyprobability.vector import Vector

    v = Vector.of(1, 2, 3, 4)
    v.at(1)                       # 1.0
    v.slice(2, 3)                 # Vector([2.0, 3.0])
    v + Vector.of(10, 20)         # Vector([11.0, 22.0, 13.0, 24.0])
    Vector.of(1, 2, 1, 3).tabulate()   # Vector([2.0, 1.0, 1.0])
"""

from __future__ import annotations

from numbers import Real
from typing import Any, Iterable, Iterator

import numpy as np
from numpy.typing import NDArray

from pyprobability.core.exceptions import ValidationError
from pyprobability.core.validation import (
    check_array,
    check_index,
    check_integer,
    check_not_none,
    check_slice,
)
from pyprobability.vector._recycling import combine, recycle_array

# Largest bin index that survives the int64 cast in tabulate()
_MAX_BIN = float(np.iinfo(np.int64).max)


class Vector:
    """
    Ordered, immutable sequence of float64 values addressed from 1.

    Construction:
        Vector(iterable)      consumes any finite iterable of numbers
        Vector.of(*values)    from positional values

    Raises on construction:
        InvalidReferenceError: If values is None
        ValidationError: If any element is None or not a real number
    """

    __slots__ = ('_values',)

    def __init__(self, values: Iterable[Any]):
        self._values: NDArray[np.float64] = check_array(values, "values")

    @classmethod
    def of(cls, *values: Any) -> Vector:
        """Build a Vector from positional values."""
        return cls(values)

    @classmethod
    def _wrap(cls, array: NDArray[np.float64]) -> Vector:
        """Adopt an already-validated array without copying it again."""
        vector = cls.__new__(cls)
        array.flags.writeable = False
        vector._values = array
        return vector

    # === Access ===

    def length(self) -> int:
        """Number of elements."""
        return int(self._values.shape[0])

    def __len__(self) -> int:
        return self.length()

    def __iter__(self) -> Iterator[float]:
        return iter(self._values.tolist())

    def to_list(self) -> list[float]:
        """Values as a new Python list."""
        return self._values.tolist()

    def to_numpy(self) -> NDArray[np.float64]:
        """Values as a read-only numpy array (no copy)."""
        return self._values

    def at(self, index: int) -> float:
        """
        Element at a 1-based position.

        Raises:
            IndexOutOfRangeError: If index < 1 or index > length
        """
        index = check_index(index, self.length())
        return float(self._values[index - 1])

    def slice(self, from_: int, to: int) -> Vector:
        """
        Elements from_ through to, both 1-based and inclusive.

        Raises:
            IndexOutOfRangeError: If from_ < 1, to < 1, from_ > to,
                or to > length
        """
        from_, to = check_slice(from_, to, self.length())
        return Vector._wrap(self._values[from_ - 1:to].copy())

    def exclude_index(self, index: int) -> Vector:
        """
        Copy with the element at a 1-based position removed.

        Raises:
            IndexOutOfRangeError: If index < 1 or index > length
        """
        index = check_index(index, self.length())
        return Vector._wrap(np.delete(self._values, index - 1))

    def exclude_indices(self, indices: Iterable[int]) -> Vector:
        """
        Copy with the elements at several 1-based positions removed.

        Duplicate indices remove their position once. Every index is
        validated before anything is removed. An empty collection returns
        this Vector unchanged.

        Raises:
            InvalidReferenceError: If indices is None
            ValidationError: If any entry is None
            IndexOutOfRangeError: If any entry is out of range
        """
        check_not_none(indices, "indices")
        indices = list(indices)
        if not indices:
            return self

        n = self.length()
        positions = []
        for index in indices:
            if index is None:
                raise ValidationError("indices must not contain None values")
            positions.append(check_index(index, n) - 1)

        keep = np.ones(n, dtype=bool)
        keep[positions] = False
        return Vector._wrap(self._values[keep])

    # === Summaries ===

    def sum(self) -> float:
        """Arithmetic sum; 0.0 for an empty Vector."""
        return float(np.sum(self._values))

    def max(self) -> float:
        """
        Largest element.

        Raises:
            ValidationError: If the Vector is empty
        """
        self._ensure_not_empty("max")
        return float(np.max(self._values))

    def min(self) -> float:
        """
        Smallest element.

        Raises:
            ValidationError: If the Vector is empty
        """
        self._ensure_not_empty("min")
        return float(np.min(self._values))

    def tabulate(self) -> Vector:
        """
        Dense histogram of positive integer values, like R's tabulate().

        Values below 1 (including NaN) are ignored. Fractional values are
        truncated, so 2.9 counts towards bin 2. The result has length
        M = floor(largest value >= 1) and result.at(v) is the number of
        elements whose truncated value is v.

        Raises:
            ValidationError: If the Vector is empty, has no value >= 1,
                or contains +inf or a value beyond the int64 range
        """
        self._ensure_not_empty("tabulate")
        positive = self._values[self._values >= 1]
        if positive.size == 0:
            raise ValidationError(
                "tabulate requires at least one value >= 1, got none"
            )
        if np.isinf(positive).any():
            raise ValidationError("tabulate cannot bin infinite values")
        if positive.max() >= _MAX_BIN:
            raise ValidationError(
                f"tabulate cannot bin values >= {_MAX_BIN:.0f}, got: {positive.max()}"
            )

        bins = np.floor(positive).astype(np.int64)
        counts = np.bincount(bins)[1:]
        return Vector._wrap(counts.astype(np.float64))

    # === Recycling arithmetic ===

    def add(self, other: Vector) -> Vector:
        """Elementwise sum with recycling."""
        return self._combine(other, np.add)

    def subtract(self, other: Vector) -> Vector:
        """Elementwise difference with recycling."""
        return self._combine(other, np.subtract)

    def multiply(self, other: Vector) -> Vector:
        """Elementwise product with recycling."""
        return self._combine(other, np.multiply)

    def divide(self, other: Vector) -> Vector:
        """
        Elementwise quotient with recycling.

        Division by zero yields inf or nan, as in IEEE-754.
        """
        return self._combine(other, np.divide)

    def recycle(self, target_length: int) -> Vector:
        """
        Repeat values cyclically to exactly target_length elements.

        A target length of 0 always succeeds, even for an empty Vector.

        Raises:
            ValidationError: If target_length is negative, or the Vector
                is empty and target_length > 0
            DimensionError: If target_length is not a multiple of length
        """
        target_length = check_integer(target_length, "target_length")
        if target_length < 0:
            raise ValidationError(
                f"target_length must be non-negative, got: {target_length}"
            )
        if target_length == 0:
            return Vector._wrap(np.empty(0, dtype=np.float64))
        self._ensure_not_empty("recycle")
        return Vector._wrap(recycle_array(self._values, target_length))

    def _combine(self, other: Vector, op) -> Vector:
        check_not_none(other, "other")
        if not isinstance(other, Vector):
            raise ValidationError(
                f"other must be a Vector, got {type(other).__name__}"
            )
        self._ensure_not_empty("vectorized operation")
        other._ensure_not_empty("vectorized operation")
        return Vector._wrap(combine(self._values, other._values, op))

    # Operators accept a Vector or a real scalar, which behaves as a
    # length-1 Vector exactly as in R.

    @staticmethod
    def _coerce(value: Any) -> Vector | None:
        if isinstance(value, Vector):
            return value
        if isinstance(value, (Real, np.integer, np.floating)) and not isinstance(value, bool):
            return Vector.of(value)
        return None

    def __add__(self, other: Any) -> Vector:
        other = self._coerce(other)
        return NotImplemented if other is None else self.add(other)

    def __radd__(self, other: Any) -> Vector:
        other = self._coerce(other)
        return NotImplemented if other is None else other.add(self)

    def __sub__(self, other: Any) -> Vector:
        other = self._coerce(other)
        return NotImplemented if other is None else self.subtract(other)

    def __rsub__(self, other: Any) -> Vector:
        other = self._coerce(other)
        return NotImplemented if other is None else other.subtract(self)

    def __mul__(self, other: Any) -> Vector:
        other = self._coerce(other)
        return NotImplemented if other is None else self.multiply(other)

    def __rmul__(self, other: Any) -> Vector:
        other = self._coerce(other)
        return NotImplemented if other is None else other.multiply(self)

    def __truediv__(self, other: Any) -> Vector:
        other = self._coerce(other)
        return NotImplemented if other is None else self.divide(other)

    def __rtruediv__(self, other: Any) -> Vector:
        other = self._coerce(other)
        return NotImplemented if other is None else other.divide(self)

    # === Comparison and display ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return bool(np.array_equal(self._values, other._values))

    def __hash__(self) -> int:
        return hash(tuple(self._values.tolist()))

    def __repr__(self) -> str:
        return f"Vector({self._values.tolist()!r})"

    def _ensure_not_empty(self, operation: str) -> None:
        if self._values.shape[0] == 0:
            raise ValidationError(f"Vector is empty for operation: {operation}")
