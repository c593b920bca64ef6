"""
PyProbability numeric vectors.

Immutable float vectors with 1-based indexing and R-style recycling
arithmetic.

Usage:
    from pyprobability.vector import Vector

    v = Vector.of(1, 2, 3, 4)
    w = v * Vector.of(1, -1)       # recycled: [1, -2, 3, -4]
    counts = Vector.of(1, 2, 1, 3).tabulate()
"""

from pyprobability.vector.vector import Vector
from pyprobability.vector._recycling import recycled_length

__all__ = [
    "Vector",
    "recycled_length",
]
