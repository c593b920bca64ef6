"""
PyProbability sequence generation.

R-style ranges, stepped sequences, repetition and concatenation.

Usage:
    from pyprobability.sequence import seq_by, rep_each

    seq_by(0, 1, 0.25)      # [0.0, 0.25, 0.5, 0.75, 1.0]
    rep_each("ab", 2)       # ['a', 'a', 'b', 'b']
"""

from pyprobability.sequence._generators import (
    seq_range,
    seq_by,
    seq_length,
    seq_len,
    seq_along,
    rep,
    rep_each,
    rep_times,
    concat,
)

__all__ = [
    "seq_range",
    "seq_by",
    "seq_length",
    "seq_len",
    "seq_along",
    "rep",
    "rep_each",
    "rep_times",
    "concat",
]
