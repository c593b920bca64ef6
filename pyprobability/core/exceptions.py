"""
Exception hierarchy for PyProbability.

All exceptions inherit from PyProbabilityError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyProbabilityError(Exception):
    """Base exception for all PyProbability errors."""
    pass


class ValidationError(PyProbabilityError):
    """
    Input validation failed.

    Raised when a user-provided value fails a documented precondition:
    negative counts, non-positive bounds, empty inputs where a non-empty
    one is required.
    """
    pass


class InvalidReferenceError(ValidationError):
    """
    A required input is None.

    Raised for a missing collection, random source, or index list.
    Subclasses ValidationError so a single except clause covers every
    precondition failure.
    """
    pass


class DimensionError(ValidationError):
    """
    Lengths are incompatible for recycling.

    Raised when the shorter operand cannot be tiled an integral number
    of times to reach the target length.

    Attributes:
        lengths: Lengths of the operands involved
        target_length: Length the operands were recycled towards
    """

    def __init__(
        self,
        message: str,
        lengths: tuple[int, ...] | None = None,
        target_length: int | None = None,
    ):
        super().__init__(message)
        self.lengths = lengths
        self.target_length = target_length


class IndexOutOfRangeError(ValidationError):
    """
    A 1-based index falls outside [1, length].

    Attributes:
        index: The offending index
        length: Length of the indexed vector
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        length: int | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.length = length
