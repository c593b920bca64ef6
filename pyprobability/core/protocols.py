"""
Core protocols for PyProbability.

These define structural interfaces that implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so
that any generator exposing the right method can drive the samplers,
without inheriting from anything in this package.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - Type-safe: use generics to preserve type information through pipelines
"""

from typing import Protocol, TypeVar, runtime_checkable

# Type variables for generic payloads
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class RandomSource(Protocol):
    """
    Uniform integer generator consumed by Sampler.

    This is the only randomness the library depends on. Implementations
    decide the generator family; seeded implementations make every
    sampling call reproducible.

    next_int(bound) draws uniformly from [0, bound).
    next_int(origin, bound) draws uniformly from [origin, bound).

    Implementations MUST raise ValidationError when the range is empty.
    """

    def next_int(self, origin_or_bound: int, bound: int | None = None) -> int:
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for simulation backends.

    Each backend takes a validated design and produces a parameter
    payload wrapped in a Result. Backends are stateless: all configuration
    arrives through the design.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}', e.g. 'cpu_matching'.
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the simulation.

        Args:
            design: Validated, frozen design

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            ValidationError: If design is invalid for this backend
        """
        ...
