"""
Core protocols for PyDistributions.

These define structural interfaces that implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so any
conforming generator or distribution can be substituted, including ones
that do not inherit from the classes shipped here.

Design Principles:
    - Minimal contracts: prescribe only what the numerical engines consume
    - Capability interfaces: RandomSource is injected, never constructed
      privately by a consumer
"""

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from pydistributions.core.result import Result

# Type variables for generic payloads
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class RandomSource(Protocol):
    """
    Seeded uniform/gaussian generator.

    A single instance is a mutable stateful object. It is owned by one
    thread; share it across threads only under external synchronization.
    """

    def next_double(self) -> float:
        """Uniform draw from [0, 1)."""
        ...

    def next_gaussian(self) -> float:
        """Standard normal draw."""
        ...

    def set_seed(self, seed: int) -> None:
        """Reset the generator state from an integer seed."""
        ...


@runtime_checkable
class DistributionContract(Protocol):
    """
    What every univariate distribution exposes.

    The one-sample KS statistic consumes cumulative_probability; the
    inverse CDF solver consumes cumulative_probability and the support
    description.
    """

    def density(self, x: float) -> float:
        ...

    def cumulative_probability(self, x: float) -> float:
        """P(X <= x)."""
        ...

    def sample(self): ...

    @property
    def support_lower_bound(self) -> float:
        ...

    @property
    def support_upper_bound(self) -> float:
        ...

    @property
    def is_support_connected(self) -> bool:
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a design and produces a Result envelope around a
    parameter payload. Backends are stateless apart from the injected
    random source.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{domain}', e.g. 'cpu_hypothesis'.
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the statistical computation.

        Raises:
            ConvergenceError: If an iterative series fails to converge
            NumericalError: If the exact algorithm cannot be carried out
            ValidationError: If design is invalid for this backend
        """
        ...
