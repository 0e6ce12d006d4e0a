"""
Exception hierarchy for PyDistributions.

All exceptions inherit from PyDistributionsError to allow catching any
library-specific error. Every class is tagged with an ErrorKind so callers
can branch on the category of failure without matching class names.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from enum import Enum


class ErrorKind(Enum):
    """Category of a PyDistributions failure."""
    INVALID_ARGUMENT = "invalid_argument"
    DOMAIN_VIOLATION = "domain_violation"
    CONVERSION_FAILURE = "conversion_failure"
    NON_CONVERGENCE = "non_convergence"
    ARITHMETIC_IMPOSSIBILITY = "arithmetic_impossibility"


class PyDistributionsError(Exception):
    """Base exception for all PyDistributions errors."""
    kind: ErrorKind | None = None


class ValidationError(PyDistributionsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    kind = ErrorKind.INVALID_ARGUMENT


class DimensionError(ValidationError):
    """
    Array dimensions or lengths are incorrect.

    Raised when a sample is not 1-D, or has fewer observations than the
    computation requires.
    """
    pass


class OutOfRangeError(ValidationError):
    """
    Scalar argument outside its admissible interval.

    Attributes:
        value: The offending value
        lower: Lower end of the admissible interval
        upper: Upper end of the admissible interval
    """

    def __init__(
        self,
        message: str,
        value: float | None = None,
        lower: float | None = None,
        upper: float | None = None,
    ):
        super().__init__(message)
        self.value = value
        self.lower = lower
        self.upper = upper


class DomainError(ValidationError):
    """
    Distribution parameter outside its valid range.

    Raised at distribution construction, never at evaluation time.

    Attributes:
        parameter: Name of the offending parameter
        value: The value that was supplied
    """
    kind = ErrorKind.DOMAIN_VIOLATION

    def __init__(
        self,
        message: str,
        parameter: str | None = None,
        value: float | None = None,
    ):
        super().__init__(message)
        self.parameter = parameter
        self.value = value


class NumericalError(PyDistributionsError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class RationalConversionError(NumericalError):
    """
    A float could not be approximated by a bounded-denominator rational.

    Fatal to the exact KS algorithm; callers should fall back to the
    Monte Carlo or asymptotic p-value.

    Attributes:
        value: The float being converted
        numerator: Last convergent numerator, if the bound was exceeded
        denominator: Last convergent denominator, if the bound was exceeded
        iterations: Iteration count, if the iteration budget ran out
    """
    kind = ErrorKind.CONVERSION_FAILURE

    def __init__(
        self,
        message: str,
        value: float,
        numerator: int | None = None,
        denominator: int | None = None,
        iterations: int | None = None,
    ):
        super().__init__(message)
        self.value = value
        self.numerator = numerator
        self.denominator = denominator
        self.iterations = iterations


class NumberTooLargeError(NumericalError):
    """
    An intermediate quantity reached a bound it must stay below.

    Raised by the KS matrix construction when h = ceil(n*d) - n*d >= 1,
    which means d sits too close to a lattice boundary.

    Attributes:
        value: The offending value
        bound: The exclusive upper bound
    """
    kind = ErrorKind.ARITHMETIC_IMPOSSIBILITY

    def __init__(self, message: str, value: float, bound: float):
        super().__init__(message)
        self.value = value
        self.bound = bound


class ConvergenceError(PyDistributionsError):
    """
    Iterative algorithm failed to converge.

    Raised when a series or root finder (KS asymptotic sum, inverse CDF
    refinement) fails to meet its criterion within the iteration budget.

    Attributes:
        iterations: Number of iterations completed
        final_change: Final term or bracket change
        reason: Why convergence failed (e.g., 'max_iterations')
        threshold: The convergence threshold that was not met
    """
    kind = ErrorKind.NON_CONVERGENCE

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.reason = reason
        self.threshold = threshold
