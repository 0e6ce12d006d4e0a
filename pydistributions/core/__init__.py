"""
Core infrastructure for PyDistributions.

This module provides shared abstractions and utilities used by the
distributions and hypothesis subpackages.

Key components:
    protocols: RandomSource, DistributionContract, Backend protocols
    random: NumpyRandomSource, the default RandomSource
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy tagged with ErrorKind
    validation: Input validators
    compute: Timing, exact rationals and rational matrices
"""

from pydistributions.core.protocols import RandomSource, DistributionContract, Backend
from pydistributions.core.random import NumpyRandomSource
from pydistributions.core.result import Result
from pydistributions.core.exceptions import (
    ErrorKind,
    PyDistributionsError,
    ValidationError,
    DimensionError,
    OutOfRangeError,
    DomainError,
    NumericalError,
    RationalConversionError,
    NumberTooLargeError,
    ConvergenceError,
)

__all__ = [
    # Protocols
    "RandomSource",
    "DistributionContract",
    "Backend",
    "NumpyRandomSource",
    # Result
    "Result",
    # Exceptions
    "ErrorKind",
    "PyDistributionsError",
    "ValidationError",
    "DimensionError",
    "OutOfRangeError",
    "DomainError",
    "NumericalError",
    "RationalConversionError",
    "NumberTooLargeError",
    "ConvergenceError",
]
