"""
Shared compute infrastructure for PyDistributions.

IMPORTANT: This is NOT where test-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    tolerances: Numerical defaults (solver accuracy, rational conversion chain)
    timing: Execution timing utilities
    rational: Exact rational conversions
    linalg: Exact rational matrices
"""

from pydistributions.core.compute.timing import Timer
from pydistributions.core.compute.rational import (
    ExactRational,
    rational_from_float,
    rational_from_float_with_fallback,
    rational_to_float,
)
from pydistributions.core.compute.linalg import RationalMatrix

__all__ = [
    # Timing
    "Timer",
    # Rationals
    "ExactRational",
    "rational_from_float",
    "rational_from_float_with_fallback",
    "rational_to_float",
    "RationalMatrix",
]
