"""
Input validation utilities for PyDistributions.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pydistributions.core.exceptions import (
    DimensionError,
    DomainError,
    OutOfRangeError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).
    The result never aliases the input, so callers may sort it in place.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input is None or cannot be converted to a numeric array
    """
    if array is None:
        raise ValidationError(f"{name}: null sample is not allowed")

    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if result.dtype == bool or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return np.array(result, dtype=np.float64, copy=True)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Args:
        array: Array to check
        min_samples: Minimum required samples (first dimension)
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise DimensionError(
            f"{name}: requires at least {min_samples} samples, got {n}"
        )


def check_sample(array: ArrayLike, name: str, min_samples: int = 2) -> NDArray[np.floating[Any]]:
    """
    Validate a sample for a goodness-of-fit statistic.

    Combines check_array, check_1d, check_finite and check_min_samples.

    Returns:
        A fresh float64 copy of the sample
    """
    result = check_array(array, name)
    check_1d(result, name)
    check_min_samples(result, min_samples, name)
    check_finite(result, name)
    return result


def check_probability(p: float, name: str = "p") -> float:
    """
    Verify a probability lies in [0, 1].

    Raises:
        OutOfRangeError: If p is NaN or outside [0, 1]
    """
    if not (0.0 <= p <= 1.0):
        raise OutOfRangeError(
            f"{name}: must be in [0, 1], got {p}", value=p, lower=0.0, upper=1.0
        )
    return float(p)


def check_significance_level(alpha: float) -> float:
    """
    Verify a significance level lies in (0, 0.5].

    Raises:
        OutOfRangeError: If alpha is outside (0, 0.5]
    """
    if not (0.0 < alpha <= 0.5):
        raise OutOfRangeError(
            f"alpha: significance level must be in (0, 0.5], got {alpha}",
            value=alpha, lower=0.0, upper=0.5,
        )
    return float(alpha)


def check_positive(value: float, name: str) -> float:
    """
    Verify a distribution parameter is strictly positive and finite.

    Raises:
        DomainError: If value <= 0, NaN or infinite
    """
    if not (value > 0.0) or math.isinf(value):
        raise DomainError(
            f"{name}: must be strictly positive, got {value}",
            parameter=name, value=value,
        )
    return float(value)
