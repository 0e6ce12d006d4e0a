"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object rejection, copying
    - check_finite: NaN/Inf detection
    - check_1d / check_min_samples: shape checks
    - check_sample: combined sample validation
    - check_probability / check_significance_level: scalar ranges
    - check_positive: distribution parameters
"""

import math

import numpy as np
import pytest

from pydistributions.core.exceptions import (
    DimensionError,
    DomainError,
    OutOfRangeError,
    ValidationError,
)
from pydistributions.core.validation import (
    check_1d,
    check_array,
    check_finite,
    check_min_samples,
    check_positive,
    check_probability,
    check_sample,
    check_significance_level,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to a float64 copy and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "x")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_input_not_aliased(self):
        arr = np.array([3.0, 1.0, 2.0])
        result = check_array(arr, "x")
        result.sort()
        np.testing.assert_array_equal(arr, [3.0, 1.0, 2.0])

    def test_none_rejected(self):
        with pytest.raises(ValidationError, match="null sample"):
            check_array(None, "x")

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="x"):
            check_array(["a", "b"], "x")

    def test_mixed_types_rejected(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([1, "a", None], "x")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array([True, False], "x")


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, 2.0]), "x")

    def test_nan_detected(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            check_finite(np.array([1.0, np.nan]), "x")

    def test_inf_detected(self):
        with pytest.raises(ValidationError, match="1 Inf"):
            check_finite(np.array([np.inf, 2.0]), "x")


class TestShapeChecks:

    def test_1d_passes(self):
        check_1d(np.zeros(3), "x")

    def test_2d_rejected(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((2, 2)), "x")

    def test_min_samples(self):
        with pytest.raises(DimensionError, match="at least 2"):
            check_min_samples(np.zeros(1), 2, "x")


class TestCheckSample:
    """KS samples need length >= 2 and finite values."""

    def test_valid(self):
        result = check_sample([0.5, 0.1, 0.3], "x")
        np.testing.assert_array_equal(result, [0.5, 0.1, 0.3])

    def test_empty(self):
        with pytest.raises(DimensionError):
            check_sample([], "x")

    def test_single_value(self):
        with pytest.raises(DimensionError, match="at least 2"):
            check_sample([1.0], "y")

    def test_nan(self):
        with pytest.raises(ValidationError, match="non-finite"):
            check_sample([1.0, math.nan, 2.0], "x")


# ═══════════════════════════════════════════════════════════════════════
# Scalar checks
# ═══════════════════════════════════════════════════════════════════════


class TestCheckProbability:

    @pytest.mark.parametrize("p", [0.0, 0.3, 1.0])
    def test_valid(self, p):
        assert check_probability(p) == p

    @pytest.mark.parametrize("p", [-0.1, 1.1, math.nan])
    def test_invalid(self, p):
        with pytest.raises(OutOfRangeError) as exc_info:
            check_probability(p)
        assert exc_info.value.lower == 0.0
        assert exc_info.value.upper == 1.0


class TestCheckSignificanceLevel:

    @pytest.mark.parametrize("alpha", [0.01, 0.05, 0.5])
    def test_valid(self, alpha):
        assert check_significance_level(alpha) == alpha

    @pytest.mark.parametrize("alpha", [0.0, -0.05, 0.51, 1.0])
    def test_invalid(self, alpha):
        with pytest.raises(OutOfRangeError, match="significance level"):
            check_significance_level(alpha)


class TestCheckPositive:

    def test_valid(self):
        assert check_positive(2, "scale") == 2.0

    @pytest.mark.parametrize("value", [0.0, -1.0, math.nan, math.inf])
    def test_invalid(self, value):
        with pytest.raises(DomainError) as exc_info:
            check_positive(value, "scale")
        assert exc_info.value.parameter == "scale"
