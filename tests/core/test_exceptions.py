"""
Tests for the PyDistributions exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyDistributionsError)
    - ErrorKind tag on every class
    - Diagnostic attributes on OutOfRangeError, DomainError,
      RationalConversionError, NumberTooLargeError, ConvergenceError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pydistributions.core.exceptions import (
    ConvergenceError,
    DimensionError,
    DomainError,
    ErrorKind,
    NumberTooLargeError,
    NumericalError,
    OutOfRangeError,
    PyDistributionsError,
    RationalConversionError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyDistributionsError."""

    def test_validation_error_is_base_error(self):
        with pytest.raises(PyDistributionsError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("too few samples")

    def test_out_of_range_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise OutOfRangeError("p outside [0, 1]", value=1.5)

    def test_domain_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DomainError("scale must be positive", parameter="scale", value=-1)

    def test_rational_conversion_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise RationalConversionError("overflow", value=0.3)

    def test_number_too_large_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise NumberTooLargeError("h too large", value=1.0, bound=1.0)

    def test_convergence_error_is_base_error(self):
        with pytest.raises(PyDistributionsError):
            raise ConvergenceError("did not converge", iterations=100)

    def test_convergence_error_is_not_numerical_error(self):
        """ConvergenceError inherits from PyDistributionsError, not NumericalError."""
        err = ConvergenceError("did not converge", iterations=100)
        assert not isinstance(err, NumericalError)


# ═══════════════════════════════════════════════════════════════════════
# ErrorKind tags
# ═══════════════════════════════════════════════════════════════════════


class TestErrorKind:
    """Callers can branch on kind instead of class."""

    @pytest.mark.parametrize("err, kind", [
        (ValidationError("x"), ErrorKind.INVALID_ARGUMENT),
        (DimensionError("x"), ErrorKind.INVALID_ARGUMENT),
        (OutOfRangeError("x"), ErrorKind.INVALID_ARGUMENT),
        (DomainError("x"), ErrorKind.DOMAIN_VIOLATION),
        (RationalConversionError("x", value=0.1), ErrorKind.CONVERSION_FAILURE),
        (NumberTooLargeError("x", value=1.0, bound=1.0), ErrorKind.ARITHMETIC_IMPOSSIBILITY),
        (ConvergenceError("x", iterations=1), ErrorKind.NON_CONVERGENCE),
    ])
    def test_kind(self, err, kind):
        assert err.kind is kind

    def test_base_has_no_kind(self):
        assert PyDistributionsError("x").kind is None


# ═══════════════════════════════════════════════════════════════════════
# Payloads
# ═══════════════════════════════════════════════════════════════════════


class TestPayloads:
    """Structured attributes name the offending operands."""

    def test_out_of_range_attributes(self):
        err = OutOfRangeError("alpha outside (0, 0.5]", value=0.7, lower=0.0, upper=0.5)
        assert "alpha" in str(err)
        assert err.value == 0.7
        assert err.lower == 0.0
        assert err.upper == 0.5

    def test_out_of_range_defaults(self):
        err = OutOfRangeError("bad")
        assert err.value is None
        assert err.lower is None
        assert err.upper is None

    def test_domain_error_attributes(self):
        err = DomainError("sd must be positive", parameter="sd", value=0.0)
        assert err.parameter == "sd"
        assert err.value == 0.0

    def test_rational_conversion_attributes(self):
        err = RationalConversionError(
            "overflow", value=3.14159, numerator=355, denominator=113, iterations=3,
        )
        assert err.value == 3.14159
        assert err.numerator == 355
        assert err.denominator == 113
        assert err.iterations == 3

    def test_rational_conversion_defaults(self):
        err = RationalConversionError("failed", value=0.5)
        assert err.numerator is None
        assert err.denominator is None
        assert err.iterations is None

    def test_number_too_large_attributes(self):
        err = NumberTooLargeError("h >= 1", value=1.0, bound=1.0)
        assert err.value == 1.0
        assert err.bound == 1.0


class TestConvergenceError:
    """ConvergenceError carries iteration diagnostics."""

    def test_all_attributes(self):
        err = ConvergenceError(
            "series did not converge",
            iterations=100000,
            final_change=1e-4,
            reason="max_iterations",
            threshold=1e-20,
        )
        assert str(err) == "series did not converge"
        assert err.iterations == 100000
        assert err.final_change == 1e-4
        assert err.reason == "max_iterations"
        assert err.threshold == 1e-20

    def test_defaults_are_none(self):
        err = ConvergenceError("failed", iterations=10)
        assert err.final_change is None
        assert err.reason is None
        assert err.threshold is None
