"""
Tests for exact rational conversions.

Validates:
    - Continued fraction conversion within tolerance
    - Failure when no bounded-denominator convergent meets the tolerance
    - Tolerance fallback chain
    - Decimal rounding on the way back to float, including huge integers
"""

import math
from fractions import Fraction

import numpy as np
import pytest

from pydistributions.core.compute.rational import (
    rational_from_float,
    rational_from_float_with_fallback,
    rational_to_float,
)
from pydistributions.core.exceptions import ErrorKind, RationalConversionError


class TestRationalFromFloat:

    def test_simple_fraction(self):
        assert rational_from_float(0.5, 1e-15) == Fraction(1, 2)

    def test_one_third(self):
        assert rational_from_float(1.0 / 3.0, 1e-12) == Fraction(1, 3)

    def test_near_integer(self):
        assert rational_from_float(2.0 + 1e-25, 1e-20) == Fraction(2)

    def test_negative(self):
        assert rational_from_float(-0.75, 1e-15) == Fraction(-3, 4)

    def test_lowest_terms(self):
        r = rational_from_float(0.4, 1e-15)
        assert (r.numerator, r.denominator) == (2, 5)

    def test_pi_convergent(self):
        """355/113 is the first convergent of pi within 1e-6."""
        assert rational_from_float(math.pi, 1e-6) == Fraction(355, 113)

    def test_round_trip_random(self, rng):
        """1000 random doubles in (0, 1) come back within the tolerance."""
        for value in rng.random(1000):
            r = rational_from_float(float(value), 1e-10)
            assert abs(float(r) - value) <= 1e-10
            assert r.denominator <= 2**31 - 1

    def test_bound_exceeded(self):
        """No fraction with denominator <= 1000 lies within 1e-12 of pi."""
        with pytest.raises(RationalConversionError) as exc_info:
            rational_from_float(math.pi, 1e-12, max_denominator=1000)
        assert exc_info.value.kind is ErrorKind.CONVERSION_FAILURE
        assert exc_info.value.value == math.pi
        assert exc_info.value.denominator > 1000

    def test_iteration_budget(self):
        with pytest.raises(RationalConversionError, match="iterations"):
            rational_from_float(math.pi, 1e-15, max_iterations=2)

    def test_non_finite(self):
        with pytest.raises(RationalConversionError):
            rational_from_float(math.inf, 1e-10)


class TestFallbackChain:

    def test_first_tolerance_succeeds(self):
        assert rational_from_float_with_fallback(0.25) == Fraction(1, 4)

    def test_falls_back_to_looser_tolerance(self):
        """pi with denominator <= 1000 fails at 1e-20 and 1e-10 but 355/113 meets 1e-5."""
        r = rational_from_float_with_fallback(math.pi, max_denominator=1000)
        assert r == Fraction(355, 113)

    def test_all_tolerances_fail(self):
        with pytest.raises(RationalConversionError):
            rational_from_float_with_fallback(
                math.pi, tolerances=(1e-12, 1e-10), max_denominator=1000,
            )

    def test_empty_chain(self):
        with pytest.raises(ValueError):
            rational_from_float_with_fallback(0.5, tolerances=())


class TestRationalToFloat:

    def test_simple(self):
        assert rational_to_float(Fraction(1, 4)) == 0.25

    def test_matches_true_value(self):
        assert rational_to_float(Fraction(220, 252)) == pytest.approx(220 / 252, rel=1e-15)

    def test_huge_integers(self):
        """Numerator and denominator beyond float range still divide cleanly."""
        big = 10**400
        assert rational_to_float(Fraction(3 * big + 1, 4 * big)) == pytest.approx(0.75, rel=1e-15)

    def test_tiny_result_underflows_to_zero(self):
        assert rational_to_float(Fraction(1, 10**400)) == 0.0

    def test_digits_control_rounding(self):
        value = Fraction(2, 3)
        np.testing.assert_allclose(rational_to_float(value, digits=5), 0.66667, rtol=0, atol=1e-12)
