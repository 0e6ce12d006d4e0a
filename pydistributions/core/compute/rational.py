"""
Exact rational numbers with controlled conversion from and to float.

ExactRational is fractions.Fraction: arbitrary-precision numerator and
denominator, always in lowest terms with a positive denominator, and exact
+, -, *, /, integer power and comparison. This module adds the two
conversions the exact KS algorithm needs:

    rational_from_float: continued-fraction approximation of a float with
        a bounded denominator and an absolute tolerance
    rational_to_float: rounding numerator and denominator to a fixed number
        of decimal digits before dividing, so huge integers never overflow
        to inf/nan on the way back to float
"""

from __future__ import annotations

import math
from decimal import Decimal, ROUND_HALF_UP, MAX_EMAX, MIN_EMIN, localcontext
from fractions import Fraction

from pydistributions.core.compute.tolerances import (
    DECIMAL_DIGITS,
    RATIONAL_CONVERSION_TOLERANCES,
    RATIONAL_MAX_DENOMINATOR,
    RATIONAL_MAX_ITERATIONS,
)
from pydistributions.core.exceptions import RationalConversionError

ExactRational = Fraction

ZERO = Fraction(0)
ONE = Fraction(1)
ONE_HALF = Fraction(1, 2)


def rational_from_float(
    value: float,
    epsilon: float,
    max_denominator: int = RATIONAL_MAX_DENOMINATOR,
    max_iterations: int = RATIONAL_MAX_ITERATIONS,
) -> Fraction:
    """
    Approximate a float by a fraction within an absolute tolerance.

    Walks the continued fraction expansion of `value` and returns the first
    convergent p/q with |p/q - value| <= epsilon.

    Args:
        value: Finite float to convert
        epsilon: Maximum absolute error of the result
        max_denominator: Convergent numerators and denominators must not
            exceed this bound
        max_iterations: Continued fraction term budget

    Returns:
        Fraction within epsilon of value

    Raises:
        RationalConversionError: If the bound or the iteration budget is
            exhausted before a convergent within epsilon is found
    """
    if not math.isfinite(value):
        raise RationalConversionError(
            f"cannot convert non-finite value {value} to a fraction", value=value,
        )

    r0 = value
    a0 = math.floor(r0)
    if abs(a0) > max_denominator:
        raise RationalConversionError(
            f"overflow converting {value}: integer part {a0} exceeds {max_denominator}",
            value=value, numerator=a0, denominator=1,
        )

    # (almost) integer arguments need no expansion
    if abs(a0 - value) < epsilon:
        return Fraction(a0)

    p0, q0 = 1, 0
    p1, q1 = a0, 1
    p2, q2 = p1, q1

    n = 0
    while True:
        n += 1
        if r0 == a0:
            # expansion terminated: the previous convergent is the value
            p2, q2 = p1, q1
            break
        r1 = 1.0 / (r0 - a0)
        if not math.isfinite(r1):
            raise RationalConversionError(
                f"overflow converting {value}: continued fraction term is infinite",
                value=value, numerator=p1, denominator=q1, iterations=n,
            )
        a1 = math.floor(r1)
        p2 = a1 * p1 + p0
        q2 = a1 * q1 + q0
        if abs(p2) > max_denominator or q2 > max_denominator:
            raise RationalConversionError(
                f"overflow converting {value}: convergent {p2}/{q2} "
                f"exceeds bound {max_denominator}",
                value=value, numerator=p2, denominator=q2,
            )

        convergent = p2 / q2
        if n < max_iterations and abs(convergent - value) > epsilon:
            p0, p1 = p1, p2
            q0, q1 = q1, q2
            a0, r0 = a1, r1
        else:
            break

    if n >= max_iterations:
        raise RationalConversionError(
            f"unable to convert {value} to a fraction after {max_iterations} iterations",
            value=value, iterations=max_iterations,
        )

    if abs(p2 / q2 - value) > epsilon:
        raise RationalConversionError(
            f"no fraction with denominator <= {max_denominator} lies within "
            f"{epsilon} of {value}",
            value=value, numerator=p2, denominator=q2, iterations=n,
        )

    return Fraction(p2, q2)


def rational_from_float_with_fallback(
    value: float,
    tolerances: tuple[float, ...] = RATIONAL_CONVERSION_TOLERANCES,
    max_denominator: int = RATIONAL_MAX_DENOMINATOR,
    max_iterations: int = RATIONAL_MAX_ITERATIONS,
) -> Fraction:
    """
    Convert with a chain of increasingly loose tolerances.

    Each tolerance is tried in order; the error of the last attempt is
    re-raised if none succeeds.
    """
    if not tolerances:
        raise ValueError("tolerances must not be empty")

    last_error: RationalConversionError | None = None
    for epsilon in tolerances:
        try:
            return rational_from_float(value, epsilon, max_denominator, max_iterations)
        except RationalConversionError as e:
            last_error = e
    raise last_error


def rational_to_float(value: Fraction, digits: int = DECIMAL_DIGITS) -> float:
    """
    Convert a fraction to float through fixed-precision decimal division.

    Numerator and denominator are each rounded to `digits` significant
    digits (half-up) before dividing. The decimal exponent range is
    unbounded, so results that underflow or overflow a double come back as
    0.0 or +/-inf rather than nan.
    """
    with localcontext() as ctx:
        ctx.prec = digits
        ctx.rounding = ROUND_HALF_UP
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        numerator = ctx.plus(Decimal(value.numerator))
        denominator = ctx.plus(Decimal(value.denominator))
        return float(ctx.divide(numerator, denominator))
