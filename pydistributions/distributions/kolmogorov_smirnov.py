"""
Null distribution of the one-sample Kolmogorov-Smirnov statistic.

For a sample of size n from a continuous distribution, P(D_n < d) is
read off the n-th power of the (2k - 1) x (2k - 1) matrix H of

    Marsaglia, Tsang & Wang (2003), "Evaluating Kolmogorov's
    Distribution", Journal of Statistical Software 8(18).

The exact variant keeps H and its powers in Fractions and converts to
float once, at the end. The rounded variant raises a float copy of H to
the n-th power, rescaling by powers of ten whenever entries grow past
1e140 so long products neither overflow nor underflow.
"""

from __future__ import annotations

import math
from fractions import Fraction

import numpy as np
from numpy.typing import NDArray

from pydistributions.core.compute.linalg import RationalMatrix
from pydistributions.core.compute.rational import (
    ONE,
    ONE_HALF,
    ZERO,
    rational_from_float_with_fallback,
    rational_to_float,
)
from pydistributions.core.exceptions import DomainError, NumberTooLargeError

_SCALE = 1e140
_INV_SCALE = 1e-140
_SCALE_EXPONENT = 140


def create_h(d: float, n: int) -> RationalMatrix:
    """
    Build the exact matrix H for statistic d and sample size n.

    With k = ceil(n d), m = 2k - 1 and h = k - n d:

        H[i][j] = 1 where i - j + 1 >= 0, else 0
        H[i][0]   -= h^(i + 1)
        H[m-1][j] -= h^(m - j)
        H[m-1][0] += (2h - 1)^m           when h > 1/2
        H[i][j]  /= (i - j + 1)!          where i - j + 1 > 0

    Args:
        d: Statistic value
        n: Sample size

    Returns:
        m x m RationalMatrix

    Raises:
        NumberTooLargeError: If h >= 1
        RationalConversionError: If h cannot be converted at any tolerance
    """
    k = math.ceil(n * d)
    m = 2 * k - 1
    h_float = k - n * d
    if h_float >= 1:
        raise NumberTooLargeError(
            f"h = {h_float} must be below 1 (d={d}, n={n})",
            value=h_float, bound=1.0,
        )

    h = rational_from_float_with_fallback(h_float)

    rows = [
        [ONE if i - j + 1 >= 0 else ZERO for j in range(m)]
        for i in range(m)
    ]

    # h^1 .. h^m
    h_powers = [h]
    for _ in range(1, m):
        h_powers.append(h * h_powers[-1])

    for i in range(m):
        rows[i][0] -= h_powers[i]
        rows[m - 1][i] -= h_powers[m - i - 1]

    if h > ONE_HALF:
        rows[m - 1][0] += (2 * h - 1) ** m

    # lower band, j <= i
    for i in range(m):
        for j in range(i + 1):
            for g in range(2, i - j + 2):
                rows[i][j] /= g

    return RationalMatrix(rows)


class KolmogorovSmirnovDistribution:
    """
    Distribution of D_n = sup |F_n(x) - F(x)| under the null hypothesis.

    Args:
        n: Sample size (>= 1)
    """

    def __init__(self, n: int):
        if n < 1 or int(n) != n:
            raise DomainError(
                f"n: sample size must be a positive integer, got {n}",
                parameter="n", value=n,
            )
        self.n = int(n)

    def cdf(self, d: float, exact: bool = False) -> float:
        """
        P(D_n < d).

        Closed forms cover d <= 1/n and d >= 1 - 1/n; in between, H^n is
        evaluated exactly (exact=True) or in rescaled floating point.
        """
        n = self.n
        ninv = 1.0 / n
        ntd = n * d

        if d <= 0.5 * ninv:
            return 0.0
        if d <= ninv:
            res = 1.0
            f = 2.0 * d - ninv
            for i in range(1, n + 1):
                res *= i * f
            return res
        if d >= 1.0:
            return 1.0
        if d >= 1.0 - ninv:
            return 1.0 - 2.0 * (1.0 - d) ** n

        if exact:
            return self._exact_k(d)
        return self._rounded_k(d, ntd)

    def cdf_exact(self, d: float) -> float:
        return self.cdf(d, exact=True)

    def _exact_k(self, d: float) -> float:
        n = self.n
        k = math.ceil(n * d)
        h_power = create_h(d, n).power(n)
        p = h_power[k - 1, k - 1]
        for i in range(1, n + 1):
            p *= Fraction(i, n)
        return rational_to_float(p)

    def _rounded_k(self, d: float, ntd: float) -> float:
        n = self.n
        k = math.ceil(ntd)
        h = create_h(d, n).to_array()
        h_power, exponent = _scaled_power(h, n)

        p = float(h_power[k - 1, k - 1])
        for i in range(1, n + 1):
            p *= i / n
            if p < _INV_SCALE:
                p *= _SCALE
                exponent -= _SCALE_EXPONENT
        return _unscale(p, exponent)


def _rescale(matrix: NDArray[np.floating], exponent: int) -> tuple[NDArray[np.floating], int]:
    while np.max(np.abs(matrix)) > _SCALE:
        matrix = matrix * _INV_SCALE
        exponent += _SCALE_EXPONENT
    return matrix, exponent


def _scaled_power(matrix: NDArray[np.floating], n: int) -> tuple[NDArray[np.floating], int]:
    """matrix^n as (mantissa matrix, decimal exponent)."""
    result = np.eye(matrix.shape[0])
    result_exp = 0
    base, base_exp = matrix, 0
    while n > 0:
        if n & 1:
            result, result_exp = _rescale(result @ base, result_exp + base_exp)
        n >>= 1
        if n:
            base, base_exp = _rescale(base @ base, 2 * base_exp)
    return result, result_exp


def _unscale(value: float, exponent: int) -> float:
    while exponent >= _SCALE_EXPONENT:
        value *= _SCALE
        exponent -= _SCALE_EXPONENT
    while exponent <= -_SCALE_EXPONENT:
        value *= _INV_SCALE
        exponent += _SCALE_EXPONENT
    return value * 10.0 ** exponent
