"""
Saddle point expansion helpers for discrete probability mass functions.

Catherine Loader's "Fast and Accurate Computation of Binomial
Probabilities" (2000): log-pmfs written as Stirling errors plus deviance
parts stay accurate where naive factorial ratios lose all precision.

EXACT_STIRLING_ERRORS is a read-only tuple; it is never mutated after
import, so concurrent readers need no coordination.
"""

from __future__ import annotations

import math

from scipy.special import gammaln

HALF_LOG_2_PI = 0.5 * math.log(2.0 * math.pi)

# Stirling error ln(z!) - [(z + 0.5) ln z - z + ln sqrt(2 pi)] at z = i / 2
EXACT_STIRLING_ERRORS = (
    0.0,  # 0.0
    0.1534264097200273452913848,  # 0.5
    0.0810614667953272582196702,  # 1.0
    0.0548141210519176538961390,  # 1.5
    0.0413406959554092940938221,  # 2.0
    0.03316287351993628748511048,  # 2.5
    0.02767792568499833914878929,  # 3.0
    0.02374616365629749597132920,  # 3.5
    0.02079067210376509311152277,  # 4.0
    0.01848845053267318523077934,  # 4.5
    0.01664469118982119216319487,  # 5.0
    0.01513497322191737887351255,  # 5.5
    0.01387612882307074799874573,  # 6.0
    0.01281046524292022692424986,  # 6.5
    0.01189670994589177009505572,  # 7.0
    0.01110455975820691732662991,  # 7.5
    0.010411265261972096497478567,  # 8.0
    0.009799416126158803298389475,  # 8.5
    0.009255462182712732917728637,  # 9.0
    0.008768700134139385462952823,  # 9.5
    0.008330563433362871256469318,  # 10.0
    0.007934114564314020547248100,  # 10.5
    0.007573675487951840794972024,  # 11.0
    0.007244554301320383179543912,  # 11.5
    0.006942840107209529865664152,  # 12.0
    0.006665247032707682442354394,  # 12.5
    0.006408994188004207068439631,  # 13.0
    0.006171712263039457647532867,  # 13.5
    0.005951370112758847735624416,  # 14.0
    0.005746216513010115682023589,  # 14.5
    0.005554733551962801371038690,  # 15.0
)


def stirling_error(z: float) -> float:
    """Error of Stirling's approximation to ln(z!)."""
    if z < 15.0:
        z2 = 2.0 * z
        if math.floor(z2) == z2:
            return EXACT_STIRLING_ERRORS[int(z2)]
        return float(gammaln(z + 1.0)) - (z + 0.5) * math.log(z) + z - HALF_LOG_2_PI
    z2 = z * z
    return (
        0.083333333333333333333
        - (0.00277777777777777777778
           - (0.00079365079365079365079365
              - (0.000595238095238095238095238
                 - 0.0008417508417508417508417508 / z2) / z2) / z2) / z2
    ) / z


def deviance_part(x: float, mu: float) -> float:
    """x ln(x / mu) + mu - x, by series when x is close to mu."""
    if abs(x - mu) < 0.1 * (x + mu):
        d = x - mu
        v = d / (x + mu)
        s1 = v * d
        s = math.nan
        ej = 2.0 * x * v
        v *= v
        j = 1
        while s1 != s:
            s = s1
            ej *= v
            s1 = s + ej / (2 * j + 1)
            j += 1
        return s1
    return x * math.log(x / mu) + mu - x


def log_binomial_probability(x: int, n: int, p: float, q: float) -> float:
    """ln P(X = x) for X ~ Binomial(n, p), with q = 1 - p."""
    if x == 0:
        if p < 0.1:
            return -deviance_part(n, n * q) - n * p
        return n * math.log(q)
    if x == n:
        if q < 0.1:
            return -deviance_part(n, n * p) - n * q
        return n * math.log(p)
    ret = (
        stirling_error(n) - stirling_error(x) - stirling_error(n - x)
        - deviance_part(x, n * p) - deviance_part(n - x, n * q)
    )
    f = (2.0 * math.pi * x * (n - x)) / n
    return -0.5 * math.log(f) + ret
