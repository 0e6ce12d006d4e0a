"""
Generic inverse-CDF solvers.

Used by every distribution that lacks a closed-form quantile function.

Real-valued distributions go through three phases:

    bracket   start from the support bounds; replace an infinite bound by
              the one-sided Chebyshev (Cantelli) bound when the mean and
              variance are finite, otherwise double from +/-1 until the
              CDF crosses p
    refine    scipy's brentq on CDF(x) - p between the bounds
    plateau   for disconnected supports, if the CDF is flat just left of
              the root, bisect down to the smallest x with CDF(x) >= p

Integer-valued distributions use a Chebyshev-narrowed integer bisection
that returns the smallest x with CDF(x) >= p directly.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from scipy.optimize import brentq

from pydistributions.core.compute.tolerances import (
    SOLVER_DEFAULT_ABSOLUTE_ACCURACY,
    SOLVER_MAX_ITERATIONS,
)
from pydistributions.core.exceptions import ConvergenceError, NumericalError
from pydistributions.core.validation import check_probability

if TYPE_CHECKING:
    from pydistributions.distributions.base import AbstractIntegerDistribution
    from pydistributions.core.protocols import DistributionContract


def _moments(distribution) -> tuple[float, float]:
    """(mean, standard deviation), NaN where the distribution has none."""
    mu = getattr(distribution, "numerical_mean", math.nan)
    var = getattr(distribution, "numerical_variance", math.nan)
    sigma = math.sqrt(var) if var >= 0 else math.nan
    return mu, sigma


class InverseCDFSolver:
    """
    Numeric quantile finder for continuous distributions.

    Args:
        absolute_accuracy: xtol of the root finder and plateau step
        max_iterations: Root finder iteration budget
    """

    def __init__(
        self,
        absolute_accuracy: float = SOLVER_DEFAULT_ABSOLUTE_ACCURACY,
        max_iterations: int = SOLVER_MAX_ITERATIONS,
    ):
        if not absolute_accuracy > 0:
            raise ValueError(
                f"absolute_accuracy must be positive, got {absolute_accuracy}"
            )
        self.absolute_accuracy = absolute_accuracy
        self.max_iterations = max_iterations

    def solve(self, distribution: DistributionContract, p: float) -> float:
        """
        Smallest x with CDF(x) >= p, to within absolute_accuracy.

        Raises:
            OutOfRangeError: If p is outside [0, 1]
            ConvergenceError: If the root finder exhausts its budget
        """
        p = check_probability(p)
        support_lower = distribution.support_lower_bound
        if p == 0.0:
            return support_lower
        support_upper = distribution.support_upper_bound
        if p == 1.0:
            return support_upper

        lower, upper = self._bracket(distribution, p, support_lower, support_upper)

        if lower == support_lower and distribution.cumulative_probability(lower) >= p:
            return lower

        x = self._refine(distribution, p, lower, upper)

        if not distribution.is_support_connected:
            x = self._plateau_check(distribution, p, x, lower)
        return x

    def _bracket(
        self,
        distribution: DistributionContract,
        p: float,
        lower: float,
        upper: float,
    ) -> tuple[float, float]:
        cdf = distribution.cumulative_probability
        mu, sigma = _moments(distribution)
        chebyshev_applies = math.isfinite(mu) and math.isfinite(sigma)

        if lower == -math.inf:
            if chebyshev_applies:
                lower = mu - sigma * math.sqrt((1.0 - p) / p)
            else:
                lower = -1.0
                while cdf(lower) >= p:
                    lower *= 2.0

        if upper == math.inf:
            if chebyshev_applies:
                upper = mu + sigma * math.sqrt(p / (1.0 - p))
            else:
                upper = 1.0
                while cdf(upper) < p:
                    upper *= 2.0

        return lower, upper

    def _refine(
        self,
        distribution: DistributionContract,
        p: float,
        lower: float,
        upper: float,
    ) -> float:
        cdf = distribution.cumulative_probability

        def to_solve(x: float) -> float:
            return cdf(x) - p

        try:
            x, info = brentq(
                to_solve, lower, upper,
                xtol=self.absolute_accuracy,
                maxiter=self.max_iterations,
                full_output=True,
                disp=False,
            )
        except ValueError as e:
            raise NumericalError(
                f"CDF does not bracket p={p} on [{lower}, {upper}]: {e}"
            ) from e

        if not info.converged:
            raise ConvergenceError(
                f"inverse CDF for p={p} did not converge: {info.flag}",
                iterations=info.iterations,
                reason=str(info.flag),
                threshold=self.absolute_accuracy,
            )
        return float(x)

    def _plateau_check(
        self,
        distribution: DistributionContract,
        p: float,
        x: float,
        lower: float,
    ) -> float:
        cdf = distribution.cumulative_probability
        dx = self.absolute_accuracy
        if x - dx < distribution.support_lower_bound:
            return x

        px = cdf(x)
        # x left of a jump: the quantile is the jump itself, not an earlier plateau
        if px < p or cdf(x - dx) != px:
            return x

        # flat just left of x: find where the plateau starts
        upper = x
        while upper - lower > dx:
            mid = 0.5 * (lower + upper)
            if cdf(mid) < px:
                lower = mid
            else:
                upper = mid
        return upper


def integer_inverse_cumulative_probability(
    distribution: AbstractIntegerDistribution,
    p: float,
) -> int:
    """
    Smallest integer x with CDF(x) >= p.

    Raises:
        OutOfRangeError: If p is outside [0, 1]
        NumericalError: If the CDF returns NaN while bisecting
    """
    from pydistributions.distributions.base import INTEGER_MIN

    p = check_probability(p)
    lower = distribution.support_lower_bound
    if p == 0.0:
        return lower
    if lower == INTEGER_MIN:
        if _checked_cdf(distribution, lower) >= p:
            return lower
    else:
        # CDF(lower - 1) == 0 < p
        lower -= 1

    upper = distribution.support_upper_bound
    if p == 1.0:
        return upper

    mu, sigma = _moments(distribution)
    chebyshev_applies = math.isfinite(mu) and math.isfinite(sigma) and sigma != 0.0
    if chebyshev_applies:
        k = math.sqrt((1.0 - p) / p)
        tmp = mu - k * sigma
        if tmp > lower:
            lower = math.ceil(tmp) - 1
        k = 1.0 / k
        tmp = mu + k * sigma
        if tmp < upper:
            upper = math.ceil(tmp) - 1

    while lower + 1 < upper:
        xm = (lower + upper) // 2
        if _checked_cdf(distribution, xm) >= p:
            upper = xm
        else:
            lower = xm
    return upper


def _checked_cdf(distribution: AbstractIntegerDistribution, x: int) -> float:
    result = distribution.cumulative_probability(x)
    if math.isnan(result):
        raise NumericalError(
            f"discrete cumulative probability returned NaN for argument {x}"
        )
    return result
