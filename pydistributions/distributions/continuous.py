"""
Continuous distributions.

Closed-form densities and CDFs come from scipy.special. Distributions
with a closed-form quantile override `_inverse`; Gamma and Beta rely on
the generic InverseCDFSolver.

All parameters are validated at construction and raise DomainError.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from scipy import special

from pydistributions.core.exceptions import DomainError
from pydistributions.core.protocols import RandomSource
from pydistributions.core.validation import check_array, check_finite, check_positive
from pydistributions.distributions._inverse import InverseCDFSolver
from pydistributions.distributions.base import AbstractRealDistribution


class NormalDistribution(AbstractRealDistribution):
    """Normal distribution N(mean, sd^2)."""

    def __init__(
        self,
        mean: float = 0.0,
        sd: float = 1.0,
        rng: RandomSource | None = None,
        solver: InverseCDFSolver | None = None,
    ):
        super().__init__(rng, solver)
        if not math.isfinite(mean):
            raise DomainError(f"mean: must be finite, got {mean}", parameter="mean", value=mean)
        self.mean = float(mean)
        self.sd = check_positive(sd, "sd")

    def density(self, x: float) -> float:
        z = (x - self.mean) / self.sd
        return math.exp(-0.5 * z * z) / (self.sd * math.sqrt(2.0 * math.pi))

    def cumulative_probability(self, x: float) -> float:
        return float(special.ndtr((x - self.mean) / self.sd))

    def _inverse(self, p: float) -> float:
        return self.mean + self.sd * float(special.ndtri(p))

    def _mean(self) -> float:
        return self.mean

    def _variance(self) -> float:
        return self.sd * self.sd

    @property
    def support_lower_bound(self) -> float:
        return -math.inf

    @property
    def support_upper_bound(self) -> float:
        return math.inf

    def _sample_one(self) -> float:
        return self.mean + self.sd * self.random.next_gaussian()


class UniformRealDistribution(AbstractRealDistribution):
    """Uniform distribution on [lower, upper]."""

    def __init__(
        self,
        lower: float = 0.0,
        upper: float = 1.0,
        rng: RandomSource | None = None,
        solver: InverseCDFSolver | None = None,
    ):
        super().__init__(rng, solver)
        if not (math.isfinite(lower) and math.isfinite(upper)) or lower >= upper:
            raise DomainError(
                f"lower bound ({lower}) must be finite and below upper bound ({upper})",
                parameter="lower", value=lower,
            )
        self.lower = float(lower)
        self.upper = float(upper)

    def density(self, x: float) -> float:
        if x < self.lower or x > self.upper:
            return 0.0
        return 1.0 / (self.upper - self.lower)

    def cumulative_probability(self, x: float) -> float:
        if x <= self.lower:
            return 0.0
        if x >= self.upper:
            return 1.0
        return (x - self.lower) / (self.upper - self.lower)

    def _inverse(self, p: float) -> float:
        return p * (self.upper - self.lower) + self.lower

    def _mean(self) -> float:
        return 0.5 * (self.lower + self.upper)

    def _variance(self) -> float:
        width = self.upper - self.lower
        return width * width / 12.0

    @property
    def support_lower_bound(self) -> float:
        return self.lower

    @property
    def support_upper_bound(self) -> float:
        return self.upper


class ExponentialDistribution(AbstractRealDistribution):
    """Exponential distribution parameterised by its mean (1 / rate)."""

    def __init__(
        self,
        mean: float = 1.0,
        rng: RandomSource | None = None,
        solver: InverseCDFSolver | None = None,
    ):
        super().__init__(rng, solver)
        self.mean = check_positive(mean, "mean")

    def density(self, x: float) -> float:
        if x < 0:
            return 0.0
        return math.exp(-x / self.mean) / self.mean

    def cumulative_probability(self, x: float) -> float:
        if x <= 0:
            return 0.0
        return -math.expm1(-x / self.mean)

    def _inverse(self, p: float) -> float:
        return -self.mean * math.log1p(-p)

    def _mean(self) -> float:
        return self.mean

    def _variance(self) -> float:
        return self.mean * self.mean

    @property
    def support_lower_bound(self) -> float:
        return 0.0

    @property
    def support_upper_bound(self) -> float:
        return math.inf


class GammaDistribution(AbstractRealDistribution):
    """
    Gamma distribution with shape k and scale theta.

    No closed-form quantile: inverse_cumulative_probability goes through
    the generic solver (Chebyshev upper bracket, brentq refinement).
    """

    def __init__(
        self,
        shape: float,
        scale: float = 1.0,
        rng: RandomSource | None = None,
        solver: InverseCDFSolver | None = None,
    ):
        super().__init__(rng, solver)
        self.shape = check_positive(shape, "shape")
        self.scale = check_positive(scale, "scale")

    def density(self, x: float) -> float:
        if x < 0:
            return 0.0
        if x == 0:
            if self.shape < 1:
                return math.inf
            return 1.0 / self.scale if self.shape == 1 else 0.0
        log_d = (
            (self.shape - 1.0) * math.log(x) - x / self.scale
            - float(special.gammaln(self.shape)) - self.shape * math.log(self.scale)
        )
        return math.exp(log_d)

    def cumulative_probability(self, x: float) -> float:
        if x <= 0:
            return 0.0
        return float(special.gammainc(self.shape, x / self.scale))

    def _mean(self) -> float:
        return self.shape * self.scale

    def _variance(self) -> float:
        return self.shape * self.scale * self.scale

    @property
    def support_lower_bound(self) -> float:
        return 0.0

    @property
    def support_upper_bound(self) -> float:
        return math.inf


class BetaDistribution(AbstractRealDistribution):
    """Beta distribution on [0, 1]; quantiles via the generic solver."""

    def __init__(
        self,
        alpha: float,
        beta: float,
        rng: RandomSource | None = None,
        solver: InverseCDFSolver | None = None,
    ):
        super().__init__(rng, solver)
        self.alpha = check_positive(alpha, "alpha")
        self.beta = check_positive(beta, "beta")

    def density(self, x: float) -> float:
        if x < 0 or x > 1:
            return 0.0
        if x == 0 or x == 1:
            a = self.alpha if x == 0 else self.beta
            if a < 1:
                return math.inf
            if a > 1:
                return 0.0
            return math.exp(-float(special.betaln(self.alpha, self.beta)))
        log_d = (
            (self.alpha - 1.0) * math.log(x) + (self.beta - 1.0) * math.log1p(-x)
            - float(special.betaln(self.alpha, self.beta))
        )
        return math.exp(log_d)

    def cumulative_probability(self, x: float) -> float:
        if x <= 0:
            return 0.0
        if x >= 1:
            return 1.0
        return float(special.betainc(self.alpha, self.beta, x))

    def _mean(self) -> float:
        return self.alpha / (self.alpha + self.beta)

    def _variance(self) -> float:
        a, b = self.alpha, self.beta
        return (a * b) / ((a + b) ** 2 * (a + b + 1.0))

    @property
    def support_lower_bound(self) -> float:
        return 0.0

    @property
    def support_upper_bound(self) -> float:
        return 1.0


class WeibullDistribution(AbstractRealDistribution):
    """Weibull distribution with shape k and scale lambda."""

    def __init__(
        self,
        shape: float,
        scale: float = 1.0,
        rng: RandomSource | None = None,
        solver: InverseCDFSolver | None = None,
    ):
        super().__init__(rng, solver)
        self.shape = check_positive(shape, "shape")
        self.scale = check_positive(scale, "scale")

    def density(self, x: float) -> float:
        if x < 0:
            return 0.0
        xscale = x / self.scale
        xscale_pow = xscale ** (self.shape - 1.0)
        return (self.shape / self.scale) * xscale_pow * math.exp(-xscale_pow * xscale)

    def cumulative_probability(self, x: float) -> float:
        if x <= 0:
            return 0.0
        return -math.expm1(-((x / self.scale) ** self.shape))

    def _inverse(self, p: float) -> float:
        return self.scale * (-math.log1p(-p)) ** (1.0 / self.shape)

    def _mean(self) -> float:
        return self.scale * float(special.gamma(1.0 + 1.0 / self.shape))

    def _variance(self) -> float:
        mean = self.numerical_mean
        return self.scale ** 2 * float(special.gamma(1.0 + 2.0 / self.shape)) - mean * mean

    @property
    def support_lower_bound(self) -> float:
        return 0.0

    @property
    def support_upper_bound(self) -> float:
        return math.inf


class CauchyDistribution(AbstractRealDistribution):
    """Cauchy distribution; mean and variance are undefined (NaN)."""

    def __init__(
        self,
        median: float = 0.0,
        scale: float = 1.0,
        rng: RandomSource | None = None,
        solver: InverseCDFSolver | None = None,
    ):
        super().__init__(rng, solver)
        if not math.isfinite(median):
            raise DomainError(
                f"median: must be finite, got {median}", parameter="median", value=median,
            )
        self.median = float(median)
        self.scale = check_positive(scale, "scale")

    def density(self, x: float) -> float:
        dev = x - self.median
        return (1.0 / math.pi) * (self.scale / (dev * dev + self.scale * self.scale))

    def cumulative_probability(self, x: float) -> float:
        return 0.5 + math.atan((x - self.median) / self.scale) / math.pi

    def _inverse(self, p: float) -> float:
        return self.median + self.scale * math.tan(math.pi * (p - 0.5))

    def _mean(self) -> float:
        return math.nan

    def _variance(self) -> float:
        return math.nan

    @property
    def support_lower_bound(self) -> float:
        return -math.inf

    @property
    def support_upper_bound(self) -> float:
        return math.inf


class EnumeratedRealDistribution(AbstractRealDistribution):
    """
    Finitely many real values with given probabilities.

    The support is the set of values, so it is not connected. density(x)
    returns the point mass at x. Duplicate values are merged and
    probabilities normalised to sum to one.
    """

    def __init__(
        self,
        values: Sequence[float],
        probabilities: Sequence[float] | None = None,
        rng: RandomSource | None = None,
        solver: InverseCDFSolver | None = None,
    ):
        super().__init__(rng, solver)
        vals = check_array(values, "values").ravel()
        if vals.size == 0:
            raise DomainError("values: at least one value is required", parameter="values")
        check_finite(vals, "values")
        if probabilities is None:
            probs = np.full(vals.size, 1.0 / vals.size)
        else:
            probs = check_array(probabilities, "probabilities").ravel()
            if probs.size != vals.size:
                raise DomainError(
                    f"probabilities: expected {vals.size} entries, got {probs.size}",
                    parameter="probabilities",
                )
            if not np.all(np.isfinite(probs)) or np.any(probs < 0) or probs.sum() <= 0:
                raise DomainError(
                    "probabilities: must be finite, non-negative and not all zero",
                    parameter="probabilities",
                )

        support, inverse = np.unique(vals, return_inverse=True)
        masses = np.zeros(support.size)
        np.add.at(masses, inverse, probs)
        masses /= masses.sum()

        self.values = support
        self.masses = masses
        self._cumulative = np.minimum(np.cumsum(masses), 1.0)

    def density(self, x: float) -> float:
        idx = np.searchsorted(self.values, x)
        if idx < self.values.size and self.values[idx] == x:
            return float(self.masses[idx])
        return 0.0

    def cumulative_probability(self, x: float) -> float:
        idx = int(np.searchsorted(self.values, x, side="right"))
        if idx == 0:
            return 0.0
        return float(self._cumulative[idx - 1])

    def _inverse(self, p: float) -> float:
        idx = int(np.searchsorted(self._cumulative, p, side="left"))
        # skip zero-mass values so the quantile is an atom
        while idx < self.values.size - 1 and self.masses[idx] == 0.0:
            idx += 1
        return float(self.values[min(idx, self.values.size - 1)])

    def _mean(self) -> float:
        return float(np.sum(self.values * self.masses))

    def _variance(self) -> float:
        mean = self.numerical_mean
        return float(np.sum(self.masses * (self.values - mean) ** 2))

    @property
    def support_lower_bound(self) -> float:
        return float(self.values[0])

    @property
    def support_upper_bound(self) -> float:
        return float(self.values[-1])

    @property
    def is_support_connected(self) -> bool:
        return False
