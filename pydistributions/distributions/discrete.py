"""
Discrete distributions: Poisson and binomial.

Probability mass functions use the saddle point expansion; CDFs use
the regularized incomplete gamma and beta functions from scipy.special.
"""

from __future__ import annotations

import math

from scipy import special

from pydistributions.core.exceptions import DomainError
from pydistributions.core.protocols import RandomSource
from pydistributions.core.validation import check_positive
from pydistributions.distributions._saddle_point import (
    HALF_LOG_2_PI,
    deviance_part,
    log_binomial_probability,
    stirling_error,
)
from pydistributions.distributions.base import INTEGER_MAX, AbstractIntegerDistribution
from pydistributions.distributions.continuous import ExponentialDistribution

# Below this mean, sample by the multiplication method
POISSON_SAMPLING_PIVOT = 40.0


def _factorial_log(n: float) -> float:
    return float(special.gammaln(n + 1.0))


class PoissonDistribution(AbstractIntegerDistribution):
    """
    Poisson distribution with the given mean.

    Args:
        mean: Strictly positive mean
        rng: RandomSource for sample(). The exponential sampler used for
            large means shares this instance.
    """

    def __init__(self, mean: float, rng: RandomSource | None = None):
        super().__init__(rng)
        self.mean = check_positive(mean, "mean")
        self._exponential = ExponentialDistribution(1.0, rng=self.random)

    def probability(self, x: int) -> float:
        lp = self.log_probability(x)
        return 0.0 if lp == -math.inf else math.exp(lp)

    def log_probability(self, x: int) -> float:
        if x < 0 or x == INTEGER_MAX:
            return -math.inf
        if x == 0:
            return -self.mean
        return (
            -stirling_error(x) - deviance_part(x, self.mean)
            - HALF_LOG_2_PI - 0.5 * math.log(x)
        )

    def cumulative_probability(self, x: int) -> float:
        if x < 0:
            return 0.0
        if x == INTEGER_MAX:
            return 1.0
        return float(special.gammaincc(x + 1.0, self.mean))

    def _mean(self) -> float:
        return self.mean

    def _variance(self) -> float:
        return self.mean

    @property
    def support_lower_bound(self) -> int:
        return 0

    @property
    def support_upper_bound(self) -> int:
        return INTEGER_MAX

    def _sample_one(self) -> int:
        return min(self._next_poisson(self.mean), INTEGER_MAX)

    def _next_poisson(self, mean: float) -> int:
        """
        One Poisson(mean) variate.

        Small means multiply uniforms until the product drops below
        exp(-mean). Large means use Devroye's rejection algorithm
        ("Non-Uniform Random Variate Generation", 1986, p. 511) on the
        integer part of the mean, plus an independent draw for the
        fractional part.
        """
        rng = self.random
        if mean < POISSON_SAMPLING_PIVOT:
            p = math.exp(-mean)
            n = 0
            r = 1.0
            while n < 1000 * mean:
                r *= rng.next_double()
                if r >= p:
                    n += 1
                else:
                    return n
            return n

        lam = math.floor(mean)
        lam_fractional = mean - lam
        log_lam = math.log(lam)
        log_lam_factorial = _factorial_log(lam)
        y2 = self._next_poisson(lam_fractional) if lam_fractional >= 5e-324 else 0
        delta = math.sqrt(lam * math.log(32.0 * lam / math.pi + 1.0))
        half_delta = delta / 2.0
        twolpd = 2.0 * lam + delta
        a1 = math.sqrt(math.pi * twolpd) * math.exp(1.0 / (8.0 * lam))
        a2 = (twolpd / delta) * math.exp(-delta * (1.0 + delta) / twolpd)
        a_sum = a1 + a2 + 1.0
        p1 = a1 / a_sum
        p2 = a2 / a_sum
        c1 = 1.0 / (8.0 * lam)

        while True:
            u = rng.next_double()
            if u <= p1:
                n = rng.next_gaussian()
                x = n * math.sqrt(lam + half_delta) - 0.5
                if x > delta or x < -lam:
                    continue
                y = math.floor(x) if x < 0 else math.ceil(x)
                v = -self._exponential.sample() - n * n / 2.0 + c1
            else:
                if u > p1 + p2:
                    y = lam
                    break
                x = delta + (twolpd / delta) * self._exponential.sample()
                y = math.ceil(x)
                v = -self._exponential.sample() - delta * (x + 1.0) / twolpd

            a = 1 if x < 0 else 0
            t = y * (y + 1) / (2.0 * lam)
            if v < -t and a == 0:
                y = lam + y
                break
            qr = t * ((2.0 * y + 1.0) / (6.0 * lam) - 1.0)
            qa = qr - (t * t) / (3.0 * (lam + a * (y + 1)))
            if v < qa:
                y = lam + y
                break
            if v > qr:
                continue
            if v < y * log_lam - _factorial_log(y + lam) + log_lam_factorial:
                y = lam + y
                break

        return y2 + int(y)


class BinomialDistribution(AbstractIntegerDistribution):
    """
    Binomial distribution: successes in `trials` Bernoulli(p) trials.

    Args:
        trials: Non-negative number of trials
        p: Success probability in [0, 1]
    """

    def __init__(self, trials: int, p: float, rng: RandomSource | None = None):
        super().__init__(rng)
        if trials < 0 or int(trials) != trials:
            raise DomainError(
                f"trials: must be a non-negative integer, got {trials}",
                parameter="trials", value=trials,
            )
        if not 0.0 <= p <= 1.0:
            raise DomainError(
                f"p: must be in [0, 1], got {p}", parameter="p", value=p,
            )
        self.trials = int(trials)
        self.p = float(p)

    def probability(self, x: int) -> float:
        n, p = self.trials, self.p
        if x < 0 or x > n:
            return 0.0
        if n == 0:
            return 1.0
        if p == 0.0:
            return 1.0 if x == 0 else 0.0
        if p == 1.0:
            return 1.0 if x == n else 0.0
        return math.exp(log_binomial_probability(x, n, p, 1.0 - p))

    def cumulative_probability(self, x: int) -> float:
        if x < 0:
            return 0.0
        if x >= self.trials:
            return 1.0
        # P(X <= x) = I_{1-p}(n - x, x + 1)
        return float(special.betainc(self.trials - x, x + 1.0, 1.0 - self.p))

    def _mean(self) -> float:
        return self.trials * self.p

    def _variance(self) -> float:
        return self.trials * self.p * (1.0 - self.p)

    @property
    def support_lower_bound(self) -> int:
        return 0 if self.p < 1.0 else self.trials

    @property
    def support_upper_bound(self) -> int:
        return self.trials if self.p > 0.0 else 0
