"""
Tests for the KolmogorovSmirnovTest engine.

Validates:
    - One- and two-sample statistics
    - Lattice thresholds for strict and non-strict comparisons
    - Exact, enumerated, Monte Carlo and asymptotic p-values agree
    - Kolmogorov series convergence
"""

import math
import random

import numpy as np
import pytest

from pydistributions.core.exceptions import (
    ConvergenceError,
    OutOfRangeError,
    ValidationError,
)
from pydistributions.core.random import NumpyRandomSource
from pydistributions.distributions import NormalDistribution, UniformRealDistribution
from pydistributions.hypothesis import KolmogorovSmirnovTest, KSConfig
from pydistributions.hypothesis.backends._ks_test import _lattice_threshold


class SeededRandomSource:
    """RandomSource over the standard library generator, not numpy."""

    def __init__(self, seed):
        self._random = random.Random(seed)

    def next_double(self):
        return self._random.random()

    def next_gaussian(self):
        return self._random.gauss(0.0, 1.0)

    def set_seed(self, seed):
        self._random.seed(seed)


@pytest.fixture
def engine():
    return KolmogorovSmirnovTest(
        rng=NumpyRandomSource(42), config=KSConfig(monte_carlo_iterations=20000),
    )


# ═══════════════════════════════════════════════════════════════════════
# Statistics
# ═══════════════════════════════════════════════════════════════════════


class TestStatistic:

    def test_two_sample(self, engine):
        assert engine.two_sample_statistic([1, 2, 3, 4, 5], [3, 4, 5, 6, 7]) == pytest.approx(0.4)

    def test_two_sample_order_free(self, engine):
        assert engine.statistic([5, 1, 4, 2, 3], [7, 3, 6, 4, 5]) == pytest.approx(0.4)

    def test_separated(self, engine):
        assert engine.statistic([1, 2, 3], [4, 5, 6, 7]) == 1.0

    def test_one_sample_dispatch(self, engine):
        dist = NormalDistribution(3.0, 1.5)
        assert engine.statistic([1, 2, 3, 4, 5], dist) == pytest.approx(
            0.14750746245307711, rel=1e-10,
        )

    def test_one_sample_minimum(self, engine):
        """Midpoints of n equal cells give the smallest possible D_n = 1/(2n)."""
        x = [0.1, 0.3, 0.5, 0.7, 0.9]
        d = engine.one_sample_statistic(x, UniformRealDistribution())
        assert d == pytest.approx(0.1, rel=1e-12)
        assert engine.test(x, UniformRealDistribution()) == pytest.approx(1.0, abs=1e-12)

    def test_bounds(self, engine, rng):
        for _ in range(20):
            x = rng.normal(size=15)
            y = rng.normal(0.3, 2.0, size=11)
            d = engine.statistic(x, y)
            assert 0.0 <= d <= 1.0
            assert 0.0 <= engine.statistic(x, NormalDistribution()) <= 1.0


class TestLatticeThreshold:

    def test_on_lattice(self):
        assert _lattice_threshold(0.4, 5, 5, strict=True) == 10
        assert _lattice_threshold(0.4, 5, 5, strict=False) == 9

    def test_rounding_noise(self):
        """d computed as a float ratio still lands on its lattice point."""
        d = 7 / 12
        assert _lattice_threshold(d, 3, 4, strict=True) == 7
        assert _lattice_threshold(d, 3, 4, strict=False) == 6

    def test_off_lattice(self):
        assert _lattice_threshold(0.41, 5, 5, strict=True) == 10
        assert _lattice_threshold(0.41, 5, 5, strict=False) == 10


# ═══════════════════════════════════════════════════════════════════════
# Two-sample p-values
# ═══════════════════════════════════════════════════════════════════════


class TestTwoSamplePValue:

    def test_separated_strict_is_zero(self, engine):
        x = [1, 2, 3, 4, 5]
        y = [6, 7, 8, 9, 10]
        assert engine.test(x, y, method="exact") == 0.0
        assert engine.test(x, y, method="enumerate") == 0.0
        assert engine.test(x, y, method="monte_carlo") == 0.0

    def test_separated_non_strict(self, engine):
        """Only the two fully separated orderings reach D = 1."""
        x = [1, 2, 3, 4, 5]
        y = [6, 7, 8, 9, 10]
        assert engine.test(x, y, strict=False) == pytest.approx(2 / 252, rel=1e-12)

    @pytest.mark.parametrize("method", [
        "exact",
        pytest.param("enumerate", marks=pytest.mark.slow),
        "monte_carlo",
        "asymptotic",
    ])
    def test_identical_samples(self, engine, method):
        x = np.arange(10.0)
        assert engine.statistic(x, x.copy()) == 0.0
        assert engine.test(x, x.copy(), method=method) == pytest.approx(1.0)
        assert engine.test(x, x.copy(), strict=False, method=method) == pytest.approx(1.0)

    def test_equal_sizes_closed_form(self, engine):
        """
        For n = m, P(D >= k/n) = 2 sum_j (-1)^(j+1) C(2n, n - jk) / C(2n, n).
        """
        n = 7
        total = math.comb(2 * n, n)
        for k in range(1, n + 1):
            expected = 2 * sum(
                (-1) ** (j + 1) * math.comb(2 * n, n - j * k)
                for j in range(1, n // k + 1)
            ) / total
            assert engine.exact_p(k / n, n, n, strict=False) == pytest.approx(expected, rel=1e-12)

    @pytest.mark.parametrize("n, m", [(3, 4), (5, 5), (4, 7), (6, 6)])
    def test_enumerate_matches_exact(self, engine, n, m):
        for k in range(0, n * m + 1, max(1, n * m // 8)):
            d = k / (n * m)
            for strict in (True, False):
                assert engine.exact_p_enumerated(d, n, m, strict) == pytest.approx(
                    engine.exact_p(d, n, m, strict), rel=1e-12, abs=1e-15,
                )

    @pytest.mark.parametrize("method", ["exact", "enumerate", "asymptotic"])
    def test_monotone_in_d(self, engine, method):
        values = [
            engine.two_sample_p_value(d, 6, 5, method=method)[0]
            for d in np.linspace(0.0, 1.0, 16)
        ]
        assert all(a >= b - 1e-15 for a, b in zip(values, values[1:]))
        assert all(0.0 <= v <= 1.0 for v in values)

    @pytest.mark.parametrize("d", [0.1, 0.15, 0.2, 0.25, 0.3])
    def test_asymptotic_close_to_exact(self, engine, d):
        exact = engine.exact_p(d, 60, 60, strict=False)
        approx = engine.approximate_p(d, 60, 60)
        assert approx == pytest.approx(exact, abs=0.01)

    @pytest.mark.slow
    def test_monte_carlo_close_to_exact(self, engine):
        n, m, d = 9, 8, 4 / 9
        exact = engine.exact_p(d, n, m)
        iterations = 50000
        mc = engine.monte_carlo_p(d, n, m, iterations=iterations)
        se = math.sqrt(exact * (1 - exact) / iterations)
        assert abs(mc - exact) < 4 * se

    def test_monte_carlo_any_random_source(self):
        """A non-numpy source takes the shuffle path; results still track exact."""
        engine = KolmogorovSmirnovTest(rng=SeededRandomSource(5))
        n, m, d = 4, 5, 0.6
        exact = engine.exact_p(d, n, m, strict=False)
        iterations = 4000
        mc = engine.monte_carlo_p(d, n, m, strict=False, iterations=iterations)
        se = math.sqrt(exact * (1 - exact) / iterations)
        assert abs(mc - exact) < 4 * se

    def test_monte_carlo_invalid_iterations(self, engine):
        with pytest.raises(ValidationError):
            engine.monte_carlo_p(0.5, 4, 4, iterations=0)

    def test_unknown_method(self, engine):
        with pytest.raises(ValidationError, match="method"):
            engine.two_sample_p_value(0.5, 4, 4, method="bootstrap")


class TestSelectMethod:

    @pytest.mark.parametrize("n, m, expected", [
        (10, 19, "exact"),
        (10, 20, "monte_carlo"),
        (99, 101, "monte_carlo"),
        (100, 100, "asymptotic"),
    ])
    def test_default_thresholds(self, engine, n, m, expected):
        assert engine.select_method(n, m) == expected

    def test_configured_thresholds(self):
        engine = KolmogorovSmirnovTest(config=KSConfig(small_sample_product=50, large_sample_product=60))
        assert engine.select_method(7, 7) == "exact"
        assert engine.select_method(5, 11) == "monte_carlo"
        assert engine.select_method(8, 8) == "asymptotic"

    def test_auto_reports_algorithm(self, engine):
        _, algorithm = engine.two_sample_p_value(0.5, 4, 4)
        assert algorithm == "exact"


# ═══════════════════════════════════════════════════════════════════════
# Kolmogorov series
# ═══════════════════════════════════════════════════════════════════════


class TestKsSum:

    def test_known_value(self, engine):
        """K(1) = 0.7300003283..."""
        assert engine.ks_sum(1.0) == pytest.approx(0.7300003283, rel=1e-9)

    def test_zero(self, engine):
        assert engine.ks_sum(0.0) == 0.0

    def test_large_argument(self, engine):
        assert engine.ks_sum(5.0) == pytest.approx(1.0, abs=1e-15)

    def test_convergence_error(self, engine):
        with pytest.raises(ConvergenceError) as exc_info:
            engine.ks_sum(0.01, 1e-20, 10)
        assert exc_info.value.iterations == 10


# ═══════════════════════════════════════════════════════════════════════
# One-sample p-values and decisions
# ═══════════════════════════════════════════════════════════════════════


class TestOneSample:

    def test_exact_and_rounded_agree(self, engine, rng):
        x = rng.uniform(size=12)
        dist = UniformRealDistribution()
        assert engine.test(x, dist, exact=True) == pytest.approx(engine.test(x, dist), rel=1e-8)

    def test_cdf_delegates(self, engine):
        assert engine.cdf(0.15, 5) == pytest.approx(120 * 0.1**5, rel=1e-12)


class TestReject:

    def test_reject(self, engine):
        x = np.arange(10.0)
        assert engine.reject(x, x + 20, 0.05) is True
        assert engine.reject([1, 2, 3, 4, 5], [3, 4, 5, 6, 7], 0.05, strict=False) is False

    @pytest.mark.parametrize("alpha", [0.0, 0.6, -1.0])
    def test_alpha_out_of_range(self, engine, alpha):
        with pytest.raises(OutOfRangeError):
            engine.reject([1, 2, 3], [4, 5, 6], alpha)
