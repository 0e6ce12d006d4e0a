"""
Common types for hypothesis testing.

Defines HTestParams (maps to R's htest class) and KSConfig, the tuning
knobs of the Kolmogorov-Smirnov p-value engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


VALID_KS_METHODS = ("auto", "exact", "enumerate", "monte_carlo", "asymptotic")


@dataclass(frozen=True)
class HTestParams:
    """
    Parameter payload for hypothesis tests.

    Maps directly to R's htest structure; test-specific extras go in the
    `extras` dict.

    Attributes
    ----------
    statistic : float
        Test statistic value.
    statistic_name : str
        Name of the test statistic ("D").
    p_value : float
        p-value of the test.
    alternative : str
        Alternative hypothesis; Kolmogorov-Smirnov tests are "two.sided".
    method : str
        Human-readable method name, e.g.
        "Exact two-sample Kolmogorov-Smirnov test".
    data_name : str
        Description of the data, e.g. "x and y".
    extras : dict or None
        Test-specific additional outputs (algorithm, sample sizes,
        Monte Carlo replicates).
    """
    statistic: float
    statistic_name: str
    p_value: float
    alternative: str
    method: str
    data_name: str
    extras: dict[str, Any] | None = None


@dataclass(frozen=True)
class KSConfig:
    """
    Tuning of the Kolmogorov-Smirnov p-value engine.

    Attributes
    ----------
    small_sample_product : int
        Two-sample tests with n * m below this use the exact algorithm.
    large_sample_product : int
        Two-sample tests with n * m below this (and not small) use Monte
        Carlo; larger products use the asymptotic series.
    monte_carlo_iterations : int
        Random partitions drawn by the Monte Carlo algorithm.
    ks_sum_tolerance : float
        Cauchy criterion of the asymptotic series.
    max_partial_sum_count : int
        Term budget of the asymptotic series.
    """
    small_sample_product: int = 200
    large_sample_product: int = 10000
    monte_carlo_iterations: int = 1_000_000
    ks_sum_tolerance: float = 1e-20
    max_partial_sum_count: int = 100_000


DEFAULT_KS_CONFIG = KSConfig()
