"""
Solver dispatch for hypothesis tests.

Provides ks_test() and ks_reject().
"""

from __future__ import annotations

from typing import Literal
from numpy.typing import ArrayLike

from pydistributions.core.exceptions import ValidationError
from pydistributions.core.protocols import DistributionContract, RandomSource
from pydistributions.hypothesis._common import KSConfig
from pydistributions.hypothesis.design import HypothesisDesign
from pydistributions.hypothesis.solution import HTestSolution
from pydistributions.hypothesis.backends.cpu import CPUHypothesisBackend


BackendChoice = Literal['cpu']


def _get_backend(backend: str = 'cpu'):
    """Select backend for hypothesis tests. Only the CPU backend exists."""
    if backend in ('cpu', 'auto'):
        return CPUHypothesisBackend()
    raise ValidationError(
        f"Unknown backend: {backend!r}. Use 'cpu'."
    )


def ks_test(
    x: ArrayLike | HypothesisDesign,
    y: ArrayLike | None = None,
    *,
    distribution: DistributionContract | str | None = None,
    exact: bool = False,
    strict: bool = False,
    method: Literal["auto", "exact", "enumerate", "monte_carlo", "asymptotic"] = "auto",
    n_monte_carlo: int | None = None,
    config: KSConfig | None = None,
    rng: RandomSource | None = None,
    backend: str = 'cpu',
    **dist_params: float,
) -> HTestSolution:
    """
    Kolmogorov-Smirnov test (two-sided).

    Parameters
    ----------
    x : array-like or HypothesisDesign
        Numeric vector of observations (at least 2, all finite).
    y : array-like or None
        Second sample for two-sample test. If None, performs a
        one-sample test against `distribution`.
    distribution : DistributionContract, str or None
        Reference distribution for the one-sample test: any object with
        cumulative_probability(), or "norm", "unif", "exp" with
        **dist_params. Defaults to the standard normal.
    exact : bool
        One-sample: evaluate the null distribution in exact rational
        arithmetic rather than rescaled floating point.
    strict : bool
        Two-sample: p-value is P(D > d) if True, else P(D >= d)
        (default) as R reports it. Rejected for the one-sample test.
    method : str
        Two-sample algorithm. "auto" picks exact below
        config.small_sample_product (n*m), Monte Carlo below
        config.large_sample_product, asymptotic above.
    n_monte_carlo : int or None
        Monte Carlo replicates. Defaults to config.monte_carlo_iterations.
    config : KSConfig or None
        Engine thresholds and tolerances.
    rng : RandomSource or None
        Random source of the Monte Carlo algorithm; two-sample only.
    backend : str
        'cpu' (default).
    **dist_params : float
        Parameters of a named distribution (mean/sd, min/max, rate).

    Returns
    -------
    HTestSolution
        Test result with statistic (D), p_value; info['algorithm'] names
        the p-value algorithm.
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        design = HypothesisDesign.for_ks_test(
            x, y,
            distribution=distribution,
            exact=exact,
            strict=strict,
            method=method,
            n_monte_carlo=n_monte_carlo,
            config=config,
            rng=rng,
            **dist_params,
        )

    be = _get_backend(backend)
    result = be.solve(design)
    return HTestSolution(_result=result, _design=design)


def ks_reject(
    x: ArrayLike | HypothesisDesign,
    y: ArrayLike | None = None,
    *,
    alpha: float = 0.05,
    **kwargs,
) -> bool:
    """
    Decide the Kolmogorov-Smirnov test at significance level alpha.

    Accepts the arguments of ks_test(). Returns True iff p-value < alpha.

    Raises
    ------
    OutOfRangeError
        If alpha is outside (0, 0.5].
    """
    from pydistributions.core.validation import check_significance_level

    alpha = check_significance_level(alpha)
    return ks_test(x, y, **kwargs).reject(alpha)
