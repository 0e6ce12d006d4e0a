"""
HypothesisDesign: validated inputs of a Kolmogorov-Smirnov test.

Uses a factory classmethod. The `test_type` field identifies which
fields are populated. Immutable after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray, ArrayLike

from pydistributions.core.exceptions import ValidationError
from pydistributions.core.protocols import DistributionContract, RandomSource
from pydistributions.core.validation import check_positive, check_sample
from pydistributions.hypothesis._common import (
    DEFAULT_KS_CONFIG,
    VALID_KS_METHODS,
    KSConfig,
)


def _validate_method(method: str) -> str:
    if method not in VALID_KS_METHODS:
        raise ValidationError(
            f"method must be one of {VALID_KS_METHODS}, got {method!r}"
        )
    return method


def _resolve_distribution(
    distribution: DistributionContract | str | None,
    dist_params: dict[str, float],
) -> DistributionContract:
    """Map an R-style distribution name ("norm", "unif", "exp") to an instance."""
    from pydistributions.distributions import (
        ExponentialDistribution,
        NormalDistribution,
        UniformRealDistribution,
    )

    if distribution is None:
        distribution = "norm"
    if not isinstance(distribution, str):
        if dist_params:
            raise ValidationError(
                "distribution parameters are only accepted with a distribution name"
            )
        return distribution

    name = distribution.lower()
    if name in ("norm", "pnorm"):
        return NormalDistribution(
            dist_params.get("mean", 0.0), dist_params.get("sd", 1.0),
        )
    if name in ("unif", "punif"):
        return UniformRealDistribution(
            dist_params.get("min", 0.0), dist_params.get("max", 1.0),
        )
    if name in ("exp", "pexp"):
        rate = check_positive(dist_params.get("rate", 1.0), "rate")
        return ExponentialDistribution(1.0 / rate)
    raise ValidationError(
        f"Unknown distribution: {distribution!r}. "
        f"Supported: ['norm', 'unif', 'exp'] or a distribution instance"
    )


@dataclass(frozen=True)
class HypothesisDesign:
    """
    Design for Kolmogorov-Smirnov tests.

    Do not construct directly; use HypothesisDesign.for_ks_test.
    """
    test_type: str

    _x: NDArray[np.floating[Any]] | None = None
    _y: NDArray[np.floating[Any]] | None = None
    _distribution: DistributionContract | None = None

    # Engine configuration
    _exact: bool = False
    _strict: bool = False
    _method: str = "auto"
    _n_monte_carlo: int = DEFAULT_KS_CONFIG.monte_carlo_iterations
    _config: KSConfig = DEFAULT_KS_CONFIG
    _rng: RandomSource | None = None

    # Metadata
    _data_name: str = ""

    # --- Properties ---

    @property
    def x(self) -> NDArray[np.floating[Any]] | None:
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]] | None:
        return self._y

    @property
    def distribution(self) -> DistributionContract | None:
        return self._distribution

    @property
    def exact(self) -> bool:
        return self._exact

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def method(self) -> str:
        return self._method

    @property
    def n_monte_carlo(self) -> int:
        return self._n_monte_carlo

    @property
    def config(self) -> KSConfig:
        return self._config

    @property
    def rng(self) -> RandomSource | None:
        return self._rng

    @property
    def data_name(self) -> str:
        return self._data_name

    # --- Factory classmethods ---

    @classmethod
    def for_ks_test(
        cls,
        x: ArrayLike,
        y: ArrayLike | None = None,
        *,
        distribution: DistributionContract | str | None = None,
        exact: bool = False,
        strict: bool = False,
        method: str = "auto",
        n_monte_carlo: int | None = None,
        config: KSConfig | None = None,
        rng: RandomSource | None = None,
        **dist_params: float,
    ) -> HypothesisDesign:
        """
        Build design for ks_test().

        Parameters
        ----------
        x : array-like
            Numeric vector of observations (at least 2, all finite).
        y : array-like or None
            Second sample for the two-sample test, OR None for one-sample.
        distribution : DistributionContract, str or None
            Reference distribution of the one-sample test: an instance, or
            one of "norm", "unif", "exp" with **dist_params. Defaults to
            the standard normal.
        exact : bool
            One-sample only: evaluate the null CDF in exact rationals.
        strict : bool
            Two-sample only: p-value is P(D > d) if True, else P(D >= d) (default).
            True with a one-sample design raises ValidationError.
        method : str
            Two-sample algorithm: "auto", "exact", "enumerate",
            "monte_carlo" or "asymptotic".
        n_monte_carlo : int or None
            Monte Carlo replicates; defaults to config.monte_carlo_iterations.
        config : KSConfig or None
            Engine tuning; defaults to DEFAULT_KS_CONFIG.
        rng : RandomSource or None
            Random source of the Monte Carlo algorithm; two-sample only.
        """
        method = _validate_method(method)
        config = config if config is not None else DEFAULT_KS_CONFIG
        if n_monte_carlo is None:
            n_monte_carlo = config.monte_carlo_iterations
        if n_monte_carlo < 1:
            raise ValidationError(
                f"n_monte_carlo must be positive, got {n_monte_carlo}"
            )

        x_arr = check_sample(x, "x")

        if y is not None:
            if distribution is not None or dist_params:
                raise ValidationError(
                    "give either a second sample y or a reference distribution, not both"
                )
            y_arr = check_sample(y, "y")
            return cls(
                test_type="ks_two_sample",
                _x=x_arr,
                _y=y_arr,
                _strict=strict,
                _method=method,
                _n_monte_carlo=int(n_monte_carlo),
                _config=config,
                _rng=rng,
                _data_name="x and y",
            )

        if method != "auto":
            raise ValidationError(
                f"method={method!r} applies to the two-sample test only"
            )
        if strict:
            raise ValidationError("strict=True applies to the two-sample test only")
        if rng is not None:
            raise ValidationError(
                "rng applies to the two-sample Monte Carlo test only"
            )

        return cls(
            test_type="ks_one_sample",
            _x=x_arr,
            _distribution=_resolve_distribution(distribution, dict(dist_params)),
            _exact=exact,
            _config=config,
            _data_name="x",
        )

    def __repr__(self) -> str:
        n_x = len(self._x) if self._x is not None else 0
        if self._y is not None:
            return (
                f"HypothesisDesign(test_type={self.test_type!r}, "
                f"n_x={n_x}, n_y={len(self._y)})"
            )
        return (
            f"HypothesisDesign(test_type={self.test_type!r}, n={n_x})"
        )
