"""
Base classes for univariate distributions.

AbstractRealDistribution and AbstractIntegerDistribution implement the
DistributionContract defaults: interval probability by CDF subtraction,
inverse CDF through the generic solver, sampling by inversion, and
computed-once moments.

Subclasses supply the closed-form pieces (density/pmf, CDF, moments,
support). A subclass with a closed-form quantile overrides `_inverse`,
which is only ever called with p strictly inside (0, 1).
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from functools import cached_property

import numpy as np
from numpy.typing import NDArray

from pydistributions.core.exceptions import OutOfRangeError, ValidationError
from pydistributions.core.protocols import RandomSource
from pydistributions.core.random import NumpyRandomSource
from pydistributions.core.validation import check_probability
from pydistributions.distributions._inverse import (
    InverseCDFSolver,
    integer_inverse_cumulative_probability,
)

# Integer support sentinels for unbounded discrete distributions
INTEGER_MIN = -2**31
INTEGER_MAX = 2**31 - 1


def _check_sample_size(size: int) -> int:
    if size <= 0:
        raise ValidationError(f"size: number of samples must be positive, got {size}")
    return int(size)


class AbstractRealDistribution(ABC):
    """
    Base class for continuous (real-valued) distributions.

    Args:
        rng: RandomSource used by sample(). Composed samplers must be given
            the same instance. Defaults to a fresh NumpyRandomSource.
        solver: InverseCDFSolver used when no closed-form quantile exists
    """

    def __init__(
        self,
        rng: RandomSource | None = None,
        solver: InverseCDFSolver | None = None,
    ):
        self.random = rng if rng is not None else NumpyRandomSource()
        self.solver = solver if solver is not None else InverseCDFSolver()

    # --- Formulas supplied by subclasses ---

    @abstractmethod
    def density(self, x: float) -> float:
        ...

    @abstractmethod
    def cumulative_probability(self, x: float) -> float:
        """P(X <= x)."""
        ...

    @abstractmethod
    def _mean(self) -> float:
        ...

    @abstractmethod
    def _variance(self) -> float:
        ...

    @property
    @abstractmethod
    def support_lower_bound(self) -> float:
        ...

    @property
    @abstractmethod
    def support_upper_bound(self) -> float:
        ...

    @property
    def is_support_connected(self) -> bool:
        return True

    # --- Derived operations ---

    @cached_property
    def numerical_mean(self) -> float:
        """Mean, computed once (NaN if undefined)."""
        return self._mean()

    @cached_property
    def numerical_variance(self) -> float:
        """Variance, computed once (NaN or inf if undefined)."""
        return self._variance()

    def log_density(self, x: float) -> float:
        d = self.density(x)
        return math.log(d) if d > 0 else -math.inf

    def probability(self, x0: float, x1: float) -> float:
        """
        P(x0 < X <= x1).

        Raises:
            OutOfRangeError: If x0 > x1
        """
        if x0 > x1:
            raise OutOfRangeError(
                f"lower endpoint ({x0}) must be less than or equal to upper endpoint ({x1})",
                value=x0, upper=x1,
            )
        return self.cumulative_probability(x1) - self.cumulative_probability(x0)

    def inverse_cumulative_probability(self, p: float) -> float:
        """
        Quantile: the smallest x with CDF(x) >= p.

        p = 0 returns the support lower bound, p = 1 the upper bound.

        Raises:
            OutOfRangeError: If p is outside [0, 1]
        """
        p = check_probability(p)
        if p == 0.0:
            return self.support_lower_bound
        if p == 1.0:
            return self.support_upper_bound
        return self._inverse(p)

    def _inverse(self, p: float) -> float:
        return self.solver.solve(self, p)

    def sample(self, size: int | None = None) -> float | NDArray[np.floating]:
        """One draw (size=None) or an array of `size` draws."""
        if size is None:
            return self._sample_one()
        size = _check_sample_size(size)
        return np.array([self._sample_one() for _ in range(size)], dtype=np.float64)

    def _sample_one(self) -> float:
        return self.inverse_cumulative_probability(self.random.next_double())

    def reseed(self, seed: int) -> None:
        """Reseed the injected random source."""
        self.random.set_seed(seed)


class AbstractIntegerDistribution(ABC):
    """
    Base class for integer-valued distributions.

    Args:
        rng: RandomSource used by sample(). Defaults to a fresh
            NumpyRandomSource.
    """

    def __init__(self, rng: RandomSource | None = None):
        self.random = rng if rng is not None else NumpyRandomSource()

    @abstractmethod
    def probability(self, x: int) -> float:
        """P(X = x)."""
        ...

    @abstractmethod
    def cumulative_probability(self, x: int) -> float:
        """P(X <= x)."""
        ...

    @abstractmethod
    def _mean(self) -> float:
        ...

    @abstractmethod
    def _variance(self) -> float:
        ...

    @property
    @abstractmethod
    def support_lower_bound(self) -> int:
        ...

    @property
    @abstractmethod
    def support_upper_bound(self) -> int:
        ...

    @property
    def is_support_connected(self) -> bool:
        return True

    @cached_property
    def numerical_mean(self) -> float:
        return self._mean()

    @cached_property
    def numerical_variance(self) -> float:
        return self._variance()

    def density(self, x: int) -> float:
        return self.probability(x)

    def log_probability(self, x: int) -> float:
        pr = self.probability(x)
        return math.log(pr) if pr > 0 else -math.inf

    def cumulative_probability_between(self, x0: int, x1: int) -> float:
        """
        P(x0 < X <= x1).

        Raises:
            OutOfRangeError: If x1 < x0
        """
        if x1 < x0:
            raise OutOfRangeError(
                f"lower endpoint ({x0}) must be less than or equal to upper endpoint ({x1})",
                value=x0, upper=x1,
            )
        return self.cumulative_probability(x1) - self.cumulative_probability(x0)

    def inverse_cumulative_probability(self, p: float) -> int:
        """Smallest integer x with CDF(x) >= p."""
        return integer_inverse_cumulative_probability(self, p)

    def sample(self, size: int | None = None) -> int | NDArray[np.integer]:
        if size is None:
            return self._sample_one()
        size = _check_sample_size(size)
        return np.array([self._sample_one() for _ in range(size)], dtype=np.int64)

    def _sample_one(self) -> int:
        return self.inverse_cumulative_probability(self.random.next_double())

    def reseed(self, seed: int) -> None:
        self.random.set_seed(seed)
