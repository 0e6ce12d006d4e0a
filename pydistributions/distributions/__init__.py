"""
Probability distributions.

Every distribution receives its RandomSource (and, for continuous ones,
its InverseCDFSolver) by injection. Quantiles fall back to the generic
solver when no closed form exists.

Public API:
    NormalDistribution, UniformRealDistribution, ExponentialDistribution,
    GammaDistribution, BetaDistribution, WeibullDistribution,
    CauchyDistribution, EnumeratedRealDistribution
    PoissonDistribution, BinomialDistribution
    KolmogorovSmirnovDistribution, create_h
    InverseCDFSolver
"""

from pydistributions.distributions.base import (
    INTEGER_MAX,
    INTEGER_MIN,
    AbstractIntegerDistribution,
    AbstractRealDistribution,
)
from pydistributions.distributions._inverse import (
    InverseCDFSolver,
    integer_inverse_cumulative_probability,
)
from pydistributions.distributions.continuous import (
    BetaDistribution,
    CauchyDistribution,
    EnumeratedRealDistribution,
    ExponentialDistribution,
    GammaDistribution,
    NormalDistribution,
    UniformRealDistribution,
    WeibullDistribution,
)
from pydistributions.distributions.discrete import BinomialDistribution, PoissonDistribution
from pydistributions.distributions.kolmogorov_smirnov import (
    KolmogorovSmirnovDistribution,
    create_h,
)

__all__ = [
    "INTEGER_MAX",
    "INTEGER_MIN",
    "AbstractIntegerDistribution",
    "AbstractRealDistribution",
    "InverseCDFSolver",
    "integer_inverse_cumulative_probability",
    "BetaDistribution",
    "CauchyDistribution",
    "EnumeratedRealDistribution",
    "ExponentialDistribution",
    "GammaDistribution",
    "NormalDistribution",
    "UniformRealDistribution",
    "WeibullDistribution",
    "BinomialDistribution",
    "PoissonDistribution",
    "KolmogorovSmirnovDistribution",
    "create_h",
]
