"""
Hypothesis testing module.

Public API:
    ks_test(x, y)             - Kolmogorov-Smirnov test (one- or two-sample)
    ks_reject(x, y, alpha)    - Kolmogorov-Smirnov decision at level alpha
    KolmogorovSmirnovTest     - Statistic and p-value engine
"""

from pydistributions.hypothesis.solvers import ks_test, ks_reject
from pydistributions.hypothesis.design import HypothesisDesign
from pydistributions.hypothesis._common import HTestParams, KSConfig, DEFAULT_KS_CONFIG
from pydistributions.hypothesis.solution import HTestSolution
from pydistributions.hypothesis.backends._ks_test import KolmogorovSmirnovTest

__all__ = [
    "ks_test",
    "ks_reject",
    "KolmogorovSmirnovTest",
    "HypothesisDesign",
    "HTestParams",
    "HTestSolution",
    "KSConfig",
    "DEFAULT_KS_CONFIG",
]
