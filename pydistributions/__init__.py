"""
PyDistributions: probability distributions and Kolmogorov-Smirnov tests.

Submodules:
    core: Protocols, errors, validation, exact rationals
    distributions: Continuous and discrete distributions, generic
        inverse CDF solver, one-sample KS distribution
    hypothesis: Kolmogorov-Smirnov tests
"""

__version__ = "0.1.0"

from pydistributions import distributions
from pydistributions import hypothesis
from pydistributions.hypothesis import ks_test, ks_reject

__all__ = [
    "__version__",
    "distributions",
    "hypothesis",
    "ks_test",
    "ks_reject",
]
