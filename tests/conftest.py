"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pydistributions.core.random import NumpyRandomSource


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_source():
    """Seeded RandomSource for distributions and Monte Carlo."""
    return NumpyRandomSource(seed=42)
