"""
Default RandomSource backed by numpy's Generator.

Consumers receive a RandomSource through their constructor. Composed
samplers (e.g. the Poisson sampler drawing exponentials) are handed the
same instance, so one seed reproduces one stream.
"""

from __future__ import annotations

import numpy as np


class NumpyRandomSource:
    """
    RandomSource wrapping numpy.random.Generator (PCG64).

    The underlying generator is exposed as `generator` so vectorised
    consumers (Monte Carlo permutations) can draw whole batches.
    """

    def __init__(self, seed: int | None = None):
        self._generator = np.random.default_rng(seed)

    @property
    def generator(self) -> np.random.Generator:
        return self._generator

    def next_double(self) -> float:
        return float(self._generator.random())

    def next_gaussian(self) -> float:
        return float(self._generator.standard_normal())

    def set_seed(self, seed: int) -> None:
        self._generator = np.random.default_rng(seed)

    def __repr__(self) -> str:
        return f"NumpyRandomSource({self._generator.bit_generator.__class__.__name__})"
