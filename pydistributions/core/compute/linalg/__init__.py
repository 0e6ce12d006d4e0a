"""
Linear algebra kernels for PyDistributions.

Submodules:
    rational_matrix: exact square matrices over Fraction (KS exact distribution)
"""

from pydistributions.core.compute.linalg.rational_matrix import RationalMatrix

__all__ = [
    "RationalMatrix",
]
