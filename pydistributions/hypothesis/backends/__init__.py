"""
Hypothesis test backends.

Available backends:
    CPUHypothesisBackend: CPU reference implementation
"""

from pydistributions.hypothesis.backends.cpu import CPUHypothesisBackend

__all__ = [
    "CPUHypothesisBackend",
]
