"""
Square matrices over exact rationals.

Used by the exact Kolmogorov-Smirnov distribution, where H^n must be
computed without any rounding: every entry stays a Fraction through all
multiplications, so no error accumulates. Matrices there are small
(m = 2*ceil(n*d) - 1), so plain triple-loop products are adequate.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Any, Iterable, Sequence

import numpy as np
from numpy.typing import NDArray

from pydistributions.core.compute.rational import rational_to_float
from pydistributions.core.exceptions import DimensionError, OutOfRangeError


class RationalMatrix:
    """
    Immutable square matrix of Fractions.

    Args:
        data: Square nested sequence; entries are coerced with Fraction()
    """

    __slots__ = ('_rows', '_m')

    def __init__(self, data: Sequence[Sequence[Any]]):
        rows = tuple(tuple(Fraction(v) for v in row) for row in data)
        m = len(rows)
        if m == 0:
            raise DimensionError("RationalMatrix: matrix must have at least one row")
        for i, row in enumerate(rows):
            if len(row) != m:
                raise DimensionError(
                    f"RationalMatrix: expected square matrix, row {i} has "
                    f"{len(row)} entries for {m} rows"
                )
        self._rows = rows
        self._m = m

    @classmethod
    def identity(cls, m: int) -> RationalMatrix:
        """m x m identity matrix."""
        one, zero = Fraction(1), Fraction(0)
        return cls([[one if i == j else zero for j in range(m)] for i in range(m)])

    @property
    def dimension(self) -> int:
        """Number of rows (== number of columns)."""
        return self._m

    def entry(self, i: int, j: int) -> Fraction:
        return self._rows[i][j]

    def __getitem__(self, index: tuple[int, int]) -> Fraction:
        i, j = index
        return self._rows[i][j]

    def rows(self) -> tuple[tuple[Fraction, ...], ...]:
        return self._rows

    def multiply(self, other: RationalMatrix) -> RationalMatrix:
        """Exact matrix product self @ other."""
        if other._m != self._m:
            raise DimensionError(
                f"RationalMatrix: cannot multiply {self._m}x{self._m} by "
                f"{other._m}x{other._m}"
            )
        columns = list(zip(*other._rows))
        return RationalMatrix._from_rows(
            tuple(
                tuple(_dot(row, col) for col in columns)
                for row in self._rows
            ),
            self._m,
        )

    def __matmul__(self, other: RationalMatrix) -> RationalMatrix:
        return self.multiply(other)

    def power(self, n: int) -> RationalMatrix:
        """
        Raise to a non-negative integer power by repeated squaring.

        Raises:
            OutOfRangeError: If n is negative
        """
        if n < 0:
            raise OutOfRangeError(
                f"power: exponent must be non-negative, got {n}",
                value=n, lower=0,
            )
        result: RationalMatrix | None = None
        base = self
        while n > 0:
            if n & 1:
                result = base if result is None else result.multiply(base)
            n >>= 1
            if n:
                base = base.multiply(base)
        return result if result is not None else RationalMatrix.identity(self._m)

    def to_array(self) -> NDArray[np.floating[Any]]:
        """Float copy, each entry converted with rational_to_float."""
        return np.array(
            [[rational_to_float(v) for v in row] for row in self._rows],
            dtype=np.float64,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RationalMatrix):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"RationalMatrix({self._m}x{self._m})"

    @classmethod
    def _from_rows(cls, rows: tuple[tuple[Fraction, ...], ...], m: int) -> RationalMatrix:
        # rows already validated and converted
        obj = cls.__new__(cls)
        obj._rows = rows
        obj._m = m
        return obj


def _dot(row: Iterable[Fraction], col: Iterable[Fraction]) -> Fraction:
    total = Fraction(0)
    for a, b in zip(row, col):
        if a and b:
            total += a * b
    return total
