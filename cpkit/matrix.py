"""Dense matrices with exact arithmetic."""

from __future__ import annotations

from fractions import Fraction
from typing import Sequence


class Matrix:
    """An ``m`` by ``n`` matrix of numbers."""

    def __init__(self, rows: Sequence[Sequence]) -> None:
        self._rows = [list(row) for row in rows]
        self.m = len(self._rows)
        self.n = len(self._rows[0]) if self._rows else 0
        if any(len(row) != self.n for row in self._rows):
            raise ValueError("rows differ in length")

    @classmethod
    def zeros(cls, m: int, n: int) -> Matrix:
        return cls([[0] * n for _ in range(m)])

    @classmethod
    def identity(cls, n: int) -> Matrix:
        return cls([[int(i == j) for j in range(n)] for i in range(n)])

    def shape(self) -> tuple[int, int]:
        return self.m, self.n

    def __getitem__(self, i: int) -> list:
        return self._rows[i]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return f"Matrix({self._rows!r})"

    def __neg__(self) -> Matrix:
        return Matrix([[-x for x in row] for row in self._rows])

    def _same_shape(self, other: Matrix) -> None:
        if self.shape() != other.shape():
            raise ValueError(f"shapes differ: {self.shape()} and {other.shape()}")

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._same_shape(other)
        return Matrix(
            [[a + b for a, b in zip(r1, r2)] for r1, r2 in zip(self._rows, other._rows)]
        )

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self + (-other)

    def __mul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.n != other.m:
            raise ValueError(f"cannot multiply {self.shape()} by {other.shape()}")
        cols = list(zip(*other._rows))
        return Matrix(
            [[sum(a * b for a, b in zip(row, col)) for col in cols] for row in self._rows]
        )

    def __pow__(self, exponent: int) -> Matrix:
        if self.m != self.n:
            raise ValueError("only square matrices have powers")
        if exponent < 0:
            raise ValueError("exponent must be non-negative")
        result, base = Matrix.identity(self.n), self
        while exponent:
            if exponent & 1:
                result = result * base
            base = base * base
            exponent >>= 1
        return result

    def determinant(self):
        """Determinant by Gaussian elimination, computed exactly."""
        if self.m != self.n:
            raise ValueError("only square matrices have determinants")
        n = self.n
        rows = [[Fraction(x) if isinstance(x, int) else x for x in row] for row in self._rows]
        det = Fraction(1)
        for i in range(n):
            pivot = next((j for j in range(i, n) if rows[j][i] != 0), None)
            if pivot is None:
                return 0
            if pivot != i:
                rows[i], rows[pivot] = rows[pivot], rows[i]
                det = -det
            det *= rows[i][i]
            lead = rows[i][i]
            rows[i] = [x / lead for x in rows[i]]
            for j in range(i + 1, n):
                factor = rows[j][i]
                rows[j] = [a - b * factor for a, b in zip(rows[j], rows[i])]
        if isinstance(det, Fraction) and det.denominator == 1:
            return int(det)
        return det