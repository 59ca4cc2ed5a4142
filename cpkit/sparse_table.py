"""Sparse table for idempotent range queries."""

from __future__ import annotations

from typing import Any, Callable, Sequence


class SparseTable:
    """O(1) range queries for an idempotent ``op`` such as min, max or gcd."""

    def __init__(self, values: Sequence, op: Callable[[Any, Any], Any] = min) -> None:
        self.op = op
        self.n = len(values)
        self._table = [list(values)]
        k = 1
        while 1 << k <= self.n:
            prev = self._table[-1]
            half = 1 << (k - 1)
            self._table.append(
                [op(prev[j], prev[j + half]) for j in range(self.n - (1 << k) + 1)]
            )
            k += 1

    def query(self, left: int, right: int):
        """Combine the values at indices ``left .. right`` inclusive."""
        if not 0 <= left <= right < self.n:
            raise IndexError(f"range [{left}, {right}] outside 0..{self.n - 1}")
        j = (right - left + 1).bit_length() - 1
        row = self._table[j]
        return self.op(row[left], row[right - (1 << j) + 1])