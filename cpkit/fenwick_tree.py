"""Fenwick tree with range add and range sum, 1-indexed."""

from __future__ import annotations


class FenwickTree:
    """Positions ``1 .. n``, all zero at first."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n
        self._a = [0] * (n + 1)
        self._b = [0] * (n + 1)

    def _update(self, tree: list, i: int, x) -> None:
        while i <= self.n:
            tree[i] += x
            i += i & -i

    @staticmethod
    def _prefix(tree: list, i: int):
        total = 0
        while i > 0:
            total += tree[i]
            i -= i & -i
        return total

    def _check_range(self, left: int, right: int) -> None:
        if not 1 <= left <= right <= self.n:
            raise IndexError(f"range [{left}, {right}] outside 1..{self.n}")

    def add(self, left: int, right: int, x) -> None:
        """Add ``x`` to every position in ``[left, right]``."""
        self._check_range(left, right)
        self._update(self._a, left, x)
        self._update(self._a, right + 1, -x)
        self._update(self._b, left, x * (left - 1))
        self._update(self._b, right + 1, -x * right)

    def prefix_sum(self, i: int):
        """Sum of positions ``1 .. i``."""
        if not 0 <= i <= self.n:
            raise IndexError(f"prefix {i} outside 0..{self.n}")
        return self._prefix(self._a, i) * i - self._prefix(self._b, i)

    def sum(self, left: int, right: int):
        """Sum of positions ``left .. right``."""
        self._check_range(left, right)
        return self.prefix_sum(right) - self.prefix_sum(left - 1)