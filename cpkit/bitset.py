"""Fixed-size bitset with single-bit and range operations."""

from __future__ import annotations


class Bitset:
    """``n`` bits, all cleared at first."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n
        self._bits = 0

    def __len__(self) -> int:
        return self.n

    def _check(self, i: int) -> None:
        if not 0 <= i < self.n:
            raise IndexError(f"bit {i} out of range 0..{self.n - 1}")

    def get(self, i: int) -> bool:
        self._check(i)
        return bool(self._bits >> i & 1)

    def set(self, i: int) -> None:
        self._check(i)
        self._bits |= 1 << i

    def clear(self, i: int) -> None:
        self._check(i)
        self._bits &= ~(1 << i)

    def flip(self, i: int) -> None:
        self._check(i)
        self._bits ^= 1 << i

    def _range_mask(self, left: int, right: int) -> int:
        self._check(left)
        self._check(right)
        return ((1 << (right - left + 1)) - 1) << left

    def flip_range(self, left: int, right: int) -> None:
        """Flip every bit in the inclusive range ``[left, right]``."""
        if left > right:
            return
        self._bits ^= self._range_mask(left, right)

    def count(self, left: int, right: int) -> int:
        """Number of set bits in the inclusive range ``[left, right]``."""
        if left > right:
            return 0
        return bin(self._bits & self._range_mask(left, right)).count("1")