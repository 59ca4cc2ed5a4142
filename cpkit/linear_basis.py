"""XOR linear basis over GF(2)."""

from __future__ import annotations


class LinearBasis:
    """Basis of the XOR span of the inserted ``dim``-bit values."""

    def __init__(self, dim: int = 31) -> None:
        if dim < 0:
            raise ValueError("dim must be non-negative")
        self.dim = dim
        self._basis = [0] * dim
        self._size = 0

    def _check(self, x: int) -> None:
        if not 0 <= x < 1 << self.dim:
            raise ValueError(f"{x} does not fit in {self.dim} bits")

    def insert(self, x: int) -> bool:
        """Add ``x``; return False if it was already in the span."""
        self._check(x)
        for i in reversed(range(self.dim)):
            if x >> i & 1:
                if self._basis[i]:
                    x ^= self._basis[i]
                else:
                    self._basis[i] = x
                    self._size += 1
                    return True
        return False

    def contains(self, x: int) -> bool:
        """True if ``x`` is a XOR of some inserted values."""
        self._check(x)
        for i in reversed(range(self.dim)):
            if x >> i & 1:
                x ^= self._basis[i]
        return x == 0

    __contains__ = contains

    def xor_max(self) -> int:
        """Largest value in the span."""
        ans = 0
        for i in reversed(range(self.dim)):
            if self._basis[i] and not ans >> i & 1:
                ans ^= self._basis[i]
        return ans

    def __len__(self) -> int:
        return self._size