"""Classic string algorithms: borders, hashing, Z, palindromes, rotations and
suffix arrays."""

from __future__ import annotations

_MASK = (1 << 64) - 1


def prefix_function(s: str) -> list[int]:
    """Border table of length ``len(s) + 1``.

    Entry ``k`` is the length of the longest proper border of ``s[:k]``.
    """
    n = len(s)
    p = [0] * (n + 1)
    j = 0
    for i in range(1, n):
        while j and s[i] != s[j]:
            j = p[j]
        if s[i] == s[j]:
            j += 1
        p[i + 1] = j
    return p


class StringHash:
    """Polynomial rolling hash modulo ``2**64``."""

    def __init__(self, s: str, base: int) -> None:
        self.n = len(s)
        self._h = [0] * (self.n + 1)
        self._power = [1] * (self.n + 1)
        for i, c in enumerate(s, 1):
            self._h[i] = (self._h[i - 1] * base + ord(c)) & _MASK
            self._power[i] = (self._power[i - 1] * base) & _MASK

    def get(self, left: int = 0, right: int | None = None) -> int:
        """Hash of ``s[left .. right]`` inclusive; the whole string by default."""
        if right is None:
            right = self.n - 1
        if not 0 <= left <= right + 1 <= self.n:
            raise IndexError(f"range [{left}, {right}] outside the string")
        return (self._h[right + 1] - self._h[left] * self._power[right - left + 1]) & _MASK


def z_function(s: str) -> list[int]:
    """Entry ``i`` is the longest common prefix of ``s`` and ``s[i:]``; entry 0 is 0."""
    n = len(s)
    z = [0] * n
    left = right = 0
    for i in range(1, n):
        if i <= right:
            z[i] = min(z[i - left], right - i + 1)
        while i + z[i] < n and s[i + z[i]] == s[z[i]]:
            z[i] += 1
        if i + z[i] - 1 > right:
            left, right = i, i + z[i] - 1
    return z


class Manacher:
    """Palindrome radii.

    ``d1[i]`` is the largest ``j`` with ``s[i-j .. i+j]`` a palindrome;
    ``d2[i]`` the largest ``j`` with ``s[i-j+1 .. i+j]`` a palindrome.
    """

    def __init__(self, s: str) -> None:
        n = len(s)
        self.n = n
        self.d1 = [0] * n
        self.d2 = [0] * n
        left, right = 0, -1
        for i in range(n):
            k = min(self.d1[left + right - i], right - i) if i <= right else 0
            while i - k - 1 >= 0 and i + k + 1 < n and s[i - k - 1] == s[i + k + 1]:
                k += 1
            self.d1[i] = k
            if i + k > right:
                left, right = i - k, i + k
        left, right = 0, -1
        for i in range(n):
            k = min(self.d2[left + right - i - 1], right - i) if i < right else 0
            while i - k >= 0 and i + k + 1 < n and s[i - k] == s[i + k + 1]:
                k += 1
            self.d2[i] = k
            if i + k > right:
                left, right = i - k + 1, i + k

    def len_odd(self, i: int) -> int:
        """Length of the longest odd palindrome centred at ``i``."""
        return self.d1[i] * 2 + 1

    def len_even(self, i: int) -> int:
        """Length of the longest even palindrome centred between ``i`` and ``i+1``."""
        return self.d2[i] * 2

    def is_palindrome(self, left: int, right: int) -> bool:
        """True if ``s[left .. right]`` reads the same both ways."""
        if not 0 <= left <= right < self.n:
            raise IndexError(f"range [{left}, {right}] outside the string")
        length = right - left + 1
        mid = (left + right) // 2
        if length % 2:
            return self.len_odd(mid) >= length
        return self.len_even(mid) >= length


def minimum_rotation(s: str) -> int:
    """Start index of the lexicographically smallest rotation of ``s``."""
    n = len(s)
    i, j, k = 0, 1, 0
    while i < n and j < n and k < n:
        a, b = s[(i + k) % n], s[(j + k) % n]
        if a == b:
            k += 1
            continue
        if a > b:
            i += k + 1
        else:
            j += k + 1
        if i == j:
            i += 1
        k = 0
    return min(i, j)


def suffix_array(s: str) -> list[int]:
    """Start positions of the suffixes of ``s`` in sorted order (prefix doubling)."""
    n = len(s)
    if n == 0:
        return []
    rank = [ord(c) for c in s]
    width = 1
    while True:
        def key(i: int, rank=rank, width=width) -> tuple[int, int]:
            return rank[i], rank[i + width] if i + width < n else -1

        sa = sorted(range(n), key=key)
        new_rank = [0] * n
        for prev, cur in zip(sa, sa[1:]):
            new_rank[cur] = new_rank[prev] + (key(prev) != key(cur))
        rank = new_rank
        if rank[sa[-1]] == n - 1:
            return sa
        width *= 2