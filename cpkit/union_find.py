"""Disjoint-set union with path compression and union by size."""

from __future__ import annotations


class UnionFind:
    """Disjoint sets over the elements ``0 .. n-1``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n
        self.num_components = n
        self._parent = list(range(n))
        self._size = [1] * n

    def _check(self, u: int) -> None:
        if not 0 <= u < self.n:
            raise IndexError(f"element {u} out of range 0..{self.n - 1}")

    def find(self, u: int) -> int:
        """Return the representative of the set containing ``u``."""
        self._check(u)
        root = u
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[u] != root:
            self._parent[u], u = root, self._parent[u]
        return root

    def is_connected(self, u: int, v: int) -> bool:
        return self.find(u) == self.find(v)

    def merge(self, u: int, v: int) -> bool:
        """Join the sets of ``u`` and ``v``; return False if already joined."""
        pu, pv = self.find(u), self.find(v)
        if pu == pv:
            return False
        if self._size[pu] > self._size[pv]:
            pu, pv = pv, pu
        self._parent[pu] = pv
        self._size[pv] += self._size[pu]
        self.num_components -= 1
        return True

    def size(self, u: int) -> int:
        """Number of elements in the set containing ``u``."""
        return self._size[self.find(u)]

    def leaders(self) -> list[int]:
        """Representatives of all sets, in increasing order."""
        return [i for i in range(self.n) if self.find(i) == i]

    def components(self) -> dict[int, list[int]]:
        """Map each representative to the sorted members of its set."""
        groups: dict[int, list[int]] = {}
        for i in range(self.n):
            groups.setdefault(self.find(i), []).append(i)
        return dict(sorted(groups.items()))