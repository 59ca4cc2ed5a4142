"""Reachability between all pairs of vertices."""

from __future__ import annotations


class TransitiveClosure:
    """Warshall's algorithm over ``n`` vertices."""

    def __init__(self, n: int) -> None:
        self.n = n
        self._reach = [[False] * n for _ in range(n)]

    def add_edge(self, u: int, v: int) -> None:
        self._reach[u][v] = True

    def build(self) -> None:
        reach = self._reach
        for k in range(self.n):
            row_k = reach[k]
            for row in reach:
                if row[k]:
                    for j, r in enumerate(row_k):
                        if r:
                            row[j] = True

    def is_connected(self, u: int, v: int) -> bool:
        """True if a path of at least one edge leads from ``u`` to ``v``."""
        return self._reach[u][v]