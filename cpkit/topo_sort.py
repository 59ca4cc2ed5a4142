"""Topological sorting by Kahn's algorithm."""

from __future__ import annotations

from collections import deque


class TopoSorter:
    """Collect edges, then ``build`` a topological order of ``0 .. n-1``."""

    def __init__(self, n: int) -> None:
        self.n = n
        self._graph: list[list[int]] = [[] for _ in range(n)]
        self._indegree = [0] * n
        self.order: list[int] = []
        self._built = False

    def add_edge(self, u: int, v: int) -> None:
        self._graph[u].append(v)
        self._indegree[v] += 1

    def build(self) -> list[int]:
        """Compute the order; vertices on or behind a cycle are left out."""
        indegree = list(self._indegree)
        queue = deque(u for u in range(self.n) if not indegree[u])
        order = []
        while queue:
            u = queue.popleft()
            order.append(u)
            for v in self._graph[u]:
                indegree[v] -= 1
                if indegree[v] == 0:
                    queue.append(v)
        self.order = order
        self._built = True
        return order

    def is_dag(self) -> bool:
        if not self._built:
            raise RuntimeError("call build() first")
        return len(self.order) == self.n

    def __getitem__(self, index: int) -> int:
        if not self._built:
            raise RuntimeError("call build() first")
        return self.order[index]