"""Maximum flow by Dinic's algorithm."""

from __future__ import annotations

import math
from collections import deque


class MaxFlow:
    """Flow network over vertices ``0 .. n-1``."""

    def __init__(self, n: int) -> None:
        self.n = n
        # each edge: [to, index of reverse edge, residual capacity]
        self._graph: list[list[list[int]]] = [[] for _ in range(n)]

    def add_edge(self, u: int, v: int, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._graph[u].append([v, len(self._graph[v]), capacity])
        self._graph[v].append([u, len(self._graph[u]) - 1, 0])

    def _levels(self, s: int) -> list[int]:
        level = [-1] * self.n
        level[s] = 0
        queue = deque([s])
        while queue:
            u = queue.popleft()
            for to, _, cap in self._graph[u]:
                if cap and level[to] == -1:
                    level[to] = level[u] + 1
                    queue.append(to)
        return level

    def flow(self, s: int, t: int) -> int:
        """Push the maximum flow from ``s`` to ``t`` and return its value."""
        if s == t:
            raise ValueError("source and sink must differ")
        graph = self._graph
        total = 0
        while True:
            level = self._levels(s)
            if level[t] < 0:
                return total
            pointer = [0] * self.n

            def push(u: int, limit) -> int:
                if u == t:
                    return limit
                pushed = 0
                edges = graph[u]
                while pointer[u] < len(edges) and limit:
                    edge = edges[pointer[u]]
                    to, rev, cap = edge
                    if cap and level[to] == level[u] + 1:
                        d = push(to, min(limit, cap))
                        if d:
                            edge[2] -= d
                            graph[to][rev][2] += d
                            pushed += d
                            limit -= d
                            if not limit:
                                break
                    pointer[u] += 1
                return pushed

            total += push(s, math.inf)

    def min_cut(self, s: int) -> list[bool]:
        """Vertices reachable from ``s`` in the residual network; call after ``flow``."""
        seen = [False] * self.n
        seen[s] = True
        queue = deque([s])
        while queue:
            u = queue.popleft()
            for to, _, cap in self._graph[u]:
                if cap and not seen[to]:
                    seen[to] = True
                    queue.append(to)
        return seen