"""Single-source and all-pairs shortest paths."""

from __future__ import annotations

import heapq
from collections import deque
from typing import Sequence

INF = 10**18

WeightedGraph = Sequence[Sequence[tuple[int, int]]]


def dijkstra(graph: WeightedGraph, src: int) -> list[int]:
    """Distances from ``src`` with non-negative weights; ``INF`` if unreachable."""
    dist = [INF] * len(graph)
    dist[src] = 0
    heap = [(0, src)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for v, w in graph[u]:
            if d + w < dist[v]:
                dist[v] = d + w
                heapq.heappush(heap, (dist[v], v))
    return dist


def floyd(adj: Sequence[Sequence[int]]) -> list[list[int]]:
    """All-pairs shortest distances from an adjacency matrix (``INF`` for no edge)."""
    dist = [list(row) for row in adj]
    n = len(dist)
    for k in range(n):
        row_k = dist[k]
        for i in range(n):
            dik = dist[i][k]
            row_i = dist[i]
            for j in range(n):
                if dik + row_k[j] < row_i[j]:
                    row_i[j] = dik + row_k[j]
    return dist


def bfs01(graph: WeightedGraph, src: int) -> list[int]:
    """Distances from ``src`` where every weight is 0 or 1."""
    dist = [INF] * len(graph)
    dist[src] = 0
    queue = deque([src])
    while queue:
        u = queue.popleft()
        for v, w in graph[u]:
            if w not in (0, 1):
                raise ValueError("bfs01 needs weights of 0 or 1")
            if dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                if w:
                    queue.append(v)
                else:
                    queue.appendleft(v)
    return dist