"""Maximum bipartite matching by augmenting paths."""

from __future__ import annotations

from typing import Sequence


def max_bipartite_matching(graph: Sequence[Sequence[int]], m: int) -> tuple[int, list[int]]:
    """Match left vertices ``0 .. len(graph)-1`` to right vertices ``0 .. m-1``.

    Returns the matching size and, for each right vertex, its partner or -1.
    """
    match = [-1] * m

    def augment(u: int, seen: list[bool]) -> bool:
        for v in graph[u]:
            if not seen[v]:
                seen[v] = True
                if match[v] == -1 or augment(match[v], seen):
                    match[v] = u
                    return True
        return False

    count = sum(augment(u, [False] * m) for u in range(len(graph)))
    return count, match