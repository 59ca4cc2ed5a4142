"""Minimum spanning forest by Kruskal's algorithm."""

from __future__ import annotations

from cpkit.union_find import UnionFind


class MST:
    """Collect weighted edges, then ``build`` the minimum spanning forest."""

    def __init__(self, n: int) -> None:
        self.n = n
        self.edges: list[tuple[int, int, int]] = []
        self.tree: list[tuple[int, int]] = []
        self.cost = 0
        self.connected = False

    def add_edge(self, u: int, v: int, w: int) -> None:
        self.edges.append((u, v, w))

    def build(self) -> int:
        """Pick the forest edges and return its total weight."""
        uf = UnionFind(self.n)
        self.tree = []
        self.cost = 0
        for u, v, w in sorted(self.edges, key=lambda e: e[2]):
            if uf.merge(u, v):
                self.cost += w
                self.tree.append((u, v))
        self.connected = uf.num_components == 1
        return self.cost