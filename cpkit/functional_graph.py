"""Graphs where every vertex has exactly one outgoing edge."""

from __future__ import annotations

from typing import Callable


class FunctionalGraph:
    """The graph of ``f`` on ``0 .. n-1``: jumps, reverse edges and cycles."""

    def __init__(self, n: int, f: Callable[[int], int]) -> None:
        self.n = n
        self.f = f
        self._next = [f(i) for i in range(n)]
        self.jumptable: list[list[int]] = []
        self.levels = -1
        self.reverse: list[list[int]] = []
        self.cycle_into: list[int] = []
        self.cycle_len: list[int] = []

    def build_jumptable(self, levels: int) -> None:
        """Prepare jumps of ``2**0 .. 2**levels`` steps."""
        self.levels = levels
        table = [list(self._next)]
        for _ in range(levels):
            prev = table[-1]
            table.append([prev[prev[j]] for j in range(self.n)])
        self.jumptable = table

    def jump(self, u: int, steps: int) -> int:
        """Vertex reached from ``u`` after ``steps`` applications of ``f``."""
        if self.levels < 0:
            raise RuntimeError("call build_jumptable() first")
        if not 0 <= steps < 1 << (self.levels + 1):
            raise ValueError(f"steps must lie in 0..{(1 << (self.levels + 1)) - 1}")
        for row in self.jumptable:
            if steps & 1:
                u = row[u]
            steps >>= 1
        return u

    def build_reverse(self) -> None:
        self.reverse = [[] for _ in range(self.n)]
        for i, j in enumerate(self._next):
            self.reverse[j].append(i)

    def build_cycle(self) -> None:
        """Set ``cycle_into`` (the cycle vertex each vertex drains into) and
        ``cycle_len`` (cycle length for cycle vertices, -1 elsewhere)."""
        nxt = self._next
        self.build_reverse()
        into = [-1] * self.n
        length = [-1] * self.n
        for start in range(self.n):
            if into[start] != -1:
                continue
            slow, fast = nxt[start], nxt[nxt[start]]
            while slow != fast:
                slow, fast = nxt[slow], nxt[nxt[fast]]
            fast = start
            while slow != fast:
                slow, fast = nxt[slow], nxt[fast]
            cycle = [slow]
            x = nxt[slow]
            while x != slow:
                cycle.append(x)
                x = nxt[x]
            for c in cycle:
                into[c] = c
            for c in cycle:
                length[c] = len(cycle)
                stack = [c]
                while stack:
                    u = stack.pop()
                    for v in self.reverse[u]:
                        if into[v] == -1:
                            into[v] = c
                            stack.append(v)
        self.cycle_into = into
        self.cycle_len = length