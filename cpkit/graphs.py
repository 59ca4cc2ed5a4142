"""Graph algorithms on adjacency lists: bipartiteness, SCCs, bridges,
articulation points, dominators and girth."""

from __future__ import annotations

from collections import deque
from typing import Sequence

Graph = Sequence[Sequence[int]]


def is_bipartite(graph: Graph) -> bool:
    """True if the vertices can be two-coloured with no edge inside a colour."""
    n = len(graph)
    color = [-1] * n
    for start in range(n):
        if color[start] != -1:
            continue
        color[start] = 0
        queue = deque([start])
        while queue:
            u = queue.popleft()
            for v in graph[u]:
                if color[v] == -1:
                    color[v] = color[u] ^ 1
                    queue.append(v)
                elif color[v] == color[u]:
                    return False
    return True


class StronglyConnectedComponents:
    """Kosaraju's algorithm.

    Attributes: ``count`` components, ``id`` per vertex, ``components``
    (members of each), ``condensation`` (component DAG, with repeated edges)
    and ``topo`` (a topological order of the components). Components are
    numbered so that no edge goes from a higher to a lower number's source.
    """

    def __init__(self, graph: Graph) -> None:
        n = len(graph)
        self.n = n
        visited = [False] * n
        post: list[int] = []
        for root in range(n):
            if visited[root]:
                continue
            visited[root] = True
            stack = [(root, iter(graph[root]))]
            while stack:
                u, it = stack[-1]
                for v in it:
                    if not visited[v]:
                        visited[v] = True
                        stack.append((v, iter(graph[v])))
                        break
                else:
                    stack.pop()
                    post.append(u)

        reverse: list[list[int]] = [[] for _ in range(n)]
        for u in range(n):
            for v in graph[u]:
                reverse[v].append(u)

        self.id = [-1] * n
        self.components: list[list[int]] = []
        for root in reversed(post):
            if self.id[root] != -1:
                continue
            idx = len(self.components)
            members = [root]
            self.id[root] = idx
            stack = [iter(reverse[root])]
            while stack:
                for v in stack[-1]:
                    if self.id[v] == -1:
                        self.id[v] = idx
                        members.append(v)
                        stack.append(iter(reverse[v]))
                        break
                else:
                    stack.pop()
            self.components.append(members)
        self.count = len(self.components)

        self.condensation: list[list[int]] = [[] for _ in range(self.count)]
        indegree = [0] * self.count
        for u in range(n):
            for v in graph[u]:
                x, y = self.id[u], self.id[v]
                if x != y:
                    self.condensation[x].append(y)
                    indegree[y] += 1
        queue = deque(i for i in range(self.count) if not indegree[i])
        self.topo: list[int] = []
        while queue:
            u = queue.popleft()
            self.topo.append(u)
            for v in self.condensation[u]:
                indegree[v] -= 1
                if indegree[v] == 0:
                    queue.append(v)


class Bridges:
    """Bridges of an undirected graph, as ``(min, max)`` vertex pairs."""

    def __init__(self, graph: Graph) -> None:
        n = len(graph)
        self.n = n
        self.tin = [0] * n
        self.low = [0] * n
        self.bridges: list[tuple[int, int]] = []
        tin, low = self.tin, self.low
        timer = 0
        for root in range(n):
            if tin[root]:
                continue
            timer += 1
            tin[root] = low[root] = timer
            stack = [(root, -1, iter(graph[root]))]
            while stack:
                u, p, it = stack[-1]
                for v in it:
                    if v == p:
                        continue
                    if tin[v]:
                        low[u] = min(low[u], tin[v])
                    else:
                        timer += 1
                        tin[v] = low[v] = timer
                        stack.append((v, u, iter(graph[v])))
                        break
                else:
                    stack.pop()
                    if p != -1:
                        low[p] = min(low[p], low[u])
                        if tin[p] < low[u]:
                            self.bridges.append((min(p, u), max(p, u)))


class ArticulationPoints:
    """Cut vertices and biconnected components of an undirected graph."""

    def __init__(self, graph: Graph) -> None:
        n = len(graph)
        self.n = n
        self.tin = [0] * n
        self.low = [0] * n
        self.is_articulation = [False] * n
        self.components: list[list[int]] = []
        tin, low = self.tin, self.low
        timer = 0
        vertices: list[int] = []
        for root in range(n):
            if tin[root]:
                continue
            timer += 1
            tin[root] = low[root] = timer
            vertices.append(root)
            if not graph[root]:
                self.components.append([root])
                continue
            stack = [[root, -1, iter(graph[root]), 0]]
            while stack:
                frame = stack[-1]
                u = frame[0]
                for v in frame[2]:
                    if tin[v] > 0:
                        low[u] = min(low[u], tin[v])
                    else:
                        timer += 1
                        tin[v] = low[v] = timer
                        vertices.append(v)
                        stack.append([v, u, iter(graph[v]), 0])
                        break
                else:
                    stack.pop()
                    if not stack:
                        continue
                    parent = stack[-1]
                    w = parent[0]
                    low[w] = min(low[w], low[u])
                    if tin[w] <= low[u]:
                        parent[3] += 1
                        if parent[1] != -1 or parent[3] > 1:
                            self.is_articulation[w] = True
                        component = []
                        while True:
                            component.append(vertices.pop())
                            if component[-1] == u:
                                break
                        component.append(w)
                        self.components.append(component)


class DominatorTree:
    """Immediate dominators of a directed graph (Lengauer-Tarjan)."""

    def __init__(self, n: int) -> None:
        self.n = n
        self._g: list[list[int]] = [[] for _ in range(n)]

    def add_edge(self, u: int, v: int) -> None:
        self._g[u].append(v)

    def run(self, root: int) -> list[int]:
        """Immediate dominator of every vertex; -1 for the root and for
        vertices unreachable from it."""
        n, g = self.n, self._g
        arr = [-1] * n
        par = [-1] * n
        rev = [-1] * n
        sdom = [-1] * n
        dsu = [0] * n
        label = [0] * n
        rg: list[list[int]] = [[] for _ in range(n)]
        bucket: list[list[int]] = [[] for _ in range(n)]
        t = 0

        def enter(u: int) -> None:
            nonlocal t
            arr[u] = t
            rev[t] = u
            label[t] = sdom[t] = dsu[t] = t
            t += 1

        enter(root)
        stack: list[list] = [[root, iter(g[root]), -1]]
        while stack:
            frame = stack[-1]
            u = frame[0]
            if frame[2] != -1:
                w = frame[2]
                par[arr[w]] = arr[u]
                rg[arr[w]].append(arr[u])
                frame[2] = -1
            for w in frame[1]:
                if arr[w] == -1:
                    enter(w)
                    frame[2] = w
                    stack.append([w, iter(g[w]), -1])
                    break
                rg[arr[w]].append(arr[u])
            else:
                stack.pop()

        def find(u: int) -> int:
            path = [u]
            while dsu[path[-1]] != path[-1]:
                path.append(dsu[path[-1]])
            k = len(path) - 1
            if k <= 1:
                return u
            top = path[k - 1]
            for a in reversed(path[: k - 1]):
                p = dsu[a]
                if sdom[label[p]] < sdom[label[a]]:
                    label[a] = label[p]
                dsu[a] = top
            return label[u]

        dom = list(range(n))
        for i in range(t - 1, -1, -1):
            for w in rg[i]:
                sdom[i] = min(sdom[i], sdom[find(w)])
            if i:
                bucket[sdom[i]].append(i)
            for w in bucket[i]:
                v = find(w)
                dom[w] = sdom[w] if sdom[v] == sdom[w] else v
            if i > 1:
                dsu[i] = par[i]
        for i in range(1, t):
            if dom[i] != sdom[i]:
                dom[i] = dom[dom[i]]
        result = [-1] * n
        for i in range(1, t):
            result[rev[i]] = rev[dom[i]]
        return result


def girth(graph: Graph) -> int | None:
    """Length of the shortest cycle of an undirected graph, or None if acyclic."""
    n = len(graph)
    best: int | None = None
    for s in range(n):
        dist = [-1] * n
        dist[s] = 0
        queue = deque([(s, -1)])
        while queue:
            u, p = queue.popleft()
            for v in graph[u]:
                if dist[v] == -1:
                    dist[v] = dist[u] + 1
                    queue.append((v, u))
                elif v != p:
                    length = dist[u] + dist[v] + 1
                    if best is None or length < best:
                        best = length
    return best