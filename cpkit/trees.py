"""Algorithms on trees given as undirected adjacency lists over ``0 .. n-1``."""

from __future__ import annotations

from collections import deque
from typing import Sequence

Tree = Sequence[Sequence[int]]


def _preorder(tree: Tree, root: int) -> tuple[list[int], list[int]]:
    """Depth-first preorder from ``root`` and the parent of every vertex."""
    n = len(tree)
    if not 0 <= root < n:
        raise IndexError(f"root {root} outside 0..{n - 1}")
    parent = [-1] * n
    order: list[int] = []
    stack = [root]
    while stack:
        u = stack.pop()
        order.append(u)
        for v in reversed(tree[u]):
            if v != parent[u]:
                parent[v] = u
                stack.append(v)
    return order, parent


def _postorder(tree: Tree, root: int):
    """Yield ``(vertex, parent)`` in depth-first post-order from ``root``."""
    stack = [(root, -1, iter(tree[root]))]
    while stack:
        u, p, it = stack[-1]
        for v in it:
            if v != p:
                stack.append((v, u, iter(tree[v])))
                break
        else:
            stack.pop()
            yield u, p


def _bfs_distances(tree: Tree, source: int) -> list[int]:
    dist = [-1] * len(tree)
    dist[source] = 0
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v in tree[u]:
            if dist[v] == -1:
                dist[v] = dist[u] + 1
                queue.append(v)
    return dist


def _argmax(values: Sequence[int]) -> int:
    return max(range(len(values)), key=values.__getitem__)


class LCA:
    """Lowest common ancestors by binary lifting."""

    def __init__(self, tree: Tree, root: int = 0) -> None:
        n = len(tree)
        self.n = n
        self.root = root
        order, parent = _preorder(tree, root)
        self.depth = [0] * n
        for u in order[1:]:
            self.depth[u] = self.depth[parent[u]] + 1
        first = [u if p == -1 else p for u, p in enumerate(parent)]
        self._up = [first]
        for _ in range(1, max(1, n.bit_length())):
            prev = self._up[-1]
            self._up.append([prev[prev[v]] for v in range(n)])

    def lca(self, u: int, v: int) -> int:
        depth = self.depth
        if depth[u] < depth[v]:
            u, v = v, u
        diff = depth[u] - depth[v]
        for j, row in enumerate(self._up):
            if diff >> j & 1:
                u = row[u]
        if u == v:
            return u
        for row in reversed(self._up):
            if row[u] != row[v]:
                u, v = row[u], row[v]
        return self._up[0][u]


class HeavyLightDecomposition:
    """Heavy-light decomposition.

    Attributes: ``parent`` (-1 for the root), ``depth``, ``size`` (subtree
    sizes), ``heavy`` (heavy child or -1), ``head`` (top of each vertex's
    heavy path) and ``pos`` (0-based visiting time; heavy paths are
    contiguous).
    """

    def __init__(self, tree: Tree, root: int = 0) -> None:
        n = len(tree)
        self.n = n
        order, parent = _preorder(tree, root)
        self.parent = parent
        self.depth = [0] * n
        for u in order[1:]:
            self.depth[u] = self.depth[parent[u]] + 1
        self.size = [1] * n
        for u in reversed(order):
            if parent[u] != -1:
                self.size[parent[u]] += self.size[u]
        self.heavy = [-1] * n
        for u in order:
            best = 0
            for v in tree[u]:
                if v != parent[u] and self.size[v] > best:
                    best = self.size[v]
                    self.heavy[u] = v
        self.head = [0] * n
        self.pos = [0] * n
        self.head[root] = root
        timer = 0
        stack = [root]
        while stack:
            u = stack.pop()
            self.pos[u] = timer
            timer += 1
            for v in reversed(tree[u]):
                if v != parent[u] and v != self.heavy[u]:
                    self.head[v] = v
                    stack.append(v)
            if self.heavy[u] != -1:
                self.head[self.heavy[u]] = self.head[u]
                stack.append(self.heavy[u])


def prufer_encode(tree: Tree) -> list[int]:
    """Prüfer code of a labelled tree with at least two vertices."""
    n = len(tree)
    if n < 2:
        raise ValueError("a Prüfer code needs at least two vertices")
    _, parent = _preorder(tree, n - 1)
    degree = [len(adj) for adj in tree]
    ptr = degree.index(1)
    leaf = ptr
    code = []
    for _ in range(n - 2):
        nxt = parent[leaf]
        code.append(nxt)
        degree[nxt] -= 1
        if degree[nxt] == 1 and nxt < ptr:
            leaf = nxt
        else:
            ptr += 1
            while degree[ptr] != 1:
                ptr += 1
            leaf = ptr
    return code


def prufer_decode(code: Sequence[int]) -> list[list[int]]:
    """Adjacency lists of the tree with the given Prüfer code."""
    n = len(code) + 2
    if any(not 0 <= x < n for x in code):
        raise ValueError(f"code entries must lie in 0..{n - 1}")
    degree = [1] * n
    for x in code:
        degree[x] += 1
    ptr = degree.index(1)
    leaf = ptr
    tree: list[list[int]] = [[] for _ in range(n)]
    for v in code:
        tree[leaf].append(v)
        tree[v].append(leaf)
        degree[v] -= 1
        if degree[v] == 1 and v < ptr:
            leaf = v
        else:
            ptr += 1
            while degree[ptr] != 1:
                ptr += 1
            leaf = ptr
    tree[leaf].append(n - 1)
    tree[n - 1].append(leaf)
    return tree


def centroids(tree: Tree) -> list[int]:
    """Vertices whose removal leaves no component above half the tree, in post-order."""
    n = len(tree)
    if n == 0:
        return []
    size = [1] * n
    weight = [0] * n
    result = []
    for u, p in _postorder(tree, 0):
        weight[u] = max(weight[u], n - size[u])
        if weight[u] <= n // 2:
            result.append(u)
        if p != -1:
            size[p] += size[u]
            weight[p] = max(weight[p], size[u])
    return result


class Diameter:
    """Diameter by two breadth-first searches.

    ``x`` and ``y`` are the endpoints, ``diameter`` the number of edges
    between them, and ``d0``, ``dx``, ``dy`` distances from 0, ``x``, ``y``.
    """

    def __init__(self, tree: Tree) -> None:
        self.n = len(tree)
        if self.n == 0:
            raise ValueError("the tree has no vertices")
        self.d0 = _bfs_distances(tree, 0)
        self.x = _argmax(self.d0)
        self.dx = _bfs_distances(tree, self.x)
        self.y = _argmax(self.dx)
        self.dy = _bfs_distances(tree, self.y)
        self.diameter = self.dx[self.y]


def diameter_dp(tree: Tree) -> int:
    """Number of edges on a longest path, by dynamic programming."""
    n = len(tree)
    if n == 0:
        return 0
    first = [0] * n
    second = [0] * n
    best = 0
    for u, p in _postorder(tree, 0):
        best = max(best, first[u] + second[u])
        if p != -1:
            x = first[u] + 1
            if x > first[p]:
                first[p], second[p] = x, first[p]
            elif x > second[p]:
                second[p] = x
    return best


def all_longest_paths(tree: Tree) -> list[int]:
    """For every vertex, the length of the longest path starting there."""
    if not tree:
        return []
    a = _argmax(_bfs_distances(tree, 0))
    from_a = _bfs_distances(tree, a)
    b = _argmax(from_a)
    from_b = _bfs_distances(tree, b)
    return [max(x, y) for x, y in zip(from_a, from_b)]


def ahu(tree: Tree, root: int) -> str:
    """Canonical bracket string of the tree rooted at ``root``.

    Two rooted trees are isomorphic exactly when their strings are equal.
    """
    labels: dict[int, list[str]] = {}
    result = ""
    for u, p in _postorder(tree, root):
        label = "(" + "".join(sorted(labels.pop(u, []))) + ")"
        if p == -1:
            result = label
        else:
            labels.setdefault(p, []).append(label)
    return result