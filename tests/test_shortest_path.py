import random

import pytest

from cpkit.shortest_path import INF, bfs01, dijkstra, floyd


def random_graph(n, m, max_w, seed):
    rng = random.Random(seed)
    g = [[] for _ in range(n)]
    for _ in range(m):
        g[rng.randrange(n)].append((rng.randrange(n), rng.randint(0, max_w)))
    return g


def to_matrix(g):
    n = len(g)
    adj = [[INF] * n for _ in range(n)]
    for i in range(n):
        adj[i][i] = 0
    for u, es in enumerate(g):
        for v, w in es:
            adj[u][v] = min(adj[u][v], w)
    return adj


@pytest.mark.parametrize("seed", range(5))
def test_dijkstra_matches_floyd(seed):
    g = random_graph(8, 20, 9, seed)
    all_pairs = floyd(to_matrix(g))
    for s in range(8):
        expected = [min(d, INF) for d in all_pairs[s]]
        assert dijkstra(g, s) == expected


@pytest.mark.parametrize("seed", range(5))
def test_bfs01_matches_dijkstra(seed):
    g = random_graph(10, 25, 1, seed)
    for s in range(10):
        assert bfs01(g, s) == dijkstra(g, s)


def test_unreachable_is_inf():
    g = [[(1, 4)], [], []]
    assert dijkstra(g, 0) == [0, 4, INF]


def test_floyd_leaves_input_alone():
    adj = [[0, 5], [INF, 0]]
    floyd(adj)
    assert adj == [[0, 5], [INF, 0]]


def test_bfs01_rejects_other_weights():
    with pytest.raises(ValueError):
        bfs01([[(1, 2)], []], 0)