import pytest

from cpkit.trees import (
    LCA,
    Diameter,
    HeavyLightDecomposition,
    ahu,
    all_longest_paths,
    centroids,
    diameter_dp,
    prufer_decode,
    prufer_encode,
)


def build(n, edges):
    tree = [[] for _ in range(n)]
    for u, v in edges:
        tree[u].append(v)
        tree[v].append(u)
    return tree


def edge_set(tree):
    return {frozenset((u, v)) for u, adj in enumerate(tree) for v in adj}


EDGES = [(0, 1), (0, 2), (1, 3), (1, 4), (2, 5), (4, 6)]
PARENTS = {1: 0, 2: 0, 3: 1, 4: 1, 5: 2, 6: 4}
TREE = build(7, EDGES)


def ancestors(u):
    chain = [u]
    while chain[-1] in PARENTS:
        chain.append(PARENTS[chain[-1]])
    return chain


def test_lca_matches_deepest_common_ancestor():
    lca = LCA(TREE, 0)
    for u in range(7):
        for v in range(7):
            common = set(ancestors(v))
            expected = next(a for a in ancestors(u) if a in common)
            assert lca.lca(u, v) == expected


def test_lca_depths_and_other_root():
    lca = LCA(TREE, 0)
    assert [lca.depth[u] for u in range(7)] == [len(ancestors(u)) - 1 for u in range(7)]
    rooted = LCA(TREE, 3)
    assert all(rooted.lca(3, v) == 3 for v in range(7))


def test_hld_invariants():
    hld = HeavyLightDecomposition(TREE, 0)
    assert sorted(hld.pos) == list(range(7))
    assert hld.size[0] == 7
    assert hld.parent[0] == -1
    for u in range(7):
        children = [v for v in TREE[u] if v != hld.parent[u]]
        if not children:
            assert hld.heavy[u] == -1
            continue
        h = hld.heavy[u]
        assert hld.size[h] == max(hld.size[v] for v in children)
        assert hld.pos[h] == hld.pos[u] + 1
        assert hld.head[h] == hld.head[u]
        for v in children:
            if v != h:
                assert hld.head[v] == v


@pytest.mark.parametrize(
    "n,edges",
    [
        (7, EDGES),
        (5, [(0, 1), (1, 2), (2, 3), (3, 4)]),
        (6, [(5, 0), (5, 1), (5, 2), (5, 3), (5, 4)]),
        (2, [(0, 1)]),
    ],
)
def test_prufer_round_trip(n, edges):
    tree = build(n, edges)
    code = prufer_encode(tree)
    assert len(code) == n - 2
    for u in range(n):
        assert code.count(u) == len(tree[u]) - 1
    assert edge_set(prufer_decode(code)) == edge_set(tree)
    assert prufer_encode(prufer_decode(code)) == code


def test_prufer_errors():
    with pytest.raises(ValueError):
        prufer_encode([[]])
    with pytest.raises(ValueError):
        prufer_decode([9])


def test_centroids():
    path5 = build(5, [(0, 1), (1, 2), (2, 3), (3, 4)])
    assert centroids(path5) == [2]
    path4 = build(4, [(0, 1), (1, 2), (2, 3)])
    assert sorted(centroids(path4)) == [1, 2]
    star = build(6, [(3, v) for v in (0, 1, 2, 4, 5)])
    assert centroids(star) == [3]


def test_diameter_consistency():
    d = Diameter(TREE)
    assert d.dx[d.y] == d.diameter
    assert d.dy[d.x] == d.diameter
    assert max(d.dx) == d.diameter
    assert diameter_dp(TREE) == d.diameter
    assert max(all_longest_paths(TREE)) == d.diameter


def test_path_diameter_and_eccentricities():
    n = 6
    path = build(n, [(i, i + 1) for i in range(n - 1)])
    assert Diameter(path).diameter == n - 1
    assert diameter_dp(path) == n - 1
    assert all_longest_paths(path) == [max(i, n - 1 - i) for i in range(n)]


def test_diameter_empty_tree_raises():
    with pytest.raises(ValueError):
        Diameter([])


def test_ahu_isomorphism():
    a = build(4, [(0, 1), (0, 2), (2, 3)])
    b = build(4, [(3, 2), (3, 0), (0, 1)])
    assert ahu(a, 0) == ahu(b, 3)
    star = build(4, [(0, 1), (0, 2), (0, 3)])
    assert (ahu(a, 0) == ahu(star, 0)) is False
    assert ahu([[]], 0) == "()"
    assert ahu(TREE, 0).count("(") == 7