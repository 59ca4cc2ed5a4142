import pytest

from cpkit.union_find import UnionFind


def test_merge_reports_new_joins_only():
    uf = UnionFind(4)
    assert uf.merge(0, 1) is True
    assert uf.merge(1, 0) is False
    assert uf.is_connected(0, 1)
    assert not uf.is_connected(0, 2)


def test_component_count_and_sizes():
    uf = UnionFind(6)
    uf.merge(0, 1)
    uf.merge(2, 3)
    uf.merge(1, 3)
    assert uf.num_components == 3
    assert uf.size(0) == uf.size(3) == 4
    assert uf.size(5) == 1


def test_components_partition_elements():
    uf = UnionFind(7)
    for u, v in [(0, 4), (4, 6), (1, 2)]:
        uf.merge(u, v)
    comps = uf.components()
    members = sorted(x for group in comps.values() for x in group)
    assert members == list(range(7))
    assert list(comps) == uf.leaders()
    for leader, group in comps.items():
        assert all(uf.find(x) == leader for x in group)
    assert len(comps) == uf.num_components


def test_out_of_range_raises():
    uf = UnionFind(3)
    with pytest.raises(IndexError):
        uf.find(3)
    with pytest.raises(IndexError):
        uf.merge(-1, 0)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        UnionFind(-1)