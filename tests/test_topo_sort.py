import pytest

from cpkit.topo_sort import TopoSorter


def test_order_respects_edges():
    edges = [(5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1)]
    ts = TopoSorter(6)
    for u, v in edges:
        ts.add_edge(u, v)
    order = ts.build()
    assert ts.is_dag()
    assert sorted(order) == list(range(6))
    pos = {u: i for i, u in enumerate(order)}
    for u, v in edges:
        assert pos[u] < pos[v]
    assert ts[0] == order[0]


def test_cycle_is_not_dag():
    ts = TopoSorter(3)
    for u, v in [(0, 1), (1, 2), (2, 1)]:
        ts.add_edge(u, v)
    ts.build()
    assert not ts.is_dag()
    assert ts.order == [0]


def test_needs_build():
    with pytest.raises(RuntimeError):
        TopoSorter(2).is_dag()


def test_index_out_of_range():
    ts = TopoSorter(2)
    ts.build()
    assert ts[1] == 1
    with pytest.raises(IndexError):
        _ = ts[2]