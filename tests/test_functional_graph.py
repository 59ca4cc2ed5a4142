import pytest

from cpkit.functional_graph import FunctionalGraph


def test_jump_on_cycle():
    n = 7
    fg = FunctionalGraph(n, lambda x: (x + 1) % n)
    fg.build_jumptable(5)
    for u in range(n):
        for k in (0, 1, 5, 13, 63):
            assert fg.jump(u, k) == (u + k) % n


def test_jump_bounds():
    fg = FunctionalGraph(2, lambda x: x)
    with pytest.raises(RuntimeError):
        fg.jump(0, 1)
    fg.build_jumptable(2)
    with pytest.raises(ValueError):
        fg.jump(0, 8)


def test_reverse_edges():
    targets = [1, 2, 0, 2]
    fg = FunctionalGraph(4, targets.__getitem__)
    fg.build_reverse()
    for v, sources in enumerate(fg.reverse):
        assert sorted(sources) == [u for u in range(4) if targets[u] == v]


def test_rho_shape():
    targets = [1, 2, 3, 1, 0, 5]
    fg = FunctionalGraph(6, targets.__getitem__)
    fg.build_cycle()
    cycle = {1, 2, 3}
    for c in cycle:
        assert fg.cycle_into[c] == c
        assert fg.cycle_len[c] == len(cycle)
    assert fg.cycle_into[0] == 1
    assert fg.cycle_into[4] == 1
    assert fg.cycle_into[5] == 5
    assert fg.cycle_len[5] == 1
    assert fg.cycle_len[0] == -1