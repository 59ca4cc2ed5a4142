import random

import pytest

from cpkit.fenwick_tree import FenwickTree


def test_matches_list_model():
    rng = random.Random(3)
    n = 60
    ft = FenwickTree(n)
    model = [0] * (n + 1)
    for _ in range(400):
        left = rng.randint(1, n)
        right = rng.randint(left, n)
        if rng.random() < 0.5:
            x = rng.randint(-50, 50)
            ft.add(left, right, x)
            for i in range(left, right + 1):
                model[i] += x
        else:
            assert ft.sum(left, right) == sum(model[left : right + 1])
    for i in range(n + 1):
        assert ft.prefix_sum(i) == sum(model[: i + 1])


def test_empty_prefix_is_zero():
    ft = FenwickTree(5)
    ft.add(1, 5, 9)
    assert ft.prefix_sum(0) == 0
    assert ft.sum(2, 2) == 9


def test_bad_ranges():
    ft = FenwickTree(5)
    with pytest.raises(IndexError):
        ft.add(0, 3, 1)
    with pytest.raises(IndexError):
        ft.sum(3, 6)
    with pytest.raises(IndexError):
        ft.sum(4, 2)
    with pytest.raises(IndexError):
        ft.prefix_sum(6)