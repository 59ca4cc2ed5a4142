import operator
import random

import pytest

from cpkit.monotone import CartesianTree, LRMTree, MonotoneQueue, MonotoneStack

_RNG = random.Random(11)
DATA = [_RNG.randint(0, 9) for _ in range(60)]


@pytest.mark.parametrize("window", [1, 3, 7])
def test_queue_window_maximum(window):
    q = MonotoneQueue(window)
    for i, x in enumerate(DATA):
        assert q.insert(x) == max(DATA[max(0, i - window + 1) : i + 1])


def test_queue_window_minimum():
    q = MonotoneQueue(4, operator.lt)
    for i, x in enumerate(DATA):
        assert q.insert(x) == min(DATA[max(0, i - 3) : i + 1])


def test_queue_rejects_bad_window():
    with pytest.raises(ValueError):
        MonotoneQueue(0)


def test_stack_previous_greater():
    stack = MonotoneStack()
    for i, x in enumerate(DATA):
        got = stack.insert(i, x)
        earlier = [j for j in range(i) if DATA[j] > x]
        assert got == (earlier[-1] if earlier else -1)


def test_stack_custom_default_and_pred():
    stack = MonotoneStack(default=len(DATA), pred=operator.lt)
    for i, x in enumerate(DATA):
        got = stack.insert(i, x)
        earlier = [j for j in range(i) if DATA[j] < x]
        assert got == (earlier[-1] if earlier else len(DATA))


@pytest.mark.parametrize("pred", [operator.lt, operator.gt])
def test_lrm_tree_nearest_links(pred):
    tree = LRMTree(DATA, pred)
    n = len(DATA)
    for i, x in enumerate(DATA):
        left = [j for j in range(i) if pred(DATA[j], x)]
        right = [j for j in range(i + 1, n) if pred(DATA[j], x)]
        assert tree.left[i] == (left[-1] if left else -1)
        assert tree.right[i] == (right[0] if right else n)


def _inorder(tree, node):
    if node == -1:
        return []
    left, right = tree[node]
    return _inorder(tree, left) + [node] + _inorder(tree, right)


def test_cartesian_tree_invariants():
    tree = CartesianTree(DATA)
    assert _inorder(tree, tree.root) == list(range(len(DATA)))
    assert DATA[tree.root] == min(DATA)
    for i in range(len(DATA)):
        for child in tree[i]:
            if child != -1:
                assert DATA[i] <= DATA[child]


def test_cartesian_tree_equal_values_later_is_ancestor():
    tree = CartesianTree([5, 5])
    assert tree.root == 1
    assert tree[1] == (0, -1)