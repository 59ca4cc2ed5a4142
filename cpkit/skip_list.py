"""Randomised skip list holding a sorted multiset."""

from __future__ import annotations

import random
from typing import Any, Iterator, Optional


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, height: int) -> None:
        self.value = value
        self.next: list[Optional[_Node]] = [None] * height


class SkipList:
    """Sorted multiset with expected logarithmic search, insert and erase."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)
        self._head = _Node(None, 1)
        self._size = 0

    def _predecessors(self, x) -> list[_Node]:
        update = [self._head] * len(self._head.next)
        cur = self._head
        for h in reversed(range(len(self._head.next))):
            while cur.next[h] is not None and cur.next[h].value < x:
                cur = cur.next[h]
            update[h] = cur
        return update

    def lower_bound(self, x):
        """Smallest stored value not less than ``x``, or None."""
        node = self._predecessors(x)[0].next[0]
        return None if node is None else node.value

    def insert(self, x) -> None:
        height = 1
        while self._rng.random() < 0.5:
            height += 1
        while len(self._head.next) < height:
            self._head.next.append(None)
        update = self._predecessors(x)
        node = _Node(x, height)
        for h in range(height):
            node.next[h] = update[h].next[h]
            update[h].next[h] = node
        self._size += 1

    def erase(self, x) -> bool:
        """Remove one occurrence of ``x``; return False if absent."""
        update = self._predecessors(x)
        target = update[0].next[0]
        if target is None or target.value != x:
            return False
        for h, nxt in enumerate(target.next):
            update[h].next[h] = nxt
        self._size -= 1
        return True

    def __contains__(self, x) -> bool:
        node = self._predecessors(x)[0].next[0]
        return node is not None and node.value == x

    def __iter__(self) -> Iterator:
        node = self._head.next[0]
        while node is not None:
            yield node.value
            node = node.next[0]

    def __len__(self) -> int:
        return self._size