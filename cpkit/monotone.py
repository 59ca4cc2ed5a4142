"""Monotone queue and stack, nearest-element links and Cartesian trees."""

from __future__ import annotations

import operator
from collections import deque
from typing import Any, Callable, Sequence

Pred = Callable[[Any, Any], bool]


class MonotoneQueue:
    """Sliding-window extremum over the last ``window`` inserted values.

    The queue keeps ``pred(q[i], q[i+1])`` true; with ``operator.gt`` it
    yields the window maximum.
    """

    def __init__(self, window: int, pred: Pred = operator.gt) -> None:
        if window < 1:
            raise ValueError("window must be positive")
        self.window = window
        self.pred = pred
        self._queue: deque[tuple[int, Any]] = deque()
        self._count = 0

    def insert(self, x):
        """Add ``x`` and return the extremum of the current window."""
        self._count += 1
        queue = self._queue
        while queue and queue[0][0] <= self._count - self.window:
            queue.popleft()
        while queue and not self.pred(queue[-1][1], x):
            queue.pop()
        queue.append((self._count, x))
        return queue[0][1]


class MonotoneStack:
    """Find, for each inserted value, the nearest earlier one satisfying ``pred``."""

    def __init__(self, default: int = -1, pred: Pred = operator.gt) -> None:
        self.default = default
        self.pred = pred
        self._stack: list[tuple[int, Any]] = []

    def insert(self, index: int, value) -> int:
        """Push ``(index, value)``; return the index of the nearest earlier
        value ``v`` with ``pred(v, value)``, or ``default``."""
        stack = self._stack
        while stack and not self.pred(stack[-1][1], value):
            stack.pop()
        answer = stack[-1][0] if stack else self.default
        stack.append((index, value))
        return answer


class LRMTree:
    """Nearest index on each side whose value satisfies ``pred(v[j], v[i])``.

    ``left[i]`` is -1 and ``right[i]`` is ``n`` where no such index exists.
    With ``operator.lt`` these are the nearest strictly smaller elements.
    """

    def __init__(self, values: Sequence, pred: Pred = operator.lt) -> None:
        values = list(values)
        n = len(values)
        self.n = n
        self.left = [-1] * n
        self.right = [n] * n
        for i, v in enumerate(values):
            j = i - 1
            while j >= 0 and not pred(values[j], v):
                j = self.left[j]
            self.left[i] = j
        for i in reversed(range(n)):
            v = values[i]
            j = i + 1
            while j < n and not pred(values[j], v):
                j = self.right[j]
            self.right[i] = j


class CartesianTree:
    """Min-heap ordered Cartesian tree; children are -1 where absent.

    Among equal values, the later one becomes the ancestor.
    """

    def __init__(self, values: Sequence) -> None:
        values = list(values)
        self.n = len(values)
        self._children = [[-1, -1] for _ in values]
        stack: list[int] = []
        for i, v in enumerate(values):
            last = -1
            while stack and values[stack[-1]] >= v:
                last = stack.pop()
            if stack:
                self._children[stack[-1]][1] = i
            self._children[i][0] = last
            stack.append(i)
        self.root = stack[0] if stack else -1

    def __getitem__(self, i: int) -> tuple[int, int]:
        left, right = self._children[i]
        return left, right