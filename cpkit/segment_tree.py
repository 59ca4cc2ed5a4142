"""Segment tree with lazy propagation over a monoid and an update action."""

from __future__ import annotations

import math
from typing import Sequence


class _NoOp:
    """Marker for an assignment update that changes nothing."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "NO_OP"


NO_OP = _NoOp()


class SumMonoid:
    def op(self, a, b):
        return a + b

    def identity(self):
        return 0


class MinMonoid:
    def op(self, a, b):
        return min(a, b)

    def identity(self):
        return math.inf


class AddAction:
    """Add a value to every element of a range."""

    def apply(self, data, update, length: int):
        return data + update * length

    def compose(self, old, new):
        return old + new

    def identity(self):
        return 0


class SetAction:
    """Assign a value to every element of a range (for min/max monoids)."""

    def apply(self, data, update, length: int):
        return data if update is NO_OP else update

    def compose(self, old, new):
        return old if new is NO_OP else new

    def identity(self):
        return NO_OP


class SegmentTree:
    """Range update and range query over ``values``, 0-indexed and inclusive."""

    def __init__(self, values: Sequence, monoid=None, action=None) -> None:
        self.monoid = monoid if monoid is not None else SumMonoid()
        self.action = action if action is not None else AddAction()
        self.n = len(values)
        self._tree = [self.monoid.identity()] * (4 * self.n)
        self._lazy = [self.action.identity()] * (4 * self.n)
        if self.n:
            self._build(values, 1, 0, self.n - 1)

    def _build(self, values, node, l, r) -> None:
        if l == r:
            self._tree[node] = values[l]
            return
        mid = (l + r) // 2
        self._build(values, node * 2, l, mid)
        self._build(values, node * 2 + 1, mid + 1, r)
        self._pull(node)

    def _pull(self, node) -> None:
        self._tree[node] = self.monoid.op(self._tree[node * 2], self._tree[node * 2 + 1])

    def _apply(self, node, l, r, value) -> None:
        self._tree[node] = self.action.apply(self._tree[node], value, r - l + 1)
        self._lazy[node] = self.action.compose(self._lazy[node], value)

    def _push(self, node, l, r) -> None:
        pending = self._lazy[node]
        if pending != self.action.identity():
            mid = (l + r) // 2
            self._apply(node * 2, l, mid, pending)
            self._apply(node * 2 + 1, mid + 1, r, pending)
            self._lazy[node] = self.action.identity()

    def _update(self, node, l, r, ql, qr, value) -> None:
        if ql <= l and r <= qr:
            self._apply(node, l, r, value)
            return
        self._push(node, l, r)
        mid = (l + r) // 2
        if ql <= mid:
            self._update(node * 2, l, mid, ql, qr, value)
        if qr > mid:
            self._update(node * 2 + 1, mid + 1, r, ql, qr, value)
        self._pull(node)

    def _query(self, node, l, r, ql, qr):
        if ql <= l and r <= qr:
            return self._tree[node]
        self._push(node, l, r)
        mid = (l + r) // 2
        result = self.monoid.identity()
        if ql <= mid:
            result = self.monoid.op(result, self._query(node * 2, l, mid, ql, qr))
        if qr > mid:
            result = self.monoid.op(result, self._query(node * 2 + 1, mid + 1, r, ql, qr))
        return result

    def _check(self, left: int, right: int) -> None:
        if left < 0 or right >= self.n:
            raise IndexError(f"range [{left}, {right}] outside 0..{self.n - 1}")

    def update(self, left: int, right: int, value) -> None:
        """Apply ``value`` to positions ``left .. right``; empty ranges do nothing."""
        if self.n and left <= right:
            self._check(left, right)
            self._update(1, 0, self.n - 1, left, right, value)

    def query(self, left: int, right: int):
        """Combine positions ``left .. right``; empty ranges give the identity."""
        if not self.n or left > right:
            return self.monoid.identity()
        self._check(left, right)
        return self._query(1, 0, self.n - 1, left, right)