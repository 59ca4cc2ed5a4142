"""A set of disjoint integer ranges that merges touching ranges."""

from __future__ import annotations

from typing import Iterator

from sortedcontainers import SortedList

_LOW = -(1 << 62)
_HIGH = 1 << 62


class RangeSet:
    """Disjoint closed ranges ``[l, r]`` with gaps of at least one between them.

    ``next`` and ``prev`` return a sentinel range ``(low, low)`` or
    ``(high, high)`` when nothing real lies in that direction.
    """

    LOW = _LOW
    HIGH = _HIGH

    def __init__(self) -> None:
        self._ranges = SortedList([(_LOW, _LOW), (_HIGH, _HIGH)])

    def add(self, left: int, right: int) -> None:
        """Cover ``[left, right]``, merging with overlapping or adjacent ranges."""
        ranges = self._ranges
        while True:
            item = ranges[ranges.bisect_left((right + 2, _LOW)) - 1]
            if item[1] < left - 1:
                break
            left, right = min(left, item[0]), max(right, item[1])
            ranges.remove(item)
        ranges.add((left, right))

    def remove(self, left: int, right: int) -> None:
        """Uncover ``[left, right]``, splitting ranges as needed."""
        ranges = self._ranges
        while True:
            item = ranges[ranges.bisect_left((right + 1, _LOW)) - 1]
            if item[1] < left:
                break
            ranges.remove(item)
            if item[1] > right:
                ranges.add((right + 1, item[1]))
            if item[0] < left:
                ranges.add((item[0], left - 1))

    def next(self, pos: int) -> tuple[int, int]:
        """First range starting at or after ``pos``."""
        return self._ranges[self._ranges.bisect_left((pos, _LOW))]

    def prev(self, pos: int) -> tuple[int, int]:
        """Last range starting at or before ``pos``."""
        return self._ranges[self._ranges.bisect_left((pos, _HIGH)) - 1]

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(self._ranges[1:-1])