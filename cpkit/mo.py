"""Mo's algorithm for answering offline range queries."""

from __future__ import annotations

from math import isqrt
from typing import Any, Callable, Iterable


class Mo:
    """Offline range queries over positions ``0 .. size-1``.

    ``add(pos)`` and ``remove(pos)`` grow and shrink the current window;
    ``answer()`` reports the result for the window as it stands. The
    window starts empty and is emptied again before ``query`` returns.
    """

    def __init__(
        self,
        size: int,
        add: Callable[[int], Any],
        remove: Callable[[int], Any],
        answer: Callable[[], Any],
    ) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self.size = size
        self.add = add
        self.remove = remove
        self.answer = answer

    def query(self, queries: Iterable[tuple[int, int]]) -> list:
        """Answers to inclusive ranges ``(left, right)``, in the given order."""
        qs = [(int(l), int(r)) for l, r in queries]
        for l, r in qs:
            if not 0 <= l <= r < self.size:
                raise IndexError(f"range [{l}, {r}] outside 0..{self.size - 1}")
        block = max(1, isqrt(self.size))
        order = sorted(range(len(qs)), key=lambda i: (qs[i][0] // block, qs[i][1]))
        answers: list = [None] * len(qs)
        left, right = 0, -1
        for i in order:
            lo, hi = qs[i]
            while lo < left:
                left -= 1
                self.add(left)
            while right < hi:
                right += 1
                self.add(right)
            while left < lo:
                self.remove(left)
                left += 1
            while hi < right:
                self.remove(right)
                right -= 1
            answers[i] = self.answer()
        while left <= right:
            self.remove(right)
            right -= 1
        return answers