"""Coordinate compression."""

from __future__ import annotations

from typing import Hashable, Iterable


class Discretizer:
    """Map each distinct value to its rank among the distinct values."""

    def __init__(self, values: Iterable[Hashable]) -> None:
        self._rank = {v: i for i, v in enumerate(sorted(set(values)))}

    def __call__(self, x) -> int:
        try:
            return self._rank[x]
        except KeyError:
            raise KeyError(f"{x!r} was not among the compressed values") from None

    def __contains__(self, x) -> bool:
        return x in self._rank

    def __len__(self) -> int:
        return len(self._rank)