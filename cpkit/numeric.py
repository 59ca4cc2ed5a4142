"""Numerical search helpers."""

from __future__ import annotations

import operator
from typing import Callable


def trisect(
    lo: float,
    hi: float,
    f: Callable[[float], float],
    comp: Callable[[float, float], bool] = operator.gt,
) -> float:
    """Ternary search on ``[lo, hi]`` for the extremum of a unimodal ``f``.

    With the default ``comp`` (greater-than) the maximum is found; pass
    ``operator.lt`` to find the minimum.
    """
    for _ in range(100):
        m1 = (lo * 2 + hi) / 3
        m2 = (lo + hi * 2) / 3
        if comp(f(m1), f(m2)):
            hi = m2
        else:
            lo = m1
    return (lo + hi) / 2