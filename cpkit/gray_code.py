"""Binary reflected Gray code."""

from __future__ import annotations


def gray(n: int) -> int:
    """Gray code of ``n``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return n ^ (n >> 1)


def inverse_gray(g: int) -> int:
    """The number whose Gray code is ``g``."""
    if g < 0:
        raise ValueError("g must be non-negative")
    n = 0
    while g:
        n ^= g
        g >>= 1
    return n