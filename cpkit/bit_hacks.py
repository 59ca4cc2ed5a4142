"""Bit-twiddling helpers on integers."""

from __future__ import annotations


def sign(x: int) -> int:
    """Return -1 for negative ``x`` and 1 otherwise."""
    return 1 | (x >> x.bit_length())


def opposite_signs(x: int, y: int) -> bool:
    """True when exactly one of ``x`` and ``y`` is negative."""
    return (x ^ y) < 0


def bit_max(x: int, y: int) -> int:
    """Larger of two integers, selected with a mask."""
    return x ^ ((x ^ y) & -(x < y))


def bit_min(x: int, y: int) -> int:
    """Smaller of two integers, selected with a mask."""
    return y ^ ((x ^ y) & -(x < y))


def is_power_of_two(x: int) -> bool:
    return x > 0 and x & (x - 1) == 0


def swap_bits(x: int, i: int, j: int) -> int:
    """Exchange bits ``i`` and ``j`` of ``x``."""
    mask = ((x >> i) ^ (x >> j)) & 1
    return x ^ ((mask << i) | (mask << j))


def next_bit_permutation(x: int) -> int:
    """Smallest integer above ``x`` with the same number of set bits."""
    if x <= 0:
        raise ValueError("x must be positive")
    t = x | (x - 1)
    trailing = (x & -x).bit_length() - 1
    return (t + 1) | (((~t & -~t) - 1) >> (trailing + 1))