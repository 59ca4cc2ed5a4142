"""Polynomials with integer coefficients and FFT multiplication."""

from __future__ import annotations

import cmath
from itertools import zip_longest
from typing import Sequence


def fft(values: Sequence[complex], invert: bool = False) -> list[complex]:
    """Recursive radix-2 FFT; the length must be a power of two."""
    n = len(values)
    if n <= 1:
        return list(values)
    if n & (n - 1):
        raise ValueError("length must be a power of two")
    even = fft(values[0::2], invert)
    odd = fft(values[1::2], invert)
    angle = 2 * cmath.pi / n * (-1 if invert else 1)
    step = cmath.exp(1j * angle)
    result = [0j] * n
    w = 1 + 0j
    half = n // 2
    for i, (a, b) in enumerate(zip(even, odd)):
        result[i] = a + w * b
        result[i + half] = a - w * b
        if invert:
            result[i] /= 2
            result[i + half] /= 2
        w *= step
    return result


def convolution(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Integer convolution of ``a`` and ``b``, zero-padded to a power of two."""
    n = 1
    while n < len(a) + len(b):
        n <<= 1
    fa = fft([complex(x) for x in a] + [0j] * (n - len(a)))
    fb = fft([complex(x) for x in b] + [0j] * (n - len(b)))
    product = fft([x * y for x, y in zip(fa, fb)], invert=True)
    return [round(x.real) for x in product]


def _trimmed(coefficients: list) -> list:
    end = len(coefficients)
    while end > 1 and coefficients[end - 1] == 0:
        end -= 1
    return coefficients[:end]


class Polynomial:
    """A polynomial given by its coefficients, lowest degree first."""

    def __init__(self, coefficients: Sequence[int] = (0,)) -> None:
        self.coefficients = list(coefficients) or [0]

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    def __getitem__(self, index: int):
        if not 0 <= index <= self.degree:
            raise IndexError(f"coefficient {index} outside 0..{self.degree}")
        return self.coefficients[index]

    def __setitem__(self, index: int, value) -> None:
        if not 0 <= index <= self.degree:
            raise IndexError(f"coefficient {index} outside 0..{self.degree}")
        self.coefficients[index] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return _trimmed(self.coefficients) == _trimmed(other.coefficients)

    def __repr__(self) -> str:
        return f"Polynomial({self.coefficients!r})"

    def __add__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(
            [a + b for a, b in zip_longest(self.coefficients, other.coefficients, fillvalue=0)]
        )

    def __sub__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self + Polynomial([-c for c in other.coefficients])

    def __mul__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        size = len(self.coefficients) + len(other.coefficients) - 1
        return Polynomial(convolution(self.coefficients, other.coefficients)[:size])