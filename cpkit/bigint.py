"""Arbitrary-size non-negative decimal integers stored digit by digit."""

from __future__ import annotations

from functools import total_ordering
from itertools import zip_longest
from typing import Iterable

_DIGITS = frozenset("0123456789")


@total_ordering
class BigInt:
    """A non-negative integer kept as little-endian base-10 digits."""

    __slots__ = ("_digits",)

    def __init__(self, value: int | str | BigInt = 0) -> None:
        if isinstance(value, BigInt):
            digits = list(value._digits)
        elif isinstance(value, int):
            if value < 0:
                raise ValueError("BigInt holds non-negative values only")
            digits = []
            while value:
                value, digit = divmod(value, 10)
                digits.append(digit)
        elif isinstance(value, str):
            if not set(value) <= _DIGITS:
                raise ValueError(f"not a decimal number: {value!r}")
            digits = [int(c) for c in reversed(value)]
        else:
            raise TypeError(f"cannot build BigInt from {type(value).__name__}")
        self._digits = digits
        self._trim()

    @classmethod
    def from_digits(cls, digits: Iterable[int]) -> BigInt:
        """Build from little-endian digits, each in 0..9."""
        values = list(digits)
        if any(not 0 <= d <= 9 for d in values):
            raise ValueError("digits must lie in 0..9")
        result = cls()
        result._digits = values
        result._trim()
        return result

    def _trim(self) -> None:
        while self._digits and self._digits[-1] == 0:
            self._digits.pop()

    @staticmethod
    def _coerce(other: object) -> BigInt | None:
        if isinstance(other, BigInt):
            return other
        if isinstance(other, int) and other >= 0:
            return BigInt(other)
        return None

    def __len__(self) -> int:
        return len(self._digits)

    def __getitem__(self, index: int) -> int:
        return self._digits[index]

    def __str__(self) -> str:
        if not self._digits:
            return "0"
        return "".join(str(d) for d in reversed(self._digits))

    def __repr__(self) -> str:
        return f"BigInt({str(self)!r})"

    def __int__(self) -> int:
        return int(str(self))

    def __iadd__(self, other: object) -> BigInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        result = []
        carry = 0
        for a, b in zip_longest(self._digits, rhs._digits, fillvalue=0):
            carry, digit = divmod(a + b + carry, 10)
            result.append(digit)
        if carry:
            result.append(carry)
        self._digits = result
        self._trim()
        return self

    def __add__(self, other: object) -> BigInt:
        if self._coerce(other) is None:
            return NotImplemented
        result = BigInt(self)
        result += other
        return result

    __radd__ = __add__

    def __isub__(self, other: object) -> BigInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if self < rhs:
            raise ValueError("subtraction would give a negative result")
        result = []
        borrow = 0
        for a, b in zip_longest(self._digits, rhs._digits, fillvalue=0):
            digit = a - b - borrow
            borrow = 1 if digit < 0 else 0
            result.append(digit + 10 * borrow)
        self._digits = result
        self._trim()
        return self

    def __sub__(self, other: object) -> BigInt:
        if self._coerce(other) is None:
            return NotImplemented
        result = BigInt(self)
        result -= other
        return result

    def __mul__(self, other: object) -> BigInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        product = [0] * (len(self._digits) + len(rhs._digits))
        for i, a in enumerate(self._digits):
            for j, b in enumerate(rhs._digits):
                product[i + j] += a * b
        carry = 0
        digits = []
        for value in product:
            carry, digit = divmod(value + carry, 10)
            digits.append(digit)
        while carry:
            carry, digit = divmod(carry, 10)
            digits.append(digit)
        return BigInt.from_digits(digits)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._digits == rhs._digits

    def __lt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return (len(self._digits), self._digits[::-1]) < (
            len(rhs._digits),
            rhs._digits[::-1],
        )

    def __hash__(self) -> int:
        return hash(int(self))