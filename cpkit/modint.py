"""Integers modulo a fixed modulus."""

from __future__ import annotations


def _extgcd(a: int, b: int) -> tuple[int, int, int]:
    x0, y0, x1, y1 = 1, 0, 0, 1
    while b:
        q, r = divmod(a, b)
        a, b = b, r
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    return a, x0, y0


class ModInt:
    """An integer reduced modulo ``modulus``."""

    __slots__ = ("value", "modulus")

    def __init__(self, value: int, modulus: int) -> None:
        if modulus <= 0:
            raise ValueError("modulus must be positive")
        self.modulus = modulus
        self.value = value % modulus

    def _coerce(self, other: object) -> ModInt | None:
        if isinstance(other, ModInt):
            if other.modulus != self.modulus:
                raise ValueError("moduli differ")
            return other
        if isinstance(other, int):
            return ModInt(other, self.modulus)
        return None

    def inv(self) -> ModInt:
        """Multiplicative inverse; raises ValueError if none exists."""
        d, u, _ = _extgcd(self.value, self.modulus)
        if d != 1:
            raise ValueError(f"{self.value} is not invertible modulo {self.modulus}")
        return ModInt(u, self.modulus)

    def pow(self, exponent: int) -> ModInt:
        if exponent < 0:
            raise ValueError("exponent must be non-negative")
        return ModInt(pow(self.value, exponent, self.modulus), self.modulus)

    __pow__ = pow

    def __add__(self, other: object) -> ModInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return ModInt(self.value + rhs.value, self.modulus)

    def __radd__(self, other: object) -> ModInt:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return ModInt(lhs.value + self.value, self.modulus)

    def __sub__(self, other: object) -> ModInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return ModInt(self.value - rhs.value, self.modulus)

    def __rsub__(self, other: object) -> ModInt:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: object) -> ModInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return ModInt(self.value * rhs.value, self.modulus)

    def __rmul__(self, other: object) -> ModInt:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return ModInt(lhs.value * self.value, self.modulus)

    def __truediv__(self, other: object) -> ModInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self * rhs.inv()

    def __rtruediv__(self, other: object) -> ModInt:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs * self.inv()

    def __neg__(self) -> ModInt:
        return ModInt(-self.value, self.modulus)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ModInt):
            return (self.value, self.modulus) == (other.value, other.modulus)
        if isinstance(other, int):
            return self.value == other % self.modulus
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.value, self.modulus))

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"ModInt({self.value}, {self.modulus})"