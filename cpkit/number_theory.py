"""Number-theoretic and combinatorial helpers."""

from __future__ import annotations

import math
from typing import Callable, Iterator, Sequence


def binary_gcd(x: int, y: int) -> int:
    """Greatest common divisor of two non-negative integers (Stein's algorithm)."""
    if x < 0 or y < 0:
        raise ValueError("arguments must be non-negative")
    if x == 0:
        return y
    if y == 0:
        return x
    shift = ((x | y) & -(x | y)).bit_length() - 1
    x >>= (x & -x).bit_length() - 1
    while y:
        y >>= (y & -y).bit_length() - 1
        if x > y:
            x, y = y, x
        y -= x
    return x << shift


def prime_sieve(n: int) -> tuple[list[int], list[int]]:
    """Linear sieve up to ``n``.

    Returns the primes and a table where entry ``i`` is the smallest prime
    factor of a composite ``i`` and 0 for primes, 0 and 1.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    factor = [0] * (n + 1)
    primes: list[int] = []
    for i in range(2, n + 1):
        if not factor[i]:
            primes.append(i)
        for p in primes:
            if i * p > n:
                break
            factor[i * p] = p
            if i % p == 0:
                break
    return primes, factor


def modular_inverses(n: int, p: int) -> list[int]:
    """Inverses of ``1 .. n`` modulo the prime ``p``; entry 0 is 1."""
    inv = [1] * (n + 1)
    for i in range(2, n + 1):
        inv[i] = (p - p // i) * inv[p % i] % p
    return inv


def lucas(m: int, n: int, p: int) -> int:
    """Binomial coefficient ``C(m, n)`` modulo the prime ``p``."""
    fac = [1] * p
    for i in range(1, p):
        fac[i] = fac[i - 1] * i % p
    ifac = [pow(f, p - 2, p) for f in fac]

    def small(a: int, b: int) -> int:
        return fac[a] * ifac[b] % p * ifac[a - b] % p if a >= b else 0

    result = 1
    while m:
        result = result * small(m % p, n % p) % p
        m //= p
        n //= p
    return result


def extgcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(d, x, y)`` with ``a*x + b*y == d == gcd(a, b)``."""
    x0, y0, x1, y1 = 1, 0, 0, 1
    while b:
        q, r = divmod(a, b)
        a, b = b, r
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    return a, x0, y0


def crt(remainders: Sequence[int], moduli: Sequence[int]) -> int:
    """Solve ``x = remainders[i] (mod moduli[i])`` for pairwise coprime moduli."""
    if len(remainders) != len(moduli):
        raise ValueError("remainders and moduli differ in length")
    total = math.prod(moduli)
    ans = 0
    for b, n in zip(remainders, moduli):
        partial = total // n
        _, inv, _ = extgcd(partial, n)
        ans = (ans + b * partial * inv) % total
    return ans


def iterate_subsets(state: int) -> Iterator[int]:
    """Non-empty submasks of ``state`` in decreasing order."""
    s = state
    while s:
        yield s
        s = (s - 1) & state


def gospers_hack(n: int, k: int) -> Iterator[int]:
    """All ``n``-bit masks with exactly ``k`` bits set, in increasing order."""
    if k == 0:
        yield 0
        return
    i = (1 << k) - 1
    while i < 1 << n:
        yield i
        low = i & -i
        ripple = i + low
        i = ((ripple ^ i) >> ((low.bit_length() - 1) + 2)) | ripple


def binomial_table(n: int, mod: int) -> list[list[int]]:
    """Pascal's triangle ``C[i][j]`` modulo ``mod`` for ``0 <= j <= i <= n``."""
    table = [[0] * (n + 1) for _ in range(n + 1)]
    for i in range(n + 1):
        table[i][0] = table[i][i] = 1 % mod
        for j in range(1, i):
            table[i][j] = (table[i - 1][j - 1] + table[i - 1][j]) % mod
    return table


def catalan(n: int, mod: int) -> list[int]:
    """Catalan numbers ``0 .. n`` modulo ``mod``."""
    cat = [0] * (n + 1)
    cat[0] = 1
    if n >= 1:
        cat[1] = 1
    for i in range(2, n + 1):
        cat[i] = sum(cat[i - j - 1] * cat[j] for j in range(i)) % mod
    return cat


def inclusion_exclusion(n: int, f: Callable[[int], int]) -> int:
    """Sum of ``f(s)`` over non-empty masks, signed by the parity of their size."""
    return sum(
        f(s) if bin(s).count("1") % 2 else -f(s) for s in range(1, 1 << n)
    )


def bsgs(a: int, b: int, mod: int) -> int | None:
    """Baby-step giant-step: some ``x`` with ``a**x = b (mod mod)``, or None."""
    table: dict[int, int] = {}
    t = math.isqrt(mod) + 1
    cur = 1
    for step in range(1, t + 1):
        cur = cur * a % mod
        table[b * cur % mod] = step
    now = cur
    for giant in range(1, t + 1):
        if now in table:
            return giant * t - table[now]
        now = now * cur % mod
    return None


def floyd_cycle(x0: int, f: Callable[[int], int]) -> tuple[int, int]:
    """Return the first value on the cycle reached from ``x0`` and the cycle length."""
    slow, fast = f(x0), f(f(x0))
    while slow != fast:
        slow, fast = f(slow), f(f(fast))
    fast = x0
    while slow != fast:
        slow, fast = f(slow), f(fast)
    start = slow
    length = 1
    fast = f(slow)
    while slow != fast:
        fast = f(fast)
        length += 1
    return start, length