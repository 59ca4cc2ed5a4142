import math

import pytest

from cpkit.number_theory import (
    binary_gcd,
    binomial_table,
    bsgs,
    catalan,
    crt,
    extgcd,
    floyd_cycle,
    gospers_hack,
    inclusion_exclusion,
    iterate_subsets,
    lucas,
    modular_inverses,
    prime_sieve,
)


def test_binary_gcd_matches_math():
    for x in range(40):
        for y in range(40):
            assert binary_gcd(x, y) == math.gcd(x, y)


def test_binary_gcd_rejects_negative():
    with pytest.raises(ValueError):
        binary_gcd(-2, 4)


def test_prime_sieve():
    primes, factor = prime_sieve(100)
    assert primes == [i for i in range(2, 101) if all(i % d for d in range(2, i))]
    for i in range(4, 101):
        if i not in primes:
            assert factor[i] in primes and i % factor[i] == 0
            assert all(i % p for p in primes if p < factor[i])


def test_modular_inverses():
    p = 1_000_000_007
    inv = modular_inverses(50, p)
    assert all(i * inv[i] % p == 1 for i in range(1, 51))


def test_lucas_matches_comb():
    for m in range(30):
        for n in range(m + 1):
            assert lucas(m, n, 7) == math.comb(m, n) % 7


def test_crt():
    moduli = [3, 5, 7]
    remainders = [2, 3, 2]
    x = crt(remainders, moduli)
    assert 0 <= x < 105
    assert [x % n for n in moduli] == remainders


def test_crt_length_mismatch():
    with pytest.raises(ValueError):
        crt([1, 2], [3])


def test_iterate_subsets():
    state = 0b101101
    subs = list(iterate_subsets(state))
    expected = {s for s in range(1, state + 1) if s & state == s}
    assert set(subs) == expected
    assert subs == sorted(subs, reverse=True)


def test_gospers_hack():
    masks = list(gospers_hack(6, 3))
    assert masks == [m for m in range(1 << 6) if bin(m).count("1") == 3]


def test_binomial_table():
    table = binomial_table(12, 10**9 + 7)
    for i in range(13):
        for j in range(i + 1):
            assert table[i][j] == math.comb(i, j)


def test_catalan():
    cat = catalan(15, 10**9 + 7)
    assert cat == [math.comb(2 * n, n) // (n + 1) for n in range(16)]


def test_inclusion_exclusion_counts_multiples():
    divisors = [2, 3, 5]
    limit = 100

    def f(mask):
        prod = math.prod(d for i, d in enumerate(divisors) if mask >> i & 1)
        return limit // prod

    expected = sum(1 for x in range(1, limit + 1) if any(x % d == 0 for d in divisors))
    assert inclusion_exclusion(3, f) == expected


def test_extgcd():
    for a, b in [(240, 46), (17, 5), (0, 9), (9, 0)]:
        d, x, y = extgcd(a, b)
        assert d == math.gcd(a, b)
        assert a * x + b * y == d


def test_bsgs_none_when_unsolvable():
    assert bsgs(1, 2, 7) is None


def test_floyd_cycle():
    nxt = {0: 1, 1: 2, 2: 3, 3: 1}
    assert floyd_cycle(0, nxt.__getitem__) == (1, 3)