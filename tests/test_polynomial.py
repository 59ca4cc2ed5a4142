import math

import pytest

from cpkit.polynomial import Polynomial, convolution, fft


def test_fft_roundtrip():
    data = [complex(x) for x in [3, 1, 4, 1, 5, 9, 2, 6]]
    back = fft(fft(data), invert=True)
    assert all(abs(a - b) < 1e-9 for a, b in zip(back, data))


def test_fft_rejects_bad_length():
    with pytest.raises(ValueError):
        fft([1, 2, 3])


def test_convolution_identity():
    a = [5, 7, 11]
    result = convolution(a, [1])
    assert result[:3] == a
    assert all(x == 0 for x in result[3:])
    assert len(result) & (len(result) - 1) == 0


def test_binomial_power():
    p = Polynomial([1, 1])
    acc = Polynomial([1])
    for _ in range(8):
        acc = acc * p
    assert acc.degree == 8
    assert acc.coefficients == [math.comb(8, k) for k in range(9)]


def test_add_sub_roundtrip():
    a = Polynomial([1, 2, 3])
    b = Polynomial([4, 5])
    assert (a + b) - b == a
    assert (a - a) == Polynomial()


def test_indexing():
    p = Polynomial([1, 2, 3])
    p[1] = 9
    assert p[1] == 9
    with pytest.raises(IndexError):
        p[3]


def test_multiplication_commutes():
    a = Polynomial([2, -1, 3])
    b = Polynomial([0, 4, 1, 1])
    assert a * b == b * a