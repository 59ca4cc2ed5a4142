import pytest

from cpkit.gray_code import gray, inverse_gray


def test_round_trip():
    for n in range(2048):
        assert inverse_gray(gray(n)) == n
        assert gray(inverse_gray(n)) == n


def test_neighbours_differ_in_one_bit():
    for n in range(2047):
        assert bin(gray(n) ^ gray(n + 1)).count("1") == 1


def test_codes_are_a_permutation():
    assert sorted(gray(n) for n in range(256)) == list(range(256))


def test_negative_rejected():
    with pytest.raises(ValueError):
        gray(-1)
    with pytest.raises(ValueError):
        inverse_gray(-3)