import math
import operator

import pytest

from cpkit.numeric import trisect


def test_finds_maximum_by_default():
    assert trisect(0.0, 5.0, lambda x: -((x - 2.0) ** 2)) == pytest.approx(2.0, abs=1e-6)


def test_finds_minimum_with_less():
    result = trisect(-10.0, 10.0, lambda x: (x - 3.0) ** 2 + 1, operator.lt)
    assert result == pytest.approx(3.0, abs=1e-6)


def test_sine_peak():
    result = trisect(0.0, math.pi, math.sin)
    assert result == pytest.approx(math.pi / 2, abs=1e-6)


def test_result_stays_in_interval():
    result = trisect(1.0, 4.0, lambda x: x)
    assert 1.0 <= result <= 4.0
    assert result == pytest.approx(4.0, abs=1e-6)