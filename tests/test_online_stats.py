import statistics

import pytest

from cpkit.online_stats import OnlineMeanVariance

DATA = [3.5, -1.25, 7.0, 2.0, 2.0, 10.5, 0.0]


def test_matches_statistics_module():
    stats = OnlineMeanVariance()
    for x in DATA:
        stats.insert(x)
    assert stats.count == len(DATA)
    assert stats.mean() == pytest.approx(statistics.fmean(DATA))
    assert stats.variance() == pytest.approx(statistics.pvariance(DATA))


def test_erase_removes_contribution():
    stats = OnlineMeanVariance()
    for x in DATA:
        stats.insert(x)
    stats.erase(DATA[0])
    stats.erase(DATA[-1])
    rest = DATA[1:-1]
    assert stats.mean() == pytest.approx(statistics.fmean(rest))
    assert stats.variance() == pytest.approx(statistics.pvariance(rest))


def test_integer_inputs():
    stats = OnlineMeanVariance()
    for x in range(1, 11):
        stats.insert(x)
    assert stats.mean() == pytest.approx(statistics.fmean(range(1, 11)))


def test_empty_raises():
    stats = OnlineMeanVariance()
    with pytest.raises(ValueError):
        stats.mean()
    with pytest.raises(ValueError):
        stats.variance()
    with pytest.raises(ValueError):
        stats.erase(1.0)