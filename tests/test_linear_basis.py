import random

import pytest

from cpkit.linear_basis import LinearBasis


def _span(values):
    span = {0}
    for v in values:
        span |= {s ^ v for s in span}
    return span


@pytest.mark.parametrize("seed", range(8))
def test_basis_matches_span(seed):
    rng = random.Random(seed)
    dim = 7
    basis = LinearBasis(dim)
    inserted = []
    for _ in range(rng.randrange(1, 6)):
        x = rng.randrange(1 << dim)
        before = _span(inserted)
        assert basis.insert(x) == (x not in before)
        inserted.append(x)
    span = _span(inserted)
    assert 1 << len(basis) == len(span)
    assert basis.xor_max() == max(span)
    for x in range(1 << dim):
        assert basis.contains(x) == (x in span)


def test_empty_basis():
    basis = LinearBasis(5)
    assert len(basis) == 0
    assert basis.xor_max() == 0
    assert 0 in basis


def test_value_too_wide():
    basis = LinearBasis(4)
    with pytest.raises(ValueError):
        basis.insert(1 << 4)
    with pytest.raises(ValueError):
        basis.contains(-1)