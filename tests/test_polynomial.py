"""Tests for polynomial operations and Lagrange interpolation."""

import random
from itertools import combinations

import pytest

from core import rng
from core.field import FieldElement, mul
from core.polynomial import (
    Polynomial, RandomSourceError, MAX_GENERATE_ATTEMPTS,
    evaluate, degree, generate, interpolate, lagrange_coefficients_at_zero,
)


class ZeroSource:
    """A broken source that only ever yields zero bytes."""

    def __init__(self):
        self.calls = 0

    def randbytes(self, n):
        self.calls += 1
        return bytes(n)


class ScriptedSource:
    """Yields the given draws in order."""

    def __init__(self, draws):
        self.draws = list(draws)

    def randbytes(self, n):
        return self.draws.pop(0)


def test_evaluate_constant():
    assert evaluate(bytes([42]), 0) == 42
    assert evaluate(bytes([42]), 99) == 42


def test_evaluate_linear():
    # 3 + 2x, 2*5 = 10 in GF(256), 3 ^ 10 = 9
    assert evaluate(bytes([3, 2]), 0) == 3
    assert evaluate(bytes([3, 2]), 1) == 1
    assert evaluate(bytes([3, 2]), 5) == 9


def test_evaluate_quadratic():
    p = bytes([1, 0x07, 0x03])
    x = 0x10
    expected = 1 ^ mul(0x07, x) ^ mul(0x03, mul(x, x))
    assert evaluate(p, x) == expected


def test_evaluate_at_zero_is_intercept():
    src = random.Random(5)
    for _ in range(20):
        p = src.randbytes(src.randrange(1, 10))
        assert evaluate(p, 0) == p[0]


def test_evaluate_empty():
    assert evaluate(b"", 7) == 0


def test_degree():
    assert degree(bytes([5, 0, 0, 7, 0])) == 3
    assert degree(bytes([1, 2])) == 1


def test_degree_ignores_intercept():
    for intercept in (0, 1, 0xFF):
        assert degree(bytes([intercept, 0, 0, 0, 0])) == 0


def test_degree_short():
    assert degree(b"") == 0
    assert degree(bytes([9])) == 0


def test_generate_shape():
    src = random.Random(1)
    for d in range(0, 8):
        for secret in (0, 0x2A, 0xFF):
            p = generate(src, d, secret)
            assert len(p) == d + 1
            assert p[0] == secret
            assert degree(p) == d
            if d > 0:
                assert p[d] != 0


def test_generate_rejects_collapsed_degree():
    src = ScriptedSource([bytes([9, 4, 0]), bytes([9, 0, 0]), bytes([9, 4, 6])])
    p = generate(src, 2, 0x2A)
    assert p == bytes([0x2A, 4, 6])
    assert src.draws == []


def test_generate_broken_source():
    src = ZeroSource()
    with pytest.raises(RandomSourceError):
        generate(src, 3, 0x2A)
    assert src.calls == MAX_GENERATE_ATTEMPTS


def test_generate_degree_zero_ignores_source_bytes():
    p = generate(ZeroSource(), 0, 0x2A)
    assert p == bytes([0x2A])


def test_generate_short_read():
    with pytest.raises(RandomSourceError):
        generate(ScriptedSource([b"\x01"]), 2, 0)


def test_generate_invalid_args():
    with pytest.raises(ValueError):
        generate(random.Random(0), -1, 0)
    with pytest.raises(ValueError):
        generate(random.Random(0), 2, 256)


def test_generate_default_source():
    rng.set_seed(42)
    a = generate(None, 4, 7)
    rng.set_seed(42)
    b = generate(None, 4, 7)
    rng.set_seed(None)
    assert a == b


def test_generate_system_random():
    p = generate(random.SystemRandom(), 5, 0x11)
    assert p[0] == 0x11
    assert degree(p) == 5


def test_interpolate_degree1():
    p = bytes([42, 0x9C])
    pts = [(1, evaluate(p, 1)), (2, evaluate(p, 2))]
    assert interpolate(pts) == 42


def test_interpolate_degree2():
    p = bytes([7, 3, 5])
    pts = [(x, evaluate(p, x)) for x in range(1, 4)]
    assert interpolate(pts) == 7


def test_interpolate_overdetermined():
    p = generate(random.Random(3), 1, 42)
    pts = [(x, evaluate(p, x)) for x in range(1, 6)]
    assert interpolate(pts) == 42


def test_interpolate_single_point():
    assert interpolate([(9, 0x55)]) == 0x55


SECRET = 0x2A
SHARE_POLY = generate(random.Random(2024), 2, SECRET)
SHARES = [(x, evaluate(SHARE_POLY, x)) for x in range(1, 6)]


@pytest.mark.parametrize("subset", list(combinations(SHARES, 3)))
def test_interpolate_every_threshold_subset(subset):
    assert interpolate(subset) == SECRET


def test_interpolate_high_x():
    p = generate(random.Random(9), 3, 0xC3)
    pts = [(x, evaluate(p, x)) for x in (0xFF, 0x80, 0x01, 0x7E)]
    assert interpolate(pts) == 0xC3


def test_interpolate_duplicate_x():
    with pytest.raises(ZeroDivisionError):
        interpolate([(1, 10), (2, 20), (1, 30)])


def test_interpolate_empty():
    with pytest.raises(ValueError):
        interpolate([])


def test_lagrange_coefficients():
    # l_0 = 2 / (1 ^ 2) = 2 / 3, l_1 = 1 / 3; they sum to 1 since 2 ^ 1 = 3
    lambdas = lagrange_coefficients_at_zero([1, 2])
    assert mul(lambdas[0], 3) == 2
    assert mul(lambdas[1], 3) == 1
    assert lambdas[0] ^ lambdas[1] == 1


def test_polynomial_evaluate():
    p = Polynomial([FieldElement(42)])
    assert p.evaluate(FieldElement(0)) == 42
    assert p.evaluate(99) == 42


def test_polynomial_degree():
    assert Polynomial([5, 0, 0, 7, 0]).degree == 3
    assert len(Polynomial([5, 0, 0, 7, 0])) == 5


def test_random_polynomial():
    rng.set_seed(13)
    p = Polynomial.random(degree=2, constant=FieldElement(42))
    rng.set_seed(None)
    assert p.evaluate(FieldElement(0)) == 42
    assert p.degree == 2


def test_polynomial_interpolate_at_zero():
    secret = FieldElement(99)
    p = Polynomial.random(degree=1, constant=secret, source=random.Random(4))
    pts = [(FieldElement(3), p.evaluate(FieldElement(3))),
           (FieldElement(4), p.evaluate(FieldElement(4)))]
    assert Polynomial.interpolate_at_zero(pts) == secret


def test_polynomial_eq():
    assert Polynomial([1, 2]) == Polynomial([FieldElement(1), FieldElement(2)])
    assert Polynomial([1, 2]) != Polynomial([1, 3])
