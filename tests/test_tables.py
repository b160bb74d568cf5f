"""Tests for the log/antilog tables."""

from core.tables import LOG, EXP, GENERATOR, ORDER


def test_table_sizes():
    assert len(LOG) == 256
    assert len(EXP) >= 2 * ORDER


def test_exp_log_roundtrip():
    for e in range(1, 256):
        assert EXP[LOG[e]] == e


def test_log_zero_sentinel():
    assert LOG[0] == 0xFF


def test_exp_periodic():
    for i in range(ORDER, len(EXP)):
        assert EXP[i] == EXP[i % ORDER]


def test_generator_enumerates_group():
    assert EXP[1] == GENERATOR
    assert sorted(EXP[:ORDER]) == list(range(1, 256))
