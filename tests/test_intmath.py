"""Tests for ratsolve.numbers.intmath."""
import pytest

from ratsolve import config
from ratsolve.errors import ArithmeticOverflow
from ratsolve.numbers.intmath import (
    check_range,
    checked_add,
    checked_mul,
    checked_neg,
    gcd,
    gcd_all,
    lcm,
    lcm_all,
)

SAMPLES = [(12, 18), (0, 5), (7, 0), (-4, 6), (9, -27), (17, 31), (1, 1), (-8, -12)]


def test_gcd_basic():
    assert gcd(12, 18) == 6
    assert gcd(17, 31) == 1


def test_gcd_with_zero():
    assert gcd(0, 5) == 5
    assert gcd(5, 0) == 5
    assert gcd(0, 0) == 0


def test_gcd_is_non_negative():
    assert gcd(-4, 6) == 2
    assert gcd(-8, -12) == 4


def test_gcd_symmetric():
    for a, b in SAMPLES:
        assert gcd(a, b) == gcd(b, a)


def test_lcm_times_gcd():
    for a, b in SAMPLES:
        assert lcm(a, b) * gcd(a, b) == abs(a * b)


def test_lcm_zero():
    assert lcm(0, 4) == 0
    assert lcm(0, 0) == 0


def test_gcd_all_lcm_all():
    assert gcd_all(12, 18, 27) == 3
    assert gcd_all(-5) == 5
    assert lcm_all(2, 3, 4) == 12
    assert lcm_all(1, 1, 6, 4) == 12


def test_folds_need_arguments():
    with pytest.raises(ValueError):
        gcd_all()
    with pytest.raises(ValueError):
        lcm_all()


def test_checked_ops_at_the_edges():
    assert checked_add(config.INT_MAX - 1, 1) == config.INT_MAX
    with pytest.raises(ArithmeticOverflow):
        checked_add(config.INT_MAX, 1)
    with pytest.raises(ArithmeticOverflow):
        checked_neg(config.INT_MIN)
    assert checked_neg(config.INT_MAX) == config.INT_MIN + 1


def test_checked_mul_overflow_is_overflow_error():
    with pytest.raises(OverflowError):
        checked_mul(2**32, 2**32)


def test_lcm_overflow():
    big = 2**61 + 1  # odd
    with pytest.raises(ArithmeticOverflow):
        lcm(big, 4)


def test_narrow_width(monkeypatch):
    monkeypatch.setattr(config, "RATSOLVE_INT_BITS", 8)
    monkeypatch.setattr(config, "INT_MIN", -128)
    monkeypatch.setattr(config, "INT_MAX", 127)
    assert check_range(127) == 127
    with pytest.raises(ArithmeticOverflow) as excinfo:
        checked_mul(16, 8)
    assert excinfo.value.value == 128
    assert excinfo.value.bits == 8


def test_gcd_of_min_is_not_range_checked():
    # only ever used as a divisor, so -INT_MIN is fine here
    assert gcd(0, config.INT_MIN) == -config.INT_MIN
    assert gcd(config.INT_MIN, config.INT_MIN) == -config.INT_MIN
    assert gcd_all(config.INT_MIN, 0) == -config.INT_MIN
