"""Tests for ratsolve.config."""
import pytest

from ratsolve import config


def test_int_bounds():
    assert config.int_bounds(8) == (-128, 127)
    assert config.int_bounds(32) == (-(2**31), 2**31 - 1)
    assert config.int_bounds(64) == (-(2**63), 2**63 - 1)


def test_int_bounds_rejects_odd_widths():
    with pytest.raises(ValueError):
        config.int_bounds(12)


def test_load_int_bits_default():
    assert config.load_int_bits({}) == 64


def test_load_int_bits_from_environ():
    assert config.load_int_bits({"RATSOLVE_INT_BITS": "16"}) == 16


def test_load_int_bits_invalid():
    with pytest.raises(ValueError):
        config.load_int_bits({"RATSOLVE_INT_BITS": "sixty-four"})
    with pytest.raises(ValueError):
        config.load_int_bits({"RATSOLVE_INT_BITS": "128"})


def test_module_bounds_match_width():
    assert (config.INT_MIN, config.INT_MAX) == config.int_bounds(config.RATSOLVE_INT_BITS)
