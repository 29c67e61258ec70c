"""Tests for the top-level ratsolve namespace."""
import ratsolve
from ratsolve import Rational


def test_public_names_resolve():
    for name in ratsolve.__all__:
        assert hasattr(ratsolve, name), name


def test_end_to_end():
    M = [[Rational(3), Rational(2), Rational(7)], [Rational(1), Rational(-1), Rational(-1)]]
    assert ratsolve.solve(M)
    assert ratsolve.determined_values(M) == {0: Rational(1), 1: Rational(2)}


def test_errors_share_a_base():
    for cls in (ratsolve.DivisionByZero, ratsolve.ArithmeticOverflow, ratsolve.InconsistentSystem):
        assert issubclass(cls, ratsolve.RatsolveError)
