from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from numbers import Integral
from typing import ClassVar, Iterator, Union

from ratsolve.errors import DivisionByZero
from ratsolve.numbers.intmath import (
    check_range,
    checked_add,
    checked_mul,
    checked_neg,
    checked_sub,
    gcd,
    lcm,
)


def simplify(numerator: int, denominator: int) -> tuple[int, int]:
    """Reduce a fraction to lowest terms with a positive denominator.

    Idempotent: an already reduced pair comes back unchanged.
    """
    if denominator == 0:
        raise DivisionByZero(f"zero denominator in {numerator}/{denominator}")
    check_range(numerator)
    check_range(denominator)

    g = gcd(numerator, denominator)
    numerator //= g
    denominator //= g
    if denominator < 0:
        numerator = checked_neg(numerator)
        denominator = checked_neg(denominator)
    return numerator, denominator


@dataclass(frozen=True)
class Rational:
    """
    Exact fraction over fixed-width integers.

    Always stored in lowest terms with the sign on the numerator, so
    dataclass equality and hashing compare values.
    """

    numerator: int
    denominator: int = 1

    ZERO: ClassVar[Rational]
    ONE: ClassVar[Rational]

    def __post_init__(self) -> None:
        if not isinstance(self.numerator, Integral) or not isinstance(self.denominator, Integral):
            raise TypeError(
                f"Rational components must be integers, got "
                f"{type(self.numerator).__name__}/{type(self.denominator).__name__}."
            )
        num, den = simplify(int(self.numerator), int(self.denominator))
        object.__setattr__(self, "numerator", num)
        object.__setattr__(self, "denominator", den)

    @classmethod
    def of(cls, value: Union[int, Integral, Fraction, Rational]) -> Rational:
        """Coerce an integer (numpy scalars included), Fraction or Rational."""
        if isinstance(value, Rational):
            return value
        if isinstance(value, Fraction):
            return cls.from_fraction(value)
        if isinstance(value, Integral):
            return cls(int(value), 1)
        raise TypeError(f"cannot convert {type(value).__name__} to Rational.")

    @classmethod
    def from_fraction(cls, value: Fraction) -> Rational:
        return cls(value.numerator, value.denominator)

    def as_fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def reciprocal(self) -> Rational:
        return Rational(self.denominator, self.numerator)

    def is_zero(self) -> bool:
        return self.numerator == 0

    def plus(self, other: Rational) -> Rational:
        """Sum over the least common denominator, reduced."""
        common = lcm(self.denominator, other.denominator)
        return Rational(
            checked_add(
                checked_mul(self.numerator, common // self.denominator),
                checked_mul(other.numerator, common // other.denominator),
            ),
            common,
        )

    def minus(self, other: Rational) -> Rational:
        """Difference over the least common denominator, reduced."""
        common = lcm(self.denominator, other.denominator)
        return Rational(
            checked_sub(
                checked_mul(self.numerator, common // self.denominator),
                checked_mul(other.numerator, common // other.denominator),
            ),
            common,
        )

    def times(self, other: Rational) -> Rational:
        # cross-cancel first; the reduced product is the same
        g1 = gcd(self.numerator, other.denominator)
        g2 = gcd(other.numerator, self.denominator)
        return Rational(
            checked_mul(self.numerator // g1, other.numerator // g2),
            checked_mul(self.denominator // g2, other.denominator // g1),
        )

    def divide(self, other: Rational) -> Rational:
        """This fraction is the dividend, *other* the divisor."""
        if other.is_zero():
            raise DivisionByZero(f"division of {self} by zero")
        # cross-multiply, cancelling common factors of the two numerators
        # and of the two denominators first
        g1 = gcd(self.numerator, other.numerator)
        g2 = gcd(self.denominator, other.denominator)
        return Rational(
            checked_mul(self.numerator // g1, other.denominator // g2),
            checked_mul(self.denominator // g2, other.numerator // g1),
        )

    def to_double(self) -> float:
        """Lossy float value, for display only."""
        return self.numerator / self.denominator

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------

    def __add__(self, other):
        if not isinstance(other, (Rational, Integral)):
            return NotImplemented
        return self.plus(Rational.of(other))

    def __radd__(self, other):
        if not isinstance(other, Integral):
            return NotImplemented
        return Rational.of(other).plus(self)

    def __sub__(self, other):
        if not isinstance(other, (Rational, Integral)):
            return NotImplemented
        return self.minus(Rational.of(other))

    def __rsub__(self, other):
        if not isinstance(other, Integral):
            return NotImplemented
        return Rational.of(other).minus(self)

    def __mul__(self, other):
        if not isinstance(other, (Rational, Integral)):
            return NotImplemented
        return self.times(Rational.of(other))

    def __rmul__(self, other):
        if not isinstance(other, Integral):
            return NotImplemented
        return Rational.of(other).times(self)

    def __truediv__(self, other):
        if not isinstance(other, (Rational, Integral)):
            return NotImplemented
        return self.divide(Rational.of(other))

    def __rtruediv__(self, other):
        if not isinstance(other, Integral):
            return NotImplemented
        return Rational.of(other).divide(self)

    def __neg__(self) -> Rational:
        return Rational(checked_neg(self.numerator), self.denominator)

    def __float__(self) -> float:
        return self.to_double()

    def __iter__(self) -> Iterator[int]:
        yield self.numerator
        yield self.denominator

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


Rational.ZERO = Rational(0, 1)
Rational.ONE = Rational(1, 1)
