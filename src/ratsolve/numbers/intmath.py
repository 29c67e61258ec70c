"""Fixed-width integer helpers.

Python integers never overflow, so the arithmetic helpers compute the exact result
and then check it against the configured signed width
(ratsolve.config.INT_MIN..INT_MAX), raising ArithmeticOverflow instead of
wrapping around.
"""
from __future__ import annotations

from ratsolve import config
from ratsolve.errors import ArithmeticOverflow


def check_range(value: int) -> int:
    """Return *value* unchanged if it fits the configured width."""
    if value < config.INT_MIN or value > config.INT_MAX:
        raise ArithmeticOverflow(value, config.RATSOLVE_INT_BITS)
    return value


def checked_add(a: int, b: int) -> int:
    return check_range(a + b)


def checked_sub(a: int, b: int) -> int:
    return check_range(a - b)


def checked_mul(a: int, b: int) -> int:
    return check_range(a * b)


def checked_neg(a: int) -> int:
    # -INT_MIN is the one negation that does not fit
    return check_range(-a)


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of |a| and |b|; gcd(0, n) == |n|.

    Not range-checked: gcd(0, INT_MIN) is -INT_MIN, which is only ever used
    as a divisor.
    """
    a, b = abs(a), abs(b)
    while b != 0:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple of |a| and |b|; zero if either is zero."""
    if a == 0 or b == 0:
        return 0
    a, b = abs(a), abs(b)
    # divide first so only a genuinely oversized result overflows
    return checked_mul(a // gcd(a, b), b)


def gcd_all(*numbers: int) -> int:
    if not numbers:
        raise ValueError("gcd_all needs at least one number.")
    result = abs(numbers[0])
    for n in numbers[1:]:
        result = gcd(result, n)
    return result


def lcm_all(*numbers: int) -> int:
    if not numbers:
        raise ValueError("lcm_all needs at least one number.")
    result = check_range(abs(numbers[0]))
    for n in numbers[1:]:
        result = lcm(result, n)
    return result
