from .intmath import (
    check_range,
    checked_add,
    checked_sub,
    checked_mul,
    checked_neg,
    gcd,
    lcm,
    gcd_all,
    lcm_all,
)
from .rational import Rational, simplify

__all__ = [
    "check_range",
    "checked_add",
    "checked_sub",
    "checked_mul",
    "checked_neg",
    "gcd",
    "lcm",
    "gcd_all",
    "lcm_all",
    "Rational",
    "simplify",
]
