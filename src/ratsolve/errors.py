from __future__ import annotations


class RatsolveError(Exception):
    """Base class for errors raised by ratsolve."""


class DivisionByZero(RatsolveError, ZeroDivisionError):
    """A rational with a zero denominator was requested."""


class ArithmeticOverflow(RatsolveError, OverflowError):
    """An integer result does not fit the configured fixed width."""

    def __init__(self, value: int, bits: int):
        self.value = value
        self.bits = bits
        super().__init__(f"{value} does not fit in a signed {bits}-bit integer")


class InconsistentSystem(RatsolveError):
    """The linear system has no solution.

    row: index of the row (after any swaps) where the contradiction
         0 = c with c != 0 was found.
    """

    def __init__(self, row: int):
        self.row = row
        super().__init__(f"inconsistent system: row {row} reduces to 0 = c with c != 0")
