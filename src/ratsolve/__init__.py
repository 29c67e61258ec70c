"""
ratsolve: exact rational solving of linear systems over fixed-width
integers, with an integer-only front end.
"""

from .errors import (
    RatsolveError,
    DivisionByZero,
    ArithmeticOverflow,
    InconsistentSystem,
)
from .numbers.intmath import gcd, lcm, gcd_all, lcm_all
from .numbers.rational import Rational

# Solver
from .linalg.solver import (
    is_consistent,
    eliminate,
    back_reduce,
    solve,
    solve_integers,
)

# Reading results
from .linalg.solution import (
    to_rational_matrix,
    pivot_columns,
    free_columns,
    determined_values,
    row_reduce,
    exact_rank,
    to_float_array,
)

__all__ = [
    # Errors
    "RatsolveError",
    "DivisionByZero",
    "ArithmeticOverflow",
    "InconsistentSystem",
    # Numbers
    "Rational",
    "gcd",
    "lcm",
    "gcd_all",
    "lcm_all",
    # Solver
    "is_consistent",
    "eliminate",
    "back_reduce",
    "solve",
    "solve_integers",
    # Results
    "to_rational_matrix",
    "pivot_columns",
    "free_columns",
    "determined_values",
    "row_reduce",
    "exact_rank",
    "to_float_array",
]
