from __future__ import annotations

from fractions import Fraction
from typing import Dict, List, Optional, Sequence, Union

import numpy as np

from ratsolve.numbers.rational import Rational
from .solver import Matrix, back_reduce, eliminate, matrix_shape

Entry = Union[int, Fraction, Rational]


def to_rational_matrix(matrix: Sequence[Sequence[Entry]]) -> Matrix:
    """Fresh Rational copy of a grid of ints, Fractions or Rationals."""
    matrix_shape(matrix)
    return [[Rational.of(value) for value in row] for row in matrix]


def _lead(row: Sequence[Rational], n_coeffs: int) -> Optional[int]:
    for x in range(n_coeffs):
        if not row[x].is_zero():
            return x
    return None


def pivot_columns(matrix: Sequence[Sequence[Entry]]) -> List[int]:
    """Pivot column of each non-zero row of a solved augmented matrix."""
    rows = to_rational_matrix(matrix)
    _, n_cols = matrix_shape(rows)
    pivots = []
    for row in rows:
        lead = _lead(row, n_cols - 1)
        if lead is not None:
            pivots.append(lead)
    return pivots


def free_columns(matrix: Sequence[Sequence[Entry]]) -> List[int]:
    """Coefficient columns without a pivot (underdetermined unknowns)."""
    _, n_cols = matrix_shape(matrix)
    pivots = set(pivot_columns(matrix))
    return [x for x in range(n_cols - 1) if x not in pivots]


def determined_values(matrix: Sequence[Sequence[Entry]]) -> Dict[int, Rational]:
    """
    Map unknown -> exact value for every row of a solved augmented matrix
    that pins down a single unknown.

    The value is trailing entry / pivot coefficient, so both the Rational
    output of solve() and the integer rows of solve_integers() work.
    Unknowns that depend on free columns are left out.
    """
    rows = to_rational_matrix(matrix)
    _, n_cols = matrix_shape(rows)
    rhs = n_cols - 1
    values: Dict[int, Rational] = {}
    for row in rows:
        nonzero = [x for x in range(rhs) if not row[x].is_zero()]
        if len(nonzero) == 1:
            col = nonzero[0]
            values[col] = row[rhs].divide(row[col])
    return values


def row_reduce(
    M: Sequence[Sequence[Entry]],
) -> tuple[Matrix, List[int], int]:
    """Row-reduce a coefficient-only matrix through the augmented solver.

    A zero right-hand-side column is appended, the system is eliminated and
    back-reduced, and the column is dropped again.

    Returns (rref, pivots, rank).
    """
    # a zero right-hand side can never produce a contradiction
    work = [[Rational.of(value) for value in row] + [Rational.ZERO] for row in M]
    eliminate(work)
    back_reduce(work)

    pivots = pivot_columns(work)
    rref = [row[:-1] for row in work]
    return rref, pivots, len(pivots)


def exact_rank(M: Sequence[Sequence[Entry]]) -> int:
    """Number of pivots row_reduce() finds in *M*."""
    _, _, rank = row_reduce(M)
    return rank


def to_float_array(matrix: Sequence[Sequence[Entry]]) -> np.ndarray:
    """float64 copy of the matrix, for display only."""
    rows = to_rational_matrix(matrix)
    n_rows, n_cols = matrix_shape(rows)
    out = np.zeros((n_rows, n_cols), dtype=np.float64)
    for y, row in enumerate(rows):
        for x, value in enumerate(row):
            out[y, x] = value.to_double()
    return out
