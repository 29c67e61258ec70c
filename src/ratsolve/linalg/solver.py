"""Exact row reduction of augmented matrices.

The matrix is a list of rows; the last column of every row is the
right-hand side, the others are coefficients of the unknowns (one unknown
per column, one equation per row). All operations mutate the matrix in
place.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ratsolve.errors import InconsistentSystem
from ratsolve.numbers.intmath import checked_mul, lcm_all
from ratsolve.numbers.rational import Rational

LOG = logging.getLogger(__name__)

Matrix = List[List[Rational]]
IntMatrix = List[List[int]]


def matrix_shape(matrix: Sequence[Sequence[object]]) -> tuple[int, int]:
    """Return (n_rows, n_cols), rejecting ragged or column-less matrices."""
    n_rows = len(matrix)
    if n_rows == 0:
        return 0, 0
    n_cols = len(matrix[0])
    if n_cols < 1:
        raise ValueError("matrix rows must have at least one column.")
    for y, row in enumerate(matrix):
        if len(row) != n_cols:
            raise ValueError(f"row {y} has {len(row)} entries, expected {n_cols}.")
    return n_rows, n_cols


def _find_contradiction(matrix: Matrix, n_rows: int, n_cols: int) -> Optional[int]:
    rhs = n_cols - 1
    for y in range(n_rows):
        row = matrix[y]
        if not row[rhs].is_zero() and all(row[x].is_zero() for x in range(rhs)):
            return y
    return None


def is_consistent(matrix: Matrix) -> bool:
    """Cheap pre-check: False if some row reads 0 = c with c != 0.

    The rule also covers a matrix made of the right-hand-side column alone:
    [[5]] reads 0 = 5 and is inconsistent, while [[0]] is consistent. Such a
    matrix is not treated as trivially solvable.
    """
    n_rows, n_cols = matrix_shape(matrix)
    return _find_contradiction(matrix, n_rows, n_cols) is None


def _select_pivot(matrix: Matrix, start_row: int, col: int) -> Optional[int]:
    """Row index of the pivot for *col*, scanning down from *start_row*.

    An entry equal to ONE wins; otherwise the first non-zero entry.
    """
    found = None
    for y in range(start_row, len(matrix)):
        value = matrix[y][col]
        if value.is_zero():
            continue
        if found is None:
            found = y
        if value == Rational.ONE:
            return y
    return found


def _eliminate(matrix: Matrix, n_rows: int, n_cols: int) -> Optional[int]:
    """Forward elimination; returns the index of a contradicting row, if any."""
    rhs = n_cols - 1
    row, col = 0, 0

    while row < n_rows and col < rhs:
        pivot = _select_pivot(matrix, row, col)
        if pivot is None:
            LOG.debug("column %d has no pivot at or below row %d", col, row)
            col += 1
            continue

        if pivot != row:
            matrix[row], matrix[pivot] = matrix[pivot], matrix[row]

        pivot_row = matrix[row]
        scale = pivot_row[col]
        LOG.debug("pivot %s at (%d, %d)", scale, row, col)
        if scale != Rational.ONE:
            pivot_row[col] = Rational.ONE
            for x in range(col + 1, n_cols):
                pivot_row[x] = pivot_row[x].divide(scale)

        for y in range(row + 1, n_rows):
            sub = matrix[y]
            factor = sub[col]
            if factor.is_zero():
                continue
            sub[col] = Rational.ZERO

            all_zeros = True
            for x in range(col + 1, n_cols):
                sub[x] = sub[x].minus(factor.times(pivot_row[x]))
                if x < rhs and not sub[x].is_zero():
                    all_zeros = False

            if all_zeros and not sub[rhs].is_zero():
                return y

        row += 1
        col += 1

    return None


def eliminate(matrix: Matrix) -> bool:
    """Bring *matrix* to row-echelon form with unit pivots.

    Returns False as soon as a row reduces to 0 = c with c != 0; the matrix
    is then left partially eliminated.
    """
    n_rows, n_cols = matrix_shape(matrix)
    return _eliminate(matrix, n_rows, n_cols) is None


def back_reduce(matrix: Matrix) -> None:
    """Clear the entries above every pivot of an eliminated matrix."""
    n_rows, n_cols = matrix_shape(matrix)
    rhs = n_cols - 1

    for y in range(n_rows):
        row = matrix[y]
        lead = next((x for x in range(rhs) if not row[x].is_zero()), None)
        if lead is None:
            continue

        for above in range(y):
            upper = matrix[above]
            factor = upper[lead]
            if factor.is_zero():
                continue
            upper[lead] = Rational.ZERO
            for x in range(lead + 1, n_cols):
                upper[x] = upper[x].minus(factor.times(row[x]))


def solve(matrix: Matrix, *, strict: bool = False) -> bool:
    """
    Solve the augmented system [A | b] held in *matrix*, in place.

    On success the matrix is in reduced row-echelon form and True is
    returned. An inconsistent system returns False, or raises
    InconsistentSystem when *strict* is set. Do not reuse the matrix after
    a failure: elimination may already have modified it.
    """
    n_rows, n_cols = matrix_shape(matrix)

    bad = _find_contradiction(matrix, n_rows, n_cols)
    if bad is None:
        bad = _eliminate(matrix, n_rows, n_cols)
    if bad is not None:
        LOG.debug("inconsistent system: row %d reads 0 = c", bad)
        if strict:
            raise InconsistentSystem(bad)
        return False

    back_reduce(matrix)
    return True


def _clear_denominators(row: List[Rational]) -> List[int]:
    scale = lcm_all(*(value.denominator for value in row))
    return [checked_mul(value.numerator, scale // value.denominator) for value in row]


def solve_integers(matrix: IntMatrix, *, strict: bool = False) -> bool:
    """Integer front end to solve().

    Each solved row is multiplied by the lcm of its denominators, giving an
    equivalent integer equation: the ratio between a row's pivot coefficient
    and its trailing value is the solved value. The caller's matrix is only
    written once every row has been rescaled.
    """
    matrix_shape(matrix)
    work = [[Rational(value, 1) for value in row] for row in matrix]

    if not solve(work, strict=strict):
        return False

    scaled = [_clear_denominators(row) for row in work]
    for y, row in enumerate(scaled):
        matrix[y][:] = row
    return True
