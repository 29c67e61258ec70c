from .solver import (
    Matrix,
    IntMatrix,
    matrix_shape,
    is_consistent,
    eliminate,
    back_reduce,
    solve,
    solve_integers,
)
from .solution import (
    to_rational_matrix,
    pivot_columns,
    free_columns,
    determined_values,
    row_reduce,
    exact_rank,
    to_float_array,
)

__all__ = [
    "Matrix",
    "IntMatrix",
    "matrix_shape",
    "is_consistent",
    "eliminate",
    "back_reduce",
    "solve",
    "solve_integers",
    "to_rational_matrix",
    "pivot_columns",
    "free_columns",
    "determined_values",
    "row_reduce",
    "exact_rank",
    "to_float_array",
]
