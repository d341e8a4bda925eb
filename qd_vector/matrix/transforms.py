"""
Matrix transform operations: products, reshapes, row exchange,
concatenation and slicing.

All operations validate their matrix operands through the shape check
and return fresh arrays, except swap_rows(..., mode='in_place').
"""

from __future__ import annotations

from typing import Any, Literal

import numpy as np
from numpy.typing import ArrayLike, NDArray

from qd_vector.core.exceptions import (
    DimensionError,
    IncompatibleShapeError,
    RowMismatchError,
    ValidationError,
)
from qd_vector.core.validation import (
    check_index,
    check_length,
    check_matrix,
    check_row_lengths,
    check_vector,
)


SwapMode = Literal['copy', 'in_place']


def Mv_product(M: ArrayLike, v: ArrayLike) -> NDArray[np.float64]:
    """
    Matrix-vector product M v.

    Raises:
        DimensionError: If len(v) != cols(M)
    """
    A = check_matrix(M, "M")
    x = check_vector(v, "v")
    check_length(x, A.shape[1], "v")
    return A @ x


def MM_product(M1: ArrayLike, M2: ArrayLike) -> NDArray[np.float64]:
    """
    Matrix product M1 M2.

    Raises:
        IncompatibleShapeError: If cols(M1) != rows(M2)
    """
    A = check_matrix(M1, "M1")
    B = check_matrix(M2, "M2")
    n_rows1, n_cols1 = A.shape
    n_rows2, n_cols2 = B.shape

    if n_cols1 != n_rows2:
        raise IncompatibleShapeError(
            f"incompatible matrices: M1 is {n_rows1}x{n_cols1}, "
            f"M2 is {n_rows2}x{n_cols2} (inner dimensions {n_cols1} != {n_rows2})",
            left_shape=(n_rows1, n_cols1),
            right_shape=(n_rows2, n_cols2),
        )
    return A @ B


def M_transpose(M: ArrayLike) -> NDArray[np.float64]:
    """Transpose (cols x rows), as a fresh C-ordered array."""
    return check_matrix(M, "M").T.copy()


def M_row_major_order(M: ArrayLike) -> NDArray[np.float64]:
    """Elements of M read row by row."""
    return check_matrix(M, "M").flatten(order='C')


def M_column_major_order(M: ArrayLike) -> NDArray[np.float64]:
    """Elements of M read column by column."""
    return check_matrix(M, "M").flatten(order='F')


def swap_rows(M: Any, i: int, j: int, mode: SwapMode = 'copy') -> Any:
    """
    Exchange rows i and j.

    Parameters
    ----------
    M : nested sequence or 2D array
        Matrix whose rows are exchanged.
    i, j : int
        Row indices, 0 <= i, j < rows(M).
    mode : {'copy', 'in_place'}
        'copy' (default) leaves M untouched and returns a new float64
        array. 'in_place' modifies M itself (a 2D ndarray or a mutable
        sequence of rows) and returns it.

    Raises
    ------
    ValidationError
        If mode is not recognized, or 'in_place' is asked of an
        immutable container.
    DimensionError
        If i or j is out of range.
    """
    if mode not in ('copy', 'in_place'):
        raise ValidationError(f"mode: expected 'copy' or 'in_place', got {mode!r}")

    n_rows, _ = check_row_lengths(M, "M")
    i = check_index(i, n_rows, "i")
    j = check_index(j, n_rows, "j")

    if mode == 'copy':
        result = check_matrix(M, "M").copy()
    else:
        result = M

    if isinstance(result, np.ndarray):
        # Fancy indexing copies the right-hand side before assigning
        result[[i, j]] = result[[j, i]]
    else:
        try:
            result[i], result[j] = result[j], result[i]
        except TypeError as e:
            raise ValidationError(
                f"M: cannot swap rows in place on {type(result).__name__}: {e}"
            ) from e
    return result


def shelf(M1: ArrayLike, M2: ArrayLike) -> NDArray[np.float64]:
    """
    Horizontal concatenation [M1 | M2].

    Raises:
        RowMismatchError: If M1 and M2 have different row counts
    """
    A = check_matrix(M1, "M1")
    B = check_matrix(M2, "M2")

    if A.shape[0] != B.shape[0]:
        raise RowMismatchError(
            f"bad shapes: rows must match, M1 has {A.shape[0]} rows, "
            f"M2 has {B.shape[0]}",
            left_shape=A.shape,
            right_shape=B.shape,
        )
    return np.hstack([A, B])


def M_slice(
    M: ArrayLike,
    min_row: int,
    min_col: int,
    max_row: int,
    max_col: int,
) -> NDArray[np.float64]:
    """
    Half-open sub-block M[min_row:max_row, min_col:max_col].

    Raises:
        DimensionError: If the bounds fall outside M or are reversed
    """
    A = check_matrix(M, "M")
    n_rows, n_cols = A.shape

    if not 0 <= min_row <= max_row <= n_rows:
        raise DimensionError(
            f"row bounds [{min_row}, {max_row}) outside matrix with {n_rows} rows"
        )
    if not 0 <= min_col <= max_col <= n_cols:
        raise DimensionError(
            f"column bounds [{min_col}, {max_col}) outside matrix with {n_cols} columns"
        )
    return A[min_row:max_row, min_col:max_col].copy()
