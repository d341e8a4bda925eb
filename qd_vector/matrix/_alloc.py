"""
Matrix allocation, shape queries and flat-buffer conversion.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from qd_vector.core.exceptions import ShapeError, ShapeMismatchError
from qd_vector.core.tolerances import TOLERATE_EPSILON
from qd_vector.core.validation import (
    check_matrix,
    check_row_lengths,
    check_size,
    check_vector,
)


def M_zero(n: int, m: int) -> NDArray[np.float64]:
    """Zero matrix with n rows and m columns."""
    return np.zeros((check_size(n, "n"), check_size(m, "m")), dtype=np.float64)


def eye(n: int) -> NDArray[np.float64]:
    """n x n identity matrix."""
    return np.eye(check_size(n, "n"), dtype=np.float64)


def M_shape(M: Any, check: bool = False) -> tuple[int, int]:
    """
    Shape (rows, cols) of a matrix, measured from row 0.

    Parameters
    ----------
    M : nested sequence or 2D array
        Matrix to measure.
    check : bool
        If True, scan every row and reject rows whose length differs
        from row 0.

    Returns
    -------
    tuple of int
        (rows, cols)

    Raises
    ------
    ShapeError
        If M has no rows, or check=True and M is jagged.
    """
    if check:
        return check_row_lengths(M, "M")

    if isinstance(M, np.ndarray):
        if M.ndim != 2:
            raise ShapeError(f"M: expected 2D matrix, got {M.ndim}D with shape {M.shape}")
        if M.shape[0] == 0:
            raise ShapeError("M: matrix has no rows")
        return int(M.shape[0]), int(M.shape[1])

    if len(M) == 0:
        raise ShapeError("M: matrix has no rows")
    return len(M), len(M[0])


def M_copy(M: ArrayLike) -> NDArray[np.float64]:
    """Deep copy of a matrix."""
    return check_matrix(M, "M").copy()


def M_tolerate(M: ArrayLike, epsilon: float = TOLERATE_EPSILON) -> NDArray[np.float64]:
    """
    Copy of M with near-integer entries snapped to the integer.

    Any element strictly closer than epsilon to its nearest integer is
    replaced by that integer. Used to compare rotation matrices against
    exact integer layouts.
    """
    result = M_copy(M)
    rounded = np.round(result)
    near = np.abs(result - rounded) < epsilon
    result[near] = rounded[near]
    # np.round maps small negatives to -0.0
    result[result == 0.0] = 0.0
    return result


def M_as_list(M: ArrayLike) -> NDArray[np.float64]:
    """Flatten a matrix into a row-major 1D array."""
    return check_matrix(M, "M").flatten(order='C')


def list_as_M(L: ArrayLike, rows: int, cols: int) -> NDArray[np.float64]:
    """
    Unflatten a row-major 1D list into a rows x cols matrix.

    Raises
    ------
    ShapeMismatchError
        If len(L) != rows * cols.
    """
    flat = check_vector(L, "L")
    rows = check_size(rows, "rows")
    cols = check_size(cols, "cols")
    n_items = flat.shape[0]

    if n_items != rows * cols:
        raise ShapeMismatchError(
            f"Length {n_items} doesn't match rows {rows} and columns {cols} "
            f"(expected {rows * cols} items)",
            length=n_items,
            rows=rows,
            cols=cols,
        )
    return flat.reshape(rows, cols).copy()
