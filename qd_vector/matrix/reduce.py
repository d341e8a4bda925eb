"""
Row reduction and matrix inverse by Gauss-Jordan elimination.

The reduction works column by column over the leading square region of
size MN = min(rows, cols). For each pivot column it picks, among rows
col..MN-1, the entry of largest absolute value (partial pivoting), swaps
that row into place, normalizes it, and eliminates the column from every
other row in 0..MN-1. Whole rows are updated, so columns beyond MN (the
right-hand block of an augmented matrix) carry the same row operations.
Forward elimination and back substitution happen in the same pass.

Degenerate pivots are not guarded by default: IEEE-754 inf/nan propagate
and a single RuntimeWarning is issued. Pass strict=True to raise
SingularMatrixError instead.
"""

from __future__ import annotations

from dataclasses import dataclass
import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray

from qd_vector.core.exceptions import SingularMatrixError
from qd_vector.core.tolerances import pivot_tolerance
from qd_vector.core.validation import check_matrix, check_square
from qd_vector.matrix._alloc import M_copy, eye
from qd_vector.matrix.transforms import M_slice, shelf, swap_rows


@dataclass(frozen=True)
class ReductionResult:
    """
    Result of a Gauss-Jordan reduction.

    Attributes:
        matrix: Reduced matrix (same shape as the input)
        pivot_rows: For each pivot column, the row chosen as pivot row
            (before it was swapped into place)
        pivots: Pivot values, before the pivot row was normalized
        n_swaps: Number of row exchanges actually performed
        rank: Number of pivots above the pivot tolerance
    """
    matrix: NDArray[np.float64]
    pivot_rows: tuple[int, ...]
    pivots: tuple[float, ...]
    n_swaps: int
    rank: int


def _reduce(
    M: ArrayLike,
    strict: bool,
    matrix_name: str,
) -> tuple[ReductionResult, list[int]]:
    """Run the elimination; return the result and the degenerate pivot columns."""
    result = M_copy(M)
    n_rows, n_cols = result.shape
    MN = min(n_rows, n_cols)

    scale = float(np.max(np.abs(result[:MN, :MN]))) if MN > 0 else 0.0
    tol = pivot_tolerance(result.shape, scale)

    pivot_rows: list[int] = []
    pivots: list[float] = []
    degenerate: list[int] = []
    n_swaps = 0
    rank = 0

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        for col in range(MN):
            # First-found wins on ties (strict >)
            swap_row = col
            swap_value = abs(result[col, col])
            for row in range(col + 1, MN):
                test_value = abs(result[row, col])
                if test_value > swap_value:
                    swap_value = test_value
                    swap_row = row

            pivot_rows.append(swap_row)
            if swap_row != col:
                swap_rows(result, col, swap_row, mode='in_place')
                n_swaps += 1

            pivot_value = result[col, col]
            pivots.append(float(pivot_value))

            # NaN pivots fail this comparison too
            if abs(pivot_value) > tol:
                rank += 1
            else:
                if strict:
                    raise SingularMatrixError(
                        f"{matrix_name} is singular: pivot {float(pivot_value)!r} in column "
                        f"{col} is at or below tolerance {tol:.3g} "
                        f"(rank so far {rank}, expected {MN})",
                        matrix_name=matrix_name,
                        pivot_index=col,
                        pivot_value=float(pivot_value),
                        rank=rank,
                        expected_rank=MN,
                    )
                degenerate.append(col)

            pivot_row = (1.0 / pivot_value) * result[col]
            for row in range(MN):
                if row == col:
                    result[row] = pivot_row
                else:
                    result[row] = result[row] - result[row, col] * pivot_row

    reduction = ReductionResult(
        matrix=result,
        pivot_rows=tuple(pivot_rows),
        pivots=tuple(pivots),
        n_swaps=n_swaps,
        rank=rank,
    )
    return reduction, degenerate


def _warn_degenerate(matrix_name: str, degenerate: list[int], stacklevel: int) -> None:
    """Issue the single RuntimeWarning for a reduction with degenerate pivots."""
    warnings.warn(
        f"{matrix_name}: degenerate pivot in column(s) {degenerate}; "
        f"result contains inf/nan or lost precision",
        RuntimeWarning,
        stacklevel=stacklevel,
    )


def reduce_with_info(
    M: ArrayLike,
    *,
    strict: bool = False,
    matrix_name: str = 'M',
) -> ReductionResult:
    """
    Gauss-Jordan reduction with partial pivoting, plus pivot diagnostics.

    Parameters
    ----------
    M : array-like
        Matrix to reduce (rows x cols). Not modified.
    strict : bool
        If True, raise SingularMatrixError on the first pivot at or below
        the pivot tolerance. If False (default), let inf/nan propagate and
        issue one RuntimeWarning listing the degenerate columns.
    matrix_name : str
        Name used in error messages and on SingularMatrixError.

    Returns
    -------
    ReductionResult

    Raises
    ------
    ShapeError
        If M is jagged or empty.
    SingularMatrixError
        If strict=True and a degenerate pivot is met.
    """
    reduction, degenerate = _reduce(M, strict=strict, matrix_name=matrix_name)
    if degenerate:
        _warn_degenerate(matrix_name, degenerate, stacklevel=3)
    return reduction


def M_reduce(M: ArrayLike, *, strict: bool = False) -> NDArray[np.float64]:
    """
    Reduced row-echelon form of M over its leading min(rows, cols) columns.

    See reduce_with_info for the algorithm and the strict flag.
    """
    reduction, degenerate = _reduce(M, strict=strict, matrix_name='M')
    if degenerate:
        _warn_degenerate('M', degenerate, stacklevel=3)
    return reduction.matrix


def M_inverse(M: ArrayLike, *, strict: bool = False) -> NDArray[np.float64]:
    """
    Inverse of a square matrix by reducing the augmented matrix [M | I].

    The inverse is the right-hand n x n block of the reduced matrix.
    Invertibility is not checked unless strict=True; a singular M
    otherwise yields inf/nan entries and a RuntimeWarning.

    Raises
    ------
    DimensionError
        If M is not square.
    SingularMatrixError
        If strict=True and M is singular to working precision.
    """
    A = check_matrix(M, "M")
    n = check_square(A, "M")

    augmented = shelf(A, eye(n))
    reduction, degenerate = _reduce(augmented, strict=strict, matrix_name='M')
    if degenerate:
        warnings.warn(
            f"M: matrix is singular to working precision (degenerate pivot in "
            f"column(s) {degenerate}); inverse contains inf/nan",
            RuntimeWarning,
            stacklevel=2,
        )
    return M_slice(reduction.matrix, 0, n, n, 2 * n)


def M_determinant(M: ArrayLike) -> float:
    """
    Determinant of a square matrix by the same pivoting elimination.

    det(M) = (-1)^n_swaps * prod(pivots). Returns 0.0 as soon as an exact
    zero pivot is met.

    Raises:
        DimensionError: If M is not square
    """
    A = check_matrix(M, "M")
    check_square(A, "M")

    reduction, _ = _reduce(A, strict=False, matrix_name='M')
    for pivot in reduction.pivots:
        if pivot == 0.0:
            return 0.0

    sign = -1.0 if reduction.n_swaps % 2 else 1.0
    return sign * float(np.prod(reduction.pivots))
