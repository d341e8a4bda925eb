"""
Input validation utilities for qd_vector.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Every vector and matrix leaves here as a fresh-or-borrowed float64 ndarray
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from qd_vector.core.exceptions import DimensionError, ShapeError, ValidationError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with dtype float64

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype} is not supported")

    return result.astype(np.float64, copy=False)


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_row_lengths(M: Any, name: str) -> tuple[int, int]:
    """
    Verify every row of a nested sequence has the length of row 0.

    This is the only structural check on matrices; every operation that
    takes a matrix goes through it via check_matrix.

    Args:
        M: Nested sequence (or 2D ndarray) of rows
        name: Parameter name for error messages

    Returns:
        (rows, cols)

    Raises:
        ShapeError: If M has no rows, a row is not a sequence, or
            row lengths differ
    """
    if isinstance(M, np.ndarray):
        if M.ndim != 2:
            raise ShapeError(
                f"{name}: expected 2D matrix, got {M.ndim}D with shape {M.shape}"
            )
        if M.shape[0] == 0:
            raise ShapeError(f"{name}: matrix has no rows")
        return int(M.shape[0]), int(M.shape[1])

    n_rows = len(M)
    if n_rows == 0:
        raise ShapeError(f"{name}: matrix has no rows")

    lengths = []
    for i, row in enumerate(M):
        if isinstance(row, (str, bytes)) or not isinstance(row, (Sequence, np.ndarray)):
            raise ShapeError(
                f"{name}: row {i} is {type(row).__name__}, expected a sequence"
            )
        lengths.append(len(row))

    n_cols = lengths[0]
    bad = [i for i, length in enumerate(lengths) if length != n_cols]
    if bad:
        raise ShapeError(
            f"{name}: inconsistent shape: row 0 has {n_cols} columns, "
            f"row {bad[0]} has {lengths[bad[0]]}"
        )
    return n_rows, n_cols


def check_matrix(M: ArrayLike, name: str) -> NDArray[np.float64]:
    """
    Validate a matrix and convert it to a 2D float64 array.

    Args:
        M: Nested sequence or 2D array
        name: Parameter name for error messages

    Returns:
        2D float64 ndarray (not copied if already float64)

    Raises:
        ShapeError: If M is jagged, empty, or not 2D
        ValidationError: If M is non-numeric
    """
    check_row_lengths(M, name)
    result = check_array(M, name)
    check_ndim(result, 2, name)
    return result


def check_vector(v: ArrayLike, name: str) -> NDArray[np.float64]:
    """
    Validate a vector and convert it to a 1D float64 array.

    Raises:
        DimensionError: If v is not 1D
        ValidationError: If v is non-numeric
    """
    result = check_array(v, name)
    check_ndim(result, 1, name)
    return result


def check_length(v: NDArray[Any], length: int, name: str) -> None:
    """
    Verify a vector has exactly the given length.

    Raises:
        DimensionError: If len(v) != length
    """
    if v.shape[0] != length:
        raise DimensionError(
            f"{name}: expected length {length}, got {v.shape[0]}"
        )


def check_consistent_length(
    *arrays: NDArray[Any],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_square(M: NDArray[Any], name: str) -> int:
    """
    Verify a 2D array is square.

    Returns:
        The common dimension n

    Raises:
        DimensionError: If rows != cols
    """
    n_rows, n_cols = M.shape
    if n_rows != n_cols:
        raise DimensionError(
            f"{name}: expected square matrix, got shape ({n_rows}, {n_cols})"
        )
    return n_rows


def check_size(n: int, name: str) -> int:
    """
    Verify a requested dimension is a non-negative integer.

    Raises:
        ValidationError: If n is not an integer or is negative
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise ValidationError(f"{name}: expected integer size, got {type(n).__name__}")
    if n < 0:
        raise ValidationError(f"{name}: size must be non-negative, got {n}")
    return int(n)


def check_index(index: int, size: int, name: str) -> int:
    """
    Verify an index lies in [0, size).

    Raises:
        DimensionError: If index is out of range
    """
    if not 0 <= index < size:
        raise DimensionError(f"{name}: index {index} out of range [0, {size})")
    return int(index)
