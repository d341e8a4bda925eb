"""
Vector operations.

Pure functions over 1D float64 arrays. Every function accepts any
array-like, validates it, and returns a freshly allocated array (or a
Python float for scalar results). Binary operations require operands of
equal length.
"""

from __future__ import annotations

import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray

from qd_vector.core.exceptions import ZeroVectorError
from qd_vector.core.validation import (
    check_consistent_length,
    check_length,
    check_size,
    check_vector,
)


def _pair(v1: ArrayLike, v2: ArrayLike) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Validate two vector operands of equal length."""
    a = check_vector(v1, "v1")
    b = check_vector(v2, "v2")
    check_consistent_length(a, b, names=("v1", "v2"))
    return a, b


def v_zero(n: int) -> NDArray[np.float64]:
    """Zero vector of length n."""
    return np.zeros(check_size(n, "n"), dtype=np.float64)


def v_add(v1: ArrayLike, v2: ArrayLike) -> NDArray[np.float64]:
    """Element-wise sum v1 + v2."""
    a, b = _pair(v1, v2)
    return a + b


def v_sub(v1: ArrayLike, v2: ArrayLike) -> NDArray[np.float64]:
    """Element-wise difference v1 - v2, i.e. v1 + (-1 * v2)."""
    return v_add(v1, v_scale(-1, v2))


def v_scale(s: float, v: ArrayLike) -> NDArray[np.float64]:
    """Multiply every component of v by the scalar s."""
    return float(s) * check_vector(v, "v")


def v_minimum(v1: ArrayLike, v2: ArrayLike) -> NDArray[np.float64]:
    """Pointwise minimum."""
    a, b = _pair(v1, v2)
    return np.minimum(a, b)


def v_maximum(v1: ArrayLike, v2: ArrayLike) -> NDArray[np.float64]:
    """Pointwise maximum."""
    a, b = _pair(v1, v2)
    return np.maximum(a, b)


def v_dot(v1: ArrayLike, v2: ArrayLike) -> float:
    """Inner product of two vectors."""
    a, b = _pair(v1, v2)
    return float(np.dot(a, b))


def v_cross(v1: ArrayLike, v2: ArrayLike) -> NDArray[np.float64]:
    """
    Right-handed cross product of two 3-vectors.

    Raises:
        DimensionError: If either operand does not have length 3
    """
    a = check_vector(v1, "v1")
    b = check_vector(v2, "v2")
    check_length(a, 3, "v1")
    check_length(b, 3, "v2")

    a1, a2, a3 = a
    b1, b2, b3 = b
    return np.array([
        a2 * b3 - a3 * b2,
        a3 * b1 - a1 * b3,
        a1 * b2 - a2 * b1,
    ], dtype=np.float64)


def v_length(v: ArrayLike) -> float:
    """Euclidean norm sqrt(sum of squares)."""
    a = check_vector(v, "v")
    return float(np.sqrt(np.dot(a, a)))


def v_normalize(v: ArrayLike, *, strict: bool = False) -> NDArray[np.float64]:
    """
    Vector scaled to unit Euclidean length.

    Parameters
    ----------
    v : array-like
        1D vector.
    strict : bool
        If False (default), a zero vector yields NaN components and a
        RuntimeWarning. If True, a zero vector raises ZeroVectorError.

    Returns
    -------
    ndarray
        v / v_length(v)

    Raises
    ------
    ZeroVectorError
        If strict=True and v has zero length.
    """
    a = check_vector(v, "v")
    length = v_length(a)

    if length == 0.0:
        if strict:
            raise ZeroVectorError(
                f"Cannot normalize a zero vector (size {a.shape[0]})",
                size=a.shape[0],
            )
        warnings.warn(
            "v_normalize: vector has zero length; result contains NaN",
            RuntimeWarning,
            stacklevel=2,
        )

    with np.errstate(divide='ignore', invalid='ignore'):
        scale = np.float64(1.0) / np.float64(length)
        return scale * a
