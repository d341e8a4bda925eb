"""
Rotation and affine transform constructors for 3D graphics.

Rotation matrices use the aircraft roll / pitch / yaw layouts below
(angles in radians):

    roll:  [[c, -s, 0], [s, c, 0], [0, 0, 1]]
    pitch: [[c, 0, s], [0, 1, 0], [-s, 0, c]]
    yaw:   [[1, 0, 0], [0, c, s], [0, -s, c]]

Affine transforms are 4x4 homogeneous matrices [[R, t], [0, 1]].
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray

from qd_vector.core.exceptions import DimensionError
from qd_vector.core.validation import check_length, check_matrix, check_vector
from qd_vector.matrix import Mv_product, eye


def M_roll(roll: float) -> NDArray[np.float64]:
    """Aircraft roll matrix."""
    cr = math.cos(roll)
    sr = math.sin(roll)
    return np.array([
        [cr, -sr, 0.0],
        [sr, cr, 0.0],
        [0.0, 0.0, 1.0],
    ])


def M_pitch(pitch: float) -> NDArray[np.float64]:
    """Aircraft pitch matrix."""
    cp = math.cos(pitch)
    sp = math.sin(pitch)
    return np.array([
        [cp, 0.0, sp],
        [0.0, 1.0, 0.0],
        [-sp, 0.0, cp],
    ])


def M_yaw(yaw: float) -> NDArray[np.float64]:
    """Aircraft yaw matrix."""
    cy = math.cos(yaw)
    sy = math.sin(yaw)
    return np.array([
        [1.0, 0.0, 0.0],
        [0.0, cy, sy],
        [0.0, -sy, cy],
    ])


def affine3d(
    rotation: ArrayLike | None = None,
    translation: ArrayLike | None = None,
) -> NDArray[np.float64]:
    """
    4x4 affine matrix from a 3x3 rotation and a 3D translation.

    Parameters
    ----------
    rotation : array-like, optional
        3x3 rotation block. Identity if omitted.
    translation : array-like, optional
        Length-3 translation. Zero if omitted.

    Raises
    ------
    DimensionError
        If rotation is not 3x3 or translation is not length 3.
    """
    result = eye(4)

    if rotation is not None:
        R = check_matrix(rotation, "rotation")
        if R.shape != (3, 3):
            raise DimensionError(f"rotation: expected 3x3 matrix, got shape {R.shape}")
        result[:3, :3] = R

    if translation is not None:
        t = check_vector(translation, "translation")
        check_length(t, 3, "translation")
        result[:3, 3] = t

    return result


def apply_affine3d(A: ArrayLike, v: ArrayLike) -> NDArray[np.float64]:
    """
    Apply a 4x4 affine matrix to a 3D point.

    The point is extended with homogeneous coordinate 1, multiplied by A,
    and the first three components are returned. No projective divide is
    done, so the result is exact only when A's last row is [0, 0, 0, 1].
    """
    v3 = check_vector(v, "v")
    check_length(v3, 3, "v")
    v4 = np.append(v3, 1.0)
    return Mv_product(A, v4)[:3]
