"""
Elementary transform matrices.

Each function converts a single CSS transform function into its matrix, in
mathematical (column-vector) form: a point ``p`` is transformed as ``M @ p``.
All angles are in radians.

Functions:

- ``perspective(d)``: projection towards the viewer at distance ``d``
- ``rotate3d(x, y, z, a)``: rotation about an arbitrary axis
- ``scale3d(x, y, z)``: per-axis scaling
- ``skew(ax, ay)``: 2D shear, returned as a 3x3 matrix
- ``translate3d(x, y, z)``: translation
"""

from __future__ import annotations

import numpy as np

from matrix3d.shared.matrix import identity
from matrix3d.shared.rotation import axis_angle_to_quaternion, quaternion_to_rotation_matrix

# ============================================================================
# 4x4 Homogeneous Matrix Building
# ============================================================================


def perspective(distance: float) -> np.ndarray:
    """Build 4x4 perspective matrix.

    A distance of zero is treated as no perspective and yields identity.

    :param distance: Distance from the z=0 plane to the viewer
    :returns: 4x4 matrix with ``m[3, 2] = -1 / distance``
    """
    P = identity()
    if distance != 0:
        P[3, 2] = -1.0 / distance
    return P


def rotate3d(x: float, y: float, z: float, angle: float) -> np.ndarray:
    """Build 4x4 rotation matrix about the axis ``(x, y, z)``.

    :param x: Axis x component
    :param y: Axis y component
    :param z: Axis z component
    :param angle: Rotation angle in radians
    :returns: 4x4 rotation matrix (identity for a zero axis)
    """
    quat = axis_angle_to_quaternion(np.array([x, y, z], dtype=np.float64), angle)
    R = identity()
    R[:3, :3] = quaternion_to_rotation_matrix(quat)
    return R


def scale3d(x: float, y: float, z: float) -> np.ndarray:
    """Build 4x4 scale matrix."""
    S = identity()
    S[0, 0] = x
    S[1, 1] = y
    S[2, 2] = z
    return S


def skew(ax: float, ay: float) -> np.ndarray:
    """Build 3x3 2D skew matrix.

    :param ax: Skew angle along the x axis, in radians
    :param ay: Skew angle along the y axis, in radians
    :returns: 3x3 matrix ``[[1, tan(ax), 0], [tan(ay), 1, 0], [0, 0, 1]]``
    """
    K = np.eye(3, dtype=np.float64)
    K[0, 1] = np.tan(ax)
    K[1, 0] = np.tan(ay)
    return K


def translate3d(x: float, y: float, z: float) -> np.ndarray:
    """Build 4x4 translation matrix."""
    T = identity()
    T[:3, 3] = (x, y, z)
    return T
