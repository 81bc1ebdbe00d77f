"""Rotation utilities for elementary rotation matrices.

Rotations about an arbitrary axis go through a unit quaternion, which keeps
the resulting 3x3 block orthonormal for any axis length.

Quaternion Convention: (w, x, y, z) - scalar first
"""

from __future__ import annotations

import numpy as np

# Axes shorter than this are treated as "no axis"
_AXIS_EPSILON = 1e-12


def quaternion_identity(dtype=np.float64) -> np.ndarray:
    """Return identity quaternion.

    :param dtype: NumPy dtype
    :returns: Identity quaternion [1, 0, 0, 0]
    """
    return np.array([1.0, 0.0, 0.0, 0.0], dtype=dtype)


def axis_angle_to_quaternion(axis: np.ndarray, angle: float) -> np.ndarray:
    """Convert a rotation axis and angle to a unit quaternion.

    The axis does not need to be normalized. A zero-length axis describes no
    rotation and yields the identity quaternion.

    :param axis: Rotation axis [3] (x, y, z)
    :param angle: Rotation angle in radians
    :returns: Quaternion [4] (w, x, y, z)

    Example:
        >>> q = axis_angle_to_quaternion(np.array([0.0, 0.0, 1.0]), np.pi / 2)
    """
    axis = np.asarray(axis, dtype=np.float64)
    norm = np.linalg.norm(axis)
    if norm < _AXIS_EPSILON:
        return quaternion_identity()

    axis = axis / norm
    half_angle = angle / 2
    sin_half = np.sin(half_angle)

    w = np.cos(half_angle)
    x = axis[0] * sin_half
    y = axis[1] * sin_half
    z = axis[2] * sin_half

    return np.array([w, x, y, z], dtype=np.float64)


def quaternion_to_rotation_matrix(q: np.ndarray) -> np.ndarray:
    """Quaternion to 3x3 rotation matrix.

    :param q: Quaternion [4] (w, x, y, z)
    :returns: 3x3 rotation matrix (column-vector convention)
    """
    q = np.asarray(q, dtype=np.float64)
    q = q / np.linalg.norm(q)
    w, x, y, z = q[0], q[1], q[2], q[3]

    R = np.zeros((3, 3), dtype=np.float64)

    R[0, 0] = 1 - 2 * (y * y + z * z)
    R[0, 1] = 2 * (x * y - w * z)
    R[0, 2] = 2 * (x * z + w * y)

    R[1, 0] = 2 * (x * y + w * z)
    R[1, 1] = 1 - 2 * (x * x + z * z)
    R[1, 2] = 2 * (y * z - w * x)

    R[2, 0] = 2 * (x * z - w * y)
    R[2, 1] = 2 * (y * z + w * x)
    R[2, 2] = 1 - 2 * (x * x + y * y)

    return R
