"""4x4 matrix primitives: construction, multiplication, flip and 2D promotion.

All functions return new float64 arrays and never modify their inputs.
"""

from __future__ import annotations

import numpy as np

from matrix3d.constants import MATRIX_SIZE, MATRIX_SIZE_2D
from matrix3d.shared.kernels import matmul_4x4_numba, transpose_4x4_numba
from matrix3d.validators import ShapeError


def identity() -> np.ndarray:
    """Return a fresh 4x4 identity matrix."""
    return np.eye(MATRIX_SIZE, dtype=np.float64)


def as_matrix(data) -> np.ndarray:
    """Convert nested sequences or arrays to a contiguous float64 array.

    :param data: Matrix-like input
    :returns: New float64 array (always a copy)
    """
    return np.array(data, dtype=np.float64, order="C")


def _as_4x4(m, name: str) -> np.ndarray:
    try:
        arr = np.ascontiguousarray(m, dtype=np.float64)
    except ValueError as e:
        raise ShapeError(f"{name}: expected a 4x4 matrix, got ragged or non-numeric rows") from e
    if arr.shape != (MATRIX_SIZE, MATRIX_SIZE):
        raise ShapeError(f"{name}: expected a 4x4 matrix, got shape {arr.shape}")
    return arr


def multiply(a, b) -> np.ndarray:
    """Multiply two 4x4 matrices.

    :param a: Left matrix [4, 4]
    :param b: Right matrix [4, 4]
    :returns: Product ``a @ b`` [4, 4]
    :raises ShapeError: If either operand is not 4x4
    """
    a = _as_4x4(a, "a")
    b = _as_4x4(b, "b")
    out = np.empty((MATRIX_SIZE, MATRIX_SIZE), dtype=np.float64)
    matmul_4x4_numba(a, b, out)
    return out


def flip(m) -> np.ndarray:
    """Switch a 4x4 matrix between row-major and column-major layout.

    :param m: Matrix [4, 4]
    :returns: Transposed matrix [4, 4]
    :raises ShapeError: If the matrix is not 4x4
    """
    m = _as_4x4(m, "m")
    out = np.empty((MATRIX_SIZE, MATRIX_SIZE), dtype=np.float64)
    transpose_4x4_numba(m, out)
    return out


def to3d(m) -> np.ndarray:
    """Promote a 3x3 2D affine matrix into 4x4 space.

    ``[[a, b, tx], [c, d, ty], [0, 0, 1]]`` becomes
    ``[[a, b, 0, tx], [c, d, 0, ty], [0, 0, 1, 0], [0, 0, 0, 1]]``.
    A 4x4 input is returned as a copy.

    :param m: Matrix [3, 3] or [4, 4]
    :returns: Matrix [4, 4]
    :raises ShapeError: For any other shape
    """
    m = np.asarray(m, dtype=np.float64)
    if m.shape == (MATRIX_SIZE, MATRIX_SIZE):
        return m.copy()
    if m.shape != (MATRIX_SIZE_2D, MATRIX_SIZE_2D):
        raise ShapeError(f"m: expected a 3x3 or 4x4 matrix, got shape {m.shape}")

    out = identity()
    out[:2, :2] = m[:2, :2]
    out[:2, 3] = m[:2, 2]
    out[3, :2] = m[2, :2]
    out[3, 3] = m[2, 2]
    return out
