"""Numba-optimized 4x4 matrix kernels."""

from __future__ import annotations

import logging

import numpy as np
from numba import njit
from numpy.typing import NDArray

logger = logging.getLogger(__name__)


@njit(cache=True, nogil=True)
def matmul_4x4_numba(
    a: NDArray[np.float64],
    b: NDArray[np.float64],
    out: NDArray[np.float64],
) -> None:
    """Multiply two 4x4 matrices row-by-column into ``out``.

    ``out`` must not alias ``a`` or ``b``.

    :param a: Left matrix [4, 4]
    :param b: Right matrix [4, 4]
    :param out: Output buffer [4, 4]
    """
    for i in range(4):
        for j in range(4):
            acc = 0.0
            for k in range(4):
                acc += a[i, k] * b[k, j]
            out[i, j] = acc


@njit(cache=True, nogil=True)
def transpose_4x4_numba(m: NDArray[np.float64], out: NDArray[np.float64]) -> None:
    """Write the transpose of a 4x4 matrix into ``out``.

    :param m: Input matrix [4, 4]
    :param out: Output buffer [4, 4], must not alias ``m``
    """
    for i in range(4):
        for j in range(4):
            out[j, i] = m[i, j]


def warmup_matrix_kernels() -> None:
    """Compile the kernels once so the first compose() is not slowed by JIT."""
    a = np.eye(4, dtype=np.float64)
    out = np.empty((4, 4), dtype=np.float64)

    matmul_4x4_numba(a, a, out)
    transpose_4x4_numba(a, out)

    logger.debug("Matrix Numba kernels warmed up")


# Warmup on import
warmup_matrix_kernels()
