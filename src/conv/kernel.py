"""Module for preparing convolution kernels."""

import numpy as np

from conv.errors import InvalidKernel

SHARPEN = (
    (-1, -1, 1),
    (-1, 14, -1),
    (1, -1, -1),
)
DEFAULT_DIVISOR = 4


def as_kernel(rows) -> np.ndarray:
    """Build a read-only integer kernel from nested rows.

    Args:
        rows: Square matrix of integers (nested sequence or array).

    Returns:
        np.ndarray: Read-only int64 matrix.

    Raises:
        InvalidKernel: If the matrix is empty, not square or holds non-integer weights.
    """
    try:
        kernel = np.array(rows)
    except (TypeError, ValueError) as exc:
        raise InvalidKernel(f"kernel is not a matrix: {exc}") from exc

    if kernel.ndim != 2:
        raise InvalidKernel(f"kernel must be 2D, got {kernel.ndim} dimensions")
    side_h, side_w = kernel.shape
    if side_h == 0 or side_w == 0:
        raise InvalidKernel("kernel side length must be positive")
    if side_h != side_w:
        raise InvalidKernel(f"kernel must be square, got {side_h}x{side_w}")
    if kernel.dtype.kind not in "iu":
        raise InvalidKernel(f"kernel weights must be integers, got {kernel.dtype}")

    kernel = kernel.astype(np.int64)
    kernel.setflags(write=False)
    return kernel


def flip(kernel) -> np.ndarray:
    """Rotate a square kernel by 180 degrees.

    Rows are swapped pairwise with their mirror around the centre; on odd
    sides the middle row is then mirrored left to right. The input is not
    modified.

    Args:
        kernel: Square matrix of integers.

    Returns:
        np.ndarray: Rotated read-only kernel.
    """
    rotated = as_kernel(kernel).copy()
    h = rotated.shape[0]
    half = h // 2

    for i in range(half):
        for j in range(h):
            rotated[i, j], rotated[h - i - 1, h - j - 1] = (
                rotated[h - i - 1, h - j - 1],
                rotated[i, j],
            )

    if h & 1:
        for j in range(half):
            rotated[half, j], rotated[half, h - j - 1] = (
                rotated[half, h - j - 1],
                rotated[half, j],
            )

    rotated.setflags(write=False)
    return rotated
