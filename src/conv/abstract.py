"""Abstract base classes for convolution operations."""

import numpy as np
from abc import ABC, abstractmethod

from conv.errors import BufferSizeMismatch, InvalidDimensions, ZeroDivisor
from conv.kernel import as_kernel

CHANNELS = 4


class Conv2D(ABC):
    """Abstract base class for 2D convolution over RGBA frames."""

    kernel: np.ndarray
    divisor: int

    def __init__(self, kernel, divisor: int) -> None:
        """Initialize Conv2D class.

        Args:
            kernel: Square kernel, already rotated for convolution.
            divisor (int): Normalization applied to each weighted sum.
        """
        try:
            whole = int(divisor)
        except (TypeError, ValueError, OverflowError):
            whole = None
        if whole is None or whole != divisor:
            raise ZeroDivisor(f"divisor must be an integer, got {divisor!r}")
        if whole == 0:
            raise ZeroDivisor("divisor must be non-zero")
        self.kernel = as_kernel(kernel)
        self.divisor = whole

    @property
    def side(self) -> int:
        return self.kernel.shape[0]

    @property
    def half(self) -> int:
        return self.side // 2

    def check_frame(self, data, width: int, height: int) -> np.ndarray:
        """Validate a frame and view it as a flat uint8 array.

        Args:
            data: RGBA pixel buffer.
            width (int): Frame width in pixels.
            height (int): Frame height in pixels.

        Returns:
            np.ndarray: Flat uint8 view of the buffer.
        """
        if width <= self.side or height <= self.side:
            raise InvalidDimensions(
                f"frame {width}x{height} must be larger than a "
                f"{self.side}x{self.side} kernel"
            )
        if isinstance(data, (bytes, bytearray, memoryview)):
            pixels = np.frombuffer(data, dtype=np.uint8)
        else:
            pixels = np.asarray(data, dtype=np.uint8).reshape(-1)
        expected = width * height * CHANNELS
        if pixels.size != expected:
            raise BufferSizeMismatch(
                f"buffer holds {pixels.size} values, expected {expected} "
                f"for {width}x{height} RGBA"
            )
        return pixels

    @abstractmethod
    def run(self, data, width: int, height: int) -> np.ndarray:
        """Run convolution operation on the given frame.

        Border pixels closer than half a kernel to an edge keep their input
        values. The input buffer is never modified.

        Args:
            data: Flat RGBA buffer of width * height * 4 bytes.
            width (int): Frame width in pixels.
            height (int): Frame height in pixels.

        Returns:
            np.ndarray: Convolved frame as a new flat uint8 array.
        """
        pass
