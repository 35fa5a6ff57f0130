"""Module for convolution operations."""

import logging
import time

import numpy as np

from conv.abstract import CHANNELS, Conv2D

logger = logging.getLogger(__name__)


class Standard(Conv2D):
    """Nested-loop 2D convolution, the portable reference implementation."""

    kernel: np.ndarray

    def run(self, data, width: int, height: int) -> np.ndarray:
        """Run convolution operation on the given frame.

        Args:
            data: Flat RGBA buffer of width * height * 4 bytes.
            width (int): Frame width in pixels.
            height (int): Frame height in pixels.

        Returns:
            np.ndarray: Convolved frame as a new flat uint8 array.
        """
        pixels = self.check_frame(data, width, height)
        source = pixels.tolist()
        output = list(source)
        weights = self.kernel.tolist()
        side = self.side
        half = self.half
        divisor = self.divisor

        start_time = time.perf_counter()

        for y in range(half, height - half):
            for x in range(half, width - half):
                px = (y * width + x) * CHANNELS
                r = g = b = 0
                for cy in range(side):
                    row = weights[cy]
                    for cx in range(side):
                        cpx = ((y + cy - half) * width + (x + cx - half)) * CHANNELS
                        weight = row[cx]
                        r += source[cpx] * weight
                        g += source[cpx + 1] * weight
                        b += source[cpx + 2] * weight
                output[px] = _clamp(int(r / divisor))
                output[px + 1] = _clamp(int(g / divisor))
                output[px + 2] = _clamp(int(b / divisor))

        end_time = time.perf_counter()
        logger.debug(
            "Standard convolution took %.6f seconds.", end_time - start_time
        )

        return np.array(output, dtype=np.uint8)


def _clamp(value: int) -> int:
    if value > 255:
        return 255
    if value < 0:
        return 0
    return value
