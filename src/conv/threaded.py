"""Module for convolution operations."""

import logging
import os
import time

import numpy as np

from concurrent.futures import ThreadPoolExecutor, as_completed
from numpy.lib.stride_tricks import sliding_window_view
from conv.abstract import CHANNELS, Conv2D

logger = logging.getLogger(__name__)


class Threaded(Conv2D):
    """Vectorized 2D convolution split into row bands across threads."""

    kernel: np.ndarray

    def __init__(self, kernel, divisor: int, num_threads: int = None) -> None:
        """Initialize Threaded class.

        Args:
            kernel: Square kernel, already rotated for convolution.
            divisor (int): Normalization applied to each weighted sum.
            num_threads (int): Number of threads to use, defaults to the CPU count.
        """
        super().__init__(kernel, divisor)
        self.num_threads = max(1, num_threads or os.cpu_count() or 1)

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
        image = pixels.reshape(height, width, CHANNELS)
        rgb = image[:, :, :3].astype(np.int64)
        output = image.copy()

        side = self.side
        half = self.half
        inner_h = height - 2 * half
        inner_w = width - 2 * half

        def process_block(start_row: int, end_row: int) -> tuple:
            """Process a band of interior rows.

            Args:
                start_row (int): First interior row of the band, counted from the top border.
                end_row (int): Last interior row of the band, exclusive.

            Returns:
                tuple: returns a tuple with the start row and the clamped RGB block.
            """
            region = rgb[start_row:end_row + side - 1]
            windows = sliding_window_view(region, (side, side), axis=(0, 1))
            windows = windows[:, :inner_w]
            sums = np.einsum("ijckl,kl->ijc", windows, self.kernel)
            block = np.clip(np.trunc(sums / self.divisor), 0, 255)
            return start_row, block.astype(np.uint8)

        num_threads = min(self.num_threads, inner_h)
        rows_per_thread = max(1, inner_h // num_threads)
        bands = []

        for t in range(num_threads):
            start = t * rows_per_thread
            end = min((t + 1) * rows_per_thread, inner_h) if t != num_threads - 1 else inner_h
            if start < end:
                bands.append((start, end))

        start_time = time.perf_counter()

        with ThreadPoolExecutor(max_workers=num_threads) as executor:
            futures = [executor.submit(process_block, start, end) for start, end in bands]

            for future in as_completed(futures):
                start_row, block = future.result()
                top = start_row + half
                output[top:top + block.shape[0], half:half + inner_w, :3] = block

        end_time = time.perf_counter()
        logger.debug(
            "Threaded convolution on %d bands took %.6f seconds.",
            len(bands), end_time - start_time,
        )

        return output.reshape(-1)
