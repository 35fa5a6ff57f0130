"""Rolling-window frame rate estimation."""

import math
from collections import deque

from session.mode import Mode

AVERAGE_RECORDS_COUNT = 20


class PerformanceSampler:
    """Keeps the latest elapsed times per mode and turns them into FPS.

    A mode reports NaN until it has received more than ``capacity``
    samples; from then on the window always holds the newest ``capacity``
    samples.
    """

    def __init__(self, capacity: int = AVERAGE_RECORDS_COUNT) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._windows = {mode: deque(maxlen=capacity) for mode in Mode}
        self._recorded = {mode: 0 for mode in Mode}

    def record(self, mode: Mode, elapsed_ms: float) -> None:
        """Append one frame's processing time, evicting the oldest when full.

        Args:
            mode (Mode): Mode the frame was processed under.
            elapsed_ms (float): Processing time in milliseconds.
        """
        self._windows[mode].append(float(elapsed_ms))
        self._recorded[mode] += 1

    def current_fps(self, mode: Mode) -> float:
        """Estimate frames per second from the window of the given mode.

        Returns:
            float: FPS rounded to two decimals, or NaN during warm-up.
        """
        if self._recorded[mode] <= self.capacity:
            return math.nan
        window = self._windows[mode]
        average_time = sum(window) / len(window)
        if average_time <= 0:
            return math.inf
        return round(1000 / average_time, 2)

    def window(self, mode: Mode) -> list:
        """Copy of the samples currently in the window of a mode.

        Args:
            mode (Mode): Mode whose window is read.

        Returns:
            list: Elapsed milliseconds, oldest first.
        """
        return list(self._windows[mode])


def format_fps(value: float) -> str:
    """Render an FPS value the way the display shows it."""
    if math.isnan(value):
        return "NaN"
    return f"{value:.2f}"
