"""Routes frames to the engine of the active mode and times them."""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, Tuple

import numpy as np

from conv.abstract import Conv2D
from perf.sampler import PerformanceSampler
from session.mode import Mode

logger = logging.getLogger(__name__)

# Idle frames still go through the threaded engine so an FPS is always shown.
FALLBACK_MODE = Mode.THREADED


def monotonic_ms() -> float:
    return time.perf_counter() * 1000


@dataclass
class Session:
    """State shared by one capture session."""
    width: int
    height: int
    mode: Mode = Mode.IDLE


class ModeController:
    """Dispatches frames to the engine selected by the session mode."""

    def __init__(
        self,
        session: Session,
        engines: Dict[Mode, Conv2D],
        sampler: PerformanceSampler,
        clock: Callable[[], float] = monotonic_ms,
    ) -> None:
        """Initialize ModeController class.

        Args:
            session (Session): Frame dimensions and the active mode.
            engines (dict): Engine per non-idle mode.
            sampler (PerformanceSampler): Receives one sample per dispatch.
            clock (Callable): Monotonic clock returning milliseconds.
        """
        missing = [mode.name for mode in (Mode.STANDARD, Mode.THREADED) if mode not in engines]
        if missing:
            raise ValueError(f"no engine configured for: {', '.join(missing)}")
        self.session = session
        self.engines = dict(engines)
        self.sampler = sampler
        self.clock = clock

    def set_mode(self, mode: Mode) -> None:
        if mode is not self.session.mode:
            logger.info("Switching mode %s -> %s", self.session.mode.name, mode.name)
        self.session.mode = mode

    def current_mode(self) -> Mode:
        return self.session.mode

    def sample_mode(self) -> Mode:
        """Mode whose engine and sample window serve the active mode."""
        mode = self.session.mode
        return mode if mode in self.engines and mode is not Mode.IDLE else FALLBACK_MODE

    def dispatch(self, frame) -> Tuple[np.ndarray, float]:
        """Convolve one frame with the active engine.

        Args:
            frame: Flat RGBA buffer matching the session dimensions.

        Returns:
            tuple: The filtered frame and the elapsed milliseconds.
        """
        mode = self.sample_mode()
        engine = self.engines[mode]

        start = self.clock()
        result = engine.run(frame, self.session.width, self.session.height)
        elapsed_ms = self.clock() - start

        self.sampler.record(mode, elapsed_ms)
        return result, elapsed_ms

    def current_fps(self) -> float:
        return self.sampler.current_fps(self.sample_mode())
