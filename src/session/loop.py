"""Per-frame cycle: acquire, convolve, present, sample, wait."""

import logging
import time
from typing import Callable, Iterable, Optional

from conv.errors import ConvolutionError
from session.controller import ModeController, monotonic_ms
from session.events import ModeEvents
from session.sink import FrameSink

logger = logging.getLogger(__name__)


class RefreshScheduler:
    """Waits until the next display refresh at a fixed rate."""

    def __init__(
        self,
        target_fps: float,
        clock: Callable[[], float] = monotonic_ms,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.interval_ms = 1000 / target_fps if target_fps > 0 else 0.0
        self.clock = clock
        self.sleep = sleep
        self._last = None

    def __call__(self) -> None:
        now = self.clock()
        if self._last is not None and self.interval_ms:
            remaining = self.interval_ms - (now - self._last)
            if remaining > 0:
                self.sleep(remaining / 1000)
                now = self.clock()
        self._last = now


class FrameLoop:
    """Drives frames from a source through the controller into a sink."""

    def __init__(
        self,
        source: Iterable,
        controller: ModeController,
        sink: FrameSink,
        events: Optional[ModeEvents] = None,
        scheduler: Callable[[], None] = lambda: None,
        on_fps: Callable[[float], None] = lambda fps: None,
    ) -> None:
        self.frames = iter(source)
        self.controller = controller
        self.sink = sink
        self.events = events or ModeEvents()
        self.scheduler = scheduler
        self.on_fps = on_fps
        self.ticks = 0
        self.failed = 0

    def tick(self) -> bool:
        """Process one frame.

        Returns:
            bool: False once the source is exhausted.
        """
        mode = self.events.poll()
        if mode is not None:
            self.controller.set_mode(mode)

        try:
            frame = next(self.frames)
        except StopIteration:
            return False

        self.ticks += 1
        try:
            result, elapsed_ms = self.controller.dispatch(frame)
        except ConvolutionError as exc:
            self.failed += 1
            logger.error("Frame %d skipped: %s", self.ticks, exc)
        else:
            self.sink.present(result)
            logger.debug("Frame %d took %.3f ms", self.ticks, elapsed_ms)
            self.on_fps(self.controller.current_fps())

        self.scheduler()
        return True

    def run(self, max_frames: Optional[int] = None) -> int:
        """Tick until the source runs out or max_frames frames were pulled.

        Returns:
            int: Number of frames presented.
        """
        presented = self.sink.presented
        while max_frames is None or self.ticks < max_frames:
            if not self.tick():
                break
        return self.sink.presented - presented
