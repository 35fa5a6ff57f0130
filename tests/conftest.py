import numpy as np
import pytest

from conv.kernel import DEFAULT_DIVISOR, SHARPEN, flip
from conv.standard import Standard
from conv.threaded import Threaded
from perf.sampler import PerformanceSampler
from session.controller import ModeController, Session
from session.mode import Mode


class FakeClock:
    """Millisecond clock advancing by a fixed step on every read."""

    def __init__(self, step=5.0):
        self.now = 0.0
        self.step = step

    def __call__(self):
        self.now += self.step
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def frame():
    return np.arange(8 * 8 * 4, dtype=np.uint8)


@pytest.fixture
def controller(clock):
    kernel = flip(SHARPEN)
    engines = {
        Mode.STANDARD: Standard(kernel, DEFAULT_DIVISOR),
        Mode.THREADED: Threaded(kernel, DEFAULT_DIVISOR, num_threads=2),
    }
    return ModeController(Session(8, 8), engines, PerformanceSampler(), clock)
