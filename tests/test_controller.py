import math

import numpy as np
import pytest

from conv.kernel import DEFAULT_DIVISOR, SHARPEN, flip
from conv.standard import Standard
from conv.threaded import Threaded
from perf.sampler import PerformanceSampler
from session.controller import ModeController, Session
from session.mode import Mode


def test_starts_idle(controller):
    assert controller.current_mode() is Mode.IDLE


def test_idle_dispatch_falls_back_to_threaded(controller, frame):
    result, elapsed = controller.dispatch(frame)

    expected = Threaded(flip(SHARPEN), DEFAULT_DIVISOR).run(frame, 8, 8)
    assert np.array_equal(result, expected)
    assert elapsed == 5.0
    assert controller.sampler.window(Mode.THREADED) == [5.0]
    assert controller.sampler.window(Mode.IDLE) == []


def test_dispatch_records_against_selected_mode(controller, frame):
    controller.set_mode(Mode.STANDARD)
    controller.dispatch(frame)
    controller.dispatch(frame)

    assert controller.current_mode() is Mode.STANDARD
    assert controller.sampler.window(Mode.STANDARD) == [5.0, 5.0]
    assert controller.sampler.window(Mode.THREADED) == []


def test_modes_produce_identical_frames(controller, frame):
    controller.set_mode(Mode.STANDARD)
    standard, _ = controller.dispatch(frame)
    controller.set_mode(Mode.THREADED)
    threaded, _ = controller.dispatch(frame)
    assert standard.tobytes() == threaded.tobytes()


def test_current_fps_after_warm_up(controller, frame):
    for _ in range(20):
        controller.dispatch(frame)
        assert math.isnan(controller.current_fps())
    controller.dispatch(frame)
    assert controller.current_fps() == 200.0


def test_session_holds_mode(controller):
    controller.set_mode(Mode.THREADED)
    assert controller.session.mode is Mode.THREADED


def test_requires_both_engines(clock):
    engines = {Mode.STANDARD: Standard(SHARPEN, DEFAULT_DIVISOR)}
    with pytest.raises(ValueError):
        ModeController(Session(8, 8), engines, PerformanceSampler(), clock)


@pytest.mark.parametrize("name, mode", [("idle", Mode.IDLE), ("Standard", Mode.STANDARD), (" THREADED ", Mode.THREADED)])
def test_mode_from_name(name, mode):
    assert Mode.from_name(name) is mode


def test_mode_from_unknown_name():
    with pytest.raises(ValueError):
        Mode.from_name("wasm")
