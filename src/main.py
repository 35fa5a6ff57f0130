"""Main module for the application."""

import argparse
import logging
import sys

import numpy as np
from PIL import Image

from config.manager import ConfigError, ConfigManager
from conv.kernel import flip
from conv.standard import Standard
from conv.threaded import Threaded
from loader.source import StillFrameSource
from perf.sampler import PerformanceSampler, format_fps
from session.controller import ModeController, Session
from session.events import ModeEvents
from session.loop import FrameLoop, RefreshScheduler
from session.mode import Mode
from session.sink import FrameSink

logger = logging.getLogger(__name__)


def gradient_image(width: int, height: int) -> Image.Image:
    """Synthetic RGBA frame used when no image is configured."""
    xs = np.linspace(0, 255, width, dtype=np.uint8)
    ys = np.linspace(0, 255, height, dtype=np.uint8)
    frame = np.empty((height, width, 4), dtype=np.uint8)
    frame[:, :, 0] = xs[np.newaxis, :]
    frame[:, :, 1] = ys[:, np.newaxis]
    frame[:, :, 2] = 255 - xs[np.newaxis, :]
    frame[:, :, 3] = 255
    return Image.fromarray(frame, "RGBA")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Live convolution filter benchmark")
    parser.add_argument("--config", "-c", help="Path to a YAML configuration file")
    parser.add_argument("--image", "-i", help="Image streamed as frames")
    parser.add_argument("--frames", "-n", type=int, help="Number of frames to process")
    parser.add_argument("--mode", "-m", choices=[mode.name.lower() for mode in Mode],
                        help="Initial processing mode")
    parser.add_argument("--threads", "-t", type=int, help="Threads for the threaded engine")
    return parser.parse_args(argv)


def build_loop(config: dict) -> FrameLoop:
    """Wire source, engines, sampler and sink from a configuration."""
    stream = config["stream"]
    if stream["image"]:
        source = StillFrameSource.from_path(stream["image"], stream["resolution"], stream["frames"])
    else:
        source = StillFrameSource(gradient_image(*stream["resolution"]), stream["frames"])

    kernel = flip(config["filter"]["kernel"])
    divisor = config["filter"]["divisor"]
    engines = {
        Mode.STANDARD: Standard(kernel, divisor),
        Mode.THREADED: Threaded(kernel, divisor, config["engine"]["num_threads"]),
    }

    session = Session(source.width, source.height)
    controller = ModeController(session, engines, PerformanceSampler(config["sampler"]["window"]))
    events = ModeEvents()
    events.put(Mode.from_name(stream["mode"]))

    log_every = config["logging"]["log_every"]

    def report(fps: float) -> None:
        if log_every and loop.ticks % log_every == 0:
            logger.info("%s: %s FPS", controller.current_mode().name, format_fps(fps))

    loop = FrameLoop(
        source,
        controller,
        FrameSink(source.width, source.height),
        events,
        scheduler=RefreshScheduler(stream["target_fps"]),
        on_fps=report,
    )
    return loop


def main(argv=None) -> int:
    args = parse_args(argv)
    manager = ConfigManager()
    try:
        manager.load_config(path=args.config)
    except ConfigError as e:
        logging.basicConfig(level=logging.INFO)
        logger.error(str(e))
        return 1

    manager.override("stream", "image", args.image)
    manager.override("stream", "frames", args.frames)
    manager.override("stream", "mode", args.mode)
    manager.override("engine", "num_threads", args.threads)
    config = manager.config

    logging.basicConfig(
        level=config["logging"]["level"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        loop = build_loop(config)
    except (ValueError, OSError) as e:
        logger.error("Startup failed: %s", e)
        return 1

    presented = loop.run()
    logger.info(
        "Presented %d frames, %d skipped, last FPS %s",
        presented, loop.failed, format_fps(loop.controller.current_fps()),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
