"""Frame sources with fixed dimensions."""

from typing import Iterable, Iterator, Optional

from PIL import Image

from loader.service import Loader


class BufferFrameSource:
    """Replays in-memory RGBA buffers."""

    def __init__(self, buffers: Iterable, width: int, height: int) -> None:
        self.buffers = buffers
        self.width = width
        self.height = height

    def __iter__(self) -> Iterator:
        return iter(self.buffers)


class StillFrameSource:
    """Replays one still image as a stream of frames."""

    def __init__(self, image: Image.Image, frames: Optional[int] = None) -> None:
        """Initialize StillFrameSource class.

        Args:
            image (Image.Image): Image to stream, converted to RGBA.
            frames (int): Number of frames to produce, None for no limit.
        """
        self.image = image.convert("RGBA")
        self.width, self.height = self.image.size
        self.frames = frames
        self._data = self.image.tobytes()

    @classmethod
    def from_path(cls, image_path: str, resolution: tuple = None, frames: Optional[int] = None) -> "StillFrameSource":
        return cls(Loader.get_valid_image(image_path, resolution), frames)

    def __iter__(self) -> Iterator[bytes]:
        produced = 0
        while self.frames is None or produced < self.frames:
            produced += 1
            yield self._data
