"""Presentation sink for filtered frames."""

import numpy as np

from PIL import Image

from conv.abstract import CHANNELS
from conv.errors import BufferSizeMismatch


class FrameSink:
    """Holds the most recently presented frame."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.frame = None
        self.presented = 0

    def present(self, frame) -> None:
        """Accept a filtered RGBA buffer of the session dimensions.

        Raises:
            BufferSizeMismatch: If the buffer does not hold width * height * 4 values.
        """
        frame = np.asarray(frame, dtype=np.uint8).reshape(-1)
        expected = self.width * self.height * CHANNELS
        if frame.size != expected:
            raise BufferSizeMismatch(
                f"presented {frame.size} values, expected {expected} "
                f"for {self.width}x{self.height} RGBA"
            )
        self.frame = frame
        self.presented += 1

    def to_image(self) -> Image.Image:
        """Convert the latest frame to an RGBA image.

        Raises:
            LookupError: If nothing has been presented yet.
        """
        if self.frame is None:
            raise LookupError("no frame has been presented")
        return Image.frombuffer(
            "RGBA", (self.width, self.height), self.frame.tobytes(), "raw", "RGBA", 0, 1
        )
