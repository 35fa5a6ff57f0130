"""Module for loading frames from images."""

import logging

from PIL import Image

logger = logging.getLogger(__name__)


class Loader:
    """Class for loading RGBA frames."""
    valid_resolutions = [(320, 240), (640, 480), (1280, 720)]

    @classmethod
    def get_valid_image(cls, image_path: str, resolution: tuple = None) -> Image.Image:
        """Load an image from the given path.

        Args:
            image_path (str): Path to the image file.
            resolution (tuple): Target (width, height), defaults to a valid resolution.
        """
        image = cls.load_rgba_image(image_path)
        return cls.convert_to_valid_resolution(image, resolution)

    @classmethod
    def load_rgba_image(cls, image_path: str) -> Image.Image:
        """Load an RGBA image from the given path.

        Args:
            image_path (str): Path to the image file.
        """
        with Image.open(image_path) as image:
            return image.convert("RGBA")

    @classmethod
    def convert_to_valid_resolution(cls, image: Image.Image, resolution: tuple = None) -> Image.Image:
        """Convert the image to a valid resolution if necessary.

        Args:
            image (Image.Image): The image to be resized.
            resolution (tuple): The target resolution as (width, height).
        """
        if resolution is None:
            if image.size in cls.valid_resolutions:
                return image
            resolution = cls.valid_resolutions[1]
        resolution = tuple(resolution)
        if image.size == resolution:
            return image
        logger.info("Resizing frame from %sx%s to %sx%s", *image.size, *resolution)
        return image.resize(resolution)
