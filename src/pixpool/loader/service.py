"""Module for loading and saving images."""

import numpy as np
from PIL import Image, UnidentifiedImageError

from pixpool.buffer import PixelBuffer
from pixpool.errors import UnsupportedOperation
from pixpool.logging_config import get_logger

logger = get_logger("loader")


class Loader:
    """Class for converting between image files and pixel buffers."""

    kept_modes = ("L", "LA", "RGB", "RGBA")

    @classmethod
    def load(cls, image_path: str) -> PixelBuffer:
        """Load an image from the given path.

        Args:
            image_path (str): Path to the image file.

        Returns:
            PixelBuffer: Decoded pixels, one channel per band.
        """
        try:
            with Image.open(image_path) as image:
                image = cls.normalize_mode(image)
                pixels = np.array(image)
        except UnidentifiedImageError as exc:
            raise UnsupportedOperation(f"Cannot decode image {image_path}") from exc

        buffer = PixelBuffer.from_array(pixels)
        logger.info(
            f"Loaded {image_path}: {buffer.width}x{buffer.height}, {buffer.channels} channel(s)"
        )
        return buffer

    @classmethod
    def normalize_mode(cls, image: Image.Image) -> Image.Image:
        """Convert the image to a mode with 8-bit bands.

        Args:
            image (Image.Image): The decoded image.
        """
        if image.mode in cls.kept_modes:
            return image
        has_alpha = "A" in image.getbands() or "transparency" in image.info
        return image.convert("RGBA" if has_alpha else "RGB")

    @classmethod
    def save(cls, buffer: PixelBuffer, image_path: str) -> None:
        """Encode the buffer to ``image_path``; the format follows the extension.

        Args:
            buffer (PixelBuffer): Pixels to write.
            image_path (str): Destination file.
        """
        pixels = buffer.pixels[:, :, 0] if buffer.channels == 1 else buffer.pixels
        try:
            Image.fromarray(pixels).save(image_path)
        except (KeyError, ValueError, OSError) as exc:
            raise UnsupportedOperation(f"Cannot save image to {image_path}: {exc}") from exc
        logger.info(f"Saved {image_path}")

    @classmethod
    def demo_image(cls, width: int = 256, height: int = 256) -> PixelBuffer:
        """Gradient pattern with R = x, G = y and B = 128, wrapped to a byte.

        Args:
            width (int): Columns.
            height (int): Rows.
        """
        buffer = PixelBuffer.allocate(width, height, 3)
        buffer.pixels[:, :, 0] = (np.arange(width) % 256)[np.newaxis, :]
        buffer.pixels[:, :, 1] = (np.arange(height) % 256)[:, np.newaxis]
        buffer.pixels[:, :, 2] = 128
        return buffer
