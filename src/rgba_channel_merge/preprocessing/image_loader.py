"""Image decoding into a uniform RGBA pixel buffer.

This module provides the ImageLoader class, which opens any image Pillow can
decode and normalizes it to an 8-bit, 4-component, non-premultiplied array so
that the channel merger never has to care about the source format.
"""

from typing import Iterable, Union
from pathlib import Path
import numpy as np
import logging

from PIL import Image, UnidentifiedImageError

from .argument_parser import InputImage
from ..errors import DecodeError, ImageReadError

logger = logging.getLogger(__name__)


class ImageLoader:
    """Load source images as RGBA uint8 arrays.

    Sources without an alpha channel get a fully opaque alpha of 255. Paletted,
    grayscale and premultiplied sources are converted by Pillow; 16-bit
    grayscale keeps the high byte of each sample. The result
    always has shape (height, width, 4) with a top-left origin.

    Example:
        >>> loader = ImageLoader()
        >>> pixels = loader.load('albedo.jpg')
        >>> pixels.shape
        (512, 512, 4)
    """

    def __init__(self):
        """Initialize the ImageLoader."""
        pass

    def _to_rgba(self, img: Image.Image) -> np.ndarray:
        """Convert a decoded image to an RGBA uint8 array.

        16-bit integer grayscale is reduced to its high byte; Pillow's own
        conversion would clip those samples to 255 instead.
        """
        if img.mode.startswith('I;16') or img.mode == 'I':
            wide = np.clip(np.asarray(img).astype(np.int64), 0, 65535)
            gray = (wide >> 8).astype(np.uint8)
            pixels = np.empty(gray.shape + (4,), dtype=np.uint8)
            pixels[..., :3] = gray[..., np.newaxis]
            pixels[..., 3] = 255
            return pixels

        return np.array(img.convert('RGBA'), dtype=np.uint8)

    def load(self, filepath: Union[str, Path]) -> np.ndarray:
        """Decode one image file.

        Args:
            filepath: Path to an image in any format Pillow can read

        Returns:
            Array of shape (height, width, 4), dtype uint8

        Raises:
            ImageReadError: If the file cannot be opened or read
            DecodeError: If no registered decoder understands the data
        """
        filepath = Path(filepath)

        try:
            handle = open(filepath, 'rb')
        except OSError as e:
            raise ImageReadError(f"cannot open {filepath}: {e.strerror or e}", path=str(filepath)) from e

        with handle:
            try:
                with Image.open(handle) as img:
                    source_mode = img.mode
                    pixels = self._to_rgba(img)
            except UnidentifiedImageError as e:
                raise DecodeError(f"cannot decode {filepath}: unknown image format", path=str(filepath)) from e
            except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as e:
                raise DecodeError(f"cannot decode {filepath}: {e}", path=str(filepath)) from e

        logger.info(
            f"Loaded {filepath} ({source_mode}, {pixels.shape[1]}x{pixels.shape[0]})"
        )
        return pixels

    def load_into(self, image: InputImage) -> InputImage:
        """Decode ``image.path`` and store the result on ``image.pixels``."""
        image.pixels = self.load(image.path)
        return image

    def load_all(self, images: Iterable[InputImage]) -> None:
        """Load every image in order; the first failure aborts."""
        for image in images:
            self.load_into(image)


def load_image(filepath: Union[str, Path]) -> np.ndarray:
    """Convenience wrapper around ImageLoader().load()."""
    return ImageLoader().load(filepath)
