"""Output canvas allocation.

The canvas is sized to the element-wise maximum of all input sizes and
pre-filled with a background color, so regions no input covers still have a
defined value.
"""

from typing import Sequence, Tuple
from dataclasses import dataclass
import numpy as np
import logging

from ..errors import InvariantViolation

logger = logging.getLogger(__name__)


# Opaque black
DEFAULT_BACKGROUND: Tuple[int, int, int, int] = (0, 0, 0, 255)


@dataclass
class Canvas:
    """RGBA output buffer.

    Attributes:
        width: Width in pixels
        height: Height in pixels
        pixels: C-contiguous uint8 array of shape (height, width, 4)
    """
    width: int
    height: int
    pixels: np.ndarray

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def buffer(self) -> np.ndarray:
        """Flat width*height*4 byte view of ``pixels`` (writes go through)."""
        return self.pixels.reshape(-1)

    def __repr__(self):
        """Pretty representation."""
        return f"Canvas({self.width}x{self.height})"


def build_canvas(
    images: Sequence[np.ndarray],
    background: Sequence[int] = DEFAULT_BACKGROUND
) -> Canvas:
    """Allocate a canvas large enough for every input.

    Args:
        images: Pixel arrays of shape (height, width, 4)
        background: RGBA value written to every canvas pixel

    Returns:
        Canvas of size (max width, max height), filled with ``background``

    Raises:
        ValueError: If ``background`` is not 4 values in [0, 255]
        InvariantViolation: If ``images`` is empty

    Example:
        >>> a = np.zeros((3, 2, 4), dtype=np.uint8)
        >>> b = np.zeros((1, 5, 4), dtype=np.uint8)
        >>> build_canvas([a, b]).size
        (5, 3)
    """
    if len(images) == 0:
        raise InvariantViolation("cannot build a canvas without input images")

    background = tuple(int(v) for v in background)
    if len(background) != 4 or not all(0 <= v <= 255 for v in background):
        raise ValueError(f"background must be 4 values in [0, 255], got {background}")

    width = max(img.shape[1] for img in images)
    height = max(img.shape[0] for img in images)

    pixels = np.empty((height, width, 4), dtype=np.uint8)
    pixels[...] = background

    logger.info(f"Created {width}x{height} canvas, background={background}")
    return Canvas(width=width, height=height, pixels=pixels)
