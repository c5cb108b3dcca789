"""Channel routing from source images onto the canvas.

This module provides the ChannelMerger class, which copies the source
components selected by each image's mask into the canvas channels the mask
names.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Iterable
import logging

from .canvas import Canvas
from ..preprocessing.mask_parser import ChannelSymbol
from ..errors import InvariantViolation

if TYPE_CHECKING:
    from ..preprocessing.argument_parser import InputImage

logger = logging.getLogger(__name__)


class ChannelMerger:
    """Write mask-selected source channels into a canvas.

    Pixels are matched by linear row-major index: source pixel ``i`` lands on
    canvas pixel ``i``. When an input is narrower than the canvas its rows
    therefore wrap onto the canvas rows, exactly covering the first
    ``width*height`` canvas pixels. Writes are unconditional, so with
    ``merge_all`` a later image overwrites earlier images in every channel it
    routes to.

    Example:
        >>> merger = ChannelMerger()
        >>> canvas = build_canvas([img.pixels for img in images])
        >>> merger.merge_all(images, canvas)
    """

    def merge_channel(self, image: InputImage, canvas: Canvas) -> None:
        """Copy one image's routed channels into ``canvas`` in place.

        For every pixel index ``i`` and mask position ``j`` that is not IGNORE,
        ``canvas[i][dest(mask[j])] = image[i][j]``. Positions are applied in
        order, so if two positions route to the same destination the later
        one wins.

        Args:
            image: Loaded input image
            canvas: Canvas at least as large (in pixels) as ``image``

        Raises:
            InvariantViolation: If the image is not loaded, is larger than the
                canvas, or its mask holds something other than a ChannelSymbol
        """
        if image.pixels is None:
            raise InvariantViolation(f"image {image.path} merged before being loaded")
        if not canvas.pixels.flags['C_CONTIGUOUS']:
            raise InvariantViolation("canvas pixels must be C-contiguous")

        source = image.pixels.reshape(-1, 4)
        target = canvas.buffer.reshape(-1, 4)
        if source.size > target.size:
            raise InvariantViolation(
                f"input image is bigger than output image: input: "
                f"{image.width}x{image.height}, output: {canvas.width}x{canvas.height}"
            )

        count = source.shape[0]
        for position, symbol in enumerate(image.mask):
            if not isinstance(symbol, ChannelSymbol):
                raise InvariantViolation(f"invalid symbol in channel mask: {symbol!r}")
            if symbol is ChannelSymbol.IGNORE:
                continue
            target[:count, symbol.destination_index] = source[:, position]

        logger.debug(
            f"Merged {image.path} ({image.width}x{image.height}) with mask {image.mask}"
        )

    def merge_all(self, images: Iterable[InputImage], canvas: Canvas) -> None:
        """Merge each image onto ``canvas`` in the given order."""
        for image in images:
            if image.mask.is_noop:
                logger.warning(f"Mask {image.mask} for {image.path} routes no channels")
            elif image.pixels is not None and image.pixels.shape[:2] != canvas.pixels.shape[:2]:
                logger.warning(
                    f"{image.path} is {image.width}x{image.height}, canvas is "
                    f"{canvas.width}x{canvas.height}; pixels are matched by linear index"
                )
            self.merge_channel(image, canvas)
