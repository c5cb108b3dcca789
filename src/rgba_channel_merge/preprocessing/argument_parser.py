"""Argument vector validation.

Turns ``<path> <mask> [<path> <mask> ...] <output>`` into InputImage entries
and an output path. Only the shape of the vector, the masks and the output
extension are checked here; input files are not touched.
"""

from typing import List, Optional, Sequence, Tuple
from dataclasses import dataclass
from pathlib import Path
import logging
import numpy as np

from .mask_parser import ChannelMask, parse_mask
from ..errors import BadArgumentShape, InvalidMask, UnsupportedOutputFormat
from ..postprocessing.exporter import SUPPORTED_OUTPUT_EXTENSIONS

logger = logging.getLogger(__name__)


@dataclass
class InputImage:
    """One source image and the mask routing its channels.

    Attributes:
        path: File path as given on the command line
        mask: Channel routing for this image
        pixels: RGBA uint8 array of shape (height, width, 4), set by ImageLoader
    """
    path: str
    mask: ChannelMask
    pixels: Optional[np.ndarray] = None

    @property
    def is_loaded(self) -> bool:
        return self.pixels is not None

    @property
    def width(self) -> int:
        return self._require_pixels().shape[1]

    @property
    def height(self) -> int:
        return self._require_pixels().shape[0]

    def _require_pixels(self) -> np.ndarray:
        if self.pixels is None:
            raise AttributeError(f"image {self.path} has not been loaded")
        return self.pixels

    def __repr__(self):
        """Pretty representation."""
        if self.pixels is None:
            return f"InputImage({self.path}, mask={self.mask})"
        return f"InputImage({self.path}, mask={self.mask}, size={self.width}x{self.height})"


def parse_args(args: Sequence[str]) -> Tuple[List[InputImage], str]:
    """Split an argument vector into (path, mask) pairs and the output path.

    Args:
        args: Positional arguments, without the program name

    Returns:
        Tuple of (images in argument order, output path)

    Raises:
        BadArgumentShape: Fewer than 3 arguments, or an even count
        InvalidMask: A mask is malformed; the message names the pair
        UnsupportedOutputFormat: The output extension has no encoder

    Example:
        >>> images, output = parse_args(['a.png', 'rgba', 'out.png'])
        >>> len(images), output
        (1, 'out.png')
    """
    if len(args) < 3 or len(args) % 2 != 1:
        raise BadArgumentShape(
            f"wrong input format: expected <image> <mask> pairs followed by an "
            f"output path, got {len(args)} argument(s)"
        )

    images = []
    for pair_index in range((len(args) - 1) // 2):
        path = args[pair_index * 2]
        raw_mask = args[pair_index * 2 + 1]
        try:
            mask = parse_mask(raw_mask)
        except InvalidMask as e:
            raise InvalidMask(
                f"image #{pair_index + 1} ({path}): {e}",
                mask=raw_mask,
                pair_index=pair_index + 1
            ) from e
        images.append(InputImage(path=path, mask=mask))

    output_path = args[-1]
    if Path(output_path).suffix not in SUPPORTED_OUTPUT_EXTENSIONS:
        raise UnsupportedOutputFormat(
            f"only {', '.join(SUPPORTED_OUTPUT_EXTENSIONS)} files are supported "
            f"as output files, got {output_path}",
            path=output_path
        )

    logger.debug(f"Parsed {len(images)} input(s), output={output_path}")
    return images, output_path
