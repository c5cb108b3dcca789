"""Merge pipeline.

This module provides the MergePipeline class that runs one invocation from
argument vector to written PNG: parse, load every input, build the canvas,
merge the inputs in argument order, export.
"""

from __future__ import annotations
from typing import List, Sequence, Tuple, Union
from pathlib import Path
import logging

from .preprocessing import ImageLoader, InputImage, parse_args
from .postprocessing import (
    ChannelMerger, ImageExporter, build_canvas, DEFAULT_BACKGROUND
)

logger = logging.getLogger(__name__)


class MergePipeline:
    """Single-shot, sequential channel merge.

    Any failure aborts the run; nothing is retried and no partial output is
    attempted after an error.

    Example:
        >>> pipeline = MergePipeline()
        >>> pipeline.run(['first.png', 'gbrx', 'second.png', 'xxxa', 'out.png'])
        PosixPath('out.png')
    """

    def __init__(self, background: Tuple[int, int, int, int] = DEFAULT_BACKGROUND):
        """Initialize the MergePipeline.

        Args:
            background: RGBA value for canvas pixels no input covers
        """
        self.background = background
        self.loader = ImageLoader()
        self.merger = ChannelMerger()
        self.exporter = ImageExporter()

    def run(self, args: Sequence[str]) -> Path:
        """Parse ``args`` and produce the merged image.

        Args:
            args: ``<path> <mask> [<path> <mask> ...] <output>``

        Returns:
            Path to the written image

        Raises:
            ArgumentError: Malformed arguments (before any file is touched)
            ImageLoadError: An input could not be read or decoded
            OutputError: The output could not be written
        """
        images, output_path = parse_args(args)
        return self.merge(images, output_path)

    def merge(self, images: List[InputImage], output_path: Union[str, Path]) -> Path:
        """Load, merge and export already-parsed inputs."""
        logger.info(f"Merging {len(images)} image(s) into {output_path}")

        self.loader.load_all(images)

        canvas = build_canvas([image.pixels for image in images], background=self.background)
        self.merger.merge_all(images, canvas)

        return self.exporter.auto_save(canvas, output_path)
