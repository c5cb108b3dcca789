"""RGBA Channel Merge - recombine color channels of several images into one.

Each source image is paired with a 4 character channel mask; the masks decide
which source component feeds which channel of the RGBA output.

- preprocessing: parse_mask, parse_args, ImageLoader
- postprocessing: build_canvas, ChannelMerger, ImageExporter
- pipeline: MergePipeline (high-level orchestrator)
"""

__version__ = "0.1.0"

from .errors import (
    ChannelMergeError,
    ArgumentError,
    BadArgumentShape,
    InvalidMask,
    UnsupportedOutputFormat,
    ImageLoadError,
    ImageReadError,
    DecodeError,
    OutputError,
    OutputWriteError,
    EncodeError,
    InvariantViolation,
)
from .preprocessing import (
    ChannelSymbol, ChannelMask, parse_mask, InputImage, parse_args, ImageLoader, load_image
)
from .postprocessing import Canvas, build_canvas, ChannelMerger, ImageExporter
from .pipeline import MergePipeline

__all__ = [
    # Preprocessing
    "ChannelSymbol",
    "ChannelMask",
    "parse_mask",
    "InputImage",
    "parse_args",
    "ImageLoader",
    "load_image",
    # Postprocessing
    "Canvas",
    "build_canvas",
    "ChannelMerger",
    "ImageExporter",
    # Pipeline
    "MergePipeline",
    # Errors
    "ChannelMergeError",
    "ArgumentError",
    "BadArgumentShape",
    "InvalidMask",
    "UnsupportedOutputFormat",
    "ImageLoadError",
    "ImageReadError",
    "DecodeError",
    "OutputError",
    "OutputWriteError",
    "EncodeError",
    "InvariantViolation",
]
