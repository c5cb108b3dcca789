"""Output-side stages: canvas allocation, channel merging and export.

- Canvas / build_canvas: Background-filled output buffer sized to the inputs
- ChannelMerger: Routes mask-selected source channels onto the canvas
- ImageExporter: Saves the canvas (PNG)
"""

from .canvas import Canvas, build_canvas, DEFAULT_BACKGROUND
from .channel_merger import ChannelMerger
from .exporter import ImageExporter, SUPPORTED_OUTPUT_EXTENSIONS

__all__ = [
    'Canvas',
    'build_canvas',
    'DEFAULT_BACKGROUND',
    'ChannelMerger',
    'ImageExporter',
    'SUPPORTED_OUTPUT_EXTENSIONS',
]
