"""Canvas export.

This module provides the ImageExporter class for writing the merged canvas to
disk. Encoding is delegated to Pillow; the exporter only picks the encoder
for the output extension and hands it the canvas pixels.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Union
from pathlib import Path
import numpy as np
import logging

from PIL import Image

from ..errors import EncodeError, OutputWriteError, UnsupportedOutputFormat

if TYPE_CHECKING:
    from .canvas import Canvas

logger = logging.getLogger(__name__)


SUPPORTED_OUTPUT_EXTENSIONS = ('.png',)


class ImageExporter:
    """Write a canvas as an 8-bit RGBA image.

    Supported output formats:
    - PNG: 8-bit, 4 channels, non-premultiplied alpha

    Example:
        >>> exporter = ImageExporter()
        >>> exporter.auto_save(canvas, 'merged.png')
    """

    def __init__(self):
        """Initialize the ImageExporter."""
        pass

    def _to_image(self, canvas: Canvas, filepath: Path) -> Image.Image:
        pixels = canvas.pixels
        if pixels.dtype != np.uint8 or pixels.shape != (canvas.height, canvas.width, 4):
            raise EncodeError(
                f"canvas must be uint8 {canvas.height}x{canvas.width}x4, "
                f"got {pixels.dtype} {pixels.shape}",
                path=str(filepath)
            )
        # (h, w, 4) uint8 is interpreted as RGBA
        return Image.fromarray(np.ascontiguousarray(pixels))

    def save_png(self, canvas: Canvas, filepath: Union[str, Path]) -> Path:
        """Save the canvas as PNG.

        The parent directory must already exist.

        Args:
            canvas: Merged canvas
            filepath: Output file path

        Returns:
            Path to saved file

        Raises:
            OutputWriteError: If the file cannot be created or written
            EncodeError: If Pillow fails to encode the pixels
        """
        filepath = Path(filepath)

        img = self._to_image(canvas, filepath)

        try:
            handle = open(filepath, 'wb')
        except OSError as e:
            raise OutputWriteError(f"cannot create {filepath}: {e.strerror or e}", path=str(filepath)) from e

        with handle:
            try:
                img.save(handle, format='PNG')
            except OSError as e:
                raise OutputWriteError(f"cannot write {filepath}: {e}", path=str(filepath)) from e
            except (ValueError, KeyError) as e:
                raise EncodeError(f"cannot encode {filepath}: {e}", path=str(filepath)) from e

        logger.info(f"Saved {canvas.width}x{canvas.height} RGBA PNG to {filepath}")
        return filepath

    def auto_save(self, canvas: Canvas, filepath: Union[str, Path]) -> Path:
        """Automatically save based on file extension.

        Args:
            canvas: Merged canvas
            filepath: Output file path (extension determines format)

        Returns:
            Path to saved file

        Raises:
            UnsupportedOutputFormat: If no encoder handles the extension
        """
        filepath = Path(filepath)
        ext = filepath.suffix

        if ext in ['.png']:
            return self.save_png(canvas, filepath)
        else:
            raise UnsupportedOutputFormat(
                f"Unsupported file extension: {ext or '(none)'}. "
                f"Supported: {', '.join(SUPPORTED_OUTPUT_EXTENSIONS)}",
                path=str(filepath)
            )
