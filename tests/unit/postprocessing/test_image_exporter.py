"""Unit tests for ImageExporter class."""

import pytest
import numpy as np
from PIL import Image

from rgba_channel_merge.postprocessing.canvas import Canvas, build_canvas
from rgba_channel_merge.postprocessing.exporter import ImageExporter, SUPPORTED_OUTPUT_EXTENSIONS
from rgba_channel_merge.errors import EncodeError, OutputWriteError, UnsupportedOutputFormat


@pytest.fixture
def sample_canvas(sample_rgba):
    """Canvas holding sample_rgba."""
    canvas = build_canvas([sample_rgba])
    canvas.pixels[...] = sample_rgba
    return canvas


class TestImageExporter:
    """Test ImageExporter PNG output and encoder selection."""

    def test_init(self):
        """Test exporter initialization."""
        exporter = ImageExporter()
        assert exporter is not None

    def test_save_png(self, image_exporter, sample_canvas, sample_rgba, temp_output_dir):
        """Test PNG is 8-bit RGBA with the canvas pixels, alpha unmodified."""
        output_path = temp_output_dir / "test.png"

        saved = image_exporter.save_png(sample_canvas, str(output_path))

        assert saved == output_path
        with Image.open(output_path) as img:
            assert img.format == 'PNG'
            assert img.mode == 'RGBA'
            assert img.size == (4, 3)
            np.testing.assert_array_equal(np.array(img), sample_rgba)

    def test_auto_save_png(self, image_exporter, sample_canvas, temp_output_dir):
        """Test auto_save picks the PNG encoder for '.png'."""
        output_path = temp_output_dir / "auto.png"
        image_exporter.auto_save(sample_canvas, output_path)
        assert output_path.exists()

    @pytest.mark.parametrize('name', ['out.jpg', 'out.tiff', 'out', 'OUT.PNG'])
    def test_auto_save_rejects_other_formats(self, image_exporter, sample_canvas, temp_output_dir, name):
        with pytest.raises(UnsupportedOutputFormat):
            image_exporter.auto_save(sample_canvas, temp_output_dir / name)

        assert not (temp_output_dir / name).exists()

    def test_supported_extensions(self):
        assert SUPPORTED_OUTPUT_EXTENSIONS == ('.png',)

    def test_missing_directory(self, image_exporter, sample_canvas, tmp_path):
        """Test an unwritable location raises OutputWriteError (exit code 3)."""
        with pytest.raises(OutputWriteError) as excinfo:
            image_exporter.save_png(sample_canvas, tmp_path / "no" / "such" / "dir.png")

        assert excinfo.value.exit_code == 3

    def test_malformed_canvas(self, image_exporter, temp_output_dir):
        """Test a canvas that is not uint8 RGBA raises EncodeError."""
        canvas = Canvas(width=2, height=2, pixels=np.zeros((2, 2, 3), dtype=np.float32))

        with pytest.raises(EncodeError):
            image_exporter.save_png(canvas, temp_output_dir / "bad.png")

    def test_various_sizes(self, image_exporter, make_rgba, tmp_path):
        """Test exporting canvases of various shapes."""
        for width, height in [(1, 1), (1, 50), (50, 1), (128, 64)]:
            canvas = build_canvas([make_rgba(height, width)])
            path = tmp_path / f"{width}x{height}.png"
            image_exporter.save_png(canvas, path)
            with Image.open(path) as img:
                assert img.size == (width, height)
