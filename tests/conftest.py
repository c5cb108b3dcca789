"""Pytest configuration and fixtures for rgba_channel_merge tests."""

import pytest
import numpy as np
from PIL import Image


# ============================================================================
# Test Data Fixtures
# ============================================================================

def random_rgba(height, width, seed=0, opaque=False):
    """Deterministic random RGBA uint8 array of shape (height, width, 4)."""
    rng = np.random.default_rng(seed)
    pixels = rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8)
    if opaque:
        pixels[..., 3] = 255
    return pixels


@pytest.fixture
def make_rgba():
    """Factory fixture exposing random_rgba to tests."""
    return random_rgba


@pytest.fixture(scope="function")
def sample_rgba():
    """4x3 RGBA image with varied alpha."""
    return random_rgba(3, 4, seed=1)


@pytest.fixture(scope="function")
def sample_opaque_rgba():
    """4x3 RGBA image with alpha 255 everywhere."""
    return random_rgba(3, 4, seed=2, opaque=True)


@pytest.fixture
def write_image(tmp_path):
    """Write a pixel array to ``tmp_path`` with Pillow and return its path.

    Usage in tests:
        def test_something(write_image):
            path = write_image('a.png', pixels)
            path = write_image('b.jpg', rgb_pixels, format='JPEG')
    """
    def _write(name, pixels, format=None, **save_kwargs):
        path = tmp_path / name
        Image.fromarray(pixels).save(path, format=format, **save_kwargs)
        return path

    return _write


# ============================================================================
# Component Fixtures
# ============================================================================

@pytest.fixture
def image_loader():
    """ImageLoader instance."""
    from rgba_channel_merge.preprocessing import ImageLoader
    return ImageLoader()


@pytest.fixture
def channel_merger():
    """ChannelMerger instance."""
    from rgba_channel_merge.postprocessing import ChannelMerger
    return ChannelMerger()


@pytest.fixture
def image_exporter():
    """ImageExporter instance."""
    from rgba_channel_merge.postprocessing import ImageExporter
    return ImageExporter()


@pytest.fixture
def pipeline():
    """MergePipeline instance."""
    from rgba_channel_merge.pipeline import MergePipeline
    return MergePipeline()


# ============================================================================
# Temporary Directory Fixtures
# ============================================================================

@pytest.fixture
def temp_output_dir(tmp_path):
    """Temporary directory for test outputs."""
    output_dir = tmp_path / "test_output"
    output_dir.mkdir(exist_ok=True)
    return output_dir
