"""Pytest configuration and shared fixtures."""

import shutil
import tempfile
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from imagetor import PixelTensor


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def rng():
    """Seeded random generator."""
    return np.random.default_rng(1234)


@pytest.fixture
def random_tensor(rng):
    """Create a 7x5 tensor with random values in [0, 1]."""
    data = rng.random((5, 7, 4), dtype=np.float32)
    return PixelTensor(data)


@pytest.fixture
def white_tensor():
    """Create an opaque white 20x20 tensor."""
    return PixelTensor.filled(20, 20, (1.0, 1.0, 1.0, 1.0))


@pytest.fixture
def red_tensor():
    """Create an opaque red 10x10 tensor."""
    return PixelTensor.filled(10, 10, (1.0, 0.0, 0.0, 1.0))


@pytest.fixture
def sample_image(rng):
    """Create a random 32x24 RGBA image."""
    pixels = rng.integers(0, 256, size=(24, 32, 4), dtype=np.uint8)
    return Image.fromarray(pixels)


@pytest.fixture
def logo_image():
    """Create a half-transparent blue 40x40 logo."""
    return Image.new("RGBA", (40, 40), (0, 0, 255, 128))
