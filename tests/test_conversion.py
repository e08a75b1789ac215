"""Tests for image <-> tensor conversion."""

import numpy as np
import pytest
from PIL import Image

from imagetor import (
    PixelTensor,
    EmptyInputError,
    to_tensor,
    to_image,
    to_image_buffer,
)


class TestToTensor:
    """Test raster -> tensor conversion."""

    def test_normalizes_bytes(self):
        """Test that each byte is divided by 255."""
        image = Image.new("RGBA", (3, 2), (255, 0, 51, 102))
        t = to_tensor(image)

        assert t.size == (3, 2)
        assert np.allclose(t.data[1, 2], [1.0, 0.0, 0.2, 0.4])

    def test_rgb_image_gets_opaque_alpha(self):
        """Test that non-RGBA images are converted to RGBA."""
        t = to_tensor(Image.new("RGB", (2, 2), (10, 20, 30)))

        assert np.allclose(t.data[..., 3], 1.0)

    def test_row_major_layout(self):
        """Test that pixel (x, y) lands at data[y, x]."""
        image = Image.new("RGBA", (4, 3), (0, 0, 0, 255))
        image.putpixel((3, 1), (255, 255, 255, 255))
        t = to_tensor(image)

        assert np.allclose(t.data[1, 3], 1.0)
        assert np.allclose(t.data[1, 2, :3], 0.0)

    def test_accepts_uint8_array(self):
        """Test conversion from a raw RGBA byte array."""
        pixels = np.full((2, 5, 4), 255, dtype=np.uint8)
        t = to_tensor(pixels)

        assert t.size == (5, 2)
        assert np.allclose(t.data, 1.0)

    def test_rejects_bad_array(self):
        """Test that non-uint8 or non-RGBA arrays are rejected."""
        with pytest.raises(ValueError):
            to_tensor(np.zeros((2, 2, 3), dtype=np.uint8))

        with pytest.raises(ValueError):
            to_tensor(np.zeros((2, 2, 4), dtype=np.float32))


class TestToImage:
    """Test tensor -> raster conversion."""

    def test_truncates_not_rounds(self):
        """Test that channel * 255 is truncated."""
        t = PixelTensor.filled(1, 1, (0.999, 0.5, 0.0039, 1.0))
        buffer = to_image_buffer(t)

        # 254.745 -> 254, 127.5 -> 127, 0.9945 -> 0
        assert buffer[0, 0].tolist() == [254, 127, 0, 255]

    def test_saturating_cast(self):
        """Test that out-of-range and NaN values saturate."""
        t = PixelTensor(np.array([[[-0.5, 2.0, np.nan, 1.0]]], dtype=np.float32))
        buffer = to_image_buffer(t)

        assert buffer[0, 0].tolist() == [0, 255, 0, 255]

    def test_to_image_mode_and_size(self, random_tensor):
        """Test the constructed image matches the tensor."""
        image = to_image(random_tensor)

        assert image.mode == "RGBA"
        assert image.size == random_tensor.size

    def test_empty_tensor_raises(self):
        """Test that an empty tensor cannot be converted."""
        with pytest.raises(EmptyInputError):
            to_image(PixelTensor.empty())

    def test_round_trip_within_quantization(self, sample_image):
        """Test that image -> tensor -> image is lossless within 1/255."""
        restored = to_image(to_tensor(sample_image))

        original = np.asarray(sample_image, dtype=np.int16)
        result = np.asarray(restored, dtype=np.int16)
        assert result.shape == original.shape
        assert np.abs(result - original).max() <= 1


class TestTorchConversion:
    """Test PixelTensor <-> torch conversion."""

    def test_channels_first_round_trip(self, random_tensor):
        """Test (4, H, W) conversion and back."""
        torch = pytest.importorskip("torch")
        from imagetor import to_torch_tensor, from_torch_tensor

        t = to_torch_tensor(random_tensor)

        assert tuple(t.shape) == (4, random_tensor.height, random_tensor.width)
        assert t.dtype == torch.float32
        assert from_torch_tensor(t) == random_tensor

    def test_channels_last(self, random_tensor):
        """Test (H, W, 4) conversion."""
        pytest.importorskip("torch")
        from imagetor import to_torch_tensor, from_torch_tensor

        t = to_torch_tensor(random_tensor, channels_first=False)

        assert tuple(t.shape) == random_tensor.shape
        assert from_torch_tensor(t, channels_first=False) == random_tensor
