"""Tests for the codec adapter and image discovery."""

import numpy as np
import pytest
from PIL import Image

from imagetor import (
    ImageIOError,
    open_image,
    resample_image,
    save_image,
    find_images,
    to_tensor,
)


class TestCodec:
    """Test decode, encode and resample delegate."""

    def test_open_image(self, temp_dir, sample_image):
        """Test decoding a saved PNG."""
        path = temp_dir / "sample.png"
        sample_image.save(path)

        image = open_image(path)

        assert image.size == sample_image.size
        assert np.array_equal(np.asarray(image), np.asarray(sample_image))

    def test_open_missing_file(self, temp_dir):
        """Test that a missing file raises ImageIOError with its path."""
        path = temp_dir / "missing.png"

        with pytest.raises(ImageIOError) as exc_info:
            open_image(path)

        assert exc_info.value.path == str(path)

    def test_open_non_image(self, temp_dir):
        """Test that undecodable files raise ImageIOError."""
        path = temp_dir / "notes.txt"
        path.write_text("not an image")

        with pytest.raises(ImageIOError):
            open_image(path)

    def test_open_restores_pixel_limit(self, temp_dir, sample_image):
        """Test that lifting the pixel limit does not leak into Pillow's global state."""
        path = temp_dir / "sample.png"
        sample_image.save(path)
        before = Image.MAX_IMAGE_PIXELS

        open_image(path)

        assert Image.MAX_IMAGE_PIXELS == before

    def test_open_with_limits_rejects_large_image(self, temp_dir, sample_image, monkeypatch):
        """Test that no_limits=False keeps decompression-bomb protection."""
        path = temp_dir / "sample.png"
        sample_image.save(path)
        # 32x24 = 768 pixels, more than twice the limit
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)

        open_image(path)
        with pytest.raises(ImageIOError):
            open_image(path, no_limits=False)

        assert Image.MAX_IMAGE_PIXELS == 100

    def test_open_truncated_closes_file(self, temp_dir, sample_image, monkeypatch):
        """Test that a decode failure after a successful open closes the image."""
        path = temp_dir / "truncated.png"
        sample_image.save(path)
        data = path.read_bytes()
        path.write_bytes(data[: len(data) // 2])

        opened = []
        real_open = Image.open

        def recording_open(*args, **kwargs):
            image = real_open(*args, **kwargs)
            opened.append(image)
            return image

        monkeypatch.setattr(Image, "open", recording_open)

        with pytest.raises(ImageIOError):
            open_image(path)

        assert len(opened) == 1
        assert opened[0].fp is None

    def test_save_png_keeps_alpha(self, temp_dir, sample_image):
        """Test lossless PNG output within quantization tolerance."""
        path = save_image(to_tensor(sample_image), temp_dir / "out.png")

        restored = np.asarray(Image.open(path), dtype=np.int16)
        assert restored.shape == (24, 32, 4)
        assert np.abs(restored - np.asarray(sample_image, dtype=np.int16)).max() <= 1

    def test_save_jpeg_drops_alpha(self, temp_dir, white_tensor):
        """Test JPEG output is RGB."""
        path = save_image(white_tensor, temp_dir / "out.jpg", quality=100)

        with Image.open(path) as image:
            assert image.format == "JPEG"
            assert image.mode == "RGB"
            assert image.size == (20, 20)

    def test_save_to_missing_directory(self, temp_dir, white_tensor):
        """Test that write failures raise ImageIOError."""
        with pytest.raises(ImageIOError):
            save_image(white_tensor, temp_dir / "nope" / "out.png")

    def test_resample_image(self):
        """Test the named-filter resize delegate."""
        image = Image.new("RGBA", (40, 20))

        assert resample_image(image, 10, 5, "bilinear").size == (10, 5)

        with pytest.raises(ValueError):
            resample_image(image, 10, 5, "sinc")

        with pytest.raises(ValueError):
            resample_image(image, 0, 5)


class TestFindImages:
    """Test directory scanning."""

    def test_files_only_sorted(self, temp_dir):
        """Test that subdirectories are skipped and names sorted."""
        for name in ("b.png", "a.jpg", "c.txt"):
            (temp_dir / name).write_bytes(b"")
        (temp_dir / "sub").mkdir()
        (temp_dir / "sub" / "d.png").write_bytes(b"")

        paths = find_images(temp_dir)

        assert [p.name for p in paths] == ["a.jpg", "b.png", "c.txt"]

    def test_extension_filter(self, temp_dir):
        """Test case-insensitive suffix filtering."""
        for name in ("a.JPG", "b.png", "c.txt"):
            (temp_dir / name).write_bytes(b"")

        paths = find_images(temp_dir, extensions=["jpg", ".png"])

        assert [p.name for p in paths] == ["a.JPG", "b.png"]

    def test_missing_directory(self, temp_dir):
        """Test that a missing directory raises ImageIOError."""
        with pytest.raises(ImageIOError):
            find_images(temp_dir / "nothing")
