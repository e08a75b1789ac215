"""Tests for single-page PDF export."""

import pytest
from PIL import Image

from imagetor.geometry import fit_dimensions
from imagetor.pipeline import mm_to_px, page_size_px, layout_on_page, compose_page, generate_pdf


class TestPageGeometry:
    """Test page size and placement."""

    def test_a4_at_300_dpi(self):
        """Test A4 pixel dimensions."""
        assert page_size_px() == (2480, 3507)

    def test_mm_to_px_truncates(self):
        """Test that conversion truncates."""
        assert mm_to_px(25.4, dpi=300) == 300
        assert mm_to_px(10.0, dpi=72) == 28

    def test_layout_centers(self):
        """Test centered placement."""
        assert layout_on_page((480, 507), (2480, 3507)) == (1000, 1500)


class TestGeneratePdf:
    """Test PDF writing."""

    def test_writes_pdf(self, temp_dir):
        """Test that a PDF file is produced."""
        image = Image.new("RGBA", (64, 48), (255, 0, 0, 255))

        path = generate_pdf(image, temp_dir / "page.pdf", dpi=72)

        assert path.exists()
        assert path.read_bytes().startswith(b"%PDF")

    def test_large_image_is_shrunk(self, temp_dir):
        """Test that oversized images still produce a page."""
        image = Image.new("RGB", (1200, 300), (0, 255, 0))

        path = generate_pdf(image, temp_dir / "wide.pdf", page_size_mm=(100.0, 100.0), dpi=72)

        assert path.read_bytes().startswith(b"%PDF")


class TestComposePage:
    """Test page layout before encoding."""

    def test_large_image_is_fitted_and_centered(self):
        """Test that a wide image is shrunk to the page width and centered vertically."""
        image = Image.new("RGB", (1200, 300), (0, 255, 0))

        page = compose_page(image, page_size_mm=(100.0, 100.0), dpi=72)

        assert page.size == (283, 283)
        fitted_w, fitted_h = fit_dimensions(1200, 300, 283, 283)
        assert fitted_w <= 283 and fitted_h == 70
        x, y = layout_on_page((fitted_w, fitted_h), page.size)
        assert y == 106

        assert page.getpixel((141, y + fitted_h // 2)) == (0, 255, 0)
        assert page.getpixel((141, y - 5)) == (255, 255, 255)
        assert page.getpixel((141, y + fitted_h + 5)) == (255, 255, 255)

    def test_small_image_is_not_enlarged(self):
        """Test that an image smaller than the page keeps its size."""
        image = Image.new("RGB", (20, 10), (0, 0, 255))

        page = compose_page(image, page_size_mm=(100.0, 100.0), dpi=72)

        x, y = layout_on_page((20, 10), page.size)
        assert (x, y) == (131, 136)
        assert page.getpixel((x, y)) == (0, 0, 255)
        assert page.getpixel((x + 19, y + 9)) == (0, 0, 255)
        assert page.getpixel((x + 20, y)) == (255, 255, 255)
        assert page.getpixel((x - 1, y)) == (255, 255, 255)

    def test_alpha_is_flattened_on_white(self):
        """Test that transparent pixels show the white page."""
        image = Image.new("RGBA", (20, 10), (255, 0, 0, 0))

        page = compose_page(image, page_size_mm=(100.0, 100.0), dpi=72)

        assert page.mode == "RGB"
        assert page.getpixel((141, 141)) == (255, 255, 255)


class TestGeneratePdfErrors:
    """Test PDF argument validation."""

    def test_invalid_filter(self, temp_dir):
        """Test that an unknown filter is rejected."""
        with pytest.raises(ValueError):
            generate_pdf(Image.new("RGB", (900, 900)), temp_dir / "x.pdf", dpi=72, resample="sinc")
