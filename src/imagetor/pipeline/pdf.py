"""Single-page PDF export."""

from __future__ import annotations
from typing import Tuple, Union
from pathlib import Path
from PIL import Image

from ..core.config import A4_SIZE_MM, DEFAULT_DPI, DEFAULT_RESAMPLE_FILTER, MM_PER_INCH
from ..core.errors import ImageIOError
from ..geometry.fit import fit_center
from ..utils.debug import debug_print


PAGE_BACKGROUND = (255, 255, 255)


def mm_to_px(value: float, dpi: int = DEFAULT_DPI) -> int:
    """Millimetres to whole pixels at ``dpi`` (truncated)."""
    return int(value / MM_PER_INCH * dpi)


def page_size_px(
    page_size_mm: Tuple[float, float] = A4_SIZE_MM,
    dpi: int = DEFAULT_DPI
) -> Tuple[int, int]:
    """Page (width, height) in pixels."""
    return mm_to_px(page_size_mm[0], dpi), mm_to_px(page_size_mm[1], dpi)


def layout_on_page(
    image_size: Tuple[int, int],
    page_size: Tuple[int, int]
) -> Tuple[int, int]:
    """
    Top-left position of an image centered on a page.
    
    Args:
        image_size: (width, height) of the image, already fitted to the page
        page_size: (width, height) of the page
    
    Returns:
        (x, y) in pixels
    """
    return (page_size[0] - image_size[0]) // 2, (page_size[1] - image_size[1]) // 2


def compose_page(
    image: Image.Image,
    page_size_mm: Tuple[float, float] = A4_SIZE_MM,
    dpi: int = DEFAULT_DPI,
    resample: str = DEFAULT_RESAMPLE_FILTER
) -> Image.Image:
    """
    Render ``image`` centered on a white RGB page.
    
    The image is shrunk to fit the page (never enlarged). Alpha is flattened
    against white.
    
    Args:
        image: Source image (not modified)
        page_size_mm: (width, height) of the page in millimetres
        dpi: Page resolution
        resample: Filter used when shrinking
    
    Returns:
        RGB page image of page_size_px(page_size_mm, dpi)
    """
    page_w, page_h = page_size_px(page_size_mm, dpi)
    
    fitted = fit_center(image, (page_w, page_h), resample=resample)
    x, y = layout_on_page(fitted.size, (page_w, page_h))
    
    page = Image.new("RGB", (page_w, page_h), PAGE_BACKGROUND)
    if fitted.mode in ("RGBA", "LA"):
        page.paste(fitted, (x, y), mask=fitted.getchannel("A"))
    else:
        page.paste(fitted.convert("RGB"), (x, y))
    
    debug_print(f"[PDF] page={page_w}x{page_h} image={fitted.size} at ({x}, {y})")
    return page


def generate_pdf(
    image: Image.Image,
    pdf_path: Union[str, Path],
    page_size_mm: Tuple[float, float] = A4_SIZE_MM,
    dpi: int = DEFAULT_DPI,
    resample: str = DEFAULT_RESAMPLE_FILTER
) -> Path:
    """
    Write ``image`` onto a single PDF page laid out by compose_page.
    
    Args:
        image: Source image
        pdf_path: Output path
        page_size_mm: (width, height) of the page in millimetres
        dpi: Page resolution
        resample: Filter used when shrinking
    
    Returns:
        The output path
    
    Raises:
        ImageIOError: If the PDF cannot be written
    """
    pdf_path = Path(pdf_path)
    page = compose_page(image, page_size_mm=page_size_mm, dpi=dpi, resample=resample)
    
    try:
        page.save(pdf_path, format="PDF", resolution=float(dpi))
    except (OSError, ValueError) as e:
        raise ImageIOError(f"Failed to write PDF: {e}", path=pdf_path) from e
    
    return pdf_path
