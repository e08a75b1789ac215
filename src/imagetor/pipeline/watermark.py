"""
Batch watermarking.

Each image found in the input directory is processed on its own: the logo is
shrunk to fit the image, both are converted to PixelTensors, the logo is
composited onto the center, optional flips are applied, and the result is
saved (plus an optional one-page PDF).
"""

from __future__ import annotations
from typing import List, Optional, Tuple
from dataclasses import dataclass, field
from pathlib import Path
import time
from PIL import Image

from ..core.config import DEFAULT_RESAMPLE_FILTER
from ..core.errors import ImageIOError
from ..core.tensor import PixelTensor
from ..composite.watermark import add_watermark
from ..geometry.fit import fit_center
from ..io.codec import open_image, save_image
from ..io.discovery import find_images
from ..transform.flip import flip_horizontal, flip_vertical
from ..utils.conversion import to_image, to_tensor
from ..utils.debug import debug_tensor_info
from .config import WatermarkConfig
from .pdf import generate_pdf


@dataclass
class WatermarkReport:
    """Outcome of a batch run."""
    outputs: List[Path] = field(default_factory=list)
    pdfs: List[Path] = field(default_factory=list)
    failures: List[Tuple[Path, str]] = field(default_factory=list)
    elapsed: float = 0.0

    @property
    def ok(self) -> bool:
        return not self.failures


def watermark_image(
    image: Image.Image,
    logo: Image.Image,
    resample: str = DEFAULT_RESAMPLE_FILTER
) -> PixelTensor:
    """
    Composite ``logo`` onto the center of ``image``.

    The logo is shrunk to fit the image first, so it never exceeds the
    image's bounds. Neither input is modified.

    Args:
        image: Base image
        logo: Watermark image (alpha drives the blend)
        resample: Filter used to shrink the logo

    Returns:
        New PixelTensor of the watermarked image
    """
    fitted_logo = fit_center(logo, image, resample=resample)

    base = to_tensor(image)
    overlay = to_tensor(fitted_logo)
    debug_tensor_info("base", base)
    debug_tensor_info("overlay", overlay)

    add_watermark(overlay, base)
    return base


def output_name(source: Path, prefix: str) -> str:
    """Output filename for ``source``: prefix + name, spaces replaced by '-'."""
    return f"{prefix}{Path(source).name}".replace(" ", "-")


def process_image(
    image_path: Path,
    logo: Image.Image,
    config: WatermarkConfig,
    report: WatermarkReport
) -> Optional[Path]:
    """
    Watermark one image and write its outputs.

    I/O failures are recorded in ``report`` and the image is skipped.

    Returns:
        Path of the saved image, or None if it was skipped
    """
    try:
        image = open_image(image_path)
    except ImageIOError as e:
        print(f"[Warning] Skipping {image_path.name}: {e}")
        report.failures.append((image_path, str(e)))
        return None

    print(f"[Watermark] {image_path.name}: {image.size[0]}x{image.size[1]}")
    tensor = watermark_image(image, logo, resample=config.resample_filter)

    if config.flip_vertical:
        flip_vertical(tensor)
    if config.flip_horizontal:
        flip_horizontal(tensor)

    out_path = config.output_dir / output_name(image_path, config.output_prefix)
    try:
        save_image(tensor, out_path, quality=config.jpeg_quality)
    except ImageIOError as e:
        print(f"[Warning] Failed to save image: {out_path.name}")
        report.failures.append((image_path, str(e)))
        return None

    print(f"[Save] {out_path.name} saved successfully!")
    report.outputs.append(out_path)

    if config.generate_pdf:
        pdf_path = out_path.with_suffix(".pdf")
        try:
            generate_pdf(
                to_image(tensor),
                pdf_path,
                page_size_mm=config.page_size_mm,
                dpi=config.dpi,
                resample=config.resample_filter,
            )
        except ImageIOError as e:
            print(f"[Warning] Failed to create PDF: {pdf_path.name}")
            report.failures.append((image_path, str(e)))
        else:
            print(f"[PDF] {pdf_path.name} created successfully!")
            report.pdfs.append(pdf_path)

    return out_path


def run_watermark_job(config: WatermarkConfig) -> WatermarkReport:
    """
    Watermark every image in ``config.images_dir``.

    Args:
        config: Job settings

    Returns:
        WatermarkReport listing outputs and per-image failures

    Raises:
        ImageIOError: If the image directory or the logo cannot be read
    """
    start = time.perf_counter()
    report = WatermarkReport()

    images = find_images(config.images_dir, config.extensions)
    print(f"[Watermark] Found {len(images)} file(s) in {config.images_dir}")

    logo = open_image(config.logo_path)
    print(f"[Watermark] Logo original size: {logo.size[0]}x{logo.size[1]}")

    config.output_dir.mkdir(parents=True, exist_ok=True)

    for image_path in images:
        process_image(image_path, logo, config, report)

    report.elapsed = time.perf_counter() - start
    print(f"[Watermark] Processed {len(report.outputs)}/{len(images)} image(s) "
          f"in {report.elapsed:.2f}s")
    return report
