"""Watermark job configuration."""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Tuple
from dataclasses import dataclass, field
from pathlib import Path

from ..core.config import (
    A4_SIZE_MM,
    DEFAULT_DPI,
    DEFAULT_JPEG_QUALITY,
    DEFAULT_RESAMPLE_FILTER,
    resolve_resample_filter,
)


DEFAULT_IMAGES_DIR = "images"
DEFAULT_LOGO_PATH = "logo.png"
DEFAULT_OUTPUT_DIR = "."
DEFAULT_OUTPUT_PREFIX = "output-"

REQUIRED_SECTIONS = ("input", "output")


@dataclass
class WatermarkConfig:
    """
    Settings for a batch watermark run.

    Attributes:
        images_dir: Directory scanned for input images
        logo_path: Watermark image
        output_dir: Where watermarked images and PDFs are written
        output_prefix: Prepended to each input filename
        extensions: Optional suffix filter for discovery (None keeps all files)
        jpeg_quality: Quality for JPEG outputs (1-100)
        resample_filter: Filter used to shrink the logo and PDF images
        flip_vertical: Mirror each result top-to-bottom before saving
        flip_horizontal: Mirror each result left-to-right before saving
        generate_pdf: Also write a one-page PDF per output
        page_size_mm: PDF page (width, height) in millimetres
        dpi: PDF page resolution
    """
    images_dir: Path = field(default_factory=lambda: Path(DEFAULT_IMAGES_DIR))
    logo_path: Path = field(default_factory=lambda: Path(DEFAULT_LOGO_PATH))
    output_dir: Path = field(default_factory=lambda: Path(DEFAULT_OUTPUT_DIR))
    output_prefix: str = DEFAULT_OUTPUT_PREFIX
    extensions: Optional[List[str]] = None
    jpeg_quality: int = DEFAULT_JPEG_QUALITY
    resample_filter: str = DEFAULT_RESAMPLE_FILTER
    flip_vertical: bool = False
    flip_horizontal: bool = False
    generate_pdf: bool = True
    page_size_mm: Tuple[float, float] = A4_SIZE_MM
    dpi: int = DEFAULT_DPI

    def __post_init__(self):
        """Coerce paths and validate ranges."""
        self.images_dir = Path(self.images_dir)
        self.logo_path = Path(self.logo_path)
        self.output_dir = Path(self.output_dir)
        self.page_size_mm = (float(self.page_size_mm[0]), float(self.page_size_mm[1]))

        if not 1 <= int(self.jpeg_quality) <= 100:
            raise ValueError(f"jpeg_quality must be in [1, 100], got {self.jpeg_quality}")
        if int(self.dpi) <= 0:
            raise ValueError(f"dpi must be positive, got {self.dpi}")
        resolve_resample_filter(self.resample_filter)

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> 'WatermarkConfig':
        """Create WatermarkConfig from a nested dictionary (YAML layout)."""
        input_cfg = cfg.get('input', {}) or {}
        output_cfg = cfg.get('output', {}) or {}
        transform_cfg = cfg.get('transform', {}) or {}
        pdf_cfg = cfg.get('pdf', {}) or {}

        extensions = input_cfg.get('extensions')
        return cls(
            images_dir=Path(input_cfg.get('images_dir', DEFAULT_IMAGES_DIR)),
            logo_path=Path(input_cfg.get('logo_path', DEFAULT_LOGO_PATH)),
            extensions=list(extensions) if extensions is not None else None,
            output_dir=Path(output_cfg.get('dir', DEFAULT_OUTPUT_DIR)),
            output_prefix=str(output_cfg.get('prefix', DEFAULT_OUTPUT_PREFIX)),
            jpeg_quality=int(output_cfg.get('jpeg_quality', DEFAULT_JPEG_QUALITY)),
            resample_filter=str(transform_cfg.get('resample_filter', DEFAULT_RESAMPLE_FILTER)),
            flip_vertical=bool(transform_cfg.get('flip_vertical', False)),
            flip_horizontal=bool(transform_cfg.get('flip_horizontal', False)),
            generate_pdf=bool(pdf_cfg.get('enabled', True)),
            page_size_mm=tuple(pdf_cfg.get('page_size_mm', A4_SIZE_MM)),
            dpi=int(pdf_cfg.get('dpi', DEFAULT_DPI)),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the nested dictionary layout."""
        return {
            'input': {
                'images_dir': str(self.images_dir),
                'logo_path': str(self.logo_path),
                'extensions': list(self.extensions) if self.extensions is not None else None,
            },
            'output': {
                'dir': str(self.output_dir),
                'prefix': self.output_prefix,
                'jpeg_quality': self.jpeg_quality,
            },
            'transform': {
                'resample_filter': self.resample_filter,
                'flip_vertical': self.flip_vertical,
                'flip_horizontal': self.flip_horizontal,
            },
            'pdf': {
                'enabled': self.generate_pdf,
                'page_size_mm': list(self.page_size_mm),
                'dpi': self.dpi,
            },
        }
