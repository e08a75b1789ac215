"""Batch watermark pipeline and PDF export."""

from .config import WatermarkConfig
from .pdf import (
    mm_to_px,
    page_size_px,
    layout_on_page,
    compose_page,
    generate_pdf,
)
from .watermark import (
    WatermarkReport,
    watermark_image,
    output_name,
    process_image,
    run_watermark_job,
)

__all__ = [
    # Config
    "WatermarkConfig",
    
    # PDF
    "mm_to_px",
    "page_size_px",
    "layout_on_page",
    "compose_page",
    "generate_pdf",
    
    # Pipeline
    "WatermarkReport",
    "watermark_image",
    "output_name",
    "process_image",
    "run_watermark_job",
]
