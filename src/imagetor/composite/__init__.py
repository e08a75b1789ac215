"""Compositing: alpha blending and watermark overlay."""

from .utils import center_offset
from .blend import alpha_over
from .watermark import add_watermark

__all__ = [
    # Utils
    "center_offset",
    
    # Compositing
    "alpha_over",
    "add_watermark",
]
