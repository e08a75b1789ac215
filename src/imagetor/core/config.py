"""Transform configuration."""

from __future__ import annotations
from enum import Enum

from PIL import Image


CHANNELS = 4

DEFAULT_RESAMPLE_FILTER = "lanczos"
DEFAULT_JPEG_QUALITY = 100
DEFAULT_DPI = 300
A4_SIZE_MM = (210.0, 297.0)
MM_PER_INCH = 25.4

# Destination rows blended per step in tensor resize
DEFAULT_BAND_ROWS = 64


class EdgeMode(str, Enum):
    """Boundary handling for tensor-space bilinear resize.

    - DROP: destination pixels that map into the last source row or column
      are left transparent black (compatible behaviour, the default)
    - CLAMP: source coordinates are clamped so every pixel is filled
    """

    DROP = "drop"
    CLAMP = "clamp"


RESAMPLE_FILTERS = {
    "nearest": Image.Resampling.NEAREST,
    "box": Image.Resampling.BOX,
    "bilinear": Image.Resampling.BILINEAR,
    "hamming": Image.Resampling.HAMMING,
    "bicubic": Image.Resampling.BICUBIC,
    "lanczos": Image.Resampling.LANCZOS,
}


def resolve_resample_filter(name: str) -> Image.Resampling:
    """
    Map a filter name to a Pillow resampling filter.

    Args:
        name: One of 'nearest', 'box', 'bilinear', 'hamming', 'bicubic', 'lanczos'

    Returns:
        Pillow resampling constant

    Raises:
        ValueError: If the name is unknown
    """
    key = str(name).lower()
    if key not in RESAMPLE_FILTERS:
        raise ValueError(
            f"Unknown resample filter: {name} (expected one of {sorted(RESAMPLE_FILTERS)})"
        )
    return RESAMPLE_FILTERS[key]
