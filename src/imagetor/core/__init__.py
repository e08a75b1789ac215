"""Core data model: PixelTensor, errors and transform defaults."""

from .config import (
    CHANNELS,
    EdgeMode,
    RESAMPLE_FILTERS,
    resolve_resample_filter,
)
from .errors import (
    ImagetorError,
    EmptyInputError,
    OverlayBoundsError,
    ImageIOError,
)
from .tensor import PixelTensor

__all__ = [
    "CHANNELS",
    "EdgeMode",
    "RESAMPLE_FILTERS",
    "resolve_resample_filter",
    "ImagetorError",
    "EmptyInputError",
    "OverlayBoundsError",
    "ImageIOError",
    "PixelTensor",
]
