"""Boundary I/O: codec adapter and image discovery."""

from .codec import (
    open_image,
    resample_image,
    save_image,
)
from .discovery import find_images

__all__ = [
    # Codec
    "open_image",
    "resample_image",
    "save_image",
    
    # Discovery
    "find_images",
]
