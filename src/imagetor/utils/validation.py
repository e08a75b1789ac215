"""Input validation utilities."""

from __future__ import annotations
from typing import Tuple
import numpy as np

from ..core.config import CHANNELS


def validate_rgba_bytes(pixels: np.ndarray) -> np.ndarray:
    """
    Validate a decoded RGBA byte array.
    
    Args:
        pixels: Array of shape (H, W, 4)
    
    Returns:
        The array as uint8
    
    Raises:
        ValueError: If shape or dtype is invalid
    """
    pixels = np.asarray(pixels)
    
    if pixels.ndim != 3 or pixels.shape[2] != CHANNELS:
        raise ValueError(f"pixels must be (H, W, {CHANNELS}), got {pixels.shape}")
    
    if pixels.dtype != np.uint8:
        raise ValueError(f"pixels must be uint8, got {pixels.dtype}")
    
    return pixels


def validate_target_size(width: int, height: int) -> Tuple[int, int]:
    """
    Validate resize target dimensions.
    
    Args:
        width: Target width in pixels
        height: Target height in pixels
    
    Returns:
        (width, height) as ints
    
    Raises:
        ValueError: If either dimension is not a positive integer
    """
    if int(width) != width or int(height) != height:
        raise ValueError(f"Target size must be integral, got {width}x{height}")
    
    if width <= 0 or height <= 0:
        raise ValueError(f"Target size must be positive, got {width}x{height}")
    
    return int(width), int(height)
