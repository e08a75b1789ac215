"""Debug utilities."""

from __future__ import annotations
from typing import Tuple
import os

DEBUG_ENV_VAR = "IMAGETOR_DEBUG"


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled via environment variable."""
    return os.environ.get(DEBUG_ENV_VAR, "0").lower() not in ("0", "", "false")


def debug_print(*args, **kwargs):
    """Print debug message if debug mode is enabled."""
    if is_debug_enabled():
        print(*args, **kwargs)


def get_tensor_stats(array) -> Tuple[float, float, float]:
    """
    Get min, max, mean statistics of an array.
    
    Args:
        array: NumPy array (or anything exposing min/max/mean)
    
    Returns:
        (min, max, mean) as floats
    """
    return (
        float(array.min().item()),
        float(array.max().item()),
        float(array.mean().item())
    )


def debug_tensor_info(name: str, tensor):
    """Print debug information about a PixelTensor or array."""
    if is_debug_enabled():
        array = getattr(tensor, "data", tensor)
        if array.size == 0:
            print(f"[{name}] shape={tuple(array.shape)} dtype={array.dtype} (empty)")
            return
        mn, mx, mean = get_tensor_stats(array)
        print(f"[{name}] shape={tuple(array.shape)} dtype={array.dtype} "
              f"min={mn:.4f} max={mx:.4f} mean={mean:.4f}")
