"""Alpha blending compositing."""

from __future__ import annotations
import numpy as np


def alpha_over(fg_rgba: np.ndarray, bg_rgba: np.ndarray) -> np.ndarray:
    """
    Alpha-over compositing with an opaque result.
    
    Formula (per color channel): out = (1 - α) * bg + α * fg, where α is the
    foreground's own alpha. The result's alpha is always 1.0.
    
    Args:
        fg_rgba: Foreground RGBA (H, W, 4)
        bg_rgba: Background RGBA (H, W, 4), same shape
    
    Returns:
        New RGBA block (H, W, 4) float32
    
    Notes:
        - The background alpha is ignored (treated as opaque)
        - Values are not clipped
    """
    if fg_rgba.shape != bg_rgba.shape:
        raise ValueError(f"fg and bg must have the same shape, got {fg_rgba.shape} and {bg_rgba.shape}")
    
    alpha = fg_rgba[..., 3:4].astype(np.float32)
    one = np.float32(1.0)
    
    out = np.empty(bg_rgba.shape, dtype=np.float32)
    out[..., :3] = (one - alpha) * bg_rgba[..., :3] + alpha * fg_rgba[..., :3]
    out[..., 3] = 1.0
    
    return out
