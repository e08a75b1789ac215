"""Placement helpers for compositing."""

from __future__ import annotations
from typing import Tuple

from ..core.errors import OverlayBoundsError


def center_offset(
    base_size: Tuple[int, int],
    overlay_size: Tuple[int, int]
) -> Tuple[int, int]:
    """
    Top-left offset that centers an overlay on a base image.
    
    Uses truncating integer division, so an odd leftover pixel goes to the
    right/bottom margin.
    
    Args:
        base_size: (width, height) of the base
        overlay_size: (width, height) of the overlay
    
    Returns:
        (offset_x, offset_y)
    
    Raises:
        OverlayBoundsError: If the overlay is wider or taller than the base
    """
    base_w, base_h = base_size
    overlay_w, overlay_h = overlay_size
    
    if overlay_w > base_w or overlay_h > base_h:
        raise OverlayBoundsError(overlay_size, base_size)
    
    return (base_w - overlay_w) // 2, (base_h - overlay_h) // 2
