"""Centered watermark overlay."""

from __future__ import annotations

from ..core.tensor import PixelTensor
from ..core.errors import EmptyInputError
from ..utils.debug import debug_print
from .blend import alpha_over
from .utils import center_offset


def add_watermark(overlay: PixelTensor, base: PixelTensor) -> None:
    """
    Alpha-blend ``overlay`` onto the center of ``base``, in place.

    Each covered base pixel becomes (1 - a) * base + a * overlay per color
    channel, where a is the overlay pixel's alpha, and its alpha is set to
    1.0. Pixels outside the overlay's footprint are left untouched.

    Args:
        overlay: Watermark tensor, no larger than ``base`` in either axis
        base: Tensor to modify

    Raises:
        EmptyInputError: If either tensor has no rows
        OverlayBoundsError: If the overlay is wider or taller than the base
    """
    if overlay.is_empty or base.is_empty:
        raise EmptyInputError(operation="add_watermark")

    offset_x, offset_y = center_offset(base.size, overlay.size)
    debug_print(f"[Watermark] overlay={overlay.size} base={base.size} offset=({offset_x}, {offset_y})")

    rows = slice(offset_y, offset_y + overlay.height)
    cols = slice(offset_x, offset_x + overlay.width)
    base.data[rows, cols] = alpha_over(overlay.data, base.data[rows, cols])
