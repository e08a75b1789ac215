"""Tensor-space bilinear resize."""

from __future__ import annotations
from typing import Tuple, Union
import numpy as np

from ..core.config import CHANNELS, DEFAULT_BAND_ROWS, EdgeMode
from ..core.tensor import PixelTensor
from ..utils.debug import debug_tensor_info
from ..utils.validation import validate_target_size


def source_coordinates(
    new_size: int,
    old_size: int
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Map destination indices onto the source axis.

    src = i * old_size / new_size, evaluated in float32.

    Args:
        new_size: Destination length along the axis
        old_size: Source length along the axis

    Returns:
        i0: (new_size,) int64 floor of the source coordinate
        frac: (new_size,) float32 fractional remainder
    """
    src = np.arange(new_size, dtype=np.float32) * np.float32(old_size) / np.float32(new_size)
    i0 = np.floor(src).astype(np.int64)
    frac = src - i0.astype(np.float32)
    return i0, frac


def _axis_samples(
    new_size: int,
    old_size: int,
    edge_mode: EdgeMode
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """
    Neighbour indices, weights and validity mask along one axis.

    Returns:
        i0, i1: (new_size,) source indices of the two neighbours
        frac: (new_size,) float32 weight of i1
        valid: (new_size,) bool, False where DROP leaves the pixel empty
    """
    i0, frac = source_coordinates(new_size, old_size)

    if edge_mode == EdgeMode.CLAMP:
        src = i0.astype(np.float32) + frac
        i0 = np.minimum(i0, max(old_size - 2, 0))
        i1 = np.minimum(i0 + 1, old_size - 1)
        frac = np.clip(src - i0.astype(np.float32), 0.0, 1.0).astype(np.float32)
        valid = np.ones(new_size, dtype=bool)
        return i0, i1, frac, valid

    valid = (i0 >= 0) & (i0 < old_size - 1)
    i0 = np.where(valid, i0, 0)
    i1 = np.where(valid, i0 + 1, 0)
    return i0, i1, frac, valid


def resize(
    tensor: PixelTensor,
    new_width: int,
    new_height: int,
    edge_mode: Union[EdgeMode, str] = EdgeMode.DROP,
    band_rows: int = DEFAULT_BAND_ROWS
) -> None:
    """
    Bilinearly resample ``tensor`` to a new size, in place.

    Destination pixel (x, y) samples the source at
    (x * old_w / new_w, y * old_h / new_h) and blends the four surrounding
    source pixels:

        (1-dx)(1-dy) P[y0][x0] + dx(1-dy) P[y0][x0+1]
        + (1-dx)dy P[y0+1][x0] + dx dy P[y0+1][x0+1]

    With EdgeMode.DROP, destination pixels whose x0 falls on the last source
    column or whose y0 falls on the last source row are left at zero
    (transparent black). EdgeMode.CLAMP clamps the neighbours instead, so
    every pixel is filled.

    Args:
        tensor: Non-empty PixelTensor, replaced with the resampled buffer
        new_width: Destination width
        new_height: Destination height
        edge_mode: EdgeMode or its string value
        band_rows: Destination rows blended per step

    Raises:
        EmptyInputError: If the tensor has no rows
        ValueError: If the target size or band_rows is not positive

    Notes:
        - Apart from the destination buffer, working memory is a few
          band_rows x new_width blocks, independent of the image height
    """
    tensor.require_non_empty("resize")
    new_width, new_height = validate_target_size(new_width, new_height)
    edge_mode = EdgeMode(edge_mode)
    if int(band_rows) <= 0:
        raise ValueError(f"band_rows must be positive, got {band_rows}")
    band_rows = int(band_rows)

    old_height, old_width = tensor.height, tensor.width
    src = tensor.data

    x0, x1, dx, valid_x = _axis_samples(new_width, old_width, edge_mode)
    y0, y1, dy, valid_y = _axis_samples(new_height, old_height, edge_mode)

    dx = dx[None, :, None]
    one = np.float32(1.0)
    out = np.zeros((new_height, new_width, CHANNELS), dtype=np.float32)

    for start in range(0, new_height, band_rows):
        rows = np.arange(start, min(start + band_rows, new_height))
        rows = rows[valid_y[rows]]
        if rows.size == 0:
            continue

        ry0 = y0[rows][:, None]
        ry1 = y1[rows][:, None]
        rdy = dy[rows][:, None, None]

        top = (one - dx) * src[ry0, x0[None, :]] + dx * src[ry0, x1[None, :]]
        bottom = (one - dx) * src[ry1, x0[None, :]] + dx * src[ry1, x1[None, :]]
        out[rows] = (one - rdy) * top + rdy * bottom

    out[:, ~valid_x] = 0.0

    tensor.data = out
    debug_tensor_info("resize", tensor)
