"""Axis flips."""

from __future__ import annotations
import numpy as np

from ..core.tensor import PixelTensor


def flip_vertical(tensor: PixelTensor) -> None:
    """
    Mirror top-to-bottom, in place.

    Row y swaps with row height-1-y; for odd heights the middle row stays.

    Raises:
        EmptyInputError: If the tensor has no rows
    """
    tensor.require_non_empty("flip_vertical")
    np.copyto(tensor.data, tensor.data[::-1].copy())


def flip_horizontal(tensor: PixelTensor) -> None:
    """
    Mirror left-to-right, in place.

    Column x swaps with column width-1-x in every row; for odd widths the
    middle column stays.

    Raises:
        EmptyInputError: If the tensor has no rows
    """
    tensor.require_non_empty("flip_horizontal")
    np.copyto(tensor.data, tensor.data[:, ::-1].copy())
