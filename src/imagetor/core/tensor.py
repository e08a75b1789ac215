"""
PixelTensor: the in-memory image representation.

A PixelTensor is a height x width x 4 buffer of normalized RGBA floats held
in one C-contiguous float32 NumPy array. Element (y, x, c) is channel c of
the pixel in row y, column x. Values are not clamped; transforms may push
them outside [0, 1] and callers must not assume otherwise.
"""

from __future__ import annotations
from typing import Sequence, Tuple
import numpy as np

from .config import CHANNELS
from .errors import EmptyInputError


class PixelTensor:
    """
    Dense RGBA float32 image buffer.

    Width and height are derived from the array shape. Rows of unequal
    length cannot be represented, and the channel count is checked on
    construction.

    Example:
        >>> t = PixelTensor.zeros(4, 2)
        >>> t.width, t.height
        (4, 2)
    """

    __slots__ = ("data",)

    def __init__(self, data: np.ndarray):
        """
        Wrap an (H, W, 4) array.

        Args:
            data: Array-like of shape (H, W, 4); copied to float32 if needed

        Raises:
            ValueError: If the array is not (H, W, 4)
        """
        arr = np.asarray(data, dtype=np.float32)
        if arr.ndim != 3 or arr.shape[2] != CHANNELS:
            raise ValueError(f"PixelTensor data must be (H, W, {CHANNELS}), got {arr.shape}")
        self.data = np.ascontiguousarray(arr)

    @classmethod
    def zeros(cls, width: int, height: int) -> "PixelTensor":
        """Allocate a transparent black tensor."""
        return cls(np.zeros((int(height), int(width), CHANNELS), dtype=np.float32))

    @classmethod
    def filled(cls, width: int, height: int, rgba: Sequence[float]) -> "PixelTensor":
        """Allocate a tensor where every pixel has the given RGBA value."""
        color = np.asarray(rgba, dtype=np.float32)
        if color.shape != (CHANNELS,):
            raise ValueError(f"rgba must have {CHANNELS} values, got {color.shape}")
        data = np.empty((int(height), int(width), CHANNELS), dtype=np.float32)
        data[...] = color
        return cls(data)

    @classmethod
    def empty(cls) -> "PixelTensor":
        """A tensor with zero rows."""
        return cls(np.zeros((0, 0, CHANNELS), dtype=np.float32))

    @property
    def height(self) -> int:
        return int(self.data.shape[0])

    @property
    def width(self) -> int:
        """Number of pixels per row. Undefined for a tensor with no rows."""
        if self.data.shape[0] == 0:
            raise EmptyInputError("Tensor has no rows, width is undefined", operation="width")
        return int(self.data.shape[1])

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height), matching Pillow's Image.size order."""
        return self.width, self.height

    @property
    def shape(self) -> Tuple[int, int, int]:
        return tuple(int(s) for s in self.data.shape)

    @property
    def is_empty(self) -> bool:
        return self.data.shape[0] == 0

    def require_non_empty(self, operation: str) -> None:
        """Raise EmptyInputError if the tensor has no rows."""
        if self.is_empty:
            raise EmptyInputError(operation=operation)

    def copy(self) -> "PixelTensor":
        return PixelTensor(self.data.copy())

    def allclose(self, other: "PixelTensor", atol: float = 1e-6) -> bool:
        """Shape-aware approximate equality."""
        if self.data.shape != other.data.shape:
            return False
        return bool(np.allclose(self.data, other.data, atol=atol, rtol=0.0))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelTensor):
            return NotImplemented
        return self.data.shape == other.data.shape and bool(np.array_equal(self.data, other.data))

    __hash__ = None

    def __repr__(self) -> str:
        h, w, c = self.data.shape
        return f"PixelTensor(width={w}, height={h}, channels={c})"
