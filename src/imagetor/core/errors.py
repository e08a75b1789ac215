"""
Exceptions raised by imagetor.

All library errors derive from ImagetorError so callers can catch the whole
family at once. Errors that describe bad input values also derive from
ValueError.
"""

from __future__ import annotations
from typing import Optional, Tuple, Union
from pathlib import Path


class ImagetorError(Exception):
    """Base exception for all imagetor errors."""

    pass


class EmptyInputError(ImagetorError, ValueError):
    """Raised when a tensor with zero rows is passed where pixels are required."""

    def __init__(self, message: str = "Array is empty", operation: Optional[str] = None):
        """
        Initialize EmptyInputError.

        Args:
            message: Error message
            operation: Name of the operation that received the empty tensor
        """
        self.operation = operation

        full_message = message
        if operation:
            full_message = f"[{operation}] {full_message}"

        super().__init__(full_message)


class OverlayBoundsError(ImagetorError, ValueError):
    """Raised when an overlay is wider or taller than the image it is composited onto."""

    def __init__(self, overlay_size: Tuple[int, int], base_size: Tuple[int, int]):
        """
        Initialize OverlayBoundsError.

        Args:
            overlay_size: (width, height) of the overlay
            base_size: (width, height) of the base image
        """
        self.overlay_size = tuple(overlay_size)
        self.base_size = tuple(base_size)

        super().__init__(
            f"Overlay exceeds base bounds: overlay {self.overlay_size[0]}x{self.overlay_size[1]}, "
            f"base {self.base_size[0]}x{self.base_size[1]}"
        )


class ImageIOError(ImagetorError):
    """Raised when an image cannot be decoded, encoded or located."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        """
        Initialize ImageIOError.

        Args:
            message: Error message
            path: File or directory involved in the failure
        """
        self.path = str(path) if path is not None else None

        full_message = message
        if self.path:
            full_message = f"{full_message} (path: {self.path})"

        super().__init__(full_message)
