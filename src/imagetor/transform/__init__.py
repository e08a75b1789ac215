"""In-place tensor transforms."""

from .flip import flip_vertical, flip_horizontal

__all__ = [
    "flip_vertical",
    "flip_horizontal",
]
