"""Tensor-space resampling."""

from .bilinear import resize, source_coordinates

__all__ = [
    "resize",
    "source_coordinates",
]
