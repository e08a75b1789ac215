"""Geometric fitting of images into target bounds."""

from .fit import (
    compute_fit_factor,
    fit_dimensions,
    fit_center,
)

__all__ = [
    "compute_fit_factor",
    "fit_dimensions",
    "fit_center",
]
