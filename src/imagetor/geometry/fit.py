"""Shrink-to-fit scaling."""

from __future__ import annotations
from typing import Tuple, Union
import math
from PIL import Image

from ..core.config import DEFAULT_RESAMPLE_FILTER
from ..io.codec import resample_image


def compute_fit_factor(
    src_width: int,
    src_height: int,
    dst_width: int,
    dst_height: int
) -> float:
    """
    Uniform scale factor that fits a source inside target bounds.

    Returns 1.0 when the source already fits; otherwise the smaller of the
    two axis ratios. Never greater than 1.0.

    Args:
        src_width, src_height: Source size in pixels
        dst_width, dst_height: Target bounds in pixels

    Returns:
        Scale factor in (0, 1]
    """
    factor = 1.0

    if src_width > dst_width or src_height > dst_height:
        scale_x = dst_width / src_width
        scale_y = dst_height / src_height
        factor = min(scale_x, scale_y)

    return factor


def fit_dimensions(
    src_width: int,
    src_height: int,
    dst_width: int,
    dst_height: int
) -> Tuple[int, int]:
    """
    Size of the source after shrink-to-fit.

    Each dimension is floor(src * factor), kept at least 1 pixel.

    Returns:
        (width, height)
    """
    factor = compute_fit_factor(src_width, src_height, dst_width, dst_height)
    if factor == 1.0:
        return int(src_width), int(src_height)

    new_width = max(1, math.floor(src_width * factor))
    new_height = max(1, math.floor(src_height * factor))
    return new_width, new_height


def fit_center(
    source: Image.Image,
    target: Union[Image.Image, Tuple[int, int]],
    resample: str = DEFAULT_RESAMPLE_FILTER
) -> Image.Image:
    """
    Scale ``source`` down so it fits inside ``target``.

    Images that already fit keep their size; nothing is ever enlarged.

    Args:
        source: Image to scale (not modified)
        target: Image whose size bounds the result, or a (width, height) tuple
        resample: Filter name passed to the resample delegate

    Returns:
        New image

    Example:
        >>> logo = Image.new("RGBA", (400, 300))
        >>> fit_center(logo, (100, 100)).size
        (100, 75)
    """
    dst_width, dst_height = target.size if isinstance(target, Image.Image) else target
    new_width, new_height = fit_dimensions(source.width, source.height, dst_width, dst_height)
    return resample_image(source, new_width, new_height, resample)
