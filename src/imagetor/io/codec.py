"""Raster decode, encode and resample delegate backed by Pillow."""

from __future__ import annotations
from typing import Union
from pathlib import Path
from PIL import Image

from ..core.config import DEFAULT_JPEG_QUALITY, DEFAULT_RESAMPLE_FILTER, resolve_resample_filter
from ..core.errors import ImageIOError
from ..core.tensor import PixelTensor
from ..utils.conversion import to_image
from ..utils.debug import debug_print
from ..utils.validation import validate_target_size


JPEG_SUFFIXES = (".jpg", ".jpeg")


def open_image(path: Union[str, Path], no_limits: bool = True) -> Image.Image:
    """
    Decode an image file.

    Args:
        path: Image file path
        no_limits: Lift Pillow's decompression-bomb pixel limit

    Returns:
        Fully loaded Pillow image

    Raises:
        ImageIOError: If the file cannot be opened or decoded

    Notes:
        - The pixel limit is lifted only for this call; Pillow's global
          setting is restored before returning
    """
    previous_limit = Image.MAX_IMAGE_PIXELS
    if no_limits:
        Image.MAX_IMAGE_PIXELS = None

    try:
        try:
            image = Image.open(path)
        except (OSError, Image.DecompressionBombError) as e:
            raise ImageIOError(f"Failed to open image: {e}", path=path) from e

        try:
            image.load()
        except (OSError, Image.DecompressionBombError) as e:
            image.close()
            raise ImageIOError(f"Failed to decode image: {e}", path=path) from e
    finally:
        Image.MAX_IMAGE_PIXELS = previous_limit

    debug_print(f"[Codec] Opened {path}: {image.size[0]}x{image.size[1]} mode={image.mode}")
    return image


def resample_image(
    image: Image.Image,
    width: int,
    height: int,
    filter_kind: str = DEFAULT_RESAMPLE_FILTER
) -> Image.Image:
    """
    Resize an image with a named Pillow filter.

    Args:
        image: Source image (not modified)
        width: Target width
        height: Target height
        filter_kind: 'nearest', 'box', 'bilinear', 'hamming', 'bicubic' or 'lanczos'

    Returns:
        New image of size (width, height)
    """
    width, height = validate_target_size(width, height)
    return image.resize((width, height), resample=resolve_resample_filter(filter_kind))


def save_image(
    tensor: PixelTensor,
    path: Union[str, Path],
    quality: int = DEFAULT_JPEG_QUALITY
) -> Path:
    """
    Encode a PixelTensor to disk.

    JPEG output (``.jpg``/``.jpeg``) drops the alpha channel and uses the
    given quality. Other suffixes are saved in the format Pillow infers from
    the extension, keeping alpha where the format supports it.

    Args:
        tensor: Non-empty PixelTensor
        path: Output file path
        quality: JPEG quality (1-100)

    Returns:
        The output path

    Raises:
        ImageIOError: If encoding or writing fails
    """
    path = Path(path)
    image = to_image(tensor)

    try:
        if path.suffix.lower() in JPEG_SUFFIXES:
            image.convert("RGB").save(path, format="JPEG", quality=int(quality))
        else:
            image.save(path)
    except (OSError, ValueError, KeyError) as e:
        raise ImageIOError(f"Failed to save image: {e}", path=path) from e

    debug_print(f"[Codec] Saved {path}")
    return path
