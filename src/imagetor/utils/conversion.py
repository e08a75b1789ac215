"""Conversions between raster images, PixelTensors and torch tensors."""

from __future__ import annotations
from typing import Union
import numpy as np
from PIL import Image

from ..core.tensor import PixelTensor
from .validation import validate_rgba_bytes


def to_tensor(image: Union[Image.Image, np.ndarray]) -> PixelTensor:
    """
    Convert a decoded image to a normalized PixelTensor.

    Every channel byte is divided by 255.0. Images in other modes are
    converted to RGBA first, so opaque sources get alpha 1.0.

    Args:
        image: Pillow image, or (H, W, 4) uint8 array

    Returns:
        New PixelTensor with the image's width and height
    """
    if isinstance(image, Image.Image):
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        pixels = np.asarray(image, dtype=np.uint8)
    else:
        pixels = validate_rgba_bytes(image)

    return PixelTensor(pixels.astype(np.float32) / np.float32(255.0))


def to_image_buffer(tensor: PixelTensor) -> np.ndarray:
    """
    Convert a PixelTensor to an (H, W, 4) uint8 buffer.

    Each channel is multiplied by 255.0 and truncated, not rounded. The cast
    saturates: negative values and NaN become 0, values above 255 become 255.

    Args:
        tensor: Non-empty PixelTensor

    Returns:
        New C-contiguous uint8 array, row-major RGBA

    Raises:
        EmptyInputError: If the tensor has no rows
    """
    tensor.require_non_empty("to_image_buffer")

    scaled = tensor.data * np.float32(255.0)
    scaled = np.nan_to_num(scaled, nan=0.0, posinf=255.0, neginf=0.0)
    return np.clip(scaled, 0.0, 255.0).astype(np.uint8)


def to_image(tensor: PixelTensor) -> Image.Image:
    """
    Convert a PixelTensor to an RGBA Pillow image.

    Args:
        tensor: Non-empty PixelTensor

    Returns:
        New RGBA image of the same width and height
    """
    return Image.fromarray(to_image_buffer(tensor))


def to_torch_tensor(
    tensor: PixelTensor,
    device: str = "cpu",
    channels_first: bool = True,
):
    """
    Convert a PixelTensor to a float32 PyTorch tensor.

    Args:
        tensor: Source PixelTensor
        device: Target device
        channels_first: Return (4, H, W) if True, else (H, W, 4)

    Returns:
        PyTorch tensor on the specified device (a copy)
    """
    import torch

    out = torch.from_numpy(tensor.data.copy())
    if channels_first:
        out = out.permute(2, 0, 1).contiguous()

    if device and out.device != torch.device(device):
        out = out.to(device)

    return out


def from_torch_tensor(x, channels_first: bool = True) -> PixelTensor:
    """
    Convert a PyTorch tensor back to a PixelTensor.

    Args:
        x: Tensor of shape (4, H, W) or (H, W, 4)
        channels_first: Layout of ``x``

    Returns:
        New PixelTensor
    """
    array = x.detach().cpu().float().numpy()
    if channels_first:
        if array.ndim != 3:
            raise ValueError(f"Expected (C, H, W) tensor, got {tuple(array.shape)}")
        array = np.transpose(array, (1, 2, 0))
    return PixelTensor(array)
