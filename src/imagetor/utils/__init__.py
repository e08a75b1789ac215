"""Common utilities: conversion, validation and debugging."""

from .conversion import (
    to_tensor,
    to_image_buffer,
    to_image,
    to_torch_tensor,
    from_torch_tensor,
)
from .validation import (
    validate_rgba_bytes,
    validate_target_size,
)
from .debug import (
    is_debug_enabled,
    debug_print,
    get_tensor_stats,
    debug_tensor_info,
)

__all__ = [
    # Conversion
    "to_tensor",
    "to_image_buffer",
    "to_image",
    "to_torch_tensor",
    "from_torch_tensor",

    # Validation
    "validate_rgba_bytes",
    "validate_target_size",

    # Debug
    "is_debug_enabled",
    "debug_print",
    "get_tensor_stats",
    "debug_tensor_info",
]
