"""
imagetor - Image Tensor Transforms

Converts raster images into normalized RGBA float tensors, transforms them
(shrink-to-fit, bilinear resize, watermark compositing, flips) and converts
them back.

Components:
    - Core: PixelTensor, errors, transform defaults
    - Geometry: Shrink-to-fit scaling
    - Resample: Tensor-space bilinear resize
    - Composite: Alpha blending and watermark overlay
    - Transform: Axis flips
    - IO: Pillow codec adapter and image discovery
    - Pipeline: Batch watermarking and PDF export
    - Utils: Conversion, validation, debugging

Example:
    >>> from imagetor import open_image, fit_center, to_tensor, add_watermark, save_image
    >>> 
    >>> photo = open_image("images/photo.jpg")
    >>> logo = fit_center(open_image("logo.png"), photo)
    >>> 
    >>> base = to_tensor(photo)
    >>> add_watermark(to_tensor(logo), base)
    >>> save_image(base, "output-photo.jpg")
"""

__version__ = "0.1.0"

# Core
from .core import (
    CHANNELS,
    EdgeMode,
    PixelTensor,
    ImagetorError,
    EmptyInputError,
    OverlayBoundsError,
    ImageIOError,
)

# Utils
from .utils import (
    to_tensor,
    to_image,
    to_image_buffer,
    to_torch_tensor,
    from_torch_tensor,
    debug_print,
    is_debug_enabled,
)

# IO
from .io import (
    open_image,
    resample_image,
    save_image,
    find_images,
)

# Geometry
from .geometry import (
    compute_fit_factor,
    fit_dimensions,
    fit_center,
)

# Resample
from .resample import resize

# Composite
from .composite import (
    alpha_over,
    center_offset,
    add_watermark,
)

# Transform
from .transform import (
    flip_vertical,
    flip_horizontal,
)

# Pipeline
from .pipeline import (
    WatermarkConfig,
    WatermarkReport,
    watermark_image,
    run_watermark_job,
    generate_pdf,
)

__all__ = [
    "__version__",
    
    # Core
    "CHANNELS",
    "EdgeMode",
    "PixelTensor",
    "ImagetorError",
    "EmptyInputError",
    "OverlayBoundsError",
    "ImageIOError",
    
    # Utils
    "to_tensor",
    "to_image",
    "to_image_buffer",
    "to_torch_tensor",
    "from_torch_tensor",
    "debug_print",
    "is_debug_enabled",
    
    # IO
    "open_image",
    "resample_image",
    "save_image",
    "find_images",
    
    # Geometry
    "compute_fit_factor",
    "fit_dimensions",
    "fit_center",
    
    # Resample
    "resize",
    
    # Composite
    "alpha_over",
    "center_offset",
    "add_watermark",
    
    # Transform
    "flip_vertical",
    "flip_horizontal",
    
    # Pipeline
    "WatermarkConfig",
    "WatermarkReport",
    "watermark_image",
    "run_watermark_job",
    "generate_pdf",
]
