"""resize_images - Resize images in place to fit a target size."""

__version__ = "0.1.0"

from .algo.dimensions import compute_dimensions, enlarge_dimensions, shrink_dimensions
from .algo.image_resize import Resized, ResizeOutcome, Unchanged, enlarge, process_image, shrink
from .common.errors import ImageDecodeError, ImageReadError, ImageResizeError, ImageWriteError
from .common.schemas import Operation, ResizeOptions
from .runner import run

__all__ = [
    "ImageDecodeError",
    "ImageReadError",
    "ImageResizeError",
    "ImageWriteError",
    "Operation",
    "ResizeOptions",
    "ResizeOutcome",
    "Resized",
    "Unchanged",
    "__version__",
    "compute_dimensions",
    "enlarge",
    "enlarge_dimensions",
    "process_image",
    "run",
    "shrink",
    "shrink_dimensions",
]
