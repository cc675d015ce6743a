"""Common module - option schemas and error types."""

from .errors import ImageDecodeError, ImageReadError, ImageResizeError, ImageWriteError
from .schemas import Operation, ResizeOptions

__all__ = [
    "ImageDecodeError",
    "ImageReadError",
    "ImageResizeError",
    "ImageWriteError",
    "Operation",
    "ResizeOptions",
]
