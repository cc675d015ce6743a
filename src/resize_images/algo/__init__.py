"""Dimension calculation and image resize algorithms."""

from .dimensions import compute_dimensions, enlarge_dimensions, shrink_dimensions
from .image_resize import (
    Resized,
    ResizeOutcome,
    Unchanged,
    Writable,
    enlarge,
    process_image,
    resize_image,
    shrink,
)

__all__ = [
    "compute_dimensions",
    "enlarge_dimensions",
    "shrink_dimensions",
    "Resized",
    "ResizeOutcome",
    "Unchanged",
    "Writable",
    "enlarge",
    "process_image",
    "resize_image",
    "shrink",
]
