"""Aspect-ratio preserving target dimension calculation (pure functions)."""

import math

from ..common.schemas import Operation

Dimensions = tuple[int, int]


def shrink_dimensions(width: int, height: int, size: int) -> Dimensions | None:
    """
    Compute the size of an image shrunk so its long side equals ``size``.

    Args:
        width: Current width in pixels
        height: Current height in pixels
        size: Target size of the long dimension

    Returns:
        New ``(width, height)``, or None when the long side already fits.
        Ties between width and height are treated as height being long.
    """
    _check_positive(width, height, size)

    if width > height and width > size:
        return size, _scale(size, width, height)
    elif height >= width and height > size:
        return _scale(size, height, width), size
    return None


def enlarge_dimensions(width: int, height: int, size: int) -> Dimensions | None:
    """
    Compute the size of an image enlarged so its long side equals ``size``.

    Mirror image of :func:`shrink_dimensions`: returns None when the long
    side is already at least ``size``.
    """
    _check_positive(width, height, size)

    if width > height and width < size:
        return size, _scale(size, width, height)
    elif height >= width and height < size:
        return _scale(size, height, width), size
    return None


def compute_dimensions(
    width: int, height: int, size: int, operation: Operation
) -> Dimensions | None:
    """Dispatch to the shrink or enlarge policy."""
    if operation == Operation.ENLARGE:
        return enlarge_dimensions(width, height, size)
    return shrink_dimensions(width, height, size)


def _scale(size: int, long_side: int, short_side: int) -> int:
    # size / long first, then times short: keeps float rounding stable
    # (3000x5000 -> 1200x2000). Never collapse a side to zero.
    return max(1, math.floor(size / long_side * short_side))


def _check_positive(width: int, height: int, size: int) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"Image dimensions must be positive, got {width}x{height}")
    if size <= 0:
        raise ValueError(f"Target size must be positive, got {size}")
