"""Exceptions raised while resizing images."""

from pathlib import Path
from typing_extensions import override


class ImageResizeError(Exception):
    """
    Base class for failures while processing a single image.

    Carries the path of the image being processed so the CLI can
    report which file aborted the run.
    """

    def __init__(self, path: str | Path, message: str = "An unknown resize error occurred."):
        self.path: Path = Path(path)
        self.message: str = message
        super().__init__(self.message)

    @override
    def __str__(self):
        return f"{self.path}: {self.message}"


class ImageReadError(ImageResizeError):
    """The image file could not be opened (missing, a directory, no permission)."""


class ImageDecodeError(ImageResizeError):
    """The file is not a supported image or its data is corrupt."""


class ImageWriteError(ImageResizeError):
    """The resized image could not be encoded or written back to disk."""
