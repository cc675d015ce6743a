"""Image resize pipeline: decode, compute target size, resample, write back."""

from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from typing import IO, Protocol

from loguru import logger
from PIL import Image, UnidentifiedImageError

from ..common.errors import ImageDecodeError, ImageReadError, ImageWriteError
from ..common.schemas import Operation
from ..utils.profiling import timed
from .dimensions import Dimensions, compute_dimensions


class Writable(Protocol):
    """Anything that can encode itself to a file, e.g. ``PIL.Image.Image``."""

    def save(self, fp: str | Path | IO[bytes], format: str | None = None) -> None: ...


@dataclass(frozen=True)
class Unchanged:
    """No resize needed; writing does nothing."""

    path: Path
    size: Dimensions

    def write(self) -> None:
        return None


@dataclass(frozen=True)
class Resized:
    """A resampled buffer waiting to replace the file at ``path``."""

    path: Path
    buffer: Writable
    format: str | None
    original_size: Dimensions
    new_size: Dimensions

    def write(self) -> None:
        """
        Overwrite ``path`` with the resized buffer.

        The image is encoded in memory first and only then written through the
        existing path, so a failed encode leaves the original file in place.
        Symlinks are followed and the file keeps its inode and permissions.

        Raises:
            ImageWriteError: If encoding or writing the file fails
        """
        encoded = BytesIO()
        try:
            self.buffer.save(encoded, format=self.format)
        except (OSError, ValueError, KeyError) as exc:
            raise ImageWriteError(self.path, f"Failed to encode image: {exc}") from exc

        try:
            with open(self.path, "wb") as f:
                _ = f.write(encoded.getbuffer())
        except OSError as exc:
            raise ImageWriteError(self.path, f"Failed to write image: {exc}") from exc

        logger.debug(f"Wrote {self.path} ({self.format})")


ResizeOutcome = Resized | Unchanged


def output_format(path: Path, source_format: str | None) -> str | None:
    """Pick the encoder from the file extension, falling back to the decoded format."""
    return Image.registered_extensions().get(path.suffix.lower(), source_format)


def resize_image(path: str | Path, size: int, operation: Operation) -> ResizeOutcome:
    """
    Load an image and resize it to fit ``size`` if the operation calls for it.

    Args:
        path: Path of the image; it is also the write destination
        size: Target size of the long dimension
        operation: Shrink or enlarge

    Returns:
        ``Resized`` holding the new buffer, or ``Unchanged``

    Raises:
        ImageReadError: If the file cannot be opened
        ImageDecodeError: If the file is not a decodable image
    """
    path = Path(path)

    try:
        img = Image.open(path)
    except UnidentifiedImageError as exc:
        raise ImageDecodeError(path, "Unsupported or unrecognised image format") from exc
    except Image.DecompressionBombError as exc:
        raise ImageDecodeError(path, str(exc)) from exc
    except OSError as exc:
        raise ImageReadError(path, f"Cannot open image: {exc.strerror or exc}") from exc

    with img:
        try:
            img.load()
        except (OSError, SyntaxError, ValueError) as exc:
            raise ImageDecodeError(path, f"Corrupt image data: {exc}") from exc

        width, height = img.size
        source_format = img.format
        target = compute_dimensions(width, height, size, operation)
        if target is None:
            logger.debug(f"{path}: {width}x{height} already fits {operation} to {size}")
            return Unchanged(path=path, size=(width, height))

        logger.debug(f"{path}: {operation} {width}x{height} -> {target[0]}x{target[1]}")

        # Pillow resamples bilevel and palette images with nearest neighbour only
        if img.mode in ("1", "P"):
            src = img.convert("RGBA" if "transparency" in img.info else "RGB")
        else:
            src = img
        try:
            resized = src.resize(target, Image.Resampling.LANCZOS)
        except (OSError, ValueError) as exc:
            raise ImageDecodeError(path, f"Cannot resample {img.mode} image: {exc}") from exc
        finally:
            if src is not img:
                src.close()

    return Resized(
        path=path,
        buffer=resized,
        format=output_format(path, source_format),
        original_size=(width, height),
        new_size=target,
    )


def shrink(path: str | Path, size: int) -> ResizeOutcome:
    """Shrink the image at ``path`` so its long side is at most ``size``."""
    return resize_image(path, size, Operation.SHRINK)


def enlarge(path: str | Path, size: int) -> ResizeOutcome:
    """Enlarge the image at ``path`` so its long side is at least ``size``."""
    return resize_image(path, size, Operation.ENLARGE)


@timed
def process_image(path: str | Path, size: int, operation: Operation) -> ResizeOutcome:
    """Resize one image and overwrite it in place when its size changed."""
    outcome = resize_image(path, size, operation)
    outcome.write()
    return outcome
