"""Shared fixtures for resize_images tests.

- Loguru is routed into pytest's ``caplog`` and reset after every test
- ``make_image`` writes small generated images to disk
"""

import sys
from collections.abc import Callable, Iterator
from contextlib import suppress
from pathlib import Path

import pytest
from loguru import logger
from PIL import Image, ImageDraw

ImageFactory = Callable[..., Path]


# ============================================================================
# Logging
# ============================================================================


@pytest.fixture(autouse=True)
def reset_loguru() -> Iterator[None]:
    """Restore loguru's default stderr sink (the CLI replaces it)."""
    yield
    logger.remove()
    _ = logger.add(sys.stderr)


@pytest.fixture
def caplog(caplog: pytest.LogCaptureFixture) -> Iterator[pytest.LogCaptureFixture]:
    """Make loguru records visible to caplog."""
    handler_id = logger.add(caplog.handler, format="{message}", level=0)
    yield caplog
    with suppress(ValueError):
        logger.remove(handler_id)


# ============================================================================
# Sample images
# ============================================================================


def draw_image(width: int, height: int, mode: str = "RGB") -> Image.Image:
    """Build a test image with a gradient and a few shapes."""
    img = Image.new("RGB", (width, height), (200, 200, 200))
    draw = ImageDraw.Draw(img)
    for x in range(0, width, max(1, width // 16)):
        draw.line([(x, 0), (x, height)], fill=(x * 255 // width, 80, 160))
    draw.ellipse([width // 4, height // 4, width * 3 // 4, height * 3 // 4], fill=(255, 0, 0))

    if mode == "P":
        return img.convert("P", palette=Image.Palette.ADAPTIVE, colors=16)
    return img.convert(mode)


@pytest.fixture
def make_image(tmp_path: Path) -> ImageFactory:
    """Factory writing an image of the given size into ``tmp_path``."""

    def _make(
        name: str,
        width: int,
        height: int,
        mode: str = "RGB",
        format: str | None = None,
    ) -> Path:
        path = tmp_path / name
        draw_image(width, height, mode).save(path, format=format)
        return path

    return _make


@pytest.fixture
def landscape_png(make_image: ImageFactory) -> Path:
    """500x300 PNG."""
    return make_image("landscape.png", 500, 300)


@pytest.fixture
def portrait_jpeg(make_image: ImageFactory) -> Path:
    """300x500 JPEG."""
    return make_image("portrait.jpg", 300, 500)


@pytest.fixture
def read_size() -> Callable[[Path], tuple[int, int]]:
    """Return a helper reading the dimensions of an image on disk."""

    def _read(path: Path) -> tuple[int, int]:
        with Image.open(path) as img:
            return img.size

    return _read
