"""Command line entry point: ``resize [-u | -d] -s SIZE IMAGE...``."""

import argparse
import sys
from collections.abc import Sequence

from loguru import logger
from pydantic import ValidationError

from . import __version__
from .common.errors import ImageResizeError
from .common.schemas import Operation, ResizeOptions
from .runner import run
from .utils.log import configure_logging


def positive_int(value: str) -> int:
    """argparse type for the target size."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"size must be a positive integer, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resize",
        description=(
            "Resize images in place so their long side matches a target size, "
            "preserving aspect ratio."
        ),
    )
    _ = parser.add_argument("images", nargs="+", metavar="IMAGE", help="Image files to resize")

    direction = parser.add_mutually_exclusive_group()
    _ = direction.add_argument(
        "-u",
        "--up",
        dest="operation",
        action="store_const",
        const=Operation.ENLARGE,
        help="Enlarge images whose long side is smaller than SIZE",
    )
    _ = direction.add_argument(
        "-d",
        "--down",
        dest="operation",
        action="store_const",
        const=Operation.SHRINK,
        help="Shrink images whose long side is larger than SIZE (default)",
    )
    parser.set_defaults(operation=Operation.SHRINK)

    _ = parser.add_argument(
        "-s",
        "--size",
        type=positive_int,
        required=True,
        metavar="N",
        help="Target size of the long side, in pixels",
    )
    _ = parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    _ = parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_options(argv: Sequence[str] | None = None) -> ResizeOptions:
    """Parse ``argv`` into validated options; exits with status 2 on usage errors."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return ResizeOptions(
            images=args.images,
            operation=args.operation,
            size=args.size,
            verbose=args.verbose,
        )
    except ValidationError as exc:
        parser.error(str(exc))


def main(argv: Sequence[str] | None = None) -> int:
    options = parse_options(argv)
    configure_logging(options.verbose)

    try:
        _ = run(options)
    except ImageResizeError as exc:
        logger.error(str(exc))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
