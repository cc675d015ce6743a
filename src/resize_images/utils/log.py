"""Loguru sink setup for the command line."""

import sys

from loguru import logger

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}"


def configure_logging(verbose: bool = False) -> None:
    """Replace loguru's default sink with a stderr sink at INFO (DEBUG if verbose)."""
    logger.remove()
    _ = logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "INFO",
        format=LOG_FORMAT,
        colorize=None,
    )
