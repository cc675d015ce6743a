"""Sequential, fail-fast processing of the images named on the command line."""

from loguru import logger

from .algo.image_resize import Resized, ResizeOutcome, process_image
from .common.schemas import ResizeOptions


def run(options: ResizeOptions) -> list[ResizeOutcome]:
    """
    Resize every image in ``options.images``, in order.

    The first failing image stops the run: its ``ImageResizeError``
    propagates and the remaining images are left untouched.

    Returns:
        One outcome per processed image
    """
    outcomes: list[ResizeOutcome] = []

    for image in options.images:
        outcome = process_image(image, options.size, options.operation)

        if isinstance(outcome, Resized):
            old_w, old_h = outcome.original_size
            new_w, new_h = outcome.new_size
            logger.info(f"Resized {outcome.path}: {old_w}x{old_h} -> {new_w}x{new_h}")
        else:
            logger.info(f"Unchanged {outcome.path}: {outcome.size[0]}x{outcome.size[1]}")

        outcomes.append(outcome)

    resized = sum(isinstance(outcome, Resized) for outcome in outcomes)
    logger.info(f"Done. Resized: {resized}, unchanged: {len(outcomes) - resized}")
    return outcomes
