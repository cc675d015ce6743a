"""Pydantic schemas for resize options."""

from enum import StrEnum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Operation(StrEnum):
    SHRINK = "shrink"
    ENLARGE = "enlarge"


class ResizeOptions(BaseModel):
    """Options for a single run, built once from the command line.

    Attributes:
        images: Image paths, processed in the given order
        operation: Whether to shrink oversized or enlarge undersized images
        size: Target size for the long dimension, in pixels
        verbose: Enable debug logging
    """

    images: list[str] = Field(
        default_factory=list,
        description="Paths of the images to resize in place",
    )
    operation: Operation = Field(
        default=Operation.SHRINK,
        description="Resize direction",
    )
    size: int = Field(..., gt=0, description="Target size of the long dimension")
    verbose: bool = Field(default=False, description="Log at DEBUG level")

    model_config: ClassVar[ConfigDict] = {
        "frozen": True,
        "extra": "forbid",
    }

    @field_validator("images")
    @classmethod
    def validate_images_not_blank(cls, v: list[str]) -> list[str]:
        """Reject empty path strings."""
        if any(not path.strip() for path in v):
            raise ValueError("Image paths must not be empty")
        return v
