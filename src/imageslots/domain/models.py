"""Core domain models for imageslots.

The three fixed upload slots, the view model rendered into the upload
page, and the captured result of a script run.
"""

from __future__ import annotations

import enum
import time

from pydantic import BaseModel, ConfigDict, Field

SLOT_EXTENSION = ".png"


class ImageSlot(str, enum.Enum):
    """One of the three fixed upload destinations."""

    IMAGE1 = "image1"
    IMAGE2 = "image2"
    IMAGE3 = "image3"

    @property
    def filename(self) -> str:
        return f"{self.value}{SLOT_EXTENSION}"

    @classmethod
    def parse(cls, value: str | None) -> ImageSlot | None:
        """Return the slot named by ``value``, or None if it names none."""
        try:
            return cls(value)
        except ValueError:
            return None


class PageView(BaseModel):
    """Request-scoped data rendered into the upload page.

    Each image field holds the URL path of the stored file, or an empty
    string when that slot has never been uploaded.
    """

    model_config = ConfigDict(frozen=True)

    image1: str = ""
    image2: str = ""
    image3: str = ""
    timestamp: int = Field(
        default_factory=lambda: int(time.time()),
        description="Unix seconds, appended to image URLs to defeat caching",
    )


class ScriptResult(BaseModel):
    """Combined stdout/stderr of one script run.

    ``error`` is set when the script could not be started or exited with
    a non-zero status.
    """

    model_config = ConfigDict(frozen=True)

    output: bytes = b""
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
