"""Filesystem storage for the three image slots.

Each slot is bound to a single file inside the upload directory. Files
are overwritten in place on upload and never deleted. No locking is
done: concurrent writers to one slot race and the last one wins.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import BinaryIO

from imageslots.domain.models import ImageSlot, PageView

logger = logging.getLogger(__name__)

UPLOADS_URL_PREFIX = "/uploads/"


class SlotStore:
    """Maps image slots to fixed paths under one upload directory."""

    def __init__(self, upload_dir: Path | str = "uploads") -> None:
        self._upload_dir = Path(upload_dir)

    @property
    def upload_dir(self) -> Path:
        return self._upload_dir

    def ensure_dir(self) -> None:
        """Create the upload directory (and parents) if missing."""
        self._upload_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, slot: ImageSlot) -> Path:
        return self._upload_dir / slot.filename

    def url_for(self, slot: ImageSlot) -> str:
        """URL path of the slot's file if it exists, else an empty string."""
        if self.path_for(slot).is_file():
            return UPLOADS_URL_PREFIX + slot.filename
        return ""

    def page_view(self) -> PageView:
        """Snapshot the current slot files into a fresh page view."""
        return PageView(**{slot.value: self.url_for(slot) for slot in ImageSlot})

    def save(self, slot: ImageSlot, source: BinaryIO) -> Path:
        """Copy ``source`` from its current position into the slot's file.

        Blocking; run it off the event loop. A failure part-way through
        leaves whatever was written on disk.

        Raises:
            SlotStoreError: If the file cannot be created or written.
        """
        path = self.path_for(slot)
        try:
            with open(path, "wb") as out:
                shutil.copyfileobj(source, out)
        except OSError as e:
            raise SlotStoreError(f"Unable to save {path}: {e}", slot=slot) from e
        logger.debug("Saved %s to %s", slot.value, path)
        return path


class SlotStoreError(Exception):
    """Raised when a slot file cannot be written."""

    def __init__(self, message: str, slot: ImageSlot | None = None) -> None:
        super().__init__(message)
        self.slot = slot
