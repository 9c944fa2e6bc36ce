"""Validation gates applied to an incoming slot upload.

The gates run in a fixed order and each one raises ``UploadRejected``
carrying the HTTP status the client should see. The filename extension
gate and the content-sniffing gate are independent: the extension must
be ``.png`` while the sniffed type may be PNG or JPEG.
"""

from __future__ import annotations

import logging
from pathlib import PurePath

from starlette.datastructures import UploadFile

from imageslots.domain.models import SLOT_EXTENSION, ImageSlot
from imageslots.upload.sniff import JPEG, PNG, SNIFF_LEN, detect_content_type

logger = logging.getLogger(__name__)

ALLOWED_SNIFFED_TYPES = frozenset({PNG, JPEG})


class UploadRejected(Exception):
    """Raised when an upload fails validation or cannot be processed."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def check_declared_length(content_length: str | None, limit: int) -> None:
    """Reject a request whose declared body size exceeds ``limit``."""
    if content_length is None:
        return
    try:
        declared = int(content_length)
    except ValueError:
        raise UploadRejected(400, "Invalid Content-Length") from None
    if declared > limit:
        raise UploadRejected(400, "File too large")


def check_size(upload: UploadFile, limit: int) -> None:
    """Reject a file part larger than ``limit`` (covers chunked bodies)."""
    if upload.size is not None and upload.size > limit:
        raise UploadRejected(400, "File too large")


def parse_slot(value: str | None) -> ImageSlot:
    slot = ImageSlot.parse(value)
    if slot is None:
        raise UploadRejected(400, "Invalid image field")
    return slot


def has_png_extension(filename: str | None) -> bool:
    """True if ``filename`` ends in ``.png``, ignoring case.

    The extension is everything from the last dot of the base name, so a
    bare ``.png`` counts as having one.
    """
    if not filename:
        return False
    _, dot, ext = PurePath(filename).name.rpartition(".")
    return bool(dot) and f".{ext}".lower() == SLOT_EXTENSION


async def sniff_upload(upload: UploadFile) -> str:
    """Sniff the leading bytes of ``upload`` and rewind it.

    Returns the sniffed MIME type.

    Raises:
        UploadRejected: 500 if the content cannot be read, 415 if the
            sniffed type is not an allowed image type, 400 if the content
            cannot be rewound afterwards.
    """
    try:
        head = await upload.read(SNIFF_LEN)
    except OSError as e:
        logger.error("Unable to read upload %s: %s", upload.filename, e)
        raise UploadRejected(500, "Unable to read file") from e

    content_type = detect_content_type(head)
    logger.info("Uploaded File: %s", upload.filename)
    logger.info("MIME Type: %s", content_type)

    if content_type not in ALLOWED_SNIFFED_TYPES:
        raise UploadRejected(415, "Invalid file type. Only PNG and JPEG are allowed.")

    try:
        await upload.seek(0)
    except OSError as e:
        raise UploadRejected(400, "Unable to seek file") from e
    return content_type


async def validate_upload(upload: UploadFile, limit: int) -> str:
    """Run the size, extension and content gates on ``upload``.

    Returns the sniffed MIME type; the upload is left rewound to its
    first byte ready to be persisted.
    """
    check_size(upload, limit)
    if not has_png_extension(upload.filename):
        raise UploadRejected(415, "Only PNG files are allowed")
    return await sniff_upload(upload)
