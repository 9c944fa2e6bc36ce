"""Content-based MIME type detection.

Implements the byte-pattern part of the WHATWG MIME Sniffing algorithm:
only the leading ``SNIFF_LEN`` bytes are considered, markup signatures
may be preceded by whitespace, binary signatures must match at offset
zero. Input that matches nothing falls back to plain text or an octet
stream depending on whether it contains binary control bytes.
"""

from __future__ import annotations

from dataclasses import dataclass

SNIFF_LEN = 512

PNG = "image/png"
JPEG = "image/jpeg"
TEXT_PLAIN = "text/plain; charset=utf-8"
OCTET_STREAM = "application/octet-stream"

_WHITESPACE = b"\t\n\x0c\r "
_BINARY_BYTES = frozenset(
    list(range(0x00, 0x09)) + [0x0B] + list(range(0x0E, 0x1B)) + list(range(0x1C, 0x20))
)


@dataclass(frozen=True)
class _Exact:
    prefix: bytes
    content_type: str

    def match(self, data: bytes, first_non_ws: int) -> str | None:
        return self.content_type if data.startswith(self.prefix) else None


@dataclass(frozen=True)
class _Masked:
    """Pattern compared under a byte mask, e.g. to skip a RIFF length field."""

    pattern: bytes
    mask: bytes
    content_type: str
    skip_ws: bool = False

    def match(self, data: bytes, first_non_ws: int) -> str | None:
        if self.skip_ws:
            data = data[first_non_ws:]
        if len(data) < len(self.pattern):
            return None
        for byte, mask, want in zip(data, self.mask, self.pattern):
            if byte & mask != want:
                return None
        return self.content_type


@dataclass(frozen=True)
class _HtmlTag:
    """Case-insensitive tag opener followed by a tag-terminating byte."""

    tag: bytes

    def match(self, data: bytes, first_non_ws: int) -> str | None:
        data = data[first_non_ws:]
        if len(data) < len(self.tag) + 1:
            return None
        if data[: len(self.tag)].upper() != self.tag:
            return None
        if data[len(self.tag)] not in b" >":
            return None
        return "text/html; charset=utf-8"


_HTML_TAGS = (
    b"<!DOCTYPE HTML", b"<HTML", b"<HEAD", b"<SCRIPT", b"<IFRAME", b"<H1",
    b"<DIV", b"<FONT", b"<TABLE", b"<A", b"<STYLE", b"<TITLE", b"<B",
    b"<BODY", b"<BR", b"<P", b"<!--",
)

_SIGNATURES = (
    *(_HtmlTag(tag) for tag in _HTML_TAGS),
    _Masked(b"<?xml", b"\xff" * 5, "text/xml; charset=utf-8", skip_ws=True),
    _Exact(b"%PDF-", "application/pdf"),
    _Exact(b"%!PS-Adobe-", "application/postscript"),
    _Exact(b"\xfe\xff", "text/plain; charset=utf-16be"),
    _Exact(b"\xff\xfe", "text/plain; charset=utf-16le"),
    _Exact(b"\xef\xbb\xbf", TEXT_PLAIN),
    _Exact(b"\x00\x00\x01\x00", "image/x-icon"),
    _Exact(b"\x00\x00\x02\x00", "image/x-icon"),
    _Exact(b"BM", "image/bmp"),
    _Exact(b"GIF87a", "image/gif"),
    _Exact(b"GIF89a", "image/gif"),
    _Masked(
        b"RIFF\x00\x00\x00\x00WEBPVP",
        b"\xff\xff\xff\xff\x00\x00\x00\x00\xff\xff\xff\xff\xff\xff",
        "image/webp",
    ),
    _Exact(b"\x89PNG\r\n\x1a\n", PNG),
    _Exact(b"\xff\xd8\xff", JPEG),
    _Exact(b"OggS\x00", "application/ogg"),
    _Exact(b"\x1f\x8b\x08", "application/x-gzip"),
    _Exact(b"PK\x03\x04", "application/zip"),
)


def detect_content_type(data: bytes) -> str:
    """Return the sniffed MIME type of ``data``.

    Always returns a valid MIME type; inputs that match no signature are
    classified as ``text/plain; charset=utf-8`` or
    ``application/octet-stream``.
    """
    data = data[:SNIFF_LEN]
    first_non_ws = len(data) - len(data.lstrip(_WHITESPACE))
    for signature in _SIGNATURES:
        content_type = signature.match(data, first_non_ws)
        if content_type is not None:
            return content_type
    if any(byte in _BINARY_BYTES for byte in data[first_non_ws:]):
        return OCTET_STREAM
    return TEXT_PLAIN
