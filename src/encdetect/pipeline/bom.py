"""Stage 1: BOM (Byte Order Mark) and UTF-7 signature detection."""

from __future__ import annotations

from encdetect.pipeline import (
    UTF7,
    UTF8_BOM,
    UTF16_BE,
    UTF16_LE,
    UTF32_BE,
    UTF32_LE,
    EncodingLabel,
)

# Ordered longest-first so UTF-32 is checked before UTF-16
# (UTF-32-LE BOM starts with the same bytes as UTF-16-LE BOM)
_BOMS: tuple[tuple[bytes, EncodingLabel], ...] = (
    (b"\x00\x00\xfe\xff", UTF32_BE),
    (b"\xff\xfe\x00\x00", UTF32_LE),
    (b"\xef\xbb\xbf", UTF8_BOM),
    (b"\xfe\xff", UTF16_BE),
    (b"\xff\xfe", UTF16_LE),
)

# U+FEFF in UTF-7 is "+/v" followed by one of these, depending on the bits
# borrowed from the next character.
_UTF7_PREFIX: bytes = b"+/v"
_UTF7_FOURTH: frozenset[int] = frozenset(b"89+/")


def detect_bom(data: bytes) -> EncodingLabel | None:
    """Check for a BOM at the start of data. Returns result or None."""
    for bom_bytes, label in _BOMS:
        if data.startswith(bom_bytes):
            return label
    return None


def detect_utf7_signature(data: bytes) -> EncodingLabel | None:
    """Return the UTF-7 label if *data* opens with an encoded byte order mark.

    :param data: The raw byte data to examine.
    :returns: The UTF-7 :class:`EncodingLabel`, or ``None``.
    """
    if len(data) >= 4 and data.startswith(_UTF7_PREFIX) and data[3] in _UTF7_FOURTH:
        return UTF7
    return None
