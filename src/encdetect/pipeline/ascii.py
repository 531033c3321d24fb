"""Stage 3: Pure ASCII detection."""

from __future__ import annotations

from encdetect.pipeline import ASCII, EncodingLabel

# ESC (0x1B) introduces ISO-2022 shift sequences, so 7-bit data containing
# it is left for the multibyte scorer.  bytes.translate deletes the allowed
# bytes from the input; if anything remains, the data is not ASCII.
_ALLOWED_ASCII: bytes = bytes(b for b in range(0x80) if b != 0x1B)


def is_ascii(data: bytes) -> bool:
    """Return True if *data* has no ESC byte and no byte with the high bit set."""
    return not data.translate(None, _ALLOWED_ASCII)


def detect_ascii(data: bytes) -> EncodingLabel | None:
    """Return the ASCII label if *data* is non-empty 7-bit text without ESC.

    Must run after the Unicode stages: UTF-7 signatures are 7-bit clean.

    :param data: The raw byte data to examine.
    :returns: The ASCII :class:`EncodingLabel`, or ``None``.
    """
    if not data:
        return None
    if not is_ascii(data):
        return None
    return ASCII
