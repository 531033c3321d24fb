"""Stage 2: UTF-8 (no BOM) structural validation."""

from __future__ import annotations

from encdetect.pipeline import UTF8, EncodingLabel

# Deleting these from the input leaves only the bytes >= 0x80.
_ASCII_BYTES: bytes = bytes(range(0x80))


def count_utf8_sequences(data: bytes) -> int | None:
    """Walk *data* once and count well-formed multi-byte UTF-8 sequences.

    Lead bytes are classified by their high bits only; overlong forms and
    encoded surrogates are not rejected.  A byte that is neither ASCII nor a
    lead byte (a stray continuation byte, or 0xF8-0xFF) is stepped over.

    :param data: The raw byte data to examine.
    :returns: The number of multi-byte sequences, or ``None`` if a
        continuation byte is malformed or the final sequence is truncated.
    """
    i = 0
    length = len(data)
    multibyte_sequences = 0

    while i < length:
        byte = data[i]

        if byte & 0x80 == 0:
            i += 1
            continue

        if byte & 0xE0 == 0xC0:
            seq_len = 2
        elif byte & 0xF0 == 0xE0:
            seq_len = 3
        elif byte & 0xF8 == 0xF0:
            seq_len = 4
        else:
            i += 1
            continue

        if i + seq_len > length:
            return None

        # Continuation bytes must be 10xxxxxx
        for j in range(1, seq_len):
            if data[i + j] & 0xC0 != 0x80:
                return None

        multibyte_sequences += 1
        i += seq_len

    return multibyte_sequences


def is_utf8_without_bom(data: bytes) -> bool:
    """Return True if every lead byte in *data* is followed by valid continuations."""
    return count_utf8_sequences(data) is not None

def detect_utf8(data: bytes) -> EncodingLabel | None:
    """Validate UTF-8 byte structure.

    Returns a result only if the data has at least one byte with the high
    bit set (pure ASCII and empty input are left to the later stages).
    Stray bytes skipped by the validator still count as high bytes.

    :param data: The raw byte data to examine.
    :returns: The UTF-8 (no BOM) :class:`EncodingLabel`, or ``None``.
    """
    if not data.translate(None, _ASCII_BYTES):
        return None
    if not is_utf8_without_bom(data):
        return None
    return UTF8
