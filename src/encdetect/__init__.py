"""Text encoding detector for Unicode and legacy Japanese encodings."""

from __future__ import annotations

import os
from pathlib import Path

from encdetect._utils import _to_bytes
from encdetect.enums import Charset, Endianness
from encdetect.pipeline import (
    ASCII,
    EUC_JP,
    JIS,
    SHIFT_JIS,
    UTF7,
    UTF8,
    UTF8_BOM,
    UTF16_BE,
    UTF16_LE,
    UTF32_BE,
    UTF32_LE,
    EncodingLabel,
)
from encdetect.pipeline.orchestrator import run_pipeline

__version__ = "1.0.0"
__all__ = [
    "ASCII",
    "EUC_JP",
    "JIS",
    "SHIFT_JIS",
    "UTF7",
    "UTF8",
    "UTF8_BOM",
    "UTF16_BE",
    "UTF16_LE",
    "UTF32_BE",
    "UTF32_LE",
    "Charset",
    "EncodingLabel",
    "Endianness",
    "detect",
    "detect_file",
]


def detect(byte_str: bytes | bytearray | memoryview) -> EncodingLabel:
    """Detect the encoding of the given byte string.

    Never fails for bytes-like input: data that no stage recognises,
    including empty input, is reported as UTF-8 without a BOM.

    :param byte_str: The complete data to examine.
    :returns: The detected :class:`EncodingLabel`.
    :raises TypeError: If *byte_str* is not bytes-like.
    """
    return run_pipeline(_to_bytes(byte_str))


def detect_file(path: str | os.PathLike[str]) -> EncodingLabel:
    """Read the whole file at *path* and detect its encoding.

    Errors raised while reading (``FileNotFoundError``,
    ``PermissionError``, ...) propagate unchanged.
    """
    return detect(Path(path).read_bytes())
