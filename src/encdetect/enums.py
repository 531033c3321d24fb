"""Enumerations for encdetect."""

import enum


class Charset(enum.Enum):
    """Encoding families the detector can report."""

    UTF_8 = "UTF-8"
    UTF_16 = "UTF-16"
    UTF_32 = "UTF-32"
    UTF_7 = "UTF-7"
    ASCII = "ASCII"
    ISO_2022_JP = "ISO-2022-JP"
    SHIFT_JIS = "Shift_JIS"
    EUC_JP = "EUC-JP"


class Endianness(enum.Enum):
    """Byte order of UTF-16 and UTF-32 code units."""

    BIG = "big"
    LITTLE = "little"


class PairOutcome(enum.Enum):
    """Result of decoding a single two-byte window under a legacy charset."""

    HIT = "hit"
    MISS = "miss"
    NON_MATCH = "non-match"


# Tiebreak order for the multibyte scorer: earlier wins on equal counts.
LEGACY_JAPANESE: tuple[Charset, ...] = (
    Charset.ISO_2022_JP,
    Charset.SHIFT_JIS,
    Charset.EUC_JP,
)
