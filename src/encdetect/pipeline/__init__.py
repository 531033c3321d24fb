"""Detection pipeline stages and shared types."""

from __future__ import annotations

import dataclasses

from encdetect.enums import Charset, Endianness

_ENDIAN_SUFFIX: dict[Endianness, str] = {
    Endianness.BIG: "be",
    Endianness.LITTLE: "le",
}

_FIXED_CODECS: dict[Charset, str] = {
    Charset.UTF_7: "utf-7",
    Charset.ASCII: "ascii",
    Charset.ISO_2022_JP: "iso-2022-jp",
    # Windows code page 932: Shift_JIS plus the NEC and IBM extensions.
    Charset.SHIFT_JIS: "cp932",
    Charset.EUC_JP: "euc-jp",
}

# Charsets whose labels are only ever produced from a leading signature.
_ALWAYS_BOM: frozenset[Charset] = frozenset(
    {Charset.UTF_16, Charset.UTF_32, Charset.UTF_7}
)
_ENDIAN_CHARSETS: frozenset[Charset] = frozenset({Charset.UTF_16, Charset.UTF_32})


@dataclasses.dataclass(frozen=True, slots=True)
class EncodingLabel:
    """A single encoding detection result.

    Frozen dataclass naming the charset plus whatever parameters are needed
    to decode with it: whether the data starts with a byte order mark, and
    the byte order for UTF-16 / UTF-32.
    """

    charset: Charset
    bom: bool = False
    endianness: Endianness | None = None

    def __post_init__(self) -> None:
        if self.charset in _ENDIAN_CHARSETS:
            if self.endianness is None:
                msg = f"{self.charset.value} label requires an endianness"
                raise ValueError(msg)
        elif self.endianness is not None:
            msg = f"{self.charset.value} label does not take an endianness"
            raise ValueError(msg)
        if self.charset in _ALWAYS_BOM:
            if not self.bom:
                msg = f"{self.charset.value} is only detected with a BOM"
                raise ValueError(msg)
        elif self.bom and self.charset is not Charset.UTF_8:
            msg = f"{self.charset.value} has no byte order mark"
            raise ValueError(msg)

    @property
    def codec(self) -> str:
        """The Python codec name to decode data carrying this label."""
        if self.charset is Charset.UTF_8:
            return "utf-8-sig" if self.bom else "utf-8"
        if self.endianness is not None:
            base = "utf-16" if self.charset is Charset.UTF_16 else "utf-32"
            return f"{base}-{_ENDIAN_SUFFIX[self.endianness]}"
        return _FIXED_CODECS[self.charset]

    def decode(self, data: bytes, errors: str = "strict") -> str:
        """Decode *data* with this label, dropping a leading byte order mark.

        :param data: The raw bytes the label was detected from.
        :param errors: Error handler passed through to :meth:`bytes.decode`.
        :returns: The decoded text.
        :raises UnicodeDecodeError: If *data* is not valid in this encoding
            and *errors* is ``"strict"``.
        """
        text = bytes(data).decode(self.codec, errors)
        if self.bom and text.startswith("\ufeff"):
            return text[1:]
        return text

    def to_dict(self) -> dict[str, str | bool | None]:
        """Convert this label to a plain dict.

        :returns: A dict with ``'encoding'``, ``'bom'``, and ``'endianness'`` keys.
        """
        return {
            "encoding": self.codec,
            "bom": self.bom,
            "endianness": self.endianness.value if self.endianness else None,
        }

    def __str__(self) -> str:
        return self.codec


UTF8 = EncodingLabel(Charset.UTF_8)
UTF8_BOM = EncodingLabel(Charset.UTF_8, bom=True)
UTF16_BE = EncodingLabel(Charset.UTF_16, bom=True, endianness=Endianness.BIG)
UTF16_LE = EncodingLabel(Charset.UTF_16, bom=True, endianness=Endianness.LITTLE)
UTF32_BE = EncodingLabel(Charset.UTF_32, bom=True, endianness=Endianness.BIG)
UTF32_LE = EncodingLabel(Charset.UTF_32, bom=True, endianness=Endianness.LITTLE)
UTF7 = EncodingLabel(Charset.UTF_7, bom=True)
ASCII = EncodingLabel(Charset.ASCII)
JIS = EncodingLabel(Charset.ISO_2022_JP)
SHIFT_JIS = EncodingLabel(Charset.SHIFT_JIS)
EUC_JP = EncodingLabel(Charset.EUC_JP)

#: Labels for the legacy charsets, keyed by the scorer's winning charset.
LEGACY_LABELS: dict[Charset, EncodingLabel] = {
    Charset.ISO_2022_JP: JIS,
    Charset.SHIFT_JIS: SHIFT_JIS,
    Charset.EUC_JP: EUC_JP,
}
