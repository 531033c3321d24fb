"""Stage 4: Multibyte frequency scoring for the legacy Japanese charsets.

Each of ISO-2022-JP, Shift_JIS and EUC-JP is scored by sliding a two-byte
window over the data and counting the windows that decode to exactly one
character.  The charset yielding the most such characters is the likeliest
source encoding.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from encdetect.enums import LEGACY_JAPANESE, Charset, PairOutcome
from encdetect.pipeline import LEGACY_LABELS

logger = logging.getLogger(__name__)

# ISO-2022-JP designations.  A window is decoded with the designation in
# force at its position prepended, so that 7-bit JIS X 0208 pairs decode as
# the kanji they encode instead of as two ASCII characters.
_ESC = 0x1B
_ISO2022JP_ESCAPES: frozenset[bytes] = frozenset(
    {
        b"\x1b(B",  # ASCII
        b"\x1b(J",  # JIS X 0201 Roman
        b"\x1b$@",  # JIS C 6226-1978
        b"\x1b$B",  # JIS X 0208-1983
    }
)
_ESCAPE_LEN = 3


def _is_surrogate(char: str) -> bool:
    return 0xD800 <= ord(char) <= 0xDFFF


def classify_pair(window: bytes, charset: Charset) -> PairOutcome:
    """Decode *window* under *charset* and classify the result.

    :param window: Two bytes, optionally preceded by an ISO-2022 escape.
    :param charset: One of the legacy Japanese charsets.
    :returns: ``HIT`` if the bytes decode to a single non-surrogate
        character, ``MISS`` if they do not, and ``NON_MATCH`` if the codec
        itself is unavailable.
    """
    codec = LEGACY_LABELS[charset].codec
    try:
        text = window.decode(codec)
    except UnicodeDecodeError:
        return PairOutcome.MISS
    except LookupError:
        return PairOutcome.NON_MATCH
    if len(text) == 1 and not _is_surrogate(text):
        return PairOutcome.HIT
    return PairOutcome.MISS


def _iter_iso2022jp_windows(data: bytes) -> Iterator[bytes]:
    shift = b""
    i = 0
    last = len(data) - 1
    while i < last:
        if data[i] == _ESC:
            escape = data[i : i + _ESCAPE_LEN]
            if escape in _ISO2022JP_ESCAPES:
                shift = escape
                i += _ESCAPE_LEN
                continue
        yield shift + data[i : i + 2]
        i += 1


def iter_windows(data: bytes, charset: Charset) -> Iterator[bytes]:
    """Yield every overlapping two-byte window of *data* for *charset*.

    For ISO-2022-JP the designation escape in force is prepended to each
    window and the escape sequences themselves are skipped.
    """
    if charset is Charset.ISO_2022_JP:
        yield from _iter_iso2022jp_windows(data)
        return
    for i in range(len(data) - 1):
        yield data[i : i + 2]


def count_multibyte(data: bytes, charset: Charset) -> int:
    """Count the two-byte windows of *data* that decode to one character.

    A ``NON_MATCH`` anywhere rules the charset out and the count is 0.
    """
    count = 0
    for window in iter_windows(data, charset):
        outcome = classify_pair(window, charset)
        if outcome is PairOutcome.HIT:
            count += 1
        elif outcome is PairOutcome.NON_MATCH:
            logger.debug("%s ruled out: codec unavailable", charset.value)
            return 0
    return count


def score_legacy_charsets(data: bytes) -> dict[Charset, int]:
    """Return the multibyte character count for each legacy Japanese charset.

    The dict is ordered JIS, Shift_JIS, EUC-JP, which is also the tiebreak
    order used by :func:`pick_legacy_charset`.
    """
    return {charset: count_multibyte(data, charset) for charset in LEGACY_JAPANESE}


def pick_legacy_charset(counts: dict[Charset, int]) -> Charset | None:
    """Return the charset with the highest count, or ``None`` if all are zero.

    Ties go to the charset listed first in :data:`LEGACY_JAPANESE`.
    """
    best = max(counts.get(charset, 0) for charset in LEGACY_JAPANESE)
    if best == 0:
        return None
    for charset in LEGACY_JAPANESE:
        if counts.get(charset, 0) == best:
            return charset
    return None
