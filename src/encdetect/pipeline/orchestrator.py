"""Pipeline orchestrator: runs all detection stages in sequence."""

from __future__ import annotations

import logging

from encdetect.pipeline import LEGACY_LABELS, UTF8, EncodingLabel
from encdetect.pipeline.ascii import detect_ascii
from encdetect.pipeline.bom import detect_bom, detect_utf7_signature
from encdetect.pipeline.multibyte import pick_legacy_charset, score_legacy_charsets
from encdetect.pipeline.utf8 import detect_utf8

logger = logging.getLogger(__name__)

# Returned when no stage claims the data, including for empty input.
_FALLBACK_RESULT = UTF8

_DETERMINISTIC_STAGES = (
    ("bom", detect_bom),
    ("utf-7 signature", detect_utf7_signature),
    ("utf-8", detect_utf8),
    ("ascii", detect_ascii),
)


def run_pipeline(data: bytes) -> EncodingLabel:
    """Run the full detection pipeline.

    Stages run in a fixed order and the first one to claim the data wins:
    byte order marks, the UTF-7 signature, strict UTF-8, ASCII, and finally
    multibyte scoring of ISO-2022-JP, Shift_JIS and EUC-JP.  When nothing
    claims the data, UTF-8 without a BOM is returned.

    :param data: The raw byte data to analyze.
    :returns: The detected :class:`EncodingLabel`.
    """
    for stage, detect_stage in _DETERMINISTIC_STAGES:
        result = detect_stage(data)
        if result is not None:
            logger.debug("%s stage matched: %s", stage, result)
            return result

    counts = score_legacy_charsets(data)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "multibyte counts: %s",
            ", ".join(f"{cs.value}={n}" for cs, n in counts.items()),
        )
    charset = pick_legacy_charset(counts)
    if charset is None:
        logger.debug("no stage matched, falling back to %s", _FALLBACK_RESULT)
        return _FALLBACK_RESULT
    return LEGACY_LABELS[charset]
