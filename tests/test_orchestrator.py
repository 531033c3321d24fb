# tests/test_orchestrator.py
import logging

import pytest

import encdetect.pipeline.orchestrator as orchestrator
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
)
from encdetect.pipeline.orchestrator import run_pipeline


def test_empty_input():
    assert run_pipeline(b"") == UTF8


def test_bom_detected():
    assert run_pipeline(b"\xef\xbb\xbfHello") == UTF8_BOM


def test_bom_utf16_le():
    data = b"\xff\xfe" + "Hello world".encode("utf-16-le")
    assert run_pipeline(data) == UTF16_LE


def test_bom_utf16_le_short():
    assert run_pipeline(b"\xff\xfe\x41\x00") == UTF16_LE


def test_bom_utf16_be():
    data = b"\xfe\xff" + "Hello world".encode("utf-16-be")
    assert run_pipeline(data) == UTF16_BE


def test_bom_utf32_le():
    assert run_pipeline(b"\xff\xfe\x00\x00") == UTF32_LE
    data = b"\xff\xfe\x00\x00" + "Hello world".encode("utf-32-le")
    assert run_pipeline(data) == UTF32_LE


def test_bom_utf32_be():
    assert run_pipeline(b"\x00\x00\xfe\xff") == UTF32_BE
    data = b"\x00\x00\xfe\xff" + "Hello world".encode("utf-32-be")
    assert run_pipeline(data) == UTF32_BE


def test_utf7_signature():
    assert run_pipeline(b"+/v8-Hello") == UTF7


def test_utf7_signature_checked_before_ascii():
    # "+/v9" is also plain 7-bit text
    assert run_pipeline(b"+/v9 abc") == UTF7


def test_ascii():
    assert run_pipeline(b"Hello, world!\n") == ASCII


def test_utf8_without_bom():
    result = run_pipeline(b"\xe3\x81\x82" * 4)
    assert result == UTF8
    assert result.bom is False


def test_utf8_claims_before_legacy_scoring(japanese_text):
    assert run_pipeline(japanese_text.encode("utf-8")) == UTF8


def test_shift_jis(shift_jis_bytes):
    assert run_pipeline(shift_jis_bytes) == SHIFT_JIS


def test_euc_jp(euc_jp_bytes):
    assert run_pipeline(euc_jp_bytes) == EUC_JP


def test_iso2022jp(iso2022jp_bytes):
    assert run_pipeline(iso2022jp_bytes) == JIS


def test_iso2022jp_mixed_with_ascii():
    data = "Subject: 会議のお知らせ\r\n".encode("iso-2022-jp")
    assert run_pipeline(data) == JIS


def test_truncated_utf8_falls_through_to_default():
    # Fails strict UTF-8 and ASCII, and scores zero for every legacy charset.
    assert run_pipeline(b"abc\xe3") == UTF8


def test_all_zero_counts_fall_back_to_utf8_not_jis():
    # Truncated leads fail strict UTF-8 and score zero for every legacy charset.
    assert run_pipeline(b"A\xe3") == UTF8
    assert run_pipeline(b"\xc3") == UTF8


@pytest.mark.parametrize("data", [b"\x82\xa0\x82\xa2", b"\xb1\xb2\xb3", b"abc\xa4\xa2"])
def test_skipped_high_bytes_never_reach_legacy_scoring(monkeypatch, data):
    def fail(_data):
        raise AssertionError("legacy scoring should not run")

    monkeypatch.setattr(orchestrator, "score_legacy_charsets", fail)
    assert run_pipeline(data) == UTF8


@pytest.mark.parametrize(
    "data",
    [bytes([b]) for b in range(256)] + [bytes(range(256)), bytes(range(255, -1, -1))],
)
def test_total_over_arbitrary_bytes(data):
    assert run_pipeline(data) is not None


def test_deterministic(shift_jis_bytes):
    assert run_pipeline(shift_jis_bytes) == run_pipeline(shift_jis_bytes)


def test_logs_matching_stage(caplog):
    with caplog.at_level(logging.DEBUG, logger="encdetect"):
        run_pipeline(b"\xef\xbb\xbfHello")
    assert "bom stage matched: utf-8-sig" in caplog.text


def test_logs_multibyte_counts(caplog, shift_jis_bytes):
    with caplog.at_level(logging.DEBUG, logger="encdetect"):
        run_pipeline(shift_jis_bytes)
    assert "multibyte counts:" in caplog.text
    assert "Shift_JIS=" in caplog.text


def test_shift_jis_with_nec_extensions():
    text = "これは①②③です"
    data = text.encode("cp932")
    result = run_pipeline(data)
    assert result == SHIFT_JIS
    assert result.decode(data) == text
