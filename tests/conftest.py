# tests/conftest.py
"""Shared test fixtures."""

from __future__ import annotations

import pytest

# Hiragana, katakana, kanji and full-width punctuation.
JAPANESE_TEXT = "これはテストです。日本語のテキスト。"


@pytest.fixture(scope="session")
def japanese_text() -> str:
    return JAPANESE_TEXT


@pytest.fixture(scope="session")
def shift_jis_bytes() -> bytes:
    return JAPANESE_TEXT.encode("shift_jis")


@pytest.fixture(scope="session")
def euc_jp_bytes() -> bytes:
    return JAPANESE_TEXT.encode("euc-jp")


@pytest.fixture(scope="session")
def iso2022jp_bytes() -> bytes:
    return JAPANESE_TEXT.encode("iso-2022-jp")
