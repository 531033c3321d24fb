"""Internal shared utilities for encdetect."""

from __future__ import annotations


def _to_bytes(byte_str: bytes | bytearray | memoryview) -> bytes:
    """Return *byte_str* as immutable ``bytes``, rejecting text input."""
    if isinstance(byte_str, bytes):
        return byte_str
    if isinstance(byte_str, (bytearray, memoryview)):
        return bytes(byte_str)
    msg = f"expected a bytes-like object, not {type(byte_str).__name__}"
    raise TypeError(msg)
