"""Text decoding and case folding helpers."""

from __future__ import annotations

REPLACEMENT_CHAR = "\ufffd"


def ensure_text(data: str | bytes | bytearray) -> str:
    """Return data as text, replacing malformed UTF-8 runs.

    Every invalid byte sequence becomes U+FFFD so later codepoint iteration
    only ever sees valid text.
    """
    if isinstance(data, str):
        return data
    return bytes(data).decode("utf-8", errors="replace")


def latin1_to_text(data: bytes | bytearray) -> str:
    """Decode Latin-1 encoded bytes."""
    return bytes(data).decode("latin-1")


def fold_char(char: str) -> str:
    """Lowercase a single codepoint.

    Characters whose lowercase form spans several codepoints are kept as is,
    so folding never changes the length of a string.
    """
    lowered = char.lower()
    return lowered if len(lowered) == 1 else char


def fold_case(text: str) -> str:
    """Lowercase text codepoint by codepoint, preserving its length."""
    return "".join(fold_char(char) for char in text)
