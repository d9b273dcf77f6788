"""Tests for text helpers."""

from filter_cli.core.text import (
    REPLACEMENT_CHAR,
    ensure_text,
    fold_case,
    fold_char,
    latin1_to_text,
)


class TestEnsureText:
    """Tests for ensure_text."""

    def test_str_unchanged(self):
        """Test that text passes through."""
        assert ensure_text("héllo") == "héllo"

    def test_valid_utf8(self):
        """Test decoding valid UTF-8."""
        assert ensure_text("héllo".encode()) == "héllo"

    def test_invalid_bytes_replaced(self):
        """Test that malformed sequences become U+FFFD."""
        assert ensure_text(b"a\xffb") == f"a{REPLACEMENT_CHAR}b"

    def test_bytearray(self):
        """Test decoding a bytearray."""
        assert ensure_text(bytearray(b"abc")) == "abc"


class TestFolding:
    """Tests for case folding."""

    def test_fold_char(self):
        """Test lowercasing single codepoints."""
        assert fold_char("A") == "a"
        assert fold_char("Ä") == "ä"

    def test_multi_codepoint_lowercase_kept(self):
        """Test that characters lowering to several codepoints are kept."""
        assert fold_char("İ") == "İ"

    def test_fold_case_preserves_length(self):
        """Test that folding never changes the length."""
        text = "İSTANBUL"

        assert len(fold_case(text)) == len(text)
        assert fold_case(text) == "İstanbul"


def test_latin1_to_text():
    """Test decoding Latin-1 bytes."""
    assert latin1_to_text(b"caf\xe9") == "café"
