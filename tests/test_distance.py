"""Tests for edit distance and locale comparison."""

import pytest

from filter_cli.core import distance
from filter_cli.core.distance import EDIT_DISTANCE_MAX, edit_distance, locale_compare


class TestEditDistance:
    """Tests for edit_distance."""

    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [
            ("kitten", "sitting", 3),
            ("", "abc", 3),
            ("abc", "", 3),
            ("flaw", "lawn", 2),
            ("same", "same", 0),
        ],
    )
    def test_distance(self, a, b, expected):
        """Test known distances."""
        assert edit_distance(a, b) == expected

    def test_symmetric(self):
        """Test that the distance does not depend on argument order."""
        assert edit_distance("gnome-terminal", "term") == edit_distance("term", "gnome-terminal")

    def test_case_folding(self):
        """Test that case is ignored unless requested."""
        assert edit_distance("ABC", "abc") == 0
        assert edit_distance("ABC", "abc", case_sensitive=True) == 3

    def test_counts_codepoints(self):
        """Test that multi-byte characters count once."""
        assert edit_distance("héllo", "hello") == 1

    def test_bytes_input(self):
        """Test that byte strings are decoded."""
        assert edit_distance(b"abc", "abd") == 1

    def test_saturates_for_long_inputs(self, monkeypatch):
        """Test the sentinel for inputs above the length limit."""
        monkeypatch.setattr(distance, "MAX_EDIT_LENGTH", 3)

        assert edit_distance("abc", "abcd") == EDIT_DISTANCE_MAX
        assert edit_distance("ab", "abcd") == 2


class TestLocaleCompare:
    """Tests for locale_compare."""

    def test_ordering(self):
        """Test that the sign follows the order of the strings."""
        assert locale_compare("a", "b", 1) < 0
        assert locale_compare("b", "a", 1) > 0

    def test_equal(self):
        """Test that equal strings compare as zero."""
        assert locale_compare("abc", "abc", 3) == 0

    def test_truncates_to_n(self):
        """Test that only the first n codepoints are compared."""
        assert locale_compare("abc", "abd", 2) == 0
        assert locale_compare("abc", "abd", 3) < 0

    def test_normalizes_compatibility_forms(self):
        """Test that NFKC equivalents compare equal."""
        assert locale_compare("ﬁ", "fi", 2) == 0
