"""Tests for terminal rendering of highlighted candidates."""

from filter_cli.core.color import HighlightFlag, ThemeHighlight
from filter_cli.core.highlight import MatchSpan
from filter_cli.editor.formatting import ANSI_RESET, render_ansi, style_candidate


class TestStyleCandidate:
    """Tests for style_candidate."""

    def test_plain_text(self):
        """Test a candidate without spans."""
        assert style_candidate("abc", []) == [("", "abc")]

    def test_highlighted_run(self, bold):
        """Test that a span becomes a styled fragment."""
        styled = style_candidate("abc", [MatchSpan(0, 1, bold)])

        assert styled == [("bold", "a"), ("", "bc")]

    def test_base_style(self, bold):
        """Test that the base style applies to every fragment."""
        styled = style_candidate("abc", [MatchSpan(1, 2, bold)], "class:selected")

        assert styled == [
            ("class:selected", "a"),
            ("class:selected bold", "b"),
            ("class:selected", "c"),
        ]

    def test_adjacent_spans_merge(self, bold):
        """Test that neighbouring spans with one style form one fragment."""
        styled = style_candidate("abcd", [MatchSpan(0, 1, bold), MatchSpan(1, 3, bold)])

        assert styled == [("bold", "abc"), ("", "d")]

    def test_empty_style(self):
        """Test that an empty highlight renders plain."""
        none = ThemeHighlight(style=HighlightFlag.NONE)

        assert style_candidate("ab", [MatchSpan(0, 2, none)]) == [("", "ab")]

    def test_empty_text(self):
        """Test styling an empty candidate."""
        assert style_candidate("", []) == []


class TestRenderAnsi:
    """Tests for render_ansi."""

    def test_plain_text(self):
        """Test that unhighlighted text is returned unchanged."""
        assert render_ansi("abc", []) == "abc"

    def test_highlight(self, bold):
        """Test wrapping a span in escape sequences."""
        assert render_ansi("abc", [MatchSpan(1, 2, bold)]) == f"a\033[1mb{ANSI_RESET}c"
