"""Tests for the interactive picker state."""

import pytest

from filter_cli.config.loader import load_config_from_string
from filter_cli.core.color import HighlightFlag, ThemeHighlight, parse_highlight
from filter_cli.editor.picker import FilterPicker


@pytest.fixture
def picker(candidates) -> FilterPicker:
    return FilterPicker(candidates)


class TestFilterPicker:
    """Tests for FilterPicker without a running application."""

    def test_initial_state(self, picker, candidates):
        """Test that an empty query lists everything."""
        assert len(picker.result) == len(candidates)
        assert picker.current == candidates[0]

    def test_initial_query(self, candidates):
        """Test starting with a query."""
        picker = FilterPicker(candidates, query="term")

        assert picker.result.texts == ["gnome-terminal", "xterm"]

    def test_typing_refilters(self, picker):
        """Test that editing the query refreshes the results."""
        picker.buffer.text = "bak"

        assert picker.result.texts == ["makefile.bak"]
        assert picker.current == "makefile.bak"

    def test_move_wraps(self, candidates):
        """Test that moving past either end wraps around."""
        picker = FilterPicker(candidates, query="term")

        picker.move(1)
        assert picker.current == "xterm"
        picker.move(1)
        assert picker.current == "gnome-terminal"
        picker.move(-1)
        assert picker.current == "xterm"

    def test_refresh_resets_selection(self, picker):
        """Test that a new query selects the first match."""
        picker.move(3)
        picker.buffer.text = "fi"

        assert picker.selected == 0

    def test_no_matches(self, picker):
        """Test state when nothing matches."""
        picker.buffer.text = "zzz"
        picker.move(1)

        assert picker.current is None
        assert picker.selected == 0

    def test_uses_config_matching(self, candidates):
        """Test that the configured matching method is used."""
        config = load_config_from_string("matching:\n  method: fuzzy\n  sort: true\n")
        picker = FilterPicker(candidates, config, query="mkfl")

        assert picker.result.texts == ["MakeFile", "makefile.bak"]

    def test_result_fragments(self, candidates):
        """Test the rendered rows and status line."""
        picker = FilterPicker(candidates, query="xterm")

        fragments = picker.get_result_fragments()

        assert ("class:selected bold underline", "xterm") in fragments
        assert fragments[-1] == ("class:status", f"1/{len(candidates)}")

    def test_visible_rows_follow_selection(self, candidates):
        """Test that only max_rows rows are rendered around the selection."""
        picker = FilterPicker(candidates, max_rows=2)
        picker.move(4)

        rows = [text for style, text in picker.get_result_fragments() if text != "\n"]

        assert rows[:2] == [candidates[3], candidates[4]]

    def test_truncated_status(self, candidates):
        """Test that truncation is shown in the status line."""
        config = load_config_from_string("limit: 2\n")
        picker = FilterPicker(candidates, config)

        status = picker.get_result_fragments()[-1]

        assert status == ("class:status", f"2/{len(candidates)} (truncated)")

    def test_theme_selected_style(self, sample_config, candidates):
        """Test that the selected theme drives the style."""
        picker = FilterPicker(candidates, sample_config, theme="warm")

        assert picker.theme.name == "warm"
        assert picker.highlight_style.hex_color() == "#ff8800"

    def test_highlight_override(self, candidates):
        """Test that an explicit highlight replaces the theme's."""
        picker = FilterPicker(candidates, query="xterm", highlight=parse_highlight("italic"))

        assert ("class:selected italic", "xterm") in picker.get_result_fragments()

    def test_highlight_disabled(self, candidates):
        """Test that an empty highlight renders matches plain."""
        none = ThemeHighlight(style=HighlightFlag.NONE)
        picker = FilterPicker(candidates, query="xterm", highlight=none)

        assert ("class:selected", "xterm") in picker.get_result_fragments()
