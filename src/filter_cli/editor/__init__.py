"""Terminal rendering and the interactive picker using prompt_toolkit."""

from filter_cli.editor.formatting import render_ansi, style_candidate
from filter_cli.editor.picker import FilterPicker

__all__ = ["FilterPicker", "render_ansi", "style_candidate"]
