"""Render highlighted candidates for the terminal."""

from __future__ import annotations

from prompt_toolkit.formatted_text import StyleAndTextTuples

from filter_cli.core.color import ThemeHighlight
from filter_cli.core.highlight import MatchSpan, merge_spans

ANSI_RESET = "\033[0m"


def _runs(text: str, spans: list[MatchSpan]) -> list[tuple[ThemeHighlight | None, str]]:
    """Split text into runs of characters sharing the same merged style."""
    styles = merge_spans(spans, len(text))
    runs: list[tuple[ThemeHighlight | None, str]] = []
    start = 0
    for pos in range(1, len(text) + 1):
        if pos == len(text) or styles[pos] != styles[start]:
            runs.append((styles[start], text[start:pos]))
            start = pos
    return runs


def style_candidate(text: str, spans: list[MatchSpan], base_style: str = "") -> StyleAndTextTuples:
    """Convert a candidate and its spans to prompt_toolkit styled text.

    Args:
        text: The candidate
        spans: Highlight spans for the candidate
        base_style: Style applied to the whole line, e.g. 'class:selected'

    Returns:
        Styled text tuples covering the whole candidate
    """
    styled: StyleAndTextTuples = []
    for style, chunk in _runs(text, spans):
        if style is None or style.is_empty:
            styled.append((base_style, chunk))
        else:
            style_str = f"{base_style} {style.to_prompt_toolkit_style()}".strip()
            styled.append((style_str, chunk))
    return styled


def render_ansi(text: str, spans: list[MatchSpan]) -> str:
    """Render a candidate with ANSI escape sequences for its spans."""
    parts: list[str] = []
    for style, chunk in _runs(text, spans):
        sequence = style.to_ansi() if style is not None else ""
        if sequence:
            parts.append(f"{sequence}{chunk}{ANSI_RESET}")
        else:
            parts.append(chunk)
    return "".join(parts)
