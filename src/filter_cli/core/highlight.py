"""Extract highlight spans for matched candidates."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from filter_cli.core.color import ThemeHighlight, combine_highlights
from filter_cli.core.text import ensure_text

if TYPE_CHECKING:
    from filter_cli.core.tokenizer import TokenSet


@dataclass(frozen=True)
class MatchSpan:
    """A highlighted region of a candidate.

    Attributes:
        start: Start offset in the candidate
        end: End offset in the candidate (exclusive)
        style: Highlight style for the region
        token_index: Index of the token that produced the span
    """

    start: int
    end: int
    style: ThemeHighlight
    token_index: int = 0

    @property
    def length(self) -> int:
        return self.end - self.start


def _match_spans(match: re.Match[str]) -> list[tuple[int, int]]:
    """Get the regions of a match worth highlighting.

    With several capture groups (fuzzy accept-filters) every group is reported
    on its own so the filler between them stays plain. Otherwise the whole
    match is reported.
    """
    count = len(match.groups())
    if count <= 1:
        return [match.span(0)]

    spans: list[tuple[int, int]] = []
    for i in range(1, count + 1):
        start, end = match.span(i)
        # Group did not participate in the match
        if start < 0:
            continue
        spans.append((start, end))
    return spans


def highlight(
    token_set: TokenSet, candidate: str | bytes, style: ThemeHighlight | None = None
) -> list[MatchSpan]:
    """Find every region of candidate matched by the query.

    Each token is re-run over the whole candidate and all non-overlapping
    occurrences are collected. Spans from different tokens may overlap.

    Args:
        token_set: Compiled query
        candidate: A candidate that matched the query
        style: Highlight style attached to every span

    Returns:
        List of spans, grouped by token in query order
    """
    style = style or ThemeHighlight()
    text = ensure_text(candidate)
    spans: list[MatchSpan] = []

    for index, token in enumerate(token_set):
        for match in token.pattern.finditer(text):
            for start, end in _match_spans(match):
                if end > start:
                    spans.append(MatchSpan(start=start, end=end, style=style, token_index=index))

    return spans


def merge_spans(spans: list[MatchSpan], length: int) -> list[ThemeHighlight | None]:
    """Resolve overlapping spans into one style per character.

    Args:
        spans: Spans to merge
        length: Length of the candidate

    Returns:
        A list with the combined style for every character, None where plain
    """
    styles: list[ThemeHighlight | None] = [None] * length
    for span in spans:
        for pos in range(max(span.start, 0), min(span.end, length)):
            current = styles[pos]
            styles[pos] = span.style if current is None else combine_highlights(current, span.style)
    return styles
