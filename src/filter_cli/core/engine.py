"""Filter and rank candidate lists for one query."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import cmp_to_key

from filter_cli.core.color import ThemeHighlight
from filter_cli.core.distance import edit_distance, locale_compare
from filter_cli.core.highlight import MatchSpan, highlight
from filter_cli.core.matcher import matches
from filter_cli.core.patterns import MatchingMethod, MatchOptions
from filter_cli.core.scorer import fuzzy_score
from filter_cli.core.text import ensure_text
from filter_cli.core.tokenizer import TokenSet, tokenize

logger = logging.getLogger(__name__)


@dataclass
class RankedEntry:
    """A candidate that passed the filter."""

    index: int
    text: str
    score: int = 0


@dataclass
class FilterResult:
    """Result of filtering a candidate list.

    Attributes:
        entries: Matching candidates, best first
        evaluated: Number of candidates looked at
        truncated: True if a limit or deadline stopped evaluation early
    """

    entries: list[RankedEntry] = field(default_factory=list)
    evaluated: int = 0
    truncated: bool = False

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def texts(self) -> list[str]:
        """Matching candidate strings, best first."""
        return [entry.text for entry in self.entries]


def _compare_entries(a: RankedEntry, b: RankedEntry) -> int:
    if a.score != b.score:
        return -1 if a.score < b.score else 1
    order = locale_compare(a.text, b.text, max(len(a.text), len(b.text)))
    if order:
        return order
    return a.index - b.index


class FilterEngine:
    """Compiles a query once and evaluates it against many candidates."""

    def __init__(
        self,
        query: str | bytes,
        options: MatchOptions | None = None,
        sort: bool = False,
        levenshtein_sort: bool = False,
    ) -> None:
        """Initialize the engine.

        Args:
            query: The query as typed
            options: Matching options
            sort: Rank fuzzy matches by alignment score
            levenshtein_sort: Rank matches by edit distance to the query
        """
        self.options = options or MatchOptions()
        self.query = ensure_text(query)
        self.token_set: TokenSet = tokenize(self.query, self.options)
        self.sort = sort
        self.levenshtein_sort = levenshtein_sort

    @property
    def ranked(self) -> bool:
        """Check if results are reordered rather than kept in input order."""
        if not self.token_set:
            return False
        return self.levenshtein_sort or (self.sort and self.options.method is MatchingMethod.FUZZY)

    def score(self, candidate: str) -> int:
        """Ranking score of a matching candidate, lower is better."""
        if self.levenshtein_sort:
            return edit_distance(self.query, candidate, self.options.case_sensitive)
        if self.sort and self.options.method is MatchingMethod.FUZZY:
            return fuzzy_score(self.query, candidate, self.options.case_sensitive)
        return 0

    def filter(
        self,
        candidates: Iterable[str | bytes],
        limit: int | None = None,
        deadline: float | None = None,
    ) -> FilterResult:
        """Filter and rank candidates.

        Args:
            candidates: Candidate strings; bytes are decoded with replacement
            limit: Maximum number of candidates to evaluate
            deadline: Maximum seconds to spend evaluating

        Returns:
            FilterResult with matching entries, best first
        """
        result = FilterResult()
        stop_at = time.monotonic() + deadline if deadline is not None else None
        ranked = self.ranked

        for index, candidate in enumerate(candidates):
            if limit is not None and result.evaluated >= limit:
                result.truncated = True
                break
            if stop_at is not None and time.monotonic() >= stop_at:
                result.truncated = True
                break

            result.evaluated += 1
            text = ensure_text(candidate)
            if not matches(self.token_set, text):
                continue
            score = self.score(text) if ranked else 0
            result.entries.append(RankedEntry(index=index, text=text, score=score))

        if ranked:
            result.entries.sort(key=cmp_to_key(_compare_entries))

        if result.truncated:
            logger.debug(
                "Stopped after %d candidates for query '%s'", result.evaluated, self.query
            )

        return result

    def highlight(self, candidate: str | bytes, style: ThemeHighlight | None = None) -> list[MatchSpan]:
        """Get highlight spans for a candidate."""
        return highlight(self.token_set, candidate, style)
