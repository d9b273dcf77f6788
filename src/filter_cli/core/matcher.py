"""Evaluate compiled token sets against candidate strings."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from filter_cli.core.text import ensure_text

if TYPE_CHECKING:
    from filter_cli.core.tokenizer import TokenSet


def matches(token_set: TokenSet, candidate: str | bytes) -> bool:
    """Check whether every token occurs somewhere in candidate.

    Tokens are AND-combined and may match at any position, independently of
    each other. An empty token set matches everything.

    Args:
        token_set: Compiled query
        candidate: The string to test

    Returns:
        True if all tokens match
    """
    text = ensure_text(candidate)
    return all(token.pattern.search(text) is not None for token in token_set)


class Matcher:
    """Matches candidates against one compiled query."""

    def __init__(self, token_set: TokenSet) -> None:
        """Initialize matcher with a compiled query.

        Args:
            token_set: The token set to evaluate
        """
        self.token_set = token_set

    def match(self, candidate: str | bytes) -> bool:
        """Check a single candidate."""
        return matches(self.token_set, candidate)

    def filter(self, candidates: Iterable[str]) -> Iterator[tuple[int, str]]:
        """Yield (index, candidate) for every matching candidate."""
        for index, candidate in enumerate(candidates):
            if matches(self.token_set, candidate):
                yield index, candidate

    def count(self, candidates: Iterable[str]) -> int:
        """Count matching candidates."""
        return sum(1 for _ in self.filter(candidates))
