"""Query tokenizer producing compiled token sets."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field

from filter_cli.core.patterns import MatchingMethod, MatchOptions, compile_pattern
from filter_cli.core.text import ensure_text

TOKEN_SEPARATOR = " "


@dataclass(frozen=True)
class Token:
    """A compiled piece of the query.

    Attributes:
        value: The token text as typed
        start: Start position in the query
        end: End position in the query (exclusive)
        pattern: Compiled pattern for the token
        method: Matching method the pattern was built with
    """

    value: str
    start: int
    end: int
    pattern: re.Pattern[str] = field(compare=False)
    method: MatchingMethod = MatchingMethod.LITERAL

    @property
    def length(self) -> int:
        """Length of the token in the query."""
        return self.end - self.start

    @property
    def group_count(self) -> int:
        """Number of capture groups in the compiled pattern."""
        return self.pattern.groups


@dataclass(frozen=True)
class TokenSet:
    """All tokens of one query, combined with AND semantics.

    An empty token set matches every candidate.
    """

    query: str
    options: MatchOptions
    tokens: tuple[Token, ...] = ()

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def __bool__(self) -> bool:
        return bool(self.tokens)

    def compiled_for(self, options: MatchOptions) -> bool:
        """Check whether this set was compiled with the given options."""
        return self.options == options


class Tokenizer:
    """Splits a query on ASCII spaces and compiles each piece."""

    def __init__(self, text: str, options: MatchOptions) -> None:
        self.text = text
        self.options = options
        self.pos = 0
        self.length = len(text)

    def tokenize(self) -> TokenSet:
        """Tokenize the query into a token set."""
        if not self.text:
            return TokenSet(query=self.text, options=self.options)

        if not self.options.tokenize:
            token = self._make_token(0, self.length)
            return TokenSet(query=self.text, options=self.options, tokens=(token,))

        tokens: list[Token] = []
        while self.pos < self.length:
            self._skip_separators()
            if self.pos >= self.length:
                break
            tokens.append(self._parse_token())

        return TokenSet(query=self.text, options=self.options, tokens=tuple(tokens))

    def _skip_separators(self) -> None:
        """Skip separator characters."""
        while self.pos < self.length and self.text[self.pos] == TOKEN_SEPARATOR:
            self.pos += 1

    def _parse_token(self) -> Token:
        """Parse a single token up to the next separator."""
        start = self.pos
        while self.pos < self.length and self.text[self.pos] != TOKEN_SEPARATOR:
            self.pos += 1
        return self._make_token(start, self.pos)

    def _make_token(self, start: int, end: int) -> Token:
        value = self.text[start:end]
        return Token(
            value=value,
            start=start,
            end=end,
            pattern=compile_pattern(value, self.options.method, self.options.case_sensitive),
            method=self.options.method,
        )


def tokenize(query: str | bytes | None, options: MatchOptions | None = None) -> TokenSet:
    """Compile a query into a token set.

    Args:
        query: The query as typed; bytes are decoded with replacement
        options: Matching options (defaults to literal, case insensitive, tokenized)

    Returns:
        TokenSet for the query

    Examples:
        >>> tokens = tokenize("foo bar")
        >>> [t.value for t in tokens]
        ['foo', 'bar']
    """
    options = options or MatchOptions()
    text = ensure_text(query) if query is not None else ""
    return Tokenizer(text, options).tokenize()
