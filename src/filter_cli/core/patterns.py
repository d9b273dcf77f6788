"""Translate query tokens into compiled regular expressions."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class MatchingMethod(Enum):
    """Strategy used to turn a token into a pattern."""

    LITERAL = "normal"
    GLOB = "glob"
    REGEX = "regex"
    FUZZY = "fuzzy"

    @classmethod
    def from_name(cls, name: str) -> MatchingMethod:
        """Look up a method by its configuration name.

        Raises:
            ValueError: If the name is not a known matching method
        """
        key = name.strip().lower()
        if key == "literal":
            return cls.LITERAL
        for method in cls:
            if method.value == key:
                return method
        valid = ", ".join(method.value for method in cls)
        raise ValueError(f"'{name}' is not a valid matching strategy. Valid options are: {valid}")


@dataclass(frozen=True)
class MatchOptions:
    """Matching configuration that a compiled token set is bound to.

    Attributes:
        method: Matching strategy for every token
        case_sensitive: Whether patterns are compiled case sensitive
        tokenize: Whether the query is split on spaces into separate tokens
    """

    method: MatchingMethod = MatchingMethod.LITERAL
    case_sensitive: bool = False
    tokenize: bool = True


def glob_to_regex(text: str) -> str:
    """Convert a glob expression into a regex source string.

    Escaped '*' becomes '.*' and escaped '?' becomes '.'. The character after
    every backslash is consumed so escape sequences are never rewritten twice.
    """
    escaped = re.escape(text)
    parts: list[str] = []
    i = 0
    while i < len(escaped):
        char = escaped[i]
        if char == "\\" and i + 1 < len(escaped):
            next_char = escaped[i + 1]
            if next_char == "*":
                parts.append(".*")
            elif next_char == "?":
                parts.append(".")
            else:
                parts.append(char + next_char)
            i += 2
            continue
        parts.append(char)
        i += 1
    return "".join(parts)


def fuzzy_to_regex(text: str) -> str:
    """Build the fuzzy accept-filter for text.

    Every codepoint becomes its own capture group and groups are joined by
    '.*', so the pattern accepts any string containing the codepoints in order.
    """
    return ".*".join(f"({re.escape(char)})" for char in text)


def compile_pattern(
    text: str, method: MatchingMethod, case_sensitive: bool = False
) -> re.Pattern[str]:
    """Compile a token into a pattern for the given matching method.

    Never raises for user input: a malformed regular expression falls back to
    matching the text literally.

    Args:
        text: The raw token text
        method: Matching strategy
        case_sensitive: Compile case sensitive if True

    Returns:
        The compiled pattern
    """
    flags = 0 if case_sensitive else re.IGNORECASE

    match method:
        case MatchingMethod.GLOB:
            return re.compile(glob_to_regex(text), flags)
        case MatchingMethod.REGEX:
            try:
                return re.compile(text, flags)
            except re.error as e:
                logger.debug("Invalid regex pattern '%s', matching literally: %s", text, e)
                return re.compile(re.escape(text), flags)
        case MatchingMethod.FUZZY:
            return re.compile(fuzzy_to_regex(text), flags)
        case _:
            return re.compile(re.escape(text), flags)
