"""Edit distance and locale aware comparison of candidates."""

from __future__ import annotations

import locale
import unicodedata

from rapidfuzz.distance import Levenshtein

from filter_cli.core.text import ensure_text, fold_case

# Saturating result for inputs too long to count
EDIT_DISTANCE_MAX = 2**32 - 1

# Longest shorter-input length the distance is computed for
MAX_EDIT_LENGTH = EDIT_DISTANCE_MAX


def edit_distance(a: str | bytes, b: str | bytes, case_sensitive: bool = False) -> int:
    """Levenshtein distance between two strings, counted in codepoints.

    Args:
        a: First string
        b: Second string
        case_sensitive: Compare characters exactly if True

    Returns:
        Number of single-codepoint insertions, deletions and substitutions
        turning a into b, or EDIT_DISTANCE_MAX if the shorter string is too
        long to count.
    """
    a = ensure_text(a)
    b = ensure_text(b)
    if min(len(a), len(b)) >= MAX_EDIT_LENGTH:
        return EDIT_DISTANCE_MAX
    if not case_sensitive:
        a = fold_case(a)
        b = fold_case(b)
    return Levenshtein.distance(a, b)


def locale_compare(a: str | bytes, b: str | bytes, n: int) -> int:
    """Compare the first n codepoints of two strings in the current locale.

    Both strings are NFKC normalized before truncation, so compatibility
    variants of the same text compare equal.

    Args:
        a: First string
        b: Second string
        n: Number of codepoints to compare

    Returns:
        Negative, zero or positive as a sorts before, with or after b
    """
    na = unicodedata.normalize("NFKC", ensure_text(a))[:n]
    nb = unicodedata.normalize("NFKC", ensure_text(b))[:n]
    return locale.strcoll(na, nb)
