"""Sequence alignment scorer for ranking fuzzy matches.

The scorer finds the best global alignment of a pattern against a candidate it
is a subsequence of. It prefers:

- matches at the start of a word, or at camelCase/letter-digit boundaries
- runs of consecutive matched characters
- few skipped candidate characters, with skips before the first match costing
  less per character than gaps between matches but still favouring an early
  first occurrence
- the first character of every pattern word, which counts double

Returned scores follow the ranking convention of the rest of the package:
lower is better.
"""

from __future__ import annotations

from filter_cli.core.charclass import GAP_SCORE, WORD_START_SCORE, position_scores
from filter_cli.core.text import ensure_text, fold_char

# Candidates longer than this are not scored
FUZZY_MAX_LENGTH = 256

# Value of an unreachable alignment
MIN_SCORE = -(2**31) // 2

# Worst possible returned score
FUZZY_WORST_SCORE = -MIN_SCORE

LEADING_GAP_SCORE = -4
CONSECUTIVE_SCORE = WORD_START_SCORE + GAP_SCORE

PATTERN_START_MULTIPLIER = 2
PATTERN_NON_START_MULTIPLIER = 1

# Alignments below this were built on an unreachable cell
_UNREACHABLE = MIN_SCORE // 2


def fuzzy_score(pattern: str | bytes, candidate: str | bytes, case_sensitive: bool = False) -> int:
    """Score how well pattern aligns to candidate.

    The pattern is expected to be a subsequence of the candidate, which the
    fuzzy accept-filter guarantees. Spaces in the pattern separate words and
    are not aligned.

    Args:
        pattern: The query
        candidate: The string to rank
        case_sensitive: Compare characters exactly if True

    Returns:
        The score, smaller is better. FUZZY_WORST_SCORE for candidates longer
        than FUZZY_MAX_LENGTH and for patterns that cannot be aligned.
    """
    pattern = ensure_text(pattern)
    candidate = ensure_text(candidate)

    slen = len(candidate)
    if slen > FUZZY_MAX_LENGTH:
        return FUZZY_WORST_SCORE
    if not pattern.strip():
        return 0

    # Bonus for every candidate position, taken before case folding
    score = position_scores(candidate)
    if not case_sensitive:
        pattern = "".join(fold_char(char) for char in pattern)
        candidate = "".join(fold_char(char) for char in candidate)

    # dp[si]: best value aligning the pattern so far with pattern's last
    # character on candidate[si]
    dp = [MIN_SCORE] * slen
    # whether we are aligning the first character of pattern
    pfirst = True
    # whether the current pattern character starts a pattern word
    pstart = True

    for pc in pattern:
        if pc.isspace():
            pstart = True
            continue

        multiplier = PATTERN_START_MULTIPLIER if pstart else PATTERN_NON_START_MULTIPLIER
        # uleft: previous row at si - 1; ulefts: best of previous row up to
        # si - 1, with gap penalties applied
        uleft = ulefts = MIN_SCORE
        lefts = MIN_SCORE
        for si, sc in enumerate(candidate):
            left = dp[si]
            lefts = max(lefts + GAP_SCORE, left)
            if pc == sc:
                bonus = score[si] * multiplier
                if pfirst:
                    dp[si] = LEADING_GAP_SCORE * si + bonus
                else:
                    dp[si] = max(uleft + CONSECUTIVE_SCORE, ulefts + bonus)
            else:
                dp[si] = MIN_SCORE
            uleft = left
            ulefts = lefts

        pfirst = pstart = False

    best = MIN_SCORE
    for value in dp:
        best = max(best + GAP_SCORE, value)

    if best < _UNREACHABLE:
        return FUZZY_WORST_SCORE
    return -best
