"""Character classification for the fuzzy scorer."""

from __future__ import annotations

from enum import Enum, auto

# Bonus scores for character class transitions
WORD_START_SCORE = 50
NON_WORD_SCORE = 40
GAP_SCORE = -5
CAMEL_SCORE = WORD_START_SCORE + GAP_SCORE - 1


class CharClass(Enum):
    """Class of a single codepoint."""

    LOWER = auto()
    UPPER = auto()
    DIGIT = auto()
    NON_WORD = auto()


def classify(char: str) -> CharClass:
    """Classify a single codepoint.

    Titlecase letters and everything that is neither a cased letter nor a
    decimal digit count as non-word characters.
    """
    if char.islower():
        return CharClass.LOWER
    if char.isupper():
        return CharClass.UPPER
    if char.isdecimal():
        return CharClass.DIGIT
    return CharClass.NON_WORD


def transition_score(prev: CharClass, curr: CharClass) -> int:
    """Score the transition from one character class to the next."""
    if prev is CharClass.NON_WORD and curr is not CharClass.NON_WORD:
        return WORD_START_SCORE
    if (prev is CharClass.LOWER and curr is CharClass.UPPER) or (
        prev is not CharClass.DIGIT and curr is CharClass.DIGIT
    ):
        return CAMEL_SCORE
    if curr is CharClass.NON_WORD:
        return NON_WORD_SCORE
    return 0


def position_scores(text: str) -> list[int]:
    """Get the base bonus for every position in text.

    The first position is scored as if preceded by a non-word character.
    """
    scores: list[int] = []
    prev = CharClass.NON_WORD
    for char in text:
        curr = classify(char)
        scores.append(transition_score(prev, curr))
        prev = curr
    return scores
