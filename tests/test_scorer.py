"""Tests for the fuzzy scorer and character classes."""

from filter_cli.core.charclass import (
    CAMEL_SCORE,
    NON_WORD_SCORE,
    WORD_START_SCORE,
    CharClass,
    classify,
    position_scores,
)
from filter_cli.core.scorer import FUZZY_MAX_LENGTH, FUZZY_WORST_SCORE, fuzzy_score


class TestCharClass:
    """Tests for character classification."""

    def test_classify(self):
        """Test the four classes."""
        assert classify("a") is CharClass.LOWER
        assert classify("Ä") is CharClass.UPPER
        assert classify("7") is CharClass.DIGIT
        assert classify("-") is CharClass.NON_WORD
        assert classify(" ") is CharClass.NON_WORD

    def test_camel_score(self):
        """Test the camelCase bonus constant."""
        assert CAMEL_SCORE == 44

    def test_position_scores(self):
        """Test bonuses for word starts and class transitions."""
        scores = position_scores("fooBar2 x")

        assert scores == [
            WORD_START_SCORE,
            0,
            0,
            CAMEL_SCORE,
            0,
            0,
            CAMEL_SCORE,
            NON_WORD_SCORE,
            WORD_START_SCORE,
        ]

    def test_empty(self):
        """Test scoring an empty string."""
        assert position_scores("") == []


class TestFuzzyScore:
    """Tests for fuzzy_score."""

    def test_known_scores(self):
        """Test scores of a few alignments."""
        assert fuzzy_score("abc", "abcxyz") == -175
        assert fuzzy_score("abc", "xabcxyz") == -71
        assert fuzzy_score("abc", "axbxcxyz") == -75

    def test_prefers_early_match(self):
        """Test that a match at the start ranks better."""
        assert fuzzy_score("abc", "abcxyz") < fuzzy_score("abc", "xabcxyz")

    def test_prefers_contiguous_match(self):
        """Test that consecutive characters rank better than gaps."""
        assert fuzzy_score("abc", "abcxy") < fuzzy_score("abc", "axbxc")

    def test_prefers_word_starts(self):
        """Test that characters at word starts rank better."""
        assert fuzzy_score("fb", "foo bar") < fuzzy_score("fb", "foobar")

    def test_prefers_camel_case(self):
        """Test that camelCase boundaries earn a bonus."""
        assert fuzzy_score("mf", "MakeFile") < fuzzy_score("mf", "makefile")

    def test_case_insensitive_by_default(self):
        """Test that case is ignored unless requested."""
        assert fuzzy_score("ABC", "abcxyz") == fuzzy_score("abc", "abcxyz")

    def test_case_sensitive(self):
        """Test that case sensitive scoring rejects other cases."""
        assert fuzzy_score("A", "a", case_sensitive=True) == FUZZY_WORST_SCORE
        assert fuzzy_score("a", "a", case_sensitive=True) < 0

    def test_too_long_candidate(self):
        """Test that overly long candidates get the worst score."""
        candidate = "a" * (FUZZY_MAX_LENGTH + 1)

        assert fuzzy_score("a", candidate) == FUZZY_WORST_SCORE

    def test_max_length_candidate_is_scored(self):
        """Test that candidates at the length limit are still scored."""
        candidate = "a" * FUZZY_MAX_LENGTH

        assert fuzzy_score("a", candidate) < FUZZY_WORST_SCORE

    def test_not_a_subsequence(self):
        """Test that unalignable patterns get the worst score."""
        assert fuzzy_score("abc", "cba") == FUZZY_WORST_SCORE

    def test_empty_pattern(self):
        """Test that an empty pattern scores zero."""
        assert fuzzy_score("", "anything") == 0
        assert fuzzy_score("   ", "anything") == 0

    def test_spaces_separate_pattern_words(self):
        """Test that spaces in the pattern are not aligned."""
        assert fuzzy_score("fo ba", "foo bar") < FUZZY_WORST_SCORE
        assert fuzzy_score("fo ba", "fooba") < FUZZY_WORST_SCORE

    def test_bytes_input(self):
        """Test that byte strings are decoded."""
        assert fuzzy_score(b"abc", b"abcxyz") == -175
