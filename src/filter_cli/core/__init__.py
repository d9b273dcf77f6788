"""Core functionality: tokenizer, matcher, scorer, and highlight engine."""

from filter_cli.core.color import ColorParser, HighlightFlag, ThemeHighlight, parse_highlight
from filter_cli.core.distance import edit_distance, locale_compare
from filter_cli.core.engine import FilterEngine, FilterResult, RankedEntry
from filter_cli.core.highlight import MatchSpan, highlight
from filter_cli.core.matcher import Matcher, matches
from filter_cli.core.patterns import MatchingMethod, MatchOptions, compile_pattern
from filter_cli.core.scorer import FUZZY_WORST_SCORE, fuzzy_score
from filter_cli.core.template import TemplateError, build_command, expand_template
from filter_cli.core.tokenizer import Token, TokenSet, tokenize

__all__ = [
    "Token",
    "TokenSet",
    "tokenize",
    "MatchingMethod",
    "MatchOptions",
    "compile_pattern",
    "Matcher",
    "matches",
    "MatchSpan",
    "highlight",
    "fuzzy_score",
    "FUZZY_WORST_SCORE",
    "edit_distance",
    "locale_compare",
    "ColorParser",
    "HighlightFlag",
    "ThemeHighlight",
    "parse_highlight",
    "FilterEngine",
    "FilterResult",
    "RankedEntry",
    "TemplateError",
    "build_command",
    "expand_template",
]
