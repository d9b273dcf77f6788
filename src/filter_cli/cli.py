"""Command-line interface for filter-cli."""

from __future__ import annotations

import argparse
import locale
import logging
import shlex
import sys
from collections.abc import Callable
from pathlib import Path
from typing import BinaryIO, TextIO

import yaml
from prompt_toolkit.input import create_input
from pydantic import ValidationError

from filter_cli.config.loader import load_config
from filter_cli.config.schema import Config
from filter_cli.core.color import HighlightFlag, ThemeHighlight, parse_highlight
from filter_cli.core.engine import FilterEngine
from filter_cli.core.patterns import MatchingMethod
from filter_cli.core.template import TemplateError, build_command
from filter_cli.core.text import ensure_text, latin1_to_text
from filter_cli.editor.formatting import render_ansi
from filter_cli.editor.picker import FilterPicker

logger = logging.getLogger(__name__)

# Candidate decoders by --encoding name
DECODERS: dict[str, Callable[[bytes], str]] = {
    "utf-8": ensure_text,
    "latin1": latin1_to_text,
}


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        args: Arguments to parse (defaults to sys.argv[1:])

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="filter-cli",
        description="Filter lines from stdin by a query, with highlighting and fuzzy ranking",
        epilog="Example: ls | filter-cli -m fuzzy --sort mkfl",
    )

    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        metavar="FILE",
        help="Configuration file path (default: $FILTER_CONFIG_DIR/config.yaml)",
    )

    parser.add_argument(
        "--config-dir",
        type=Path,
        metavar="DIR",
        help="Drop-in configuration directory (default: $FILTER_CONFIG_DIR/conf.d/)",
    )

    parser.add_argument(
        "--matching",
        "-m",
        choices=[method.value for method in MatchingMethod],
        help="Matching strategy",
    )

    case_group = parser.add_mutually_exclusive_group()
    case_group.add_argument(
        "--case-sensitive",
        "-s",
        action="store_true",
        default=None,
        help="Match case sensitive",
    )
    case_group.add_argument(
        "--ignore-case",
        "-i",
        action="store_false",
        dest="case_sensitive",
        help="Match case insensitive",
    )

    parser.add_argument(
        "--no-tokenize",
        action="store_false",
        dest="tokenize",
        default=None,
        help="Match the whole query as one token",
    )

    parser.add_argument(
        "--sort",
        action="store_true",
        default=None,
        help="Rank fuzzy matches by score",
    )

    parser.add_argument(
        "--levenshtein-sort",
        action="store_true",
        default=None,
        help="Rank matches by edit distance to the query",
    )

    parser.add_argument(
        "--theme",
        "-t",
        metavar="NAME",
        help="Theme to use",
    )

    parser.add_argument(
        "--highlight",
        metavar="STYLE",
        help="Highlight style, e.g. 'bold underline #ff8800' (overrides the theme)",
    )

    parser.add_argument(
        "--input",
        type=Path,
        metavar="FILE",
        help="Read candidates from FILE instead of stdin",
    )

    parser.add_argument(
        "--encoding",
        choices=list(DECODERS),
        default="utf-8",
        help="Encoding of the candidate lines (default: utf-8)",
    )

    parser.add_argument(
        "--limit",
        type=int,
        metavar="N",
        help="Evaluate at most N candidates",
    )

    parser.add_argument(
        "--timeout",
        type=float,
        metavar="SECONDS",
        help="Stop evaluating candidates after SECONDS",
    )

    parser.add_argument(
        "--command",
        metavar="TEMPLATE",
        help="Print TEMPLATE expanded for each match, e.g. '{terminal} -e {cmd}'",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colors",
    )

    parser.add_argument(
        "--interactive",
        "-I",
        action="store_true",
        help="Pick a match interactively",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version="%(prog)s 0.1.0",
    )

    parser.add_argument(
        "query",
        nargs="*",
        help="Query words (joined with spaces)",
    )

    return parser.parse_args(args)


def apply_overrides(config: Config, parsed: argparse.Namespace) -> Config:
    """Apply command-line options on top of the loaded configuration."""
    matching: dict[str, object] = {}
    if parsed.matching is not None:
        matching["method"] = MatchingMethod.from_name(parsed.matching)
    for name in ("case_sensitive", "tokenize", "sort", "levenshtein_sort"):
        value = getattr(parsed, name)
        if value is not None:
            matching[name] = value

    update: dict[str, object] = {"matching": config.matching.model_copy(update=matching)}
    if parsed.no_color:
        update["color"] = False
    if parsed.limit is not None:
        if parsed.limit < 1:
            raise ValueError("--limit must be at least 1")
        update["limit"] = parsed.limit
    if parsed.timeout is not None:
        if parsed.timeout <= 0:
            raise ValueError("--timeout must be positive")
        update["timeout"] = parsed.timeout
    return config.model_copy(update=update)


def read_candidates(stream: BinaryIO, encoding: str = "utf-8") -> list[str]:
    """Read one candidate per line.

    UTF-8 input has invalid sequences replaced; Latin-1 input always decodes.
    """
    decode = DECODERS[encoding]
    return [decode(line.rstrip(b"\r\n")) for line in stream]


def setup_locale() -> None:
    """Use the user's locale for collation."""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        logger.warning("Failed to set locale: %s", e)


def resolve_highlight(config: Config, parsed: argparse.Namespace) -> ThemeHighlight:
    """Get the highlight style from the command line or the theme."""
    if parsed.highlight:
        return parse_highlight(parsed.highlight)
    return config.get_theme(parsed.theme).get_highlight()


def format_entry(
    text: str,
    config: Config,
    engine: FilterEngine,
    command: str | None = None,
    style: ThemeHighlight | None = None,
) -> str:
    """Format one matching candidate for output.

    Args:
        text: The candidate
        config: Configuration object
        engine: Engine the candidate matched in
        command: Command template to expand with the candidate as {cmd}
        style: Highlight style, None for plain output

    Returns:
        The output line
    """
    if command:
        args = build_command(command, config.templates.replacements(cmd=text))
        return shlex.join(args)

    if style is None:
        return text

    return render_ansi(text, engine.highlight(text, style))


def run_filter(
    config: Config,
    parsed: argparse.Namespace,
    candidates: list[str],
    out: TextIO,
) -> int:
    """Filter candidates and print the matches."""
    query = " ".join(parsed.query)
    matching = config.matching
    engine = FilterEngine(
        query,
        matching.to_options(),
        sort=matching.sort,
        levenshtein_sort=matching.levenshtein_sort,
    )
    result = engine.filter(candidates, limit=config.limit, deadline=config.timeout)

    style = resolve_highlight(config, parsed) if config.color and out.isatty() else None
    for entry in result.entries:
        print(format_entry(entry.text, config, engine, parsed.command, style), file=out)

    if result.truncated:
        logger.warning(
            "Evaluation stopped after %d of %d candidates", result.evaluated, len(candidates)
        )

    return 0 if result.entries else 1


def build_picker(config: Config, parsed: argparse.Namespace, candidates: list[str]) -> FilterPicker:
    """Create the interactive picker, honouring --highlight and --no-color."""
    if config.color:
        style = resolve_highlight(config, parsed)
    else:
        style = ThemeHighlight(style=HighlightFlag.NONE)
    return FilterPicker(candidates, config, " ".join(parsed.query), parsed.theme, highlight=style)


def run_interactive(config: Config, parsed: argparse.Namespace, candidates: list[str], out: TextIO) -> int:
    """Pick a candidate interactively and print it."""
    picker = build_picker(config, parsed, candidates)
    if sys.stdin.isatty():
        chosen = picker.run()
    else:
        # Candidates came through stdin, read keys from the terminal
        with open("/dev/tty") as tty:
            chosen = picker.run(input=create_input(tty))

    if chosen is None or picker.engine is None:
        return 1

    print(format_entry(chosen, config, picker.engine, parsed.command), file=out)
    return 0


def main(args: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        args: Command-line arguments

    Returns:
        Exit code
    """
    parsed = parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
    )
    setup_locale()

    # Load configuration
    try:
        config = load_config(
            config_path=parsed.config,
            dropin_dir=parsed.config_dir,
        )
        config = apply_overrides(config, parsed)
        if parsed.highlight:
            parse_highlight(parsed.highlight)
    except (ValidationError, yaml.YAMLError, ValueError) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 2

    try:
        if parsed.input:
            with open(parsed.input, "rb") as f:
                candidates = read_candidates(f, parsed.encoding)
        else:
            candidates = read_candidates(sys.stdin.buffer, parsed.encoding)

        if parsed.interactive:
            return run_interactive(config, parsed, candidates, sys.stdout)
        return run_filter(config, parsed, candidates, sys.stdout)

    except KeyboardInterrupt:
        return 130
    except TemplateError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
