"""Pytest configuration and fixtures."""

import pytest

from filter_cli.config.loader import load_config_from_string
from filter_cli.config.schema import Config
from filter_cli.core.color import HighlightFlag, ThemeHighlight
from filter_cli.core.patterns import MatchingMethod, MatchOptions


@pytest.fixture
def literal_options() -> MatchOptions:
    """Case insensitive, tokenized literal matching."""
    return MatchOptions(method=MatchingMethod.LITERAL)


@pytest.fixture
def fuzzy_options() -> MatchOptions:
    """Case insensitive, tokenized fuzzy matching."""
    return MatchOptions(method=MatchingMethod.FUZZY)


@pytest.fixture
def bold() -> ThemeHighlight:
    """Bold-only highlight style."""
    return ThemeHighlight(style=HighlightFlag.BOLD)


@pytest.fixture
def candidates() -> list[str]:
    """A small set of application names."""
    return [
        "Firefox Web Browser",
        "firefox-developer-edition",
        "Files",
        "LibreOffice Writer",
        "gnome-terminal",
        "xterm",
        "MakeFile",
        "makefile.bak",
    ]


@pytest.fixture
def sample_config() -> Config:
    """Sample configuration for testing."""
    yaml_content = """
color: true
limit: 100

matching:
  method: fuzzy
  case_sensitive: false
  tokenize: true
  sort: true

themes:
  default:
    highlight: "bold underline"
  warm:
    highlight: "italic #ff8800"
    selected: "reverse bold"

templates:
  terminal: urxvt
  ssh_client: mosh
  run_shell_command: "{terminal} -e {cmd}"
"""
    return load_config_from_string(yaml_content)


@pytest.fixture
def empty_config() -> Config:
    """Empty configuration for testing."""
    return Config()
