"""Configuration loading and schema definitions."""

from filter_cli.config.loader import load_config
from filter_cli.config.schema import (
    Config,
    MatchingConfig,
    TemplateConfig,
    Theme,
)

__all__ = [
    "Config",
    "MatchingConfig",
    "TemplateConfig",
    "Theme",
    "load_config",
]
