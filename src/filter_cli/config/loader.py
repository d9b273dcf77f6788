"""Configuration loader: built-in defaults, main file, then conf.d drop-ins."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from filter_cli.config.defaults import DEFAULT_CONFIG_YAML
from filter_cli.config.schema import Config

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = "filter"
CONFIG_FILE_NAME = "config.yaml"
DROPIN_DIR_NAME = "conf.d"
DROPIN_SUFFIXES = (".yaml", ".yml")


def config_home() -> Path:
    """Directory holding the configuration, overridable with FILTER_CONFIG_DIR."""
    return Path(os.environ.get("FILTER_CONFIG_DIR", Path.home() / ".config" / CONFIG_DIR_NAME))


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into a copy of base.

    Nested mappings are merged key by key; any other value in override,
    lists included, replaces the value in base.
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Read one YAML document as a mapping.

    Missing and empty files count as empty mappings.

    Raises:
        ValueError: If the document is not a mapping
    """
    if not path.is_file():
        return {}

    logger.debug("Loading configuration from %s", path)
    with open(path) as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level, got {type(data).__name__}")
    return data


def load_dropin_directory(dropin_dir: Path) -> dict[str, Any]:
    """Merge every *.yaml and *.yml file of dropin_dir, in file name order."""
    if not dropin_dir.is_dir():
        return {}

    files = sorted(p for p in dropin_dir.iterdir() if p.suffix in DROPIN_SUFFIXES)
    merged: dict[str, Any] = {}
    for path in files:
        merged = deep_merge(merged, load_yaml_file(path))
    return merged


def default_config_data() -> dict[str, Any]:
    """The built-in configuration as a mapping."""
    return yaml.safe_load(DEFAULT_CONFIG_YAML)


def load_config(
    config_path: Path | str | None = None,
    dropin_dir: Path | str | None = None,
) -> Config:
    """Load the effective configuration.

    Layers are merged in order: built-in defaults, the main file, then the
    drop-in files.

    Args:
        config_path: Main config file (default: $FILTER_CONFIG_DIR/config.yaml)
        dropin_dir: Drop-in directory (default: $FILTER_CONFIG_DIR/conf.d/)

    Returns:
        Validated configuration
    """
    home = config_home()
    main_path = Path(config_path) if config_path is not None else home / CONFIG_FILE_NAME
    dropin_path = Path(dropin_dir) if dropin_dir is not None else home / DROPIN_DIR_NAME

    data = default_config_data()
    for layer in (load_yaml_file(main_path), load_dropin_directory(dropin_path)):
        data = deep_merge(data, layer)

    return Config(**data)


def load_config_from_string(yaml_string: str) -> Config:
    """Load configuration from a YAML string, without the built-in defaults."""
    data = yaml.safe_load(yaml_string)
    return Config(**(data or {}))
