"""Command template expansion."""

from __future__ import annotations

import re
import shlex
from collections.abc import Sequence

PLACEHOLDER_RE = re.compile(r"\{[-\w]+\}")


class TemplateError(ValueError):
    """A command template could not be turned into arguments."""

    def __init__(self, template: str, message: str) -> None:
        super().__init__(f"Failed to parse: '{template}'\nError: '{message}'")
        self.template = template
        self.message = message


def lookup(replacements: Sequence[tuple[str, str]], placeholder: str) -> str | None:
    """Find the replacement for a placeholder.

    Later pairs override earlier ones, so callers can append specific values
    after defaults.
    """
    found: str | None = None
    for key, value in replacements:
        if key == placeholder:
            found = value
    return found


def expand_template(template: str, replacements: Sequence[tuple[str, str]]) -> str:
    """Substitute every {placeholder} in template.

    Placeholders without a replacement are removed.

    Args:
        template: Template like "{terminal} -e {cmd}"
        replacements: Ordered (placeholder, replacement) pairs, placeholders
            including their braces

    Returns:
        The expanded string

    Examples:
        >>> expand_template("{terminal} -e {cmd}", [("{terminal}", "xterm"), ("{cmd}", "top")])
        'xterm -e top'
    """
    parts: list[str] = []
    last_end = 0
    for match in PLACEHOLDER_RE.finditer(template):
        parts.append(template[last_end : match.start()])
        value = lookup(replacements, match.group(0))
        if value is not None:
            parts.append(value)
        last_end = match.end()
    parts.append(template[last_end:])
    return "".join(parts)


def build_command(template: str, replacements: Sequence[tuple[str, str]]) -> list[str]:
    """Expand a template and split it into shell-style arguments.

    Args:
        template: Command template
        replacements: Ordered (placeholder, replacement) pairs

    Returns:
        Argument list

    Raises:
        TemplateError: If the expanded template cannot be split
    """
    expanded = expand_template(template, replacements)
    try:
        args = shlex.split(expanded)
    except ValueError as e:
        raise TemplateError(template, str(e)) from e
    if not args:
        raise TemplateError(template, "Text was empty (or contained only whitespace)")
    return args
