"""Pydantic models for configuration schema."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from filter_cli.core.color import ThemeHighlight, parse_highlight
from filter_cli.core.patterns import MatchingMethod, MatchOptions


class MatchingConfig(BaseModel):
    """How queries are matched against candidates."""

    method: MatchingMethod = Field(
        default=MatchingMethod.LITERAL,
        description="Matching strategy: normal, glob, regex or fuzzy",
    )
    case_sensitive: bool = Field(default=False, description="Match case sensitive")
    tokenize: bool = Field(default=True, description="Split the query on spaces into tokens")
    sort: bool = Field(default=False, description="Rank fuzzy matches by score")
    levenshtein_sort: bool = Field(default=False, description="Rank matches by edit distance")

    @field_validator("method", mode="before")
    @classmethod
    def parse_method(cls, v: Any) -> MatchingMethod:
        """Parse the matching method from its configuration name."""
        if isinstance(v, MatchingMethod):
            return v
        if not isinstance(v, str):
            raise ValueError(f"matching method must be a string, got {type(v).__name__}")
        return MatchingMethod.from_name(v)

    def to_options(self) -> MatchOptions:
        """Freeze into the options a token set is compiled with."""
        return MatchOptions(
            method=self.method,
            case_sensitive=self.case_sensitive,
            tokenize=self.tokenize,
        )


class Theme(BaseModel):
    """Theme definition with the highlight style for matched text."""

    name: str = Field(description="Theme name, e.g., 'default'")
    highlight: str = Field(
        default="bold underline", description="Highlight style, e.g., 'bold italic #ff8800'"
    )
    selected: str = Field(default="reverse", description="prompt_toolkit style of the selected row")

    @field_validator("highlight")
    @classmethod
    def check_highlight(cls, v: str) -> str:
        """Reject highlight styles that cannot be parsed."""
        parse_highlight(v)
        return v

    def get_highlight(self) -> ThemeHighlight:
        """Parse the highlight style."""
        return parse_highlight(self.highlight)


class TemplateConfig(BaseModel):
    """Command templates and the default placeholder values."""

    terminal: str = Field(default="x-terminal-emulator", description="Value of {terminal}")
    ssh_client: str = Field(default="ssh", description="Value of {ssh-client}")
    run_command: str = Field(default="{cmd}", description="Template for running an entry")
    run_shell_command: str = Field(
        default="{terminal} -e {cmd}", description="Template for running an entry in a terminal"
    )

    def replacements(self, **extra: str) -> list[tuple[str, str]]:
        """Build the ordered placeholder list.

        Keyword names become placeholders with underscores turned into dashes.
        """
        pairs = [("{terminal}", self.terminal), ("{ssh-client}", self.ssh_client)]
        for key, value in extra.items():
            pairs.append(("{" + key.replace("_", "-") + "}", value))
        return pairs


class Config(BaseModel):
    """Top-level configuration."""

    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    themes: dict[str, Theme] = Field(default_factory=dict)
    templates: TemplateConfig = Field(default_factory=TemplateConfig)
    color: bool = Field(default=True, description="Enable/disable colors")
    limit: int | None = Field(default=None, ge=1, description="Maximum candidates evaluated per query")
    timeout: float | None = Field(default=None, gt=0, description="Seconds allowed per query")

    @field_validator("themes", mode="before")
    @classmethod
    def parse_themes(cls, v: dict[str, Any] | None) -> dict[str, Theme]:
        """Parse theme definitions.

        An empty 'themes:' section counts as no themes.
        """
        if v is None:
            return {}
        if not isinstance(v, dict):
            raise ValueError(f"themes must be a mapping, got {type(v).__name__}")
        result = {}
        for name, data in v.items():
            if isinstance(data, dict):
                result[name.lower()] = Theme(name=name, **data)
            elif isinstance(data, str):
                result[name.lower()] = Theme(name=name, highlight=data)
        return result

    def get_theme(self, name: str | None = None) -> Theme:
        """Get theme by name, or default theme."""
        if name and name.lower() in self.themes:
            return self.themes[name.lower()]
        if "default" in self.themes:
            return self.themes["default"]
        # Return a minimal default theme
        return Theme(name="default")
