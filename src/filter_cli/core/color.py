"""Highlight style parsing and rendering."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Flag

# Standard color names on the 0-1 scale
COLORS: dict[str, tuple[float, float, float]] = {
    "black": (0.0, 0.0, 0.0),
    "red": (0.8, 0.0, 0.0),
    "green": (0.0, 0.8, 0.0),
    "yellow": (0.8, 0.8, 0.0),
    "blue": (0.0, 0.0, 0.8),
    "magenta": (0.8, 0.0, 0.8),
    "cyan": (0.0, 0.8, 0.8),
    "white": (0.9, 0.9, 0.9),
}

# Bright color variants
BRIGHT_COLORS: dict[str, tuple[float, float, float]] = {
    "bright black": (0.5, 0.5, 0.5),
    "bright red": (1.0, 0.0, 0.0),
    "bright green": (0.0, 1.0, 0.0),
    "bright yellow": (1.0, 1.0, 0.0),
    "bright blue": (0.36, 0.36, 1.0),
    "bright magenta": (1.0, 0.0, 1.0),
    "bright cyan": (0.0, 1.0, 1.0),
    "bright white": (1.0, 1.0, 1.0),
    # Aliases
    "gray": (0.5, 0.5, 0.5),
    "grey": (0.5, 0.5, 0.5),
}

# Scale of color channels expected by Pango style renderers
PANGO_COLOR_SCALE = 65535


class HighlightFlag(Flag):
    """Style bits for highlighted text."""

    NONE = 0
    BOLD = 1
    UNDERLINE = 2
    ITALIC = 4
    COLOR = 8


# Text attributes
ATTRIBUTES = {
    "bold": HighlightFlag.BOLD,
    "underline": HighlightFlag.UNDERLINE,
    "italic": HighlightFlag.ITALIC,
}


@dataclass(frozen=True)
class ThemeHighlight:
    """Highlight style for matched text.

    Attributes:
        style: Style bits to apply
        color: RGB triple on the 0-1 scale, used when COLOR is set
    """

    style: HighlightFlag = HighlightFlag.BOLD | HighlightFlag.UNDERLINE
    color: tuple[float, float, float] = (0.0, 0.0, 0.0)

    def __contains__(self, flag: HighlightFlag) -> bool:
        return bool(self.style & flag)

    @property
    def is_empty(self) -> bool:
        """Check if the highlight changes nothing."""
        return self.style == HighlightFlag.NONE

    def pango_color(self) -> tuple[int, int, int]:
        """Color channels scaled to 0-65535."""
        red, green, blue = (int(channel * PANGO_COLOR_SCALE) for channel in self.color)
        return (red, green, blue)

    def hex_color(self) -> str:
        """Color as a '#rrggbb' string."""
        red, green, blue = (round(channel * 255) for channel in self.color)
        return f"#{red:02x}{green:02x}{blue:02x}"

    def to_prompt_toolkit_style(self) -> str:
        """Convert to prompt_toolkit style string."""
        parts: list[str] = []

        if HighlightFlag.BOLD in self:
            parts.append("bold")
        if HighlightFlag.UNDERLINE in self:
            parts.append("underline")
        if HighlightFlag.ITALIC in self:
            parts.append("italic")
        if HighlightFlag.COLOR in self:
            parts.append(f"fg:{self.hex_color()}")

        return " ".join(parts)

    def to_ansi(self) -> str:
        """Convert to ANSI escape sequence."""
        codes: list[int] = []

        if HighlightFlag.BOLD in self:
            codes.append(1)
        if HighlightFlag.ITALIC in self:
            codes.append(3)
        if HighlightFlag.UNDERLINE in self:
            codes.append(4)
        if HighlightFlag.COLOR in self:
            codes.extend([38, 2])
            codes.extend(round(channel * 255) for channel in self.color)

        if not codes:
            return ""

        return f"\033[{';'.join(str(c) for c in codes)}m"


class ColorParser:
    """Parser for highlight style strings."""

    def parse(self, spec: str) -> ThemeHighlight:
        """Parse a highlight style string.

        Args:
            spec: Highlight string like "bold italic #ff8800" or "none"

        Returns:
            ThemeHighlight object

        Raises:
            ValueError: If a part of the style is not understood

        Examples:
            >>> parser = ColorParser()
            >>> highlight = parser.parse("bold underline red")
            >>> highlight.style == HighlightFlag.BOLD | HighlightFlag.UNDERLINE | HighlightFlag.COLOR
            True
        """
        parts = spec.lower().split()
        if not parts or parts == ["none"]:
            return ThemeHighlight(style=HighlightFlag.NONE)

        style = HighlightFlag.NONE
        color: tuple[float, float, float] = (0.0, 0.0, 0.0)

        i = 0
        while i < len(parts):
            part = parts[i]

            if part in ATTRIBUTES:
                style |= ATTRIBUTES[part]
                i += 1
                continue

            # Check for "bright" prefix
            if part == "bright" and i + 1 < len(parts):
                name = f"bright {parts[i + 1]}"
                if name in BRIGHT_COLORS:
                    style |= HighlightFlag.COLOR
                    color = BRIGHT_COLORS[name]
                    i += 2
                    continue

            if part in COLORS:
                color = COLORS[part]
            elif part in BRIGHT_COLORS:
                color = BRIGHT_COLORS[part]
            elif part.startswith("#"):
                color = parse_hex(part)
            else:
                raise ValueError(f"Unknown highlight attribute '{part}' in '{spec}'")

            style |= HighlightFlag.COLOR
            i += 1

        return ThemeHighlight(style=style, color=color)


def parse_hex(value: str) -> tuple[float, float, float]:
    """Parse '#rgb' or '#rrggbb' into an RGB triple on the 0-1 scale."""
    digits = value.lstrip("#")
    if len(digits) == 3:
        digits = "".join(d * 2 for d in digits)
    if len(digits) != 6:
        raise ValueError(f"Invalid hex color '{value}'")
    try:
        channels = [int(digits[i : i + 2], 16) for i in (0, 2, 4)]
    except ValueError:
        raise ValueError(f"Invalid hex color '{value}'") from None
    red, green, blue = (channel / 255 for channel in channels)
    return (red, green, blue)


def parse_highlight(spec: str) -> ThemeHighlight:
    """Parse a highlight style string.

    Args:
        spec: Highlight string like "bold red"

    Returns:
        ThemeHighlight object
    """
    return ColorParser().parse(spec)


def combine_highlights(base: ThemeHighlight, overlay: ThemeHighlight) -> ThemeHighlight:
    """Combine two highlights covering the same text.

    Style bits are merged; the overlay color wins when it sets one.

    Args:
        base: Base highlight
        overlay: Highlight to overlay

    Returns:
        Combined highlight
    """
    color = overlay.color if HighlightFlag.COLOR in overlay else base.color
    return ThemeHighlight(style=base.style | overlay.style, color=color)
