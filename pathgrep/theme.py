"""Match theme definitions and selection helpers.

Themes map span roles to ANSI sequences. The default palette is assembled
from ``pygments.console`` codes; ``plain`` disables styling entirely.
"""

from __future__ import annotations

from dataclasses import dataclass

from pygments.console import codes

from .matching.types import SpanRole


@dataclass(frozen=True)
class MatchTheme:
    """Semantic ANSI palette used by the style sink."""

    name: str
    reset: str
    highlighted: str
    context: str
    low_emphasis: str
    label: str
    warning: str
    error: str

    def code_for(self, role: SpanRole) -> str:
        if role is SpanRole.HIGHLIGHTED:
            return self.highlighted
        if role is SpanRole.LOW_EMPHASIS:
            return self.low_emphasis
        if role is SpanRole.LABEL:
            return self.label
        return self.context


DEFAULT_THEME = MatchTheme(
    name="default",
    reset=codes["reset"],
    highlighted=codes["bold"] + codes["underline"] + codes["green"],
    context="",
    low_emphasis=codes["faint"] + codes["standout"],
    label=codes["bold"],
    warning=codes["yellow"],
    error=codes["bold"] + codes["red"],
)

OCEAN_THEME = MatchTheme(
    name="ocean",
    reset=codes["reset"],
    highlighted="\033[1;4;38;5;45m",
    context="",
    low_emphasis="\033[2;3;38;5;110m",
    label="\033[1;38;5;153m",
    warning="\033[38;5;215m",
    error="\033[1;38;5;203m",
)

PLAIN_THEME = MatchTheme(
    name="plain",
    reset="",
    highlighted="",
    context="",
    low_emphasis="",
    label="",
    warning="",
    error="",
)

_THEMES: dict[str, MatchTheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> MatchTheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "MatchTheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
