"""ANSI palettes for tree rows and the search prompt.

Each palette is derived from an accent and a muted 256-color code. JSON dumps
use a pygments style instead (see ``json_view``).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reverse: str
    reset: str
    tree_marker: str
    card_name: str
    card_secondary: str
    card_selected: str
    checkbox: str
    search_prompt: str
    search_query: str
    search_hint: str


def _palette(name: str, accent: int, strong: int, text: int, muted: int, box: int) -> UITheme:
    return UITheme(
        name=name,
        reverse="\033[7m",
        reset="\033[0m",
        tree_marker=f"\033[38;5;{accent}m",
        card_name=f"\033[38;5;{text}m",
        card_secondary=f"\033[2;38;5;{muted}m",
        card_selected=f"\033[1;38;5;{strong}m",
        checkbox=f"\033[38;5;{box}m",
        search_prompt=f"\033[38;5;{accent}m",
        search_query=f"\033[1;38;5;{strong}m",
        search_hint=f"\033[2;38;5;{muted}m",
    )


DEFAULT_THEME = _palette("default", accent=44, strong=81, text=252, muted=250, box=109)
OCEAN_THEME = _palette("ocean", accent=39, strong=45, text=153, muted=110, box=73)

# No escape codes at all; used for --no-color and non-tty output.
PLAIN_THEME = UITheme("plain", *([""] * 10))

_THEMES = {theme.name: theme for theme in (DEFAULT_THEME, OCEAN_THEME)}


def available_theme_names() -> tuple[str, ...]:
    return tuple(sorted(_THEMES))


def normalize_theme_name(name: str | None) -> str:
    """Lower-case ``name`` if it is a known theme, else ``"default"``."""
    candidate = (name or "").strip().lower()
    return candidate if candidate in _THEMES else DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
