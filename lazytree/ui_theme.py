"""UI theme definitions and selection helpers.

Themes are ANSI palettes for entry names by kind. The plain theme carries
empty escape codes so uncolored output needs no separate code path.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the line printer."""

    name: str
    reset: str
    tree_dir: str
    tree_exec: str
    tree_link: str

    def paint(self, text: str, color: str) -> str:
        """Wrap ``text`` in ``color`` and reset, or return it unchanged for empty colors."""
        if not color:
            return text
        return f"{color}{text}{self.reset}"


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    tree_dir="\033[94m",
    tree_exec="\033[92m",
    tree_link="\033[96m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    tree_dir="\033[1;38;5;45m",
    tree_exec="\033[38;5;84m",
    tree_link="\033[38;5;117m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    tree_dir="",
    tree_exec="",
    tree_link="",
)

_THEMES: dict[str, UITheme] = {
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


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
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
