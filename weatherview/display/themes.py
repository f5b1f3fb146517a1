"""Theme lookup, light/dark switching and condition backgrounds."""

from weatherview.config.defaults import (
    CONDITION_BACKGROUNDS,
    DARK_BACKGROUND,
    DEFAULT_THEMES,
    FALLBACK_BACKGROUND,
)
from weatherview.config.schema import ThemeConfig, ThemeMode


def find_theme(name: str, themes: list[ThemeConfig] | None = None) -> ThemeConfig:
    """Case-insensitive theme lookup. Raises KeyError for unknown names."""
    for theme in themes or DEFAULT_THEMES:
        if theme.name.lower() == name.strip().lower():
            return theme
    raise KeyError(f"Unknown theme: {name}")


def toggle_mode(mode: ThemeMode) -> ThemeMode:
    return ThemeMode.LIGHT if mode == ThemeMode.DARK else ThemeMode.DARK


def background_for(condition_main: str, mode: ThemeMode) -> str:
    """Gradient for a weather category; dark mode always uses the dark one."""
    if mode == ThemeMode.DARK:
        return DARK_BACKGROUND
    return CONDITION_BACKGROUNDS.get(condition_main, FALLBACK_BACKGROUND)
