"""
Theme Registry

Built-in layouts shipped with SRG, plus the loaders for layout text from a
string or a user-supplied file.

Themes are stored in srg/contexts/layout/themes/{theme_name}/layout.resume.
Each theme is parsed on first use and the immutable Layout is cached for the
lifetime of the registry.
"""

import os
from pathlib import Path
from typing import Dict, List

from dotenv import load_dotenv

from srg.contexts.layout.exceptions import LayoutReadError, UnknownThemeError
from srg.contexts.layout.layout_data_structures import Layout
from srg.contexts.layout.logger import _log_debug
from srg.contexts.layout.parser import parse_layout

load_dotenv()
THEMES_PATH = Path(os.getenv("SRG_THEMES_PATH", Path(__file__).parent / "themes"))
DEFAULT_THEME = os.getenv("SRG_DEFAULT_THEME", "minimal")

LAYOUT_FILENAME = "layout.resume"


class ThemeRegistry:
    """Registry for loading and caching built-in theme layouts."""

    def __init__(self, themes_base_path: Path = None):
        """
        Initialize the theme registry.

        Args:
            themes_base_path: Base path for theme directories. Defaults to
                              SRG_THEMES_PATH from environment
        """
        if themes_base_path is None:
            themes_base_path = THEMES_PATH

        self.themes_base_path = Path(themes_base_path)
        self._cache: Dict[str, Layout] = {}

    def available_themes(self) -> List[str]:
        """Names of every theme directory holding a layout file."""
        if not self.themes_base_path.is_dir():
            return []
        return sorted(
            path.name
            for path in self.themes_base_path.iterdir()
            if (path / LAYOUT_FILENAME).is_file()
        )

    def get_theme_path(self, theme_name: str) -> Path:
        """
        Get the file path for a theme's layout.

        Args:
            theme_name: Name of the theme (e.g., 'minimal')

        Returns:
            Path to layout file
        """
        return self.themes_base_path / theme_name / LAYOUT_FILENAME

    def get_layout(self, theme_name: str) -> Layout:
        """
        Get a theme's layout, parsing and caching it if necessary.

        Args:
            theme_name: Name of the theme

        Returns:
            Parsed Layout

        Raises:
            UnknownThemeError: If no theme with this name exists
        """
        if theme_name in self._cache:
            return self._cache[theme_name]

        if theme_name not in self.available_themes():
            raise UnknownThemeError(theme_name, self.available_themes())

        theme_path = self.get_theme_path(theme_name)
        layout = load_layout_file(theme_path)
        _log_debug(f"Loaded theme '{theme_name}' ({len(layout)} sections) from {theme_path}")

        self._cache[theme_name] = layout
        return layout

    def clear_cache(self):
        """Clear the layout cache."""
        self._cache.clear()

    def is_cached(self, theme_name: str) -> bool:
        return theme_name in self._cache


_default_registry = ThemeRegistry()


def load_layout_file(path: Path) -> Layout:
    """
    Parse a layout from a file.

    Args:
        path: Path to layout text file

    Returns:
        Parsed Layout

    Raises:
        LayoutReadError: If the file is missing or cannot be decoded
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LayoutReadError(path, e) from e
    return parse_layout(content)


def load_theme(theme_name: str) -> Layout:
    """
    Get a built-in theme's layout from the shared registry.

    Raises:
        UnknownThemeError: If no theme with this name exists
    """
    return _default_registry.get_layout(theme_name)


def default_layout() -> Layout:
    """Layout used when neither a theme nor a layout file is given."""
    return load_theme(DEFAULT_THEME)
