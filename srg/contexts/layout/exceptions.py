"""Custom exceptions for the layout context."""

from pathlib import Path
from typing import Iterable, Optional


class UnknownThemeError(ValueError):
    """
    Exception raised when a built-in theme name is not recognized.

    Attributes:
        theme_name: Requested theme
        available: Names of the themes that do exist
    """

    def __init__(self, theme_name: str, available: Optional[Iterable[str]] = None):
        self.theme_name = theme_name
        self.available = sorted(available or [])

        message = f"Unknown theme: {theme_name}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class LayoutReadError(OSError):
    """
    Exception raised when a layout file cannot be read.

    Attributes:
        path: Layout file that failed to load
        original_error: The underlying I/O or decoding error
    """

    def __init__(self, path: Path, original_error: Optional[Exception] = None):
        self.path = path
        self.original_error = original_error

        parts = [f"Failed to read layout file: {path}"]
        if original_error:
            parts.append(f"Original error: {original_error}")
        super().__init__("\n".join(parts))
