"""Custom exceptions for the rendering context."""

from pathlib import Path
from typing import Iterable, Optional


class UnknownTemplateError(ValueError):
    """
    Exception raised when a template name does not match a known template.

    Attributes:
        template_name: Requested template
        available: Names of the templates that do exist
    """

    def __init__(self, template_name: str, available: Optional[Iterable[str]] = None):
        self.template_name = template_name
        self.available = sorted(available or [])

        message = f"Unknown template: {template_name}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class ExportError(RuntimeError):
    """
    Exception raised when converting generated HTML to PDF fails.

    Attributes:
        message: Error description
        html_path: HTML file being exported
        original_error: The underlying browser automation error
    """

    def __init__(
        self,
        message: str,
        html_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.html_path = html_path
        self.original_error = original_error

        parts = [message]
        if html_path:
            parts.append(f"HTML: {html_path}")
        if original_error:
            parts.append(f"Original error: {original_error}")
        super().__init__("\n".join(parts))
