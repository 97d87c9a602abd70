"""
Rendering Registries

Registry for loading and caching the named templates that wrap rendered
sections into a complete HTML document.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

from srg.contexts.rendering.exceptions import UnknownTemplateError

load_dotenv()
TEMPLATES_PATH = Path(os.getenv("SRG_TEMPLATES_PATH", Path(__file__).parent / "templates"))
DEFAULT_TEMPLATE = os.getenv("SRG_DEFAULT_TEMPLATE", "minimal")

SHELL_FILENAME = "document.html.jinja"
STYLE_FILENAME = "style.css"


@dataclass(frozen=True)
class ResumeTemplate:
    """
    A loaded template variant.

    Attributes:
        name: Template name (e.g., 'minimal')
        shell: Jinja2 document shell (head, style block, body wrapper)
        style: Static style sheet injected into the shell
    """

    name: str
    shell: Template
    style: str


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 document templates.

    Templates are stored in srg/contexts/rendering/templates/{template_name}/
    as a document.html.jinja shell next to a style.css asset.
    """

    def __init__(self, templates_base_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_base_path: Base path for template directories. Defaults to
                                 SRG_TEMPLATES_PATH from environment
        """
        if templates_base_path is None:
            templates_base_path = TEMPLATES_PATH

        self.templates_base_path = Path(templates_base_path)
        self._cache: Dict[str, ResumeTemplate] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_base_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def available_templates(self) -> List[str]:
        """Names of every template directory holding a document shell."""
        if not self.templates_base_path.is_dir():
            return []
        return sorted(
            path.name
            for path in self.templates_base_path.iterdir()
            if (path / SHELL_FILENAME).is_file()
        )

    def get_template(self, template_name: str) -> ResumeTemplate:
        """
        Get a template by name, loading and caching it if necessary.

        Args:
            template_name: Name of the template (e.g., 'minimal')

        Returns:
            ResumeTemplate with compiled shell and style text

        Raises:
            UnknownTemplateError: If no template with this name exists
            TemplateSyntaxError: If the shell has Jinja2 syntax errors
        """
        if template_name in self._cache:
            return self._cache[template_name]

        if template_name not in self.available_templates():
            raise UnknownTemplateError(template_name, self.available_templates())

        try:
            shell = self.env.get_template(f"{template_name}/{SHELL_FILENAME}")
        except TemplateNotFound as e:
            raise UnknownTemplateError(template_name, self.available_templates()) from e

        style_path = self.get_template_path(template_name) / STYLE_FILENAME
        style = style_path.read_text(encoding="utf-8") if style_path.exists() else ""

        template = ResumeTemplate(name=template_name, shell=shell, style=style)
        self._cache[template_name] = template
        return template

    def get_template_path(self, template_name: str) -> Path:
        """
        Get the directory holding a template's shell and style.

        Args:
            template_name: Name of the template

        Returns:
            Path to template directory
        """
        return self.templates_base_path / template_name

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, template_name: str) -> bool:
        return template_name in self._cache
