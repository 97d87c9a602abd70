"""
Rendering Context

Responsibilities:
- Renders a resume document to HTML following a Layout
- Manages named templates (document shell + style sheet)
- Exports generated HTML to PDF
- Writes build outputs with per-build logging

Owns: HTML generation, templates, PDF export, output management
Never: Parses layout text or modifies the document
"""

from srg.contexts.rendering.builder import BuildResult, build_resume
from srg.contexts.rendering.exceptions import ExportError, UnknownTemplateError
from srg.contexts.rendering.exporter import html_to_pdf
from srg.contexts.rendering.html_generator import LayoutToHTMLConverter, render_html
from srg.contexts.rendering.registries import TemplateRegistry

__all__ = [
    "render_html",
    "LayoutToHTMLConverter",
    "TemplateRegistry",
    "html_to_pdf",
    "build_resume",
    "BuildResult",
    "UnknownTemplateError",
    "ExportError",
]
