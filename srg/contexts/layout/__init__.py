"""
Layout Context

Responsibilities:
- Splits layout lines into literal and reference tokens
- Parses indentation-sensitive layout text into an immutable Layout tree
- Ships built-in themes and loads user layout files

Owns: Layout language, Layout tree, built-in themes
Never: Reads document data or produces markup
"""

from srg.contexts.layout.exceptions import LayoutReadError, UnknownThemeError
from srg.contexts.layout.layout_data_structures import (
    Container,
    Field,
    FieldPart,
    Layout,
    Literal,
    Reference,
    Section,
)
from srg.contexts.layout.parser import LayoutParser, describe_layout, parse_layout
from srg.contexts.layout.themes import (
    DEFAULT_THEME,
    ThemeRegistry,
    default_layout,
    load_layout_file,
    load_theme,
)
from srg.contexts.layout.tokenizer import split_field_parts

__all__ = [
    # Data structures
    "Layout",
    "Section",
    "Container",
    "Field",
    "FieldPart",
    "Reference",
    "Literal",
    # Parsing
    "split_field_parts",
    "LayoutParser",
    "parse_layout",
    "describe_layout",
    # Loading
    "ThemeRegistry",
    "DEFAULT_THEME",
    "load_layout_file",
    "load_theme",
    "default_layout",
    # Errors
    "UnknownThemeError",
    "LayoutReadError",
]
