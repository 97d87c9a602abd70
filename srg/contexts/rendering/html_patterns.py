"""
HTML Pattern Constants

Markup fragments used by the HTML generator, organized by category.

Known fields are the layout references that render as structured markup
(distinct tag and class) when they make up a whole field on their own. Every
other field composition falls back to GENERIC_FIELD.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from markupsafe import escape


@dataclass(frozen=True)
class KnownField:
    """
    Structured markup for one known field.

    Attributes:
        pattern: Format string with {css_class} and {value} placeholders
                 (unused for list fields)
        css_class: Default CSS class, replaced by a layout class override
        is_list: Render the field's items as an unordered list
    """

    pattern: str
    css_class: str
    is_list: bool = False


def _text(tag: str, css_class: str) -> KnownField:
    return KnownField(f'<{tag} class="{{css_class}}">{{value}}</{tag}>', css_class)


def _list(css_class: str) -> KnownField:
    return KnownField("", css_class, is_list=True)


PERSON_FIELDS: Mapping[str, KnownField] = MappingProxyType(
    {
        "name": _text("h1", "person-name"),
        "headline": _text("p", "person-headline"),
        "email": _text("span", "person-email"),
        "phone": _text("span", "person-phone"),
        "location": _text("span", "person-location"),
        "website": KnownField(
            '<a class="{css_class}" href="{value}">{value}</a>', "person-website"
        ),
    }
)

SUMMARY_FIELDS: Mapping[str, KnownField] = MappingProxyType(
    {
        "summary": _text("p", "summary-text"),
    }
)

EXPERIENCE_FIELDS: Mapping[str, KnownField] = MappingProxyType(
    {
        "title": _text("h3", "experience-title"),
        "company": _text("p", "experience-company"),
        "summary": _text("p", "experience-summary"),
        "highlights": _list("experience-highlights"),
        "technologies": _list("experience-technologies"),
    }
)

PROJECT_FIELDS: Mapping[str, KnownField] = MappingProxyType(
    {
        "name": _text("h3", "projects-name"),
        "url": KnownField('<p class="{css_class}"><a href="{value}">{value}</a></p>', "projects-url"),
        "summary": _text("p", "projects-summary"),
    }
)

EDUCATION_FIELDS: Mapping[str, KnownField] = MappingProxyType(
    {
        "degree": _text("h3", "education-degree"),
        "institution": _text("p", "education-institution"),
        "details": _list("education-details"),
    }
)


@dataclass(frozen=True)
class FragmentPatterns:
    """
    Fragments shared by every entity kind.

    GENERIC_FIELD wraps inline compositions of literals and references.
    """

    GENERIC_FIELD: str = "<p{class_attr}>{content}</p>"
    LIST_OPEN: str = '<ul class="{css_class}">'
    LIST_ITEM: str = "<li>{value}</li>"
    LIST_CLOSE: str = "</ul>"
    ITEM_OPEN: str = '<div class="{section}-item">'
    ITEM_CLOSE: str = "</div>"
    SKILLS_CATEGORY: str = (
        '<p class="skills-category"><strong class="skills-category-name">{category}:</strong> '
        '<span class="skills-items">{items}</span></p>'
    )


@dataclass(frozen=True)
class SectionPatterns:
    """Section wrappers and headings."""

    HEADER_OPEN: str = '<header id="{section}" class="section section-{section}">'
    HEADER_CLOSE: str = "</header>"
    SECTION_OPEN: str = '<section id="{section}" class="section section-{section}">'
    SECTION_CLOSE: str = "</section>"
    HEADING: str = "<h2>{title}</h2>"


SECTION_TITLES: Mapping[str, str] = MappingProxyType(
    {
        "summary": "Summary",
        "skills": "Skills",
        "experience": "Experience",
        "projects": "Projects",
        "education": "Education",
    }
)

SKILLS_JOIN_SEPARATOR = ", "

# Indentation of fragments inside the <main> wrapper of the document shell
SECTION_INDENT = " " * 4
FIELD_INDENT = " " * 6
ITEM_FIELD_INDENT = " " * 8


def escape_html(value: Optional[str]) -> str:
    """
    Escape the five markup-significant characters (& < > " ').

    Args:
        value: Raw text; None is treated as empty

    Returns:
        Text safe to interpolate into element content and attribute values
    """
    if value is None:
        return ""
    return str(escape(value))


def class_attribute(css_class: Optional[str]) -> str:
    """Render ` class="..."`, or nothing when no class is given."""
    if not css_class:
        return ""
    return f' class="{escape_html(css_class)}"'
