"""
HTML Generator

Renders a resume document to HTML by walking a Layout.

Each layout section is dispatched by name to a section renderer; unknown
section names render nothing. Within a section every field goes through the
same routine, parameterized by the entity being rendered and that entity
kind's table of known fields.
"""

from typing import Callable, Dict, List, Mapping, Sequence

from markupsafe import Markup

from srg.contexts.document.resume_data_structure import Person, ResumeDocument
from srg.contexts.layout.layout_data_structures import Field, Layout, Literal, Reference, Section
from srg.contexts.rendering.html_patterns import (
    EDUCATION_FIELDS,
    EXPERIENCE_FIELDS,
    FIELD_INDENT,
    ITEM_FIELD_INDENT,
    PERSON_FIELDS,
    PROJECT_FIELDS,
    SECTION_INDENT,
    SECTION_TITLES,
    SKILLS_JOIN_SEPARATOR,
    SUMMARY_FIELDS,
    FragmentPatterns,
    KnownField,
    SectionPatterns,
    class_attribute,
    escape_html,
)
from srg.contexts.rendering.registries import DEFAULT_TEMPLATE, TemplateRegistry

LIST_ITEM_INDENT = "  "

# Used when a summary section lists no fields of its own
DEFAULT_SUMMARY_FIELD = Field(parts=(Reference("summary"),))

_default_registry = TemplateRegistry()


def render_field(field: Field, entity, known_fields: Mapping[str, KnownField], indent: str) -> str:
    """
    Render one layout field against an entity.

    A field made of exactly one reference to a known field renders as that
    field's structured markup (nothing when the value is absent). Any other
    composition renders as one inline element with literals and resolved
    references concatenated in order; absent references contribute "".

    Args:
        field: Layout field
        entity: Document entity exposing resolve() and resolve_list()
        known_fields: Known-field table for the entity kind
        indent: Leading whitespace for the emitted lines

    Returns:
        HTML fragment, or "" when the field renders nothing
    """
    if field.is_empty:
        return ""

    name = field.single_reference()
    if name is not None and name in known_fields:
        return render_known_field(name, known_fields[name], entity, indent, field.css_class)

    content = "".join(
        escape_html(part.text) if isinstance(part, Literal) else escape_html(entity.resolve(part.name))
        for part in field.parts
    )
    return indent + FragmentPatterns.GENERIC_FIELD.format(
        class_attr=class_attribute(field.css_class), content=content
    )


def render_known_field(
    name: str, known: KnownField, entity, indent: str, css_class: str = None
) -> str:
    """
    Render a known field's structured markup.

    Args:
        name: Field name on the entity
        known: Markup pattern and default class for the field
        entity: Document entity exposing resolve() and resolve_list()
        indent: Leading whitespace for the emitted lines
        css_class: Class override from the layout (replaces the default class)

    Returns:
        HTML fragment, or "" when the value is absent or the list is empty
    """
    css_class = escape_html(css_class or known.css_class)

    if known.is_list:
        items = entity.resolve_list(name)
        if not items:
            return ""
        lines = [indent + FragmentPatterns.LIST_OPEN.format(css_class=css_class)]
        lines.extend(
            indent + LIST_ITEM_INDENT + FragmentPatterns.LIST_ITEM.format(value=escape_html(item))
            for item in items
        )
        lines.append(indent + FragmentPatterns.LIST_CLOSE)
        return "\n".join(lines)

    value = entity.resolve(name)
    if value is None:
        return ""
    return indent + known.pattern.format(css_class=css_class, value=escape_html(value))


def _render_fields(
    fields: Sequence[Field], entity, known_fields: Mapping[str, KnownField], indent: str
) -> List[str]:
    fragments = (render_field(field, entity, known_fields, indent) for field in fields)
    return [fragment for fragment in fragments if fragment]


class LayoutToHTMLConverter:
    """Converts a resume document to HTML following a Layout."""

    def __init__(self, template: str = DEFAULT_TEMPLATE, template_registry: TemplateRegistry = None):
        """
        Args:
            template: Template name (document shell and style sheet)
            template_registry: Registry to load the template from

        Raises:
            UnknownTemplateError: If the template name is not known
        """
        self.template_registry = template_registry or _default_registry
        self.template = self.template_registry.get_template(template)

        self._section_renderers: Dict[str, Callable[[ResumeDocument, Section], str]] = {
            "person": self.render_person_section,
            "summary": self.render_summary_section,
            "skills": self.render_skills_section,
            "experience": self.render_experience_section,
            "projects": self.render_projects_section,
            "education": self.render_education_section,
        }

    def generate_document(self, document: ResumeDocument, layout: Layout) -> str:
        """
        Generate a complete HTML document.

        Args:
            document: Resume document (read only)
            layout: Parsed layout deciding which sections and fields appear

        Returns:
            Complete HTML document string
        """
        sections = []
        for section in layout.sections:
            renderer = self._section_renderers.get(section.name)
            if renderer is None:
                continue
            fragment = renderer(document, section)
            if fragment:
                sections.append(Markup(fragment))

        return self.template.shell.render(
            title=document.person.name,
            style=Markup(self.template.style.rstrip("\n")),
            sections=sections,
        )

    def render_person_section(self, document: ResumeDocument, section: Section) -> str:
        lines = [SECTION_INDENT + SectionPatterns.HEADER_OPEN.format(section="person")]
        lines.extend(_render_fields(section.fields, document.person, PERSON_FIELDS, FIELD_INDENT))
        lines.append(SECTION_INDENT + SectionPatterns.HEADER_CLOSE)
        return "\n".join(lines)

    def render_summary_section(self, document: ResumeDocument, section: Section) -> str:
        person: Person = document.person
        if person.summary is None:
            return ""

        fields = section.fields or (DEFAULT_SUMMARY_FIELD,)
        return self._wrap_section(
            "summary", _render_fields(fields, person, SUMMARY_FIELDS, FIELD_INDENT)
        )

    def render_skills_section(self, document: ResumeDocument, section: Section) -> str:
        """
        Render one line per skill category.

        Layout fields are not consulted: each category shows its label and its
        skills joined with ", ".
        """
        if not document.skills:
            return ""

        lines = [
            FIELD_INDENT
            + FragmentPatterns.SKILLS_CATEGORY.format(
                category=escape_html(category),
                items=SKILLS_JOIN_SEPARATOR.join(escape_html(skill) for skill in skills),
            )
            for category, skills in document.skills.items()
        ]
        return self._wrap_section("skills", lines)

    def render_experience_section(self, document: ResumeDocument, section: Section) -> str:
        return self._render_item_section("experience", document.experience, section, EXPERIENCE_FIELDS)

    def render_projects_section(self, document: ResumeDocument, section: Section) -> str:
        return self._render_item_section("projects", document.projects, section, PROJECT_FIELDS)

    def render_education_section(self, document: ResumeDocument, section: Section) -> str:
        return self._render_item_section("education", document.education, section, EDUCATION_FIELDS)

    def _render_item_section(
        self,
        section_name: str,
        items: Sequence,
        section: Section,
        known_fields: Mapping[str, KnownField],
    ) -> str:
        """Wrap each item in an item container and apply every section field to it."""
        if not items:
            return ""

        fields = section.fields
        lines = []
        for item in items:
            lines.append(FIELD_INDENT + FragmentPatterns.ITEM_OPEN.format(section=section_name))
            lines.extend(_render_fields(fields, item, known_fields, ITEM_FIELD_INDENT))
            lines.append(FIELD_INDENT + FragmentPatterns.ITEM_CLOSE)
        return self._wrap_section(section_name, lines)

    @staticmethod
    def _wrap_section(section_name: str, body: List[str]) -> str:
        lines = [
            SECTION_INDENT + SectionPatterns.SECTION_OPEN.format(section=section_name),
            FIELD_INDENT + SectionPatterns.HEADING.format(title=SECTION_TITLES[section_name]),
            *body,
            SECTION_INDENT + SectionPatterns.SECTION_CLOSE,
        ]
        return "\n".join(lines)


def render_html(layout: Layout, document: ResumeDocument, template: str = DEFAULT_TEMPLATE) -> str:
    """
    Render a resume document to an HTML string.

    Args:
        layout: Parsed layout
        document: Resume document
        template: Template name

    Returns:
        Complete HTML document

    Raises:
        UnknownTemplateError: If the template name is not known
    """
    return LayoutToHTMLConverter(template=template).generate_document(document, layout)
