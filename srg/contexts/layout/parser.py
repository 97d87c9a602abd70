"""
Layout Parser

Builds a Layout tree from indentation-sensitive layout text.

Grammar (indentation counted in raw leading whitespace characters):

    person                       <- depth 0: section header
      name                       <- depth 2: field
      contact: email " | " phone <- depth 2: field with class override
      meta:                      <- depth 2: container header
        start " - " end          <- depth 4+: container body field

The grammar never rejects text. Ambiguous or malformed lines fall back to the
most literal reading (usually a plain field) instead of raising.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from srg.contexts.layout.layout_data_structures import (
    Container,
    Field,
    FieldEntry,
    Layout,
    Reference,
    Section,
)
from srg.contexts.layout.tokenizer import QUOTE, SEPARATOR, split_field_parts

SECTION_DEPTH = 0
FIELD_DEPTH = 2
CONTAINER_BODY_DEPTH = 4

LABEL_DELIMITER = ":"


def indent_width(line: str) -> int:
    """Number of leading whitespace characters (tabs count as one)."""
    return len(line) - len(line.lstrip())


def _is_label(text: str) -> bool:
    """A class label is a non-empty run without quotes or spaces."""
    return bool(text) and QUOTE not in text and SEPARATOR not in text


def container_label(line: str) -> Optional[str]:
    """
    Label of a container header line (`label:` alone), else None.

    Args:
        line: Trimmed layout line

    Returns:
        Container label, or None when the line is not a container header
    """
    if line.endswith(LABEL_DELIMITER) and _is_label(line[: -len(LABEL_DELIMITER)]):
        return line[: -len(LABEL_DELIMITER)]
    return None


def parse_field(line: str) -> Field:
    """
    Parse a field line, honoring a `label: ...` class override.

    The override applies only when the prefix before the first colon is a bare
    label and something follows the colon; otherwise the whole line is a plain
    field (so literals such as `"Phone: " phone` keep their colon).

    Args:
        line: Trimmed layout line

    Returns:
        Field with parts and optional css_class
    """
    prefix, delimiter, suffix = line.partition(LABEL_DELIMITER)
    suffix = suffix.strip()
    if delimiter and _is_label(prefix) and suffix:
        return Field(parts=tuple(split_field_parts(suffix)), css_class=prefix)
    return Field(parts=tuple(split_field_parts(line)))


@dataclass
class _SectionBuilder:
    name: str
    entries: List[FieldEntry] = field(default_factory=list)

    def build(self) -> Section:
        return Section(name=self.name, entries=tuple(self.entries))


@dataclass
class _ContainerBuilder:
    css_class: str
    fields: List[Field] = field(default_factory=list)

    def build(self) -> Container:
        return Container(css_class=self.css_class, fields=tuple(self.fields))


class LayoutParser:
    """
    Line-driven state machine over three states: no open section, open section,
    and open section with an open container.

    One parser instance can be reused; every call to parse() starts fresh.
    """

    def __init__(self):
        self._sections: List[Section] = []
        self._section: Optional[_SectionBuilder] = None
        self._container: Optional[_ContainerBuilder] = None

    def parse(self, content: str) -> Layout:
        """
        Parse layout text into a Layout.

        Args:
            content: Full layout text

        Returns:
            Immutable Layout with sections in source order
        """
        self._sections = []
        self._section = None
        self._container = None

        # Only "\n" ends a line; a trailing "\r" is removed by strip()
        for line in content.split("\n"):
            trimmed = line.strip()
            if not trimmed:
                continue

            depth = indent_width(line)
            if depth == SECTION_DEPTH:
                self._open_section(trimmed)
            elif depth >= CONTAINER_BODY_DEPTH:
                self._add_body_line(trimmed)
            else:
                # FIELD_DEPTH, and odd depths short of a container body
                self._add_section_line(trimmed)

        self._close_section()
        return Layout(sections=tuple(self._sections))

    def _open_section(self, name: str) -> None:
        self._close_section()
        self._section = _SectionBuilder(name=name)

    def _close_container(self) -> None:
        if self._container is not None and self._section is not None:
            self._section.entries.append(self._container.build())
        self._container = None

    def _close_section(self) -> None:
        self._close_container()
        if self._section is not None:
            self._sections.append(self._section.build())
        self._section = None

    def _add_section_line(self, line: str) -> None:
        self._close_container()
        # Lines before the first section header have nowhere to go
        if self._section is None:
            return

        label = container_label(line)
        if label is not None:
            self._container = _ContainerBuilder(css_class=label)
        else:
            self._section.entries.append(parse_field(line))

    def _add_body_line(self, line: str) -> None:
        if self._container is not None:
            self._container.fields.append(parse_field(line))
        elif self._section is not None:
            self._section.entries.append(Field(parts=tuple(split_field_parts(line))))


def parse_layout(content: str) -> Layout:
    """
    Parse layout text into a Layout.

    Args:
        content: Full layout text

    Returns:
        Immutable Layout
    """
    return LayoutParser().parse(content)


def describe_layout(layout: Layout) -> List[Tuple[int, str]]:
    """
    Flatten a Layout into (depth, description) rows for display.

    Args:
        layout: Parsed layout

    Returns:
        Rows such as (0, "person"), (1, 'field: name'), (1, "container: meta")
    """
    rows: List[Tuple[int, str]] = []
    for section in layout.sections:
        rows.append((0, section.name))
        for entry in section.entries:
            if isinstance(entry, Container):
                rows.append((1, f"container: {entry.css_class}"))
                rows.extend((2, _describe_field(f)) for f in entry.fields)
            else:
                rows.append((1, _describe_field(entry)))
    return rows


def _describe_field(field_: Field) -> str:
    tokens = [
        part.name if isinstance(part, Reference) else f'"{part.text}"' for part in field_.parts
    ]
    label = f" [{field_.css_class}]" if field_.css_class else ""
    return f"field{label}: {' '.join(tokens)}"
