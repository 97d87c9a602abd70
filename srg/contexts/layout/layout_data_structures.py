"""
Layout Data Structures

Defines the parsed form of a layout description: an ordered tree of sections,
each holding fields and containers, where every field is a composition of
literal text and references into the document entity being rendered.

All structures are frozen so a parsed Layout can be cached and shared
between concurrent renders.
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple, Union


@dataclass(frozen=True)
class Reference:
    """
    Field token naming a value on the entity currently being rendered.

    Attributes:
        name: Lookup key (e.g., "email", "start")
    """

    name: str


@dataclass(frozen=True)
class Literal:
    """
    Field token emitted verbatim (after escaping), independent of document data.

    Attributes:
        text: Text between the double quotes in the layout line
    """

    text: str


FieldPart = Union[Reference, Literal]


@dataclass(frozen=True)
class Field:
    """
    One line/fragment of output, composed of literal and reference parts.

    Attributes:
        parts: Ordered literal/reference tokens
        css_class: Class label from a `label: ...` prefix, None when absent
    """

    parts: Tuple[FieldPart, ...] = ()
    css_class: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.parts

    def single_reference(self) -> Optional[str]:
        """
        Name of the referenced field when this field is exactly one Reference.

        Returns:
            Reference name, or None for multi-part, literal-only or empty fields
        """
        if len(self.parts) == 1 and isinstance(self.parts[0], Reference):
            return self.parts[0].name
        return None


@dataclass(frozen=True)
class Container:
    """
    Group of fields under a shared class label, nested inside a section.

    Attributes:
        css_class: Label from the `label:` header line
        fields: Ordered fields from the indented body
    """

    css_class: str
    fields: Tuple[Field, ...] = ()


FieldEntry = Union[Field, Container]


@dataclass(frozen=True)
class Section:
    """
    Named top-level grouping of a layout.

    Attributes:
        name: Semantic identifier dispatched on by the renderer (e.g., "person")
        entries: Ordered fields and containers, in source order
    """

    name: str
    entries: Tuple[FieldEntry, ...] = ()

    @property
    def fields(self) -> Tuple[Field, ...]:
        """All fields in source order, with container fields flattened in place."""
        return tuple(self.iter_fields())

    def iter_fields(self) -> Iterator[Field]:
        for entry in self.entries:
            if isinstance(entry, Container):
                yield from entry.fields
            else:
                yield entry

    @property
    def containers(self) -> Tuple[Container, ...]:
        return tuple(entry for entry in self.entries if isinstance(entry, Container))


@dataclass(frozen=True)
class Layout:
    """
    Ordered sequence of sections. Duplicate section names are allowed.

    Attributes:
        sections: Sections in source order
    """

    sections: Tuple[Section, ...] = field(default_factory=tuple)

    def section_names(self) -> Tuple[str, ...]:
        return tuple(section.name for section in self.sections)

    def __len__(self) -> int:
        return len(self.sections)

    def __iter__(self) -> Iterator[Section]:
        return iter(self.sections)
