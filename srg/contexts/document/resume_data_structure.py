"""
Resume Document Structure

In-memory resume document consumed read-only by the rendering context.

Each entity exposes the resolver capability the renderer needs:
- resolve(name): optional string value of a scalar (or joined list) field
- resolve_list(name): items of a list field (empty when absent)

Content validation (required vs optional business fields) belongs to whatever
produced the document; from_dict() only checks that required keys are present.
"""

from dataclasses import MISSING, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Tuple

import yaml
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from srg.contexts.document.exceptions import InvalidDocumentError

LIST_JOIN_SEPARATOR = ", "


class _Entity:
    """Resolver capability shared by every document entity."""

    SCALAR_FIELDS: ClassVar[Tuple[str, ...]] = ()
    LIST_FIELDS: ClassVar[Tuple[str, ...]] = ()

    def resolve(self, name: str) -> Optional[str]:
        """
        Look up a field by layout reference name.

        List fields resolve to their items joined with ", " so they can be
        composed inline; empty lists and unknown names resolve to None.
        """
        if name in self.SCALAR_FIELDS:
            return getattr(self, name)
        if name in self.LIST_FIELDS:
            items = getattr(self, name)
            return LIST_JOIN_SEPARATOR.join(items) if items else None
        return None

    def resolve_list(self, name: str) -> List[str]:
        if name in self.LIST_FIELDS:
            return list(getattr(self, name))
        return []

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], where: str = ""):
        """
        Build the entity from a mapping, ignoring keys it does not know.

        Raises:
            InvalidDocumentError: If a required key is missing or null
        """
        if not isinstance(data, Mapping):
            raise InvalidDocumentError(f"Expected a mapping, got {type(data).__name__}", where)

        known = {f.name for f in fields(cls)}
        missing = [
            f.name
            for f in fields(cls)
            if f.default is MISSING and f.default_factory is MISSING and data.get(f.name) is None
        ]
        if missing:
            raise InvalidDocumentError(f"Missing required field(s): {', '.join(missing)}", where)

        values = {}
        for key, value in data.items():
            if key not in known or value is None:
                continue
            if key in cls.LIST_FIELDS:
                if not isinstance(value, list):
                    raise InvalidDocumentError(f"Expected a list for '{key}'", where)
                values[key] = [str(item) for item in value]
            else:
                values[key] = str(value)
        return cls(**values)


@dataclass
class Person(_Entity):
    """
    The resume owner.

    Attributes:
        name: Full name (required)
        headline: Professional title shown under the name
        summary: Free-text professional summary (drives the summary section)
    """

    SCALAR_FIELDS: ClassVar[Tuple[str, ...]] = (
        "name",
        "headline",
        "email",
        "phone",
        "location",
        "website",
        "summary",
    )

    name: str
    headline: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None
    summary: Optional[str] = None


@dataclass
class ExperienceItem(_Entity):
    """A single position held."""

    SCALAR_FIELDS: ClassVar[Tuple[str, ...]] = (
        "title",
        "company",
        "location",
        "start",
        "end",
        "summary",
    )
    LIST_FIELDS: ClassVar[Tuple[str, ...]] = ("highlights", "technologies")

    title: str
    company: str
    location: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None
    summary: Optional[str] = None
    highlights: List[str] = field(default_factory=list)
    technologies: List[str] = field(default_factory=list)


@dataclass
class ProjectItem(_Entity):
    SCALAR_FIELDS: ClassVar[Tuple[str, ...]] = ("name", "url", "summary")

    name: str
    url: Optional[str] = None
    summary: Optional[str] = None


@dataclass
class EducationItem(_Entity):
    SCALAR_FIELDS: ClassVar[Tuple[str, ...]] = (
        "degree",
        "institution",
        "location",
        "start",
        "end",
    )
    LIST_FIELDS: ClassVar[Tuple[str, ...]] = ("details",)

    degree: str
    institution: str
    location: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None
    details: List[str] = field(default_factory=list)


@dataclass
class ResumeDocument:
    """
    Complete resume document.

    Attributes:
        person: Resume owner
        skills: Ordered mapping from category name to skill names (None when absent)
        experience: Positions, in display order
        projects: Projects, in display order
        education: Degrees, in display order
    """

    person: Person
    skills: Optional[Dict[str, List[str]]] = None
    experience: List[ExperienceItem] = field(default_factory=list)
    projects: List[ProjectItem] = field(default_factory=list)
    education: List[EducationItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ResumeDocument":
        """
        Build a document from a plain mapping (e.g., loaded YAML or JSON).

        Args:
            data: Mapping with a required "person" key and optional
                  "skills", "experience", "projects" and "education" keys

        Returns:
            ResumeDocument instance

        Raises:
            InvalidDocumentError: If required keys are missing or mistyped
        """
        if not isinstance(data, Mapping):
            raise InvalidDocumentError("Document root must be a mapping")
        if "person" not in data:
            raise InvalidDocumentError("Missing required field(s): person")

        skills = data.get("skills")
        if skills is not None:
            if not isinstance(skills, Mapping):
                raise InvalidDocumentError("Expected a mapping of category to skills", "skills")
            skills = {
                str(category): _skill_list(items, category) for category, items in skills.items()
            }

        return cls(
            person=Person.from_dict(data["person"], "person"),
            skills=skills,
            experience=_items(ExperienceItem, data, "experience"),
            projects=_items(ProjectItem, data, "projects"),
            education=_items(EducationItem, data, "education"),
        )


def _skill_list(items: Any, category: Any) -> List[str]:
    if items is None:
        return []
    if not isinstance(items, list):
        raise InvalidDocumentError(f"Expected a list of skills for '{category}'", "skills")
    return [str(skill) for skill in items]


def _items(item_cls, data: Mapping[str, Any], key: str) -> list:
    raw = data.get(key) or []
    if not isinstance(raw, list):
        raise InvalidDocumentError("Expected a list", key)
    return [item_cls.from_dict(item, f"{key}[{index}]") for index, item in enumerate(raw)]


def load_document(path: Path) -> ResumeDocument:
    """
    Load a resume document from a YAML (or JSON) file.

    Args:
        path: Path to document file

    Returns:
        ResumeDocument instance

    Raises:
        FileNotFoundError: If path does not exist
        InvalidDocumentError: If the file is not valid YAML or the structure is invalid
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Document file not found: {path}")

    # Resume text is data: "${...}" stays literal
    try:
        data = OmegaConf.to_container(OmegaConf.load(path), resolve=False)
    except (OmegaConfBaseException, yaml.YAMLError) as e:
        raise InvalidDocumentError(f"Failed to load document: {e}", str(path)) from e
    return ResumeDocument.from_dict(data)
