"""
Document Context

Responsibilities:
- Holds the in-memory resume document (person, skills, experience, projects, education)
- Exposes per-entity field resolvers used by the renderer
- Builds documents from plain mappings and YAML/JSON files

Owns: Resume document model
Never: Decides what is displayed or how
"""

from srg.contexts.document.exceptions import InvalidDocumentError
from srg.contexts.document.resume_data_structure import (
    EducationItem,
    ExperienceItem,
    Person,
    ProjectItem,
    ResumeDocument,
    load_document,
)

__all__ = [
    "ResumeDocument",
    "Person",
    "ExperienceItem",
    "ProjectItem",
    "EducationItem",
    "load_document",
    "InvalidDocumentError",
]
