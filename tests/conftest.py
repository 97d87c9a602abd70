"""Shared fixtures for SRG tests."""

import pytest

from srg.contexts.document.resume_data_structure import (
    EducationItem,
    ExperienceItem,
    Person,
    ProjectItem,
    ResumeDocument,
)


@pytest.fixture
def test_document() -> ResumeDocument:
    """Fully populated document with one item per list section."""
    return ResumeDocument(
        person=Person(
            name="Test User",
            headline="Software Engineer",
            email="test@example.com",
            phone="555-1234",
            location="Test City",
            website="https://example.com",
            summary="Test summary",
        ),
        skills={"Languages": ["Rust", "Python"]},
        experience=[
            ExperienceItem(
                title="Engineer",
                company="Test Co",
                start="2020",
                end="2024",
                summary="Did things",
                highlights=["Built stuff"],
            )
        ],
        projects=[
            ProjectItem(name="srg", url="https://example.com/srg", summary="Resume generator")
        ],
        education=[
            EducationItem(
                degree="BS CS",
                institution="Test U",
                start="2016",
                end="2020",
            )
        ],
    )
