"""
Integration tests for layout parsing + HTML rendering.

Tests: layout text -> Layout -> HTML against a populated document.
"""

import pytest

from srg.contexts.document.resume_data_structure import ExperienceItem, Person, ResumeDocument
from srg.contexts.layout import load_theme, parse_layout
from srg.contexts.rendering import render_html


@pytest.mark.integration
def test_minimal_layout_excludes_fields(test_document):
    """Test that fields missing from the layout are not rendered."""
    layout = parse_layout("person\n  name\n")

    html = render_html(layout, test_document, "minimal")

    assert "Test User" in html
    assert "test@example.com" not in html
    assert "555-1234" not in html
    assert "Software Engineer" not in html


@pytest.mark.integration
def test_full_person_section(test_document):
    layout = parse_layout(
        """
person
  name
  headline
  email
  phone
  location
  website
"""
    )

    html = render_html(layout, test_document, "minimal")

    for value in [
        "Test User",
        "Software Engineer",
        "test@example.com",
        "555-1234",
        "Test City",
        "https://example.com",
    ]:
        assert value in html


@pytest.mark.integration
def test_section_ordering(test_document):
    """Test that output order follows the layout, not the document."""
    layout = parse_layout(
        """
education
  degree

experience
  title
"""
    )

    html = render_html(layout, test_document, "minimal")

    assert html.find("Education") < html.find("Experience")
    assert html.find("BS CS") < html.find("Engineer")


@pytest.mark.integration
def test_date_range_format(test_document):
    layout = parse_layout('experience\n  start " - " end\n')

    html = render_html(layout, test_document, "minimal")

    assert "2020 - 2024" in html


@pytest.mark.integration
def test_highlights_render_as_list(test_document):
    test_document.experience[0].highlights = ["Built stuff", "Fixed things"]
    layout = parse_layout("experience\n  highlights\n")

    html = render_html(layout, test_document, "minimal")

    assert '<ul class="experience-highlights">' in html
    assert "<li>Built stuff</li>" in html
    assert "<li>Fixed things</li>" in html


@pytest.mark.integration
def test_empty_highlights_render_nothing(test_document):
    test_document.experience[0].highlights = []
    layout = parse_layout("experience\n  highlights\n")

    html = render_html(layout, test_document, "minimal")

    assert "<ul" not in html
    assert "<li>" not in html


@pytest.mark.integration
def test_markup_in_values_and_literals_is_escaped():
    document = ResumeDocument(
        person=Person(
            name='<script>alert("x")</script>',
            email="a&b@example.com",
            headline='Say "hi"',
        )
    )
    layout = parse_layout('person\n  name\n  email\n  "<b>" headline "</b>"\n')

    html = render_html(layout, document, "minimal")

    assert "<script>" not in html
    assert "&lt;script&gt;" in html
    assert "a&b@" not in html
    assert "a&amp;b@example.com" in html
    assert "<b>" not in html
    assert '"hi"' not in html
    assert "&lt;b&gt;Say &#34;hi&#34;&lt;/b&gt;" in html


@pytest.mark.integration
def test_absent_optional_fields_leave_no_empty_markup():
    document = ResumeDocument(person=Person(name="Ada"))
    layout = parse_layout("person\n  name\n  email\n  website\n\nsummary\n\nskills\n\nprojects\n  name\n")

    html = render_html(layout, document, "minimal")

    assert 'class="person-email"' not in html
    assert 'class="person-website"' not in html
    assert '<section id="summary"' not in html
    assert '<section id="skills"' not in html
    assert '<section id="projects"' not in html


@pytest.mark.integration
@pytest.mark.parametrize("theme", ["minimal", "jake", "compact"])
@pytest.mark.parametrize("template", ["minimal", "jake"])
def test_builtin_themes_render(test_document, theme, template):
    """Test that every built-in theme renders with every template."""
    html = render_html(load_theme(theme), test_document, template)

    assert "Test User" in html
    assert "Engineer" in html
    assert "BS CS" in html


@pytest.mark.integration
def test_jake_theme_composition(test_document):
    test_document.experience[0].technologies = ["Rust", "Python"]

    html = render_html(load_theme("jake"), test_document, "jake")

    assert '<p class="contact">555-1234 | test@example.com | https://example.com</p>' in html
    assert '<p class="dates">2020 - 2024</p>' in html
    assert '<p class="stack">Technologies: Rust, Python</p>' in html


@pytest.mark.integration
def test_minimal_theme_full_document(test_document):
    html = render_html(load_theme("minimal"), test_document, "minimal")

    positions = [
        html.find('<header id="person"'),
        html.find('<section id="summary"'),
        html.find('<section id="skills"'),
        html.find('<section id="experience"'),
        html.find('<section id="projects"'),
        html.find('<section id="education"'),
    ]
    assert -1 not in positions
    assert positions == sorted(positions)
    assert '<span class="skills-items">Rust, Python</span>' in html
    assert '<p class="summary-text">Test summary</p>' in html


@pytest.mark.integration
def test_render_is_repeatable(test_document):
    """Test that rendering twice from one cached layout gives identical output."""
    layout = load_theme("minimal")

    assert render_html(layout, test_document) == render_html(layout, test_document)


@pytest.mark.integration
def test_document_is_not_mutated(test_document):
    item = ExperienceItem(title="Eng", company="Co", highlights=["a"])
    test_document.experience = [item]

    render_html(load_theme("minimal"), test_document)

    assert item.highlights == ["a"]
    assert test_document.experience == [item]
