"""Unit tests for TemplateRegistry class."""

from pathlib import Path

import pytest

from srg.contexts.rendering.exceptions import UnknownTemplateError
from srg.contexts.rendering.registries import TemplateRegistry


@pytest.mark.unit
def test_template_registry_init():
    """Test TemplateRegistry initialization."""
    registry = TemplateRegistry()
    assert registry.templates_base_path.exists()
    assert registry._cache == {}


@pytest.mark.unit
def test_available_templates():
    assert {"minimal", "jake"} <= set(TemplateRegistry().available_templates())


@pytest.mark.unit
def test_get_template_minimal():
    """Test loading minimal template."""
    registry = TemplateRegistry()
    template = registry.get_template("minimal")

    assert template.name == "minimal"
    assert template.style.strip()
    assert "minimal" in registry._cache


@pytest.mark.unit
def test_template_caching():
    """Test that templates are cached after first load."""
    registry = TemplateRegistry()

    template1 = registry.get_template("jake")
    assert registry.is_cached("jake")

    template2 = registry.get_template("jake")
    assert template1 is template2


@pytest.mark.unit
def test_get_template_not_found():
    """Test error handling for missing template."""
    registry = TemplateRegistry()

    with pytest.raises(UnknownTemplateError) as exc_info:
        registry.get_template("nonexistent_template")

    assert "Unknown template: nonexistent_template" in str(exc_info.value)
    assert exc_info.value.template_name == "nonexistent_template"


@pytest.mark.unit
def test_get_template_path():
    path = TemplateRegistry().get_template_path("minimal")

    assert isinstance(path, Path)
    assert path.name == "minimal"
    assert (path / "document.html.jinja").exists()


@pytest.mark.unit
def test_clear_cache():
    registry = TemplateRegistry()
    registry.get_template("minimal")
    assert len(registry._cache) == 1

    registry.clear_cache()
    assert len(registry._cache) == 0


@pytest.mark.unit
def test_shell_escapes_title_but_not_sections():
    """Test that the shell autoescapes plain values and trusts Markup fragments."""
    from markupsafe import Markup

    template = TemplateRegistry().get_template("minimal")
    html = template.shell.render(
        title="A <B>", style=Markup(""), sections=[Markup("<section>ok</section>")]
    )

    assert "<title>A &lt;B&gt;</title>" in html
    assert "<section>ok</section>" in html


@pytest.mark.unit
def test_custom_templates_directory(tmp_path):
    (tmp_path / "bare").mkdir()
    (tmp_path / "bare" / "document.html.jinja").write_text(
        "<html>{{ title }}{% for s in sections %}{{ s }}{% endfor %}{{ style }}</html>",
        encoding="utf-8",
    )

    registry = TemplateRegistry(templates_base_path=tmp_path)
    template = registry.get_template("bare")

    assert registry.available_templates() == ["bare"]
    assert template.style == ""
