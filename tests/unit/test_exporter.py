"""
Unit tests for PDF export settings and input checks.

Browser printing itself is exercised through the build integration tests with
a stubbed exporter.
"""

import pytest

from srg.contexts.rendering.exceptions import ExportError
from srg.contexts.rendering.exporter import html_to_pdf, load_pdf_options


@pytest.mark.unit
def test_default_pdf_options():
    """Test that the bundled settings print Letter paper with 0.4in margins."""
    options = load_pdf_options()

    assert options["width"] == "8.5in"
    assert options["height"] == "11in"
    assert options["margin"] == {
        "top": "0.4in",
        "bottom": "0.4in",
        "left": "0.4in",
        "right": "0.4in",
    }
    assert options["print_background"] is True
    assert options["landscape"] is False


@pytest.mark.unit
def test_pdf_options_fill_defaults(tmp_path):
    options_path = tmp_path / "a4.yaml"
    options_path.write_text(
        "paper:\n  width: 210mm\n  height: 297mm\nmargin:\n  top: 1cm\n", encoding="utf-8"
    )

    options = load_pdf_options(options_path)

    assert options["width"] == "210mm"
    assert options["margin"] == {"top": "1cm"}
    assert options["print_background"] is True
    assert options["scale"] == 1.0


@pytest.mark.unit
def test_html_to_pdf_missing_file(tmp_path):
    missing = tmp_path / "index.html"

    with pytest.raises(ExportError) as exc_info:
        html_to_pdf(missing)

    assert exc_info.value.html_path == missing
    assert "HTML file not found" in str(exc_info.value)
