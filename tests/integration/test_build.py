"""
Integration tests for build orchestration and the CLI.

PDF export is replaced with a stub so no browser is needed.
"""

import importlib.util
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

from srg.contexts.layout import parse_layout
from srg.contexts.rendering import builder
from srg.contexts.rendering.builder import build_resume
from srg.contexts.rendering.exceptions import ExportError, UnknownTemplateError

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "build_resume.py"
FAKE_PDF = b"%PDF-1.4 fake"

DOCUMENT_YAML = """
person:
  name: Test User
  email: test@example.com
skills:
  Languages: [Rust, Python]
experience:
  - title: Engineer
    company: Test Co
    start: "2020"
    end: "2024"
    highlights:
      - Built stuff
"""


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger.remove()


@pytest.fixture
def fake_pdf(monkeypatch):
    exported = []

    def _html_to_pdf(html_path, options=None):
        exported.append(Path(html_path))
        return FAKE_PDF

    monkeypatch.setattr(builder, "html_to_pdf", _html_to_pdf)
    return exported


@pytest.mark.integration
def test_build_writes_html_and_pdf(test_document, tmp_path, fake_pdf):
    out_dir = tmp_path / "dist"

    result = build_resume(test_document, out_dir, log_dir=tmp_path / "logs")

    assert result.success
    assert result.html_path == out_dir / "index.html"
    assert result.pdf_path == out_dir / "resume.pdf"
    assert "Test User" in result.html_path.read_text(encoding="utf-8")
    assert result.pdf_path.read_bytes() == FAKE_PDF
    assert fake_pdf == [out_dir / "index.html"]
    assert (tmp_path / "logs" / "render.log").exists()


@pytest.mark.integration
def test_build_uses_given_layout(test_document, tmp_path, fake_pdf):
    layout = parse_layout("person\n  name\n")

    result = build_resume(
        test_document, tmp_path / "dist", layout=layout, export_pdf=False, log_dir=tmp_path / "logs"
    )

    html = result.html_path.read_text(encoding="utf-8")
    assert result.success
    assert result.pdf_path is None
    assert fake_pdf == []
    assert "test@example.com" not in html


@pytest.mark.integration
def test_build_export_failure_keeps_html(test_document, tmp_path, monkeypatch):
    def _failing(html_path, options=None):
        raise ExportError("Failed to generate PDF", html_path=html_path)

    monkeypatch.setattr(builder, "html_to_pdf", _failing)

    result = build_resume(test_document, tmp_path / "dist", log_dir=tmp_path / "logs")

    assert not result.success
    assert "Failed to generate PDF" in result.error
    assert result.html_path.exists()
    assert result.pdf_path is None
    assert not (tmp_path / "dist" / "resume.pdf").exists()


@pytest.mark.integration
def test_build_unknown_template_writes_nothing(test_document, tmp_path, fake_pdf):
    out_dir = tmp_path / "dist"

    with pytest.raises(UnknownTemplateError):
        build_resume(test_document, out_dir, template="nope", log_dir=tmp_path / "logs")

    assert not out_dir.exists()


@pytest.fixture
def cli():
    spec = importlib.util.spec_from_file_location("build_resume", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module.app


@pytest.fixture
def document_file(tmp_path):
    path = tmp_path / "resume.yaml"
    path.write_text(DOCUMENT_YAML, encoding="utf-8")
    return path


@pytest.mark.integration
def test_cli_render_to_stdout(cli, document_file):
    result = CliRunner().invoke(cli, ["render", str(document_file), "--theme", "minimal"])

    assert result.exit_code == 0
    assert "<!DOCTYPE html>" in result.output
    assert "<li>Built stuff</li>" in result.output


@pytest.mark.integration
def test_cli_render_with_layout_file(cli, document_file, tmp_path):
    layout_file = tmp_path / "mine.resume"
    layout_file.write_text('experience\n  start " - " end\n', encoding="utf-8")
    output = tmp_path / "out.html"

    result = CliRunner().invoke(
        cli, ["render", str(document_file), "--layout", str(layout_file), "-o", str(output)]
    )

    assert result.exit_code == 0
    assert "2020 - 2024" in output.read_text(encoding="utf-8")


@pytest.mark.integration
@pytest.mark.parametrize(
    "args",
    [
        ["--template", "nope"],
        ["--theme", "nope"],
        ["--layout", "missing.resume"],
    ],
)
def test_cli_render_configuration_errors(cli, document_file, args):
    result = CliRunner().invoke(cli, ["render", str(document_file), *args])

    assert result.exit_code == 1


@pytest.mark.integration
def test_cli_render_invalid_document(cli, tmp_path):
    path = tmp_path / "resume.yaml"
    path.write_text("person:\n  name: null\n", encoding="utf-8")

    result = CliRunner().invoke(cli, ["render", str(path)])

    assert result.exit_code == 1
    assert not isinstance(result.exception, TypeError)


@pytest.mark.integration
def test_cli_build_without_pdf(cli, document_file, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = CliRunner().invoke(cli, ["build", str(document_file), "--out", "site", "--no-pdf"])

    assert result.exit_code == 0
    assert (tmp_path / "site" / "index.html").exists()
    assert not (tmp_path / "site" / "resume.pdf").exists()


@pytest.mark.integration
def test_cli_layout(cli):
    result = CliRunner().invoke(cli, ["layout", "--theme", "jake"])

    assert result.exit_code == 0
    assert "experience" in result.output
    assert "container: heading" in result.output


@pytest.mark.integration
def test_cli_themes(cli):
    result = CliRunner().invoke(cli, ["themes"])

    assert result.exit_code == 0
    assert "compact" in result.output
    assert "minimal (default)" in result.output
