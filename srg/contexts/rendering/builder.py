"""
Resume Build Orchestration

Writes the rendered HTML for a resume document and exports it to PDF,
with per-build logging.
"""

import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from srg.contexts.document.resume_data_structure import ResumeDocument
from srg.contexts.layout.layout_data_structures import Layout
from srg.contexts.layout.themes import default_layout
from srg.contexts.rendering.exceptions import ExportError
from srg.contexts.rendering.exporter import html_to_pdf
from srg.contexts.rendering.html_generator import LayoutToHTMLConverter
from srg.contexts.rendering.logger import (
    _log_debug,
    _log_error,
    log_build_result,
    log_build_start,
    setup_rendering_logger,
)
from srg.contexts.rendering.registries import DEFAULT_TEMPLATE
from srg.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

HTML_FILENAME = "index.html"
PDF_FILENAME = "resume.pdf"


@dataclass
class BuildResult:
    """
    Result of building a resume.

    Attributes:
        success: Whether every requested output was written
        html_path: Path to generated HTML (None if rendering failed)
        pdf_path: Path to generated PDF (None if skipped or failed)
        error: Error description when success is False
        time_s: Wall-clock build time
        log_dir: Directory holding render.log for this build
    """

    success: bool
    html_path: Optional[Path] = None
    pdf_path: Optional[Path] = None
    error: Optional[str] = None
    time_s: float = 0.0
    log_dir: Optional[Path] = None


def build_resume(
    document: ResumeDocument,
    out_dir: Path,
    template: str = DEFAULT_TEMPLATE,
    layout: Optional[Layout] = None,
    export_pdf: bool = True,
    log_dir: Optional[Path] = None,
) -> BuildResult:
    """
    Build HTML and PDF outputs for a resume document.

    Configuration errors surface before anything is written. Export failures
    are reported in the result and leave the HTML in place for inspection.

    Args:
        document: Resume document
        out_dir: Output directory (created if missing)
        template: Template name
        layout: Parsed layout (default: the default theme)
        export_pdf: Also print the HTML to PDF (default: True)
        log_dir: Directory for this build's log (default: timestamped under LOGS_PATH)

    Returns:
        BuildResult with output paths and timing

    Raises:
        UnknownTemplateError: If the template name is not known
    """
    converter = LayoutToHTMLConverter(template=template)
    if layout is None:
        layout = default_layout()

    if log_dir is None:
        log_dir = LOGS_PATH / f"build_{now()}"
    log_file = setup_rendering_logger(log_dir, template)

    out_dir = Path(out_dir)
    log_build_start(document.person.name, out_dir, template, log_file)
    start_time = time.time()

    out_dir.mkdir(parents=True, exist_ok=True)
    html_path = out_dir / HTML_FILENAME
    html_path.write_text(converter.generate_document(document, layout), encoding="utf-8")
    _log_debug(f"Rendered {len(layout)} layout sections to {html_path}")

    result = BuildResult(success=True, html_path=html_path, log_dir=log_dir)

    if export_pdf:
        pdf_path = out_dir / PDF_FILENAME
        try:
            pdf_path.write_bytes(html_to_pdf(html_path))
            result.pdf_path = pdf_path
        except ExportError as e:
            _log_error("PDF export failed; keeping HTML for debugging")
            result.success = False
            result.error = str(e)
    else:
        _log_debug("Skipping PDF export")

    result.time_s = time.time() - start_time
    log_build_result(result, result.time_s)
    return result
