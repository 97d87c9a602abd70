"""
PDF Export Module

Converts a generated HTML file to PDF bytes by printing it from headless
Chromium through Playwright.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from srg.contexts.rendering.exceptions import ExportError
from srg.contexts.rendering.logger import _log_debug

load_dotenv()
PDF_OPTIONS_PATH = Path(
    os.getenv("SRG_PDF_OPTIONS_PATH", Path(__file__).parent / "pdf_options.yaml")
)


def load_pdf_options(options_path: Path = PDF_OPTIONS_PATH) -> Dict[str, Any]:
    """
    Load print-to-PDF options and map them to Playwright's page.pdf() keywords.

    Args:
        options_path: YAML file with paper, margin and print settings

    Returns:
        Keyword arguments for page.pdf()
    """
    config = OmegaConf.to_container(OmegaConf.load(options_path), resolve=True)
    return {
        "width": config["paper"]["width"],
        "height": config["paper"]["height"],
        "margin": dict(config["margin"]),
        "landscape": config.get("landscape", False),
        "print_background": config.get("print_background", True),
        "display_header_footer": config.get("display_header_footer", False),
        "scale": config.get("scale", 1.0),
        "prefer_css_page_size": config.get("prefer_css_page_size", False),
    }


def html_to_pdf(html_path: Path, options: Optional[Dict[str, Any]] = None) -> bytes:
    """
    Print an HTML file to PDF with headless Chromium.

    Args:
        html_path: Path to the HTML file (loaded via file:// URL so relative
                   assets resolve)
        options: page.pdf() keyword arguments (default: from pdf_options.yaml)

    Returns:
        PDF file content

    Raises:
        ExportError: If the file is missing or the browser fails
    """
    html_path = Path(html_path)
    if not html_path.exists():
        raise ExportError("HTML file not found", html_path=html_path)

    pdf_options = options if options is not None else load_pdf_options()
    url = html_path.resolve().as_uri()
    _log_debug(f"Printing {url} to PDF")

    try:
        with sync_playwright() as p:
            browser = p.chromium.launch()
            try:
                page = browser.new_page()
                page.goto(url, wait_until="load")
                pdf_data = page.pdf(**pdf_options)
            finally:
                browser.close()
    except PlaywrightError as e:
        raise ExportError("Failed to generate PDF", html_path=html_path, original_error=e) from e

    _log_debug(f"Generated PDF ({len(pdf_data)} bytes)")
    return pdf_data
