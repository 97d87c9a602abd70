"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from srg.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, template: str) -> Path:
    """
    Setup logger for rendering context.

    Configures loguru with provenance tracking and rendering-specific context.

    Args:
        log_dir: Directory for this build session
        template: Template name recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Template": template},
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_build_start(person_name: str, out_dir: Path, template: str, log_file: Path) -> None:
    """Log start of a build with context."""
    _log_info(f"Building resume for {person_name}")
    _log_info(f"Log file: {log_file}")
    _log_debug(f"Output directory: {out_dir}")
    _log_debug(f"Template: {template}")


def log_build_result(result, elapsed_time: float) -> None:
    """
    Log build result.

    Args:
        result: BuildResult from build_resume()
        elapsed_time: Time taken
    """
    if result.success:
        _log_success(f"Build succeeded ({elapsed_time:.2f}s)")
        _log_info(f"  HTML: {result.html_path}")
        if result.pdf_path:
            _log_info(f"  PDF:  {result.pdf_path}")
    else:
        _log_error(f"Build failed ({elapsed_time:.2f}s)")
        if result.error:
            _log_error(f"  Error: {result.error}")
