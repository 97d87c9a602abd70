"""
Logger setup shared by the contexts.

One call per build installs two loguru sinks, a DEBUG file in the build's log
directory and a console sink on stderr (stdout stays free for rendered HTML),
then writes a provenance header. Context modules wrap the global logger with
their own prefix in contexts/{context}/logger.py.
"""

import os
import sys
from pathlib import Path
from typing import Dict, Mapping, Optional

from dotenv import load_dotenv
from loguru import logger

from srg import __version__

load_dotenv()
CONSOLE_LEVEL = os.getenv("SRG_LOG_LEVEL", "INFO").upper()

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>"

LEVEL_COLORS: Dict[str, str] = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

PROVENANCE_RULE = "-" * 72


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Mapping[str, object]] = None,
    console_level: str = CONSOLE_LEVEL,
) -> Path:
    """
    Route loguru output for one build to {log_dir}/{context_name}.log and stderr.

    Any previously installed sinks are removed, so the most recent build owns
    the output.

    Args:
        context_name: Log file stem (e.g., "render")
        log_dir: Directory for this build's logs (created if missing)
        extra_provenance: Key-value pairs appended to the provenance header
        console_level: Minimum console level (default: SRG_LOG_LEVEL or INFO)

    Returns:
        Path to log file

    Example:
        log_file = setup_logger(
            "render",
            Path("outs/logs/build_20251114_123456"),
            extra_provenance={"Template": "jake"},
        )
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    provenance = {"Log level": console_level}
    provenance.update(extra_provenance or {})
    log_provenance(provenance)

    return log_file


def log_provenance(extra_context: Optional[Mapping[str, object]] = None) -> None:
    """
    Write a header describing how this run was invoked.

    The header is logged at DEBUG so it lands in the log file without
    cluttering the console.

    Args:
        extra_context: Additional key-value pairs to log
    """
    rows = {
        "srg": __version__,
        "Command": " ".join(sys.argv),
        "Working directory": Path.cwd(),
        "Python": sys.version.split()[0],
    }
    rows.update(extra_context or {})

    logger.debug(PROVENANCE_RULE)
    for key, value in rows.items():
        logger.debug(f"{key}: {value}")
    logger.debug(PROVENANCE_RULE)
