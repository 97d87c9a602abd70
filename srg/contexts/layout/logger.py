"""
Layout context logger.

Provides logging interface for layout context with automatic [layout] prefix.
Layout modules log only at debug level; sinks are configured by the build
that loads them.
"""

from loguru import logger

CONTEXT_PREFIX = "[layout]"


def _log_debug(message: str) -> None:
    """Log debug message with [layout] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
