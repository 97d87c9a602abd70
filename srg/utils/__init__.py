"""
Shared utilities for SRG.

Common functionality used across contexts:
- Logger setup with provenance tracking
- Timestamps for log directory naming
"""

from srg.utils.timestamp import now

__all__ = ["now"]
