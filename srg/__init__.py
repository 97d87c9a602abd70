"""
SRG - Static Resume Generator

Renders a structured resume document into HTML (and PDF) through a small,
indentation-sensitive layout language that decides which fields appear,
in what order, and how literal text and field references are composed.

Architecture:
- Layout Context: Layout text tokenizing, parsing and built-in themes
- Document Context: In-memory resume document model
- Rendering Context: HTML generation, templates, PDF export and build output
"""

__version__ = "0.1.0"
