"""
VELLUM - Versatile Engine for Layout of Lightweight User Manuscripts

A template-driven layout engine that turns an editable resume document into a
renderer-agnostic page tree. Templates are data, not code.

Architecture:
- Templating Context: Template catalog, design tokens, template lint
- Composition Context: Section materialization, ordering, region composition, assembly
- Rendering Context: Reference renderers that walk the page tree (HTML, Markdown)
"""

__version__ = "0.1.0"
