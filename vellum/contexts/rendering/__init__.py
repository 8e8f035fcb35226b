"""
Rendering Context

Responsibilities:
- Registers font assets before anything is drawn
- Draws page trees as print-ready HTML (Jinja2) or plain Markdown
- Reports drawing failures with diagnostic context

Owns: Font registry, HTML/Markdown output
Never: Knows about templates, regions allow-lists or document content rules
"""

from vellum.contexts.rendering.exceptions import RenderError
from vellum.contexts.rendering.fonts import (
    BUILTIN_FONTS,
    DEFAULT_FONT_ASSETS,
    FontAsset,
    FontRegistry,
    initialize_renderer,
)
from vellum.contexts.rendering.html_renderer import HTMLRenderer, style_to_css
from vellum.contexts.rendering.markdown_renderer import render_markdown

__all__ = [
    "RenderError",
    "FontAsset",
    "FontRegistry",
    "BUILTIN_FONTS",
    "DEFAULT_FONT_ASSETS",
    "initialize_renderer",
    "HTMLRenderer",
    "style_to_css",
    "render_markdown",
]
