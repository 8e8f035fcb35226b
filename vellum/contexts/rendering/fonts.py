"""
Font Registration

Fonts are registered explicitly, once, when a renderer is initialized.
Nothing is registered as a side effect of importing this module.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from vellum.contexts.rendering.logger import _log_debug, log_fonts_registered

# Families every target can draw without an @font-face rule
BUILTIN_FONTS = (
    "Helvetica",
    "Helvetica-Bold",
    "Arial",
    "Times-Roman",
    "Times New Roman",
    "Courier",
    "Georgia",
    "Georgia-Bold",
    "serif",
    "sans-serif",
    "monospace",
)


@dataclass(frozen=True)
class FontAsset:
    """
    One downloadable font face.

    Attributes:
        family: Font family name used in styles (e.g., 'Inter')
        src: URL or path of the font file
        weight: CSS font weight (400 regular, 700 bold)
        style: 'normal' or 'italic'
    """

    family: str
    src: str
    weight: int = 400
    style: str = "normal"

    @property
    def format(self) -> str:
        """CSS format() hint derived from the file extension."""
        suffix = self.src.rsplit(".", 1)[-1].lower()
        return {"woff2": "woff2", "woff": "woff", "ttf": "truetype", "otf": "opentype"}.get(
            suffix, suffix
        )


DEFAULT_FONT_ASSETS: Tuple[FontAsset, ...] = (
    FontAsset("Inter", "https://rsms.me/inter/font-files/Inter-Regular.woff2", weight=400),
    FontAsset("Inter", "https://rsms.me/inter/font-files/Inter-Bold.woff2", weight=700),
)


class FontRegistry:
    """Font faces known to a renderer, keyed by (family, weight, style)."""

    def __init__(self):
        self._faces: Dict[Tuple[str, int, str], FontAsset] = {}

    def register(self, assets: Iterable[FontAsset]) -> None:
        """Register font faces; a face registered twice keeps the latest source."""
        for asset in assets:
            key = (asset.family, asset.weight, asset.style)
            if key in self._faces:
                _log_debug(f"Replacing font face {asset.family} {asset.weight} {asset.style}")
            self._faces[key] = asset
        log_fonts_registered(self.families)

    @property
    def families(self) -> List[str]:
        return sorted({family for family, _, _ in self._faces})

    @property
    def assets(self) -> List[FontAsset]:
        """Registered faces in a stable order."""
        return [self._faces[key] for key in sorted(self._faces)]

    def is_available(self, family: str) -> bool:
        """True if the family is registered or built in."""
        return family in BUILTIN_FONTS or any(family == f for f, _, _ in self._faces)

    def clear(self) -> None:
        self._faces.clear()

    def __len__(self) -> int:
        return len(self._faces)


def initialize_renderer(font_assets: Iterable[FontAsset] = DEFAULT_FONT_ASSETS):
    """
    Register fonts and build an HTML renderer.

    Args:
        font_assets: Font faces to register

    Returns:
        HTMLRenderer bound to a fresh FontRegistry

    Example:
        renderer = initialize_renderer()
        html = renderer.render(render_page_tree(document, "modern"))
    """
    from vellum.contexts.rendering.html_renderer import HTMLRenderer

    registry = FontRegistry()
    registry.register(font_assets)
    return HTMLRenderer(font_registry=registry)
