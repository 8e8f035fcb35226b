"""
HTML Renderer

Draws a PageTree as a single print-ready HTML document using Jinja2.
Style roles baked into the tree are translated to inline CSS; pagination is
left to the browser/print engine, with atomic blocks marked so they are not
split across pages.
"""

from pathlib import Path
from typing import Any, Dict, Mapping, Set

from jinja2 import Environment, FileSystemLoader, TemplateError

from vellum.contexts.composition.page_tree import Node, PageTree, RegionNode
from vellum.contexts.rendering.exceptions import RenderError
from vellum.contexts.rendering.fonts import FontRegistry
from vellum.contexts.rendering.logger import _log_error, _log_warning, log_render_result

TEMPLATES_DIR = Path(__file__).parent / "templates"
PAGE_TEMPLATE = "page.html.jinja"

# Numeric properties that take no unit
UNITLESS_PROPERTIES = {"font_weight", "line_height", "flex_grow", "flex_shrink", "opacity"}


def _format_number(value: float) -> str:
    return f"{value:g}"


def css_value(name: str, value: Any) -> str:
    """Translate one style value to CSS (numbers are points unless unitless)."""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        if name in UNITLESS_PROPERTIES or value == 0:
            return _format_number(value)
        return f"{_format_number(value)}pt"
    if name == "font_family":
        return f"'{value}'"
    return str(value)


def style_to_css(style: Mapping[str, Any]) -> str:
    """
    Inline CSS for a style mapping.

    Example:
        style_to_css({"font_size": 11, "font_weight": 700})
        # 'font-size: 11pt; font-weight: 700'
    """
    return "; ".join(
        f"{name.replace('_', '-')}: {css_value(name, value)}"
        for name, value in style.items()
        if value is not None and value != ""
    )


def node_css(node: Node) -> str:
    style = dict(node.style)
    if node.kind == "view":
        style.setdefault("display", "flex")
        style.setdefault("flex_direction", "column")
    if node.atomic:
        style["break_inside"] = "avoid"
    return style_to_css(style)


def region_css(region: RegionNode) -> str:
    style: Dict[str, Any] = {
        "display": "flex",
        "flex_direction": region.flow_direction,
        "flex_grow": region.flex_grow,
        "flex_shrink": region.flex_shrink,
        "flex_basis": region.flex_basis,
        "background_color": region.background_color,
        "margin_right": region.margin_right,
    }
    if region.padding is not None:
        style.update(
            padding_top=region.padding.top,
            padding_right=region.padding.right,
            padding_bottom=region.padding.bottom,
            padding_left=region.padding.left,
        )
    return style_to_css(style)


def _font_families(tree: PageTree) -> Set[str]:
    families = set()
    if tree.style.get("font_family"):
        families.add(tree.style["font_family"])
    for node in tree.iter_nodes():
        if node.style.get("font_family"):
            families.add(node.style["font_family"])
    return families


class HTMLRenderer:
    """
    Jinja2-backed page tree renderer.

    Use initialize_renderer() to get an instance with fonts registered.
    """

    def __init__(self, font_registry: FontRegistry = None, templates_dir: Path = None):
        """
        Initialize the renderer.

        Args:
            font_registry: Registered font faces (emitted as @font-face rules)
            templates_dir: Directory holding page.html.jinja. Defaults to the
                           packaged templates
        """
        self.font_registry = font_registry if font_registry is not None else FontRegistry()
        self.templates_dir = templates_dir or TEMPLATES_DIR

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["css"] = style_to_css
        self.env.filters["node_css"] = node_css
        self.env.filters["region_css"] = region_css
        self.env.filters["pt"] = lambda value: css_value("margin", value)

    def warn_unavailable_fonts(self, tree: PageTree) -> Set[str]:
        """Log a warning for every family the tree uses that no face backs."""
        missing = {
            family for family in _font_families(tree) if not self.font_registry.is_available(family)
        }
        for family in sorted(missing):
            _log_warning(f"Font family '{family}' is not registered; the viewer will substitute it")
        return missing

    def render(self, tree: PageTree, title: str = "Resume") -> str:
        """
        Render a page tree as HTML.

        Args:
            tree: Assembled page tree
            title: Document title for the <title> element

        Returns:
            Complete HTML document

        Raises:
            RenderError: If the Jinja2 template cannot be loaded or rendered
        """
        self.warn_unavailable_fonts(tree)

        try:
            template = self.env.get_template(PAGE_TEMPLATE)
            html = template.render(
                tree=tree,
                title=title,
                font_faces=self.font_registry.assets,
            )
        except TemplateError as e:
            _log_error(f"HTML rendering failed for template '{tree.template_id}': {e}")
            raise RenderError(
                "Failed to render page tree as HTML",
                template_id=tree.template_id,
                output_format="html",
                original_error=e,
            ) from e

        log_render_result(tree.template_id, "html", len(html))
        return html

    def write(self, tree: PageTree, output_path: Path, title: str = "Resume") -> Path:
        """Render and write the HTML file, creating parent directories."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(tree, title=title), encoding="utf-8")
        return output_path
