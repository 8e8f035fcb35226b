"""
Design Token Resolution

Merges document-level formatting overrides over a template's design tokens
into one concrete style set, then derives the named style roles that get
baked into page-tree nodes.

Precedence for each overridable token, independently:
    non-empty document override -> template token -> engine default

Only font family, font size, line height and accent color are overridable.
Margins, spacing and the remaining colors always come from the template.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from vellum.contexts.templating.defaults import (
    DEFAULT_ACCENT_COLOR,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE,
    DEFAULT_LINE_HEIGHT,
    LEGACY_TEMPLATE_IDS,
)
from vellum.contexts.templating.template_config import Spacing, TemplateConfig


def _first_text(data: Mapping[str, Any], *keys: str) -> Optional[str]:
    """First non-empty string value among keys."""
    for key in keys:
        value = data.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def _first_positive(data: Mapping[str, Any], *keys: str) -> Optional[float]:
    """First strictly positive numeric value among keys (numeric strings accepted)."""
    for key in keys:
        value = data.get(key)
        if isinstance(value, bool) or value is None:
            continue
        try:
            number = float(value)
        except (TypeError, ValueError):
            continue
        if number > 0:
            return number
    return None


def _template_id(data: Mapping[str, Any]) -> Optional[str]:
    """Template id, mapping the numeric ids of older editor payloads to catalog ids."""
    for key in ("templateId", "template_id"):
        value = data.get(key)
        if isinstance(value, int) and not isinstance(value, bool):
            return LEGACY_TEMPLATE_IDS.get(value)
    return _first_text(data, "templateId", "template_id")


@dataclass(frozen=True)
class FormattingOverrides:
    """
    Per-document formatting settings chosen by the user.

    Every field is optional; None means "use the template".

    Attributes:
        font_family: Body font family
        font_size: Base font size in points
        line_height: Line height multiplier
        accent_color: Accent color (section titles, dividers, name)
        template_id: Template chosen for the document
    """

    font_family: Optional[str] = None
    font_size: Optional[float] = None
    line_height: Optional[float] = None
    accent_color: Optional[str] = None
    template_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "FormattingOverrides":
        """
        Build overrides from a host settings mapping.

        Accepts camelCase and snake_case keys. The accent color is read from
        the legacy aliases themeColor and color before accentColor. Older
        editor formatting used font and lineSpacing, and numeric template ids
        (1 classic, 2 modern; any other number means "use the default").
        Empty strings, non-numeric and non-positive sizes count as absent.
        """
        if not isinstance(data, Mapping):
            return cls()

        return cls(
            font_family=_first_text(data, "fontFamily", "font_family", "font"),
            font_size=_first_positive(data, "fontSize", "font_size"),
            line_height=_first_positive(
                data, "lineHeight", "line_height", "lineSpacing", "line_spacing"
            ),
            accent_color=_first_text(
                data, "themeColor", "theme_color", "color", "accentColor", "accent_color"
            ),
            template_id=_template_id(data),
        )


@dataclass(frozen=True)
class ResolvedStyleSet:
    """Concrete visual parameters for one render pass."""

    font_family: str
    heading_font_family: str
    font_size: float
    line_height: float
    accent_color: str
    text_primary: str
    text_secondary: str
    background: str
    page_margin: Spacing
    section_spacing: float
    block_spacing: float
    region_backgrounds: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def region_background(self, region_id: str) -> Optional[str]:
        """Per-region background override from the template tokens."""
        return self.region_backgrounds.get(region_id)


def resolve_tokens(config: TemplateConfig, overrides: Optional[FormattingOverrides] = None) -> ResolvedStyleSet:
    """
    Merge document overrides over the template's tokens.

    Pure function: the TemplateConfig is never modified and the same inputs
    always produce an equal style set.

    Args:
        config: Template supplying the base tokens
        overrides: Document formatting overrides (None means no overrides)

    Returns:
        ResolvedStyleSet

    Examples:
        >>> resolve_tokens(classic, FormattingOverrides(accent_color="#FF0000")).accent_color
        '#FF0000'
        >>> resolve_tokens(classic).accent_color
        '#374151'
    """
    if overrides is None:
        overrides = FormattingOverrides()

    tokens = config.tokens
    font_family = overrides.font_family or tokens.fonts.base_family or DEFAULT_FONT_FAMILY

    return ResolvedStyleSet(
        font_family=font_family,
        heading_font_family=tokens.fonts.heading_family or font_family,
        font_size=overrides.font_size or tokens.fonts.base_size or DEFAULT_FONT_SIZE,
        line_height=overrides.line_height or tokens.fonts.line_height or DEFAULT_LINE_HEIGHT,
        accent_color=overrides.accent_color or tokens.colors.accent or DEFAULT_ACCENT_COLOR,
        text_primary=tokens.colors.text_primary,
        text_secondary=tokens.colors.text_secondary,
        background=tokens.colors.background,
        page_margin=tokens.spacing.page_margin,
        section_spacing=tokens.spacing.section_spacing,
        block_spacing=tokens.spacing.block_spacing,
        region_backgrounds=tokens.colors.region_backgrounds,
    )


def build_style_sheet(styles: ResolvedStyleSet) -> Dict[str, Dict[str, Any]]:
    """
    Derive the named style roles used by page-tree nodes.

    Sizes are in points. Keys are snake_case CSS-like property names so any
    renderer can translate them without template knowledge.

    Args:
        styles: Resolved style set

    Returns:
        Mapping of role name -> style properties
    """
    size = styles.font_size
    accent = styles.accent_color
    margin = styles.page_margin

    return {
        "page": {
            "padding_top": margin.top,
            "padding_right": margin.right,
            "padding_bottom": margin.bottom,
            "padding_left": margin.left,
            "font_family": styles.font_family,
            "font_size": size,
            "line_height": styles.line_height,
            "color": styles.text_primary,
            "background_color": styles.background,
        },
        "section": {"margin_bottom": styles.section_spacing},
        "section_title": {
            "font_family": styles.heading_font_family,
            "font_size": size + 1,
            "font_weight": 700,
            "color": accent,
            "text_transform": "uppercase",
            "letter_spacing": 0.5,
            "margin_bottom": 6,
            "padding_bottom": 3,
            "border_bottom_width": 1.5,
            "border_bottom_color": accent,
        },
        "summary_text": {
            "font_size": size,
            "color": styles.text_primary,
            "line_height": styles.line_height,
        },
        "item_block": {"margin_bottom": styles.block_spacing},
        "item_header": {
            "flex_direction": "row",
            "justify_content": "space-between",
            "align_items": "flex-start",
            "margin_bottom": 3,
        },
        "item_title": {"font_size": size + 1, "font_weight": 700, "color": styles.text_primary},
        "item_date": {
            "font_size": size - 1,
            "color": styles.text_secondary,
            "flex_shrink": 0,
            "margin_left": 8,
        },
        "item_subtitle": {
            "font_size": size - 1,
            "color": styles.text_secondary,
            "font_style": "italic",
            "margin_bottom": 3,
        },
        "item_description": {
            "font_size": size - 1,
            "color": styles.text_primary,
            "line_height": styles.line_height,
            "margin_top": 1,
        },
        "skills_row": {"flex_direction": "row", "flex_wrap": "wrap", "margin_top": 4},
        "skill_tag": {
            "background_color": "#f1f5f9",
            "color": styles.text_primary,
            "padding_top": 3,
            "padding_bottom": 3,
            "padding_left": 8,
            "padding_right": 8,
            "font_size": size - 1,
            "margin_right": 4,
            "margin_bottom": 4,
        },
        "header_container": {
            "align_items": "flex-start",
            "margin_bottom": styles.section_spacing / 1.5,
            "border_bottom_width": 2,
            "border_bottom_color": accent,
            "padding_bottom": 6,
            "width": "100%",
        },
        "header_top_row": {
            "flex_direction": "row",
            "justify_content": "space-between",
            "align_items": "center",
            "width": "100%",
        },
        "header_identity": {"flex_direction": "column"},
        "header_name": {
            "font_family": styles.heading_font_family,
            "font_size": size + 7,
            "font_weight": 700,
            "color": accent,
            "margin_bottom": 2,
        },
        "header_job_title": {
            "font_size": size + 1,
            "color": styles.text_secondary,
            "margin_bottom": 4,
        },
        "header_contact": {
            "font_size": size - 1,
            "color": styles.text_secondary,
            "flex_direction": "row",
            "flex_wrap": "wrap",
        },
        "contact_text": {},
        "contact_separator": {"margin_left": 4, "margin_right": 4},
        "link": {"color": accent},
        "profile_image": {"width": 54, "height": 54, "border_radius": 27, "margin_left": 8},
        "photo_wrapper": {"align_items": "center", "margin_bottom": styles.section_spacing / 2},
        "photo_image": {"width": 88, "height": 88, "border_radius": 44, "margin_bottom": 6},
    }
