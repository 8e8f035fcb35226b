"""
Template Configuration Data Structures

Defines the declarative schema a template is made of: layout archetype,
structural regions, region-to-content mapping and design tokens.

Instances are built once from the template catalog and are read-only for the
lifetime of the process (frozen dataclasses, tuples, read-only mappings).
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from vellum.contexts.templating.defaults import (
    DEFAULT_BACKGROUND,
    DEFAULT_BLOCK_SPACING,
    DEFAULT_PAGE_MARGIN,
    DEFAULT_SECTION_SPACING,
    DEFAULT_TEXT_PRIMARY,
    DEFAULT_TEXT_SECONDARY,
    DIRECTIONS,
    LAYOUTS,
    ROW_LAYOUTS,
    SLOTS,
)
from vellum.contexts.templating.exceptions import TemplateConfigError


@dataclass(frozen=True)
class Spacing:
    """Four-side spacing in points."""

    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0

    @classmethod
    def from_dict(
        cls, data: Optional[Mapping[str, Any]], template_id: str = "", field_name: str = ""
    ) -> Optional["Spacing"]:
        """
        Build spacing from a top/right/bottom/left mapping (missing sides are 0).

        Raises:
            TemplateConfigError: If data is not a mapping or a side is not a number
        """
        if data is None:
            return None
        if not isinstance(data, Mapping):
            raise TemplateConfigError(
                f"Expected a mapping of top/right/bottom/left, got {data!r}",
                template_id=template_id,
                field_name=field_name,
            )
        return cls(
            top=_optional_float(data.get("top"), template_id, f"{field_name}.top") or 0.0,
            right=_optional_float(data.get("right"), template_id, f"{field_name}.right") or 0.0,
            bottom=_optional_float(data.get("bottom"), template_id, f"{field_name}.bottom") or 0.0,
            left=_optional_float(data.get("left"), template_id, f"{field_name}.left") or 0.0,
        )


@dataclass(frozen=True)
class RegionDefinition:
    """
    Structural definition of a single region on the page.

    Controls how the region is laid out, not what goes into it (see
    TemplateConfig.content_map for that).

    Attributes:
        id: Region identifier (e.g., 'header', 'sidebar', 'main')
        slot: 'header' and 'footer' span the full width, 'body' takes part in the body flow
        direction: Flow direction of the content stacked inside the region
        width_fraction: Relative width for body regions of row archetypes
        background_color: Background of the whole region block
        padding: Inner padding
        gap: Space between stacked content nodes
    """

    id: str
    slot: str
    direction: str = "column"
    width_fraction: Optional[float] = None
    background_color: Optional[str] = None
    padding: Optional[Spacing] = None
    gap: Optional[float] = None


@dataclass(frozen=True)
class FontTokens:
    base_family: Optional[str] = None
    heading_family: Optional[str] = None
    base_size: Optional[float] = None
    line_height: Optional[float] = None


@dataclass(frozen=True)
class ColorTokens:
    accent: Optional[str] = None
    text_primary: str = DEFAULT_TEXT_PRIMARY
    text_secondary: str = DEFAULT_TEXT_SECONDARY
    background: str = DEFAULT_BACKGROUND
    region_backgrounds: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True)
class SpacingTokens:
    page_margin: Spacing = field(default_factory=lambda: Spacing(**DEFAULT_PAGE_MARGIN))
    section_spacing: float = DEFAULT_SECTION_SPACING
    block_spacing: float = DEFAULT_BLOCK_SPACING


@dataclass(frozen=True)
class TemplateTokens:
    """Design tokens: the template's visual defaults before document overrides."""

    fonts: FontTokens = field(default_factory=FontTokens)
    colors: ColorTokens = field(default_factory=ColorTokens)
    spacing: SpacingTokens = field(default_factory=SpacingTokens)


@dataclass(frozen=True)
class TemplateConfig:
    """
    Master configuration object for a resume template.

    Attributes:
        id: Stable identifier (e.g., 'classic', 'modern')
        label: Human-friendly name
        layout: Layout archetype ('single-column', 'sidebar-left', 'sidebar-right', 'two-column')
        structure: Ordered region definitions
        content_map: Region id -> ordered allow-list of section keys
        tokens: Design tokens
    """

    id: str
    label: str
    layout: str
    structure: Tuple[RegionDefinition, ...]
    content_map: Mapping[str, Tuple[str, ...]]
    tokens: TemplateTokens

    @property
    def is_row_layout(self) -> bool:
        return self.layout in ROW_LAYOUTS

    def regions_in_slot(self, slot: str) -> List[RegionDefinition]:
        """Regions occupying a slot, in declaration order."""
        return [region for region in self.structure if region.slot == slot]

    def allowed_keys(self, region_id: str) -> Tuple[str, ...]:
        """Allow-list for a region (empty when the region has no content entry)."""
        return self.content_map.get(region_id, ())

    def allows_key(self, key: str) -> bool:
        """True if any region allow-lists the key."""
        return any(key in keys for keys in self.content_map.values())


# =============================================================================
# Parsing from catalog data
# =============================================================================


def _optional_float(value: Any, template_id: str = "", field_name: str = "") -> Optional[float]:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise TemplateConfigError(
            f"Expected a number, got {value!r}", template_id=template_id, field_name=field_name
        )
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise TemplateConfigError(
            f"Expected a number, got {value!r}", template_id=template_id, field_name=field_name
        ) from e


def _require_float(value: Any, template_id: str, field_name: str) -> float:
    number = _optional_float(value, template_id, field_name)
    if number is None:
        raise TemplateConfigError(
            f"Expected a number, got {value!r}", template_id=template_id, field_name=field_name
        )
    return number


def _mapping(
    data: Mapping[str, Any], key: str, template_id: str, field_name: str
) -> Mapping[str, Any]:
    """Nested mapping under key ({} when absent or null)."""
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise TemplateConfigError(
            f"Expected a mapping, got {value!r}", template_id=template_id, field_name=field_name
        )
    return value


def _require_choice(value: Any, choices: Tuple[str, ...], template_id: str, field_name: str) -> str:
    if value not in choices:
        raise TemplateConfigError(
            f"Invalid value {value!r}; expected one of {', '.join(choices)}",
            template_id=template_id,
            field_name=field_name,
        )
    return value


def parse_region(data: Mapping[str, Any], template_id: str, index: int) -> RegionDefinition:
    """
    Build a RegionDefinition from catalog data.

    Args:
        data: Region mapping from the catalog
        template_id: Owning template (for error messages)
        index: Position in regions.structure (for error messages)

    Raises:
        TemplateConfigError: If id is missing, slot/direction are invalid or
                             sizes are not numbers
    """
    field_prefix = f"regions.structure[{index}]"

    if not isinstance(data, Mapping):
        raise TemplateConfigError(
            f"Expected a region mapping, got {data!r}",
            template_id=template_id,
            field_name=field_prefix,
        )

    region_id = data.get("id")
    if not region_id:
        raise TemplateConfigError(
            "Region is missing an id", template_id=template_id, field_name=f"{field_prefix}.id"
        )

    return RegionDefinition(
        id=str(region_id),
        slot=_require_choice(data.get("slot"), SLOTS, template_id, f"{field_prefix}.slot"),
        direction=_require_choice(
            data.get("direction", "column"), DIRECTIONS, template_id, f"{field_prefix}.direction"
        ),
        width_fraction=_optional_float(
            data.get("width_fraction"), template_id, f"{field_prefix}.width_fraction"
        ),
        background_color=data.get("background_color") or None,
        padding=Spacing.from_dict(data.get("padding"), template_id, f"{field_prefix}.padding"),
        gap=_optional_float(data.get("gap"), template_id, f"{field_prefix}.gap"),
    )


def parse_tokens(data: Optional[Mapping[str, Any]], template_id: str = "") -> TemplateTokens:
    """
    Build TemplateTokens, leaving absent overridable tokens as None.

    Raises:
        TemplateConfigError: If a token group is not a mapping or a size is
                             not a number
    """
    if data is None:
        data = {}
    elif not isinstance(data, Mapping):
        raise TemplateConfigError(
            f"Expected a mapping, got {data!r}", template_id=template_id, field_name="tokens"
        )
    fonts = _mapping(data, "fonts", template_id, "tokens.fonts")
    colors = _mapping(data, "colors", template_id, "tokens.colors")
    spacing = _mapping(data, "spacing", template_id, "tokens.spacing")
    region_backgrounds = _mapping(
        colors, "region_backgrounds", template_id, "tokens.colors.region_backgrounds"
    )

    page_margin = Spacing.from_dict(
        spacing.get("page_margin"), template_id, "tokens.spacing.page_margin"
    ) or Spacing(**DEFAULT_PAGE_MARGIN)

    return TemplateTokens(
        fonts=FontTokens(
            base_family=fonts.get("base_family") or None,
            heading_family=fonts.get("heading_family") or None,
            base_size=_optional_float(
                fonts.get("base_size"), template_id, "tokens.fonts.base_size"
            ),
            line_height=_optional_float(
                fonts.get("line_height"), template_id, "tokens.fonts.line_height"
            ),
        ),
        colors=ColorTokens(
            accent=colors.get("accent") or None,
            text_primary=colors.get("text_primary") or DEFAULT_TEXT_PRIMARY,
            text_secondary=colors.get("text_secondary") or DEFAULT_TEXT_SECONDARY,
            background=colors.get("background") or DEFAULT_BACKGROUND,
            region_backgrounds=MappingProxyType(dict(region_backgrounds)),
        ),
        spacing=SpacingTokens(
            page_margin=page_margin,
            section_spacing=_require_float(
                spacing.get("section_spacing", DEFAULT_SECTION_SPACING),
                template_id,
                "tokens.spacing.section_spacing",
            ),
            block_spacing=_require_float(
                spacing.get("block_spacing", DEFAULT_BLOCK_SPACING),
                template_id,
                "tokens.spacing.block_spacing",
            ),
        ),
    )


def parse_template_config(template_id: str, data: Mapping[str, Any]) -> TemplateConfig:
    """
    Build a TemplateConfig from one catalog entry.

    Args:
        template_id: Key of the entry in the catalog
        data: Entry contents (label, layout, regions, tokens)

    Returns:
        Immutable TemplateConfig

    Raises:
        TemplateConfigError: If layout, slots or directions are invalid
    """
    layout = _require_choice(data.get("layout", "single-column"), LAYOUTS, template_id, "layout")

    regions = _mapping(data, "regions", template_id, "regions")
    structure = tuple(
        parse_region(region, template_id, index)
        for index, region in enumerate(regions.get("structure") or [])
    )

    content: Dict[str, Tuple[str, ...]] = {}
    for region_id, keys in (regions.get("content") or {}).items():
        content[str(region_id)] = tuple(str(key) for key in (keys or []))

    return TemplateConfig(
        id=template_id,
        label=data.get("label") or template_id.title(),
        layout=layout,
        structure=structure,
        content_map=MappingProxyType(content),
        tokens=parse_tokens(data.get("tokens"), template_id),
    )
