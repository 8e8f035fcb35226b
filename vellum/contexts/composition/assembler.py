"""
Document Assembly

Partitions composed regions by slot and places them on one page-sized canvas:
- header/footer regions stack full width in declaration order
- body regions stack as a column for single-column templates, otherwise
  they flow as one row with a fixed gutter between all but the last column
"""

from dataclasses import replace
from typing import Dict, List

from vellum.contexts.composition.logger import _log_warning, log_page_tree_built
from vellum.contexts.composition.page_tree import BodyNode, PageTree, RegionNode
from vellum.contexts.templating.defaults import COLUMN_GUTTER, DEFAULT_PAGE_SIZE
from vellum.contexts.templating.template_config import RegionDefinition, TemplateConfig
from vellum.contexts.templating.tokens import ResolvedStyleSet, build_style_sheet


def _region_node(region: RegionDefinition, region_nodes: Dict[str, RegionNode]) -> RegionNode:
    node = region_nodes.get(region.id)
    if node is None:
        _log_warning(f"No composed node for region '{region.id}', placing it empty")
        node = RegionNode(region_id=region.id, slot=region.slot, flow_direction=region.direction)
    return node


def apply_gutter(columns: List[RegionNode], gutter: float = COLUMN_GUTTER) -> List[RegionNode]:
    """Copies of the columns with a right margin on every column but the last."""
    return [
        replace(column, margin_right=gutter if index < len(columns) - 1 else 0.0)
        for index, column in enumerate(columns)
    ]


def assemble(
    config: TemplateConfig,
    styles: ResolvedStyleSet,
    region_nodes: Dict[str, RegionNode],
) -> PageTree:
    """
    Assemble the page tree for one template.

    Args:
        config: Template config (structure and layout archetype)
        styles: Resolved style set (page-level style)
        region_nodes: Region id -> composed RegionNode

    Returns:
        PageTree for a single logical page
    """
    header = [_region_node(region, region_nodes) for region in config.regions_in_slot("header")]
    body = [_region_node(region, region_nodes) for region in config.regions_in_slot("body")]
    footer = [_region_node(region, region_nodes) for region in config.regions_in_slot("footer")]

    if config.is_row_layout:
        body_node = BodyNode(flow="row", regions=apply_gutter(body))
    else:
        body_node = BodyNode(flow="column", regions=body)

    tree = PageTree(
        template_id=config.id,
        layout=config.layout,
        page_size=DEFAULT_PAGE_SIZE,
        style=build_style_sheet(styles)["page"],
        header=header,
        body=body_node,
        footer=footer,
    )
    log_page_tree_built(tree)
    return tree
