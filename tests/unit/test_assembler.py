"""Unit tests for page tree assembly."""

import pytest

from vellum.contexts.composition.assembler import apply_gutter, assemble
from vellum.contexts.composition.page_tree import RegionNode
from vellum.contexts.templating.defaults import COLUMN_GUTTER
from vellum.contexts.templating.registries import get_template_config
from vellum.contexts.templating.template_config import parse_template_config
from vellum.contexts.templating.tokens import resolve_tokens


def _nodes(config):
    return {
        region.id: RegionNode(region_id=region.id, slot=region.slot, flow_direction=region.direction)
        for region in config.structure
    }


@pytest.mark.unit
def test_single_column_stacks_body():
    config = get_template_config("classic")
    tree = assemble(config, resolve_tokens(config), _nodes(config))

    assert tree.template_id == "classic"
    assert tree.layout == "single-column"
    assert tree.page_size == "A4"
    assert tree.body.flow == "column"
    assert [region.region_id for region in tree.body.regions] == ["main"]
    assert tree.body.regions[0].margin_right == 0


@pytest.mark.unit
def test_row_layout_applies_gutter_between_columns():
    """Test every body column but the last gets the fixed gutter."""
    config = get_template_config("modern")
    tree = assemble(config, resolve_tokens(config), _nodes(config))

    assert tree.body.flow == "row"
    assert [region.region_id for region in tree.body.regions] == ["sidebar", "main"]
    assert [region.margin_right for region in tree.body.regions] == [COLUMN_GUTTER, 0.0]


@pytest.mark.unit
def test_slots_are_partitioned_in_declaration_order():
    config = get_template_config("professional")
    tree = assemble(config, resolve_tokens(config), _nodes(config))

    assert [region.region_id for region in tree.header] == ["header"]
    assert [region.region_id for region in tree.body.regions] == ["sidebar", "main"]
    assert tree.footer == []
    assert [region.region_id for region in tree.regions] == ["header", "sidebar", "main"]


@pytest.mark.unit
def test_footer_regions():
    config = parse_template_config(
        "footer",
        {
            "layout": "single-column",
            "regions": {
                "structure": [
                    {"id": "bottom", "slot": "footer"},
                    {"id": "main", "slot": "body"},
                    {"id": "legal", "slot": "footer"},
                ],
                "content": {"main": ["experience"], "bottom": ["contact"], "legal": ["summary"]},
            },
        },
    )

    tree = assemble(config, resolve_tokens(config), _nodes(config))

    assert [region.region_id for region in tree.footer] == ["bottom", "legal"]


@pytest.mark.unit
def test_missing_region_node_is_placed_empty():
    config = get_template_config("modern")
    nodes = _nodes(config)
    del nodes["sidebar"]

    tree = assemble(config, resolve_tokens(config), nodes)

    assert tree.find_region("sidebar").is_empty
    assert tree.find_region("nope") is None


@pytest.mark.unit
def test_gutter_does_not_modify_input_nodes():
    columns = [RegionNode(region_id="a", slot="body"), RegionNode(region_id="b", slot="body")]

    spaced = apply_gutter(columns, gutter=8)

    assert [column.margin_right for column in spaced] == [8, 0.0]
    assert [column.margin_right for column in columns] == [0.0, 0.0]


@pytest.mark.unit
def test_page_style_carries_margins_and_font():
    config = get_template_config("classic")
    tree = assemble(config, resolve_tokens(config), _nodes(config))

    assert tree.style["padding_left"] == 32
    assert tree.style["font_family"] == "Georgia"
