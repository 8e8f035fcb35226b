"""Unit tests for template configuration parsing."""

import dataclasses

import pytest

from vellum.contexts.templating.defaults import DEFAULT_PAGE_MARGIN
from vellum.contexts.templating.exceptions import TemplateConfigError
from vellum.contexts.templating.template_config import (
    Spacing,
    parse_region,
    parse_template_config,
    parse_tokens,
)


def _template(**overrides):
    data = {
        "label": "Test",
        "layout": "sidebar-right",
        "regions": {
            "structure": [
                {"id": "main", "slot": "body", "width_fraction": 0.65, "gap": 10},
                {"id": "side", "slot": "body", "width_fraction": 0.35},
                {"id": "foot", "slot": "footer", "direction": "row"},
            ],
            "content": {"main": ["header", "experience"], "side": ["skills"]},
        },
    }
    data.update(overrides)
    return data


@pytest.mark.unit
def test_parse_template_config():
    """Test a full entry becomes an immutable TemplateConfig."""
    config = parse_template_config("test", _template())

    assert config.id == "test"
    assert config.label == "Test"
    assert config.is_row_layout
    assert [region.id for region in config.structure] == ["main", "side", "foot"]
    assert config.allowed_keys("main") == ("header", "experience")
    assert config.allowed_keys("foot") == ()
    assert config.allows_key("skills")
    assert not config.allows_key("photo")
    assert [region.id for region in config.regions_in_slot("body")] == ["main", "side"]


@pytest.mark.unit
def test_config_is_read_only():
    """Test configs can't be mutated after loading."""
    config = parse_template_config("test", _template())

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.layout = "single-column"
    with pytest.raises(TypeError):
        config.content_map["main"] = ("photo",)


@pytest.mark.unit
def test_label_defaults_to_title_cased_id():
    config = parse_template_config("compact", _template(label=None))
    assert config.label == "Compact"


@pytest.mark.unit
def test_invalid_layout_raises():
    with pytest.raises(TemplateConfigError) as exc_info:
        parse_template_config("test", _template(layout="three-column"))
    assert exc_info.value.field_name == "layout"


@pytest.mark.unit
def test_region_defaults():
    """Test optional region fields default to None and direction to column."""
    region = parse_region({"id": "main", "slot": "body"}, "test", 0)

    assert region.direction == "column"
    assert region.width_fraction is None
    assert region.padding is None
    assert region.gap is None


@pytest.mark.unit
def test_region_padding():
    region = parse_region({"id": "x", "slot": "header", "padding": {"top": 4, "left": 8}}, "test", 0)
    assert region.padding == Spacing(top=4, right=0, bottom=0, left=8)


@pytest.mark.unit
@pytest.mark.parametrize(
    "region,field_name",
    [
        ({"slot": "body"}, "regions.structure[2].id"),
        ({"id": "x", "slot": "aside"}, "regions.structure[2].slot"),
        ({"id": "x", "slot": "body", "direction": "diagonal"}, "regions.structure[2].direction"),
        ({"id": "x", "slot": "body", "padding": 8}, "regions.structure[2].padding"),
        ({"id": "x", "slot": "body", "padding": {"top": "wide"}}, "regions.structure[2].padding.top"),
        ({"id": "x", "slot": "body", "gap": "large"}, "regions.structure[2].gap"),
    ],
)
def test_invalid_region_raises(region, field_name):
    with pytest.raises(TemplateConfigError) as exc_info:
        parse_region(region, "test", 2)
    assert exc_info.value.field_name == field_name
    assert exc_info.value.template_id == "test"


@pytest.mark.unit
def test_parse_tokens_defaults():
    """Test absent overridable tokens stay None and structural ones get defaults."""
    tokens = parse_tokens(None)

    assert tokens.fonts.base_family is None
    assert tokens.fonts.base_size is None
    assert tokens.colors.accent is None
    assert tokens.spacing.page_margin == Spacing(**DEFAULT_PAGE_MARGIN)
    assert dict(tokens.colors.region_backgrounds) == {}


@pytest.mark.unit
@pytest.mark.parametrize(
    "tokens,field_name",
    [
        ({"spacing": {"section_spacing": None}}, "tokens.spacing.section_spacing"),
        ({"spacing": {"block_spacing": "tight"}}, "tokens.spacing.block_spacing"),
        ({"spacing": {"page_margin": [36, 36, 36, 36]}}, "tokens.spacing.page_margin"),
        ({"spacing": "compact"}, "tokens.spacing"),
        ({"fonts": {"base_size": "big"}}, "tokens.fonts.base_size"),
    ],
)
def test_malformed_tokens_raise_config_error(tokens, field_name):
    """Test malformed token values raise TemplateConfigError naming the field."""
    with pytest.raises(TemplateConfigError) as exc_info:
        parse_template_config("test", _template(tokens=tokens))

    assert exc_info.value.field_name == field_name
    assert exc_info.value.template_id == "test"
