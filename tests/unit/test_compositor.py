"""Unit tests for region composition."""

import pytest

from vellum.contexts.composition.compositor import (
    SECTION_RENDERERS,
    compose_region,
    contact_row,
    render_key,
)
from vellum.contexts.composition.document import PersonalInfo, ResumeDocument
from vellum.contexts.composition.materializer import materialize
from vellum.contexts.composition.page_tree import NodeKind
from vellum.contexts.composition.sections import Section, SectionItem, SectionVariant
from vellum.contexts.templating.registries import get_template_config
from vellum.contexts.templating.template_config import RegionDefinition
from vellum.contexts.templating.tokens import build_style_sheet, resolve_tokens

STYLES = resolve_tokens(get_template_config("classic"))
SHEET = build_style_sheet(STYLES)

MAIN = RegionDefinition(id="main", slot="body", direction="column", width_fraction=0.7, gap=12)
SIDEBAR = RegionDefinition(id="sidebar", slot="body", direction="column", width_fraction=0.3)


def _texts(nodes):
    return [node.text for root in nodes for node in root.iter_nodes() if node.text]


@pytest.mark.unit
def test_every_variant_has_a_renderer():
    """Test the strategy table covers the closed variant set."""
    assert set(SECTION_RENDERERS) == set(SectionVariant)


@pytest.mark.unit
def test_compose_region_orders_content_and_applies_gap(sample_document):
    sections = materialize(sample_document)

    region = compose_region(
        MAIN, ["header", "skills", "experience"], sample_document, sections, STYLES, layout="two-column"
    )

    assert region.content_keys == ["header", "skills", "experience"]
    assert [child.margin_top for child in region.children] == [0.0, 12.0, 12.0]


@pytest.mark.unit
def test_empty_keys_produce_no_content_node():
    """Test keys without content are skipped and the gap only sits between real nodes."""
    document = ResumeDocument(personal_info=PersonalInfo(full_name="Fry"))

    region = compose_region(
        MAIN, ["summary", "experience", "header", "photo"], document, [], STYLES, layout="two-column"
    )

    assert region.content_keys == ["header"]
    assert region.children[0].margin_top == 0.0


@pytest.mark.unit
def test_empty_region_keeps_sizing():
    """Test an empty body column still takes its share of the row."""
    region = compose_region(SIDEBAR, ["skills"], ResumeDocument(), [], STYLES, layout="sidebar-left")

    assert region.is_empty
    assert region.flex_grow == 0.3
    assert region.flex_shrink == 0
    assert region.flex_basis == 0


@pytest.mark.unit
def test_stacked_region_sizing():
    region = compose_region(MAIN, [], ResumeDocument(), [], STYLES, layout="single-column")

    assert (region.flex_grow, region.flex_shrink, region.flex_basis) == (1.0, 1.0, "auto")


@pytest.mark.unit
def test_row_region_without_fraction_grows_evenly():
    region = compose_region(
        RegionDefinition(id="main", slot="body"), [], ResumeDocument(), [], STYLES, layout="two-column"
    )
    assert region.flex_grow == 1.0
    assert region.gap == 0.0


@pytest.mark.unit
def test_region_background_from_tokens():
    """Test the per-region token background applies when the region sets none."""
    styles = resolve_tokens(get_template_config("modern"))

    region = compose_region(SIDEBAR, [], ResumeDocument(), [], styles, layout="sidebar-left")
    own = compose_region(
        RegionDefinition(id="sidebar", slot="body", background_color="#000000"),
        [],
        ResumeDocument(),
        [],
        styles,
        layout="sidebar-left",
    )

    assert region.background_color == "#f3f4f6"
    assert own.background_color == "#000000"


@pytest.mark.unit
def test_header_with_inline_photo_and_contact(sample_document):
    nodes = render_key("header", sample_document, [], SHEET)
    roles = [node.role for node in nodes[0].iter_nodes()]

    assert nodes[0].role == "header_container"
    assert "profile_image" in roles
    assert "header_contact" in roles
    assert _texts(nodes)[:2] == ["Leela Turanga", "Delivery Ship Captain"]


@pytest.mark.unit
def test_header_without_inline_photo_and_contact(sample_document):
    nodes = render_key("header", sample_document, [], SHEET, inline_photo=False, inline_contact=False)
    roles = [node.role for node in nodes[0].iter_nodes()]

    assert "profile_image" not in roles
    assert "header_contact" not in roles


@pytest.mark.unit
def test_empty_header_is_omitted():
    assert render_key("header", ResumeDocument(), [], SHEET) == []


@pytest.mark.unit
def test_summary_block():
    document = ResumeDocument(personal_info=PersonalInfo(summary="Loves delivery."))

    nodes = render_key("summary", document, [], SHEET)

    assert _texts(nodes) == ["Professional Summary", "Loves delivery."]
    assert render_key("summary", ResumeDocument(), [], SHEET) == []


@pytest.mark.unit
def test_contact_row_present_fields_only():
    """Test contact fields are separated and links point at their targets."""
    info = PersonalInfo(email="a@b.c", linkedin="https://li.example/a", location="Earth")

    row = contact_row(info, SHEET)

    assert [child.text for child in row.children] == ["a@b.c", "•", "LinkedIn", "•", "Earth"]
    link = row.children[2]
    assert link.kind == NodeKind.LINK
    assert link.href == "https://li.example/a"
    assert contact_row(PersonalInfo(), SHEET) is None


@pytest.mark.unit
def test_contact_block_title():
    document = ResumeDocument(personal_info=PersonalInfo(phone="555"))
    nodes = render_key("contact", document, [], SHEET)

    assert _texts(nodes) == ["Contact", "555"]
    assert render_key("contact", ResumeDocument(), [], SHEET) == []


@pytest.mark.unit
def test_photo_block():
    document = ResumeDocument(personal_info=PersonalInfo(profile_picture="me.png"))
    nodes = render_key("photo", document, [], SHEET)

    image = nodes[0].children[0]
    assert image.kind == NodeKind.IMAGE
    assert image.src == "me.png"
    assert render_key("photo", ResumeDocument(), [], SHEET) == []


@pytest.mark.unit
def test_skills_render_as_tags():
    sections = [
        Section(
            id="s",
            type="skills",
            title="Skills",
            items=(SectionItem(title="Python", subtitle="Expert"), SectionItem(title="Rust")),
        )
    ]

    nodes = render_key("skills", ResumeDocument(), sections, SHEET)
    tags = [node for node in nodes[0].iter_nodes() if node.kind == NodeKind.TAG]

    assert [tag.text for tag in tags] == ["Python (Expert)", "Rust"]


@pytest.mark.unit
@pytest.mark.parametrize("section_type", ["languages", "certifications"])
def test_condensed_variants_skip_description(section_type):
    item = SectionItem(title="T", subtitle="S", date="2020", description="long text")
    sections = [Section(id="x", type=section_type, title="X", items=(item,))]

    nodes = render_key(section_type, ResumeDocument(), sections, SHEET)

    assert _texts(nodes) == ["X", "T", "2020", "S"]


@pytest.mark.unit
@pytest.mark.parametrize("section_type", ["experience", "custom", "awards"])
def test_full_variants_render_atomic_item_blocks(section_type):
    item = SectionItem(title="T", subtitle="S", date="2020", description="long text")
    sections = [Section(id="x", type=section_type, title="X", items=(item, item))]

    nodes = render_key(section_type, ResumeDocument(), sections, SHEET)
    blocks = [node for node in nodes[0].iter_nodes() if node.role == "item_block"]

    assert len(blocks) == 2
    assert all(block.atomic for block in blocks)
    assert _texts(nodes) == ["X", "T", "2020", "S", "long text", "T", "2020", "S", "long text"]


@pytest.mark.unit
def test_every_section_of_a_type_renders():
    """Test two custom sections under one key produce two titled blocks."""
    sections = [
        Section(id="a", type="custom", title="Hobbies", items=(SectionItem(title="Chess"),)),
        Section(id="b", type="custom", title="Awards", items=(SectionItem(title="Medal"),)),
    ]

    nodes = render_key("custom", ResumeDocument(), sections, SHEET)

    assert [node.children[0].text for node in nodes] == ["Hobbies", "Awards"]


@pytest.mark.unit
def test_hidden_or_empty_sections_never_render():
    sections = [
        Section(id="a", type="experience", title="Hidden", is_visible=False, items=(SectionItem(title="x"),)),
        Section(id="b", type="experience", title="Empty"),
    ]
    assert render_key("experience", ResumeDocument(), sections, SHEET) == []


@pytest.mark.unit
def test_nodes_carry_private_style_copies():
    """Test mutating one node's style never leaks into the style sheet."""
    nodes = render_key("summary", ResumeDocument(personal_info=PersonalInfo(summary="s")), [], SHEET)
    nodes[0].style["margin_bottom"] = 999

    assert SHEET["section"]["margin_bottom"] != 999
