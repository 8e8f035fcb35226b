"""
Region Composition

Turns one template region plus its resolved section keys into a RegionNode.

Pseudo keys are synthesized from personal info:
- header:  name and job title (plus photo/contact row when no other region shows them)
- summary: "Professional Summary" block, omitted when the summary is empty
- contact: "Contact" block of present-only fields, omitted when none are set
- photo:   profile image, omitted when absent

Real keys render every visible, non-empty section of that type, each through
the strategy registered for its SectionVariant.
"""

from typing import Any, Callable, Dict, List, Optional, Sequence

from vellum.contexts.composition.document import PersonalInfo, ResumeDocument
from vellum.contexts.composition.logger import log_region_composed
from vellum.contexts.composition.page_tree import ContentNode, Node, NodeKind, RegionNode
from vellum.contexts.composition.sections import Section, SectionItem, SectionVariant
from vellum.contexts.templating.defaults import (
    CONTACT_SEPARATOR,
    CONTACT_TITLE,
    ROW_LAYOUTS,
    SUMMARY_TITLE,
)
from vellum.contexts.templating.template_config import RegionDefinition
from vellum.contexts.templating.tokens import ResolvedStyleSet, build_style_sheet

StyleSheet = Dict[str, Dict[str, Any]]


def _node(sheet: StyleSheet, kind: str, role: str, **kwargs) -> Node:
    """Create a node with a private copy of the role's style."""
    return Node(kind=kind, role=role, style=dict(sheet.get(role, {})), **kwargs)


def _text(sheet: StyleSheet, role: str, text: str) -> Node:
    return _node(sheet, NodeKind.TEXT, role, text=text)


def _section_block(sheet: StyleSheet, title: str, children: List[Node]) -> Node:
    """Titled section wrapper."""
    return _node(
        sheet,
        NodeKind.VIEW,
        "section",
        children=[_text(sheet, "section_title", title), *children],
    )


# =============================================================================
# Pseudo-sections
# =============================================================================


def contact_row(info: PersonalInfo, sheet: StyleSheet) -> Optional[Node]:
    """
    Present-only contact fields joined by separators.

    Order: email, phone, LinkedIn, website, location. Returns None when no
    field is set.
    """
    parts = []
    if info.email:
        parts.append(_text(sheet, "contact_text", info.email))
    if info.phone:
        parts.append(_text(sheet, "contact_text", info.phone))
    if info.linkedin:
        parts.append(_node(sheet, NodeKind.LINK, "link", text="LinkedIn", href=info.linkedin))
    if info.website:
        parts.append(_node(sheet, NodeKind.LINK, "link", text="Website", href=info.website))
    if info.location:
        parts.append(_text(sheet, "contact_text", info.location))

    if not parts:
        return None

    children = []
    for index, part in enumerate(parts):
        if index > 0:
            children.append(_text(sheet, "contact_separator", CONTACT_SEPARATOR))
        children.append(part)

    return _node(sheet, NodeKind.VIEW, "header_contact", children=children)


def render_header(
    info: PersonalInfo, sheet: StyleSheet, inline_photo: bool = True, inline_contact: bool = True
) -> List[Node]:
    """Name/title block; photo and contact row only when requested."""
    identity = []
    if info.full_name:
        identity.append(_text(sheet, "header_name", info.full_name))
    if info.job_title:
        identity.append(_text(sheet, "header_job_title", info.job_title))

    top_row = []
    if identity:
        top_row.append(_node(sheet, NodeKind.VIEW, "header_identity", children=identity))
    if inline_photo and info.profile_picture:
        top_row.append(_node(sheet, NodeKind.IMAGE, "profile_image", src=info.profile_picture))

    children = []
    if top_row:
        children.append(_node(sheet, NodeKind.VIEW, "header_top_row", children=top_row))
    if inline_contact:
        row = contact_row(info, sheet)
        if row is not None:
            children.append(row)

    if not children:
        return []
    return [_node(sheet, NodeKind.VIEW, "header_container", children=children)]


def render_summary(info: PersonalInfo, sheet: StyleSheet) -> List[Node]:
    if not info.summary:
        return []
    return [_section_block(sheet, SUMMARY_TITLE, [_text(sheet, "summary_text", info.summary)])]


def render_contact(info: PersonalInfo, sheet: StyleSheet) -> List[Node]:
    row = contact_row(info, sheet)
    if row is None:
        return []
    return [_section_block(sheet, CONTACT_TITLE, [row])]


def render_photo(info: PersonalInfo, sheet: StyleSheet) -> List[Node]:
    if not info.profile_picture:
        return []
    image = _node(sheet, NodeKind.IMAGE, "photo_image", src=info.profile_picture)
    return [_node(sheet, NodeKind.VIEW, "photo_wrapper", children=[image])]


# =============================================================================
# Section variants
# =============================================================================


def _item_block(item: SectionItem, sheet: StyleSheet, with_description: bool) -> Node:
    """Item block: title/date header, subtitle, optional description. Never split."""
    header = []
    if item.title:
        header.append(_text(sheet, "item_title", item.title))
    if item.date:
        header.append(_text(sheet, "item_date", item.date))

    children = []
    if header:
        children.append(_node(sheet, NodeKind.VIEW, "item_header", children=header))
    if item.subtitle:
        children.append(_text(sheet, "item_subtitle", item.subtitle))
    if with_description and item.description:
        children.append(_text(sheet, "item_description", item.description))

    return _node(sheet, NodeKind.VIEW, "item_block", atomic=True, children=children)


def render_full_items(section: Section, sheet: StyleSheet) -> List[Node]:
    return [_item_block(item, sheet, with_description=True) for item in section.items]


def render_condensed_items(section: Section, sheet: StyleSheet) -> List[Node]:
    return [_item_block(item, sheet, with_description=False) for item in section.items]


def render_skill_tags(section: Section, sheet: StyleSheet) -> List[Node]:
    tags = []
    for item in section.items:
        label = f"{item.title} ({item.subtitle})" if item.subtitle else item.title
        tags.append(_node(sheet, NodeKind.TAG, "skill_tag", text=label))
    return [_node(sheet, NodeKind.VIEW, "skills_row", children=tags)]


SECTION_RENDERERS: Dict[SectionVariant, Callable[[Section, StyleSheet], List[Node]]] = {
    SectionVariant.EXPERIENCE: render_full_items,
    SectionVariant.CUSTOM: render_full_items,
    SectionVariant.SKILLS: render_skill_tags,
    SectionVariant.LANGUAGES: render_condensed_items,
    SectionVariant.CERTIFICATIONS: render_condensed_items,
}


def render_sections(key: str, sections: Sequence[Section], sheet: StyleSheet) -> List[Node]:
    """One titled block per visible, non-empty section whose type is key."""
    blocks = []
    for section in sections:
        if section.type != key or not section.is_visible or section.is_empty:
            continue
        content = SECTION_RENDERERS[section.variant](section, sheet)
        blocks.append(_section_block(sheet, section.title, content))
    return blocks


def render_key(
    key: str,
    document: ResumeDocument,
    sections: Sequence[Section],
    sheet: StyleSheet,
    inline_photo: bool = True,
    inline_contact: bool = True,
) -> List[Node]:
    """Nodes produced by one section key (empty list means no content)."""
    info = document.personal_info
    if key == "header":
        return render_header(info, sheet, inline_photo=inline_photo, inline_contact=inline_contact)
    if key == "summary":
        return render_summary(info, sheet)
    if key == "contact":
        return render_contact(info, sheet)
    if key == "photo":
        return render_photo(info, sheet)
    return render_sections(key, sections, sheet)


# =============================================================================
# Region
# =============================================================================


def compose_region(
    region: RegionDefinition,
    resolved_keys: Sequence[str],
    document: ResumeDocument,
    sections: Sequence[Section],
    styles: ResolvedStyleSet,
    *,
    layout: str = "single-column",
    inline_photo: bool = True,
    inline_contact: bool = True,
    sheet: Optional[StyleSheet] = None,
) -> RegionNode:
    """
    Lay out one region and fill it with its resolved content.

    Empty keys produce no content node; the region itself is always returned
    with its sizing so that sibling columns keep their geometry.

    Args:
        region: Region definition from the template
        resolved_keys: Keys from order_for_region()
        document: Source document (personal info for pseudo-sections)
        sections: Materialized sections
        styles: Resolved style set
        layout: Template layout archetype (decides row sizing for body regions)
        inline_photo: Show the profile photo inside the header block
        inline_contact: Show the contact row inside the header block
        sheet: Pre-built style sheet (built from styles when omitted)

    Returns:
        RegionNode
    """
    if sheet is None:
        sheet = build_style_sheet(styles)

    is_body_row = region.slot == "body" and layout in ROW_LAYOUTS
    gap = region.gap or 0.0

    children = []
    for key in resolved_keys:
        nodes = render_key(
            key, document, sections, sheet, inline_photo=inline_photo, inline_contact=inline_contact
        )
        if not nodes:
            continue
        children.append(
            ContentNode(key=key, margin_top=gap if children else 0.0, children=nodes)
        )

    node = RegionNode(
        region_id=region.id,
        slot=region.slot,
        flow_direction=region.direction,
        width_fraction=region.width_fraction,
        flex_grow=(region.width_fraction or 1.0) if is_body_row else 1.0,
        flex_shrink=0.0 if is_body_row else 1.0,
        flex_basis=0.0 if is_body_row else "auto",
        background_color=region.background_color or styles.region_background(region.id),
        padding=region.padding,
        gap=gap,
        children=children,
    )
    log_region_composed(node)
    return node
