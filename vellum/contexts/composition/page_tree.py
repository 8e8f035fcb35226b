"""
Page Tree Data Structures

Output of the layout engine: one logical page made of regions, each holding
stacked content nodes built from generic leaf/container nodes. All styles are
baked into the nodes, so a renderer can walk the tree without knowing
anything about templates.

Pagination belongs to the renderer. Nodes marked atomic (item blocks) should
not be split across physical pages.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Union

from vellum.contexts.templating.template_config import Spacing


class NodeKind:
    """Node kinds a renderer has to handle."""

    VIEW = "view"
    TEXT = "text"
    LINK = "link"
    IMAGE = "image"
    TAG = "tag"

    ALL = (VIEW, TEXT, LINK, IMAGE, TAG)


@dataclass
class Node:
    """
    Generic page-tree node.

    Attributes:
        kind: One of NodeKind.ALL
        role: Style role name (e.g., 'section_title', 'item_block')
        style: Baked style properties for this node
        text: Text content (text, link and tag nodes)
        src: Image source (image nodes)
        href: Link target (link nodes)
        atomic: True if the renderer should keep the node on one page
        children: Child nodes (view nodes)
    """

    kind: str
    role: str = ""
    style: Dict[str, Any] = field(default_factory=dict)
    text: str = ""
    src: str = ""
    href: str = ""
    atomic: bool = False
    children: List["Node"] = field(default_factory=list)

    def iter_nodes(self):
        """Depth-first iteration over this node and all descendants."""
        yield self
        for child in self.children:
            yield from child.iter_nodes()


@dataclass
class ContentNode:
    """
    Output of one section key inside a region.

    Attributes:
        key: Section key that produced the content (e.g., 'header', 'experience')
        margin_top: Region gap applied before this node (0 for the first node)
        children: Rendered blocks (one per matching section for real keys)
    """

    key: str
    margin_top: float = 0.0
    children: List[Node] = field(default_factory=list)

    def iter_nodes(self):
        for child in self.children:
            yield from child.iter_nodes()


@dataclass
class RegionNode:
    """
    A laid-out region with its resolved content.

    Attributes:
        region_id: Region identifier from the template
        slot: 'header', 'body' or 'footer'
        flow_direction: Direction content is stacked in
        width_fraction: Declared width fraction (body regions of row layouts)
        flex_grow: Relative width weight
        flex_shrink: 0 for body columns of row layouts, else 1
        flex_basis: 0 for body columns of row layouts, else 'auto'
        background_color: Region background, if any
        padding: Inner padding, if any
        gap: Space between content nodes
        margin_right: Gutter after the region (set by the assembler)
        children: Content nodes in resolved key order
    """

    region_id: str
    slot: str
    flow_direction: str = "column"
    width_fraction: Optional[float] = None
    flex_grow: float = 1.0
    flex_shrink: float = 1.0
    flex_basis: Union[float, str] = "auto"
    background_color: Optional[str] = None
    padding: Optional[Spacing] = None
    gap: float = 0.0
    margin_right: float = 0.0
    children: List[ContentNode] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return len(self.children) == 0

    @property
    def content_keys(self) -> List[str]:
        return [child.key for child in self.children]

    def iter_nodes(self):
        for child in self.children:
            yield from child.iter_nodes()


@dataclass
class BodyNode:
    """Body slot: regions flowed as a row or stacked as a column."""

    flow: str = "column"
    regions: List[RegionNode] = field(default_factory=list)


@dataclass
class PageTree:
    """
    One logical, page-sized canvas.

    Attributes:
        template_id: Template that produced the tree
        layout: Layout archetype of that template
        page_size: Paper size hint for the renderer
        style: Page-level style (margins, base font, colors)
        header: Full-width header regions, in declaration order
        body: Body regions and their flow
        footer: Full-width footer regions, in declaration order
    """

    template_id: str
    layout: str
    page_size: str
    style: Dict[str, Any] = field(default_factory=dict)
    header: List[RegionNode] = field(default_factory=list)
    body: BodyNode = field(default_factory=BodyNode)
    footer: List[RegionNode] = field(default_factory=list)

    @property
    def regions(self) -> List[RegionNode]:
        """All regions in drawing order (header, body, footer)."""
        return [*self.header, *self.body.regions, *self.footer]

    def find_region(self, region_id: str) -> Optional[RegionNode]:
        for region in self.regions:
            if region.region_id == region_id:
                return region
        return None

    def iter_nodes(self):
        """Depth-first iteration over every leaf/container node on the page."""
        for region in self.regions:
            yield from region.iter_nodes()

    def to_dict(self) -> Dict[str, Any]:
        """Plain nested dict/list structure (for YAML/JSON serialization)."""
        return asdict(self)
