"""
Composition Context

Responsibilities:
- Normalizes resume documents into ordered, visible sections
- Orders section keys per template region
- Composes regions and assembles the page tree

Owns: ResumeDocument model, Section model, PageTree model
Never: Draws the page tree (see rendering context)
"""

from vellum.contexts.composition.assembler import assemble
from vellum.contexts.composition.compositor import compose_region
from vellum.contexts.composition.document import PersonalInfo, ResumeDocument
from vellum.contexts.composition.engine import render_page_tree
from vellum.contexts.composition.exceptions import DocumentLoadError
from vellum.contexts.composition.materializer import materialize
from vellum.contexts.composition.ordering import order_for_region
from vellum.contexts.composition.page_tree import (
    BodyNode,
    ContentNode,
    Node,
    NodeKind,
    PageTree,
    RegionNode,
)
from vellum.contexts.composition.sections import Section, SectionItem, SectionVariant

__all__ = [
    # Pipeline
    "render_page_tree",
    "materialize",
    "order_for_region",
    "compose_region",
    "assemble",
    # Document model
    "ResumeDocument",
    "PersonalInfo",
    "DocumentLoadError",
    "Section",
    "SectionItem",
    "SectionVariant",
    # Page tree
    "PageTree",
    "BodyNode",
    "RegionNode",
    "ContentNode",
    "Node",
    "NodeKind",
]
