"""
Layout Engine

Runs the full pipeline for one document:

    registry -> tokens -> materialize -> order -> compose -> assemble

No I/O and no state between calls; the same document and template id always
produce an equal PageTree.
"""

from typing import Optional

from vellum.contexts.composition.assembler import assemble
from vellum.contexts.composition.compositor import compose_region
from vellum.contexts.composition.document import ResumeDocument
from vellum.contexts.composition.logger import _log_info
from vellum.contexts.composition.materializer import materialize
from vellum.contexts.composition.ordering import order_for_region
from vellum.contexts.composition.page_tree import PageTree
from vellum.contexts.templating.registries import get_template_config
from vellum.contexts.templating.tokens import build_style_sheet, resolve_tokens


def render_page_tree(document: ResumeDocument, template_id: Optional[str] = None) -> PageTree:
    """
    Lay out a resume document with a template.

    Args:
        document: Normalized resume document
        template_id: Template to use. Defaults to the document's own
                     template setting, then to the catalog default

    Returns:
        PageTree for one logical page

    Example:
        doc = ResumeDocument.load(Path("resume.yaml"))
        tree = render_page_tree(doc, "modern")
    """
    config = get_template_config(template_id or document.settings.template_id)
    styles = resolve_tokens(config, document.settings)
    sheet = build_style_sheet(styles)
    sections = materialize(document)

    # Photo/contact move out of the header when a region shows them on their own
    inline_photo = not config.allows_key("photo")
    inline_contact = not config.allows_key("contact")

    region_nodes = {}
    for region in config.structure:
        keys = order_for_region(config, region.id, sections)
        region_nodes[region.id] = compose_region(
            region,
            keys,
            document,
            sections,
            styles,
            layout=config.layout,
            inline_photo=inline_photo,
            inline_contact=inline_contact,
            sheet=sheet,
        )

    tree = assemble(config, styles, region_nodes)
    _log_info(f"Laid out '{document.title or 'untitled'}' with template '{config.id}'")
    return tree
