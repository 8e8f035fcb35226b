"""
Markdown Renderer

Plain Markdown walk of a PageTree, region by region in drawing order.
Styles are ignored; roles decide the markup.
"""

from typing import List

from vellum.contexts.composition.page_tree import Node, NodeKind, PageTree
from vellum.contexts.rendering.logger import log_render_result


def _inline(node: Node) -> str:
    """Single-line markup for a leaf or a row of leaves."""
    if node.kind == NodeKind.LINK:
        return f"[{node.text}]({node.href})"
    if node.kind == NodeKind.IMAGE:
        return f"![Profile photo]({node.src})"
    if node.kind == NodeKind.VIEW:
        return " ".join(part for part in (_inline(child) for child in node.children) if part)
    return node.text


def _item_lines(node: Node) -> List[str]:
    lines = []
    for child in node.children:
        if child.role == "item_header":
            title = next((c.text for c in child.children if c.role == "item_title"), "")
            date = next((c.text for c in child.children if c.role == "item_date"), "")
            heading = title or date
            if title and date:
                heading = f"{title} ({date})"
            lines.append(f"### {heading}")
        elif child.role == "item_subtitle":
            lines.append(f"*{child.text}*")
        elif child.role == "item_description":
            lines.append("")
            lines.append(child.text)
    lines.append("")
    return lines


def _node_lines(node: Node) -> List[str]:
    """Block-level markup for one node."""
    role = node.role

    if role == "header_name":
        return [f"# {node.text}", ""]
    if role == "header_job_title":
        return [f"**{node.text}**", ""]
    if role == "section_title":
        return [f"## {node.text}", ""]
    if role in ("header_contact", "skills_row"):
        separator = ", " if role == "skills_row" else " "
        parts = [_inline(child) for child in node.children]
        return [separator.join(part for part in parts if part), ""]
    if role == "item_block":
        return _item_lines(node)
    if node.kind == NodeKind.VIEW:
        lines = []
        for child in node.children:
            lines.extend(_node_lines(child))
        return lines

    text = _inline(node)
    return [text, ""] if text else []


def render_markdown(tree: PageTree) -> str:
    """
    Render a page tree as Markdown.

    Args:
        tree: Assembled page tree

    Returns:
        Markdown text ending with a single newline
    """
    lines: List[str] = []
    for region in tree.regions:
        for content in region.children:
            for node in content.children:
                lines.extend(_node_lines(node))

    markdown = "\n".join(lines).strip() + "\n"
    log_render_result(tree.template_id, "markdown", len(markdown))
    return markdown
