"""
Integration tests for Markdown rendering of page trees.
"""

import pytest

from vellum.contexts.composition.document import ResumeDocument
from vellum.contexts.composition.engine import render_page_tree
from vellum.contexts.rendering.markdown_renderer import render_markdown


@pytest.mark.integration
def test_render_markdown_classic(sample_document):
    markdown = render_markdown(render_page_tree(sample_document, "classic"))

    assert markdown.startswith("# Leela Turanga\n")
    assert "**Delivery Ship Captain**" in markdown
    assert "[LinkedIn](https://linkedin.example/in/leela)" in markdown
    assert "![Profile photo](https://images.example/leela.png)" in markdown
    assert "## Professional Summary" in markdown
    assert "### Captain (2999 - Present)" in markdown
    assert "*Planet Express*" in markdown
    assert "Navigation (Expert), Martial Arts" in markdown


@pytest.mark.integration
def test_markdown_follows_region_order(sample_document):
    """Test sidebar content comes before main content in sidebar-left layouts."""
    markdown = render_markdown(render_page_tree(sample_document, "modern"))

    assert markdown.index("## Contact") < markdown.index("# Leela Turanga")
    assert markdown.index("## Languages") < markdown.index("## Experience")


@pytest.mark.integration
def test_markdown_section_order_matches_tree(sample_document):
    markdown = render_markdown(render_page_tree(sample_document, "classic"))

    headings = [line for line in markdown.splitlines() if line.startswith("## ")]
    assert headings == ["## Professional Summary", "## Skills", "## Experience", "## Education"]


@pytest.mark.integration
def test_empty_document_markdown():
    assert render_markdown(render_page_tree(ResumeDocument())) == "\n"
