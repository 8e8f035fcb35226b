"""
Integration tests for HTML rendering of page trees.
"""

import pytest
from loguru import logger

from vellum.contexts.composition.engine import render_page_tree
from vellum.contexts.rendering.exceptions import RenderError
from vellum.contexts.rendering.fonts import initialize_renderer
from vellum.contexts.rendering.html_renderer import HTMLRenderer, style_to_css


@pytest.fixture
def captured_warnings():
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="WARNING")
    yield messages
    logger.remove(handler_id)


@pytest.mark.integration
@pytest.mark.parametrize("template_id", ["classic", "modern", "minimal", "professional", "photo"])
def test_render_html(sample_document, template_id):
    html = initialize_renderer().render(render_page_tree(sample_document, template_id))

    assert html.startswith("<!DOCTYPE html>")
    assert "@page { size: A4" in html
    assert f'data-template="{template_id}"' in html
    assert "Leela Turanga" in html


@pytest.mark.integration
def test_font_faces_and_atomic_blocks(sample_document):
    html = initialize_renderer().render(render_page_tree(sample_document, "modern"))

    assert "Inter-Regular.woff2" in html
    assert "font-weight: 700" in html
    assert 'class="item_block atomic"' in html
    assert "break-inside: avoid" in html


@pytest.mark.integration
def test_text_is_escaped(sample_document):
    from dataclasses import replace

    document = replace(
        sample_document,
        personal_info=replace(sample_document.personal_info, full_name="<script>alert(1)</script>"),
    )

    html = initialize_renderer().render(render_page_tree(document, "classic"))

    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;" in html


@pytest.mark.integration
def test_unregistered_font_warns(sample_document, captured_warnings):
    """Test a family with no registered face is reported, built-ins are not."""
    tree = render_page_tree(sample_document, "modern")

    initialize_renderer(font_assets=()).render(tree)
    assert any("'Inter' is not registered" in message for message in captured_warnings)

    captured_warnings.clear()
    initialize_renderer().render(render_page_tree(sample_document, "classic"))
    assert captured_warnings == []


@pytest.mark.integration
def test_write_html(sample_document, tmp_path):
    output = initialize_renderer().write(render_page_tree(sample_document), tmp_path / "out" / "cv.html")

    assert output.exists()
    assert "Leela Turanga" in output.read_text(encoding="utf-8")


@pytest.mark.integration
def test_template_failure_raises_render_error(sample_document, tmp_path):
    """Test Jinja2 failures surface as RenderError with the cause chained."""
    (tmp_path / "page.html.jinja").write_text("{{ tree.body.regions[0].nope() }}")
    renderer = HTMLRenderer(templates_dir=tmp_path)

    with pytest.raises(RenderError) as exc_info:
        renderer.render(render_page_tree(sample_document, "classic"))

    assert exc_info.value.template_id == "classic"
    assert exc_info.value.original_error is exc_info.value.__cause__


@pytest.mark.integration
def test_missing_template_raises_render_error(sample_document, tmp_path):
    with pytest.raises(RenderError):
        HTMLRenderer(templates_dir=tmp_path).render(render_page_tree(sample_document))


@pytest.mark.unit
def test_style_to_css():
    css = style_to_css(
        {"font_size": 11, "font_weight": 700, "flex_basis": 0, "font_family": "Inter", "color": None}
    )
    assert css == "font-size: 11pt; font-weight: 700; flex-basis: 0; font-family: 'Inter'"
