"""Unit tests for template lint."""

import pytest

from vellum.contexts.templating.lint import lint_template
from vellum.contexts.templating.registries import TemplateRegistry
from vellum.contexts.templating.template_config import parse_template_config


def _config(layout="two-column", structure=None, content=None):
    return parse_template_config(
        "linted",
        {
            "layout": layout,
            "regions": {
                "structure": structure
                or [
                    {"id": "left", "slot": "body", "width_fraction": 0.5},
                    {"id": "right", "slot": "body", "width_fraction": 0.5},
                ],
                "content": content if content is not None else {"left": ["skills"], "right": ["experience"]},
            },
        },
    )


@pytest.mark.unit
@pytest.mark.parametrize("template_id", ["classic", "modern", "minimal", "professional", "photo"])
def test_packaged_templates_lint_clean(template_id):
    """Test the shipped catalog has no authoring mistakes."""
    report = lint_template(TemplateRegistry().get_config(template_id))
    assert report.is_clean, report.issues


@pytest.mark.unit
def test_clean_template():
    report = lint_template(_config())
    assert report.template_id == "linted"
    assert report.issues == []


@pytest.mark.unit
def test_key_in_multiple_regions():
    """Test duplicate allow-listing is reported but not rejected."""
    report = lint_template(_config(content={"left": ["skills"], "right": ["skills", "experience"]}))

    assert len(report.issues) == 1
    assert "'skills'" in report.issues[0]
    assert "left, right" in report.issues[0]


@pytest.mark.unit
def test_key_repeated_in_region():
    report = lint_template(_config(content={"left": ["skills", "skills"], "right": ["experience"]}))
    assert any("listed 2 times" in issue for issue in report.issues)


@pytest.mark.unit
def test_unknown_key():
    report = lint_template(_config(content={"left": ["hobbies"], "right": ["experience"]}))
    assert any("unknown section key 'hobbies'" in issue for issue in report.issues)


@pytest.mark.unit
def test_undeclared_region_and_region_without_content():
    report = lint_template(_config(content={"left": ["skills"], "aside": ["experience"]}))

    assert any("undeclared region 'aside'" in issue for issue in report.issues)
    assert any("Region 'right' has no content keys" in issue for issue in report.issues)


@pytest.mark.unit
def test_duplicate_region_id():
    structure = [
        {"id": "main", "slot": "body"},
        {"id": "main", "slot": "body"},
    ]
    report = lint_template(_config(layout="single-column", structure=structure, content={"main": ["header"]}))
    assert any("declared 2 times" in issue for issue in report.issues)


@pytest.mark.unit
def test_ignored_width_fraction():
    """Test width fractions outside row-flowed body regions are flagged."""
    structure = [
        {"id": "top", "slot": "header", "width_fraction": 0.5},
        {"id": "main", "slot": "body", "width_fraction": 0.8},
    ]
    report = lint_template(
        _config(layout="single-column", structure=structure, content={"top": ["header"], "main": ["experience"]})
    )

    assert len(report.issues) == 2
    assert "'header' slot" in report.issues[0]
    assert "stacks body regions" in report.issues[1]
