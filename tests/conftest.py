"""Shared pytest fixtures."""

from pathlib import Path

import pytest

from vellum.contexts.composition.document import ResumeDocument

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def sample_document() -> ResumeDocument:
    """Fully populated document loaded from tests/fixtures/sample_resume.yaml."""
    return ResumeDocument.load(FIXTURES_DIR / "sample_resume.yaml")
