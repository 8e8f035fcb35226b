"""Unit tests for the shared CLI logger setup."""

import io
import sys

import pytest
from loguru import logger

from vellum.utils.logger import console_level_from_flags, resolve_console_level, setup_logger


@pytest.fixture
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.mark.unit
def test_setup_logger_writes_debug_to_file(tmp_path, restore_logger):
    """Test the session file captures DEBUG even when the console shows less."""
    console = io.StringIO()
    log_file = setup_logger(
        "render",
        tmp_path / "session",
        extra_provenance={"Template": "modern"},
        console_level="WARNING",
        console=console,
    )

    logger.debug("composing region 'main'")
    logger.warning("font 'Comic Neue' is not registered")
    logger.remove()

    assert log_file == tmp_path / "session" / "render.log"
    content = log_file.read_text()
    assert "Template: modern" in content
    assert "composing region 'main'" in content
    assert "font 'Comic Neue' is not registered" in content

    echoed = console.getvalue()
    assert "composing region 'main'" not in echoed
    assert "Template: modern" not in echoed
    assert "font 'Comic Neue' is not registered" in echoed


@pytest.mark.unit
def test_verbose_console_shows_debug(tmp_path, restore_logger):
    console = io.StringIO()
    setup_logger("compose", tmp_path, console_level=console_level_from_flags(verbose=True), console=console)

    logger.debug("ordering keys for 'sidebar'")
    logger.remove()

    assert "ordering keys for 'sidebar'" in console.getvalue()


@pytest.mark.unit
def test_console_level_precedence(monkeypatch):
    """Test explicit level beats VELLUM_LOG_LEVEL, which beats the INFO default."""
    monkeypatch.delenv("VELLUM_LOG_LEVEL", raising=False)
    assert resolve_console_level() == "INFO"

    monkeypatch.setenv("VELLUM_LOG_LEVEL", "debug")
    assert resolve_console_level() == "DEBUG"
    assert resolve_console_level("warning") == "WARNING"


@pytest.mark.unit
def test_unknown_console_level_raises(monkeypatch):
    monkeypatch.setenv("VELLUM_LOG_LEVEL", "LOUD")
    with pytest.raises(ValueError):
        resolve_console_level()


@pytest.mark.unit
@pytest.mark.parametrize(
    "verbose,quiet,expected",
    [(False, False, None), (True, False, "DEBUG"), (False, True, "WARNING")],
)
def test_console_level_from_flags(verbose, quiet, expected):
    assert console_level_from_flags(verbose, quiet) == expected


@pytest.mark.unit
def test_verbose_and_quiet_are_exclusive():
    with pytest.raises(ValueError):
        console_level_from_flags(verbose=True, quiet=True)
