"""
Composition context logger.

Provides logging interface for composition context with automatic [compose] prefix.
All composition modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional, TextIO

from loguru import logger

from vellum.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[compose]"


def setup_composition_logger(
    log_dir: Path,
    template_id: str = None,
    console_level: Optional[str] = None,
    console: Optional[TextIO] = None,
) -> Path:
    """
    Setup logger for composition context.

    Args:
        log_dir: Directory for this composition session
        template_id: Requested template, recorded in the provenance header
        console_level: Minimum console level (None: VELLUM_LOG_LEVEL or INFO)
        console: Console stream (stderr when the page tree goes to stdout)

    Returns:
        Path to log file

    Example:
        from vellum.contexts.composition.logger import setup_composition_logger

        log_file = setup_composition_logger(log_dir, template_id="modern")
    """
    return _setup_logger(
        context_name="compose",
        log_dir=log_dir,
        extra_provenance={"Template": template_id or "(document setting)"},
        console_level=console_level,
        console=console,
    )


def _log_info(message: str) -> None:
    """Log info message with [compose] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [compose] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [compose] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [compose] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [compose] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level composition-specific logging helpers


def log_materialization(sections) -> None:
    """Log the materialized section list."""
    summary = ", ".join(f"{section.type}({len(section.items)})" for section in sections)
    _log_debug(f"Materialized {len(sections)} section(s): {summary or 'none'}")


def log_region_composed(region_node) -> None:
    """Log which content keys a region ended up rendering."""
    keys = [child.key for child in region_node.children]
    _log_debug(
        f"Region '{region_node.region_id}' ({region_node.slot}): "
        f"{', '.join(keys) if keys else 'empty'}"
    )


def log_page_tree_built(tree) -> None:
    """Log a one-line summary of an assembled page tree."""
    _log_debug(
        f"Assembled page tree for template '{tree.template_id}' ({tree.layout}): "
        f"{len(tree.header)} header, {len(tree.body.regions)} body, "
        f"{len(tree.footer)} footer region(s)"
    )
