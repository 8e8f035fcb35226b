"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from vellum.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[template]"


def setup_templating_logger(
    log_dir: Path, catalog_path: Path = None, console_level: Optional[str] = None
) -> Path:
    """
    Setup logger for templating context.

    Args:
        log_dir: Directory for this session
        catalog_path: Template catalog in use, recorded in the provenance header
        console_level: Minimum console level (None: VELLUM_LOG_LEVEL or INFO)

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="template",
        log_dir=log_dir,
        extra_provenance={"Catalog": catalog_path} if catalog_path else None,
        console_level=console_level,
    )


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [template] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [template] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [template] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_catalog_loaded(catalog_path: Path, template_ids: list, default_id: str) -> None:
    """Log a successful catalog load."""
    _log_debug(f"Loaded {len(template_ids)} template(s) from {catalog_path}")
    _log_debug(f"  Templates: {', '.join(template_ids)} (default: {default_id})")


def log_lint_report(report) -> None:
    """
    Log template lint findings as warnings.

    Args:
        report: TemplateLintReport from lint_template()
    """
    for issue in report.issues:
        _log_warning(f"{report.template_id}: {issue}")
