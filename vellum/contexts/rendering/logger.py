"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from vellum.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(
    log_dir: Path, output_format: str = None, console_level: Optional[str] = None
) -> Path:
    """
    Setup logger for rendering context.

    Args:
        log_dir: Directory for this rendering session
        output_format: Output format, recorded in the provenance header
        console_level: Minimum console level (None: VELLUM_LOG_LEVEL or INFO)

    Returns:
        Path to log file

    Example:
        from vellum.contexts.rendering.logger import setup_rendering_logger

        log_file = setup_rendering_logger(log_dir, output_format="html")
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Output format": output_format} if output_format else None,
        console_level=console_level,
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_fonts_registered(families) -> None:
    """Log the font families available to the renderer."""
    _log_debug(f"Registered font families: {', '.join(sorted(families)) or 'none'}")


def log_render_result(template_id: str, output_format: str, size: int) -> None:
    """Log a finished render."""
    _log_success(f"Rendered '{template_id}' as {output_format} ({size} characters)")
