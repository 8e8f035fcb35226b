"""
Shared logger setup for the CLI entry points.

One session = one log directory holding a DEBUG-level '<context>.log' file,
plus a console echo whose level comes from the command line
(--verbose/--quiet), the VELLUM_LOG_LEVEL environment variable, or INFO.
Context-specific wrappers are defined in contexts/{context}/logger.py.
"""

import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO

from dotenv import load_dotenv
from loguru import logger

from vellum import __version__

load_dotenv()

DEFAULT_CONSOLE_LEVEL = "INFO"
CONSOLE_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def resolve_console_level(console_level: Optional[str] = None) -> str:
    """
    Console level: explicit value, then VELLUM_LOG_LEVEL, then INFO.

    Raises:
        ValueError: If the level is not a loguru level name
    """
    level = (console_level or os.getenv("VELLUM_LOG_LEVEL") or DEFAULT_CONSOLE_LEVEL).upper()
    if level not in CONSOLE_LEVELS:
        raise ValueError(f"Unknown log level '{level}' (expected one of {', '.join(CONSOLE_LEVELS)})")
    return level


def console_level_from_flags(verbose: bool = False, quiet: bool = False) -> Optional[str]:
    """DEBUG for --verbose, WARNING for --quiet, None (environment/default) otherwise."""
    if verbose and quiet:
        raise ValueError("--verbose and --quiet are mutually exclusive")
    if verbose:
        return "DEBUG"
    if quiet:
        return "WARNING"
    return None


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: dict = None,
    console_level: Optional[str] = None,
    console: Optional[TextIO] = None,
) -> Path:
    """
    Configure loguru for one CLI session.

    Replaces any existing sinks with a DEBUG file sink and a colorized console
    sink, then writes the provenance header.

    Args:
        context_name: Context identifier (e.g., "compose", "render", "template")
        log_dir: Directory for this logging session
        extra_provenance: Additional key-value pairs for the provenance header
        console_level: Minimum level echoed to the console (see resolve_console_level)
        console: Console stream (default: stdout). Commands that print their
                 result to stdout pass sys.stderr here.

    Returns:
        Path to log file

    Example:
        from vellum.utils.logger import setup_logger

        log_file = setup_logger(
            context_name="render",
            log_dir=Path("outs/logs/render_20260101_120000"),
            extra_provenance={"Template": "modern"},
            console_level="DEBUG",
        )
    """
    level = resolve_console_level(console_level)

    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()

    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(
        log_file, format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}", level="DEBUG"
    )
    logger.add(
        console or sys.stdout,
        format="{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>",
        level=level,
        colorize=True,
    )

    log_provenance(extra_provenance)
    logger.debug(f"Console level: {level}")

    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """Write the session header: package version, start time, command line."""
    logger.info("=" * 80)
    logger.info(f"Vellum: {__version__}")
    logger.info(f"Started: {datetime.now().isoformat(timespec='seconds')}")
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")

    if extra_context:
        for key, value in extra_context.items():
            logger.info(f"{key}: {value}")

    logger.info("=" * 80)
