"""
Text processing utilities for coercing loosely-typed document fields.
"""

import re
from typing import Any, Iterable

# Characters allowed in exported filenames (everything else is stripped)
UNSAFE_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9\s\-_.]")
WHITESPACE_RUN = re.compile(r"\s+")

DEFAULT_FILENAME = "Resume"


def coerce_text(value: Any) -> str:
    """
    Coerce an arbitrary field value to a display string.

    None becomes "", strings are returned unchanged, numbers and other scalars
    are converted with str(). Containers are not flattened.

    Examples:
        >>> coerce_text(None)
        ''
        >>> coerce_text(2021)
        '2021'
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, set)):
        return ""
    return str(value)


def join_present(parts: Iterable[Any], separator: str = " - ") -> str:
    """
    Join the non-empty parts with a separator.

    Examples:
        >>> join_present(["2020", "2021"])
        '2020 - 2021'
        >>> join_present(["2020", None])
        '2020'
    """
    return separator.join(text for text in (coerce_text(part) for part in parts) if text)


def sanitize_filename(name: str, max_length: int = 100) -> str:
    """
    Derive a filesystem-safe filename stem from a document title.

    Strips unsafe characters, collapses whitespace to underscores and caps the
    length. Falls back to "Resume" when nothing survives.

    Args:
        name: Raw title (may be None or empty)
        max_length: Maximum length of the returned stem

    Returns:
        Sanitized filename stem without extension

    Examples:
        >>> sanitize_filename("Jane Doe: CV/2026")
        'Jane_Doe_CV2026'
    """
    cleaned = UNSAFE_FILENAME_CHARS.sub("", coerce_text(name))
    cleaned = WHITESPACE_RUN.sub("_", cleaned.strip())[:max_length]
    return cleaned or DEFAULT_FILENAME
