"""
Shared utilities for VELLUM.

Common functionality used across contexts:
- Logger setup
- Text coercion and filename helpers
"""

from vellum.utils.text_processing import coerce_text, join_present, sanitize_filename

__all__ = ["coerce_text", "join_present", "sanitize_filename"]
