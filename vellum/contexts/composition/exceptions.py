"""Custom exceptions for the composition context."""

from pathlib import Path
from typing import Optional


class DocumentLoadError(ValueError):
    """
    Exception raised when a document file cannot be turned into a ResumeDocument.

    Only file loading raises: once a mapping is in hand, document parsing
    coerces degraded content instead of failing.

    Attributes:
        message: Error description
        path: Path of the document file
        original_error: Underlying parser error, if any
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.path = path
        self.original_error = original_error

        parts = [message]

        if path:
            parts.append(f"Document: {path}")
        if original_error:
            parts.append(f"Original error: {str(original_error)}")

        super().__init__("\n".join(parts))
