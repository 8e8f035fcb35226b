"""Custom exceptions for the rendering context."""

from typing import Optional


class RenderError(RuntimeError):
    """
    Exception raised when a renderer fails to draw a page tree.

    Attributes:
        message: Error description
        template_id: Template the page tree was built with
        output_format: Renderer output format (e.g., 'html')
        original_error: Underlying renderer error, if any
    """

    def __init__(
        self,
        message: str,
        template_id: Optional[str] = None,
        output_format: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.template_id = template_id
        self.output_format = output_format
        self.original_error = original_error

        parts = [message]

        if template_id:
            parts.append(f"Template: {template_id}")
        if output_format:
            parts.append(f"Format: {output_format}")
        if original_error:
            parts.append(f"Original error: {type(original_error).__name__}: {original_error}")

        super().__init__("\n".join(parts))
