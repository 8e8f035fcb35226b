"""Custom exceptions for the templating context."""

from pathlib import Path
from typing import Optional


class TemplateConfigError(ValueError):
    """
    Exception raised when the template catalog is malformed.

    Raised while loading the catalog, never while rendering a document: a bad
    template id at render time falls back to the default template instead.

    Attributes:
        message: Error description
        template_id: Template whose definition is invalid
        catalog_path: Path to the catalog file being loaded
        field_name: Dotted path of the offending field (e.g., 'regions.structure[1].slot')
    """

    def __init__(
        self,
        message: str,
        template_id: Optional[str] = None,
        catalog_path: Optional[Path] = None,
        field_name: Optional[str] = None,
    ):
        self.message = message
        self.template_id = template_id
        self.catalog_path = catalog_path
        self.field_name = field_name

        parts = [message]

        if template_id:
            parts.append(f"Template: {template_id}")
        if field_name:
            parts.append(f"Field: {field_name}")
        if catalog_path:
            parts.append(f"Catalog: {catalog_path}")

        super().__init__("\n".join(parts))
