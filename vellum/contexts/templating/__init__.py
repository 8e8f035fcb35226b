"""
Templating Context

Responsibilities:
- Loads the template catalog (layout archetype, regions, content map, tokens)
- Resolves design tokens against document formatting overrides
- Lints template definitions for authoring mistakes

Owns: Template catalog, TemplateConfig model, design tokens
Never: Looks at document content
"""

from vellum.contexts.templating.exceptions import TemplateConfigError
from vellum.contexts.templating.lint import TemplateLintReport, lint_template
from vellum.contexts.templating.registries import (
    TemplateRegistry,
    get_registry,
    get_template_config,
)
from vellum.contexts.templating.template_config import (
    RegionDefinition,
    Spacing,
    TemplateConfig,
    TemplateTokens,
)
from vellum.contexts.templating.tokens import (
    FormattingOverrides,
    ResolvedStyleSet,
    build_style_sheet,
    resolve_tokens,
)

__all__ = [
    # Registry
    "TemplateRegistry",
    "get_registry",
    "get_template_config",
    # Configuration model
    "TemplateConfig",
    "RegionDefinition",
    "Spacing",
    "TemplateTokens",
    "TemplateConfigError",
    # Token resolution
    "FormattingOverrides",
    "ResolvedStyleSet",
    "resolve_tokens",
    "build_style_sheet",
    # Lint
    "TemplateLintReport",
    "lint_template",
]
