"""
Template Registry

Fixed catalog mapping a template id to its TemplateConfig. The catalog is a
YAML file loaded with OmegaConf on first access and cached for the lifetime
of the process.

Lookups never fail: an unknown, empty or missing id resolves to the catalog's
first-registered template, so a stale id stored with an old document still
renders.
"""

import os
import threading
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

from vellum.contexts.templating.exceptions import TemplateConfigError
from vellum.contexts.templating.lint import lint_template
from vellum.contexts.templating.logger import _log_debug, log_catalog_loaded, log_lint_report
from vellum.contexts.templating.template_config import TemplateConfig, parse_template_config

load_dotenv()
TEMPLATES_PATH = Path(
    os.getenv(
        "VELLUM_TEMPLATES_PATH",
        str(Path(__file__).parent / "templates" / "templates.yaml"),
    )
)


class TemplateRegistry:
    """
    Registry for loading and caching template configurations.

    The catalog is read once, lazily, under a lock. After that the registry is
    read-only and safe to share between threads.
    """

    def __init__(self, catalog_path: Path = None):
        """
        Initialize the template registry.

        Args:
            catalog_path: Path to the catalog YAML. Defaults to
                          VELLUM_TEMPLATES_PATH from environment
        """
        if catalog_path is None:
            catalog_path = TEMPLATES_PATH

        self.catalog_path = Path(catalog_path)
        self._cache: Dict[str, TemplateConfig] = {}
        self._default_id: Optional[str] = None
        self._lock = threading.Lock()

    def _ensure_loaded(self) -> None:
        if self._cache:
            return
        with self._lock:
            if self._cache:
                return
            self._cache.update(self._load_catalog())

    def _load_catalog(self) -> Dict[str, TemplateConfig]:
        """
        Parse every catalog entry into a TemplateConfig.

        Raises:
            FileNotFoundError: If the catalog file doesn't exist
            TemplateConfigError: If the catalog has no templates or an entry is invalid
        """
        if not self.catalog_path.exists():
            raise FileNotFoundError(f"Template catalog not found at {self.catalog_path}")

        catalog = OmegaConf.to_container(OmegaConf.load(self.catalog_path), resolve=True)
        entries = (catalog or {}).get("templates") or {}

        if not entries:
            raise TemplateConfigError("Catalog defines no templates", catalog_path=self.catalog_path)

        configs = {}
        for template_id, entry in entries.items():
            try:
                config = parse_template_config(str(template_id), entry or {})
            except TemplateConfigError as e:
                raise TemplateConfigError(
                    e.message,
                    template_id=e.template_id,
                    catalog_path=self.catalog_path,
                    field_name=e.field_name,
                ) from e

            report = lint_template(config)
            if not report.is_clean:
                log_lint_report(report)

            configs[config.id] = config

        self._default_id = next(iter(configs))
        log_catalog_loaded(self.catalog_path, list(configs), self._default_id)
        return configs

    @property
    def default_template_id(self) -> str:
        """Id of the first-registered template."""
        self._ensure_loaded()
        return self._default_id

    @property
    def template_ids(self) -> List[str]:
        """All template ids in registration order."""
        self._ensure_loaded()
        return list(self._cache)

    def get_config(self, template_id: Optional[str] = None) -> TemplateConfig:
        """
        Get a template config by id, falling back to the default template.

        Args:
            template_id: Template id (may be None, empty or unknown)

        Returns:
            TemplateConfig (never None)
        """
        self._ensure_loaded()

        if template_id and template_id in self._cache:
            return self._cache[template_id]

        if template_id:
            _log_debug(f"Unknown template id '{template_id}', using '{self._default_id}'")
        return self._cache[self._default_id]

    def clear_cache(self):
        """Forget loaded templates; the catalog is re-read on next access."""
        with self._lock:
            self._cache.clear()
            self._default_id = None

    def is_loaded(self) -> bool:
        return bool(self._cache)

    def __contains__(self, template_id: str) -> bool:
        self._ensure_loaded()
        return template_id in self._cache

    def __len__(self) -> int:
        self._ensure_loaded()
        return len(self._cache)


_default_registry = TemplateRegistry()


def get_registry() -> TemplateRegistry:
    """Process-wide registry backed by the configured catalog."""
    return _default_registry


def get_template_config(template_id: Optional[str] = None) -> TemplateConfig:
    """
    Look up a template config in the process-wide registry.

    Examples:
        >>> get_template_config("modern").layout
        'sidebar-left'
        >>> get_template_config("not-a-real-id") is get_template_config("classic")
        True
    """
    return _default_registry.get_config(template_id)
