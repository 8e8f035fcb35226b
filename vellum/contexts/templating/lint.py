"""
Template lint for catalog authors.

Flags template definitions that load and render fine but are probably not
what the author meant. Findings are advisory: the registry logs them as
warnings and rendering carries on with the permissive behavior (for example a
key allow-listed in two regions renders in both).
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import List

from vellum.contexts.templating.defaults import KNOWN_SECTION_TYPES, PSEUDO_SECTION_KEYS
from vellum.contexts.templating.template_config import TemplateConfig


class LintTemplates:
    """Centralized issue message templates (f-string style)."""

    DUPLICATE_REGION_ID = "Region id '{region}' is declared {count} times"
    UNDECLARED_REGION = "Content map references undeclared region '{region}'"
    REGION_WITHOUT_CONTENT = "Region '{region}' has no content keys and will always be empty"
    KEY_IN_MULTIPLE_REGIONS = "Key '{key}' is allow-listed in several regions ({regions}) and renders in each"
    KEY_REPEATED_IN_REGION = "Key '{key}' is listed {count} times in region '{region}'"
    UNKNOWN_KEY = "Region '{region}' allow-lists unknown section key '{key}'"
    IGNORED_WIDTH_FRACTION = (
        "Region '{region}' sets width_fraction but {reason}, so it is ignored"
    )


@dataclass
class TemplateLintReport:
    """Lint findings for one template."""

    template_id: str
    issues: List[str] = field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        return len(self.issues) == 0


def lint_template(config: TemplateConfig) -> TemplateLintReport:
    """
    Check a template definition for authoring mistakes.

    Args:
        config: Template to check

    Returns:
        TemplateLintReport (empty issues list when nothing was found)
    """
    report = TemplateLintReport(template_id=config.id)
    issues = report.issues

    region_counts = Counter(region.id for region in config.structure)
    for region_id, count in region_counts.items():
        if count > 1:
            issues.append(LintTemplates.DUPLICATE_REGION_ID.format(region=region_id, count=count))

    for region_id in config.content_map:
        if region_id not in region_counts:
            issues.append(LintTemplates.UNDECLARED_REGION.format(region=region_id))

    for region in config.structure:
        if not config.allowed_keys(region.id):
            issues.append(LintTemplates.REGION_WITHOUT_CONTENT.format(region=region.id))

        if region.width_fraction is not None:
            if region.slot != "body":
                reason = f"it sits in the '{region.slot}' slot"
                issues.append(
                    LintTemplates.IGNORED_WIDTH_FRACTION.format(region=region.id, reason=reason)
                )
            elif not config.is_row_layout and region.width_fraction != 1:
                reason = f"layout '{config.layout}' stacks body regions"
                issues.append(
                    LintTemplates.IGNORED_WIDTH_FRACTION.format(region=region.id, reason=reason)
                )

    known_keys = set(PSEUDO_SECTION_KEYS) | set(KNOWN_SECTION_TYPES)
    regions_by_key = {}
    for region_id, keys in config.content_map.items():
        for key, count in Counter(keys).items():
            if count > 1:
                issues.append(
                    LintTemplates.KEY_REPEATED_IN_REGION.format(key=key, count=count, region=region_id)
                )
            if key not in known_keys:
                issues.append(LintTemplates.UNKNOWN_KEY.format(region=region_id, key=key))
            regions_by_key.setdefault(key, []).append(region_id)

    for key, region_ids in regions_by_key.items():
        if len(region_ids) > 1:
            issues.append(
                LintTemplates.KEY_IN_MULTIPLE_REGIONS.format(key=key, regions=", ".join(region_ids))
            )

    return report
