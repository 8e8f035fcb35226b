"""
Section-Key Ordering

Decides the order of section keys inside one region by reconciling the
template's allow-list for that region with the order the user gave the
sections in the editor.

Algorithm:
1. Allow-list from the template's content map; nothing allowed -> nothing rendered
2. Candidate order: pseudo keys (header, summary, contact, photo), then the
   section types in the order they first appear in the user's sections
3. Keep candidate keys that are allow-listed, first occurrence only
4. Append allow-listed keys not seen yet, in allow-list order

A key allow-listed in several regions is ordered (and rendered) in each one.
"""

from typing import List, Sequence

from vellum.contexts.composition.sections import Section
from vellum.contexts.templating.defaults import PSEUDO_SECTION_KEYS
from vellum.contexts.templating.template_config import TemplateConfig


def user_type_order(sections: Sequence[Section]) -> List[str]:
    """Distinct section types in first-seen order."""
    seen = []
    for section in sections:
        if section.type not in seen:
            seen.append(section.type)
    return seen


def order_for_region(config: TemplateConfig, region_id: str, user_sections: Sequence[Section]) -> List[str]:
    """
    Compute the ordered section keys a region renders.

    Args:
        config: Template config holding the content map
        region_id: Region to order
        user_sections: Materialized sections in user order

    Returns:
        Ordered list of section keys (pseudo keys and section types)

    Example:
        User sections [skills, experience, education] with allow-list
        [header, experience, education, skills] give
        [header, skills, experience, education].
    """
    allowed = config.allowed_keys(region_id)
    if not allowed:
        return []

    candidates = list(PSEUDO_SECTION_KEYS) + user_type_order(user_sections)

    ordered = []
    for key in candidates:
        if key in allowed and key not in ordered:
            ordered.append(key)

    # Template keys the user never touched still get their slot
    for key in allowed:
        if key not in ordered:
            ordered.append(key)

    return ordered
