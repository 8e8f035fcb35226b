"""
Section Data Structures

Uniform section representation the layout pipeline works on. Sections are
either given explicitly by the host or derived from the document's array
collections; both end up as the same immutable Section shape.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Tuple

from vellum.utils.text_processing import coerce_text


class SectionVariant(Enum):
    """
    Closed set of render strategies for section content.

    Every section type maps to exactly one variant (see variant_for); the
    compositor keeps one strategy per member.
    """

    EXPERIENCE = "experience"
    SKILLS = "skills"
    LANGUAGES = "languages"
    CERTIFICATIONS = "certifications"
    CUSTOM = "custom"


SECTION_TYPE_VARIANTS = {
    "experience": SectionVariant.EXPERIENCE,
    "education": SectionVariant.EXPERIENCE,
    "projects": SectionVariant.EXPERIENCE,
    "volunteer": SectionVariant.EXPERIENCE,
    "skills": SectionVariant.SKILLS,
    "languages": SectionVariant.LANGUAGES,
    "certifications": SectionVariant.CERTIFICATIONS,
    "custom": SectionVariant.CUSTOM,
}


def variant_for(section_type: str) -> SectionVariant:
    """Render variant for a section type; unknown types render as EXPERIENCE."""
    return SECTION_TYPE_VARIANTS.get(section_type, SectionVariant.EXPERIENCE)


@dataclass(frozen=True)
class SectionItem:
    """
    One entry inside a section.

    Attributes:
        id: Caller-assigned identifier
        title: Main line (job title, degree, skill name, ...)
        subtitle: Secondary line (company, school, proficiency, ...)
        date: Free-text date label, never parsed
        description: Body text
    """

    id: str = ""
    title: str = ""
    subtitle: str = ""
    date: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "SectionItem":
        """
        Build an item from loosely-shaped host data.

        A bare string becomes the title. Missing fields become "".
        """
        if isinstance(data, SectionItem):
            return data
        if not isinstance(data, Mapping):
            return cls(title=coerce_text(data))
        return cls(
            id=coerce_text(data.get("id")),
            title=coerce_text(data.get("title")),
            subtitle=coerce_text(data.get("subtitle")),
            date=coerce_text(data.get("date")),
            description=coerce_text(data.get("description")),
        )


@dataclass(frozen=True)
class Section:
    """
    A titled, typed group of items.

    Attributes:
        id: Section identifier
        type: Semantic key (e.g., 'experience', 'skills', 'custom')
        title: Heading shown above the items
        is_visible: Hidden sections are dropped during materialization
        items: Ordered items
    """

    id: str
    type: str
    title: str = ""
    is_visible: bool = True
    items: Tuple[SectionItem, ...] = ()

    @property
    def is_empty(self) -> bool:
        return len(self.items) == 0

    @property
    def variant(self) -> SectionVariant:
        return variant_for(self.type)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Section":
        """
        Build a section from host data.

        Accepts isVisible or is_visible (default True). Items that are not a
        list are treated as no items.
        """
        raw_items = data.get("items")
        if not isinstance(raw_items, (list, tuple)):
            raw_items = []

        visible = data.get("isVisible", data.get("is_visible", True))

        section_type = coerce_text(data.get("type"))
        return cls(
            id=coerce_text(data.get("id")) or section_type,
            type=section_type,
            title=coerce_text(data.get("title")),
            is_visible=visible is not False,
            items=tuple(SectionItem.from_dict(item) for item in raw_items),
        )
