"""
Section Materialization

Normalizes every content source of a document into one ordered list of
visible, non-empty sections:

1. Explicit sections, in the host's (user's) order
2. Sections derived from the array collections, in fixed order
   projects, certifications, languages, volunteer
3. One 'custom' section per custom-section entry, in the user's order
4. Hidden sections removed
5. Sections without items removed

Pseudo-sections (header, summary, contact, photo) are not produced here;
the compositor synthesizes them from personal info.
"""

from typing import Callable, List, Sequence, Tuple

from vellum.contexts.composition.document import (
    Certification,
    Language,
    Project,
    ResumeDocument,
    VolunteerEntry,
)
from vellum.contexts.composition.logger import log_materialization
from vellum.contexts.composition.sections import Section, SectionItem
from vellum.utils.text_processing import join_present


def project_item(project: Project) -> SectionItem:
    return SectionItem(
        id=project.id,
        title=project.title,
        subtitle=project.role or project.company,
        date=join_present([project.start_date, project.end_date]),
        description=project.description,
    )


def certification_item(certification: Certification) -> SectionItem:
    return SectionItem(
        id=certification.id,
        title=certification.name,
        subtitle=certification.issuer,
        date=certification.date,
        description=certification.url,
    )


def language_item(language: Language) -> SectionItem:
    return SectionItem(id=language.id, title=language.language, subtitle=language.proficiency)


def volunteer_item(entry: VolunteerEntry) -> SectionItem:
    return SectionItem(
        id=entry.id,
        title=entry.organization,
        subtitle=entry.role,
        date=join_present([entry.start_date, entry.end_date]),
        description=entry.description,
    )


# (type, title, document attribute, item mapper), in append order
DERIVED_SECTIONS: Tuple[Tuple[str, str, str, Callable], ...] = (
    ("projects", "Projects", "projects", project_item),
    ("certifications", "Certifications", "certifications", certification_item),
    ("languages", "Languages", "languages", language_item),
    ("volunteer", "Volunteer Work", "volunteer", volunteer_item),
)


def derive_collection_sections(document: ResumeDocument, skip_types: Sequence[str] = ()) -> List[Section]:
    """
    Project the array collections into sections.

    Args:
        document: Source document
        skip_types: Section types already represented explicitly

    Returns:
        One section per non-empty collection not in skip_types
    """
    derived = []
    for section_type, title, attribute, to_item in DERIVED_SECTIONS:
        entries = getattr(document, attribute)
        if not entries or section_type in skip_types:
            continue
        derived.append(
            Section(
                id=section_type,
                type=section_type,
                title=title,
                is_visible=True,
                items=tuple(to_item(entry) for entry in entries),
            )
        )
    return derived


def custom_sections(document: ResumeDocument, skip_ids: Sequence[str] = ()) -> List[Section]:
    """
    Custom-section entries as 'custom' sections (items kept verbatim).

    Entries without an id get 'custom_<index>' so that a materialized entry
    is recognized again when the list is fed back as explicit sections.
    """
    sections = []
    for index, entry in enumerate(document.custom_sections):
        section_id = entry.id or f"custom_{index}"
        if section_id in skip_ids:
            continue
        sections.append(
            Section(
                id=section_id,
                type="custom",
                title=entry.title,
                is_visible=entry.is_visible,
                items=entry.items,
            )
        )
    return sections


def materialize(document: ResumeDocument) -> List[Section]:
    """
    Build the ordered list of visible, non-empty sections for one render.

    Collections already represented by an explicit section of the same type,
    and custom entries whose id matches an explicit section, are not added
    twice. This keeps re-materializing an already materialized list stable.

    Args:
        document: Source document

    Returns:
        Ordered sections ready for region ordering and composition
    """
    explicit = list(document.sections)
    explicit_types = {section.type for section in explicit}
    explicit_ids = {section.id for section in explicit if section.id}

    sections = explicit
    sections += derive_collection_sections(document, skip_types=explicit_types)
    sections += custom_sections(document, skip_ids=explicit_ids)

    sections = [section for section in sections if section.is_visible and not section.is_empty]

    log_materialization(sections)
    return sections
