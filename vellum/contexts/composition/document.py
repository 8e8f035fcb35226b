"""
Resume Document Structure

Host-owned input of the layout engine: personal info, explicit sections, the
"advanced" array collections, custom sections and formatting overrides.

Documents arrive as JSON from the editing/persistence layer, so every field
may be missing, null or oddly typed. Parsing never raises on content: absent
values become empty strings or empty collections. Keys are accepted in the
host's camelCase form as well as snake_case.

The array collections (projects, certifications, languages, volunteer) are
the source of truth for that data; the sections derived from them are
recomputed on every render and never written back here.
"""

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

from omegaconf import OmegaConf

from vellum.contexts.composition.exceptions import DocumentLoadError
from vellum.contexts.composition.sections import Section, SectionItem
from vellum.contexts.templating.tokens import FormattingOverrides
from vellum.utils.text_processing import coerce_text, join_present

DEFAULT_DOCUMENT_TITLE = "Untitled Resume"


def _get(data: Mapping[str, Any], *keys: str) -> str:
    """First non-empty text value among keys ("" when none)."""
    for key in keys:
        text = coerce_text(data.get(key))
        if text:
            return text
    return ""


def _mappings(value: Any) -> List[Mapping[str, Any]]:
    """Keep only the mapping entries of a list-like value."""
    if not isinstance(value, (list, tuple)):
        return []
    return [entry for entry in value if isinstance(entry, Mapping)]


@dataclass(frozen=True)
class PersonalInfo:
    """Personal details used by the header, summary, contact and photo blocks."""

    full_name: str = ""
    job_title: str = ""
    email: str = ""
    phone: str = ""
    linkedin: str = ""
    website: str = ""
    location: str = ""
    summary: str = ""
    profile_picture: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "PersonalInfo":
        if not isinstance(data, Mapping):
            return cls()
        return cls(
            full_name=_get(data, "fullName", "full_name", "name"),
            job_title=_get(data, "jobTitle", "job_title"),
            email=_get(data, "email"),
            phone=_get(data, "phone"),
            linkedin=_get(data, "linkedin"),
            website=_get(data, "website"),
            location=_get(data, "location"),
            summary=_get(data, "summary"),
            profile_picture=_get(data, "profilePicture", "profile_picture"),
        )

    @property
    def has_contact(self) -> bool:
        return any((self.email, self.phone, self.linkedin, self.website, self.location))


@dataclass(frozen=True)
class Project:
    id: str = ""
    title: str = ""
    role: str = ""
    company: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Project":
        return cls(
            id=_get(data, "id"),
            title=_get(data, "title", "name"),
            role=_get(data, "role"),
            company=_get(data, "company"),
            start_date=_get(data, "startDate", "start_date"),
            end_date=_get(data, "endDate", "end_date"),
            description=_get(data, "description"),
            url=_get(data, "url"),
        )


@dataclass(frozen=True)
class Certification:
    id: str = ""
    name: str = ""
    issuer: str = ""
    date: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Certification":
        return cls(
            id=_get(data, "id"),
            name=_get(data, "name"),
            issuer=_get(data, "issuer"),
            date=_get(data, "date"),
            url=_get(data, "url"),
        )


@dataclass(frozen=True)
class Language:
    id: str = ""
    language: str = ""
    proficiency: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Language":
        return cls(
            id=_get(data, "id"),
            language=_get(data, "language", "name"),
            proficiency=_get(data, "proficiency", "level"),
        )


@dataclass(frozen=True)
class VolunteerEntry:
    id: str = ""
    organization: str = ""
    role: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "VolunteerEntry":
        return cls(
            id=_get(data, "id"),
            organization=_get(data, "organization"),
            role=_get(data, "role"),
            start_date=_get(data, "startDate", "start_date"),
            end_date=_get(data, "endDate", "end_date"),
            description=_get(data, "description"),
        )


@dataclass(frozen=True)
class CustomSection:
    """User-defined section with its own title and verbatim items."""

    id: str = ""
    title: str = ""
    is_visible: bool = True
    items: Tuple[SectionItem, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CustomSection":
        raw_items = data.get("items")
        if not isinstance(raw_items, (list, tuple)):
            raw_items = []
        return cls(
            id=_get(data, "id"),
            title=_get(data, "title"),
            is_visible=data.get("isVisible", data.get("is_visible", True)) is not False,
            items=tuple(SectionItem.from_dict(item) for item in raw_items),
        )


# =============================================================================
# Legacy editor payloads
# =============================================================================


def _editor_date(entry: Mapping[str, Any]) -> str:
    """'start - end' when both are set, otherwise the start date alone."""
    start = _get(entry, "startDate", "start_date")
    end = _get(entry, "endDate", "end_date")
    if start and end:
        return join_present([start, end])
    return start


def sections_from_editor_arrays(data: Mapping[str, Any]) -> List[Section]:
    """
    Build explicit sections from the editor's experience/education/skills arrays.

    Older documents were persisted in the editor shape, without a sections
    list. Sections come out in fixed order: experience, education, skills.

    Args:
        data: Raw document mapping

    Returns:
        Explicit sections (empty collections still yield an empty section,
        which materialization later drops)
    """
    sections = []

    if "experience" in data:
        sections.append(
            Section(
                id="experience",
                type="experience",
                title="Experience",
                items=tuple(
                    SectionItem(
                        id=_get(entry, "id"),
                        title=_get(entry, "jobTitle", "job_title", "title"),
                        subtitle=_get(entry, "company"),
                        date=_editor_date(entry),
                        description=_get(entry, "description"),
                    )
                    for entry in _mappings(data.get("experience"))
                ),
            )
        )

    if "education" in data:
        sections.append(
            Section(
                id="education",
                type="education",
                title="Education",
                items=tuple(
                    SectionItem(
                        id=_get(entry, "id"),
                        title=_get(entry, "degree"),
                        subtitle=_get(entry, "school"),
                        date=_editor_date(entry),
                        description=_get(entry, "location"),
                    )
                    for entry in _mappings(data.get("education"))
                ),
            )
        )

    if "skills" in data:
        skills = data.get("skills") if isinstance(data.get("skills"), (list, tuple)) else []
        items = []
        for index, skill in enumerate(skills):
            if isinstance(skill, Mapping):
                item = SectionItem(
                    id=_get(skill, "id") or f"skill_{index}",
                    title=_get(skill, "name", "title"),
                    subtitle=_get(skill, "level", "subtitle"),
                )
            else:
                item = SectionItem(id=f"skill_{index}", title=coerce_text(skill))
            if item.title:
                items.append(item)
        sections.append(Section(id="skills", type="skills", title="Skills", items=tuple(items)))

    return sections


def settings_from_editor_payload(data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Settings mapping of an editor payload without a settings key.

    The editor kept its formatting block (font, lineSpacing, accentColor) and
    the template id next to the content instead of under settings.
    """
    formatting = data.get("formatting")
    settings = dict(formatting) if isinstance(formatting, Mapping) else {}
    for key in ("templateId", "template_id"):
        if key in data:
            settings.setdefault(key, data[key])
    return settings


# =============================================================================
# Document
# =============================================================================


@dataclass(frozen=True)
class ResumeDocument:
    """
    Complete resume document as supplied by the host for one render call.

    Attributes:
        title: Document title (used for export filenames)
        personal_info: Name, contact details, summary, photo
        sections: Explicit sections in the user's order
        projects: Project entries
        certifications: Certification entries
        languages: Language entries
        volunteer: Volunteer entries
        custom_sections: User-defined sections in the user's order
        settings: Formatting overrides (font, accent, line height, template id)
    """

    title: str = DEFAULT_DOCUMENT_TITLE
    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    sections: Tuple[Section, ...] = ()
    projects: Tuple[Project, ...] = ()
    certifications: Tuple[Certification, ...] = ()
    languages: Tuple[Language, ...] = ()
    volunteer: Tuple[VolunteerEntry, ...] = ()
    custom_sections: Tuple[CustomSection, ...] = ()
    settings: FormattingOverrides = field(default_factory=FormattingOverrides)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "ResumeDocument":
        """
        Build a document from the host's JSON-shaped mapping.

        Never raises on content. A mapping without a 'sections' key but with
        editor arrays (experience/education/skills) is treated as a legacy
        editor payload.

        Args:
            data: Raw document mapping (None yields an empty document)

        Returns:
            ResumeDocument
        """
        if not isinstance(data, Mapping):
            data = {}

        personal = data.get("personalInfo", data.get("personal_info"))
        personal_info = PersonalInfo.from_dict(personal)
        if not personal_info.summary and isinstance(data.get("summary"), str):
            # editor payloads keep the summary at the top level
            personal_info = replace(personal_info, summary=data["summary"])

        if "sections" in data:
            sections = [Section.from_dict(entry) for entry in _mappings(data.get("sections"))]
        else:
            sections = sections_from_editor_arrays(data)

        custom = data.get("customSections", data.get("custom_sections"))
        settings = data.get("settings")
        if settings is None:
            settings = settings_from_editor_payload(data)

        return cls(
            title=_get(data, "title") or DEFAULT_DOCUMENT_TITLE,
            personal_info=personal_info,
            sections=tuple(sections),
            projects=tuple(Project.from_dict(entry) for entry in _mappings(data.get("projects"))),
            certifications=tuple(
                Certification.from_dict(entry) for entry in _mappings(data.get("certifications"))
            ),
            languages=tuple(Language.from_dict(entry) for entry in _mappings(data.get("languages"))),
            volunteer=tuple(
                VolunteerEntry.from_dict(entry) for entry in _mappings(data.get("volunteer"))
            ),
            custom_sections=tuple(CustomSection.from_dict(entry) for entry in _mappings(custom)),
            settings=FormattingOverrides.from_dict(settings),
        )

    @classmethod
    def load(cls, path: Path) -> "ResumeDocument":
        """
        Load a document from a YAML or JSON file.

        Args:
            path: Path to the document file

        Returns:
            ResumeDocument

        Raises:
            DocumentLoadError: If the file doesn't exist, can't be parsed, or
                               its root is not a mapping
        """
        path = Path(path)
        if not path.exists():
            raise DocumentLoadError("Document file not found", path=path)

        try:
            raw = OmegaConf.to_container(OmegaConf.load(path), resolve=True)
        except Exception as e:  # YAML and OmegaConf parser errors
            raise DocumentLoadError("Document file could not be parsed", path=path, original_error=e) from e

        if not isinstance(raw, dict):
            raise DocumentLoadError("Document root must be a mapping", path=path)

        # some hosts wrap the payload as {"resume": {...}}
        if "resume" in raw and isinstance(raw["resume"], dict):
            raw = raw["resume"]

        return cls.from_dict(raw)
