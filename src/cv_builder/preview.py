"""Read-only preview projection of the resume.

:func:`build_preview` turns the five slot values into a
:class:`PreviewDocument`. It is a pure function: no state, no mutation, and
missing labels simply read as empty strings. Every renderer (the TUI
markdown pane, the PDF and LaTeX exports) works from this document so they
all show the same thing.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from cv_builder.constants.sections import (
    EDUCATION_SECTION,
    EXPERIENCE_SECTION,
    PROJECTS_SECTION,
    SKILLS_SECTION,
    SlotName,
)
from cv_builder.store import ResumeStore

__all__ = [
    "DEFAULT_NAME",
    "PreviewDocument",
    "PreviewEntry",
    "PreviewHeader",
    "PreviewSection",
    "build_preview",
    "format_dates",
    "preview_from_store",
]

DEFAULT_NAME = "Your Name"
ENTRY_SEPARATOR = " — "
DATE_RANGE_SEPARATOR = " – "


def format_dates(start: str, end: str) -> str:
    """Join whichever of *start* and *end* are present with an en dash."""
    return DATE_RANGE_SEPARATOR.join(part for part in (start, end) if part)


@dataclass(slots=True)
class PreviewEntry:
    """One rendered item of a list section."""

    title: str = ""
    subtitle: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = ""
    level: str = ""

    @property
    def dates(self) -> str:
        return format_dates(self.start_date, self.end_date)

    @property
    def level_style(self) -> str:
        """Style key for the skill level; empty when no level was chosen."""
        return self.level.strip().lower()

    @property
    def summary(self) -> str:
        parts = (self.title, self.subtitle, self.level, self.dates)
        return ENTRY_SEPARATOR.join(part for part in parts if part)


@dataclass(slots=True)
class PreviewSection:
    """A titled section with its entries, or its placeholder when empty."""

    slot: SlotName
    title: str
    empty_message: str
    entries: list[PreviewEntry] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.entries


@dataclass(slots=True)
class PreviewHeader:
    name: str = DEFAULT_NAME
    email: str = ""
    linkedin: str = ""

    @property
    def contacts(self) -> list[str]:
        return [value for value in (self.email, self.linkedin) if value]


@dataclass(slots=True)
class PreviewDocument:
    header: PreviewHeader
    sections: list[PreviewSection]

    def section(self, slot: SlotName | str) -> PreviewSection:
        key = SlotName(slot)
        for section in self.sections:
            if section.slot is key:
                return section
        msg = f"Preview has no section for {slot!r}"
        raise KeyError(msg)


def _value(record: Mapping[str, str], label: str) -> str:
    return record.get(label) or ""


def _education_entry(record: Mapping[str, str]) -> PreviewEntry:
    return PreviewEntry(
        title=_value(record, "Degree"),
        subtitle=_value(record, "College"),
        end_date=_value(record, "Graduation Date"),
    )


def _skill_entry(record: Mapping[str, str]) -> PreviewEntry:
    return PreviewEntry(title=_value(record, "Skill"), level=_value(record, "Level"))


def _project_entry(record: Mapping[str, str]) -> PreviewEntry:
    return PreviewEntry(
        title=_value(record, "Project Name"),
        subtitle=_value(record, "Technologies"),
        start_date=_value(record, "Start Date"),
        end_date=_value(record, "End Date"),
        description=_value(record, "Description"),
    )


def _experience_entry(record: Mapping[str, str]) -> PreviewEntry:
    return PreviewEntry(
        title=_value(record, "Position Title"),
        subtitle=_value(record, "Company Name"),
        start_date=_value(record, "Start Date"),
        end_date=_value(record, "End Date"),
        description=_value(record, "Responsibilities"),
    )


def build_preview(
    personal_info: Mapping[str, str] | None,
    education: Sequence[Mapping[str, str]],
    skills: Sequence[Mapping[str, str]],
    projects: Sequence[Mapping[str, str]],
    experience: Sequence[Mapping[str, str]],
) -> PreviewDocument:
    """Project the slot values into a display document.

    Sections appear in the order Education, Skills, Projects, Experience, each
    holding one entry per record in insertion order.
    """
    info = personal_info or {}
    header = PreviewHeader(
        name=_value(info, "Name") or DEFAULT_NAME,
        email=_value(info, "Email"),
        linkedin=_value(info, "LinkedIn"),
    )

    layout = (
        (EDUCATION_SECTION, education, _education_entry),
        (SKILLS_SECTION, skills, _skill_entry),
        (PROJECTS_SECTION, projects, _project_entry),
        (EXPERIENCE_SECTION, experience, _experience_entry),
    )
    sections = [
        PreviewSection(
            slot=spec.slot,
            title=spec.title,
            empty_message=spec.empty_message,
            entries=[to_entry(record) for record in records],
        )
        for spec, records, to_entry in layout
    ]
    return PreviewDocument(header=header, sections=sections)


def preview_from_store(store: ResumeStore) -> PreviewDocument:
    """Build the preview from the store's values at the moment of the call."""
    return build_preview(
        store.personal_info,
        store.education,
        store.skills,
        store.projects,
        store.experience,
    )
