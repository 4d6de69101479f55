"""Slot catalogue: the five resume sections and the record schema of each.

Each section pairs a slot key with the ordered :class:`FieldSpec` schema its
editor composes, whether edits are written live or staged, and the message the
preview shows while the section is empty.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from cv_builder.models.fields import FieldKind, FieldSpec


class SlotName(StrEnum):
    """Keys of the five data slots held by the resume store."""

    PERSONAL_INFO = "personal_info"
    EDUCATION = "education"
    SKILLS = "skills"
    PROJECTS = "projects"
    EXPERIENCE = "experience"


LIST_SLOTS: tuple[SlotName, ...] = (
    SlotName.EDUCATION,
    SlotName.SKILLS,
    SlotName.PROJECTS,
    SlotName.EXPERIENCE,
)

SKILL_LEVELS: tuple[str, ...] = ("Beginner", "Intermediate", "Expert")

# Labels worth showing in the compact one-line summary of a list item.
SUMMARY_LABELS: frozenset[str] = frozenset(
    {
        "Skill",
        "Level",
        "College",
        "Degree",
        "Company Name",
        "Position Title",
        "Project Name",
    }
)

SUMMARY_SEPARATOR = " · "


@dataclass(frozen=True, slots=True)
class SectionSpec:
    """Static description of one editable resume section."""

    slot: SlotName
    title: str
    schema: tuple[FieldSpec, ...]
    live: bool = False

    @property
    def empty_message(self) -> str:
        return f"No {self.title} added yet."


PERSONAL_INFO_SECTION = SectionSpec(
    slot=SlotName.PERSONAL_INFO,
    title="Personal Info",
    schema=(
        FieldSpec("Name", FieldKind.TEXT, placeholder="Mostafa Sakr"),
        FieldSpec("Email", FieldKind.EMAIL, placeholder="user@email.com"),
        FieldSpec("LinkedIn", FieldKind.TEXT, placeholder="LinkedIn URL"),
    ),
    live=True,
)

EDUCATION_SECTION = SectionSpec(
    slot=SlotName.EDUCATION,
    title="Education",
    schema=(
        FieldSpec("College", FieldKind.TEXT, placeholder="Stanford"),
        FieldSpec("Degree", FieldKind.TEXT, placeholder="Master of Science"),
        FieldSpec("Graduation Date", FieldKind.DATE),
    ),
)

SKILLS_SECTION = SectionSpec(
    slot=SlotName.SKILLS,
    title="Skills",
    schema=(
        FieldSpec("Skill", FieldKind.TEXT, placeholder="React/Next.js"),
        FieldSpec("Level", FieldKind.SINGLE_SELECT, options=SKILL_LEVELS),
    ),
)

PROJECTS_SECTION = SectionSpec(
    slot=SlotName.PROJECTS,
    title="Projects",
    schema=(
        FieldSpec("Project Name", FieldKind.TEXT, placeholder="Portfolio Website"),
        FieldSpec("Start Date", FieldKind.DATE),
        FieldSpec("End Date", FieldKind.DATE),
        FieldSpec("Technologies", FieldKind.TEXT, placeholder="e.g., React, Tailwind CSS"),
        FieldSpec(
            "Description",
            FieldKind.TEXT,
            placeholder="Briefly describe the project and your role.",
        ),
    ),
)

EXPERIENCE_SECTION = SectionSpec(
    slot=SlotName.EXPERIENCE,
    title="Experience",
    schema=(
        FieldSpec("Company Name", FieldKind.TEXT, placeholder="Siemens"),
        FieldSpec("Position Title", FieldKind.TEXT, placeholder="Pex Engineer"),
        FieldSpec("Start Date", FieldKind.DATE),
        FieldSpec("End Date", FieldKind.DATE),
        FieldSpec(
            "Responsibilities",
            FieldKind.TEXT,
            placeholder="e.g., Coding, Project Management",
        ),
    ),
)

# Display order in the form column.
SECTIONS: tuple[SectionSpec, ...] = (
    PERSONAL_INFO_SECTION,
    EDUCATION_SECTION,
    SKILLS_SECTION,
    PROJECTS_SECTION,
    EXPERIENCE_SECTION,
)


def get_section(slot: SlotName | str) -> SectionSpec:
    """Return the section registered for *slot*.

    Raises:
        ValueError: If *slot* is not one of the five slot keys.
    """
    key = SlotName(slot)
    for section in SECTIONS:
        if section.slot is key:
            return section
    msg = f"No section for slot {slot!r}"  # pragma: no cover
    raise ValueError(msg)  # pragma: no cover
