from __future__ import annotations

from cv_builder.constants.sections import (
    LIST_SLOTS,
    SECTIONS,
    SKILL_LEVELS,
    SUMMARY_LABELS,
    SUMMARY_SEPARATOR,
    SectionSpec,
    SlotName,
    get_section,
)

__all__ = [
    "LIST_SLOTS",
    "SECTIONS",
    "SKILL_LEVELS",
    "SUMMARY_LABELS",
    "SUMMARY_SEPARATOR",
    "SectionSpec",
    "SlotName",
    "get_section",
]
