from __future__ import annotations

from cv_builder.constants.sections import SlotName
from cv_builder.preview import PreviewDocument, PreviewEntry, PreviewSection

CONTACT_SEPARATOR = " · "


def render_preview_markdown(document: PreviewDocument) -> str:
    """Render the preview document as markdown for the preview pane and text exports."""
    parts: list[str] = []

    header = document.header
    parts.append(f"# {header.name}")
    contacts = header.contacts
    if contacts:
        parts.append(CONTACT_SEPARATOR.join(contacts))

    for section in document.sections:
        parts.append("")
        parts.extend(render_section_markdown(section))

    return "\n".join(parts)


def render_section_markdown(section: PreviewSection) -> list[str]:
    lines = [f"## {section.title}", ""]
    if section.is_empty:
        lines.append(f"_{section.empty_message}_")
        return lines

    for entry in section.entries:
        if section.slot is SlotName.SKILLS:
            lines.append(_render_skill(entry))
        else:
            lines.extend(_render_entry(entry))
    return lines


def _render_skill(entry: PreviewEntry) -> str:
    if entry.level:
        return f"- **{entry.title}:** {entry.level}"
    return f"- **{entry.title}**"


def _render_entry(entry: PreviewEntry) -> list[str]:
    heading = [f"**{entry.title}**"] if entry.title else []
    heading.extend(part for part in (entry.subtitle, entry.dates) if part)
    lines = [f"- {' — '.join(heading)}"]
    if entry.description:
        lines.append(f"  {entry.description}")
    return lines
