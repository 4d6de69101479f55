"""Export utilities for writing the resume preview to PDF, LaTeX, text and JSON."""

from __future__ import annotations

import logging
import re
from datetime import datetime
from pathlib import Path

from fpdf import FPDF

from cv_builder.config import DEFAULT_TEMPLATE
from cv_builder.constants.sections import SlotName
from cv_builder.preview import PreviewDocument, preview_from_store
from cv_builder.preview_rendering import render_preview_markdown
from cv_builder.schemas import ResumeSnapshot
from cv_builder.store import ResumeStore
from cv_builder.templates import get_template

logger = logging.getLogger(__name__)

EXPORT_FORMATS: tuple[str, ...] = ("pdf", "tex", "txt", "md", "json")

# RGB colours for skill levels in the PDF; unknown or blank levels use the text colour.
LEVEL_COLORS: dict[str, tuple[int, int, int]] = {
    "beginner": (107, 114, 128),
    "intermediate": (37, 99, 235),
    "expert": (22, 163, 74),
}
_TEXT_COLOR = (17, 24, 39)

# Core PDF fonts are latin-1 only.
_PDF_REPLACEMENTS = {"—": "-", "–": "-", "·": "|", "‘": "'", "’": "'", "“": '"', "”": '"'}


_DEFAULT_STEM = "resume"
_INVALID_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*]')

# (pattern, replacement) pairs applied in order to turn preview markdown into text.
_MARKDOWN_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"^#{1,6}\s*", re.MULTILINE), ""),
    (re.compile(r"\*\*(.+?)\*\*"), r"\1"),
    (re.compile(r"\*(.+?)\*"), r"\1"),
    (re.compile(r"__(.+?)__"), r"\1"),
    (re.compile(r"(?<!\w)_(.+?)_(?!\w)"), r"\1"),
    (re.compile(r"\[([^\]]+)\]\([^)]+\)"), r"\1"),
    (re.compile(r"\n{3,}"), "\n\n"),
)


def _sanitize_filename(name: str) -> str:
    """Make *name* safe to use as a file stem."""
    cleaned = _INVALID_FILENAME_CHARS.sub("_", name).strip(". ")
    return cleaned or _DEFAULT_STEM


def _generate_filename(base_name: str | None, extension: str) -> str:
    """``<name>_<YYYY-MM-DD_HHMMSS>.<extension>``, using ``resume`` when unnamed."""
    stamp = f"{datetime.now():%Y-%m-%d_%H%M%S}"
    return f"{_sanitize_filename(base_name or _DEFAULT_STEM)}_{stamp}.{extension}"


def _strip_markdown_formatting(text: str) -> str:
    for pattern, replacement in _MARKDOWN_RULES:
        text = pattern.sub(replacement, text)
    return text.strip()


def _pdf_text(text: str) -> str:
    for char, replacement in _PDF_REPLACEMENTS.items():
        text = text.replace(char, replacement)
    return text.encode("latin-1", errors="replace").decode("latin-1")


def export_to_txt(document: PreviewDocument, output_path: Path) -> Path:
    """Write the preview as plain text."""
    plain_text = _strip_markdown_formatting(render_preview_markdown(document))
    output_path.write_text(plain_text + "\n", encoding="utf-8")
    return output_path


def export_to_markdown(document: PreviewDocument, output_path: Path) -> Path:
    output_path.write_text(render_preview_markdown(document) + "\n", encoding="utf-8")
    return output_path


def export_to_tex(
    document: PreviewDocument,
    output_path: Path,
    template_name: str = DEFAULT_TEMPLATE,
) -> Path:
    """Write the LaTeX source produced by *template_name*.

    Raises:
        ValueError: If the template is not registered.
    """
    doc = get_template(template_name).build(document)
    output_path.write_text(doc.dumps(), encoding="utf-8")
    return output_path


def export_to_json(snapshot: ResumeSnapshot, output_path: Path) -> Path:
    output_path.write_text(snapshot.model_dump_json(indent=2), encoding="utf-8")
    return output_path


def export_to_pdf(document: PreviewDocument, output_path: Path) -> Path:
    """Lay the preview out on an A4 page with fpdf, colouring skill levels."""
    pdf = FPDF()
    pdf.set_auto_page_break(auto=True, margin=15)
    pdf.add_page()
    pdf.set_text_color(*_TEXT_COLOR)

    header = document.header
    pdf.set_font("Helvetica", "B", 20)
    pdf.cell(w=0, h=12, text=_pdf_text(header.name), align="C")
    pdf.ln(12)
    if header.contacts:
        pdf.set_font("Helvetica", size=10)
        pdf.cell(w=0, h=6, text=_pdf_text("  |  ".join(header.contacts)), align="C")
        pdf.ln(8)

    for section in document.sections:
        pdf.ln(3)
        pdf.set_x(pdf.l_margin)
        pdf.set_font("Helvetica", "B", 14)
        pdf.write(h=10, text=_pdf_text(section.title))
        pdf.ln(10)
        pdf.set_font("Helvetica", size=11)

        if section.is_empty:
            pdf.set_font("Helvetica", "I", 11)
            pdf.write(h=6, text=_pdf_text(section.empty_message))
            pdf.ln(8)
            pdf.set_font("Helvetica", size=11)
            continue

        for entry in section.entries:
            pdf.set_x(pdf.l_margin)
            if section.slot is SlotName.SKILLS:
                pdf.set_font("Helvetica", "B", 11)
                pdf.write(h=6, text=_pdf_text(f"{entry.title}: "))
                pdf.set_font("Helvetica", size=11)
                if entry.level:
                    pdf.set_text_color(*LEVEL_COLORS.get(entry.level_style, _TEXT_COLOR))
                    pdf.write(h=6, text=_pdf_text(entry.level))
                    pdf.set_text_color(*_TEXT_COLOR)
                pdf.ln(7)
                continue

            pdf.set_font("Helvetica", "B", 11)
            if entry.title:
                pdf.write(h=6, text=_pdf_text(entry.title))
            pdf.set_font("Helvetica", size=11)
            if entry.dates:
                pdf.write(h=6, text=_pdf_text(f"   {entry.dates}"))
            pdf.ln(6)
            if entry.subtitle:
                pdf.set_font("Helvetica", "I", 11)
                pdf.write(h=6, text=_pdf_text(entry.subtitle))
                pdf.ln(6)
                pdf.set_font("Helvetica", size=11)
            if entry.description:
                pdf.write(h=6, text=_pdf_text(entry.description))
                pdf.ln(6)
            pdf.ln(2)

    pdf.output(str(output_path))
    return output_path


def prompt_export_location(default_filename: str) -> Path | None:
    """Ask where to save with the system save dialog.

    Returns:
        The chosen path, or None if the dialog was dismissed.
    """
    import easygui

    suffix = Path(default_filename).suffix or ".pdf"
    chosen = easygui.filesavebox(
        msg="Save your CV as",
        title="Print CV",
        default=default_filename,
        filetypes=[f"*{suffix}"],
    )
    return Path(chosen) if chosen else None


def export_resume(
    store: ResumeStore,
    export_format: str = "pdf",
    output_path: Path | None = None,
    template_name: str = DEFAULT_TEMPLATE,
    *,
    output_dir: Path | None = None,
) -> Path | None:
    """Export the resume as it is in *store* right now.

    Args:
        store: The resume data
        export_format: One of :data:`EXPORT_FORMATS`
        output_path: Target file or existing directory
        template_name: LaTeX template used for ``tex`` exports
        output_dir: Directory to write a timestamped file into; used when
            *output_path* is omitted. With neither, the user is prompted.

    Returns:
        Path to created file, or None if the user cancelled the dialog

    Raises:
        ValueError: If the format or template is unknown.
    """
    export_format = export_format.lower()
    if export_format not in EXPORT_FORMATS:
        msg = f"Unknown export format {export_format!r}. Available: {', '.join(EXPORT_FORMATS)}"
        raise ValueError(msg)

    filename = _generate_filename(store.personal_info.get("Name"), export_format)
    if output_path is None and output_dir is not None:
        output_path = output_dir / filename
    elif output_path is None:
        output_path = prompt_export_location(filename)
        if output_path is None:
            logger.info("Export cancelled")
            return None
    elif output_path.is_dir():
        output_path = output_path / filename

    # Ensure correct extension
    if output_path.suffix.lower() != f".{export_format}":
        output_path = output_path.with_suffix(f".{export_format}")
    output_path.parent.mkdir(parents=True, exist_ok=True)

    if export_format == "json":
        result = export_to_json(ResumeSnapshot.from_store(store), output_path)
    else:
        document = preview_from_store(store)
        if export_format == "pdf":
            result = export_to_pdf(document, output_path)
        elif export_format == "tex":
            result = export_to_tex(document, output_path, template_name)
        elif export_format == "md":
            result = export_to_markdown(document, output_path)
        else:
            result = export_to_txt(document, output_path)

    logger.info("Exported resume to %s", result)
    return result
