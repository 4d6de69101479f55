"""Abstract base class for pluggable resume templates."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pylatex import Document

    from cv_builder.preview import PreviewDocument

__all__ = ["ResumeTemplate"]

_LATEX_REPLACEMENTS = {
    "\\": r"\textbackslash{}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
    **{char: "\\" + char for char in "&%$#_{}"},
}
_LATEX_CHARS = re.compile("|".join(re.escape(char) for char in _LATEX_REPLACEMENTS))
_PROTOCOL = re.compile(r"^https?://", re.IGNORECASE)
_ISO_MONTH = re.compile(r"^(\d{4})-(\d{1,2})(?:-\d{1,2})?$")

_MONTHS = (
    "Jan.", "Feb.", "Mar.", "Apr.", "May", "Jun.",
    "Jul.", "Aug.", "Sep.", "Oct.", "Nov.", "Dec.",
)  # fmt: skip


class ResumeTemplate(ABC):
    """Interface that every resume template must implement."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable template name."""

    @abstractmethod
    def build(self, document: PreviewDocument) -> Document:
        """Lay out the preview *document* as a PyLaTeX ``Document``."""

    # ------------------------------------------------------------------
    # helpers shared by templates
    # ------------------------------------------------------------------

    @staticmethod
    def escape_latex(text: str) -> str:
        r"""Escape ``& % $ # _ { } ~ ^ \`` so *text* typesets literally."""
        return _LATEX_CHARS.sub(lambda match: _LATEX_REPLACEMENTS[match.group()], text)

    @staticmethod
    def format_date(value: str | None) -> str:
        """Return ``Jun. 2024`` for ``2024-06`` or ``2024-06-01``.

        Anything that is not a year-month date is returned as typed.
        """
        text = (value or "").strip()
        match = _ISO_MONTH.match(text)
        if match and 1 <= int(match.group(2)) <= 12:
            return f"{_MONTHS[int(match.group(2)) - 1]} {match.group(1)}"
        return text

    @classmethod
    def format_date_range(cls, start: str | None, end: str | None) -> str:
        """``Aug. 2018 -- May 2021``, or whichever side is present."""
        parts = [cls.format_date(start), cls.format_date(end)]
        return " -- ".join(part for part in parts if part)

    @staticmethod
    def _strip_protocol(url: str) -> str:
        return _PROTOCOL.sub("", url)
