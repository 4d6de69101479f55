"""Classic single-page resume template.

An ATS-friendly one-column layout: centred name and contact line, then
Education, Skills, Projects and Experience sections. Empty sections are left
out of the LaTeX output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pylatex import Document, NoEscape, Package

from cv_builder.templates.base import ResumeTemplate

if TYPE_CHECKING:
    from cv_builder.preview import PreviewDocument, PreviewHeader, PreviewSection

__all__ = ["ClassicResumeTemplate"]

# ---------------------------------------------------------------------------
# LaTeX preamble fragments
# ---------------------------------------------------------------------------

_PACKAGES: list[Package] = [
    Package("latexsym"),
    Package("fullpage", options=NoEscape("empty")),
    Package("titlesec"),
    Package("color", options=NoEscape("usenames,dvipsnames")),
    Package("enumitem"),
    Package("hyperref", options=NoEscape("hidelinks")),
    Package("fancyhdr"),
    Package("tabularx"),
    Package("fontenc", options=NoEscape("T1")),
]

_PREAMBLE_SETUP = r"""
\pagestyle{fancy}
\fancyhf{}
\renewcommand{\headrulewidth}{0pt}
\renewcommand{\footrulewidth}{0pt}
\addtolength{\oddsidemargin}{-0.5in}
\addtolength{\evensidemargin}{-0.5in}
\addtolength{\textwidth}{1in}
\addtolength{\topmargin}{-.5in}
\addtolength{\textheight}{1.0in}
\raggedbottom
\raggedright
\setlength{\tabcolsep}{0in}
\titleformat{\section}{
  \vspace{-4pt}\scshape\raggedright\large
}{}{0em}{}[\color{black}\titlerule \vspace{-5pt}]
"""

_CUSTOM_COMMANDS = r"""
\newcommand{\resumeItem}[1]{\item\small{{#1 \vspace{-2pt}}}}
\newcommand{\resumeSubheading}[4]{
  \vspace{-2pt}\item
    \begin{tabular*}{0.97\textwidth}[t]{l@{\extracolsep{\fill}}r}
      \textbf{#1} & #2 \\
      \textit{\small#3} & \textit{\small #4} \\
    \end{tabular*}\vspace{-7pt}
}
\newcommand{\resumeProjectHeading}[2]{
    \item
    \begin{tabular*}{0.97\textwidth}{l@{\extracolsep{\fill}}r}
      \small#1 & #2 \\
    \end{tabular*}\vspace{-7pt}
}
\newcommand{\resumeSubHeadingListStart}{\begin{itemize}[leftmargin=0.15in, label={}]}
\newcommand{\resumeSubHeadingListEnd}{\end{itemize}}
\newcommand{\resumeItemListStart}{\begin{itemize}}
\newcommand{\resumeItemListEnd}{\end{itemize}\vspace{-5pt}}
"""


class ClassicResumeTemplate(ResumeTemplate):
    """Single-column resume built from the preview document."""

    @property
    def name(self) -> str:  # pragma: no cover
        return "Classic"

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------

    def build(self, document: PreviewDocument) -> Document:
        doc = self._create_document()
        self._add_heading(doc, document.header)

        builders = {
            "education": self._add_education,
            "skills": self._add_skills,
            "projects": self._add_projects,
            "experience": self._add_experience,
        }
        for section in document.sections:
            if section.is_empty:
                continue
            builders[str(section.slot)](doc, section)

        return doc

    # ------------------------------------------------------------------
    # internal helpers
    # ------------------------------------------------------------------

    def _create_document(self) -> Document:
        doc = Document(
            documentclass="article",
            document_options=["letterpaper", "11pt"],
            page_numbers=True,
            indent=True,
            lmodern=False,
            textcomp=False,
            microtype=False,
            fontenc=None,
            inputenc=None,
        )
        # Page style comes from fancyhdr in the preamble.
        doc.packages = [p for p in doc.packages if "lastpage" not in p.dumps()]

        for pkg in _PACKAGES:
            doc.packages.append(pkg)
        doc.preamble.append(NoEscape(_PREAMBLE_SETUP))
        doc.preamble.append(NoEscape(_CUSTOM_COMMANDS))
        return doc

    # -- heading -----------------------------------------------------------

    def _add_heading(self, doc: Document, header: PreviewHeader) -> None:
        esc = self.escape_latex
        name = esc(header.name)

        parts: list[str] = []
        if header.email:
            parts.append(
                rf"\href{{mailto:{header.email}}}{{\underline{{{esc(header.email)}}}}}"
            )
        if header.linkedin:
            display = self._strip_protocol(header.linkedin)
            parts.append(rf"\underline{{{esc(display)}}}")

        separator = r" $|$ "
        heading = r"\begin{center}" rf"\textbf{{\Huge \scshape {name}}} \\ \vspace{{1pt}}"
        if parts:
            heading += rf"\small {separator.join(parts)}"
        heading += r"\end{center}"
        doc.append(NoEscape(heading))

    # -- education ---------------------------------------------------------

    def _add_education(self, doc: Document, section: PreviewSection) -> None:
        esc = self.escape_latex
        lines = [rf"\section{{{section.title}}}", r"\resumeSubHeadingListStart"]

        for entry in section.entries:
            date_range = self.format_date_range(entry.start_date, entry.end_date)
            lines.append(
                rf"\resumeSubheading{{{esc(entry.subtitle)}}}{{}}"
                rf"{{{esc(entry.title)}}}{{{esc(date_range)}}}"
            )

        lines.append(r"\resumeSubHeadingListEnd")
        doc.append(NoEscape("\n".join(lines)))

    # -- experience --------------------------------------------------------

    def _add_experience(self, doc: Document, section: PreviewSection) -> None:
        esc = self.escape_latex
        lines = [rf"\section{{{section.title}}}", r"\resumeSubHeadingListStart"]

        for entry in section.entries:
            date_range = self.format_date_range(entry.start_date, entry.end_date)
            lines.append(
                rf"\resumeSubheading{{{esc(entry.title)}}}{{{esc(date_range)}}}"
                rf"{{{esc(entry.subtitle)}}}{{}}"
            )
            if entry.description:
                lines.append(r"\resumeItemListStart")
                lines.append(rf"\resumeItem{{{esc(entry.description)}}}")
                lines.append(r"\resumeItemListEnd")

        lines.append(r"\resumeSubHeadingListEnd")
        doc.append(NoEscape("\n".join(lines)))

    # -- projects ----------------------------------------------------------

    def _add_projects(self, doc: Document, section: PreviewSection) -> None:
        esc = self.escape_latex
        lines = [rf"\section{{{section.title}}}", r"\resumeSubHeadingListStart"]

        for entry in section.entries:
            tech_str = r" $|$ \emph{" + esc(entry.subtitle) + "}" if entry.subtitle else ""
            date_range = self.format_date_range(entry.start_date, entry.end_date)
            heading_text = rf"\textbf{{{esc(entry.title)}}}{tech_str}"
            lines.append(rf"\resumeProjectHeading{{{heading_text}}}{{{esc(date_range)}}}")

            if entry.description:
                lines.append(r"\resumeItemListStart")
                lines.append(rf"\resumeItem{{{esc(entry.description)}}}")
                lines.append(r"\resumeItemListEnd")

        lines.append(r"\resumeSubHeadingListEnd")
        doc.append(NoEscape("\n".join(lines)))

    # -- skills ------------------------------------------------------------

    def _add_skills(self, doc: Document, section: PreviewSection) -> None:
        esc = self.escape_latex
        lines = [
            rf"\section{{{section.title}}}",
            r"\begin{itemize}[leftmargin=0.15in, label={}]",
            r"\small{\item{",
        ]

        rows: list[str] = []
        for entry in section.entries:
            if entry.level:
                rows.append(rf"\textbf{{{esc(entry.title)}}}{{: {esc(entry.level)}}}")
            else:
                rows.append(rf"\textbf{{{esc(entry.title)}}}")
        lines.append(" \\\\\n".join(rows))

        lines.append(r"}}")
        lines.append(r"\end{itemize}")
        doc.append(NoEscape("\n".join(lines)))
