"""Tests for the LaTeX templates and their shared helpers."""

from __future__ import annotations

import pytest

from cv_builder.models.record import Record
from cv_builder.preview import build_preview
from cv_builder.templates import get_template, list_templates
from cv_builder.templates.base import ResumeTemplate
from cv_builder.templates.classic import ClassicResumeTemplate

# ======================================================================
# Base class helpers
# ======================================================================


class TestEscapeLatex:
    def test_special_characters(self):
        assert ResumeTemplate.escape_latex("R&D 100% $5 #1 a_b") == r"R\&D 100\% \$5 \#1 a\_b"

    def test_braces(self):
        assert ResumeTemplate.escape_latex("{x}") == r"\{x\}"

    def test_tilde_and_caret(self):
        assert ResumeTemplate.escape_latex("~^") == r"\textasciitilde{}\textasciicircum{}"

    def test_backslash_not_double_escaped(self):
        assert ResumeTemplate.escape_latex("a\\b") == r"a\textbackslash{}b"

    def test_plain_text_unchanged(self):
        assert ResumeTemplate.escape_latex("Stanford") == "Stanford"


class TestFormatDate:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("2024-06", "Jun. 2024"),
            ("2024-06-15", "Jun. 2024"),
            ("2021-05", "May 2021"),
            ("Present", "Present"),
            ("2024-13", "2024-13"),
            ("", ""),
            (None, ""),
        ],
    )
    def test_format_date(self, value, expected):
        assert ResumeTemplate.format_date(value) == expected

    def test_range(self):
        assert ResumeTemplate.format_date_range("2018-08", "2021-05") == "Aug. 2018 -- May 2021"

    def test_range_single_side(self):
        assert ResumeTemplate.format_date_range("", "2021-05") == "May 2021"
        assert ResumeTemplate.format_date_range("2018-08", None) == "Aug. 2018"
        assert ResumeTemplate.format_date_range(None, None) == ""


class TestStripProtocol:
    def test_strip_https(self):
        assert ResumeTemplate._strip_protocol("https://linkedin.com/in/x") == "linkedin.com/in/x"

    def test_no_protocol(self):
        assert ResumeTemplate._strip_protocol("linkedin.com/in/x") == "linkedin.com/in/x"


# ======================================================================
# Classic template
# ======================================================================


class TestClassicTemplate:
    def _document(self, **slots):
        info = slots.pop("personal_info", Record.from_values({"Name": "Jane Doe"}))
        return build_preview(
            info,
            slots.get("education", []),
            slots.get("skills", []),
            slots.get("projects", []),
            slots.get("experience", []),
        )

    def test_heading_present(self):
        tex = ClassicResumeTemplate().build(self._document()).dumps()
        assert "Jane Doe" in tex
        assert r"\begin{document}" in tex

    def test_contact_line(self):
        info = Record.from_values(
            {"Name": "Jane", "Email": "jane@test.com", "LinkedIn": "https://linkedin.com/in/jane"}
        )
        tex = ClassicResumeTemplate().build(self._document(personal_info=info)).dumps()
        assert r"\href{mailto:jane@test.com}" in tex
        assert "linkedin.com/in/jane" in tex
        assert "https://linkedin.com" not in tex

    def test_empty_sections_omitted(self):
        tex = ClassicResumeTemplate().build(self._document()).dumps()
        assert r"\section{Education}" not in tex
        assert r"\section{Skills}" not in tex

    def test_education_section(self):
        education = [
            Record.from_values(
                {"College": "Stanford", "Degree": "MS", "Graduation Date": "2024-06"}
            )
        ]
        tex = ClassicResumeTemplate().build(self._document(education=education)).dumps()
        assert r"\section{Education}" in tex
        assert "Stanford" in tex
        assert "Jun. 2024" in tex

    def test_skills_with_level(self):
        skills = [
            Record.from_values({"Skill": "C#", "Level": "Expert"}),
            Record.from_values({"Skill": "Go", "Level": ""}),
        ]
        tex = ClassicResumeTemplate().build(self._document(skills=skills)).dumps()
        assert r"\section{Skills}" in tex
        assert r"\textbf{C\#}{: Expert}" in tex
        assert r"\textbf{Go}" in tex

    def test_experience_and_projects(self):
        experience = [
            Record.from_values(
                {
                    "Company Name": "Siemens",
                    "Position Title": "Engineer",
                    "Start Date": "2020-01",
                    "End Date": "2022-12",
                    "Responsibilities": "Build & test",
                }
            )
        ]
        projects = [
            Record.from_values({"Project Name": "CV", "Technologies": "Python"}),
        ]
        tex = (
            ClassicResumeTemplate()
            .build(self._document(experience=experience, projects=projects))
            .dumps()
        )
        assert r"\section{Experience}" in tex
        assert "Jan. 2020 -- Dec. 2022" in tex
        assert r"Build \& test" in tex
        assert r"\section{Projects}" in tex
        assert r"\emph{Python}" in tex


class TestRegistry:
    def test_list_templates(self):
        assert list_templates() == ["classic"]

    def test_get_template(self):
        assert isinstance(get_template("classic"), ClassicResumeTemplate)

    def test_unknown_template(self):
        with pytest.raises(ValueError, match="Unknown template"):
            get_template("fancy")
