"""Tests for rule-based ATS format checks."""

import pytest

from ats_checker.domain.format_checker import (
    FormatIssue,
    FormatReport,
    Severity,
    check_format,
    normalize_extension,
)
from ats_checker.domain.vocabulary import DEFAULT_VOCABULARY


def _issues(text: str, ext: str = ".txt"):
    return [(i.issue, i.severity) for i in check_format(text, ext).issues]


class TestCheckFormat:
    def test_short_resume_without_structure(self):
        report = check_format(" ".join(["word"] * 50), ".txt")
        assert [(i.issue, i.severity) for i in report.issues] == [
            ("Resume might be too short", Severity.MEDIUM),
            ("Missing standard section headers", Severity.HIGH),
            ("Missing email address", Severity.HIGH),
            ("Missing phone number", Severity.MEDIUM),
        ]
        assert report.passes_format_check is False

    def test_good_resume_only_flags_length(self, good_resume_text):
        report = check_format(good_resume_text, ".txt")
        assert _issues(good_resume_text) == [("Resume might be too short", Severity.MEDIUM)]
        assert report.passes_format_check is True

    def test_long_resume(self):
        assert ("Resume might be too long", Severity.LOW) in _issues("word " * 1001)

    def test_length_within_bounds(self):
        names = [name for name, _ in _issues("word " * 500)]
        assert "Resume might be too short" not in names
        assert "Resume might be too long" not in names

    def test_two_headers_are_not_enough(self):
        assert ("Missing standard section headers", Severity.HIGH) in _issues("Experience and Education")

    def test_three_headers_pass(self):
        names = [name for name, _ in _issues("Summary\nExperience\nSkills")]
        assert "Missing standard section headers" not in names

    def test_experience_without_bullets(self):
        text = "EXPERIENCE\nEngineer at Acme\nEDUCATION\nBS"
        assert ("No bullet points in experience section", Severity.MEDIUM) in _issues(text)

    @pytest.mark.parametrize("glyph", ["-", "•", "*"])
    def test_experience_with_bullets(self, glyph):
        text = f"EXPERIENCE\n{glyph} Shipped the billing service\nEDUCATION\nBS"
        names = [name for name, _ in _issues(text)]
        assert "No bullet points in experience section" not in names

    def test_no_experience_section_skips_bullet_check(self):
        names = [name for name, _ in _issues("Engineer at Acme")]
        assert "No bullet points in experience section" not in names

    def test_whitespace_runs(self):
        assert ("Potential inconsistent formatting detected", Severity.LOW) in _issues("Name   Title")
        assert ("Potential inconsistent formatting detected", Severity.LOW) in _issues("Name\n\n\nTitle")

    def test_blank_line_is_not_a_spacing_issue(self):
        names = [name for name, _ in _issues("Name\n\nTitle")]
        assert "Potential inconsistent formatting detected" not in names

    def test_unsupported_file_format(self):
        assert ("Non-ATS-friendly file format", Severity.HIGH) in _issues("text", ".rtf")

    def test_missing_extension_is_unsupported(self):
        assert ("Non-ATS-friendly file format", Severity.HIGH) in _issues("text", "")

    @pytest.mark.parametrize("ext", [".pdf", "PDF", "pdf"])
    def test_pdf_gets_text_layer_reminder(self, ext):
        issues = _issues("text", ext)
        assert ("Ensure PDF is text-based", Severity.LOW) in issues
        assert ("Non-ATS-friendly file format", Severity.HIGH) not in issues

    def test_good_resume_as_pdf_still_passes(self, good_resume_text):
        report = check_format(good_resume_text, ".pdf")
        assert [i.issue for i in report.issues] == ["Resume might be too short", "Ensure PDF is text-based"]
        assert report.passes_format_check is True

    def test_custom_extension_table(self):
        vocabulary = DEFAULT_VOCABULARY.with_overrides({"ats_file_extensions": [".txt"]})
        report = check_format("text", ".docx", vocabulary)
        assert "Non-ATS-friendly file format" in [i.issue for i in report.issues]


class TestFormatReport:
    def test_passes_only_without_high_issues(self):
        low = FormatIssue("a", Severity.LOW, "r")
        high = FormatIssue("b", Severity.HIGH, "r")
        assert FormatReport().passes_format_check is True
        assert FormatReport(issues=(low,)).passes_format_check is True
        assert FormatReport(issues=(low, high)).passes_format_check is False

    def test_plain_string_severity(self):
        report = FormatReport(issues=(FormatIssue("a", "high", "r"),))
        assert report.passes_format_check is False
        assert report.count(Severity.HIGH) == 1

    def test_count_and_to_dict(self):
        report = FormatReport(
            issues=(
                FormatIssue("a", Severity.MEDIUM, "r1"),
                FormatIssue("b", Severity.MEDIUM, "r2"),
            )
        )
        assert report.count(Severity.MEDIUM) == 2
        assert report.count(Severity.HIGH) == 0
        assert report.to_dict() == {
            "issues": [
                {"issue": "a", "severity": "medium", "recommendation": "r1"},
                {"issue": "b", "severity": "medium", "recommendation": "r2"},
            ],
            "passes_format_check": True,
        }


def test_normalize_extension():
    assert normalize_extension("PDF") == ".pdf"
    assert normalize_extension(" .Docx ") == ".docx"
    assert normalize_extension("") == ""
