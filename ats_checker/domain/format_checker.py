"""Pure domain logic for rule-based ATS format checks.

All functions operate on content strings -- no file I/O. Each check only
appends issues; no check can suppress or depend on another.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple

from .resume_extractor import EMAIL_PATTERN, PHONE_PATTERN
from .text_normalizer import word_count
from .vocabulary import DEFAULT_VOCABULARY, Vocabulary

MIN_WORDS = 300
MAX_WORDS = 1000
MIN_STANDARD_HEADERS = 3

_BULLET_GLYPHS = re.compile(r"[-•*]")
_SPACING_RUN = re.compile(r"\s{3,}")


class Severity(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class FormatIssue:
    issue: str
    severity: Severity
    recommendation: str

    def to_dict(self) -> Dict[str, str]:
        return {"issue": self.issue, "severity": self.severity.value, "recommendation": self.recommendation}


@dataclass(frozen=True)
class FormatReport:
    """Issues in check order; passes only when none is high severity."""

    issues: Tuple[FormatIssue, ...] = field(default_factory=tuple)

    @property
    def passes_format_check(self) -> bool:
        return not any(issue.severity == Severity.HIGH for issue in self.issues)

    def count(self, severity: Severity) -> int:
        return sum(1 for issue in self.issues if issue.severity == severity)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "issues": [issue.to_dict() for issue in self.issues],
            "passes_format_check": self.passes_format_check,
        }


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def check_format(
    text: str,
    file_extension: str,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> FormatReport:
    """Run the six format checks against resume *text*.

    *file_extension* is the uploaded file's extension, e.g. ``".pdf"``; the
    leading dot is optional.
    """
    issues: List[FormatIssue] = []
    issues.extend(_check_length(text))
    issues.extend(_check_headers(text, vocabulary.standard_headers))
    issues.extend(_check_bullet_points(text, vocabulary.bullet_span_terminators))
    issues.extend(_check_spacing(text))
    issues.extend(_check_contact_info(text))
    issues.extend(_check_file_format(file_extension, vocabulary.ats_file_extensions))
    return FormatReport(issues=tuple(issues))


def normalize_extension(file_extension: str) -> str:
    """Lowercase *file_extension* and make sure it starts with a dot."""
    ext = file_extension.strip().lower()
    if ext and not ext.startswith("."):
        ext = f".{ext}"
    return ext


# ---------------------------------------------------------------------------
# Private checks
# ---------------------------------------------------------------------------


def _check_length(text: str) -> List[FormatIssue]:
    words = word_count(text)
    if words < MIN_WORDS:
        return [
            FormatIssue(
                issue="Resume might be too short",
                severity=Severity.MEDIUM,
                recommendation=(
                    "Aim for a resume that contains at least 300-600 words to provide sufficient "
                    "information for ATS systems and recruiters."
                ),
            )
        ]
    if words > MAX_WORDS:
        return [
            FormatIssue(
                issue="Resume might be too long",
                severity=Severity.LOW,
                recommendation=(
                    "Consider shortening your resume to keep it focused and concise. "
                    "Most ATS systems work best with resumes under 1000 words."
                ),
            )
        ]
    return []


def _check_headers(text: str, standard_headers: Tuple[str, ...]) -> List[FormatIssue]:
    present = [h for h in standard_headers if re.search(rf"\b{re.escape(h)}\b", text, re.IGNORECASE)]
    if len(present) >= MIN_STANDARD_HEADERS:
        return []
    return [
        FormatIssue(
            issue="Missing standard section headers",
            severity=Severity.HIGH,
            recommendation=(
                'Use standard section headers like "Experience", "Education", "Skills" to ensure '
                "ATS systems can properly categorize your information."
            ),
        )
    ]


def _check_bullet_points(text: str, terminators: Tuple[str, ...]) -> List[FormatIssue]:
    stop = "|".join(re.escape(t) for t in terminators)
    lookahead = rf"(?=(?:{stop})|\Z)" if stop else r"(?=\Z)"
    match = re.search(rf"EXPERIENCE.*?{lookahead}", text, re.IGNORECASE | re.DOTALL)
    if not match or _BULLET_GLYPHS.search(match.group(0)):
        return []
    return [
        FormatIssue(
            issue="No bullet points in experience section",
            severity=Severity.MEDIUM,
            recommendation=(
                "Use bullet points to highlight achievements and responsibilities in your experience "
                "section for better readability and ATS parsing."
            ),
        )
    ]


def _check_spacing(text: str) -> List[FormatIssue]:
    if not _SPACING_RUN.search(text):
        return []
    return [
        FormatIssue(
            issue="Potential inconsistent formatting detected",
            severity=Severity.LOW,
            recommendation=(
                "Ensure consistent spacing and formatting throughout your resume. "
                "Use the same font family and size for each section category."
            ),
        )
    ]


def _check_contact_info(text: str) -> List[FormatIssue]:
    issues: List[FormatIssue] = []
    if not EMAIL_PATTERN.search(text):
        issues.append(
            FormatIssue(
                issue="Missing email address",
                severity=Severity.HIGH,
                recommendation=(
                    "Include a professional email address in your contact information "
                    "for recruiters to reach you."
                ),
            )
        )
    if not PHONE_PATTERN.search(text):
        issues.append(
            FormatIssue(
                issue="Missing phone number",
                severity=Severity.MEDIUM,
                recommendation=(
                    "Include a phone number in your contact information. "
                    "Format it consistently (e.g., XXX-XXX-XXXX)."
                ),
            )
        )
    return issues


def _check_file_format(file_extension: str, supported: Tuple[str, ...]) -> List[FormatIssue]:
    ext = normalize_extension(file_extension)
    issues: List[FormatIssue] = []
    if ext not in {normalize_extension(s) for s in supported}:
        issues.append(
            FormatIssue(
                issue="Non-ATS-friendly file format",
                severity=Severity.HIGH,
                recommendation=(
                    "Use a standard file format like PDF or DOCX. Avoid image-based formats, "
                    "specialized formats, or scanned documents."
                ),
            )
        )
    if ext == ".pdf":
        # Text content alone cannot tell a scanned PDF from a text-based one.
        issues.append(
            FormatIssue(
                issue="Ensure PDF is text-based",
                severity=Severity.LOW,
                recommendation=(
                    "Make sure your PDF is created from a text document and not scanned. "
                    "Scanned PDFs may not be properly read by ATS systems."
                ),
            )
        )
    return issues
