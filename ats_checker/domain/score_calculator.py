"""Pure domain logic for aggregating sub-scores and building recommendations.

All functions operate on already-computed pipeline results -- no file I/O.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, List

from .format_checker import FormatReport, Severity
from .keyword_matcher import KeywordMatchResult
from .resume_extractor import ParsedResume

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Weights in tenths; keyword match is the primary ATS relevance signal.
SCORING_WEIGHTS: Dict[str, int] = {
    "keyword_match": 6,
    "format_compatibility": 2,
    "section_completeness": 2,
}

SEVERITY_PENALTIES: Dict[Severity, int] = {
    Severity.HIGH: 15,
    Severity.MEDIUM: 10,
    Severity.LOW: 5,
}

MIN_SKILLS = 5
MIN_DESCRIPTION_CHARS = 50
MAX_LISTED_KEYWORDS = 5


@dataclass(frozen=True)
class ScoreReport:
    """Sub-scores and their weighted overall, each an int in [0, 100]."""

    keyword_match: int
    format_compatibility: int
    section_completeness: int

    @property
    def overall(self) -> int:
        weighted = (
            self.keyword_match * SCORING_WEIGHTS["keyword_match"]
            + self.format_compatibility * SCORING_WEIGHTS["format_compatibility"]
            + self.section_completeness * SCORING_WEIGHTS["section_completeness"]
        )
        return _clamp((weighted + 5) // 10)

    def to_dict(self) -> Dict[str, int]:
        return {
            "overall": self.overall,
            "keyword_match": self.keyword_match,
            "format_compatibility": self.format_compatibility,
            "section_completeness": self.section_completeness,
        }


@dataclass(frozen=True)
class Recommendation:
    section: str
    issue: str
    recommendation: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def calculate_score(
    parsed: ParsedResume,
    keyword_result: KeywordMatchResult,
    format_report: FormatReport,
) -> ScoreReport:
    return ScoreReport(
        keyword_match=_clamp(keyword_result.score),
        format_compatibility=format_score(format_report),
        section_completeness=completeness_score(parsed),
    )


def format_score(format_report: FormatReport) -> int:
    """100 minus a per-issue severity penalty, floored at 0."""
    penalty = sum(SEVERITY_PENALTIES[issue.severity] for issue in format_report.issues)
    return _clamp(100 - penalty)


def completeness_score(parsed: ParsedResume) -> int:
    """Points for each populated section: contact 20, skills 20, education 20, experience 40."""
    score = 0

    contact_fields = sum(1 for value in (parsed.full_name, parsed.email, parsed.phone) if value)
    if contact_fields == 3:
        score += 20
    elif contact_fields == 2:
        score += 10

    if len(parsed.skills) >= MIN_SKILLS:
        score += 20
    elif parsed.skills:
        score += 10

    if parsed.education:
        score += 20

    if len(parsed.experience) >= 2:
        score += 40
    elif parsed.experience:
        score += 20

    return _clamp(score)


def generate_recommendations(
    parsed: ParsedResume,
    keyword_result: KeywordMatchResult,
    format_report: FormatReport,
) -> List[Recommendation]:
    """Actionable advice: keywords first, then format issues, then completeness."""
    recommendations: List[Recommendation] = []

    missing = list(keyword_result.missing)
    if missing:
        listed = ", ".join(missing[:MAX_LISTED_KEYWORDS])
        suffix = " and others" if len(missing) > MAX_LISTED_KEYWORDS else ""
        recommendations.append(
            Recommendation(
                section="Keywords",
                issue="Missing important keywords",
                recommendation=f"Consider adding these keywords to your resume: {listed}{suffix}",
            )
        )

    for issue in format_report.issues:
        recommendations.append(Recommendation(section="Format", issue=issue.issue, recommendation=issue.recommendation))

    if not parsed.email or not parsed.phone:
        recommendations.append(
            Recommendation(
                section="Contact Information",
                issue="Incomplete contact details",
                recommendation=(
                    "Ensure your resume includes both email and phone number for ATS to properly "
                    "extract your contact information."
                ),
            )
        )

    if len(parsed.skills) < MIN_SKILLS:
        recommendations.append(
            Recommendation(
                section="Skills",
                issue="Limited skills section",
                recommendation=(
                    "Expand your skills section to include more relevant technical and soft skills "
                    "that match the job description."
                ),
            )
        )

    if not parsed.experience:
        recommendations.append(
            Recommendation(
                section="Experience",
                issue="Missing work experience",
                recommendation="Add detailed work experience with measurable achievements and results.",
            )
        )
    elif any(len(entry.description) < MIN_DESCRIPTION_CHARS for entry in parsed.experience):
        recommendations.append(
            Recommendation(
                section="Experience",
                issue="Limited experience descriptions",
                recommendation=(
                    "Enhance your experience descriptions with specific accomplishments, metrics, "
                    "and relevant keywords."
                ),
            )
        )

    return recommendations


def _clamp(value: int) -> int:
    return max(0, min(100, int(value)))
