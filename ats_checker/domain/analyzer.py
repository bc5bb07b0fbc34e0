"""The host-facing ``analyze`` operation and its report rendering.

All functions operate on content strings -- no file I/O. Documents must be
decoded to text before they reach this module.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from ..errors import InvalidRequest
from .format_checker import FormatReport, Severity, check_format
from .keyword_matcher import KeywordMatchResult, match_keywords
from .resume_extractor import ParsedResume, extract
from .score_calculator import Recommendation, ScoreReport, calculate_score, generate_recommendations
from .vocabulary import DEFAULT_VOCABULARY, Vocabulary

logger = logging.getLogger(__name__)

MAX_MISSING_KEYWORDS = 10


@dataclass(frozen=True)
class AnalysisResult:
    """Everything one analysis produces."""

    job_title: str
    format: FormatReport
    scores: ScoreReport
    parsed_resume: ParsedResume
    keyword_match: KeywordMatchResult
    recommendations: Tuple[Recommendation, ...] = field(default_factory=tuple)

    @property
    def matched_keywords(self) -> Tuple[str, ...]:
        return tuple(m.keyword for m in self.keyword_match.matched)

    @property
    def missing_keywords(self) -> Tuple[str, ...]:
        return self.keyword_match.missing[:MAX_MISSING_KEYWORDS]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "job_title": self.job_title,
            "format": self.format.to_dict(),
            "scores": self.scores.to_dict(),
            "matched_keywords": list(self.matched_keywords),
            "missing_keywords": list(self.missing_keywords),
            "recommendations": [r.to_dict() for r in self.recommendations],
            "parsed_resume": self.parsed_resume.to_dict(),
            "keyword_match": self.keyword_match.to_dict(),
        }


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def analyze(
    resume_text: str,
    file_extension: str,
    job_title: str,
    job_description: str,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> AnalysisResult:
    """Score *resume_text* against a job posting.

    Raises :class:`~ats_checker.errors.InvalidRequest` when *job_title* or
    *job_description* is empty. Identical inputs give identical results.
    """
    if not job_title or not job_title.strip():
        raise InvalidRequest("job_title", "Job title is required")
    if not job_description or not job_description.strip():
        raise InvalidRequest("job_description", "Job description is required")

    parsed = extract(resume_text, vocabulary)
    format_report = check_format(resume_text, file_extension, vocabulary)
    keyword_result = match_keywords(resume_text, job_description, vocabulary)
    scores = calculate_score(parsed, keyword_result, format_report)
    recommendations = generate_recommendations(parsed, keyword_result, format_report)

    logger.debug(
        "Extracted resume fields: name=%s skills=%d education=%d experience=%d",
        bool(parsed.full_name),
        len(parsed.skills),
        len(parsed.education),
        len(parsed.experience),
    )
    logger.info(
        "analysis job_title=%r overall=%d keyword=%d format=%d completeness=%d issues=%d",
        job_title,
        scores.overall,
        scores.keyword_match,
        scores.format_compatibility,
        scores.section_completeness,
        len(format_report.issues),
    )

    return AnalysisResult(
        job_title=job_title.strip(),
        format=format_report,
        scores=scores,
        parsed_resume=parsed,
        keyword_match=keyword_result,
        recommendations=tuple(recommendations),
    )


# ---------------------------------------------------------------------------
# Report formatting
# ---------------------------------------------------------------------------


def format_analysis_report(result: AnalysisResult) -> str:
    """Render an :class:`AnalysisResult` as a markdown report."""
    scores = result.scores
    format_report = result.format
    status = "PASS" if format_report.passes_format_check else "FAIL"
    lines = [
        f"## ATS Score: {scores.overall}/100 {_score_to_grade(scores.overall)} -- {result.job_title}",
        _score_bar(scores.overall),
        "",
        "| Category             | Score | Weight |",
        "|----------------------|-------|--------|",
        f"| Keyword match        | {scores.keyword_match:3d}   | 60%    |",
        f"| Format compatibility | {scores.format_compatibility:3d}   | 20%    |",
        f"| Section completeness | {scores.section_completeness:3d}   | 20%    |",
        "",
        f"Format check: {status} ({', '.join(f'{format_report.count(s)} {s.value}' for s in Severity)})",
    ]

    if result.format.issues:
        lines.append("")
        lines.append("### Format Issues")
        for issue in result.format.issues:
            lines.append(f"- [{issue.severity.value}] {issue.issue}")

    if result.keyword_match.matched:
        lines.append("")
        lines.append(f"### Matched Keywords ({len(result.keyword_match.matched)})")
        lines.append(", ".join(f"{m.keyword} ({m.count})" for m in result.keyword_match.matched))

    if result.missing_keywords:
        lines.append("")
        lines.append(f"### Missing Keywords ({len(result.keyword_match.missing)})")
        lines.append(", ".join(result.missing_keywords))

    if result.recommendations:
        lines.append("")
        lines.append("### Recommendations")
        for i, rec in enumerate(result.recommendations, 1):
            lines.append(f"{i}. [{rec.section}] {rec.issue}: {rec.recommendation}")

    return "\n".join(lines)


def format_parsed_resume(parsed: ParsedResume) -> str:
    """Render a :class:`ParsedResume` as a markdown summary."""
    lines = [
        "## Parsed Resume",
        "",
        f"- Name: {parsed.full_name or '-'}",
        f"- Email: {parsed.email or '-'}",
        f"- Phone: {parsed.phone or '-'}",
        f"- Skills: {', '.join(parsed.skills) or '-'}",
    ]

    lines.append("")
    lines.append(f"### Education ({len(parsed.education)})")
    for entry in parsed.education:
        lines.append(f"- {entry.degree}")

    lines.append("")
    lines.append(f"### Experience ({len(parsed.experience)})")
    for entry in parsed.experience:
        lines.append(f"- {entry.title or '?'} | {entry.company or '?'} | {entry.date}")
        if entry.description:
            lines.append(f"  {entry.description}")

    return "\n".join(lines)


def _score_to_grade(score: int) -> str:
    if score >= 80:
        return "Excellent"
    elif score >= 60:
        return "Good"
    elif score >= 40:
        return "Fair"
    else:
        return "Needs Work"


def _score_bar(score: int, width: int = 20) -> str:
    filled = round(score / 100 * width)
    return f"[{'=' * filled}{' ' * (width - filled)}]"
