"""Pure domain logic for pulling structured fields out of resume text.

All functions operate on content strings -- no file I/O. Extraction never
raises: a pattern that does not match yields an empty value.
"""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Sequence, Tuple

from .vocabulary import DEFAULT_VOCABULARY, Vocabulary

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

EMAIL_PATTERN = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
PHONE_PATTERN = re.compile(r"(?<![\w+(])(\+\d{1,2}\s?)?\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}\b")

_NAME_PATTERN = re.compile(r"^([A-Z][a-z]+ [A-Z][a-z]+)", re.MULTILINE)
_DATE_RANGE_PATTERN = re.compile(r"\d{4}\s*-\s*(?:\d{4}|present)", re.IGNORECASE)
_DEGREE_PATTERN = re.compile(
    r"(?<![A-Za-z])(?:(?:Bachelor|Master)(?:'?s)?|PhD|Ph\.D\.|B\.S\.|M\.S\.|M\.B\.A\.|B\.A\.|B\.E\.)(?![A-Za-z])"
    r"(?:[ \t]+(?:of|in)\b)?"
    r"(?:[ \t]+[A-Za-z][A-Za-z \t]*)?",
    re.IGNORECASE,
)
# A line made only of capitals (plus spaces, '&' or '/'), optionally ending in ':'.
_SECTION_END = r"(?=\n[ \t]*[A-Z][A-Z &/]+[ \t]*:?[ \t]*(?:\n|\Z)|\Z)"


# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EducationEntry:
    degree: str = ""
    institution: str = ""
    date: str = ""


@dataclass(frozen=True)
class ExperienceEntry:
    title: str = ""
    company: str = ""
    date: str = ""
    description: str = ""


@dataclass(frozen=True)
class ParsedResume:
    """Structured fields extracted from one resume."""

    full_name: str = ""
    email: str = ""
    phone: str = ""
    skills: Tuple[str, ...] = field(default_factory=tuple)
    education: Tuple[EducationEntry, ...] = field(default_factory=tuple)
    experience: Tuple[ExperienceEntry, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["skills"] = list(self.skills)
        data["education"] = [asdict(e) for e in self.education]
        data["experience"] = [asdict(e) for e in self.experience]
        return data


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def extract(text: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> ParsedResume:
    """Extract a :class:`ParsedResume` from raw resume *text*."""
    return ParsedResume(
        full_name=extract_full_name(text),
        email=extract_email(text),
        phone=extract_phone(text),
        skills=extract_skills(text, vocabulary.reference_skills),
        education=extract_education(text, vocabulary.education_headers),
        experience=extract_experience(text, vocabulary.experience_headers),
    )


def extract_full_name(text: str) -> str:
    match = _NAME_PATTERN.search(text)
    return match.group(1) if match else ""


def extract_email(text: str) -> str:
    match = EMAIL_PATTERN.search(text)
    return match.group(0) if match else ""


def extract_phone(text: str) -> str:
    match = PHONE_PATTERN.search(text)
    return match.group(0) if match else ""


def extract_skills(text: str, reference_skills: Sequence[str]) -> Tuple[str, ...]:
    """Reference skills found in *text* as whole words, in reference order."""
    found: List[str] = []
    for skill in reference_skills:
        if skill in found:
            continue
        if re.search(rf"(?<!\w){re.escape(skill)}(?!\w)", text, re.IGNORECASE):
            found.append(skill)
    return tuple(found)


def extract_education(text: str, headers: Sequence[str]) -> Tuple[EducationEntry, ...]:
    """One entry per degree mention inside the education section.

    Institution and date are not resolved and stay empty.
    """
    section = extract_section(text, headers)
    if not section:
        return ()
    return tuple(EducationEntry(degree=m.group(0).strip()) for m in _DEGREE_PATTERN.finditer(section))


def extract_experience(text: str, headers: Sequence[str]) -> Tuple[ExperienceEntry, ...]:
    """Entries anchored on date-range lines of the experience section.

    The two lines above a date line give the title (nearest) and company;
    the line below gives the description.
    """
    section = extract_section(text, headers)
    if not section:
        return ()

    lines = [line.strip() for line in section.split("\n") if line.strip()]
    entries: List[ExperienceEntry] = []
    for i, line in enumerate(lines):
        if not _DATE_RANGE_PATTERN.search(line):
            continue
        entries.append(
            ExperienceEntry(
                title=lines[i - 1] if i >= 1 else "",
                company=lines[i - 2] if i >= 2 else "",
                date=line,
                description=lines[i + 1] if i + 1 < len(lines) else "",
            )
        )
    return tuple(entries)


def extract_section(text: str, headers: Sequence[str]) -> str:
    """Body of the first section whose header line starts with one of *headers*.

    Headers are matched case-insensitively; the body runs to the next
    ALL-CAPS header line or the end of the text. Returns ``""`` if no
    header yields a non-empty body.
    """
    content = text.replace("\r\n", "\n")
    for header in headers:
        pattern = rf"^[ \t]*(?i:{re.escape(header)})\b[ \t]*:?(.*?){_SECTION_END}"
        match = re.search(pattern, content, re.MULTILINE | re.DOTALL)
        if match and match.group(1).strip():
            return match.group(1).strip()
    return ""
