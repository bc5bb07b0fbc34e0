"""Reference vocabularies used by the analysis pipeline.

The tables are immutable and travel through the pipeline inside a
:class:`Vocabulary` value, so every stage can be called with a custom set
(e.g. loaded from YAML) without touching module state.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, FrozenSet, Tuple

# ---------------------------------------------------------------------------
# Default tables
# ---------------------------------------------------------------------------

REFERENCE_SKILLS: Tuple[str, ...] = (
    "JavaScript",
    "React",
    "Node.js",
    "Python",
    "Java",
    "SQL",
    "MongoDB",
    "AWS",
    "Docker",
    "Git",
    "Agile",
    "Communication",
    "Leadership",
    "Project Management",
    "Machine Learning",
    "Data Analysis",
)

TECHNICAL_SKILLS: Tuple[str, ...] = (
    "JavaScript",
    "React",
    "Node.js",
    "Express",
    "MongoDB",
    "SQL",
    "Java",
    "Python",
    "AWS",
    "Docker",
    "Kubernetes",
    "Git",
    "CI/CD",
    "Agile",
    "Scrum",
    "REST API",
    "Frontend",
    "Backend",
    "Full Stack",
    "DevOps",
    "Cloud",
    "Microservices",
)

COMMON_PHRASES: Tuple[str, ...] = (
    "problem solving",
    "team player",
    "attention to detail",
    "communication skills",
    "project management",
    "time management",
    "critical thinking",
    "product development",
    "user experience",
    "cross-functional",
    "self-motivated",
    "fast-paced environment",
)

STANDARD_HEADERS: Tuple[str, ...] = (
    "EXPERIENCE",
    "WORK EXPERIENCE",
    "EMPLOYMENT",
    "EDUCATION",
    "SKILLS",
    "TECHNICAL SKILLS",
    "PROJECTS",
    "CERTIFICATIONS",
    "SUMMARY",
    "PROFILE",
)

EDUCATION_HEADERS: Tuple[str, ...] = (
    "EDUCATION",
    "ACADEMIC BACKGROUND",
    "ACADEMIC CREDENTIALS",
)

EXPERIENCE_HEADERS: Tuple[str, ...] = (
    "EXPERIENCE",
    "WORK EXPERIENCE",
    "PROFESSIONAL EXPERIENCE",
    "EMPLOYMENT",
)

# Headers that close the span inspected by the bullet-point check.
BULLET_SPAN_TERMINATORS: Tuple[str, ...] = (
    "EDUCATION",
    "SKILLS",
    "CERTIFICATIONS",
    "PROJECTS",
)

ATS_FILE_EXTENSIONS: Tuple[str, ...] = (".pdf", ".docx", ".doc", ".txt")

STOP_WORDS: FrozenSet[str] = frozenset(
    {
        "a",
        "about",
        "above",
        "after",
        "again",
        "against",
        "all",
        "also",
        "am",
        "an",
        "and",
        "any",
        "are",
        "aren",
        "as",
        "at",
        "be",
        "because",
        "been",
        "before",
        "being",
        "below",
        "between",
        "both",
        "but",
        "by",
        "can",
        "cannot",
        "could",
        "did",
        "do",
        "does",
        "doing",
        "don",
        "down",
        "during",
        "each",
        "etc",
        "ever",
        "every",
        "few",
        "for",
        "from",
        "further",
        "get",
        "had",
        "has",
        "have",
        "having",
        "he",
        "her",
        "here",
        "hers",
        "herself",
        "him",
        "himself",
        "his",
        "how",
        "however",
        "i",
        "if",
        "in",
        "into",
        "is",
        "it",
        "its",
        "itself",
        "just",
        "may",
        "me",
        "might",
        "more",
        "most",
        "must",
        "my",
        "myself",
        "need",
        "no",
        "nor",
        "not",
        "now",
        "of",
        "off",
        "on",
        "once",
        "one",
        "only",
        "or",
        "other",
        "ought",
        "our",
        "ours",
        "ourselves",
        "out",
        "over",
        "own",
        "same",
        "shall",
        "she",
        "should",
        "since",
        "so",
        "some",
        "such",
        "than",
        "that",
        "the",
        "their",
        "theirs",
        "them",
        "themselves",
        "then",
        "there",
        "these",
        "they",
        "this",
        "those",
        "through",
        "to",
        "too",
        "under",
        "until",
        "up",
        "upon",
        "us",
        "very",
        "was",
        "we",
        "well",
        "were",
        "what",
        "when",
        "where",
        "whether",
        "which",
        "while",
        "who",
        "whom",
        "why",
        "will",
        "with",
        "within",
        "without",
        "would",
        "yet",
        "you",
        "your",
        "yours",
        "yourself",
        "yourselves",
    }
)

MAX_KEYWORDS = 30


# ---------------------------------------------------------------------------
# Vocabulary value
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Vocabulary:
    """Immutable bundle of every table the pipeline consults."""

    reference_skills: Tuple[str, ...] = REFERENCE_SKILLS
    technical_skills: Tuple[str, ...] = TECHNICAL_SKILLS
    common_phrases: Tuple[str, ...] = COMMON_PHRASES
    standard_headers: Tuple[str, ...] = STANDARD_HEADERS
    education_headers: Tuple[str, ...] = EDUCATION_HEADERS
    experience_headers: Tuple[str, ...] = EXPERIENCE_HEADERS
    bullet_span_terminators: Tuple[str, ...] = BULLET_SPAN_TERMINATORS
    ats_file_extensions: Tuple[str, ...] = ATS_FILE_EXTENSIONS
    stop_words: FrozenSet[str] = STOP_WORDS
    max_keywords: int = MAX_KEYWORDS

    def with_overrides(self, overrides: Dict[str, Any]) -> "Vocabulary":
        """Return a copy with *overrides* applied.

        List values are frozen into tuples (``stop_words`` into a lowercase
        frozenset). Unknown keys raise ``ValueError``.
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ValueError(f"Unknown vocabulary keys: {', '.join(unknown)}")

        frozen: Dict[str, Any] = {}
        for key, value in overrides.items():
            if key == "max_keywords":
                if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                    raise ValueError("max_keywords must be a positive integer")
                frozen[key] = value
            elif key == "stop_words":
                frozen[key] = frozenset(str(word).lower() for word in _as_list(key, value))
            else:
                frozen[key] = tuple(str(item) for item in _as_list(key, value))
        return replace(self, **frozen)


DEFAULT_VOCABULARY = Vocabulary()


def _as_list(key: str, value: Any) -> list:
    if isinstance(value, str) or not isinstance(value, (list, tuple, set, frozenset)):
        raise ValueError(f"Vocabulary key '{key}' must be a list of strings")
    return list(value)
