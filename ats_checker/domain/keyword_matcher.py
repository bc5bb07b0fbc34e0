"""Pure domain logic for matching job-description keywords against a resume.

All functions operate on content strings -- no file I/O.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from .text_normalizer import normalize
from .vocabulary import DEFAULT_VOCABULARY, Vocabulary


@dataclass(frozen=True)
class MatchedKeyword:
    keyword: str
    count: int


@dataclass(frozen=True)
class KeywordMatchResult:
    """Partition of the important keywords into matched and missing."""

    matched: Tuple[MatchedKeyword, ...] = field(default_factory=tuple)
    missing: Tuple[str, ...] = field(default_factory=tuple)
    score: int = 0

    @property
    def keywords(self) -> List[str]:
        """Every keyword considered, matched first."""
        return [m.keyword for m in self.matched] + list(self.missing)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "matched": [{"keyword": m.keyword, "count": m.count} for m in self.matched],
            "missing": list(self.missing),
            "score": self.score,
        }


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def match_keywords(
    resume_text: str,
    job_description: str,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> KeywordMatchResult:
    """Match the important keywords of *job_description* against *resume_text*.

    Phrases (keywords that tokenize to more than one token, such as
    ``"REST API"`` or ``"Node.js"``) are found by substring search in the
    raw resume; single words are looked up among its normalized tokens.
    """
    keywords = extract_important_keywords(job_description, vocabulary)
    resume_lower = resume_text.lower()
    resume_counts = Counter(normalize(resume_text))

    matched: List[MatchedKeyword] = []
    missing: List[str] = []
    for keyword in keywords:
        needle = keyword.lower()
        if is_phrase(keyword):
            count = resume_lower.count(needle)
        else:
            count = resume_counts.get(needle, 0)

        if count:
            matched.append(MatchedKeyword(keyword=keyword, count=count))
        else:
            missing.append(keyword)

    return KeywordMatchResult(
        matched=tuple(matched),
        missing=tuple(missing),
        score=keyword_score(len(matched), len(keywords)),
    )


def extract_important_keywords(
    job_description: str,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> List[str]:
    """Rank keywords from *job_description*.

    Order: repeated content words, then common phrases, then technical
    skills; duplicates (case-insensitive) keep their first position and
    the list is cut at ``vocabulary.max_keywords``.
    """
    text = job_description.lower()

    frequency: Counter = Counter(
        token for token in normalize(job_description) if len(token) > 2 and token not in vocabulary.stop_words
    )
    repeated = [token for token, freq in frequency.items() if freq > 1]
    phrases = [phrase for phrase in vocabulary.common_phrases if phrase.lower() in text]
    skills = [skill for skill in vocabulary.technical_skills if skill.lower() in text]

    keywords: List[str] = []
    seen = set()
    for keyword in repeated + phrases + skills:
        key = keyword.lower()
        if key in seen:
            continue
        seen.add(key)
        keywords.append(keyword)

    return keywords[: vocabulary.max_keywords]


def is_phrase(keyword: str) -> bool:
    return len(normalize(keyword)) > 1


def keyword_score(matched: int, total: int) -> int:
    """Percentage of *total* keywords matched, halves rounded up; 0 when there are none."""
    if total <= 0:
        return 0
    return (200 * matched + total) // (2 * total)
