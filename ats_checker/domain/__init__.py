"""ATS Checker Domain - Pure resume analysis pipeline.

This package contains pure functions with no file system or network dependencies.
Document decoding is handled by the tools layer; this package operates on strings.
"""

from .analyzer import AnalysisResult, analyze, format_analysis_report, format_parsed_resume
from .format_checker import FormatIssue, FormatReport, Severity, check_format
from .keyword_matcher import KeywordMatchResult, MatchedKeyword, extract_important_keywords, match_keywords
from .resume_extractor import EducationEntry, ExperienceEntry, ParsedResume, extract
from .score_calculator import Recommendation, ScoreReport, calculate_score, generate_recommendations
from .text_normalizer import normalize
from .vocabulary import DEFAULT_VOCABULARY, Vocabulary

__all__ = [
    # Normalizer
    "normalize",
    # Vocabulary
    "Vocabulary",
    "DEFAULT_VOCABULARY",
    # Extractor
    "extract",
    "ParsedResume",
    "EducationEntry",
    "ExperienceEntry",
    # Format Checker
    "check_format",
    "FormatIssue",
    "FormatReport",
    "Severity",
    # Keyword Matcher
    "match_keywords",
    "extract_important_keywords",
    "KeywordMatchResult",
    "MatchedKeyword",
    # Score Calculator
    "calculate_score",
    "generate_recommendations",
    "ScoreReport",
    "Recommendation",
    # Analyzer
    "analyze",
    "AnalysisResult",
    "format_analysis_report",
    "format_parsed_resume",
]
