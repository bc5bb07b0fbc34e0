"""ATS Checker - deterministic resume vs. job posting compatibility analysis."""

from .domain import AnalysisResult, analyze
from .errors import ATSCheckerError, DecodeError, InvalidRequest, UnsupportedFormat

__version__ = "0.1.0"

__all__ = [
    "analyze",
    "AnalysisResult",
    "ATSCheckerError",
    "InvalidRequest",
    "UnsupportedFormat",
    "DecodeError",
]
