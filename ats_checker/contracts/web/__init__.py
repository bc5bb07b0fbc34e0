"""Web API contracts."""

from .analysis import AnalysisResponse, AnalyzeTextRequest

__all__ = ["AnalysisResponse", "AnalyzeTextRequest"]
