"""ATS Checker Tools - Connect the analysis pipeline to resume files."""

from .base import BaseTool, ToolResult
from .resume_parser import SUPPORTED_EXTENSIONS, ResumeParserTool, decode_document, read_document
from .ats_analyzer import ATSAnalyzerTool

__all__ = [
    "BaseTool",
    "ToolResult",
    "ResumeParserTool",
    "ATSAnalyzerTool",
    "decode_document",
    "read_document",
    "SUPPORTED_EXTENSIONS",
]
