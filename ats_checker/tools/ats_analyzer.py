"""ATS (Applicant Tracking System) analysis tool for resume files."""

from __future__ import annotations

from typing import Optional

from ..config import AnalyzerConfig
from ..domain import analyze, format_analysis_report
from ..errors import ATSCheckerError
from .base import BaseTool, ToolResult
from .resume_parser import read_document


class ATSAnalyzerTool(BaseTool):
    """Score a resume file against a job posting."""

    name = "ats_analyze"
    description = """Score a resume for ATS compatibility against a job posting. Returns an overall
score (0-100) with keyword, format and completeness breakdowns plus recommendations."""
    parameters = {
        "path": {
            "type": "string",
            "description": "Path to the resume file (PDF, DOCX, DOC or TXT)",
            "required": True,
        },
        "job_title": {
            "type": "string",
            "description": "Title of the target job",
            "required": True,
        },
        "job_description": {
            "type": "string",
            "description": "Full job description text",
            "required": True,
        },
    }

    def __init__(self, workspace_dir: str = ".", config: Optional[AnalyzerConfig] = None):
        super().__init__(workspace_dir)
        self.config = config or AnalyzerConfig()

    async def execute(self, path: str, job_title: str = "", job_description: str = "") -> ToolResult:
        file_path = self._resolve_path(path)
        if not file_path.exists():
            return ToolResult(success=False, output="", error=f"File not found: {path}")

        try:
            text = read_document(file_path)
            result = analyze(
                resume_text=text,
                file_extension=file_path.suffix,
                job_title=job_title,
                job_description=job_description,
                vocabulary=self.config.vocabulary,
            )
        except ATSCheckerError as e:
            return ToolResult(success=False, output="", error=str(e))

        return ToolResult(
            success=True,
            output=format_analysis_report(result),
            data=result.to_dict(),
        )
