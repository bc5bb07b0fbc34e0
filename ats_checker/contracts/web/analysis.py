"""Analysis endpoint request/response contracts."""

from __future__ import annotations

from pydantic import BaseModel, Field


class AnalyzeTextRequest(BaseModel):
    resume_text: str = Field(..., min_length=1)
    file_extension: str = ".txt"
    job_title: str
    job_description: str


class FormatIssueResponse(BaseModel):
    issue: str
    severity: str
    recommendation: str


class FormatReportResponse(BaseModel):
    issues: list[FormatIssueResponse]
    passes_format_check: bool


class ScoresResponse(BaseModel):
    overall: int
    keyword_match: int
    format_compatibility: int
    section_completeness: int


class RecommendationResponse(BaseModel):
    section: str
    issue: str
    recommendation: str


class MatchedKeywordResponse(BaseModel):
    keyword: str
    count: int


class KeywordMatchResponse(BaseModel):
    matched: list[MatchedKeywordResponse]
    missing: list[str]
    score: int


class EducationEntryResponse(BaseModel):
    degree: str
    institution: str
    date: str


class ExperienceEntryResponse(BaseModel):
    title: str
    company: str
    date: str
    description: str


class ParsedResumeResponse(BaseModel):
    full_name: str
    email: str
    phone: str
    skills: list[str]
    education: list[EducationEntryResponse]
    experience: list[ExperienceEntryResponse]


class AnalysisResponse(BaseModel):
    job_title: str
    format: FormatReportResponse
    scores: ScoresResponse
    matched_keywords: list[str]
    missing_keywords: list[str]
    recommendations: list[RecommendationResponse]
    parsed_resume: ParsedResumeResponse
    keyword_match: KeywordMatchResponse
