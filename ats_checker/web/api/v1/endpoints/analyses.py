"""Analysis APIs: score an uploaded resume or raw resume text against a job posting."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, Form, UploadFile

from .....config import AnalyzerConfig
from .....contracts.web import AnalysisResponse, AnalyzeTextRequest
from .....domain import analyze
from .....errors import ATSCheckerError
from .....tools import decode_document
from ....errors import to_api_error
from ..deps import get_config
from ..upload import read_resume_upload

logger = logging.getLogger("ats_checker.web.api")

router = APIRouter(prefix="/analyses", tags=["analyses"])


@router.post("", response_model=AnalysisResponse)
async def analyze_upload(
    resume: UploadFile = File(...),
    job_title: str = Form(...),
    job_description: str = Form(...),
    config: AnalyzerConfig = Depends(get_config),
) -> AnalysisResponse:
    try:
        content, extension = await read_resume_upload(resume, max_bytes=config.max_upload_bytes)
        text = decode_document(content, extension)
        result = analyze(text, extension, job_title, job_description, config.vocabulary)
    except ATSCheckerError as exc:
        logger.info("analysis_rejected filename=%s reason=%s", resume.filename, exc)
        raise to_api_error(exc) from exc
    return AnalysisResponse.model_validate(result.to_dict())


@router.post("/text", response_model=AnalysisResponse)
async def analyze_text(
    payload: AnalyzeTextRequest,
    config: AnalyzerConfig = Depends(get_config),
) -> AnalysisResponse:
    try:
        result = analyze(
            payload.resume_text,
            payload.file_extension,
            payload.job_title,
            payload.job_description,
            config.vocabulary,
        )
    except ATSCheckerError as exc:
        raise to_api_error(exc) from exc
    return AnalysisResponse.model_validate(result.to_dict())
