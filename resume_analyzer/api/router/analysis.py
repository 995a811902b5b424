import logging
import os
from datetime import datetime, timezone
from typing import Union

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool

from ...core import settings
from ...schemas.pydantic.resume_analysis import (
    AnalysisFailureModel,
    AnalysisTextRequest,
    ResumeAnalysisModel,
)
from ...scoring import list_roles
from ...services import (
    AnalysisService,
    ExtractionCache,
    ResumeParsingError,
    ResumeValidationError,
    TextExtractor,
)

logger = logging.getLogger(__name__)

analysis_router = APIRouter()

AnalysisResponse = Union[ResumeAnalysisModel, AnalysisFailureModel]

_text_extractor = TextExtractor(ExtractionCache(settings.EXTRACTION_CACHE_SIZE))


def get_analysis_service() -> AnalysisService:
    return AnalysisService()


def get_text_extractor() -> TextExtractor:
    return _text_extractor


@analysis_router.post(
    "/analyze-text",
    response_model=AnalysisResponse,
    response_model_exclude_none=True,
    summary="Analyze pasted resume text against a job role",
)
async def analyze_text(
    request: AnalysisTextRequest,
    service: AnalysisService = Depends(get_analysis_service),
):
    try:
        return await service.analyze_resume_with_ai(request.resume_text, request.job_role)
    except ResumeValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@analysis_router.post(
    "/analyze-file",
    response_model=AnalysisResponse,
    response_model_exclude_none=True,
    summary="Extract text from an uploaded resume and analyze it",
)
async def analyze_file(
    resume: UploadFile = File(...),
    job_role: str = Form("", alias="jobRole"),
    service: AnalysisService = Depends(get_analysis_service),
    extractor: TextExtractor = Depends(get_text_extractor),
):
    if not job_role.strip():
        raise HTTPException(status_code=400, detail="Job role is required")

    filename = resume.filename or ""
    extension = os.path.splitext(filename)[1].lower()
    if extension not in settings.ALLOWED_FILE_TYPES:
        raise HTTPException(
            status_code=400,
            detail="Invalid file type. Supported formats: PDF, DOCX, TXT.",
        )

    file_bytes = await resume.read(settings.MAX_FILE_SIZE + 1)
    if len(file_bytes) > settings.MAX_FILE_SIZE:
        max_mb = settings.MAX_FILE_SIZE // (1024 * 1024)
        raise HTTPException(status_code=400, detail=f"File size too large. Maximum {max_mb}MB allowed.")

    logger.info(f"Processing file: {filename} ({resume.content_type})")
    try:
        text = await run_in_threadpool(extractor.extract_text, file_bytes, filename)
    except ResumeParsingError as e:
        raise HTTPException(status_code=422, detail=str(e))

    if not text.strip():
        raise HTTPException(
            status_code=400,
            detail="No readable text found in the uploaded file. Please ensure the file contains text content.",
        )

    try:
        return await service.analyze_resume_with_ai(text, job_role)
    except ResumeValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@analysis_router.get("/job-roles", summary="List the supported job roles")
async def job_roles():
    return {"roles": list_roles()}


@analysis_router.get("/health", summary="Service health")
async def health():
    return {
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "aiEnabled": settings.ai_enabled,
        "features": ["AI Analysis", "Keyword Fallback", "Weighted Scoring"],
    }
