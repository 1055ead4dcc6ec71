import asyncio

from fastapi import APIRouter, File, Form, HTTPException, Request, UploadFile
from pydantic import ValidationError
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import (
    DecisionRequest,
    JobIntakeRequest,
    RecomputeRequest,
    ScoreRequest,
    ShortlistRequest,
)
from models.responses import MatchResponse
from models.schemas.intake import EEOCandidateIntake
from models.schemas.resume_profile import ExtractedProfile, ResumeDocument
from services import candidate_intake, job_intake, resume_parser, shortlist
from services.candidate_intake import CandidateIntakeResult
from services.job_intake import JobIntakeResult
from services.match_recompute import RecomputeResult, recompute_matches_for_job
from services.matching_engine import explain_match
from services.shortlist import DecisionResult, ShortlistResult

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


async def _read_upload(resume_file: UploadFile) -> bytes:
    content = await resume_file.read()
    if not content:
        raise HTTPException(status_code=400, detail="Resume file is required")
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )
    return content


def _check_job_id(job_id: str, body_job_id: str) -> None:
    if job_id != body_job_id:
        raise HTTPException(status_code=400, detail="Job id in path and body differ")


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "llm_configured": bool(settings.gemini_api_key),
    }


@router.post("/resumes/parse", response_model=ExtractedProfile)
@limiter.limit("20/minute")
async def parse_resume(request: Request, resume_file: UploadFile = File(...)):
    content = await _read_upload(resume_file)
    # UnsupportedFormat / ExtractionFailure are mapped by the app's handlers
    return await asyncio.to_thread(
        resume_parser.parse_resume,
        content,
        resume_file.content_type or "",
        resume_file.filename,
    )


@router.post("/candidates/intake", response_model=CandidateIntakeResult)
@limiter.limit("20/minute")
async def intake_candidate(
    request: Request,
    resume_file: UploadFile = File(...),
    tenant_id: str = Form(...),
    alias: str = Form(...),
    headline: str | None = Form(None),
    job_id: str | None = Form(None),
    actor_user_id: str | None = Form(None),
):
    try:
        intake = EEOCandidateIntake(alias=alias, headline=headline)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False))

    content = await _read_upload(resume_file)
    document = ResumeDocument(
        content=content,
        mime_type=resume_file.content_type or "",
        filename=resume_file.filename,
    )
    return await candidate_intake.ingest_resume(
        document, intake, tenant_id=tenant_id, actor_user_id=actor_user_id, job_id=job_id
    )


@router.post("/match/score", response_model=MatchResponse)
async def score_match(body: ScoreRequest):
    breakdown = explain_match(body.job, body.candidate)
    return MatchResponse(score=breakdown.score, breakdown=breakdown)


@router.post("/jobs/{job_id}/matches/recompute", response_model=RecomputeResult)
async def recompute_matches(job_id: str, body: RecomputeRequest):
    _check_job_id(job_id, body.job.id)
    return await recompute_matches_for_job(body.job, body.applications, body.actor_user_id)


@router.post("/jobs/{job_id}/shortlist", response_model=ShortlistResult)
async def job_shortlist(job_id: str, body: ShortlistRequest):
    _check_job_id(job_id, body.job.id)
    return shortlist.build_shortlist(body.job, body.applications, body.actor_user_id)


@router.post(
    "/jobs/{job_id}/shortlist/{application_id}/decision",
    response_model=DecisionResult,
)
async def shortlist_decision(job_id: str, application_id: str, body: DecisionRequest):
    if application_id != body.application.id:
        raise HTTPException(status_code=400, detail="Application id in path and body differ")
    return shortlist.shortlist_decision(
        body.application,
        body.decision,
        tenant_id=body.tenant_id,
        job_id=job_id,
        actor_user_id=body.actor_user_id,
    )


@router.post("/jobs/intake", response_model=JobIntakeResult)
@limiter.limit("10/minute")
async def generate_job_spec(request: Request, body: JobIntakeRequest):
    return await job_intake.draft_job_spec(body.intake, body.tenant_id, body.actor_user_id)
