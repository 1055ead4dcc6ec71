"""Anonymized (EEO-blind) shortlist for client reviewers.

Names, emails and phones never leave this module; reviewers see an alias,
the match score, a handful of skills and a coarse experience label.
"""

import logging
import math
import uuid

from pydantic import BaseModel

from config import settings
from models.schemas.matching import JobMatchProfile
from models.schemas.records import ApplicationRecord, AuditEvent, CandidateRecord, JobRecord
from models.schemas.shortlist import ShortlistCandidate, ShortlistDecision, ShortlistJob, ShortlistStage
from services.match_recompute import candidate_profile
from services.matching_engine import calculate_match_score, round_half_up

logger = logging.getLogger(__name__)

MAX_SKILLS_SHOWN = 5

_STAGE_LABELS: dict[str, str] = {
    "shortlisted": "Shortlisted",
    "rejected": "Removed",
    "under_review": "Under Review",
}

_DECISION_STAGES: dict[str, str] = {
    "shortlist": "client_shortlisted",
    "reject": "client_rejected",
}

_DECISION_ACTIONS: dict[str, str] = {
    "shortlist": "client_shortlisted_candidate",
    "reject": "client_rejected_candidate",
}


class ShortlistResult(BaseModel):
    job: ShortlistJob
    candidates: list[ShortlistCandidate] = []
    shortlisted_count: int = 0
    event: AuditEvent


class DecisionResult(BaseModel):
    application_id: str
    stage: str
    event: AuditEvent


def build_alias(candidate: CandidateRecord | None) -> str:
    candidate = candidate or CandidateRecord()
    if candidate.full_name and candidate.full_name.lower().startswith("candidate"):
        return candidate.full_name
    source = candidate.public_id or candidate.id or str(uuid.uuid4())
    return f"Candidate-{source[:6].upper()}"


def map_stage(stage: str) -> ShortlistStage:
    if stage == "client_shortlisted":
        return "shortlisted"
    if stage in ("client_rejected", "rejected"):
        return "rejected"
    return "under_review"


def experience_label(years: float | None) -> str:
    if years is None:
        return "Experience TBD"
    return f"{years:g}+ yrs experience"


def _stored_score(value: float | None) -> int | None:
    """Round a stored 0-100 score; NaN and infinities count as missing."""
    if value is None or not math.isfinite(value):
        return None
    return round_half_up(max(0.0, min(value, 100.0)))


def shortlist_score(application: ApplicationRecord, profile: JobMatchProfile) -> int:
    """Stored match score, then the recruiter's manual score, then a fresh score."""
    for stored in (application.match_score, application.score):
        score = _stored_score(stored)
        if score is not None:
            return score
    return calculate_match_score(profile, candidate_profile(application))


def to_shortlist_candidate(application: ApplicationRecord, profile: JobMatchProfile) -> ShortlistCandidate:
    candidate = application.candidate
    skills = (candidate.skills or [])[:MAX_SKILLS_SHOWN] if candidate else []

    stage = map_stage(application.stage)
    return ShortlistCandidate(
        application_id=application.id,
        alias=build_alias(candidate),
        match_score=shortlist_score(application, profile),
        stage=stage,
        stage_label=_STAGE_LABELS[stage],
        skills=skills,
        experience_label=experience_label(candidate.years_of_experience if candidate else None),
        notes=application.notes,
    )


def build_shortlist(
    job: JobRecord,
    applications: list[ApplicationRecord],
    actor_user_id: str | None = None,
) -> ShortlistResult:
    """Anonymized entries, best match first, plus the view audit event."""
    profile = job.to_match_profile(default_leniency=settings.default_leniency)
    entries = [to_shortlist_candidate(app, profile) for app in applications]
    entries.sort(key=lambda c: c.match_score, reverse=True)

    event = AuditEvent(
        tenant_id=job.tenant_id,
        actor_user_id=actor_user_id,
        entity_type="job",
        entity_id=job.id,
        action="client_viewed_shortlist",
        metadata={"job_id": job.id},
    )
    return ShortlistResult(
        job=ShortlistJob(
            id=job.id,
            title=job.title,
            location=job.location,
            employment_type=job.spec.employment_type,
            required_skills=job.required_skills or [],
            nice_to_have=job.nice_to_have or [],
        ),
        candidates=entries,
        shortlisted_count=sum(1 for c in entries if c.stage == "shortlisted"),
        event=event,
    )


def shortlist_decision(
    application: ApplicationRecord,
    decision: ShortlistDecision,
    tenant_id: str,
    job_id: str,
    actor_user_id: str | None = None,
) -> DecisionResult:
    """Move an application to the client's decision stage and audit it."""
    stage = _DECISION_STAGES[decision]
    logger.info("Client decision %s on application %s (job %s)", decision, application.id, job_id)

    event = AuditEvent(
        tenant_id=tenant_id,
        actor_user_id=actor_user_id,
        entity_type="application",
        entity_id=application.id,
        action=_DECISION_ACTIONS[decision],
        metadata={"job_id": job_id, "decision": stage},
    )
    return DecisionResult(application_id=application.id, stage=stage, event=event)
