"""Recompute match scores for every application of one job.

Each application is independent, so scoring fans out with asyncio; the only
shared input is a single JobMatchProfile snapshot taken up front.
"""

import asyncio
import logging

from pydantic import BaseModel

from config import settings
from models.schemas.matching import CandidateMatchProfile, JobMatchProfile
from models.schemas.records import ApplicationRecord, AuditEvent, JobRecord
from services.matching_engine import calculate_match_score

logger = logging.getLogger(__name__)


class RecomputeResult(BaseModel):
    job_id: str
    scores: dict[str, int] = {}  # application id -> 0-100
    event: AuditEvent


def candidate_profile(application: ApplicationRecord) -> CandidateMatchProfile:
    candidate = application.candidate
    if candidate is None:
        return CandidateMatchProfile()
    return CandidateMatchProfile(
        skills=candidate.skills or [],
        years_of_experience=candidate.years_of_experience,
    )


async def _score_one(profile: JobMatchProfile, application: ApplicationRecord) -> tuple[str, int]:
    score = await asyncio.to_thread(calculate_match_score, profile, candidate_profile(application))
    return application.id, score


async def recompute_matches_for_job(
    job: JobRecord,
    applications: list[ApplicationRecord],
    actor_user_id: str | None = None,
) -> RecomputeResult:
    """Score all applications against one job snapshot and build the audit event."""
    profile = job.to_match_profile(default_leniency=settings.default_leniency)

    results = await asyncio.gather(*(_score_one(profile, app) for app in applications))
    scores = dict(results)

    logger.info("Recomputed %d match scores for job %s", len(scores), job.id)

    event = AuditEvent(
        tenant_id=job.tenant_id,
        actor_user_id=actor_user_id,
        entity_type="job",
        entity_id=job.id,
        action="job_matches_recomputed",
        metadata={"matches": len(scores)},
    )
    return RecomputeResult(job_id=job.id, scores=scores, event=event)
