"""Rows owned by the surrounding application, as handed to the core.

The core never loads or stores these; callers fetch them (tenant-scoped)
and pass them in.
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field

from models.schemas.matching import ExperienceLevel, JobMatchProfile


class MatchSettings(BaseModel):
    leniency: float | None = None


class JobSpecBlob(BaseModel):
    """Free-form ``spec`` column of a job row."""
    employment_type: str | None = None
    experience_level: str | None = None
    match_settings: MatchSettings = MatchSettings()


class JobRecord(BaseModel):
    id: str
    tenant_id: str
    title: str = ""
    location: str | None = None
    required_skills: list[str] | None = []
    nice_to_have: list[str] | None = []
    spec: JobSpecBlob = JobSpecBlob()

    def to_match_profile(self, default_leniency: float = 0.5) -> JobMatchProfile:
        """Snapshot the fields the scorer needs. Unknown levels count as unset."""
        level = None
        if self.spec.experience_level:
            try:
                level = ExperienceLevel(self.spec.experience_level.lower())
            except ValueError:
                level = None
        leniency = self.spec.match_settings.leniency
        return JobMatchProfile(
            required_skills=self.required_skills or [],
            preferred_skills=self.nice_to_have or [],
            experience_level=level,
            leniency=default_leniency if leniency is None else leniency,
        )


class CandidateExperience(BaseModel):
    years_of_experience: float | None = None


class CandidateRecord(BaseModel):
    id: str | None = None
    public_id: str | None = None
    full_name: str | None = None
    email: str | None = None
    phone: str | None = None
    skills: list[str] | None = []
    experience: CandidateExperience | None = None

    @property
    def years_of_experience(self) -> float | None:
        return self.experience.years_of_experience if self.experience else None


class ApplicationRecord(BaseModel):
    id: str
    stage: str = "applied"
    match_score: float | None = None
    score: float | None = None  # manual recruiter score, shortlist fallback
    notes: str | None = None
    candidate: CandidateRecord | None = None


class AuditEvent(BaseModel):
    """Row for the tenant's append-only ``events`` table."""
    tenant_id: str
    actor_user_id: str | None = None
    entity_type: str
    entity_id: str | None = None
    action: str
    metadata: dict[str, Any] = {}
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
