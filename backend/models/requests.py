from pydantic import BaseModel, Field

from models.schemas.intake import AIIntakeInput
from models.schemas.matching import CandidateMatchProfile, JobMatchProfile
from models.schemas.records import ApplicationRecord, JobRecord
from models.schemas.shortlist import ShortlistDecision


class ScoreRequest(BaseModel):
    job: JobMatchProfile
    candidate: CandidateMatchProfile


class RecomputeRequest(BaseModel):
    job: JobRecord
    applications: list[ApplicationRecord] = Field(default=[], max_length=5000)
    actor_user_id: str | None = None


class ShortlistRequest(BaseModel):
    job: JobRecord
    applications: list[ApplicationRecord] = Field(default=[], max_length=5000)
    actor_user_id: str | None = None


class DecisionRequest(BaseModel):
    tenant_id: str
    application: ApplicationRecord
    decision: ShortlistDecision
    actor_user_id: str | None = None


class JobIntakeRequest(BaseModel):
    tenant_id: str
    intake: AIIntakeInput
    actor_user_id: str | None = None
