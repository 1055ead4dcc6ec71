"""Employer job intake and candidate (EEO-blind) intake contracts."""

from typing import Literal

from pydantic import BaseModel, Field, model_validator

from models.schemas.matching import ExperienceLevel


class BudgetRange(BaseModel):
    min: float | None = None
    max: float | None = None


class AIIntakeInput(BaseModel):
    """Free-text intake an employer fills in before the LLM drafts a job."""
    job_title: str = Field(..., min_length=3)
    company_description: str | None = None
    what_you_need: str = Field(..., min_length=10)
    key_responsibilities: str | None = None
    must_have_skills: list[str] = Field(..., min_length=1)
    nice_to_have_skills: list[str] = []
    experience_years: int | None = Field(default=None, ge=0, le=30)
    work_location: Literal["remote", "hybrid", "onsite"]
    budget_range: BudgetRange | None = None


class CompensationInsights(BaseModel):
    suggested_min: float | None = None
    suggested_max: float | None = None


class GeneratedJobSpec(BaseModel):
    """Structured job draft returned by the intake step."""
    refined_title: str
    refined_description: str = ""
    required_skills: list[str] = []
    preferred_skills: list[str] = []
    experience_level: ExperienceLevel | None = None
    screening_questions: list[str] = []
    compensation_insights: CompensationInsights | None = None
    source: Literal["llm", "fallback"] = "llm"


class EEOCandidateIntake(BaseModel):
    """Recruiter-entered fields for an anonymized candidate."""
    alias: str = Field(..., min_length=3, max_length=64, pattern=r"^[a-zA-Z0-9\-_\s]+$")
    headline: str | None = Field(default=None, max_length=160)
    desired_comp_min: int | None = Field(default=None, gt=0)
    desired_comp_max: int | None = Field(default=None, gt=0)

    @model_validator(mode="after")
    def _check_comp_range(self):
        if (
            self.desired_comp_min
            and self.desired_comp_max
            and self.desired_comp_min > self.desired_comp_max
        ):
            raise ValueError("Max comp should be higher than min comp")
        return self

    @property
    def masked_email(self) -> str:
        return f"{''.join(self.alias.split()).lower()}@candidate.hidden"
