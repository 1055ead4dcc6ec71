"""Match scorer contracts: job/candidate profiles, scoring config and breakdown."""

from enum import Enum

from pydantic import BaseModel, field_validator


class ExperienceLevel(str, Enum):
    ENTRY = "entry"
    MID = "mid"
    SENIOR = "senior"
    LEAD = "lead"
    EXECUTIVE = "executive"


class JobMatchProfile(BaseModel):
    """Job side of a scoring call. Leniency 0 is strict, 1 is lenient."""
    required_skills: list[str] = []
    preferred_skills: list[str] = []
    experience_level: ExperienceLevel | None = None
    leniency: float = 0.5

    @field_validator("required_skills", "preferred_skills", mode="before")
    @classmethod
    def _none_to_empty(cls, v):
        return v or []

    @field_validator("leniency", mode="before")
    @classmethod
    def _clamp_leniency(cls, v):
        if v is None:
            return 0.5
        return max(0.0, min(1.0, float(v)))


class CandidateMatchProfile(BaseModel):
    """Candidate side of a scoring call. Missing years means unknown."""
    skills: list[str] = []
    years_of_experience: float | None = None

    @field_validator("skills", mode="before")
    @classmethod
    def _none_to_empty(cls, v):
        return v or []


class MatchWeights(BaseModel):
    required: float = 0.55
    preferred: float = 0.20
    experience: float = 0.25

    model_config = {"frozen": True}


class ScoringConfig(BaseModel):
    """Tunable constants of the match scorer."""
    weights: MatchWeights = MatchWeights()
    experience_targets: dict[ExperienceLevel, float] = {
        ExperienceLevel.ENTRY: 1,
        ExperienceLevel.MID: 3,
        ExperienceLevel.SENIOR: 6,
        ExperienceLevel.LEAD: 8,
        ExperienceLevel.EXECUTIVE: 10,
    }
    default_target_years: float = 3
    max_leniency: float = 0.9  # keeps tolerance >= 0.55
    leniency_tolerance_factor: float = 0.5
    over_target_cap: float = 2.0  # no extra credit beyond 2x target

    model_config = {"frozen": True}


class MatchBreakdown(BaseModel):
    """Every intermediate of one scoring call, for auditability."""
    required_coverage: float = 0.0
    preferred_coverage: float = 0.0
    experience_score: float = 0.0
    target_years: float = 0.0
    candidate_years: float = 0.0
    matched_required: list[str] = []
    missing_required: list[str] = []
    matched_preferred: list[str] = []
    score: int = 0  # 0-100
