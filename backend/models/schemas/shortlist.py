"""EEO-blind shortlist entry shown to client reviewers."""

from typing import Literal

from pydantic import BaseModel

ShortlistStage = Literal["under_review", "shortlisted", "rejected"]
ShortlistDecision = Literal["shortlist", "reject"]


class ShortlistJob(BaseModel):
    """Job header shown above the shortlist."""
    id: str
    title: str = ""
    location: str | None = None
    employment_type: str | None = None
    required_skills: list[str] = []
    nice_to_have: list[str] = []


class ShortlistCandidate(BaseModel):
    application_id: str
    alias: str  # never the real name
    match_score: int = 0  # 0-100
    stage: ShortlistStage = "under_review"
    stage_label: str = "Under Review"
    skills: list[str] = []  # top 5 only
    experience_label: str = "Experience TBD"
    notes: str | None = None
