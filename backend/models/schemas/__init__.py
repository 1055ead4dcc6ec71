"""Pydantic contracts shared by the extractor, the scorer and the API."""

from models.schemas.intake import AIIntakeInput, EEOCandidateIntake, GeneratedJobSpec
from models.schemas.matching import (
    CandidateMatchProfile,
    ExperienceLevel,
    JobMatchProfile,
    MatchBreakdown,
    ScoringConfig,
)
from models.schemas.records import ApplicationRecord, AuditEvent, CandidateRecord, JobRecord
from models.schemas.resume_profile import ExtractedProfile, ExtractionConfig, ResumeDocument
from models.schemas.shortlist import ShortlistCandidate, ShortlistJob

__all__ = [
    "AIIntakeInput",
    "EEOCandidateIntake",
    "GeneratedJobSpec",
    "CandidateMatchProfile",
    "ExperienceLevel",
    "JobMatchProfile",
    "MatchBreakdown",
    "ScoringConfig",
    "ApplicationRecord",
    "AuditEvent",
    "CandidateRecord",
    "JobRecord",
    "ExtractedProfile",
    "ExtractionConfig",
    "ResumeDocument",
    "ShortlistCandidate",
    "ShortlistJob",
]
