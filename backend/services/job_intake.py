"""AI-assisted job drafting from employer intake.

The LLM only ever sees PII-stripped intake text. Without an API key a
deterministic draft is returned so the intake flow keeps working.
"""

import logging

from pydantic import BaseModel, ValidationError

from config import settings
from models.schemas.intake import AIIntakeInput, CompensationInsights, GeneratedJobSpec
from models.schemas.matching import ExperienceLevel
from models.schemas.records import AuditEvent
from services import gemini_client, prompt_builder
from services.errors import ExternalServiceError
from services.pii import strip_pii

logger = logging.getLogger(__name__)


class JobIntakeResult(BaseModel):
    spec: GeneratedJobSpec
    event: AuditEvent | None = None  # only LLM drafts are audited


FALLBACK_SCREENING_QUESTIONS = [
    "Describe your experience with the required technologies",
    "What interests you about this role?",
    "What are your salary expectations?",
]


def _level_from_years(years: int | None) -> ExperienceLevel:
    if years and years > 7:
        return ExperienceLevel.SENIOR
    if years and years > 3:
        return ExperienceLevel.MID
    return ExperienceLevel.ENTRY


def fallback_job_spec(intake: AIIntakeInput) -> GeneratedJobSpec:
    """Draft built purely from the intake fields."""
    compensation = None
    if intake.budget_range:
        compensation = CompensationInsights(
            suggested_min=intake.budget_range.min,
            suggested_max=intake.budget_range.max,
        )
    return GeneratedJobSpec(
        refined_title=intake.job_title,
        refined_description=f"{intake.what_you_need}\n\n{intake.key_responsibilities or ''}".strip(),
        required_skills=list(intake.must_have_skills),
        preferred_skills=list(intake.nice_to_have_skills),
        experience_level=_level_from_years(intake.experience_years),
        screening_questions=list(FALLBACK_SCREENING_QUESTIONS),
        compensation_insights=compensation,
        source="fallback",
    )


def scrub_intake(intake: AIIntakeInput) -> AIIntakeInput:
    return intake.model_copy(update={
        "what_you_need": strip_pii(intake.what_you_need),
        "key_responsibilities": strip_pii(intake.key_responsibilities),
        "company_description": strip_pii(intake.company_description),
    })


def _to_job_spec(data: dict) -> GeneratedJobSpec:
    level = data.get("experienceLevel")
    try:
        level = ExperienceLevel(str(level).lower()) if level else None
    except ValueError:
        level = None

    comp = data.get("compensationInsights") or None
    if isinstance(comp, dict):
        comp = CompensationInsights(
            suggested_min=comp.get("suggestedMin"),
            suggested_max=comp.get("suggestedMax"),
        )
    else:
        comp = None

    return GeneratedJobSpec(
        refined_title=data["refinedTitle"],
        refined_description=data.get("refinedDescription", ""),
        required_skills=data.get("requiredSkills") or [],
        preferred_skills=data.get("preferredSkills") or [],
        experience_level=level,
        screening_questions=data.get("screeningQuestions") or [],
        compensation_insights=comp,
        source="llm",
    )


async def generate_job_spec(intake: AIIntakeInput) -> GeneratedJobSpec:
    if not settings.gemini_api_key:
        logger.warning("LLM not configured, returning fallback job spec")
        return fallback_job_spec(intake)

    prompt = prompt_builder.build_job_intake_prompt(scrub_intake(intake))
    data = await gemini_client.generate_json(prompt, prompt_builder.SYSTEM_INSTRUCTION)
    if not isinstance(data, dict):
        logger.error("Gemini returned no usable JSON object: %r", type(data).__name__)
        raise ExternalServiceError("Failed to generate AI spec", service_name="gemini")

    try:
        return _to_job_spec(data)
    except (KeyError, TypeError, ValidationError) as e:
        logger.error("Gemini returned an unusable job spec: %s", e)
        raise ExternalServiceError(
            "Failed to generate AI spec", service_name="gemini", cause=e
        ) from e


async def draft_job_spec(
    intake: AIIntakeInput,
    tenant_id: str,
    actor_user_id: str | None = None,
) -> JobIntakeResult:
    """Generate the draft and, for LLM drafts, the ``generated`` audit event."""
    spec = await generate_job_spec(intake)
    if spec.source != "llm":
        return JobIntakeResult(spec=spec)

    event = AuditEvent(
        tenant_id=tenant_id,
        actor_user_id=actor_user_id,
        entity_type="ai_job_generation",
        action="generated",
        metadata={"intake_title": intake.job_title, "model": settings.gemini_model},
    )
    return JobIntakeResult(spec=spec, event=event)
