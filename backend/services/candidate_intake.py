"""EEO-blind candidate intake from an uploaded resume.

A failed parse never blocks candidate creation: the caller gets an empty
profile plus a failure audit event and a human backfills skills later.
"""

import asyncio
import logging

from pydantic import BaseModel

from config import settings
from models.schemas.intake import EEOCandidateIntake
from models.schemas.records import AuditEvent
from models.schemas.resume_profile import ExtractedProfile, ResumeDocument
from services import resume_parser
from services.errors import ResumeParseError

logger = logging.getLogger(__name__)

PARSER_VERSION = "v1"


class CandidateIntakeResult(BaseModel):
    alias: str
    masked_email: str
    headline: str | None = None
    profile: ExtractedProfile
    parsed: bool
    events: list[AuditEvent] = []


async def ingest_resume(
    document: ResumeDocument,
    intake: EEOCandidateIntake,
    tenant_id: str,
    actor_user_id: str | None = None,
    job_id: str | None = None,
    timeout: float | None = None,
) -> CandidateIntakeResult:
    timeout = settings.resume_parse_timeout_seconds if timeout is None else timeout
    metadata = {
        "job_id": job_id,
        "file_type": document.mime_type or "unknown",
        "file_size": len(document.content),
        "parser_version": PARSER_VERSION,
    }

    error_message = None
    try:
        profile = await asyncio.wait_for(
            asyncio.to_thread(
                resume_parser.parse_resume,
                document.content,
                document.mime_type,
                document.filename,
            ),
            timeout=timeout,
        )
    except ResumeParseError as e:
        logger.error("Resume parsing error: %s (cause: %s)", e, e.cause)
        error_message = e.message
    except asyncio.TimeoutError:
        logger.error("Resume parsing timed out after %.1fs", timeout)
        error_message = "Resume parsing timed out"

    if error_message is None:
        action = "resume_parsed_success"
    else:
        profile = ExtractedProfile.empty()
        action = "resume_parsed_failure"
        metadata["error"] = error_message

    event = AuditEvent(
        tenant_id=tenant_id,
        actor_user_id=actor_user_id,
        entity_type="resume",
        entity_id=None,
        action=action,
        metadata=metadata,
    )

    return CandidateIntakeResult(
        alias=intake.alias,
        masked_email=intake.masked_email,
        headline=intake.headline,
        profile=profile,
        parsed=error_message is None,
        events=[event],
    )
