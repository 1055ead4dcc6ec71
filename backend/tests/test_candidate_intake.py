import time

import pytest

from models.schemas.intake import EEOCandidateIntake
from models.schemas.resume_profile import ResumeDocument
from services import candidate_intake, resume_parser
from services.candidate_intake import ingest_resume


@pytest.fixture
def intake():
    return EEOCandidateIntake(alias="Blue Falcon", headline="Backend engineer")


def test_masked_email(intake):
    assert intake.masked_email == "bluefalcon@candidate.hidden"


def test_alias_validation():
    with pytest.raises(ValueError):
        EEOCandidateIntake(alias="x!")


def test_comp_range_validation():
    with pytest.raises(ValueError):
        EEOCandidateIntake(alias="Blue Falcon", desired_comp_min=200, desired_comp_max=100)


@pytest.mark.asyncio
async def test_successful_parse(intake, sample_resume):
    document = ResumeDocument(content=sample_resume.encode(), mime_type="text/plain")
    result = await ingest_resume(document, intake, tenant_id="t1", actor_user_id="u1", job_id="j1")

    assert result.parsed is True
    assert result.profile.years_of_experience == 7
    assert result.masked_email == "bluefalcon@candidate.hidden"
    assert result.headline == "Backend engineer"
    [event] = result.events
    assert event.action == "resume_parsed_success"
    assert event.entity_type == "resume"
    assert event.metadata == {
        "job_id": "j1",
        "file_type": "text/plain",
        "file_size": len(sample_resume.encode()),
        "parser_version": "v1",
    }


@pytest.mark.asyncio
async def test_unsupported_format_degrades_to_empty_profile(intake):
    document = ResumeDocument(content=b"\x89PNG", mime_type="image/png", filename="me.png")
    result = await ingest_resume(document, intake, tenant_id="t1")

    assert result.parsed is False
    assert result.profile.skills == []
    assert result.profile.years_of_experience is None
    [event] = result.events
    assert event.action == "resume_parsed_failure"
    assert "Unsupported resume format" in event.metadata["error"]
    assert event.metadata["file_type"] == "image/png"


@pytest.mark.asyncio
async def test_corrupt_document_degrades_to_empty_profile(intake):
    document = ResumeDocument(content=b"garbage", filename="resume.docx")
    result = await ingest_resume(document, intake, tenant_id="t1")

    assert result.parsed is False
    assert result.events[0].action == "resume_parsed_failure"
    assert result.events[0].metadata["file_type"] == "unknown"


@pytest.mark.asyncio
async def test_timeout_degrades_to_empty_profile(intake, monkeypatch):
    def slow_parse(*args, **kwargs):
        time.sleep(0.5)
        return resume_parser.extract_profile("")

    monkeypatch.setattr(candidate_intake.resume_parser, "parse_resume", slow_parse)
    document = ResumeDocument(content=b"text", mime_type="text/plain")
    result = await ingest_resume(document, intake, tenant_id="t1", timeout=0.05)

    assert result.parsed is False
    assert result.events[0].metadata["error"] == "Resume parsing timed out"
