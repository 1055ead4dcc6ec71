"""Tests for resume feature extraction."""

import pytest

from models.schemas.resume_profile import ExtractionConfig
from services.errors import ExtractionFailure, UnsupportedFormat
from services.resume_parser import (
    build_summary,
    derive_tech_tags,
    estimate_years,
    extract_profile,
    extract_skills,
    normalize_text,
    parse_resume,
)
from services.skill_dictionary import (
    DEFAULT_EXTRACTION_CONFIG,
    build_skill_dictionary,
    capitalize_skill,
)


# --- Normalization ---


def test_normalize_text_cleans_whitespace():
    raw = "  Jane\x00Doe\r\n\tEngineer   here\r\n\r\n\r\n\r\nSkills  "
    assert normalize_text(raw) == "Jane Doe\n Engineer here\n\nSkills"


def test_normalize_text_old_mac_line_endings():
    assert normalize_text("a\rb") == "a\nb"


def test_normalize_text_keeps_double_newline():
    assert normalize_text("a\n\nb") == "a\n\nb"


def test_normalize_text_empty():
    assert normalize_text("   \n\n\n  ") == ""


# --- Skills ---


def test_extract_skills_dictionary_order_and_display_form():
    text = "Experienced with React, Node.js and PostgreSQL on AWS. SQL daily."
    assert extract_skills(text) == ["React", "Node", "AWS", "SQL", "Postgres"]


def test_extract_skills_case_insensitive_and_deduplicated():
    skills = extract_skills("DOCKER docker Docker, docker-compose")
    assert skills == ["Docker"]


def test_extract_skills_acronyms():
    skills = extract_skills("Shipped C# services on gcp and aws")
    assert "C#" in skills
    assert "GCP" in skills
    assert "AWS" in skills


def test_extract_skills_is_substring_match():
    # "java" is found inside "javascript"
    skills = extract_skills("JavaScript only")
    assert skills == ["Javascript", "Java"]


def test_extract_skills_none():
    assert extract_skills("Gardener with a love of plants") == []


def test_extract_skills_custom_dictionary():
    config = ExtractionConfig(
        skill_dictionary={"Go": ["golang"], "Rust": ["rust"]},
        tech_tags={},
    )
    assert extract_skills("Golang and Rust", config) == ["Go", "Rust"]


def test_capitalize_skill():
    assert capitalize_skill("sql") == "SQL"
    assert capitalize_skill("c#") == "C#"
    assert capitalize_skill("react") == "React"


def test_build_skill_dictionary_merges_aliases():
    dictionary = build_skill_dictionary(["aws", "AWS", "vue"])
    assert dictionary == {"AWS": ["aws", "aws"], "Vue": ["vue"]}


# --- Years of experience ---


def test_estimate_years_takes_maximum():
    text = "3 years experience with SQL. Overall 7+ years of experience."
    assert estimate_years(text) == 7


@pytest.mark.parametrize(
    "text,expected",
    [
        ("5 years of experience", 5),
        ("10 yrs experience", 10),
        ("1 year experience", 1),
        ("4+ YEARS OF EXPERIENCE", 4),
        ("12 yr experience", 12),
    ],
)
def test_estimate_years_variants(text, expected):
    assert estimate_years(text) == expected


def test_estimate_years_absent_is_none_not_zero():
    assert estimate_years("Worked at Acme for a long time") is None


def test_estimate_years_zero_is_unknown():
    assert estimate_years("0 years experience") is None


def test_estimate_years_clamped_to_40():
    assert estimate_years("99 years of experience") == 40


def test_estimate_years_requires_experience_word():
    assert estimate_years("5 years at Google") is None


# --- Summary ---


def test_build_summary_joins_first_six_lines():
    text = "\n".join(f"line{i}" for i in range(10))
    assert build_summary(text) == "line0 line1 line2 line3 line4 line5"


def test_build_summary_truncates_to_500():
    text = "\n".join("x" * 100 for _ in range(6))
    summary = build_summary(text)
    assert len(summary) == 500


def test_build_summary_empty_is_none():
    assert build_summary("") is None


# --- Tech tags ---


def test_derive_tech_tags_multiple():
    tags = derive_tech_tags("React and Node.js with SQL")
    assert tags == ["backend", "frontend", "data"]


def test_derive_tech_tags_none():
    assert derive_tech_tags("Gardener with a love of plants") == []


def test_derive_tech_tags_design():
    assert "design" in derive_tech_tags("Figma prototypes")


# --- Full pipeline ---


def test_extract_profile(sample_resume):
    profile = extract_profile(sample_resume)
    assert profile.years_of_experience == 7
    assert "Python" in profile.skills
    assert "Node" in profile.skills
    assert "AWS" in profile.skills
    assert profile.summary.startswith("Jane Doe Senior Backend Engineer")
    assert "backend" in profile.tech_tags
    assert profile.normalized_text == normalize_text(sample_resume)


def test_parse_resume_plain_text(sample_resume):
    profile = parse_resume(sample_resume.encode("utf-8"), "text/plain", "resume.txt")
    assert profile.years_of_experience == 7


def test_parse_resume_docx(sample_docx):
    profile = parse_resume(sample_docx, "", "resume.docx")
    assert "Kubernetes" in profile.skills
    assert profile.years_of_experience == 7


def test_parse_resume_is_idempotent(sample_docx):
    first = parse_resume(sample_docx, "", "resume.docx")
    second = parse_resume(sample_docx, "", "resume.docx")
    assert first.normalized_text == second.normalized_text
    assert first.skills == second.skills
    assert first.years_of_experience == second.years_of_experience
    assert first == second


def test_parse_resume_unsupported_format():
    with pytest.raises(UnsupportedFormat):
        parse_resume(b"\x89PNG\r\n", "image/png")


def test_parse_resume_corrupt_docx():
    with pytest.raises(ExtractionFailure):
        parse_resume(b"garbage", "", "resume.docx")


def test_parse_resume_empty_text_gives_empty_profile():
    profile = parse_resume(b"", "text/plain")
    assert profile.normalized_text == ""
    assert profile.skills == []
    assert profile.years_of_experience is None
    assert profile.summary is None
    assert profile.tech_tags == []


def test_default_config_tables_are_consistent():
    assert "SQL" in DEFAULT_EXTRACTION_CONFIG.skill_dictionary
    assert set(DEFAULT_EXTRACTION_CONFIG.tech_tags) == {
        "backend", "frontend", "mobile", "data", "design",
    }
