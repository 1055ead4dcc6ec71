"""Resume feature extraction: text cleanup, skills, years, summary, tags.

Every derivation works on the normalized text, so identical bytes and MIME
type always give an identical profile.
"""

import logging
import re

from models.schemas.resume_profile import ExtractedProfile, ExtractionConfig
from services import document_parser
from services.skill_dictionary import DEFAULT_EXTRACTION_CONFIG

logger = logging.getLogger(__name__)

_CRLF_RE = re.compile(r"\r\n?")
_MULTISPACE_RE = re.compile(r"[ ]{2,}")
_BLANK_LINES_RE = re.compile(r"\n{3,}")

# "5 years experience", "7+ years of experience", "10 yrs experience"
_YEARS_RE = re.compile(
    r"(\d{1,2})\s*\+?\s*(?:years?|yrs?)\s+(?:of\s+)?experience",
    re.IGNORECASE,
)


def normalize_text(text: str) -> str:
    """Canonical form every other extractor reads."""
    text = text.replace("\x00", " ")
    text = _CRLF_RE.sub("\n", text)
    text = text.replace("\t", " ")
    text = _MULTISPACE_RE.sub(" ", text)
    text = _BLANK_LINES_RE.sub("\n\n", text)
    return text.strip()


def extract_skills(text: str, config: ExtractionConfig = DEFAULT_EXTRACTION_CONFIG) -> list[str]:
    """Dictionary hits by case-insensitive substring, one entry per skill."""
    lowered = text.lower()
    detected: list[str] = []
    for canonical, keywords in config.skill_dictionary.items():
        if canonical in detected:
            continue
        if any(kw.lower() in lowered for kw in keywords):
            detected.append(canonical)
    return detected


def estimate_years(text: str, config: ExtractionConfig = DEFAULT_EXTRACTION_CONFIG) -> int | None:
    """Largest stated years-of-experience, clamped; None when never stated."""
    mentions = [int(m.group(1)) for m in _YEARS_RE.finditer(text)]
    if not mentions:
        return None
    years = max(mentions)
    if years == 0:
        return None
    return min(max(years, config.min_years), config.max_years)


def build_summary(text: str, config: ExtractionConfig = DEFAULT_EXTRACTION_CONFIG) -> str | None:
    """Opening lines joined into one string, truncated."""
    if not text:
        return None
    head = " ".join(text.split("\n")[: config.summary_lines])
    summary = head.strip()[: config.summary_max_chars]
    return summary or None


def derive_tech_tags(text: str, config: ExtractionConfig = DEFAULT_EXTRACTION_CONFIG) -> list[str]:
    lowered = text.lower()
    return [
        tag
        for tag, keywords in config.tech_tags.items()
        if any(kw.lower() in lowered for kw in keywords)
    ]


def extract_profile(raw_text: str, config: ExtractionConfig = DEFAULT_EXTRACTION_CONFIG) -> ExtractedProfile:
    """Derive a profile from already-decoded text."""
    text = normalize_text(raw_text)
    return ExtractedProfile(
        normalized_text=text,
        skills=extract_skills(text, config),
        years_of_experience=estimate_years(text, config),
        summary=build_summary(text, config),
        tech_tags=derive_tech_tags(text, config),
    )


def parse_resume(
    content: bytes,
    mime_type: str | None = "",
    filename: str | None = None,
    config: ExtractionConfig = DEFAULT_EXTRACTION_CONFIG,
) -> ExtractedProfile:
    """Decode a resume document and extract its profile.

    Raises:
        UnsupportedFormat: neither MIME type nor extension is PDF/DOCX/DOC/TXT.
        ExtractionFailure: the document could not be decoded; wraps the cause.
    """
    raw_text = document_parser.decode(content, mime_type, filename)
    profile = extract_profile(raw_text, config)
    logger.debug(
        "Parsed resume %s: %d skills, years=%s, tags=%s",
        filename or "unnamed",
        len(profile.skills),
        profile.years_of_experience,
        profile.tech_tags,
    )
    return profile
