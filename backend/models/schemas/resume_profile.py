"""Resume extraction contracts: input document, extractor config and output profile."""

from pydantic import BaseModel


class ResumeDocument(BaseModel):
    """Raw uploaded resume. Transient, never retained by the extractor."""
    content: bytes
    mime_type: str = ""  # may be empty; filename extension is the fallback
    filename: str | None = None


class ExtractionConfig(BaseModel):
    """Lookup tables and limits driving feature extraction.

    skill_dictionary maps canonical display name -> detection keywords.
    tech_tags maps tag -> keywords. Dict insertion order is output order.
    """
    skill_dictionary: dict[str, list[str]]
    tech_tags: dict[str, list[str]]
    summary_lines: int = 6
    summary_max_chars: int = 500
    min_years: int = 1
    max_years: int = 40

    model_config = {"frozen": True}


class ExtractedProfile(BaseModel):
    """Structured signal derived from one resume.

    years_of_experience is None when the text never states it; that is a
    different state from a stated value and is never coerced to 0.
    """
    normalized_text: str = ""
    skills: list[str] = []  # dictionary order, deduplicated
    years_of_experience: int | None = None  # clamped to [min_years, max_years]
    summary: str | None = None  # at most summary_max_chars
    tech_tags: list[str] = []

    model_config = {"frozen": True}

    @classmethod
    def empty(cls) -> "ExtractedProfile":
        """Profile used when extraction failed and a human backfills later."""
        return cls()
