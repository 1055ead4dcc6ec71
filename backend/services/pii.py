"""Scrub contact details from free text before it reaches the LLM."""

import re

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
PHONE_RE = re.compile(r"\b\d{3}[-.]?\d{3}[-.]?\d{4}\b")
SSN_RE = re.compile(r"\b\d{3}-?\d{2}-?\d{4}\b")


def strip_pii(text: str | None) -> str | None:
    if text is None:
        return None
    cleaned = EMAIL_RE.sub("[EMAIL]", text)
    cleaned = PHONE_RE.sub("[PHONE]", cleaned)
    cleaned = SSN_RE.sub("[SSN]", cleaned)
    return cleaned
