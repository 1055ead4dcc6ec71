"""Shared test configuration and fixtures."""

import io

import pytest
from docx import Document

SAMPLE_RESUME = """Jane Doe
Senior Backend Engineer

Summary
Engineer with 7+ years of experience building APIs in Python and Node.js.
Also 3 years experience leading teams.

Skills
Python, Node.js, PostgreSQL, Docker, Kubernetes, AWS
"""


def make_docx(paragraphs: list[str]) -> bytes:
    """Build a DOCX file in memory."""
    doc = Document()
    for text in paragraphs:
        doc.add_paragraph(text)
    buf = io.BytesIO()
    doc.save(buf)
    return buf.getvalue()


@pytest.fixture
def sample_resume() -> str:
    return SAMPLE_RESUME


@pytest.fixture
def sample_docx() -> bytes:
    return make_docx(SAMPLE_RESUME.split("\n"))


@pytest.fixture
def docx_factory():
    return make_docx
