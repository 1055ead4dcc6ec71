"""Resume document -> plain text decoding.

Dispatches on the declared MIME type first and falls back to the filename
extension. Raises UnsupportedFormat for anything else and ExtractionFailure
when a recognized format cannot be decoded.
"""

import io
import logging
from pathlib import PurePosixPath

import pdfplumber
from docx import Document

from services.errors import ExtractionFailure, UnsupportedFormat

logger = logging.getLogger(__name__)

PDF = "pdf"
DOCX = "docx"
DOC = "doc"
TXT = "txt"

MIME_FORMATS: dict[str, str] = {
    "application/pdf": PDF,
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": DOCX,
    "application/msword": DOC,
    "text/plain": TXT,
}

EXTENSION_FORMATS: dict[str, str] = {
    "pdf": PDF,
    "docx": DOCX,
    "doc": DOC,
    "txt": TXT,
}


def _mime_base(mime_type: str | None) -> str:
    """'Text/Plain; charset=utf-8' -> 'text/plain'."""
    return (mime_type or "").split(";", 1)[0].strip().lower()


def _extension(filename: str | None) -> str:
    if not filename:
        return ""
    return PurePosixPath(filename).suffix.lstrip(".").lower()


def detect_format(mime_type: str | None, filename: str | None = None) -> str:
    """Resolve the document format, or raise UnsupportedFormat."""
    mime = _mime_base(mime_type)
    ext = _extension(filename)
    fmt = MIME_FORMATS.get(mime) or EXTENSION_FORMATS.get(ext)
    if fmt is None:
        raise UnsupportedFormat(mime_type=mime, extension=ext)
    return fmt


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def extract_text_docx(docx_bytes: bytes) -> str:
    """Extract all text from a DOCX file."""
    doc = Document(io.BytesIO(docx_bytes))
    return "\n".join(p.text for p in doc.paragraphs).strip()


def extract_text_doc(doc_bytes: bytes) -> str:
    """Best-effort legacy .doc read: the binary is decoded as UTF-16LE, lossy."""
    return doc_bytes.decode("utf-16-le", errors="ignore")


def extract_text_plain(txt_bytes: bytes) -> str:
    return txt_bytes.decode("utf-8", errors="replace")


_DECODERS = {
    PDF: extract_text,
    DOCX: extract_text_docx,
    DOC: extract_text_doc,
    TXT: extract_text_plain,
}


def decode(content: bytes, mime_type: str | None = "", filename: str | None = None) -> str:
    """Decode a resume to raw (un-normalized) text."""
    fmt = detect_format(mime_type, filename)
    try:
        return _DECODERS[fmt](content)
    except Exception as e:
        logger.warning("Failed to decode %s resume (%s): %s", fmt, filename or "unnamed", e)
        raise ExtractionFailure(fmt, cause=e) from e
