import pytest

from services import document_parser
from services.document_parser import decode, detect_format
from services.errors import ExtractionFailure, UnsupportedFormat


def test_detect_format_by_mime():
    assert detect_format("application/pdf") == "pdf"
    assert detect_format(
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    ) == "docx"
    assert detect_format("application/msword") == "doc"
    assert detect_format("text/plain") == "txt"


def test_detect_format_ignores_mime_parameters_and_case():
    assert detect_format("Text/Plain; charset=utf-8") == "txt"


def test_detect_format_falls_back_to_extension():
    assert detect_format("", "resume.PDF") == "pdf"
    assert detect_format("application/octet-stream", "cv.docx") == "docx"
    assert detect_format(None, "old.doc") == "doc"


def test_detect_format_mime_wins_over_extension():
    assert detect_format("text/plain", "resume.pdf") == "txt"


def test_unsupported_format_png():
    with pytest.raises(UnsupportedFormat) as exc_info:
        detect_format("image/png", "photo")
    assert exc_info.value.error_code == "UNSUPPORTED_FORMAT"
    assert "image/png" in exc_info.value.message


def test_unsupported_format_no_hints():
    with pytest.raises(UnsupportedFormat):
        decode(b"data", "", None)


def test_decode_plain_text():
    assert decode("Café résumé".encode("utf-8"), "text/plain") == "Café résumé"


def test_decode_legacy_doc_as_utf16le():
    text = decode("Legacy resume".encode("utf-16-le"), "application/msword")
    assert text == "Legacy resume"


def test_decode_docx(docx_factory):
    content = docx_factory(["Jane Doe", "Python developer"])
    text = decode(content, "", "resume.docx")
    assert text == "Jane Doe\nPython developer"


def test_decode_corrupt_docx_raises_extraction_failure():
    with pytest.raises(ExtractionFailure) as exc_info:
        decode(b"definitely not a zip", "", "resume.docx")
    assert exc_info.value.cause is not None
    assert exc_info.value.__cause__ is exc_info.value.cause
    assert exc_info.value.details["format"] == "docx"


def test_decode_corrupt_pdf_raises_extraction_failure():
    with pytest.raises(ExtractionFailure) as exc_info:
        decode(b"not a pdf", "application/pdf")
    assert "PDF" in exc_info.value.message


class _FakePage:
    def __init__(self, text):
        self._text = text

    def extract_text(self):
        return self._text


class _FakePdf:
    def __init__(self, texts):
        self.pages = [_FakePage(t) for t in texts]

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def test_decode_pdf_joins_pages(monkeypatch):
    monkeypatch.setattr(
        document_parser.pdfplumber, "open", lambda _: _FakePdf(["Page one", None, "Page three"])
    )
    assert decode(b"%PDF-1.4", "application/pdf") == "Page one\n\nPage three"
