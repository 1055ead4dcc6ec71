"""Exception hierarchy for the matching core.

Scoring never raises; everything here comes from document decoding or from
the LLM collaborator used during job intake.
"""

from typing import Any


class HireIOError(Exception):
    """Base exception carrying a machine-readable code and details."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        self.cause = cause
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for logging/response."""
        result = {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class ResumeParseError(HireIOError):
    """A resume could not be turned into text."""


class UnsupportedFormat(ResumeParseError):
    """Neither the MIME type nor the filename extension is a known format."""

    def __init__(self, mime_type: str = "", extension: str = "") -> None:
        label = mime_type or extension or "unknown"
        super().__init__(
            f"Unsupported resume format: {label}",
            error_code="UNSUPPORTED_FORMAT",
            details={"mime_type": mime_type, "extension": extension},
        )


class ExtractionFailure(ResumeParseError):
    """A recognized format's bytes could not be decoded."""

    def __init__(self, document_format: str, cause: BaseException) -> None:
        super().__init__(
            f"Unable to extract text from {document_format.upper()}",
            error_code="EXTRACTION_FAILURE",
            details={"format": document_format},
            cause=cause,
        )


class ExternalServiceError(HireIOError):
    """Raised when the LLM collaborator fails or returns unusable output."""

    def __init__(self, message: str, service_name: str | None = None, **kwargs: Any) -> None:
        details = kwargs.pop("details", {})
        if service_name:
            details["service_name"] = service_name
        super().__init__(message, error_code="EXTERNAL_SERVICE_ERROR", details=details, **kwargs)
