import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from api.router import limiter, router
from config import settings
from logging_config import setup_logging
from services.errors import (
    ExternalServiceError,
    ExtractionFailure,
    HireIOError,
    UnsupportedFormat,
)

setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Hire.io Matching API",
    description="Resume feature extraction, match scoring and EEO-blind shortlists",
    version="1.0.0",
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_STATUS_CODES: dict[type[HireIOError], int] = {
    UnsupportedFormat: 415,
    ExtractionFailure: 422,
    ExternalServiceError: 502,
}


@app.exception_handler(HireIOError)
async def hireio_error_handler(request: Request, exc: HireIOError):
    status_code = _STATUS_CODES.get(type(exc), 500)
    logger.warning("%s on %s: %s", exc.error_code, request.url.path, exc.to_dict())

    error = exc.to_dict()
    message = exc.message
    if isinstance(exc, ExtractionFailure):
        # Decoder internals stay in the logs
        error.pop("cause", None)
        message = "Could not read this file"
    return JSONResponse(status_code=status_code, content={"error": error, "message": message})


app.include_router(router)
