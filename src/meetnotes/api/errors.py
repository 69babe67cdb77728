"""Mapping of summary errors to HTTP responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from meetnotes.domain.errors import NotFoundError, SummaryError, ValidationError

logger = logging.getLogger(__name__)

STATUS_CODES: dict[type[SummaryError], int] = {
    ValidationError: 400,
    NotFoundError: 404,
}


def status_code_for(exc: SummaryError) -> int:
    """HTTP status for an error kind; anything unlisted is a server error."""
    for error_type, status_code in STATUS_CODES.items():
        if isinstance(exc, error_type):
            return status_code
    return 500


async def summary_error_handler(request: Request, exc: SummaryError) -> JSONResponse:
    """Render a SummaryError as {error, details?}."""
    status_code = status_code_for(exc)

    if status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: "
            f"{exc.__class__.__name__}: {exc.message} ({exc.details})"
        )
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")

    content = {"error": exc.message}
    if exc.details:
        content["details"] = exc.details
    return JSONResponse(content, status_code=status_code)


def register_error_handlers(app: FastAPI) -> None:
    """Install the summary error handler on an application."""
    app.add_exception_handler(SummaryError, summary_error_handler)
