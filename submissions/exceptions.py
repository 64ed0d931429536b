# exceptions.py
"""Error types and the handlers that render them as the JSON envelope."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class SubmissionError(Exception):
    """A failed submission, carrying the status code and message sent to the caller."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def envelope(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
        headers=headers,
    )


async def submission_error_handler(request: Request, exc: SubmissionError) -> JSONResponse:
    return envelope(exc.status_code, exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Routing errors (405 for a wrong verb, 404) in the same shape as everything else."""
    logger.info(f"Rejected {request.method} {request.url.path}: {exc.status_code}")
    return envelope(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


def setup_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SubmissionError, submission_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
