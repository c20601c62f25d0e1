"""Translate resume builder errors into HTTP responses."""

from __future__ import annotations

from fastapi import Request, status
from fastapi.responses import JSONResponse

from resume_builder.errors import (
    ActionInProgressError,
    EntityNotFoundError,
    ExportError,
    ResumeBuilderError,
    UnknownFieldError,
    ValidationNotice,
)

_STATUS_BY_ERROR: list[tuple[type[ResumeBuilderError], int]] = [
    (ValidationNotice, status.HTTP_400_BAD_REQUEST),
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (UnknownFieldError, 422),
    (ActionInProgressError, status.HTTP_409_CONFLICT),
    (ExportError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def status_for(exc: ResumeBuilderError) -> int:
    for error_type, code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return code
    return status.HTTP_400_BAD_REQUEST


async def resume_builder_error_handler(_: Request, exc: ResumeBuilderError) -> JSONResponse:
    """Render the error as a notice the front end can show as a toast."""
    return JSONResponse(
        status_code=status_for(exc),
        content={"detail": exc.message, "title": exc.title},
    )
