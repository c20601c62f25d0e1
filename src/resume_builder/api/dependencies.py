"""Shared dependencies for API routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Path, Request, status

from resume_builder.services.editors import EntityListEditor
from resume_builder.services.session import SECTIONS, ResumeSession


def get_resume_session(request: Request) -> ResumeSession:
    """Return the resume session held by the application.

    The API serves a single in-memory document; it is created on first use
    and lives as long as the process.
    """
    session = getattr(request.app.state, "resume_session", None)
    if session is None:
        session = ResumeSession()
        request.app.state.resume_session = session
    return session


SessionDep = Annotated[ResumeSession, Depends(get_resume_session)]


def get_list_editor(
    section: Annotated[str, Path(description=f"One of: {', '.join(SECTIONS)}")],
    session: SessionDep,
) -> EntityListEditor:
    """Resolve the list editor for the ``{section}`` path parameter.

    Raises:
        HTTPException: 404 if the section does not exist.
    """
    if section not in SECTIONS:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown section '{section}'",
        )
    return session.list_editor(section)
