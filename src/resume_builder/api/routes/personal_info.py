"""Document and personal-info routes for the API."""

from __future__ import annotations

from fastapi import APIRouter

from resume_builder.api.dependencies import SessionDep
from resume_builder.api.schemas.resume import (
    PendingSuggestionResponse,
    PersonalInfoUpdateRequest,
)
from resume_builder.models import Document, PersonalInfo

router = APIRouter(prefix="/resume", tags=["resume"])


@router.get("", response_model=Document)
def get_document(session: SessionDep) -> Document:
    """Return the current resume snapshot."""
    return session.builder.document


@router.patch("/personal-info", response_model=PersonalInfo)
def update_personal_info(data: PersonalInfoUpdateRequest, session: SessionDep) -> PersonalInfo:
    """Update personal info. Only provided fields are updated."""
    updates = {k: v for k, v in data.model_dump(exclude_unset=True).items() if v is not None}
    with session.lock:
        for field, value in updates.items():
            session.personal_info.update(field, value)
        return session.builder.document.personal_info


@router.post("/personal-info/improve-summary", response_model=PendingSuggestionResponse)
def improve_summary(session: SessionDep) -> PendingSuggestionResponse:
    """Ask AI assist for a better summary; the document is not changed."""
    suggestion = session.personal_info.improve_summary()
    return PendingSuggestionResponse(suggestion=suggestion or None)


@router.post("/personal-info/apply-suggestion", response_model=PersonalInfo)
def apply_summary_suggestion(session: SessionDep) -> PersonalInfo:
    """Write the pending summary suggestion into the document."""
    with session.lock:
        session.personal_info.apply_suggestion()
        return session.builder.document.personal_info
