"""AI assist routes for the API.

These never modify the document except ``/ai/summary/apply``; the caller
decides whether to merge a suggestion.
"""

from __future__ import annotations

from fastapi import APIRouter

from resume_builder.api.dependencies import SessionDep
from resume_builder.api.schemas.ai import (
    ImproveTextRequest,
    JobMatchRequest,
    JobMatchResponse,
    SuggestionResponse,
    SummaryResponse,
)
from resume_builder.models import PersonalInfo

router = APIRouter(prefix="/ai", tags=["ai"])


@router.post("/improve", response_model=list[SuggestionResponse])
def improve_text(data: ImproveTextRequest, session: SessionDep) -> list[SuggestionResponse]:
    """Return rewrite suggestions for arbitrary resume text."""
    results = session.assistant.improve_text(data.text, data.context, data.kind)
    return [SuggestionResponse(**r) for r in results]


@router.post("/summary", response_model=SummaryResponse)
def generate_summary(session: SessionDep) -> SummaryResponse:
    """Generate a professional summary from the current resume."""
    return SummaryResponse(summary=session.suggestions.generate_summary())


@router.post("/summary/apply", response_model=PersonalInfo)
def apply_summary(session: SessionDep) -> PersonalInfo:
    with session.lock:
        session.suggestions.apply_summary()
        return session.builder.document.personal_info


@router.post("/job-match", response_model=JobMatchResponse)
def match_job(data: JobMatchRequest, session: SessionDep) -> JobMatchResponse:
    """Score the resume against a job description."""
    result = session.suggestions.optimize_for_job(data.job_description)
    return JobMatchResponse(**result)
