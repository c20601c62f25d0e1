"""Preview and PDF download routes."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import FileResponse

from resume_builder.api.dependencies import SessionDep
from resume_builder.services.preview import ResumePreview, render_preview
from resume_builder.utils.export import export_resume

router = APIRouter(tags=["export"])


@router.get("/preview", response_model=dict)
def get_preview(session: SessionDep) -> ResumePreview:
    """Return the rendered preview of the current resume."""
    return session.renderer.preview or render_preview(session.builder.document)


@router.get("/export/pdf", response_class=FileResponse)
def download_pdf(session: SessionDep) -> FileResponse:
    """Export the rendered preview to PDF and send it as a download."""
    with session.lock:
        path = export_resume(session.builder, renderer=session.renderer)
    return FileResponse(path, media_type="application/pdf", filename=path.name)
