"""FastAPI application entry point for the Resume Builder API."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from resume_builder.api.errors import resume_builder_error_handler
from resume_builder.api.routes import (
    ai,
    export,
    health,
    personal_info,
    sections,
    skills,
)
from resume_builder.errors import ResumeBuilderError

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the in-memory resume session on startup and drop it on shutdown."""
    from resume_builder.services.session import ResumeSession

    app.state.resume_session = ResumeSession()
    yield
    app.state.resume_session = None


app = FastAPI(
    title="Resume Builder API",
    description="Edit a resume section by section, preview it and export it as PDF",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(ResumeBuilderError, resume_builder_error_handler)

app.include_router(health.router)
app.include_router(personal_info.router, prefix="/api")
# Before sections so /resume/skills is not taken for a list section.
app.include_router(skills.router, prefix="/api")
app.include_router(sections.router, prefix="/api")
app.include_router(ai.router, prefix="/api")
app.include_router(export.router, prefix="/api")


def main() -> None:
    """Start the development server."""
    import uvicorn

    uvicorn.run(
        "resume_builder.api.main:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
