"""Route handlers for the API."""

from resume_builder.api.routes import (
    ai,
    export,
    health,
    personal_info,
    sections,
    skills,
)

__all__ = [
    "ai",
    "export",
    "health",
    "personal_info",
    "sections",
    "skills",
]
