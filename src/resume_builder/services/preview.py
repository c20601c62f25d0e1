"""Printable projection of the resume document.

The preview is plain data (TypedDicts) so the PDF exporter and the HTTP API
can consume it without knowing about the document models.  A field appears
only when it is non-empty and a section only when it has entries.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypedDict

if TYPE_CHECKING:
    from resume_builder.models import Document
    from resume_builder.services.builder import ResumeBuilder

logger = logging.getLogger(__name__)

__all__ = [
    "PreviewEntry",
    "PreviewHeader",
    "PreviewRenderer",
    "PreviewSection",
    "ResumePreview",
    "format_date_range",
    "format_month",
    "render_preview",
]

_MONTH_ABBR = [
    "",
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
]


class PreviewHeader(TypedDict):
    name: str
    details: list[str]  # location, phone, email
    links: list[str]  # linkedin, website


class PreviewEntry(TypedDict, total=False):
    heading: str
    subheading: str
    date_range: str
    body: str
    link: str


class PreviewSection(TypedDict):
    title: str
    entries: list[PreviewEntry]


class ResumePreview(TypedDict, total=False):
    """Top-level preview bundle consumed by the exporter."""

    header: PreviewHeader
    summary: str
    sections: list[PreviewSection]
    skills: list[str]


def format_month(value: str) -> str:
    """Render ``YYYY-MM`` or ``YYYY-MM-DD`` as ``Mon YYYY``.

    Anything that does not look like an ISO month is returned unchanged.
    """
    parts = value.split("-")
    if len(parts) >= 2 and parts[0].isdigit() and parts[1].isdigit():
        month = int(parts[1])
        if 1 <= month <= 12:
            return f"{_MONTH_ABBR[month]} {parts[0]}"
    return value


def format_date_range(start: str, end: str, current: bool = False) -> str:
    """Return ``"<start> - <end or Present>"``.

    Collapses to the non-empty side when one side is missing and to ``""``
    when both are.
    """
    start_str = format_month(start.strip()) if start else ""
    end_str = "Present" if current else (format_month(end.strip()) if end else "")

    if start_str and end_str:
        return f"{start_str} - {end_str}"
    return start_str or end_str


def _entry(**fields: str) -> PreviewEntry:
    kept = {key: value for key, value in fields.items() if value}
    return PreviewEntry(**kept)  # type: ignore[typeddict-item]


def _join(*parts: str, sep: str = ", ") -> str:
    return sep.join(p for p in parts if p)


def render_preview(document: Document) -> ResumePreview:
    """Project *document* into a :class:`ResumePreview`."""
    info = document.personal_info
    preview: ResumePreview = {
        "header": {
            "name": info.name,
            "details": [v for v in (info.location, info.phone, info.email) if v],
            "links": [v for v in (info.linkedin, info.website) if v],
        },
        "sections": [],
    }
    if info.summary:
        preview["summary"] = info.summary

    sections = preview["sections"]

    work_entries = [
        _entry(
            heading=exp.title,
            subheading=_join(exp.company, exp.location),
            date_range=format_date_range(exp.start_date, exp.end_date, exp.current),
            body=exp.description,
        )
        for exp in document.work_experience
    ]
    if work_entries:
        sections.append({"title": "Work Experience", "entries": work_entries})

    project_entries = [
        _entry(
            heading=project.title,
            subheading=project.technologies,
            date_range=format_date_range(project.start_date, project.end_date, project.current),
            body=project.description,
            link=project.link,
        )
        for project in document.projects
    ]
    if project_entries:
        sections.append({"title": "Projects", "entries": project_entries})

    education_entries = [
        _entry(
            heading=_join(
                edu.degree, f"in {edu.field_of_study}" if edu.field_of_study else "", sep=" "
            ),
            subheading=_join(edu.institution, edu.location),
            date_range=format_date_range(edu.start_date, edu.end_date, edu.current),
            body=edu.description,
        )
        for edu in document.education
    ]
    if education_entries:
        sections.append({"title": "Education", "entries": education_entries})

    certificate_entries = [
        _entry(
            heading=cert.name,
            subheading=cert.issuer,
            date_range=format_month(cert.date) if cert.date else "",
            body=cert.description,
            link=cert.link,
        )
        for cert in document.certificates
    ]
    if certificate_entries:
        sections.append({"title": "Certificates", "entries": certificate_entries})

    if document.skills:
        preview["skills"] = list(document.skills)

    return preview


class PreviewRenderer:
    """Keeps the preview of the builder's latest snapshot.

    While attached, every published snapshot is re-rendered; the exporter
    reads :attr:`preview` rather than the document itself.
    """

    def __init__(self, builder: ResumeBuilder) -> None:
        self.builder = builder
        self.preview: ResumePreview | None = render_preview(builder.document)
        self._unsubscribe = builder.subscribe(self._on_snapshot)

    @property
    def attached(self) -> bool:
        return self._unsubscribe is not None

    def _on_snapshot(self, document: Document) -> None:
        self.preview = render_preview(document)

    def detach(self) -> None:
        """Stop following the builder and drop the rendered preview."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self.preview = None
