"""Document aggregator owning the single writable resume document.

Editors never hold a writable copy of the document.  They read the current
snapshot from the builder and hand back a full replacement of their slice;
the builder swaps that slice into a new :class:`Document` and publishes the
snapshot to every subscriber.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from pydantic import TypeAdapter, ValidationError

from resume_builder.errors import UnknownFieldError, ValidationNotice
from resume_builder.models import (
    Certificate,
    Document,
    Education,
    PersonalInfo,
    Project,
    WorkExperience,
)

logger = logging.getLogger(__name__)

__all__ = ["ResumeBuilder", "Subscriber"]

Subscriber = Callable[[Document], None]

_PERSONAL_INFO_FIELDS = frozenset(PersonalInfo.model_fields)

_WORK_ADAPTER = TypeAdapter(tuple[WorkExperience, ...])
_EDUCATION_ADAPTER = TypeAdapter(tuple[Education, ...])
_PROJECTS_ADAPTER = TypeAdapter(tuple[Project, ...])
_CERTIFICATES_ADAPTER = TypeAdapter(tuple[Certificate, ...])
_SKILLS_ADAPTER = TypeAdapter(tuple[str, ...])


class ResumeBuilder:
    """Owner of the resume document and publisher of its snapshots."""

    def __init__(self, document: Document | None = None) -> None:
        self._document = document or Document()
        self._subscribers: list[Subscriber] = []

    @property
    def document(self) -> Document:
        """The current immutable snapshot."""
        return self._document

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register *callback* for every new snapshot.

        Returns:
            A function that removes the subscription again.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _publish(self, document: Document) -> None:
        self._document = document
        for callback in list(self._subscribers):
            try:
                callback(document)
            except Exception:
                logger.exception("Resume subscriber %r failed", callback)

    def _replace(self, **slices: Any) -> Document:
        self._publish(self._document.model_copy(update=slices))
        return self._document

    # ------------------------------------------------------------------
    # Slice updates
    # ------------------------------------------------------------------

    def update_personal_info_field(self, field: str, value: str) -> Document:
        """Set one personal-info field, keeping every other slice as is."""
        if field not in _PERSONAL_INFO_FIELDS:
            raise UnknownFieldError(field)
        info = self._document.personal_info
        data = info.model_dump()
        data[field] = value
        try:
            updated = PersonalInfo.model_validate(data)
        except ValidationError as e:
            raise ValidationNotice(f"Invalid value for {field!r}") from e
        return self._replace(personal_info=updated)

    def update_summary(self, summary: str) -> Document:
        return self.update_personal_info_field("summary", summary)

    def replace_work_experience(self, items: Iterable[WorkExperience]) -> Document:
        return self._replace(work_experience=_WORK_ADAPTER.validate_python(tuple(items)))

    def replace_education(self, items: Iterable[Education]) -> Document:
        return self._replace(education=_EDUCATION_ADAPTER.validate_python(tuple(items)))

    def replace_projects(self, items: Iterable[Project]) -> Document:
        return self._replace(projects=_PROJECTS_ADAPTER.validate_python(tuple(items)))

    def replace_certificates(self, items: Iterable[Certificate]) -> Document:
        return self._replace(certificates=_CERTIFICATES_ADAPTER.validate_python(tuple(items)))

    def replace_skills(self, items: Iterable[str]) -> Document:
        return self._replace(skills=_SKILLS_ADAPTER.validate_python(tuple(items)))
