"""Editors for the personal-info record and the four entity list slices.

Every editor is bound to a :class:`ResumeBuilder`.  Operations compute a new
tuple for the editor's slice and hand it to the builder; entities are frozen,
so a reference taken before an edit never sees the change.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, ClassVar, Generic, Literal, TypeVar

from pydantic import ValidationError

from resume_builder.errors import (
    ActionInProgressError,
    EntityNotFoundError,
    MissingFieldError,
    UnknownFieldError,
    ValidationNotice,
)
from resume_builder.models import (
    Certificate,
    Document,
    Education,
    Entity,
    Project,
    WorkExperience,
    new_entity_id,
    replace_fields,
)

if TYPE_CHECKING:
    from resume_builder.services.ai_assist import AIAssistant
    from resume_builder.services.builder import ResumeBuilder

logger = logging.getLogger(__name__)

__all__ = [
    "BusyFlag",
    "CertificatesEditor",
    "EducationEditor",
    "EntityListEditor",
    "PersonalInfoEditor",
    "ProjectsEditor",
    "WorkExperienceEditor",
]

EntityT = TypeVar("EntityT", bound=Entity)
Direction = Literal["up", "down"]


class BusyFlag:
    """Per-editor flag marking an asynchronous-looking action as pending.

    A second invocation while the first is still running raises
    :class:`ActionInProgressError`; front ends disable the control instead of
    queueing clicks.
    """

    def __init__(self, action: str) -> None:
        self.action = action
        self._busy = False
        self._lock = threading.Lock()

    @property
    def busy(self) -> bool:
        return self._busy

    @contextmanager
    def hold(self) -> Iterator[None]:
        with self._lock:
            if self._busy:
                raise ActionInProgressError(f"{self.action} is already in progress.")
            self._busy = True
        try:
            yield
        finally:
            self._busy = False


def _default_assistant() -> AIAssistant:
    from resume_builder.services.ai_assist import AIAssistant

    return AIAssistant()


class EntityListEditor(Generic[EntityT]):
    """Add/remove/update/move operations shared by every list slice.

    Subclasses set :attr:`entity_type` and :attr:`slice_name`; the builder
    must expose ``replace_<slice_name>``.
    """

    entity_type: ClassVar[type[Entity]]
    slice_name: ClassVar[str]

    def __init__(
        self,
        builder: ResumeBuilder,
        *,
        id_factory: Callable[[], str] = new_entity_id,
    ) -> None:
        self.builder = builder
        self._id_factory = id_factory
        self._issued_ids: set[str] = {item.id for item in self.items}
        self.active_id: str | None = self.items[0].id if self.items else None
        self._unsubscribe = builder.subscribe(self._on_snapshot)

    @property
    def items(self) -> tuple[EntityT, ...]:
        return getattr(self.builder.document, self.slice_name)

    def close(self) -> None:
        """Stop following builder snapshots."""
        self._unsubscribe()

    def _on_snapshot(self, document: Document) -> None:
        items = getattr(document, self.slice_name)
        ids = [item.id for item in items]
        self._issued_ids.update(ids)
        if self.active_id is not None and self.active_id not in ids:
            self.active_id = ids[0] if ids else None

    def _commit(self, items: tuple[EntityT, ...]) -> tuple[EntityT, ...]:
        replace = getattr(self.builder, f"replace_{self.slice_name}")
        replace(items)
        return self.items

    def _index_of(self, entity_id: str) -> int:
        for index, item in enumerate(self.items):
            if item.id == entity_id:
                return index
        raise EntityNotFoundError(entity_id)

    def _fresh_id(self) -> str:
        entity_id = self._id_factory()
        while entity_id in self._issued_ids:
            entity_id = self._id_factory()
        self._issued_ids.add(entity_id)
        return entity_id

    def get(self, entity_id: str) -> EntityT:
        return self.items[self._index_of(entity_id)]

    def add(self) -> EntityT:
        """Append an empty entity with a fresh id and make it the active one."""
        entity = self.entity_type(id=self._fresh_id())
        self._commit((*self.items, entity))
        self.active_id = entity.id
        return entity

    def remove(self, entity_id: str) -> tuple[EntityT, ...]:
        self._index_of(entity_id)
        remaining = tuple(item for item in self.items if item.id != entity_id)
        if self.active_id == entity_id:
            self.active_id = remaining[0].id if remaining else None
        return self._commit(remaining)

    def update(self, entity_id: str, field: str, value: str | bool) -> EntityT:
        """Replace one field on the entity with id *entity_id*.

        Switching ``current`` on clears ``end_date`` for entities that have one.
        """
        fields = self.entity_type.model_fields
        if field == "id" or field not in fields:
            raise UnknownFieldError(field)

        index = self._index_of(entity_id)
        try:
            updated = replace_fields(self.items[index], **{field: value})
        except ValidationError as e:
            raise ValidationNotice(f"Invalid value for {field!r}") from e
        # test the validated value so "true" or 1 also clear end_date
        if field == "current" and getattr(updated, "current", False) and "end_date" in fields:
            updated = replace_fields(updated, end_date="")

        items = list(self.items)
        items[index] = updated
        self._commit(tuple(items))
        return updated

    def move(self, index: int, direction: Direction) -> tuple[EntityT, ...]:
        """Swap the entity at *index* with its neighbour; no-op at the ends."""
        if direction not in ("up", "down"):
            raise ValueError(f"direction must be 'up' or 'down', not {direction!r}")

        items = self.items
        target = index - 1 if direction == "up" else index + 1
        if not (0 <= index < len(items)) or not (0 <= target < len(items)):
            return items

        reordered = list(items)
        reordered[index], reordered[target] = reordered[target], reordered[index]
        return self._commit(tuple(reordered))

    def select(self, entity_id: str) -> None:
        self._index_of(entity_id)
        self.active_id = entity_id


class WorkExperienceEditor(EntityListEditor[WorkExperience]):
    """Work history editor with AI-assisted description rewriting."""

    entity_type = WorkExperience
    slice_name = "work_experience"

    def __init__(
        self,
        builder: ResumeBuilder,
        assistant: AIAssistant | None = None,
        *,
        id_factory: Callable[[], str] = new_entity_id,
    ) -> None:
        super().__init__(builder, id_factory=id_factory)
        self.assistant = assistant or _default_assistant()
        self.suggestions: dict[str, str] = {}
        self.busy = BusyFlag("Improving a description")

    def remove(self, entity_id: str) -> tuple[WorkExperience, ...]:
        items = super().remove(entity_id)
        self.suggestions.pop(entity_id, None)
        return items

    def improve_description(self, entity_id: str) -> str | None:
        """Ask the assistant for a better description and keep it as pending."""
        experience = self.get(entity_id)
        if not experience.description.strip():
            raise MissingFieldError("Please write a description first so it can be improved.")

        with self.busy.hold():
            results = self.assistant.improve_text(
                experience.description,
                f"Job title: {experience.title}, Company: {experience.company}",
                "improve",
            )

        if not results:
            return None
        self.suggestions[entity_id] = results[0]["suggestion"]
        return self.suggestions[entity_id]

    def apply_suggestion(self, entity_id: str) -> WorkExperience | None:
        suggestion = self.suggestions.pop(entity_id, None)
        if suggestion is None:
            return None
        return self.update(entity_id, "description", suggestion)

    def dismiss_suggestion(self, entity_id: str) -> None:
        self.suggestions.pop(entity_id, None)


class EducationEditor(EntityListEditor[Education]):
    entity_type = Education
    slice_name = "education"


class ProjectsEditor(EntityListEditor[Project]):
    entity_type = Project
    slice_name = "projects"


class CertificatesEditor(EntityListEditor[Certificate]):
    entity_type = Certificate
    slice_name = "certificates"


class PersonalInfoEditor:
    """Editor for the singleton personal-info record."""

    def __init__(self, builder: ResumeBuilder, assistant: AIAssistant | None = None) -> None:
        self.builder = builder
        self.assistant = assistant or _default_assistant()
        self.suggested_summary = ""
        self.busy = BusyFlag("Improving the summary")

    def update(self, field: str, value: str) -> Document:
        return self.builder.update_personal_info_field(field, value)

    def improve_summary(self) -> str:
        summary = self.builder.document.personal_info.summary
        if not summary.strip():
            raise MissingFieldError("Please write a summary first so it can be improved.")

        with self.busy.hold():
            results = self.assistant.improve_text(summary, None, "improve")

        if results:
            self.suggested_summary = results[0]["suggestion"]
        return self.suggested_summary

    def apply_suggestion(self) -> Document | None:
        if not self.suggested_summary:
            return None
        document = self.builder.update_summary(self.suggested_summary)
        self.suggested_summary = ""
        return document
