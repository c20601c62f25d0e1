"""Typed schema for the resume document.

Every model is frozen: a snapshot handed out by the builder can be kept
around and will never observe later edits.  Changes always produce new
instances (see :func:`replace_fields`).
"""

from __future__ import annotations

import uuid
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "Certificate",
    "Document",
    "Education",
    "Entity",
    "PersonalInfo",
    "Project",
    "WorkExperience",
    "new_entity_id",
    "replace_fields",
]

_ModelT = TypeVar("_ModelT", bound=BaseModel)


def new_entity_id() -> str:
    """Return a fresh random identifier for a list entity."""
    return str(uuid.uuid4())


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class PersonalInfo(_FrozenModel):
    """Contact details and professional summary shown in the resume header."""

    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    summary: str = ""
    linkedin: str = ""
    website: str = ""


class Entity(_FrozenModel):
    """Base for items of an ordered list slice."""

    id: str = Field(default_factory=new_entity_id)


class WorkExperience(Entity):
    company: str = ""
    title: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: str = ""


class Education(Entity):
    institution: str = ""
    degree: str = ""
    field_of_study: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: str = ""


class Project(Entity):
    title: str = ""
    description: str = ""
    technologies: str = ""
    link: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False


class Certificate(Entity):
    name: str = ""
    issuer: str = ""
    date: str = ""
    description: str = ""
    link: str = ""


class Document(_FrozenModel):
    """The complete resume: one personal-info record plus five ordered slices."""

    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    work_experience: tuple[WorkExperience, ...] = ()
    education: tuple[Education, ...] = ()
    projects: tuple[Project, ...] = ()
    certificates: tuple[Certificate, ...] = ()
    skills: tuple[str, ...] = ()


def replace_fields(model: _ModelT, **changes: Any) -> _ModelT:
    """Return a validated copy of *model* with *changes* applied.

    Unlike ``model_copy(update=...)`` the new values are validated, so a
    wrong type or an unknown field raises ``pydantic.ValidationError``.
    """
    data = model.model_dump()
    data.update(changes)
    return type(model).model_validate(data)
