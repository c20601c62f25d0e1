"""Exceptions raised by the resume builder.

None of these are fatal: each one is scoped to the single action that raised
it and leaves the document unmodified.
"""

from __future__ import annotations

__all__ = [
    "ActionInProgressError",
    "DuplicateSkillError",
    "EntityNotFoundError",
    "ExportError",
    "MissingFieldError",
    "ResumeBuilderError",
    "UnknownFieldError",
    "ValidationNotice",
]


class ResumeBuilderError(Exception):
    """Base class for all resume builder errors."""

    title = "Error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationNotice(ResumeBuilderError):
    """User input must be corrected before the action can proceed."""


class DuplicateSkillError(ValidationNotice):
    """Raised when a skill already present in the skill list is added again."""

    title = "Skill already exists"

    def __init__(self, skill: str) -> None:
        super().__init__(f"'{skill}' is already in your list.")
        self.skill = skill


class MissingFieldError(ValidationNotice):
    """Raised when an action needs a field the user has not filled in yet."""

    title = "More information needed"


class EntityNotFoundError(ResumeBuilderError):
    """Raised when no entity in a list slice carries the requested id."""

    title = "Not found"

    def __init__(self, entity_id: str) -> None:
        super().__init__(f"No entry with id {entity_id!r}")
        self.entity_id = entity_id


class UnknownFieldError(ResumeBuilderError):
    """Raised when an update names a field the entity does not have."""

    title = "Unknown field"

    def __init__(self, field_name: str) -> None:
        super().__init__(f"Unknown or read-only field {field_name!r}")
        self.field_name = field_name


class ActionInProgressError(ResumeBuilderError):
    """Raised when an editor action is invoked while the previous one is pending."""

    title = "Please wait"


class ExportError(ResumeBuilderError):
    """Raised when the resume could not be exported."""

    title = "Export failed"
