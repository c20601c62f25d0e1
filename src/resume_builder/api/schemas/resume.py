"""Pydantic schemas for resume editing endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class PersonalInfoUpdateRequest(BaseModel):
    """Request schema for updating personal info.

    All fields are optional; only provided fields are updated.
    """

    name: str | None = Field(None, description="Full name")
    email: str | None = Field(None, description="Email address")
    phone: str | None = Field(None, description="Phone number")
    location: str | None = Field(None, description="City, region or country")
    summary: str | None = Field(None, description="Professional summary paragraph")
    linkedin: str | None = Field(None, description="LinkedIn profile URL")
    website: str | None = Field(None, description="Personal website URL")


class EntityUpdateRequest(BaseModel):
    """Field/value pairs to set on one list entry, applied in order."""

    changes: dict[str, str | bool] = Field(
        ..., description="Mapping of field name to new value, e.g. {'current': true}"
    )


class MoveRequest(BaseModel):
    index: int = Field(..., description="Position of the entry to move")
    direction: Literal["up", "down"] = Field(
        ..., description="Swap with the previous or next entry"
    )


class EntityListResponse(BaseModel):
    """A list slice together with the editor's active entry."""

    items: list[dict]
    active_id: str | None = None


class SkillCreateRequest(BaseModel):
    skill: str = Field(..., description="Skill to add; surrounding whitespace is trimmed")


class SkillsResponse(BaseModel):
    skills: list[str]
    suggested: list[str] = Field(default_factory=list)


class PendingSuggestionResponse(BaseModel):
    """An AI suggestion waiting to be applied (None when the model had nothing)."""

    suggestion: str | None = None
