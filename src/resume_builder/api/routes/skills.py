"""Skill list routes for the API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Path

from resume_builder.api.dependencies import SessionDep
from resume_builder.api.schemas.resume import SkillCreateRequest, SkillsResponse

router = APIRouter(prefix="/resume/skills", tags=["skills"])


def _skills_response(session: SessionDep) -> SkillsResponse:
    return SkillsResponse(
        skills=list(session.skills.skills),
        suggested=list(session.skills.suggested),
    )


@router.get("", response_model=SkillsResponse)
def list_skills(session: SessionDep) -> SkillsResponse:
    return _skills_response(session)


@router.post("", response_model=SkillsResponse)
def add_skill(data: SkillCreateRequest, session: SessionDep) -> SkillsResponse:
    """Add a skill. Duplicates are rejected with 400."""
    with session.lock:
        session.skills.add(data.skill)
        return _skills_response(session)


@router.delete("/{skill:path}", response_model=SkillsResponse)
def remove_skill(
    skill: Annotated[str, Path(description="Exact skill to remove")],
    session: SessionDep,
) -> SkillsResponse:
    with session.lock:
        session.skills.remove(skill)
        return _skills_response(session)


@router.get("/suggestions", response_model=SkillsResponse)
def suggest_skills(session: SessionDep) -> SkillsResponse:
    """Draw up to five reference skills not yet on the resume."""
    session.skills.suggest()
    return _skills_response(session)


@router.post("/suggestions/{skill:path}", response_model=SkillsResponse)
def add_suggested_skill(
    skill: Annotated[str, Path(description="Suggested skill to accept")],
    session: SessionDep,
) -> SkillsResponse:
    with session.lock:
        session.skills.add_suggested(skill)
        return _skills_response(session)
