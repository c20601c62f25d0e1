"""List-section routes (work experience, education, projects, certificates)."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from resume_builder.api.dependencies import SessionDep, get_list_editor
from resume_builder.api.schemas.resume import (
    EntityListResponse,
    EntityUpdateRequest,
    MoveRequest,
    PendingSuggestionResponse,
)
from resume_builder.services.editors import EntityListEditor

router = APIRouter(prefix="/resume", tags=["sections"])

EditorDep = Annotated[EntityListEditor, Depends(get_list_editor)]
EntityIdPath = Annotated[str, Path(description="Entry ID")]


def _list_response(editor: EntityListEditor) -> EntityListResponse:
    return EntityListResponse(
        items=[item.model_dump() for item in editor.items],
        active_id=editor.active_id,
    )


@router.post(
    "/work-experience/{entity_id}/improve",
    response_model=PendingSuggestionResponse,
)
def improve_work_description(
    entity_id: EntityIdPath, session: SessionDep
) -> PendingSuggestionResponse:
    """Ask AI assist for a better description of one work-experience entry."""
    suggestion = session.work_experience.improve_description(entity_id)
    return PendingSuggestionResponse(suggestion=suggestion)


@router.post("/work-experience/{entity_id}/apply-suggestion", response_model=dict)
def apply_work_suggestion(entity_id: EntityIdPath, session: SessionDep) -> dict:
    """Write the pending description suggestion into the entry."""
    with session.lock:
        session.work_experience.apply_suggestion(entity_id)
        return session.work_experience.get(entity_id).model_dump()


@router.get("/{section}", response_model=EntityListResponse)
def list_entries(editor: EditorDep) -> EntityListResponse:
    return _list_response(editor)


@router.post("/{section}", response_model=dict, status_code=status.HTTP_201_CREATED)
def add_entry(editor: EditorDep, session: SessionDep) -> dict:
    """Append an empty entry and make it the active one."""
    with session.lock:
        return editor.add().model_dump()


@router.patch("/{section}/{entity_id}", response_model=dict)
def update_entry(
    entity_id: EntityIdPath,
    data: EntityUpdateRequest,
    editor: EditorDep,
    session: SessionDep,
) -> dict:
    """Update fields of one entry. Only provided fields are updated."""
    with session.lock:
        editor.get(entity_id)
        for field, value in data.changes.items():
            editor.update(entity_id, field, value)
        return editor.get(entity_id).model_dump()


@router.delete("/{section}/{entity_id}", response_model=EntityListResponse)
def remove_entry(
    entity_id: EntityIdPath, editor: EditorDep, session: SessionDep
) -> EntityListResponse:
    with session.lock:
        editor.remove(entity_id)
        return _list_response(editor)


@router.post("/{section}/{entity_id}/select", response_model=EntityListResponse)
def select_entry(
    entity_id: EntityIdPath, editor: EditorDep, session: SessionDep
) -> EntityListResponse:
    with session.lock:
        editor.select(entity_id)
        return _list_response(editor)


@router.post("/{section}/move", response_model=EntityListResponse)
def move_entry(data: MoveRequest, editor: EditorDep, session: SessionDep) -> EntityListResponse:
    """Swap an entry with its neighbour; moving past either end does nothing."""
    with session.lock:
        editor.move(data.index, data.direction)
        return _list_response(editor)
