"""
Note routes.
Owns: Note CRUD for the authenticated user.
"""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from app.api.auth import AuthenticatedUser, get_current_user
from app.api.db import (
    Note,
    NoteChanges,
    NoteStore,
    ProjectStore,
    get_note_store,
    get_project_store,
)
from app.api.errors import InvalidInputException, NotFoundException
from .models import (
    AcknowledgedResponse,
    CreateNoteRequest,
    CreateNoteResponse,
    UpdateNoteRequest,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/notes", tags=["notes"])


def _require_linked_project(projects: ProjectStore, project_id: UUID, user_id: UUID) -> None:
    try:
        projects.get_by_id(project_id, user_id)
    except NotFoundException:
        raise InvalidInputException("project does not exist to link note to")


@router.post(
    "/create-new-note",
    response_model=CreateNoteResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_note(
    request: Request,
    body: CreateNoteRequest,
    user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    notes: Annotated[NoteStore, Depends(get_note_store)],
    projects: Annotated[ProjectStore, Depends(get_project_store)],
) -> CreateNoteResponse:
    _require_linked_project(projects, body.linked_project_id, user.id)

    note_id = notes.create(
        Note(
            user_id=user.id,
            linked_project_id=body.linked_project_id,
            title=body.title,
            content=body.content,
            favorited=body.favorited,
            tags=body.tags,
        )
    )

    logger.info(
        "Note created",
        extra={
            "note_id": str(note_id),
            "project_id": str(body.linked_project_id),
            "correlation_id": getattr(request.state, "correlation_id", None),
        },
    )

    return CreateNoteResponse(note_id=note_id)


@router.get("/get-notes-by-linked-project-ID/{project_id}", response_model=list[Note])
async def get_notes_by_linked_project_id(
    project_id: UUID,
    user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    notes: Annotated[NoteStore, Depends(get_note_store)],
    projects: Annotated[ProjectStore, Depends(get_project_store)],
) -> list[Note]:
    projects.get_by_id(project_id, user.id)
    return notes.get_all_by_project(project_id, user.id)


@router.get("/get-notes-by-ID/{note_id}", response_model=Note)
async def get_note_by_id(
    note_id: UUID,
    user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    notes: Annotated[NoteStore, Depends(get_note_store)],
) -> Note:
    return notes.get_by_id(note_id, user.id)


@router.put("/update-note-by-ID/{note_id}", response_model=AcknowledgedResponse)
async def update_note_by_id(
    note_id: UUID,
    body: UpdateNoteRequest,
    user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    notes: Annotated[NoteStore, Depends(get_note_store)],
    projects: Annotated[ProjectStore, Depends(get_project_store)],
) -> AcknowledgedResponse:
    notes.get_by_id(note_id, user.id)

    if body.linked_project_id is not None and body.linked_project_id.int != 0:
        _require_linked_project(projects, body.linked_project_id, user.id)

    notes.update_by_id(NoteChanges.model_validate(body.model_dump()), note_id, user.id)
    return AcknowledgedResponse()


@router.delete("/delete-note-by-ID/{note_id}", response_model=AcknowledgedResponse)
async def delete_note_by_id(
    request: Request,
    note_id: UUID,
    user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    notes: Annotated[NoteStore, Depends(get_note_store)],
) -> AcknowledgedResponse:
    try:
        notes.get_by_id(note_id, user.id)
    except NotFoundException:
        raise InvalidInputException("note does not exist")

    notes.delete_by_id(note_id, user.id)

    logger.info(
        "Note deleted",
        extra={
            "note_id": str(note_id),
            "correlation_id": getattr(request.state, "correlation_id", None),
        },
    )

    return AcknowledgedResponse()
