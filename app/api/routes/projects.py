"""
Project routes.
Owns: Project CRUD for the authenticated user.

Deleting a project removes its tasks first, then the project, as two
separate store calls. Notes follow only when the
CASCADE_NOTES_ON_PROJECT_DELETE setting is on.
"""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from app.api.auth import AuthenticatedUser, get_current_user
from app.api.config import Settings, get_settings
from app.api.db import (
    NoteStore,
    Project,
    ProjectChanges,
    ProjectStore,
    TaskStore,
    get_note_store,
    get_project_store,
    get_task_store,
)
from shared.logging import hash_user_id
from .models import (
    AcknowledgedResponse,
    CreateProjectRequest,
    CreateProjectResponse,
    UpdateProjectRequest,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/projects", tags=["projects"])


@router.post(
    "/create-new-project",
    response_model=CreateProjectResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_project(
    request: Request,
    body: CreateProjectRequest,
    user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    projects: Annotated[ProjectStore, Depends(get_project_store)],
) -> CreateProjectResponse:
    project_id = projects.create(
        Project(
            user_id=user.id,
            title=body.title,
            description=body.description,
            priority=body.priority,
            deadline=body.deadline,
        )
    )

    logger.info(
        "Project created",
        extra={
            "project_id": str(project_id),
            "user_id_hash": hash_user_id(str(user.id)),
            "correlation_id": getattr(request.state, "correlation_id", None),
        },
    )

    return CreateProjectResponse(project_id=project_id)


@router.get("/get-projects-by-user-ID", response_model=list[Project])
async def get_projects_by_user_id(
    user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    projects: Annotated[ProjectStore, Depends(get_project_store)],
) -> list[Project]:
    return projects.get_all_by_owner(user.id)


@router.get("/get-project-by-ID/{project_id}", response_model=Project)
async def get_project_by_id(
    project_id: UUID,
    user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    projects: Annotated[ProjectStore, Depends(get_project_store)],
) -> Project:
    return projects.get_by_id(project_id, user.id)


@router.put("/update-project-by-ID/{project_id}", response_model=AcknowledgedResponse)
async def update_project_by_id(
    project_id: UUID,
    body: UpdateProjectRequest,
    user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    projects: Annotated[ProjectStore, Depends(get_project_store)],
) -> AcknowledgedResponse:
    projects.get_by_id(project_id, user.id)
    projects.update_by_id(
        ProjectChanges.model_validate(body.model_dump()),
        project_id,
        user.id,
    )
    return AcknowledgedResponse()


@router.delete("/delete-project-by-ID/{project_id}", response_model=AcknowledgedResponse)
async def delete_project_by_id(
    request: Request,
    project_id: UUID,
    user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    settings: Annotated[Settings, Depends(get_settings)],
    projects: Annotated[ProjectStore, Depends(get_project_store)],
    tasks: Annotated[TaskStore, Depends(get_task_store)],
    notes: Annotated[NoteStore, Depends(get_note_store)],
) -> AcknowledgedResponse:
    # Ownership check before touching dependents
    projects.get_by_id(project_id, user.id)

    tasks.delete_all_by_project(project_id)
    if settings.cascade_notes_on_project_delete:
        notes.delete_all_by_project(project_id)
    projects.delete_by_id(project_id, user.id)

    logger.info(
        "Project deleted",
        extra={
            "project_id": str(project_id),
            "user_id_hash": hash_user_id(str(user.id)),
            "correlation_id": getattr(request.state, "correlation_id", None),
            "extra": {"notes_cascaded": settings.cascade_notes_on_project_delete},
        },
    )

    return AcknowledgedResponse()
