"""
Task routes.
Owns: Task CRUD.

Tasks have no owner column; a task belongs to the caller when its linked
project does. A task whose project is not the caller's reads as missing.
"""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from app.api.auth import AuthenticatedUser, get_current_user
from app.api.db import (
    Project,
    ProjectStore,
    Task,
    TaskChanges,
    TaskStore,
    get_project_store,
    get_task_store,
)
from app.api.errors import InvalidInputException, NotFoundException
from .models import (
    AcknowledgedResponse,
    CreateTaskRequest,
    CreateTaskResponse,
    UpdateTaskRequest,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/tasks", tags=["tasks"])


def _linkable_project(projects: ProjectStore, project_id: UUID, user_id: UUID) -> Project:
    try:
        return projects.get_by_id(project_id, user_id)
    except NotFoundException:
        raise InvalidInputException("project does not exist to link task to")


def _owned_task(
    tasks: TaskStore, projects: ProjectStore, task_id: UUID, user_id: UUID
) -> Task:
    task = tasks.get_by_id(task_id)
    try:
        projects.get_by_id(task.linked_project_id, user_id)
    except NotFoundException:
        raise NotFoundException("task not found")
    return task


@router.post(
    "/create-new-task",
    response_model=CreateTaskResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_task(
    request: Request,
    body: CreateTaskRequest,
    user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    tasks: Annotated[TaskStore, Depends(get_task_store)],
    projects: Annotated[ProjectStore, Depends(get_project_store)],
) -> CreateTaskResponse:
    _linkable_project(projects, body.linked_project_id, user.id)

    task_id = tasks.create(
        Task(
            linked_project_id=body.linked_project_id,
            description=body.description,
            completed=body.completed,
        )
    )

    logger.info(
        "Task created",
        extra={
            "task_id": str(task_id),
            "project_id": str(body.linked_project_id),
            "correlation_id": getattr(request.state, "correlation_id", None),
        },
    )

    return CreateTaskResponse(task_id=task_id)


@router.get("/get-tasks-by-linked-project-ID/{project_id}", response_model=list[Task])
async def get_tasks_by_linked_project_id(
    project_id: UUID,
    user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    tasks: Annotated[TaskStore, Depends(get_task_store)],
    projects: Annotated[ProjectStore, Depends(get_project_store)],
) -> list[Task]:
    projects.get_by_id(project_id, user.id)
    return tasks.get_all_by_project(project_id)


@router.get("/get-task-by-ID/{task_id}", response_model=Task)
async def get_task_by_id(
    task_id: UUID,
    user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    tasks: Annotated[TaskStore, Depends(get_task_store)],
    projects: Annotated[ProjectStore, Depends(get_project_store)],
) -> Task:
    return _owned_task(tasks, projects, task_id, user.id)


@router.put("/update-task-by-ID/{task_id}", response_model=AcknowledgedResponse)
async def update_task_by_id(
    task_id: UUID,
    body: UpdateTaskRequest,
    user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    tasks: Annotated[TaskStore, Depends(get_task_store)],
    projects: Annotated[ProjectStore, Depends(get_project_store)],
) -> AcknowledgedResponse:
    _owned_task(tasks, projects, task_id, user.id)

    if body.linked_project_id is not None and body.linked_project_id.int != 0:
        _linkable_project(projects, body.linked_project_id, user.id)

    tasks.update_by_id(TaskChanges.model_validate(body.model_dump()), task_id)
    return AcknowledgedResponse()


@router.delete("/delete-task-by-ID/{task_id}", response_model=AcknowledgedResponse)
async def delete_task_by_id(
    request: Request,
    task_id: UUID,
    user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    tasks: Annotated[TaskStore, Depends(get_task_store)],
    projects: Annotated[ProjectStore, Depends(get_project_store)],
) -> AcknowledgedResponse:
    try:
        _owned_task(tasks, projects, task_id, user.id)
    except NotFoundException:
        raise InvalidInputException("task does not exist")

    tasks.delete_by_id(task_id)

    logger.info(
        "Task deleted",
        extra={
            "task_id": str(task_id),
            "correlation_id": getattr(request.state, "correlation_id", None),
        },
    )

    return AcknowledgedResponse()
