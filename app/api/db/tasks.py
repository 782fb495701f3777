"""
Task store.
Owns: Tasks table. Tasks are owned through their linked project; callers
check project ownership before reaching this store.
"""

from typing import Protocol
from uuid import UUID

from fastapi import Request
from supabase import Client

from app.api.errors import NotFoundException
from .client import build_update, execute
from .models import Task, TaskChanges

TASK_COLUMNS = "id, linked_project_id, description, completed"


class TaskStore(Protocol):
    def create(self, task: Task) -> UUID: ...

    def get_all_by_project(self, project_id: UUID) -> list[Task]: ...

    def get_by_id(self, task_id: UUID) -> Task: ...

    def update_by_id(self, changes: TaskChanges, task_id: UUID) -> None: ...

    def delete_by_id(self, task_id: UUID) -> None: ...

    def delete_all_by_project(self, project_id: UUID) -> None: ...


class SupabaseTaskStore:
    table = "tasks"

    def __init__(self, client: Client):
        self._db = client

    def create(self, task: Task) -> UUID:
        row = {
            "id": str(task.id),
            "linked_project_id": str(task.linked_project_id),
            "description": task.description,
            "completed": task.completed,
        }
        execute(self._db.table(self.table).insert(row), "create task")
        return task.id

    def get_all_by_project(self, project_id: UUID) -> list[Task]:
        rows = execute(
            self._db.table(self.table)
            .select(TASK_COLUMNS)
            .eq("linked_project_id", str(project_id)),
            "get tasks by linked project ID",
        )
        return [Task.model_validate(row) for row in rows]

    def get_by_id(self, task_id: UUID) -> Task:
        rows = execute(
            self._db.table(self.table).select(TASK_COLUMNS).eq("id", str(task_id)).limit(1),
            "get task by ID",
        )
        if not rows:
            raise NotFoundException("task not found")
        return Task.model_validate(rows[0])

    def update_by_id(self, changes: TaskChanges, task_id: UUID) -> None:
        data = build_update(changes.model_dump())
        execute(
            self._db.table(self.table).update(data).eq("id", str(task_id)),
            "update task",
        )

    def delete_by_id(self, task_id: UUID) -> None:
        execute(
            self._db.table(self.table).delete().eq("id", str(task_id)),
            "delete task",
        )

    def delete_all_by_project(self, project_id: UUID) -> None:
        execute(
            self._db.table(self.table).delete().eq("linked_project_id", str(project_id)),
            "delete tasks by linked project ID",
        )


def get_task_store(request: Request) -> TaskStore:
    return request.app.state.task_store
