"""
Project store.
Owns: Projects table. Every query is scoped to the owning user.
"""

from typing import Protocol
from uuid import UUID

from fastapi import Request
from supabase import Client

from app.api.errors import NotFoundException
from .client import build_update, execute
from .models import Project, ProjectChanges

PROJECT_COLUMNS = "id, user_id, title, description, priority, deadline, date_created, last_edited"


class ProjectStore(Protocol):
    def create(self, project: Project) -> UUID: ...

    def get_all_by_owner(self, user_id: UUID) -> list[Project]: ...

    def get_by_id(self, project_id: UUID, user_id: UUID) -> Project: ...

    def update_by_id(self, changes: ProjectChanges, project_id: UUID, user_id: UUID) -> None: ...

    def delete_by_id(self, project_id: UUID, user_id: UUID) -> None: ...


class SupabaseProjectStore:
    table = "projects"

    def __init__(self, client: Client):
        self._db = client

    def create(self, project: Project) -> UUID:
        row = {
            "id": str(project.id),
            "user_id": str(project.user_id),
            "title": project.title,
            "description": project.description,
            "priority": project.priority,
            "deadline": project.deadline,
        }
        execute(self._db.table(self.table).insert(row), "create project")
        return project.id

    def get_all_by_owner(self, user_id: UUID) -> list[Project]:
        rows = execute(
            self._db.table(self.table).select(PROJECT_COLUMNS).eq("user_id", str(user_id)),
            "get projects by user ID",
        )
        return [Project.model_validate(row) for row in rows]

    def get_by_id(self, project_id: UUID, user_id: UUID) -> Project:
        rows = execute(
            self._db.table(self.table)
            .select(PROJECT_COLUMNS)
            .eq("id", str(project_id))
            .eq("user_id", str(user_id))
            .limit(1),
            "get project by ID",
        )
        if not rows:
            raise NotFoundException("project not found")
        return Project.model_validate(rows[0])

    def update_by_id(self, changes: ProjectChanges, project_id: UUID, user_id: UUID) -> None:
        data = build_update(changes.model_dump())
        execute(
            self._db.table(self.table)
            .update(data)
            .eq("id", str(project_id))
            .eq("user_id", str(user_id)),
            "update project",
        )

    def delete_by_id(self, project_id: UUID, user_id: UUID) -> None:
        execute(
            self._db.table(self.table)
            .delete()
            .eq("id", str(project_id))
            .eq("user_id", str(user_id)),
            "delete project",
        )


def get_project_store(request: Request) -> ProjectStore:
    return request.app.state.project_store
