"""
Route models.
Owns: Request/response schemas for all routes.

Update requests mirror the stored partial entities: a missing field, an
empty string or a nil id leaves the column as it is.
"""

from uuid import UUID

from pydantic import EmailStr, Field, field_validator

from app.api.db.models import JournalModel


def _require_linked_project(v: UUID) -> UUID:
    if v.int == 0:
        raise ValueError("null linked project ID")
    return v


# =============================================================================
# User Models
# =============================================================================


class RegisterUserRequest(JournalModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=32)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        # bcrypt cannot hash NUL bytes
        if "\x00" in v:
            raise ValueError("password must not contain NUL characters")
        return v


class RegisterUserResponse(JournalModel):
    user_id: UUID = Field(alias="userID")


class LoginUserRequest(JournalModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class LoginUserResponse(JournalModel):
    token: str


# =============================================================================
# Project Models
# =============================================================================


class CreateProjectRequest(JournalModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    priority: str = Field(..., min_length=1, max_length=50)
    deadline: str = Field(..., min_length=1, max_length=50)


class CreateProjectResponse(JournalModel):
    project_id: UUID = Field(alias="projectID")


class UpdateProjectRequest(JournalModel):
    title: str | None = Field(default=None, max_length=255)
    description: str | None = None
    priority: str | None = Field(default=None, max_length=50)
    deadline: str | None = Field(default=None, max_length=50)


# =============================================================================
# Task Models
# =============================================================================


class CreateTaskRequest(JournalModel):
    linked_project_id: UUID = Field(..., alias="linkedProjectID")
    description: str = Field(..., min_length=1)
    completed: bool = False

    @field_validator("linked_project_id")
    @classmethod
    def validate_linked_project_id(cls, v: UUID) -> UUID:
        return _require_linked_project(v)


class CreateTaskResponse(JournalModel):
    task_id: UUID = Field(alias="taskID")


class UpdateTaskRequest(JournalModel):
    linked_project_id: UUID | None = Field(default=None, alias="linkedProjectID")
    description: str | None = None
    completed: bool | None = None


# =============================================================================
# Note Models
# =============================================================================


class CreateNoteRequest(JournalModel):
    linked_project_id: UUID = Field(..., alias="linkedProjectID")
    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    favorited: bool = False
    tags: list[str] = Field(default_factory=list)

    @field_validator("linked_project_id")
    @classmethod
    def validate_linked_project_id(cls, v: UUID) -> UUID:
        return _require_linked_project(v)


class CreateNoteResponse(JournalModel):
    note_id: UUID = Field(alias="noteID")


class UpdateNoteRequest(JournalModel):
    linked_project_id: UUID | None = Field(default=None, alias="linkedProjectID")
    title: str | None = Field(default=None, max_length=255)
    content: str | None = None
    favorited: bool | None = None
    tags: list[str] | None = None


# =============================================================================
# Shared
# =============================================================================


class AcknowledgedResponse(JournalModel):
    """Standard acknowledgement for updates and deletes."""
    acknowledged: bool = True
