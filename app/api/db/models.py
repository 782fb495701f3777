"""
Entity models.
Owns: Stored entities and the partial entities used for updates.

Attribute names match column names; the JSON aliases keep the wire format
(``userID``, ``linkedProjectID``, ``dateCreated``...).
"""

from datetime import datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class JournalModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Users
# =============================================================================


class User(JournalModel):
    id: UUID = Field(default_factory=uuid4)
    first_name: str
    last_name: str
    email: str
    password_hash: str = Field(exclude=True, repr=False)


# =============================================================================
# Projects
# =============================================================================


class Project(JournalModel):
    id: UUID = Field(default_factory=uuid4)
    user_id: UUID = Field(alias="userID")
    title: str
    description: str
    priority: str
    deadline: str
    date_created: datetime | None = None
    last_edited: datetime | None = None


class ProjectChanges(JournalModel):
    title: str | None = None
    description: str | None = None
    priority: str | None = None
    deadline: str | None = None


# =============================================================================
# Tasks
# =============================================================================


class Task(JournalModel):
    id: UUID = Field(default_factory=uuid4)
    linked_project_id: UUID = Field(alias="linkedProjectID")
    description: str
    completed: bool = False


class TaskChanges(JournalModel):
    linked_project_id: UUID | None = Field(default=None, alias="linkedProjectID")
    description: str | None = None
    completed: bool | None = None


# =============================================================================
# Notes
# =============================================================================


class Note(JournalModel):
    id: UUID = Field(default_factory=uuid4)
    user_id: UUID = Field(alias="userID")
    linked_project_id: UUID = Field(alias="linkedProjectID")
    title: str
    content: str
    favorited: bool = False
    tags: list[str] = Field(default_factory=list)
    date_created: datetime | None = None
    last_edited: datetime | None = None


class NoteChanges(JournalModel):
    linked_project_id: UUID | None = Field(default=None, alias="linkedProjectID")
    title: str | None = None
    content: str | None = None
    favorited: bool | None = None
    tags: list[str] | None = None
