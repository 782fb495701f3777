from .client import build_update, create_db_client, execute
from .models import (
    Note,
    NoteChanges,
    Project,
    ProjectChanges,
    Task,
    TaskChanges,
    User,
)
from .notes import NoteStore, SupabaseNoteStore, get_note_store
from .projects import ProjectStore, SupabaseProjectStore, get_project_store
from .tasks import SupabaseTaskStore, TaskStore, get_task_store
from .users import SupabaseUserStore, UserStore, get_user_store

__all__ = [
    "build_update",
    "create_db_client",
    "execute",
    "Note",
    "NoteChanges",
    "Project",
    "ProjectChanges",
    "Task",
    "TaskChanges",
    "User",
    "NoteStore",
    "ProjectStore",
    "TaskStore",
    "UserStore",
    "SupabaseNoteStore",
    "SupabaseProjectStore",
    "SupabaseTaskStore",
    "SupabaseUserStore",
    "get_note_store",
    "get_project_store",
    "get_task_store",
    "get_user_store",
]
