"""
Note store.
Owns: Notes table. Notes carry their owner's id and queries are scoped by it.
"""

from typing import Protocol
from uuid import UUID

from fastapi import Request
from supabase import Client

from app.api.errors import NotFoundException
from .client import build_update, execute
from .models import Note, NoteChanges

NOTE_COLUMNS = (
    "id, user_id, linked_project_id, title, content, favorited, tags, date_created, last_edited"
)


class NoteStore(Protocol):
    def create(self, note: Note) -> UUID: ...

    def get_all_by_project(self, project_id: UUID, user_id: UUID) -> list[Note]: ...

    def get_by_id(self, note_id: UUID, user_id: UUID) -> Note: ...

    def update_by_id(self, changes: NoteChanges, note_id: UUID, user_id: UUID) -> None: ...

    def delete_by_id(self, note_id: UUID, user_id: UUID) -> None: ...

    def delete_all_by_project(self, project_id: UUID) -> None: ...


class SupabaseNoteStore:
    table = "notes"

    def __init__(self, client: Client):
        self._db = client

    def create(self, note: Note) -> UUID:
        row = {
            "id": str(note.id),
            "user_id": str(note.user_id),
            "linked_project_id": str(note.linked_project_id),
            "title": note.title,
            "content": note.content,
            "favorited": note.favorited,
            "tags": list(note.tags),
        }
        execute(self._db.table(self.table).insert(row), "create note")
        return note.id

    def get_all_by_project(self, project_id: UUID, user_id: UUID) -> list[Note]:
        rows = execute(
            self._db.table(self.table)
            .select(NOTE_COLUMNS)
            .eq("linked_project_id", str(project_id))
            .eq("user_id", str(user_id)),
            "get notes by linked project ID",
        )
        return [Note.model_validate(row) for row in rows]

    def get_by_id(self, note_id: UUID, user_id: UUID) -> Note:
        rows = execute(
            self._db.table(self.table)
            .select(NOTE_COLUMNS)
            .eq("id", str(note_id))
            .eq("user_id", str(user_id))
            .limit(1),
            "get note by ID",
        )
        if not rows:
            raise NotFoundException("note not found")
        return Note.model_validate(rows[0])

    def update_by_id(self, changes: NoteChanges, note_id: UUID, user_id: UUID) -> None:
        data = build_update(changes.model_dump())
        execute(
            self._db.table(self.table)
            .update(data)
            .eq("id", str(note_id))
            .eq("user_id", str(user_id)),
            "update note",
        )

    def delete_by_id(self, note_id: UUID, user_id: UUID) -> None:
        execute(
            self._db.table(self.table)
            .delete()
            .eq("id", str(note_id))
            .eq("user_id", str(user_id)),
            "delete note",
        )

    def delete_all_by_project(self, project_id: UUID) -> None:
        execute(
            self._db.table(self.table).delete().eq("linked_project_id", str(project_id)),
            "delete notes by linked project ID",
        )


def get_note_store(request: Request) -> NoteStore:
    return request.app.state.note_store
