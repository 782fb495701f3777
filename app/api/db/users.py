"""
User store.
Owns: Credential records (users table).
"""

import logging
from typing import Protocol
from uuid import UUID

from fastapi import Request
from postgrest.exceptions import APIError
from supabase import Client

from app.api.errors import ConflictException, NotFoundException, StorageException
from .client import UNIQUE_VIOLATION, execute
from .models import User

logger = logging.getLogger(__name__)

USER_COLUMNS = "id, first_name, last_name, email, password_hash"


class UserStore(Protocol):
    def create(self, user: User) -> None: ...

    def get_by_email(self, email: str) -> User: ...

    def get_by_id(self, user_id: UUID) -> User: ...


class SupabaseUserStore:
    table = "users"

    def __init__(self, client: Client):
        self._db = client

    def create(self, user: User) -> None:
        row = {
            "id": str(user.id),
            "first_name": user.first_name,
            "last_name": user.last_name,
            "email": user.email,
            "password_hash": user.password_hash,
        }
        try:
            self._db.table(self.table).insert(row).execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise ConflictException("user with this email already exists")
            logger.error("Failed to create user", extra={"error_code": e.code})
            raise StorageException("failed to create user")

    def get_by_email(self, email: str) -> User:
        rows = execute(
            self._db.table(self.table).select(USER_COLUMNS).eq("email", email).limit(1),
            "get user by email",
        )
        if not rows:
            raise NotFoundException("user not found")
        return User.model_validate(rows[0])

    def get_by_id(self, user_id: UUID) -> User:
        rows = execute(
            self._db.table(self.table).select(USER_COLUMNS).eq("id", str(user_id)).limit(1),
            "get user by ID",
        )
        if not rows:
            raise NotFoundException("user not found")
        return User.model_validate(rows[0])


def get_user_store(request: Request) -> UserStore:
    return request.app.state.user_store
