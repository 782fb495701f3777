"""
Database client.
Owns: Supabase client instantiation, query execution and the partial update builder.
"""

import logging
from typing import Any, Mapping
from uuid import UUID

from postgrest.exceptions import APIError
from supabase import Client, create_client

from app.api.config import Settings
from app.api.errors import NoFieldsToUpdateException, StorageException

logger = logging.getLogger(__name__)

NIL_UUID = UUID(int=0)

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


def create_db_client(settings: Settings) -> Client:
    """Returns a Supabase client with the service role; ownership is enforced in queries."""
    return create_client(settings.supabase_url, settings.supabase_service_role_key)


def execute(query: Any, action: str) -> list[dict[str, Any]]:
    """
    Run a PostgREST builder and return its rows.

    An empty list is the "no rows" signal; store failures become
    StorageException.
    """
    try:
        result = query.execute()
    except APIError as e:
        logger.error(
            f"Failed to {action}",
            extra={"error_code": e.code, "extra": {"detail": e.message}},
        )
        raise StorageException(f"failed to {action}")
    return result.data or []


def is_supplied(value: Any) -> bool:
    """Empty strings, None and the nil UUID all mean "not supplied"."""
    if value is None or value == NIL_UUID:
        return False
    if isinstance(value, str) and value == "":
        return False
    return True


def build_update(fields: Mapping[str, Any]) -> dict[str, Any]:
    """
    Build the SET payload of a partial update.

    Only supplied columns are kept, so untouched columns keep their stored
    value. There is no way to reset a column to empty through this path.

    Raises:
        NoFieldsToUpdateException: nothing was supplied
    """
    update: dict[str, Any] = {}
    for column, value in fields.items():
        if not is_supplied(value):
            continue
        update[column] = str(value) if isinstance(value, UUID) else value

    if not update:
        raise NoFieldsToUpdateException("no fields to update")

    return update
