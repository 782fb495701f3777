"""
Exception definitions.
Owns: Application-specific exception classes.

Each class fixes the status code and error_code clients see; the message is
per raise site. Responses have the shape
{"error_code": ..., "message": ..., "retryable": ..., **details}.
"""

from typing import Any


class AppException(Exception):
    error_code: str = "INTERNAL_ERROR"
    status_code: int = 500
    retryable: bool = False
    default_message: str = "internal error"

    def __init__(self, message: str | None = None, details: dict[str, Any] | None = None):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    @property
    def is_server_error(self) -> bool:
        return self.status_code >= 500

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "error_code": self.error_code,
            "message": self.message,
            "retryable": self.retryable,
        }
        body.update(self.details)
        return body


# Client errors

class InvalidInputException(AppException):
    """Malformed payload or path, or a reference to a project the caller cannot link to."""
    error_code = "INVALID_INPUT"
    status_code = 400
    default_message = "invalid payload"


class NoFieldsToUpdateException(InvalidInputException):
    error_code = "NO_FIELDS_TO_UPDATE"
    default_message = "no fields to update"


class ForbiddenException(AppException):
    error_code = "FORBIDDEN"
    status_code = 403
    default_message = "permission denied"


class NotFoundException(AppException):
    """Missing row, or a row owned by someone else."""
    error_code = "NOT_FOUND"
    status_code = 404
    default_message = "not found"


class ConflictException(AppException):
    error_code = "CONFLICT"
    status_code = 409
    default_message = "already exists"


# Server errors

class StorageException(AppException):
    """The store rejected or failed a query."""
    error_code = "STORAGE_ERROR"
    retryable = True
    default_message = "storage error"


class InternalException(AppException):
    """Server-side failure that a retry will not fix (hashing, signing, unhandled errors)."""
