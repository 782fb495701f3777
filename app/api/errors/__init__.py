from .exceptions import (
    AppException,
    ConflictException,
    ForbiddenException,
    InternalException,
    InvalidInputException,
    NoFieldsToUpdateException,
    NotFoundException,
    StorageException,
)
from .handlers import register_exception_handlers

__all__ = [
    "AppException",
    "ConflictException",
    "ForbiddenException",
    "InternalException",
    "InvalidInputException",
    "NoFieldsToUpdateException",
    "NotFoundException",
    "StorageException",
    "register_exception_handlers",
]
