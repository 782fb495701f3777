"""
Auth models.
Owns: Principal data structures.
"""

from uuid import UUID

from pydantic import BaseModel


class AuthenticatedUser(BaseModel):
    """The verified principal handed to protected routes."""
    id: UUID
    email: str | None = None
