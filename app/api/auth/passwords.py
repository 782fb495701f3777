"""
Password hashing.
Owns: One-way hashing and verification of user credentials.
"""

import logging

from passlib.context import CryptContext

logger = logging.getLogger(__name__)


class HashingError(Exception):
    """Raised when a digest cannot be produced."""


class PasswordHasher:
    """
    bcrypt via passlib, salted per hash at the library's default cost.

    verify() is total: a wrong password, a malformed digest and an internal
    failure all come back as False.
    """

    def __init__(self, context: CryptContext | None = None):
        self._context = context or CryptContext(schemes=["bcrypt"], deprecated="auto")

    def hash(self, plaintext: str) -> str:
        try:
            return self._context.hash(plaintext)
        except (ValueError, TypeError, RuntimeError) as e:
            raise HashingError("failed to hash password") from e

    def verify(self, digest: str, plaintext: str) -> bool:
        if not digest:
            return False
        try:
            return self._context.verify(plaintext, digest)
        except (ValueError, TypeError):
            # Unknown or malformed digest
            return False
        except Exception:
            logger.warning("Password verification failed internally", exc_info=True)
            return False
