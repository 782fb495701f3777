from .dependencies import get_current_user, get_password_hasher, get_token_service
from .models import AuthenticatedUser
from .passwords import HashingError, PasswordHasher
from .tokens import AuthError, AuthErrorReason, SigningError, TokenService

__all__ = [
    "get_current_user",
    "get_password_hasher",
    "get_token_service",
    "AuthenticatedUser",
    "HashingError",
    "PasswordHasher",
    "AuthError",
    "AuthErrorReason",
    "SigningError",
    "TokenService",
]
