"""
Auth dependencies.
Owns: Token verification and principal resolution for protected routes.

get_current_user runs before the route body. Every failure (missing header,
bad or expired token, user gone) produces the same 403, so clients cannot
tell the causes apart; the reason is only logged.
"""

import logging
from typing import Annotated

from fastapi import Depends, Header, Request

from app.api.db import UserStore, get_user_store
from app.api.errors import AppException, ForbiddenException
from shared.logging import hash_user_id
from .models import AuthenticatedUser
from .passwords import PasswordHasher
from .tokens import AuthError, TokenService

logger = logging.getLogger(__name__)


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def _permission_denied() -> ForbiddenException:
    return ForbiddenException("permission denied")


async def get_current_user(
    request: Request,
    tokens: Annotated[TokenService, Depends(get_token_service)],
    users: Annotated[UserStore, Depends(get_user_store)],
    authorization: Annotated[str | None, Header()] = None,
) -> AuthenticatedUser:
    correlation_id = getattr(request.state, "correlation_id", None)

    # The header value is the token itself, no scheme prefix.
    token = (authorization or "").strip()
    if not token:
        logger.warning(
            "Missing authorization header",
            extra={"reason": "missing", "correlation_id": correlation_id},
        )
        raise _permission_denied()

    try:
        user_id = tokens.verify(token)
    except AuthError as e:
        logger.warning(
            "Token rejected",
            extra={"reason": e.reason.value, "correlation_id": correlation_id},
        )
        raise _permission_denied()

    # Re-resolve so deleted accounts lose access before their token expires.
    try:
        user = users.get_by_id(user_id)
    except AppException as e:
        logger.warning(
            "Token principal could not be resolved",
            extra={
                "reason": e.error_code.lower(),
                "user_id_hash": hash_user_id(str(user_id)),
                "correlation_id": correlation_id,
            },
        )
        raise _permission_denied()

    request.state.user_id = user.id

    return AuthenticatedUser(id=user.id, email=user.email)
