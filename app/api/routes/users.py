"""
User routes.
Owns: Registration and login.

Login failures answer 404 whether the email is unknown or the password is
wrong, so the two cannot be told apart.

bcrypt runs in the threadpool so a hash or verify never stalls other requests.
"""

import logging
from typing import Annotated
from uuid import uuid4

from fastapi import APIRouter, Depends, Request, status
from starlette.concurrency import run_in_threadpool

from app.api.auth import (
    HashingError,
    PasswordHasher,
    SigningError,
    TokenService,
    get_password_hasher,
    get_token_service,
)
from app.api.db import User, UserStore, get_user_store
from app.api.errors import ConflictException, InternalException, NotFoundException
from shared.logging import hash_user_id
from .models import (
    LoginUserRequest,
    LoginUserResponse,
    RegisterUserRequest,
    RegisterUserResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(tags=["users"])


@router.post(
    "/register",
    response_model=RegisterUserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: Request,
    body: RegisterUserRequest,
    users: Annotated[UserStore, Depends(get_user_store)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
) -> RegisterUserResponse:
    correlation_id = getattr(request.state, "correlation_id", None)

    try:
        users.get_by_email(body.email)
    except NotFoundException:
        pass
    else:
        raise ConflictException("user with this email already exists")

    try:
        password_hash = await run_in_threadpool(hasher.hash, body.password)
    except HashingError:
        logger.exception("Failed to hash password", extra={"correlation_id": correlation_id})
        raise InternalException("failed to register user")

    user = User(
        id=uuid4(),
        first_name=body.first_name,
        last_name=body.last_name,
        email=body.email,
        password_hash=password_hash,
    )
    # A concurrent registration can still lose the race; the store reports it as a conflict.
    users.create(user)

    logger.info(
        "User registered",
        extra={"user_id_hash": hash_user_id(str(user.id)), "correlation_id": correlation_id},
    )

    return RegisterUserResponse(user_id=user.id)


@router.post("/login", response_model=LoginUserResponse)
async def login(
    request: Request,
    body: LoginUserRequest,
    users: Annotated[UserStore, Depends(get_user_store)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> LoginUserResponse:
    correlation_id = getattr(request.state, "correlation_id", None)

    try:
        user = users.get_by_email(body.email)
    except NotFoundException:
        raise NotFoundException("user not found or invalid password")

    if not await run_in_threadpool(hasher.verify, user.password_hash, body.password):
        logger.info(
            "Login rejected",
            extra={
                "reason": "password_mismatch",
                "user_id_hash": hash_user_id(str(user.id)),
                "correlation_id": correlation_id,
            },
        )
        raise NotFoundException("user not found or invalid password")

    try:
        token = tokens.issue(user.id)
    except SigningError:
        logger.exception("Failed to sign token", extra={"correlation_id": correlation_id})
        raise InternalException("failed to create token")

    logger.info(
        "User logged in",
        extra={"user_id_hash": hash_user_id(str(user.id)), "correlation_id": correlation_id},
    )

    return LoginUserResponse(token=token)
