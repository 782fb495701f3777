"""
Exception handlers.
Owns: Mapping exceptions to HTTP responses.

Routes, dependencies and stores raise AppException subclasses. Request
validation failures are folded into InvalidInputException so every error
body is produced by AppException.to_dict().
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from .exceptions import AppException, InternalException, InvalidInputException

logger = logging.getLogger(__name__)


def _render(request: Request, exc: AppException) -> JSONResponse:
    logger.log(
        logging.ERROR if exc.is_server_error else logging.WARNING,
        exc.message,
        extra={
            "error_code": exc.error_code,
            "http_method": request.method,
            "http_path": request.url.path,
            "http_status": exc.status_code,
            "correlation_id": getattr(request.state, "correlation_id", None),
        },
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    return _render(request, exc)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Body fields use their wire (camelCase) names in loc
    errors = [
        {"field": ".".join(str(part) for part in e["loc"][1:]) or str(e["loc"][0]), "message": e["msg"]}
        for e in exc.errors()
    ]
    return _render(request, InvalidInputException(details={"errors": errors}))


async def pydantic_exception_handler(
    request: Request, exc: ValidationError
) -> JSONResponse:
    # A stored row that no longer parses into its entity model
    return _render(request, InternalException("stored data failed validation"))


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unhandled exception",
        extra={
            "http_path": request.url.path,
            "correlation_id": getattr(request.state, "correlation_id", None),
        },
    )
    return JSONResponse(status_code=500, content=InternalException().to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    handlers = {
        AppException: app_exception_handler,
        RequestValidationError: validation_exception_handler,
        ValidationError: pydantic_exception_handler,
        Exception: generic_exception_handler,
    }
    for exc_class, handler in handlers.items():
        app.add_exception_handler(exc_class, handler)
