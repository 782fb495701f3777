"""
FastAPI Application Entry Point.
Owns: App factory, collaborator wiring, router mounting, middleware setup.

Run with:
    uvicorn app.api.main:create_app --factory
or the ``dev-journal-api`` console script.
"""

import logging

from fastapi import FastAPI
from supabase import Client

from app.api.auth import PasswordHasher, TokenService
from app.api.config import Settings, load_settings
from app.api.db import (
    SupabaseNoteStore,
    SupabaseProjectStore,
    SupabaseTaskStore,
    SupabaseUserStore,
    create_db_client,
)
from app.api.errors import register_exception_handlers
from app.api.middleware import CorrelationMiddleware, LoggingMiddleware
from app.api.routes import (
    health_router,
    notes_router,
    projects_router,
    tasks_router,
    users_router,
)
from shared.logging import configure_root_logger

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"
SERVICE_NAME = "journal-api"


def create_app(
    settings: Settings | None = None,
    db_client: Client | None = None,
) -> FastAPI:
    settings = settings or load_settings()
    db = db_client or create_db_client(settings)

    app = FastAPI(
        title="Dev Journal API",
        version="1.0.0",
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None if settings.is_production else "/redoc",
        openapi_url=None if settings.is_production else "/openapi.json",
    )

    # Built once, shared read-only by every request
    app.state.settings = settings
    app.state.token_service = TokenService(
        secret=settings.jwt_secret,
        ttl_seconds=settings.jwt_expiration_in_seconds,
    )
    app.state.password_hasher = PasswordHasher()
    app.state.user_store = SupabaseUserStore(db)
    app.state.project_store = SupabaseProjectStore(db)
    app.state.task_store = SupabaseTaskStore(db)
    app.state.note_store = SupabaseNoteStore(db)

    # Middleware (last added = outermost)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Exception handlers
    register_exception_handlers(app)

    # Routers
    app.include_router(health_router)
    app.include_router(users_router, prefix=API_PREFIX)
    app.include_router(projects_router, prefix=API_PREFIX)
    app.include_router(tasks_router, prefix=API_PREFIX)
    app.include_router(notes_router, prefix=API_PREFIX)

    return app


def run() -> None:
    import uvicorn

    settings = load_settings()
    configure_root_logger(SERVICE_NAME, settings.log_level)
    logger.info(
        "Starting HTTP server",
        extra={"extra": {"host": settings.public_host, "port": settings.api_port}},
    )
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.api_port, log_config=None)


if __name__ == "__main__":
    run()
