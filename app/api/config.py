"""
Configuration module.
Owns: Environment variables, settings validation.

Settings are built once by the app factory, parked on app.state and
handed to collaborators; nothing reads them from module state.
"""

import logging
from pathlib import Path

from fastapi import Request
from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Repository root (…/dev-journal)
BASE_DIR = Path(__file__).resolve().parents[2]

DEFAULT_JWT_SECRET = "not-so-secret-anymore?"
DEFAULT_JWT_EXPIRATION_SECONDS = 3600 * 24 * 7


class Settings(BaseSettings):
    # ======================
    # Supabase (Postgres)
    # ======================
    supabase_url: str = Field(..., alias="SUPABASE_URL")
    supabase_service_role_key: str = Field(..., alias="SUPABASE_SERVICE_ROLE_KEY")

    # ======================
    # Tokens
    # ======================
    jwt_secret: str = Field(
        default=DEFAULT_JWT_SECRET,
        alias="JWT_SECRET",
        min_length=1,
        description="HMAC signing key. The default must never be used in production.",
    )
    jwt_expiration_in_seconds: int = Field(
        default=DEFAULT_JWT_EXPIRATION_SECONDS,
        alias="JWT_EXPIRATION_IN_SECONDS",
        gt=0,
    )

    # ======================
    # Service
    # ======================
    service_env: str = Field(default="dev", alias="SERVICE_ENV")
    public_host: str = Field(default="http://localhost", alias="PUBLIC_HOST")
    api_port: int = Field(
        default=8080,
        validation_alias=AliasChoices("API_PORT", "PORT", "api_port"),
    )
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # ======================
    # Behaviour
    # ======================
    cascade_notes_on_project_delete: bool = Field(
        default=False,
        alias="CASCADE_NOTES_ON_PROJECT_DELETE",
        description="Also delete a project's notes when the project is deleted.",
    )

    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        return self.service_env == "prod"

    @property
    def uses_default_secret(self) -> bool:
        return self.jwt_secret == DEFAULT_JWT_SECRET

    @model_validator(mode="after")
    def _reject_default_secret_in_prod(self) -> "Settings":
        if self.is_production and self.uses_default_secret:
            raise ValueError("JWT_SECRET must be set in production")
        return self


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def load_settings() -> Settings:
    """Build settings from the environment and warn about unsafe defaults."""
    settings = Settings()
    if settings.uses_default_secret:
        logger.warning(
            "JWT_SECRET not set, using the built-in development secret",
            extra={"extra": {"service_env": settings.service_env}},
        )
    return settings
