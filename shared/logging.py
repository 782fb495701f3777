"""
Structured logging for the Dev Journal API.

Every process configures the root logger once through
configure_root_logger(); modules then use the standard
logging.getLogger(__name__) and pass structured context via ``extra``.

Usage:
    logger = logging.getLogger(__name__)
    logger.info("Project created", extra={
        "user_id_hash": hash_user_id(str(user.id)),
        "correlation_id": correlation_id,
    })

NEVER LOG:
- Passwords or password hashes
- Tokens or the signing secret
- Email addresses
- Raw user ids (use hash_user_id())
- Note contents
"""

from __future__ import annotations

import hashlib
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

NOISY_LIBRARIES = ("httpx", "httpcore", "hpack", "urllib3", "asyncio", "passlib")


def hash_user_id(user_id: str) -> str:
    """
    Create anonymized user identifier.

    Returns first 16 characters of SHA-256 hash.
    """
    if not user_id:
        return "unknown"
    return hashlib.sha256(user_id.encode()).hexdigest()[:16]


class StructuredFormatter(logging.Formatter):
    """
    JSON formatter, one object per line:
    {
        "timestamp": "2026-01-30T14:23:45.123Z",
        "level": "INFO",
        "service": "journal-api",
        "logger": "app.api.routes.projects",
        "message": "Project created",
        ...allowed extra fields...
    }
    """

    ALLOWED_EXTRA_FIELDS = frozenset([
        "correlation_id",
        "user_id_hash",
        "project_id",
        "task_id",
        "note_id",
        "reason",
        "error_code",
        "http_method",
        "http_path",
        "http_status",
        "duration_ms",
        "extra",
    ])

    # Stripped even when a caller passes them
    BLOCKED_FIELDS = frozenset([
        "user_id",
        "email",
        "password",
        "password_hash",
        "token",
        "authorization",
        "secret",
        "jwt_secret",
        "content",
    ])

    def __init__(self, service: str):
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "service": self.service,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in self.ALLOWED_EXTRA_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                log_entry[field] = value

        for field in self.BLOCKED_FIELDS:
            if hasattr(record, field):
                log_entry["_pii_warning"] = f"Blocked field '{field}' was stripped"

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, separators=(",", ":"), ensure_ascii=False, default=str)


def configure_root_logger(service: str, level: str = "INFO") -> None:
    """
    Configure the root logger with structured formatting.

    Call this once at application startup.

    Args:
        service: Service identifier
        level: Log level string (DEBUG, INFO, WARNING, ERROR)
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredFormatter(service))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(numeric_level)

    for lib in NOISY_LIBRARIES:
        logging.getLogger(lib).setLevel(logging.WARNING)
