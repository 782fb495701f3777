"""
Logging middleware.
Owns: Structured request/response logging.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from shared.logging import hash_user_id

logger = logging.getLogger(__name__)

QUIET_PATHS = frozenset({"/health"})


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in QUIET_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        # Set by the auth dependency once the principal is resolved
        user_id = getattr(request.state, "user_id", None)

        logger.info(
            "Request completed",
            extra={
                "correlation_id": getattr(request.state, "correlation_id", None),
                "user_id_hash": hash_user_id(str(user_id)) if user_id else None,
                "http_method": request.method,
                "http_path": request.url.path,
                "http_status": response.status_code,
                "duration_ms": round(duration_ms, 2),
            },
        )

        return response
