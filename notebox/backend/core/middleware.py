"""
Request context for NoteBox endpoints.

Every response carries X-Request-ID and X-Response-Time; the same id is
bound into structlog for the log lines of that request.
"""

import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from notebox.backend.core.logging import VALID_SOURCES, get_logger

logger = get_logger(__name__)


def _source_of(request: Request) -> str:
    """X-Frontend-ID, lowercased; anything unrecognised becomes "unknown"."""
    source = request.headers.get("X-Frontend-ID", "unknown").lower()
    return source if source in VALID_SOURCES else "unknown"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Populates ``request.state.request_id`` and ``request.state.source``.

    The caller's X-Request-ID is reused when present, otherwise a UUID4 is
    generated. structlog context is reset on entry and on exit so nothing
    leaks between requests served by the same task.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        source = _source_of(request)
        request.state.request_id = request_id
        request.state.source = source

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            source=source,
            method=request.method,
            path=request.url.path,
        )

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                "Request raised",
                extra={
                    "duration_ms": _ms_since(started),
                    "error_type": type(exc).__name__,
                },
            )
            raise
        else:
            duration_ms = _ms_since(started)
            response.headers["X-Request-ID"] = request_id
            response.headers["X-Response-Time"] = f"{duration_ms}ms"
            logger.debug(
                "Request served",
                extra={"status_code": response.status_code, "duration_ms": duration_ms},
            )
            return response
        finally:
            structlog.contextvars.clear_contextvars()


def _ms_since(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)
