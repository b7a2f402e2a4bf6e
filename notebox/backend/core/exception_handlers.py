"""
Error envelopes for NoteBox.

Every failure leaves the API as ``{success: false, data: null, error, metadata}``:

    RequestValidationError   400 VALIDATION_ERROR, one entry per field
    BusinessRuleError        400 BUSINESS_RULE_ERROR, kind in details
    DatabaseError            503 SYS_DATABASE_ERROR
    unmatched route          404 NOT_FOUND
    anything else            500 SYS_INTERNAL_ERROR, message withheld
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from notebox.backend.core.exceptions import (
    ApplicationError,
    BusinessRuleError,
    DatabaseError,
)
from notebox.backend.core.logging import get_logger
from notebox.backend.schemas.base import ErrorDetail, ErrorResponse, ResponseMetadata

logger = get_logger(__name__)

EXCEPTION_STATUS_MAP: dict[type[ApplicationError], int] = {
    BusinessRuleError: 400,
    DatabaseError: 503,
}


def _get_request_id(request: Request) -> str | None:
    """The middleware's id if it ran, else the caller's X-Request-ID."""
    request_id = getattr(request.state, "request_id", None)
    return request_id or request.headers.get("x-request-id")


def _status_for(exc: ApplicationError) -> int:
    """Nearest mapped base class wins; unmapped errors are 500."""
    return next(
        (EXCEPTION_STATUS_MAP[cls] for cls in type(exc).__mro__ if cls in EXCEPTION_STATUS_MAP),
        500,
    )


def _request_fields(request: Request) -> dict[str, str]:
    return {"method": request.method, "path": request.url.path}


def _envelope(request: Request, status_code: int, error: ErrorDetail) -> JSONResponse:
    body = ErrorResponse(
        error=error,
        metadata=ResponseMetadata(request_id=_get_request_id(request)),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def application_error_handler(request: Request, exc: ApplicationError) -> JSONResponse:
    """Business-rule failures carry their reason as message and their kind in details."""
    status_code = _status_for(exc)
    fields = {"code": exc.code, "status": status_code, **_request_fields(request)}

    if status_code >= 500:
        logger.error("Request failed", extra={**fields, "message": exc.message})
    else:
        logger.warning("Request rejected", extra={**fields, "message": exc.message})

    details = exc.details if isinstance(exc, BusinessRuleError) else None
    return _envelope(
        request,
        status_code,
        ErrorDetail(code=exc.code, message=exc.message, details=details),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ())),
            "message": err.get("msg", "Validation error"),
            "type": err.get("type", "unknown"),
        }
        for err in exc.errors()
    ]
    logger.warning(
        "Request body invalid",
        extra={"error_count": len(errors), **_request_fields(request)},
    )
    return _envelope(
        request,
        400,
        ErrorDetail(
            code="VALIDATION_ERROR",
            message="Validation failed",
            details={"validation_errors": errors},
        ),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        error = ErrorDetail(
            code="NOT_FOUND",
            message=f"Route {request.method} {request.url.path} not found",
        )
    else:
        error = ErrorDetail(code="HTTP_ERROR", message=str(exc.detail))

    logger.warning("HTTP error", extra={"status": exc.status_code, **_request_fields(request)})
    return _envelope(request, exc.status_code, error)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the traceback; the client only learns that something went wrong."""
    logger.exception(
        "Unhandled exception",
        extra={"exception_type": type(exc).__name__, **_request_fields(request)},
    )
    return _envelope(
        request,
        500,
        ErrorDetail(code="SYS_INTERNAL_ERROR", message="An unexpected error occurred"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApplicationError, application_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
