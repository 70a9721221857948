"""Error Handlers - map failures to the one JSON error envelope the UI reads.

Invariants:
    - Every error body is {"error": {code, message, category, severity, ...}}
    - BusinessWarningsError bodies come from its own to_response()
    - Bad request bodies and query strings -> 400 VALIDATION_ERROR with per-field details
    - Anything else -> 500 INTERNAL_ERROR; the exception text stays in the logs
    - Configuration/localization failures return an error, never a partial dialog

Design Decisions:
    - Domain, request-validation and catch-all handlers registered separately so
      FastAPI picks the most specific one
    - Log level follows the status: 4xx is the caller's problem (warning), 5xx ours (error)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from business_warnings.core.errors import (
    BusinessWarningsError, ErrorCategory, ErrorSeverity,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Attach the domain, validation and catch-all handlers to app."""
    app.add_exception_handler(BusinessWarningsError, _handle_domain_error)
    app.add_exception_handler(RequestValidationError, _handle_invalid_request)
    app.add_exception_handler(Exception, _handle_unexpected_error)


def _envelope(
    code: str, message: str, category: ErrorCategory, severity: ErrorSeverity,
    **fields,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            **fields,
        },
    }


async def _handle_domain_error(request: Request, exc: BusinessWarningsError):
    log = logger.error if exc.http_status >= 500 else logger.warning
    log(
        f"{exc.code}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "dialog_code": exc.context.dialog_code,
            "locale": exc.context.locale,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def _handle_invalid_request(request: Request, exc: RequestValidationError):
    details = [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]
    logger.warning(
        f"Rejected request with {len(details)} invalid field(s)",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR,
            details=details,
        ),
    )


async def _handle_unexpected_error(request: Request, exc: Exception):
    logger.error(
        f"Unhandled {type(exc).__name__}",
        exc_info=exc,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )
