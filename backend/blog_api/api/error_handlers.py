"""Error Handlers — global exception handlers for the Blog API.

Invariants:
    - BlogApiError → canonical envelope with error code, category, severity
    - RequestValidationError → 400 envelope with field-level details
    - StarletteHTTPException (unknown route, bad method) → envelope with its status
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Four-layer handler: domain, validation, HTTP, catch-all
    - 4xx logged at WARNING, 5xx at ERROR
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog_api.core.errors import BlogApiError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register Blog API domain/infrastructure error handler."""

    @app.exception_handler(BlogApiError)
    async def blog_api_error_handler(request: Request, exc: BlogApiError):
        """Handle all Blog API domain/infrastructure errors."""
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"BlogApiError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
                "status": exc.http_status,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_validation_error_response(exc),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register framework HTTP error handler (404 route, 405 method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Wrap framework HTTP errors in the envelope."""
        return JSONResponse(
            status_code=exc.status_code,
            content=_envelope(
                exc.status_code, str(exc.detail), "HTTP_ERROR", "http",
                ErrorSeverity.WARNING,
            ),
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_envelope(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "An unexpected error occurred",
                "INTERNAL_ERROR", "internal", ErrorSeverity.CRITICAL,
            ),
        )


def build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    body = _envelope(
        status.HTTP_400_BAD_REQUEST, "Invalid request data",
        "VALIDATION_ERROR", "validation", ErrorSeverity.ERROR,
    )
    body["error"]["details"] = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    return body


def _envelope(
    status_code: int, message: str, code: str, category: str,
    severity: ErrorSeverity,
) -> dict:
    return {
        "status": status_code,
        "success": False,
        "message": message,
        "data": None,
        "error": {
            "code": code,
            "category": category,
            "severity": severity.value,
        },
    }
