"""Error Handlers — global exception handlers for the Places API.

Invariants:
    - PlacesError → status from its category; structured envelope (strict) or legacy body
    - RequestValidationError → field-level error details
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Three-layer handler: domain (PlacesError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py (ADR: import fan-out < 10)
    - Legacy bodies are flat {"name", "message"} unless the error defines its own
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.api.status_mapping import error_status, is_legacy_mode
from app.core.errors import ErrorCategory, ErrorSeverity, PlacesError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_places_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_places_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(PlacesError)
    async def places_error_handler(request: Request, exc: PlacesError):
        """Handle all Places API domain/infrastructure errors."""
        log = logger.error if exc.severity == ErrorSeverity.CRITICAL else logger.warning
        log(
            f"PlacesError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        content = exc.to_legacy_response() if is_legacy_mode() else exc.to_response()
        return JSONResponse(
            status_code=error_status(exc.category), content=content,
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
            status_code=error_status(ErrorCategory.VALIDATION),
            content=_build_validation_error_response(exc),
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
        if is_legacy_mode():
            content = {
                "name": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
            }
        else:
            content = {
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": ErrorCategory.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            }
        return JSONResponse(
            status_code=error_status(ErrorCategory.INTERNAL), content=content,
        )


def _validation_details(exc: RequestValidationError) -> list[dict]:
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build validation error response for the active contract."""
    if is_legacy_mode():
        return {
            "name": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "details": _validation_details(exc),
        }
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": ErrorCategory.VALIDATION.value,
            "severity": ErrorSeverity.ERROR.value,
            "details": _validation_details(exc),
        },
    }
