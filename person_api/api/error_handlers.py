"""Error Handlers — global exception handlers for the Person API.

Invariants:
    - PersonApiError → envelope with the error's public message and status
    - RequestValidationError → 400 envelope, "Required fields are not supplied"
    - Exception (catch-all) → 500 envelope, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (PersonApiError), validation (Pydantic), catch-all (Exception)
    - Field-level validation details go to the log, not to the client
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from person_api.core.errors import (
    GENERIC_ERROR_MESSAGE, ErrorSeverity, PersonApiError, RequiredFieldsError,
)
from person_api.schemas.envelope import envelope_response

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register Person API domain/infrastructure error handler."""

    @app.exception_handler(PersonApiError)
    async def person_api_error_handler(request: Request, exc: PersonApiError):
        """Handle all Person API domain/infrastructure errors."""
        level = (
            logging.INFO if exc.severity == ErrorSeverity.INFO
            else logging.ERROR
        )
        logger.log(
            level,
            f"PersonApiError: {exc.message}",
            extra={**exc.log_extra(), "path": request.url.path},
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
        error = RequiredFieldsError("; ".join(_summarize(exc)))
        logger.warning(
            f"Validation error on {request.url.path}: {error.message}",
            extra={**error.log_extra(), "path": request.url.path},
        )
        return JSONResponse(
            status_code=error.http_status, content=error.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return envelope_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, False, None,
            GENERIC_ERROR_MESSAGE,
        )


def _summarize(exc: RequestValidationError) -> list[str]:
    """field: message pairs for the log line."""
    return [
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    ]
