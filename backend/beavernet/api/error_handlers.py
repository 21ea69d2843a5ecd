"""Error Handlers - global exception handlers for the BeaverNet API.

Invariants:
    - BeaverNetError -> its own envelope and status, plus exc.headers
      (the Basic challenge on 401)
    - Framework HTTP errors (unknown route, wrong method) -> same envelope,
      status and headers kept (Allow on 405)
    - RequestValidationError -> 400 with field-level details
    - Exception (catch-all) -> 500, never leaks internal details
    - Log lines carry the authenticated username when there is one

Design Decisions:
    - Four layers, most specific first: domain, framework HTTP, validation, catch-all
    - Kept out of main.py so the app module only wires things together
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from beavernet.core.errors import BeaverNetError, ErrorSeverity

logger = logging.getLogger(__name__)

_HTTP_ERROR_CODES = {
    status.HTTP_404_NOT_FOUND: ("RESOURCE_NOT_FOUND", "resource_not_found"),
    status.HTTP_405_METHOD_NOT_ALLOWED: ("METHOD_NOT_ALLOWED", "validation"),
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _log_extra(request: Request, **fields) -> dict:
    identity = getattr(request.state, "identity", None)
    return {
        "path": request.url.path,
        "username": identity.username if identity else None,
        **fields,
    }


def _envelope(code: str, message: str, category: str, severity: ErrorSeverity) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category,
            "severity": severity.value,
        },
    }


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(BeaverNetError)
    async def beavernet_error_handler(request: Request, exc: BeaverNetError):
        """Handle all BeaverNet domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra=_log_extra(request, error_code=exc.code),
        )
        return JSONResponse(
            status_code=exc.http_status,
            content=exc.to_response(),
            headers=exc.headers or None,
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        code, category = _HTTP_ERROR_CODES.get(exc.status_code, ("HTTP_ERROR", "validation"))
        logger.warning(
            f"HTTP {exc.status_code} on {request.method} {request.url.path}",
            extra=_log_extra(request, error_code=code, status_code=exc.status_code),
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=_envelope(code, str(exc.detail), category, ErrorSeverity.WARNING),
            headers=getattr(exc, "headers", None),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra=_log_extra(request, error_code="VALIDATION_ERROR"),
        )
        body = _envelope(
            "VALIDATION_ERROR", "Invalid request data", "validation", ErrorSeverity.ERROR,
        )
        body["error"]["details"] = _field_details(exc)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=jsonable_encoder(body),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra=_log_extra(request, error_code="INTERNAL_ERROR"),
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_envelope(
                "INTERNAL_ERROR", "An unexpected error occurred", "internal",
                ErrorSeverity.CRITICAL,
            ),
        )


def _field_details(exc: RequestValidationError) -> list[dict]:
    """One entry per failing field, location joined with dots (body.priority)."""
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
