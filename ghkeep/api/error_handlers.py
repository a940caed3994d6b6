"""Global exception handlers.

- AuthError -> its own status and `{"message", "code", "errors"}` payload
- RequestValidationError -> VALIDATION_FAILED with per-field messages
- HTTPException -> same payload, code derived from the status
- Exception (catch-all) -> 500, never leaks internal details
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ghkeep.auth.errors import AuthError, ValidationFailure
from ghkeep.models.schemas import LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)

# Wire aliases (githubKey) -> field names used by the credential validator
_FIELD_NAMES: dict[str, str] = {
    field.alias: name
    for model in (LoginRequest, RegisterRequest)
    for name, field in model.model_fields.items()
    if field.alias
}

_HTTP_CODES = {
    401: "NOT_AUTHENTICATED",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_auth_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_auth_error_handler(app: FastAPI) -> None:

    @app.exception_handler(AuthError)
    async def auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
        logger.warning(f"{exc.code} on {request.url.path}: {exc.message}")
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ) -> JSONResponse:
        logger.warning(f"Malformed request on {request.url.path}: {exc.errors()}")
        failure = ValidationFailure(_field_errors(exc))
        return JSONResponse(status_code=failure.http_status, content=failure.to_response())


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "message": str(exc.detail),
                "code": _HTTP_CODES.get(exc.status_code, "HTTP_ERROR"),
                "errors": {},
            },
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all - never leaks internal details."""
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"message": "An unexpected error occurred", "code": "INTERNAL_ERROR", "errors": {}},
        )


def _field_errors(exc: RequestValidationError) -> dict[str, str]:
    """First message per field, keyed by the validator's field name."""
    errors: dict[str, str] = {}
    for error in exc.errors():
        loc = error.get("loc") or ("body",)
        key = str(loc[-1])
        errors.setdefault(_FIELD_NAMES.get(key, key), error["msg"])
    return errors
