"""Authentication failure taxonomy.

Every failure the auth service produces is one of three kinds:

- ValidationFailure: one or more field rules were violated
- InvalidCredentials: unknown email or wrong password (never distinguished)
- StorageFailure: the backing store was unreachable or rejected the write

Each carries its own HTTP status and renders the shared error payload
(`{"message", "code", "errors"}`) consumed by the client.
"""

from typing import Any

from ghkeep.constants import (
    INVALID_CREDENTIALS_MESSAGE,
    STORAGE_FAILURE_MESSAGE,
    VALIDATION_FAILED_MESSAGE,
)


class AuthError(Exception):
    """Base class for classified authentication failures."""

    code = "AUTH_ERROR"
    http_status = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict[str, Any]:
        return {"message": self.message, "code": self.code, "errors": {}}


class ValidationFailure(AuthError):
    """Field-level rule violations, all reported at once."""

    code = "VALIDATION_FAILED"
    http_status = 422

    def __init__(self, errors: dict[str, str], message: str = VALIDATION_FAILED_MESSAGE) -> None:
        super().__init__(message)
        self.errors = dict(errors)

    def to_response(self) -> dict[str, Any]:
        return {"message": self.message, "code": self.code, "errors": self.errors}


class InvalidCredentials(AuthError):
    code = "INVALID_CREDENTIALS"
    http_status = 401

    def __init__(self, message: str = INVALID_CREDENTIALS_MESSAGE) -> None:
        super().__init__(message)


class StorageFailure(AuthError):
    code = "STORAGE_FAILURE"
    http_status = 503

    def __init__(self, message: str = STORAGE_FAILURE_MESSAGE) -> None:
        super().__init__(message)
