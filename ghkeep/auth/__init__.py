"""Authentication module."""

from ghkeep.auth.errors import (
    AuthError,
    InvalidCredentials,
    StorageFailure,
    ValidationFailure,
)
from ghkeep.auth.validators import (
    AuthMode,
    CredentialSubmission,
    check_field,
    validate_submission,
)

__all__ = [
    "AuthError",
    "AuthMode",
    "CredentialSubmission",
    "InvalidCredentials",
    "StorageFailure",
    "ValidationFailure",
    "check_field",
    "validate_submission",
]
