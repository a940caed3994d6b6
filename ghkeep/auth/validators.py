"""Credential validation rules.

The same rules run on the client before a request is sent and on the server
before anything reaches the repository.
"""

import re
from dataclasses import dataclass
from enum import Enum

from ghkeep.constants import (
    EMAIL_PATTERN,
    GITHUB_KEY_MAX_LENGTH,
    GITHUB_KEY_MIN_LENGTH,
    PASSWORD_MAX_LENGTH,
    PASSWORD_MIN_LENGTH,
    USERNAME_MAX_LENGTH,
    USERNAME_MIN_LENGTH,
)

_EMAIL_RE = re.compile(EMAIL_PATTERN)


class AuthMode(str, Enum):
    """Which operation a submission is meant for."""

    LOGIN = "login"
    REGISTER = "register"


@dataclass(frozen=True)
class CredentialSubmission:
    """Raw fields entered for one login or register attempt."""

    email: str
    password: str
    username: str | None = None
    github_key: str | None = None


@dataclass(frozen=True)
class _LengthRule:
    required_message: str
    min_length: int
    max_length: int


_LENGTH_RULES: dict[str, _LengthRule] = {
    "password": _LengthRule("Password is required", PASSWORD_MIN_LENGTH, PASSWORD_MAX_LENGTH),
    "username": _LengthRule("Username is required", USERNAME_MIN_LENGTH, USERNAME_MAX_LENGTH),
    "github_key": _LengthRule("GitHub key is required", GITHUB_KEY_MIN_LENGTH, GITHUB_KEY_MAX_LENGTH),
}

LOGIN_FIELDS = ("email", "password")
REGISTER_FIELDS = ("username", "github_key", "email", "password")

# A stored password is whatever was registered; at login only its presence is
# checked, so a wrong guess of any length is reported as invalid credentials.
_LOGIN_PRESENCE_ONLY = frozenset({"password"})


def check_field(field: str, value: str | None) -> str | None:
    """Check a single field against its rules.

    Args:
        field: One of "email", "password", "username", "github_key"
        value: Raw user input (None counts as missing)

    Returns:
        None if the value is valid, otherwise the first rule violation.

    Raises:
        ValueError: If the field name is unknown.
    """
    if field == "email":
        if not value:
            return "Email is required"
        if not _EMAIL_RE.fullmatch(value):
            return "Invalid email"
        return None

    rule = _LENGTH_RULES.get(field)
    if rule is None:
        raise ValueError(f"Unknown credential field: {field}")

    if not value:
        return rule.required_message
    if len(value) < rule.min_length:
        return f"Min {rule.min_length} characters"
    if len(value) > rule.max_length:
        return f"Max {rule.max_length} characters"
    return None


def validate_submission(
    submission: CredentialSubmission,
    mode: AuthMode = AuthMode.LOGIN,
) -> dict[str, str]:
    """Collect every rule violation for the fields relevant to `mode`.

    Returns:
        Mapping of field name to message; empty when the submission is valid.
    """
    is_register = mode == AuthMode.REGISTER
    fields = REGISTER_FIELDS if is_register else LOGIN_FIELDS
    errors: dict[str, str] = {}
    for field in fields:
        value = getattr(submission, field)
        if not is_register and field in _LOGIN_PRESENCE_ONLY:
            message = None if value else _LENGTH_RULES[field].required_message
        else:
            message = check_field(field, value)
        if message is not None:
            errors[field] = message
    return errors
