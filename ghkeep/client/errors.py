"""Typed failures raised by the auth API client."""

from ghkeep.constants import AUTH_FAILED_MESSAGE


class AuthRequestError(Exception):
    """A login/register request that did not produce a user.

    Attributes:
        message: Generic message of the failure (transport error text, or
            "Request failed with status code N")
        server_message: `message` field of the server's error payload, if any
        status_code: HTTP status, None for transport failures
        field_errors: Per-field messages returned by the server
    """

    def __init__(
        self,
        message: str | None = None,
        *,
        server_message: str | None = None,
        status_code: int | None = None,
        field_errors: dict[str, str] | None = None,
    ) -> None:
        super().__init__(message or server_message or AUTH_FAILED_MESSAGE)
        self.message = message
        self.server_message = server_message
        self.status_code = status_code
        self.field_errors = dict(field_errors or {})


def normalize_error_message(error: Exception) -> str:
    """Collapse a failure into the single string shown to the user.

    Precedence: server-supplied message, then the failure's own message,
    then "Authentication failed".
    """
    if isinstance(error, AuthRequestError):
        return error.server_message or error.message or AUTH_FAILED_MESSAGE
    return str(error) or AUTH_FAILED_MESSAGE
