"""Client-side auth flow: API client, form state machine, identity state."""

from ghkeep.client.api import AuthApi
from ghkeep.client.errors import AuthRequestError, normalize_error_message
from ghkeep.client.flow import AuthFlow, FlowResult, FlowState
from ghkeep.client.identity import IdentityContext

__all__ = [
    "AuthApi",
    "AuthFlow",
    "AuthRequestError",
    "FlowResult",
    "FlowState",
    "IdentityContext",
    "normalize_error_message",
]
