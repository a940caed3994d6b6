"""Login/register form flow.

    IDLE -> SUBMITTING -> SUCCESS -> IDLE
                       -> FAILED  -> IDLE

One request in flight per flow: a submit while SUBMITTING is ignored.
Field rules are checked locally before any request is sent, with the same
validator the server uses.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from ghkeep.auth.validators import AuthMode, CredentialSubmission, validate_submission
from ghkeep.client.api import AuthApi
from ghkeep.client.errors import AuthRequestError, normalize_error_message
from ghkeep.client.identity import IdentityContext
from ghkeep.models.schemas import UserRead

logger = logging.getLogger(__name__)


class FlowState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class FlowResult:
    """Outcome of one submit."""

    user: UserRead | None = None
    error: str | None = None
    field_errors: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.user is not None


class AuthFlow:
    """Drives one login or register form.

    Args:
        api: Client for the auth endpoints
        identity: Updated with the returned user on success
        mode: LOGIN or REGISTER
        notify: Called with the display message when a request fails
        on_state_change: Called with every state the flow enters
    """

    def __init__(
        self,
        api: AuthApi,
        identity: IdentityContext,
        mode: AuthMode = AuthMode.LOGIN,
        *,
        notify: Callable[[str], None] | None = None,
        on_state_change: Callable[[FlowState], None] | None = None,
    ) -> None:
        self.api = api
        self.identity = identity
        self.mode = mode
        self._notify = notify
        self._on_state_change = on_state_change
        self._state = FlowState.IDLE

    @property
    def state(self) -> FlowState:
        return self._state

    @property
    def is_submitting(self) -> bool:
        return self._state is FlowState.SUBMITTING

    def _transition(self, state: FlowState) -> None:
        self._state = state
        if self._on_state_change is not None:
            self._on_state_change(state)

    async def submit(self, submission: CredentialSubmission) -> FlowResult | None:
        """Validate and send the submission.

        Returns:
            None if a submit is already in flight, otherwise the result.
        """
        if self.is_submitting:
            logger.debug(f"Ignoring {self.mode.value} submit while one is in flight")
            return None

        field_errors = validate_submission(submission, self.mode)
        if field_errors:
            return FlowResult(field_errors=field_errors)

        self._transition(FlowState.SUBMITTING)
        try:
            try:
                user = await self._send(submission)
            except AuthRequestError as e:
                message = normalize_error_message(e)
                self._transition(FlowState.FAILED)
                if self._notify is not None:
                    self._notify(message)
                return FlowResult(error=message, field_errors=e.field_errors)

            self.identity.set(user)
            self._transition(FlowState.SUCCESS)
            return FlowResult(user=user)
        finally:
            self._transition(FlowState.IDLE)

    async def _send(self, submission: CredentialSubmission) -> UserRead:
        if self.mode == AuthMode.REGISTER:
            return await self.api.register(
                username=submission.username or "",
                email=submission.email,
                password=submission.password,
                github_key=submission.github_key or "",
            )
        return await self.api.login(submission.email, submission.password)

    async def logout(self) -> None:
        """End the server session and forget the local identity."""
        try:
            await self.api.logout()
        finally:
            self.identity.clear()
