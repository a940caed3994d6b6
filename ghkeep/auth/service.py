"""Login and registration orchestration.

The service is the only place failures are classified. It validates input,
talks to a UserRepository and returns a User or raises one of
ValidationFailure, InvalidCredentials or StorageFailure.
"""

import logging

from ghkeep.auth.errors import InvalidCredentials, ValidationFailure
from ghkeep.auth.validators import AuthMode, CredentialSubmission, validate_submission
from ghkeep.db.repositories.base import UserRepository
from ghkeep.models.user import User
from ghkeep.utils.logging import LogContext
from ghkeep.utils.secrets import mask_email

logger = logging.getLogger(__name__)


class AuthService:
    """Authenticates and registers accounts against a repository."""

    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    async def login(self, email: str, password: str) -> User:
        """Return the account matching email and password.

        Raises:
            ValidationFailure: email or password break a field rule
            InvalidCredentials: unknown email or wrong password
            StorageFailure: repository unavailable
        """
        log = LogContext(logger, op="login", email=mask_email(email or ""))

        submission = CredentialSubmission(email=email, password=password)
        errors = validate_submission(submission, AuthMode.LOGIN)
        if errors:
            log.info(f"Rejected invalid fields: {sorted(errors)}")
            raise ValidationFailure(errors)

        user = await self.repository.find_by_email(email)
        # Same failure for both cases so callers can't tell which emails exist
        if user is None or user.password != password:
            log.info("Invalid credentials")
            raise InvalidCredentials()

        log.debug(f"Authenticated user {user.id}")
        return user

    async def register(
        self,
        username: str,
        email: str,
        password: str,
        github_key: str,
    ) -> User:
        """Create the account, or overwrite the one already using this email.

        Raises:
            ValidationFailure: any of the four fields break a rule
            StorageFailure: repository unavailable
        """
        log = LogContext(logger, op="register", email=mask_email(email or ""))

        submission = CredentialSubmission(
            email=email,
            password=password,
            username=username,
            github_key=github_key,
        )
        errors = validate_submission(submission, AuthMode.REGISTER)
        if errors:
            log.info(f"Rejected invalid fields: {sorted(errors)}")
            raise ValidationFailure(errors)

        user = User(
            username=username,
            email=email,
            password=password,
            github_key=github_key,
        )
        saved = await self.repository.save(user)
        log.info(f"Saved user {saved.id}")
        return saved
