"""Client-side record of who is logged in."""

from ghkeep.models.schemas import UserRead


class IdentityContext:
    """Holds the authenticated user, if any.

    Created empty at client startup and passed explicitly to whatever needs
    it. Only AuthFlow writes to it.
    """

    def __init__(self) -> None:
        self._user: UserRead | None = None

    @property
    def user(self) -> UserRead | None:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    def set(self, user: UserRead) -> None:
        self._user = user

    def clear(self) -> None:
        self._user = None

    def __repr__(self) -> str:
        email = self._user.email if self._user else None
        return f"<IdentityContext(user={email})>"
