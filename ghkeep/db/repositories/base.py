"""Storage-agnostic user repository contract."""

from abc import ABC, abstractmethod

from ghkeep.models.user import User


class UserRepository(ABC):
    """Persistence for accounts keyed by email.

    Implementations raise StorageFailure when the backing store is
    unreachable or rejects a write. They never raise a duplicate-key error:
    `save` is an upsert on email.
    """

    @abstractmethod
    async def find_by_email(self, email: str) -> User | None:
        """Exact, case-sensitive lookup on the unique email."""

    @abstractmethod
    async def find_by_id(self, user_id: int) -> User | None:
        """Lookup by storage-assigned identifier."""

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert the user, or replace username/password/github_key of the
        record that already has this email. Returns the persisted record."""
